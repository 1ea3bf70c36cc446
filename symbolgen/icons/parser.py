"""Icon XML parser — streams a vector drawable into a Vector.

The source files are flat: one <vector> root holding <path> elements and at
most one <group>. A group, once opened, collects every following path until
the end of the document. <clip-path> is recognised and dropped.
"""

from __future__ import annotations

import io
import logging
import math
import re

from lxml import etree

from symbolgen.errors import IconParseError, PathParseError
from symbolgen.icons.icon import Icon
from symbolgen.vector.model import FillType, Group, Path, Vector, VectorNode
from symbolgen.vector.path_builder import to_svg_path
from symbolgen.vector.path_parser import parse_path_string, to_path_string

logger = logging.getLogger(__name__)

ANDROID_NS = "http://schemas.android.com/apk/res/android"

# Tag names
VECTOR = "vector"
CLIP_PATH = "clip-path"
GROUP = "group"
PATH = "path"

# Attribute names
AUTO_MIRRORED = f"{{{ANDROID_NS}}}autoMirrored"
VIEWPORT_WIDTH = f"{{{ANDROID_NS}}}viewportWidth"
VIEWPORT_HEIGHT = f"{{{ANDROID_NS}}}viewportHeight"
PATH_DATA = f"{{{ANDROID_NS}}}pathData"
FILL_ALPHA = f"{{{ANDROID_NS}}}fillAlpha"
STROKE_ALPHA = f"{{{ANDROID_NS}}}strokeAlpha"
FILL_TYPE = f"{{{ANDROID_NS}}}fillType"

# Plain decimal or exponent notation; no "inf", "nan" or digit separators
_FLOAT_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


class IconParser:
    """Converts an Icon's XML into a Vector."""

    def __init__(self, icon: Icon) -> None:
        self.icon = icon

    def parse(self) -> Vector:
        source = io.BytesIO(self.icon.file_content.encode("utf-8"))
        events = etree.iterparse(source, events=("start",), remove_comments=True)

        nodes: list[VectorNode] = []
        auto_mirrored = False
        viewport_width: float | None = None
        viewport_height: float | None = None
        current_group: Group | None = None
        seen_root = False

        try:
            for _, element in events:
                tag = etree.QName(element).localname

                if not seen_root:
                    if tag != VECTOR:
                        raise IconParseError(
                            f"{self.icon.kotlin_name}: the start tag must be <vector>, found <{tag}>"
                        )
                    seen_root = True
                    auto_mirrored = _value_as_boolean(element, AUTO_MIRRORED)
                    viewport_width = _value_as_float(element, VIEWPORT_WIDTH)
                    viewport_height = _value_as_float(element, VIEWPORT_HEIGHT)

                elif tag == PATH:
                    path = Path(
                        nodes=parse_path_string(element.get(PATH_DATA)),
                        fill_alpha=_value_as_float(element, FILL_ALPHA, 1.0),
                        stroke_alpha=_value_as_float(element, STROKE_ALPHA, 1.0),
                        fill_type=FillType.from_attribute(element.get(FILL_TYPE)),
                    )
                    if current_group is not None:
                        current_group.paths.append(path)
                    else:
                        nodes.append(path)

                elif tag == GROUP:
                    if current_group is not None:
                        logger.debug("%s: new <group> replaces the open one", self.icon.kotlin_name)
                    current_group = Group()
                    nodes.append(current_group)

                elif tag == CLIP_PATH:
                    logger.debug("%s: <clip-path> is not supported, skipping", self.icon.kotlin_name)

        except etree.XMLSyntaxError as e:
            raise IconParseError(f"{self.icon.kotlin_name}: malformed XML: {e}") from e
        except PathParseError as e:
            raise IconParseError(f"{self.icon.kotlin_name}: {e}") from e

        if not seen_root:
            raise IconParseError(f"{self.icon.kotlin_name}: no start tag found")

        vector = Vector(
            auto_mirrored=auto_mirrored,
            viewport_width=viewport_width,
            viewport_height=viewport_height,
            nodes=nodes,
        )
        if logger.isEnabledFor(logging.DEBUG):
            self._log_paths(vector)
        return vector

    def _log_paths(self, vector: Vector) -> None:
        """Debug dump of every path as normalized path data and its bounding box."""
        for index, path in enumerate(vector.paths):
            geometry = to_svg_path(path.nodes)
            bbox = geometry.bbox() if len(geometry) else None
            logger.debug(
                "%s path %d: %s bbox=%s",
                self.icon.kotlin_name, index, to_path_string(path.nodes), bbox,
            )


def _value_as_float(element, name: str, default: float | None = None) -> float | None:
    """Float value of attribute ``name``, or ``default`` when absent or unparsable."""
    value = element.get(name)
    if value is None:
        return default
    value = value.strip()
    if _FLOAT_RE.fullmatch(value) is None:
        return default
    number = float(value)
    return number if math.isfinite(number) else default


def _value_as_boolean(element, name: str) -> bool:
    value = element.get(name)
    return value is not None and value.strip().lower() == "true"
