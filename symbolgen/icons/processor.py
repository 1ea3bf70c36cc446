"""Icon directory processor — source tree → list of Icons.

Expected layout (one directory per icon, one sub-directory per theme, one
file per variant):

    alarm/                              icon name
        materialsymbolsoutlined/        theme
            alarm_24px.xml              variant
            alarm_fill1_24px.xml
            alarm_grad200_24px.xml
            alarm_wght300gradN25fill1_24px.xml
        materialsymbolsrounded/
        materialsymbolssharp/
    album/
    book/

Theme-linked attributes are stripped from the XML, and every theme must hold
the same set of icons or the whole run fails.
"""

from __future__ import annotations

import logging
import re
from collections import defaultdict
from pathlib import Path

from symbolgen.config import settings
from symbolgen.errors import IncompleteThemeError, MissingThemeError
from symbolgen.icons.icon import Icon, to_kotlin_property_name
from symbolgen.variance.grade import Grade
from symbolgen.variance.theme import IconTheme, to_icon_theme
from symbolgen.variance.variance import Variance
from symbolgen.variance.weight import Weight

logger = logging.getLogger(__name__)

FILLED_INDICATOR = "fill1"

# A line setting the tint to the theme's control color, with its leading newline
_TINT_LINE_RE = re.compile(
    r"\n.*?" + re.escape('android:tint="?attr/colorControlNormal"'),
    re.MULTILINE,
)
_AUTO_MIRRORED_ATTR = 'android:autoMirrored="true"'
_WHITE = "@android:color/white"
_BLACK = "@android:color/black"


class IconProcessor:
    """Processes every directory in ``icon_directories`` into Icons."""

    def __init__(self, icon_directories: list[Path], size_marker: str | None = None) -> None:
        self.icon_directories = [Path(d) for d in icon_directories]
        self.size_marker = size_marker or settings.size_marker

    def process(self) -> list[Icon]:
        icons = self._load_icons()
        ensure_icons_exist_in_all_themes(icons)
        logger.info("Processed %d icon variants from %d directories", len(icons), len(self.icon_directories))
        return icons

    def _load_icons(self) -> list[Icon]:
        icons: list[Icon] = []
        for icon_dir in sorted(self.icon_directories):
            icons.extend(self._load_icon_directory(icon_dir))
        return icons

    def _load_icon_directory(self, icon_dir: Path) -> list[Icon]:
        icon_name = icon_dir.name
        kotlin_name = to_kotlin_property_name(icon_name)
        icons: list[Icon] = []

        theme_dirs = sorted(p for p in icon_dir.iterdir() if p.is_dir())
        for theme_dir in theme_dirs:
            theme = to_icon_theme(theme_dir.name)
            variants = sorted(
                p for p in theme_dir.iterdir() if not p.is_dir() and self.size_marker in p.name
            )
            for file in variants:
                variations = _variations_string(file.name, icon_name)
                file_content = file.read_text(encoding="utf-8")
                icons.append(
                    Icon(
                        kotlin_name=kotlin_name,
                        file_content=process_xml_file(file_content),
                        auto_mirrored=is_auto_mirrored(file_content),
                        variance=Variance(
                            theme=theme,
                            weight=Weight.extract_from_string(variations),
                            grade=Grade.extract_from_string(variations),
                            is_filled=FILLED_INDICATOR in variations,
                        ),
                    )
                )

        logger.debug("Loaded %d variants for %s", len(icons), icon_name)
        return icons


def _variations_string(file_name: str, icon_name: str) -> str:
    """``alarm_wght300fill1_24px.xml`` -> ``_wght300fill1_24px``."""
    if file_name.startswith(icon_name):
        file_name = file_name[len(icon_name):]
    stem, dot, _ = file_name.rpartition(".")
    return stem if dot else file_name


def process_xml_file(file_content: str) -> str:
    """Remove theme tint attributes and turn the default white fill black."""
    return _TINT_LINE_RE.sub("", file_content).replace(_WHITE, _BLACK)


def is_auto_mirrored(file_content: str) -> bool:
    return _AUTO_MIRRORED_ATTR in file_content


def ensure_icons_exist_in_all_themes(icons: list[Icon]) -> None:
    """Raise unless every theme is present and holds the same icon names."""
    grouped: dict[IconTheme, list[Icon]] = defaultdict(list)
    for icon in icons:
        grouped[icon.variance.theme].append(icon)

    missing = [theme.name for theme in IconTheme if theme not in grouped]
    if missing:
        raise MissingThemeError(f"Some themes were missing from the generated icons: {missing}")

    expected_names = [
        sorted(icon.kotlin_name for icon in theme_icons) for theme_icons in grouped.values()
    ]
    expected = expected_names[0]
    for actual in expected_names:
        if actual != expected:
            raise IncompleteThemeError(actual, expected)
