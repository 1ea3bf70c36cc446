"""Path data parser — SVG / Android ``pathData`` string → typed PathNodes.

Relative and absolute commands are kept apart (``m`` stays a RelativeMoveTo)
so the generated code replays exactly what the source file describes.
Implicit repetition is expanded: ``M0 0 10 10`` yields a MoveTo followed by a
LineTo, and ``l1 1 2 2`` yields two RelativeLineTo nodes.
"""

from __future__ import annotations

import logging
import re
from dataclasses import astuple, dataclass
from typing import TYPE_CHECKING, ClassVar

from symbolgen.errors import PathParseError
from symbolgen.utils.literals import kotlin_boolean, kotlin_float, svg_number

if TYPE_CHECKING:
    from symbolgen.vector.path_builder import PathBuilder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathNode:
    """One drawing command with its numeric operands."""

    # SVG command letter
    command: ClassVar[str] = ""
    # Compose PathBuilder function called by generated code
    function_name: ClassVar[str] = ""
    # Equivalent PathBuilder method on this side
    builder_method: ClassVar[str] = ""

    @property
    def operands(self) -> tuple:
        return astuple(self)

    @property
    def is_relative(self) -> bool:
        return self.command.islower()

    def as_function_call(self) -> str:
        args = ", ".join(_kotlin_operand(v) for v in self.operands)
        return f"{self.function_name}({args})"

    def apply(self, builder: PathBuilder) -> None:
        getattr(builder, self.builder_method)(*self.operands)

    def to_svg(self) -> str:
        args = " ".join(_svg_operand(v) for v in self.operands)
        return f"{self.command}{args}" if args else self.command


def _kotlin_operand(value: float | bool) -> str:
    if isinstance(value, bool):
        return kotlin_boolean(value)
    return kotlin_float(value)


def _svg_operand(value: float | bool) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return svg_number(value)


@dataclass(frozen=True)
class Close(PathNode):
    command: ClassVar[str] = "Z"
    function_name: ClassVar[str] = "close"
    builder_method: ClassVar[str] = "close"


@dataclass(frozen=True)
class MoveTo(PathNode):
    x: float
    y: float
    command: ClassVar[str] = "M"
    function_name: ClassVar[str] = "moveTo"
    builder_method: ClassVar[str] = "move_to"


@dataclass(frozen=True)
class RelativeMoveTo(PathNode):
    dx: float
    dy: float
    command: ClassVar[str] = "m"
    function_name: ClassVar[str] = "moveToRelative"
    builder_method: ClassVar[str] = "move_to_relative"


@dataclass(frozen=True)
class LineTo(PathNode):
    x: float
    y: float
    command: ClassVar[str] = "L"
    function_name: ClassVar[str] = "lineTo"
    builder_method: ClassVar[str] = "line_to"


@dataclass(frozen=True)
class RelativeLineTo(PathNode):
    dx: float
    dy: float
    command: ClassVar[str] = "l"
    function_name: ClassVar[str] = "lineToRelative"
    builder_method: ClassVar[str] = "line_to_relative"


@dataclass(frozen=True)
class HorizontalTo(PathNode):
    x: float
    command: ClassVar[str] = "H"
    function_name: ClassVar[str] = "horizontalLineTo"
    builder_method: ClassVar[str] = "horizontal_line_to"


@dataclass(frozen=True)
class RelativeHorizontalTo(PathNode):
    dx: float
    command: ClassVar[str] = "h"
    function_name: ClassVar[str] = "horizontalLineToRelative"
    builder_method: ClassVar[str] = "horizontal_line_to_relative"


@dataclass(frozen=True)
class VerticalTo(PathNode):
    y: float
    command: ClassVar[str] = "V"
    function_name: ClassVar[str] = "verticalLineTo"
    builder_method: ClassVar[str] = "vertical_line_to"


@dataclass(frozen=True)
class RelativeVerticalTo(PathNode):
    dy: float
    command: ClassVar[str] = "v"
    function_name: ClassVar[str] = "verticalLineToRelative"
    builder_method: ClassVar[str] = "vertical_line_to_relative"


@dataclass(frozen=True)
class CurveTo(PathNode):
    x1: float
    y1: float
    x2: float
    y2: float
    x3: float
    y3: float
    command: ClassVar[str] = "C"
    function_name: ClassVar[str] = "curveTo"
    builder_method: ClassVar[str] = "curve_to"


@dataclass(frozen=True)
class RelativeCurveTo(PathNode):
    dx1: float
    dy1: float
    dx2: float
    dy2: float
    dx3: float
    dy3: float
    command: ClassVar[str] = "c"
    function_name: ClassVar[str] = "curveToRelative"
    builder_method: ClassVar[str] = "curve_to_relative"


@dataclass(frozen=True)
class ReflectiveCurveTo(PathNode):
    x1: float
    y1: float
    x2: float
    y2: float
    command: ClassVar[str] = "S"
    function_name: ClassVar[str] = "reflectiveCurveTo"
    builder_method: ClassVar[str] = "reflective_curve_to"


@dataclass(frozen=True)
class RelativeReflectiveCurveTo(PathNode):
    dx1: float
    dy1: float
    dx2: float
    dy2: float
    command: ClassVar[str] = "s"
    function_name: ClassVar[str] = "reflectiveCurveToRelative"
    builder_method: ClassVar[str] = "reflective_curve_to_relative"


@dataclass(frozen=True)
class QuadTo(PathNode):
    x1: float
    y1: float
    x2: float
    y2: float
    command: ClassVar[str] = "Q"
    function_name: ClassVar[str] = "quadTo"
    builder_method: ClassVar[str] = "quad_to"


@dataclass(frozen=True)
class RelativeQuadTo(PathNode):
    dx1: float
    dy1: float
    dx2: float
    dy2: float
    command: ClassVar[str] = "q"
    function_name: ClassVar[str] = "quadToRelative"
    builder_method: ClassVar[str] = "quad_to_relative"


@dataclass(frozen=True)
class ReflectiveQuadTo(PathNode):
    x: float
    y: float
    command: ClassVar[str] = "T"
    function_name: ClassVar[str] = "reflectiveQuadTo"
    builder_method: ClassVar[str] = "reflective_quad_to"


@dataclass(frozen=True)
class RelativeReflectiveQuadTo(PathNode):
    dx: float
    dy: float
    command: ClassVar[str] = "t"
    function_name: ClassVar[str] = "reflectiveQuadToRelative"
    builder_method: ClassVar[str] = "reflective_quad_to_relative"


@dataclass(frozen=True)
class ArcTo(PathNode):
    horizontal_ellipse_radius: float
    vertical_ellipse_radius: float
    theta: float
    is_more_than_half: bool
    is_positive_arc: bool
    x: float
    y: float
    command: ClassVar[str] = "A"
    function_name: ClassVar[str] = "arcTo"
    builder_method: ClassVar[str] = "arc_to"


@dataclass(frozen=True)
class RelativeArcTo(PathNode):
    horizontal_ellipse_radius: float
    vertical_ellipse_radius: float
    theta: float
    is_more_than_half: bool
    is_positive_arc: bool
    dx: float
    dy: float
    command: ClassVar[str] = "a"
    function_name: ClassVar[str] = "arcToRelative"
    builder_method: ClassVar[str] = "arc_to_relative"


_NODE_TYPES: dict[str, type[PathNode]] = {
    cls.command: cls
    for cls in (
        Close, MoveTo, RelativeMoveTo, LineTo, RelativeLineTo,
        HorizontalTo, RelativeHorizontalTo, VerticalTo, RelativeVerticalTo,
        CurveTo, RelativeCurveTo, ReflectiveCurveTo, RelativeReflectiveCurveTo,
        QuadTo, RelativeQuadTo, ReflectiveQuadTo, RelativeReflectiveQuadTo,
        ArcTo, RelativeArcTo,
    )
}
_NODE_TYPES["z"] = Close

# Operand count per command (case-insensitive)
_ARITY = {"M": 2, "L": 2, "H": 1, "V": 1, "C": 6, "S": 4, "Q": 4, "T": 2, "A": 7, "Z": 0}

# Arc operands 3 and 4 are single-character flags and may be packed ("a1 1 0 00 5 5")
_ARC_FLAG_INDICES = (3, 4)

_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_SEPARATOR_RE = re.compile(r"[\s,]*")
_FLAG_RE = re.compile(r"[01]")


class _Scanner:
    """Cursor over path data, skipping whitespace and commas between tokens."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self._skip()

    def _skip(self) -> None:
        self.pos = _SEPARATOR_RE.match(self.text, self.pos).end()

    @property
    def done(self) -> bool:
        return self.pos >= len(self.text)

    def at_number(self) -> bool:
        return not self.done and _NUMBER_RE.match(self.text, self.pos) is not None

    def read_command(self) -> str:
        ch = self.text[self.pos]
        if ch not in _NODE_TYPES:
            raise PathParseError(f"Unexpected {ch!r} at offset {self.pos} in path {self.text!r}")
        self.pos += 1
        self._skip()
        return ch

    def read_number(self) -> float:
        match = _NUMBER_RE.match(self.text, self.pos)
        if match is None:
            raise PathParseError(f"Expected a number at offset {self.pos} in path {self.text!r}")
        self.pos = match.end()
        self._skip()
        return float(match.group(0))

    def read_flag(self) -> bool:
        match = _FLAG_RE.match(self.text, self.pos)
        if match is None:
            raise PathParseError(f"Expected an arc flag at offset {self.pos} in path {self.text!r}")
        self.pos = match.end()
        self._skip()
        return match.group(0) == "1"


def _read_operands(scanner: _Scanner, command: str) -> list[float | bool]:
    upper = command.upper()
    operands: list[float | bool] = []
    for i in range(_ARITY[upper]):
        if scanner.done:
            raise PathParseError(f"Missing operands for {command!r} in path {scanner.text!r}")
        if upper == "A" and i in _ARC_FLAG_INDICES:
            operands.append(scanner.read_flag())
        else:
            operands.append(scanner.read_number())
    return operands


def parse_path_string(path_data: str | None) -> list[PathNode]:
    """Parse ``path_data`` into an ordered list of PathNodes."""
    if not path_data:
        return []

    scanner = _Scanner(path_data)
    nodes: list[PathNode] = []

    while not scanner.done:
        if scanner.at_number():
            raise PathParseError(f"Expected a command at offset {scanner.pos} in path {path_data!r}")
        command = scanner.read_command()
        if command in "Zz":
            nodes.append(Close())
            continue

        while True:
            nodes.append(_NODE_TYPES[command](*_read_operands(scanner, command)))
            if not scanner.at_number():
                break
            # Extra coordinate pairs after a moveto are implicit linetos
            if command == "M":
                command = "L"
            elif command == "m":
                command = "l"

    logger.debug("Parsed %d path nodes from %d chars", len(nodes), len(path_data))
    return nodes


def to_path_string(nodes: list[PathNode]) -> str:
    """Write nodes back to SVG path syntax, one command letter per node."""
    return " ".join(node.to_svg() for node in nodes)
