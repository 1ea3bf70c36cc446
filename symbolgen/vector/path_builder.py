"""Replaying PathNodes into a recording PathBuilder, and absolute geometry via svgpathtools."""

from __future__ import annotations

import logging

import svgpathtools

from symbolgen.vector.path_parser import (
    ArcTo,
    Close,
    CurveTo,
    HorizontalTo,
    LineTo,
    MoveTo,
    PathNode,
    QuadTo,
    ReflectiveCurveTo,
    ReflectiveQuadTo,
    RelativeArcTo,
    RelativeCurveTo,
    RelativeHorizontalTo,
    RelativeLineTo,
    RelativeMoveTo,
    RelativeQuadTo,
    RelativeReflectiveCurveTo,
    RelativeReflectiveQuadTo,
    RelativeVerticalTo,
    VerticalTo,
)

logger = logging.getLogger(__name__)


class PathBuilder:
    """Collects drawing calls in order, mirroring Compose's PathBuilder API.

    Every method appends the matching PathNode and returns the builder so
    calls can be chained.
    """

    def __init__(self) -> None:
        self.nodes: list[PathNode] = []

    def _add(self, node: PathNode) -> PathBuilder:
        self.nodes.append(node)
        return self

    def close(self) -> PathBuilder:
        return self._add(Close())

    def move_to(self, x: float, y: float) -> PathBuilder:
        return self._add(MoveTo(x, y))

    def move_to_relative(self, dx: float, dy: float) -> PathBuilder:
        return self._add(RelativeMoveTo(dx, dy))

    def line_to(self, x: float, y: float) -> PathBuilder:
        return self._add(LineTo(x, y))

    def line_to_relative(self, dx: float, dy: float) -> PathBuilder:
        return self._add(RelativeLineTo(dx, dy))

    def horizontal_line_to(self, x: float) -> PathBuilder:
        return self._add(HorizontalTo(x))

    def horizontal_line_to_relative(self, dx: float) -> PathBuilder:
        return self._add(RelativeHorizontalTo(dx))

    def vertical_line_to(self, y: float) -> PathBuilder:
        return self._add(VerticalTo(y))

    def vertical_line_to_relative(self, dy: float) -> PathBuilder:
        return self._add(RelativeVerticalTo(dy))

    def curve_to(self, x1, y1, x2, y2, x3, y3) -> PathBuilder:
        return self._add(CurveTo(x1, y1, x2, y2, x3, y3))

    def curve_to_relative(self, dx1, dy1, dx2, dy2, dx3, dy3) -> PathBuilder:
        return self._add(RelativeCurveTo(dx1, dy1, dx2, dy2, dx3, dy3))

    def reflective_curve_to(self, x1, y1, x2, y2) -> PathBuilder:
        return self._add(ReflectiveCurveTo(x1, y1, x2, y2))

    def reflective_curve_to_relative(self, dx1, dy1, dx2, dy2) -> PathBuilder:
        return self._add(RelativeReflectiveCurveTo(dx1, dy1, dx2, dy2))

    def quad_to(self, x1, y1, x2, y2) -> PathBuilder:
        return self._add(QuadTo(x1, y1, x2, y2))

    def quad_to_relative(self, dx1, dy1, dx2, dy2) -> PathBuilder:
        return self._add(RelativeQuadTo(dx1, dy1, dx2, dy2))

    def reflective_quad_to(self, x: float, y: float) -> PathBuilder:
        return self._add(ReflectiveQuadTo(x, y))

    def reflective_quad_to_relative(self, dx: float, dy: float) -> PathBuilder:
        return self._add(RelativeReflectiveQuadTo(dx, dy))

    def arc_to(self, rx, ry, theta, is_more_than_half, is_positive_arc, x, y) -> PathBuilder:
        return self._add(ArcTo(rx, ry, theta, is_more_than_half, is_positive_arc, x, y))

    def arc_to_relative(self, rx, ry, theta, is_more_than_half, is_positive_arc, dx, dy) -> PathBuilder:
        return self._add(RelativeArcTo(rx, ry, theta, is_more_than_half, is_positive_arc, dx, dy))


def replay(nodes: list[PathNode], builder: PathBuilder | None = None) -> PathBuilder:
    """Apply every node to ``builder`` (a fresh one by default) in order."""
    builder = builder or PathBuilder()
    for node in nodes:
        node.apply(builder)
    return builder


def to_svg_path(nodes: list[PathNode]) -> svgpathtools.Path:
    """Resolve nodes into absolute svgpathtools segments.

    Relative commands are offset from the current point, reflective curves
    mirror the previous control point (or use the current point when the
    previous segment was not of the same family), and a close emits a line
    back to the sub-path start when the two differ.
    """
    segments: list = []
    current = 0j
    start = 0j
    last_cubic_ctrl: complex | None = None
    last_quad_ctrl: complex | None = None

    for node in nodes:
        origin = current if node.is_relative else 0j
        cubic_ctrl: complex | None = None
        quad_ctrl: complex | None = None

        if isinstance(node, Close):
            if current != start:
                segments.append(svgpathtools.Line(current, start))
            current = start

        elif isinstance(node, (MoveTo, RelativeMoveTo)):
            current = origin + complex(*node.operands)
            start = current

        elif isinstance(node, (LineTo, RelativeLineTo)):
            end = origin + complex(*node.operands)
            segments.append(svgpathtools.Line(current, end))
            current = end

        elif isinstance(node, (HorizontalTo, RelativeHorizontalTo)):
            end = complex(origin.real + node.operands[0], current.imag)
            segments.append(svgpathtools.Line(current, end))
            current = end

        elif isinstance(node, (VerticalTo, RelativeVerticalTo)):
            end = complex(current.real, origin.imag + node.operands[0])
            segments.append(svgpathtools.Line(current, end))
            current = end

        elif isinstance(node, (CurveTo, RelativeCurveTo)):
            x1, y1, x2, y2, x3, y3 = node.operands
            c1 = origin + complex(x1, y1)
            cubic_ctrl = origin + complex(x2, y2)
            end = origin + complex(x3, y3)
            segments.append(svgpathtools.CubicBezier(current, c1, cubic_ctrl, end))
            current = end

        elif isinstance(node, (ReflectiveCurveTo, RelativeReflectiveCurveTo)):
            x2, y2, x3, y3 = node.operands
            c1 = current if last_cubic_ctrl is None else current + current - last_cubic_ctrl
            cubic_ctrl = origin + complex(x2, y2)
            end = origin + complex(x3, y3)
            segments.append(svgpathtools.CubicBezier(current, c1, cubic_ctrl, end))
            current = end

        elif isinstance(node, (QuadTo, RelativeQuadTo)):
            x1, y1, x2, y2 = node.operands
            quad_ctrl = origin + complex(x1, y1)
            end = origin + complex(x2, y2)
            segments.append(svgpathtools.QuadraticBezier(current, quad_ctrl, end))
            current = end

        elif isinstance(node, (ReflectiveQuadTo, RelativeReflectiveQuadTo)):
            quad_ctrl = current if last_quad_ctrl is None else current + current - last_quad_ctrl
            end = origin + complex(*node.operands)
            segments.append(svgpathtools.QuadraticBezier(current, quad_ctrl, end))
            current = end

        elif isinstance(node, (ArcTo, RelativeArcTo)):
            rx, ry, theta, large_arc, sweep, x, y = node.operands
            end = origin + complex(x, y)
            if end == current:
                # Endpoints coincide: the arc is omitted entirely
                pass
            elif rx == 0 or ry == 0:
                segments.append(svgpathtools.Line(current, end))
            else:
                segments.append(
                    svgpathtools.Arc(current, complex(abs(rx), abs(ry)), theta, large_arc, sweep, end)
                )
            current = end

        last_cubic_ctrl = cubic_ctrl
        last_quad_ctrl = quad_ctrl

    logger.debug("Resolved %d nodes into %d segments", len(nodes), len(segments))
    return svgpathtools.Path(*segments)
