"""Vector model — the parsed geometry of one icon variant.

Vector → nodes (Group | Path) → Path.nodes (PathNode drawing commands)
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Union

from symbolgen.vector.path_parser import PathNode


class FillType(enum.Enum):
    NON_ZERO = "nonZero"
    EVEN_ODD = "evenOdd"

    @classmethod
    def from_attribute(cls, value: str | None) -> FillType:
        # evenOdd is the only value that changes anything; nonZero is the default
        if value == cls.EVEN_ODD.value:
            return cls.EVEN_ODD
        return cls.NON_ZERO


@dataclass
class Path:
    """A filled path: alpha values, fill rule and drawing commands."""

    nodes: list[PathNode] = field(default_factory=list)
    fill_alpha: float = 1.0
    stroke_alpha: float = 1.0
    fill_type: FillType = FillType.NON_ZERO


@dataclass
class Group:
    """A group of paths. Clip-paths are not represented."""

    paths: list[Path] = field(default_factory=list)


VectorNode = Union[Group, Path]


@dataclass
class Vector:
    auto_mirrored: bool = False
    # None means the default 24x24 viewport is used by the generated code
    viewport_width: float | None = None
    viewport_height: float | None = None
    nodes: list[VectorNode] = field(default_factory=list)

    @property
    def paths(self) -> list[Path]:
        """Every path in document order, flattening groups."""
        result: list[Path] = []
        for node in self.nodes:
            if isinstance(node, Group):
                result.extend(node.paths)
            else:
                result.append(node)
        return result
