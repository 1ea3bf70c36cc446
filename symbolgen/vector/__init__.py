"""Vector model, path data parser and path replay."""

from symbolgen.vector.model import FillType, Group, Path, Vector, VectorNode
from symbolgen.vector.path_builder import PathBuilder, replay, to_svg_path
from symbolgen.vector.path_parser import PathNode, parse_path_string, to_path_string

__all__ = [
    "FillType",
    "Group",
    "Path",
    "PathBuilder",
    "PathNode",
    "Vector",
    "VectorNode",
    "parse_path_string",
    "replay",
    "to_path_string",
    "to_svg_path",
]
