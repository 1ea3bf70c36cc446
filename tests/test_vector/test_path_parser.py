"""Tests for the path data parser."""

import pytest

from symbolgen.errors import PathParseError
from symbolgen.vector.path_parser import (
    ArcTo,
    Close,
    CurveTo,
    HorizontalTo,
    LineTo,
    MoveTo,
    QuadTo,
    ReflectiveCurveTo,
    RelativeArcTo,
    RelativeLineTo,
    RelativeMoveTo,
    RelativeReflectiveQuadTo,
    RelativeVerticalTo,
    parse_path_string,
    to_path_string,
)


def test_parse_absolute_commands():
    nodes = parse_path_string("M480,880Q405,880 339.5,851.5L480,520Z")
    assert nodes == [
        MoveTo(480, 880),
        QuadTo(405, 880, 339.5, 851.5),
        LineTo(480, 520),
        Close(),
    ]


def test_relative_commands_stay_relative():
    nodes = parse_path_string("m1,2 v3 t4,5 z")
    assert nodes == [RelativeMoveTo(1, 2), RelativeVerticalTo(3), RelativeReflectiveQuadTo(4, 5), Close()]
    assert all(node.is_relative for node in nodes[:3])


def test_implicit_lineto_after_moveto():
    assert parse_path_string("M0 0 10 10 20 20") == [MoveTo(0, 0), LineTo(10, 10), LineTo(20, 20)]
    assert parse_path_string("m1 1 2 2") == [RelativeMoveTo(1, 1), RelativeLineTo(2, 2)]


def test_implicit_repetition():
    nodes = parse_path_string("l1 1 2 2 H5 6 C1 2 3 4 5 6 7 8 9 10 11 12")
    assert nodes == [
        RelativeLineTo(1, 1),
        RelativeLineTo(2, 2),
        HorizontalTo(5),
        HorizontalTo(6),
        CurveTo(1, 2, 3, 4, 5, 6),
        CurveTo(7, 8, 9, 10, 11, 12),
    ]


def test_compact_numbers():
    assert parse_path_string("M1.5.5-1-2") == [MoveTo(1.5, 0.5), LineTo(-1, -2)]
    assert parse_path_string("M1e2,2E-1") == [MoveTo(100, 0.2)]
    assert parse_path_string("S+1,-.5 3 4") == [ReflectiveCurveTo(1, -0.5, 3, 4)]


def test_arc_flags():
    assert parse_path_string("A10,10 0,1 0,0.01 0") == [ArcTo(10, 10, 0, True, False, 0.01, 0)]
    # Flags may be packed without separators
    assert parse_path_string("a1 1 0 015 5") == [RelativeArcTo(1, 1, 0, False, True, 5, 5)]


def test_empty_path():
    assert parse_path_string("") == []
    assert parse_path_string(None) == []
    assert parse_path_string("   ") == []


@pytest.mark.parametrize("path_data", ["X10 10", "M10", "10 10", "M0 0 z 5", "A1 1 0 2 0 1 1"])
def test_malformed_path_raises(path_data):
    with pytest.raises(PathParseError):
        parse_path_string(path_data)


def test_function_calls():
    assert MoveTo(480, 880).as_function_call() == "moveTo(480.0f, 880.0f)"
    assert RelativeLineTo(-0.5, 1).as_function_call() == "lineToRelative(-0.5f, 1.0f)"
    assert Close().as_function_call() == "close()"
    assert RelativeArcTo(1, 1, 0, False, True, 5, 5).as_function_call() == (
        "arcToRelative(1.0f, 1.0f, 0.0f, false, true, 5.0f, 5.0f)"
    )


def test_to_path_string():
    nodes = [MoveTo(1, 2), RelativeLineTo(0.5, -1), ArcTo(3, 3, 0, True, False, 4, 4), Close()]
    assert to_path_string(nodes) == "M1 2 l0.5 -1 A3 3 0 1 0 4 4 Z"
    assert parse_path_string(to_path_string(nodes)) == nodes
