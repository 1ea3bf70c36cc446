"""Tests for literal formatting."""

from symbolgen.utils.literals import kotlin_boolean, kotlin_float, svg_number


def test_kotlin_float():
    assert kotlin_float(960) == "960.0f"
    assert kotlin_float(0.3) == "0.3f"
    assert kotlin_float(-1.5) == "-1.5f"
    # Float precision, not Double
    assert kotlin_float(1 / 3) == "0.33333334f"


def test_kotlin_float_null():
    assert kotlin_float(None) == "null"


def test_kotlin_boolean():
    assert kotlin_boolean(True) == "true"
    assert kotlin_boolean(False) == "false"


def test_svg_number():
    assert svg_number(3.0) == "3"
    assert svg_number(0.5) == "0.5"
    assert svg_number(-12) == "-12"
