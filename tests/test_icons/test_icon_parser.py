"""Tests for the icon XML parser."""

import logging

import pytest

from symbolgen.errors import IconParseError
from symbolgen.icons.icon import Icon
from symbolgen.icons.parser import IconParser
from symbolgen.icons.processor import process_xml_file
from symbolgen.variance import Grade, IconTheme, Variance, Weight
from symbolgen.vector.model import FillType, Group, Path
from symbolgen.vector.path_parser import MoveTo, RelativeArcTo
from tests.conftest import ALARM_XML, ARROW_BACK_XML, GROUPED_XML, NO_VIEWPORT_XML, NOT_A_VECTOR_XML


def _icon(xml: str, name: str = "Test") -> Icon:
    variance = Variance(theme=IconTheme.OUTLINED, weight=Weight.W_400, grade=Grade.G_0, is_filled=False)
    return Icon(kotlin_name=name, file_content=xml, auto_mirrored=False, variance=variance)


def test_parse_simple_icon():
    vector = IconParser(_icon(process_xml_file(ALARM_XML))).parse()
    assert vector.viewport_width == 960.0
    assert vector.viewport_height == 960.0
    assert not vector.auto_mirrored
    assert len(vector.nodes) == 1
    path = vector.nodes[0]
    assert isinstance(path, Path)
    assert path.fill_alpha == 1.0
    assert path.stroke_alpha == 1.0
    assert path.fill_type is FillType.NON_ZERO
    assert path.nodes[0] == MoveTo(480, 880)


def test_parse_auto_mirrored():
    vector = IconParser(_icon(process_xml_file(ARROW_BACK_XML))).parse()
    assert vector.auto_mirrored


def test_group_collects_following_paths():
    vector = IconParser(_icon(GROUPED_XML)).parse()
    assert len(vector.nodes) == 2
    top, group = vector.nodes
    assert isinstance(top, Path)
    assert top.fill_alpha == pytest.approx(0.3)
    assert isinstance(group, Group)
    # The clip-path is dropped, both paths land in the group
    assert len(group.paths) == 2
    assert group.paths[0].fill_type is FillType.EVEN_ODD
    assert group.paths[0].stroke_alpha == 0.5
    assert isinstance(group.paths[0].nodes[1], RelativeArcTo)
    assert len(vector.paths) == 3


def test_unparsable_viewport_is_none():
    vector = IconParser(_icon(NO_VIEWPORT_XML)).parse()
    assert vector.viewport_width is None
    assert vector.viewport_height is None


def test_fill_type_other_values_default_to_non_zero():
    assert FillType.from_attribute("evenOdd") is FillType.EVEN_ODD
    assert FillType.from_attribute("nonZero") is FillType.NON_ZERO
    assert FillType.from_attribute("evenodd") is FillType.NON_ZERO
    assert FillType.from_attribute(None) is FillType.NON_ZERO


def test_wrong_root_tag():
    with pytest.raises(IconParseError, match="<vector>"):
        IconParser(_icon(NOT_A_VECTOR_XML)).parse()


@pytest.mark.parametrize("content", ["", "not xml at all", "<vector"])
def test_malformed_document(content):
    with pytest.raises(IconParseError):
        IconParser(_icon(content)).parse()


def test_bad_path_data_is_reported_with_icon_name():
    xml = '<vector xmlns:android="http://schemas.android.com/apk/res/android"><path android:pathData="Q1"/></vector>'
    with pytest.raises(IconParseError, match="Broken"):
        IconParser(_icon(xml, name="Broken")).parse()


@pytest.mark.parametrize("value", ["inf", "-inf", "nan", "NaN", "1_000", "1e400", "0x10"])
def test_non_numeric_attributes_fall_back_to_defaults(value):
    xml = (
        '<vector xmlns:android="http://schemas.android.com/apk/res/android"'
        f' android:viewportWidth="{value}" android:viewportHeight="{value}">'
        f'<path android:fillAlpha="{value}" android:strokeAlpha="{value}" android:pathData="M0,0L1,1"/>'
        "</vector>"
    )
    vector = IconParser(_icon(xml)).parse()
    assert vector.viewport_width is None
    assert vector.viewport_height is None
    assert vector.paths[0].fill_alpha == 1.0
    assert vector.paths[0].stroke_alpha == 1.0


@pytest.mark.parametrize("value, expected", [("24", 24.0), (" 0.5 ", 0.5), ("-1.5e1", -15.0), (".25", 0.25)])
def test_numeric_attribute_forms(value, expected):
    xml = (
        '<vector xmlns:android="http://schemas.android.com/apk/res/android"'
        f' android:viewportWidth="{value}"><path android:fillAlpha="{value}" android:pathData="M0,0"/></vector>'
    )
    vector = IconParser(_icon(xml)).parse()
    assert vector.viewport_width == expected
    assert vector.paths[0].fill_alpha == expected


def test_second_group_starts_a_new_top_level_group():
    xml = '''<vector xmlns:android="http://schemas.android.com/apk/res/android">
  <path android:pathData="M0,0h1"/>
  <group>
    <path android:pathData="M1,1h1"/>
  </group>
  <group>
    <path android:pathData="M2,2h1"/>
  </group>
  <path android:pathData="M3,3h1"/>
</vector>
'''
    vector = IconParser(_icon(xml)).parse()
    assert [type(node).__name__ for node in vector.nodes] == ["Path", "Group", "Group"]
    first, second = vector.nodes[1], vector.nodes[2]
    assert [p.nodes[0] for p in first.paths] == [MoveTo(1, 1)]
    # The open group keeps collecting paths after its closing tag
    assert [p.nodes[0] for p in second.paths] == [MoveTo(2, 2), MoveTo(3, 3)]


def test_debug_logging_describes_each_path(caplog):
    with caplog.at_level(logging.DEBUG, logger="symbolgen.icons.parser"):
        IconParser(_icon(GROUPED_XML, name="Grouped")).parse()
    messages = [r.getMessage() for r in caplog.records if r.name == "symbolgen.icons.parser"]
    path_lines = [m for m in messages if m.startswith("Grouped path ")]
    assert len(path_lines) == 3
    assert path_lines[0].startswith("Grouped path 0: M2 2 h20 v20 H2 Z bbox=(")
