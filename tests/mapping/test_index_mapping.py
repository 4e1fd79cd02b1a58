import pytest

from rgbramp.colors.rgb import Color
from rgbramp.errors import EmptyRamp, IndexOutOfRange, InvalidMarkerValue
from rgbramp.mapping import index_for_value, map_by_index, parse_marker_value

RAMP = [Color(255, 0, 0), Color(0, 255, 0), Color(0, 0, 255)]


def test_index_for_value_parses_attribute_strings():
    assert index_for_value("0", 3) == 0
    assert index_for_value(" 2 ", 3) == 2
    assert index_for_value("1.0", 3) == 1
    assert index_for_value(1, 3) == 1


def test_index_five_on_three_color_ramp_is_out_of_range():
    with pytest.raises(IndexOutOfRange) as excinfo:
        index_for_value("5", 3)
    assert excinfo.value.index == 5
    assert excinfo.value.ramp_length == 3
    assert isinstance(excinfo.value, IndexError)


def test_negative_index_is_out_of_range():
    with pytest.raises(IndexOutOfRange):
        index_for_value("-1", 3)


@pytest.mark.parametrize("raw", [None, "", "abc", "1.5", "nan", "inf"])
def test_unusable_index_values(raw):
    with pytest.raises(InvalidMarkerValue):
        index_for_value(raw, 3)


def test_map_by_index_keeps_going_after_a_bad_element():
    results = map_by_index(["2", "5", "0", "x"], RAMP)
    assert [r.ok for r in results] == [True, False, True, False]
    assert results[0].color == RAMP[2]
    assert results[0].index == 2
    assert isinstance(results[1].error, IndexOutOfRange)
    assert results[1].color is None
    assert results[2].color == RAMP[0]
    assert isinstance(results[3].error, InvalidMarkerValue)


def test_map_by_index_with_no_values():
    assert map_by_index([], RAMP) == []


def test_map_by_index_requires_a_ramp():
    with pytest.raises(EmptyRamp):
        map_by_index(["0"], [])


def test_parse_marker_value():
    assert parse_marker_value("42") == 42.0
    assert parse_marker_value("-3.25") == -3.25
    assert parse_marker_value(7) == 7.0
    with pytest.raises(InvalidMarkerValue):
        parse_marker_value("   ")
    with pytest.raises(InvalidMarkerValue):
        parse_marker_value(float("nan"))
    with pytest.raises(InvalidMarkerValue):
        parse_marker_value(object())


def test_marker_value_too_large_for_a_float():
    with pytest.raises(InvalidMarkerValue):
        parse_marker_value(10**400)
    results = map_by_index([10**400, "1"], RAMP)
    assert isinstance(results[0].error, InvalidMarkerValue)
    assert results[1].color == RAMP[1]
