import numpy as np
import pytest

from rgbramp.colors.rgb import Color
from rgbramp.errors import EmptyElementSet, EmptyRamp, InvalidMarkerValue
from rgbramp.gradients.ramp import build_ramp
from rgbramp.gradients.segment import Segment
from rgbramp.mapping import RangeContext, map_by_range

RAMP = [Color(255, 0, 0), Color(0, 255, 0), Color(0, 0, 255)]


def test_three_values_onto_three_colors():
    results = map_by_range(["0", "50", "100"], RAMP)
    assert [r.index for r in results] == [0, 1, 2]
    assert [r.color for r in results] == RAMP


def test_values_are_binned_by_floor():
    results = map_by_range(["0", "49.9", "50", "99.9", "100"], RAMP)
    assert [r.index for r in results] == [0, 0, 1, 1, 2]


def test_maximum_lands_in_last_band():
    ramp = build_ramp(Segment(Color(0, 0, 0), Color(255, 255, 255), 7))
    values = [0.1, 0.2, 0.3, 0.7]
    results = map_by_range(values, ramp)
    assert results[-1].index == len(ramp) - 1
    assert results[0].index == 0


def test_identical_values_map_to_first_band():
    results = map_by_range(["7", "7", "7"], RAMP)
    assert [r.index for r in results] == [0, 0, 0]


def test_single_color_ramp_maps_everything_to_it():
    ramp = [Color(9, 9, 9)]
    results = map_by_range(["1", "5", "10"], ramp)
    assert [r.index for r in results] == [0, 0, 0]
    assert all(r.color == ramp[0] for r in results)


def test_negative_values():
    results = map_by_range([-10, 0, 10], RAMP)
    assert [r.index for r in results] == [0, 1, 2]


def test_no_values_is_an_error():
    with pytest.raises(EmptyElementSet):
        map_by_range([], RAMP)
    with pytest.raises(LookupError):
        map_by_range([], RAMP, marker="data-value")


def test_empty_ramp_is_an_error():
    with pytest.raises(EmptyRamp):
        map_by_range(["1"], [])


def test_one_bad_value_fails_the_whole_pass():
    with pytest.raises(InvalidMarkerValue):
        map_by_range(["1", "two", "3"], RAMP)


def test_range_context():
    context = RangeContext.from_values([10.0, 30.0, 20.0], 5)
    assert context.minimum == 10.0
    assert context.maximum == 30.0
    assert context.step == 5.0
    assert context.indices_for([10.0, 14.9, 15.0, 30.0]).tolist() == [0, 0, 1, 4]
    assert context.index_for(29.99) == 3


def test_range_context_clamps_indices():
    context = RangeContext(0.0, 1.0, 0.1, 3)
    assert context.indices_for(np.array([0.0, 0.5, 1.0])).tolist() == [0, 2, 2]


def test_range_context_needs_values():
    with pytest.raises(EmptyElementSet):
        RangeContext.from_values([], 3)


def test_range_wider_than_float_max():
    results = map_by_range(["-1.7e308", "0", "1.7e308"], RAMP)
    assert [r.index for r in results] == [0, 1, 2]


def test_wide_range_context_has_finite_step():
    context = RangeContext.from_values([-1.7e308, 1.7e308], 5)
    assert np.isfinite(context.step)
    assert context.indices_for([-1.7e308, -0.5e308, 0.85e308, 1.7e308]).tolist() == [0, 1, 3, 4]


def test_wide_range_onto_two_colors():
    results = map_by_range([-1.7e308, 1.0e308, 1.7e308], RAMP[:2])
    assert [r.index for r in results] == [0, 0, 1]
