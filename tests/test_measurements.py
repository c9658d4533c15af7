"""Tests for the quantized-exact measurement policy."""
import pytest

from congruencelab.model.criteria import CriterionMode
from congruencelab.model.measurements import (
    Measurements,
    angle_label,
    is_right_angle,
    measure,
    measurements_equal,
    quantize_angle,
    quantize_side,
    round_half_up,
    side_label,
)


@pytest.mark.parametrize("value, expected", [
    (0.0, 0),
    (0.49, 0),
    (0.5, 1),
    (2.5, 3),
    (3.5, 4),
    (-2.5, -3),
    (float("nan"), 0),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_sides_are_scaled_by_ten_before_rounding():
    assert quantize_side(124.9) == 12
    assert quantize_side(125.0) == 13
    assert quantize_side(0.0) == 0


def test_angles_round_to_whole_degrees():
    assert quantize_angle(89.49) == 89
    assert quantize_angle(89.5) == 90
    assert quantize_angle(90.4) == 90


def test_single_predicate_is_exact_equality():
    assert measurements_equal(12, 12)
    assert not measurements_equal(12, 13)


def test_right_angle_uses_the_same_predicate():
    assert is_right_angle(quantize_angle(90.3))
    assert not is_right_angle(quantize_angle(85.0))


def test_measure_right_triangle(subject):
    m = measure(subject)
    assert m == Measurements(sides=(12, 16, 20), angles=(53, 90, 37))
    assert m.sorted_sides() == (12, 16, 20)
    assert m.sorted_angles() == (37, 53, 90)
    assert m.right_angle_vertices() == (1,)


def test_labels_are_presentation_only(subject):
    m = measure(subject)
    assert [side_label(s) for s in m.sides] == ["12", "16", "20"]
    assert angle_label(m.angles[1]) == "90°"


def test_criterion_mode_parse():
    assert CriterionMode.parse("rhs") is CriterionMode.RHS
    assert CriterionMode.parse(" sas ") is CriterionMode.SAS
    assert CriterionMode.parse(CriterionMode.ALL) is CriterionMode.ALL


@pytest.mark.parametrize("bad", ["", "SSA", "HL", None, 3])
def test_criterion_mode_rejects_unknown_values(bad):
    with pytest.raises(ValueError):
        CriterionMode.parse(bad)
