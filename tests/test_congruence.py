"""Tests for the congruence evaluation engine."""
import math

import pytest

from congruencelab.model.congruence import DiagnosticTag, Verdict, evaluate, relevant_measurements
from congruencelab.model.criteria import CriterionMode
from congruencelab.model.measurements import measure
from congruencelab.model.triangle import Triangle

from conftest import right_triangle

FULL_CRITERIA = [CriterionMode.SSS, CriterionMode.SAS, CriterionMode.ASA, CriterionMode.AAS, CriterionMode.ALL]


def ssa_pair() -> tuple[Triangle, Triangle]:
    """
    The ambiguous case: angle[0] = 30°, side[2] = 200 (adjacent), side[1] = 120
    (opposite), satisfied by two different triangles.
    """
    adjacent, opposite, angle = 200.0, 120.0, math.radians(30)
    # |v1 - v0| = d solves opposite^2 = d^2 + adjacent^2 - 2*d*adjacent*cos(angle)
    b = 2 * adjacent * math.cos(angle)
    c = adjacent ** 2 - opposite ** 2
    root = math.sqrt(b * b - 4 * c)
    triangles = []
    for d in ((b + root) / 2, (b - root) / 2):
        v0 = (100.0, 400.0)
        v1 = (v0[0] + d * math.cos(angle), v0[1] - d * math.sin(angle))
        v2 = (v0[0] + adjacent, v0[1])
        triangles.append(Triangle.from_coordinates([v0, v1, v2]))
    return triangles[0], triangles[1]


def right_angle_at_vertex0(x: float, y: float) -> Triangle:
    # side[0] = 120, side[1] = 200 (hypotenuse), side[2] = 160
    return Triangle.from_coordinates([(x, y), (x, y - 120), (x + 160, y)])


@pytest.mark.parametrize("mode", FULL_CRITERIA + [CriterionMode.RHS])
def test_translated_copy_is_congruent(subject, reference, mode):
    assert evaluate(subject, reference, mode) == Verdict(True, DiagnosticTag.NONE)


@pytest.mark.parametrize("mode", FULL_CRITERIA)
def test_rotated_copy_is_congruent(subject, reference, mode):
    reference.rotate(1.2)
    assert evaluate(subject, reference, mode).congruence_holds


def test_evaluation_does_not_mutate(subject, reference):
    before = [(p.x, p.y) for p in subject.vertices + reference.vertices]
    for mode in CriterionMode:
        evaluate(subject, reference, mode)
    assert [(p.x, p.y) for p in subject.vertices + reference.vertices] == before


def test_sss_ignores_vertex_order_but_sas_does_not(subject):
    v0, v1, v2 = subject.vertices
    relabelled = Triangle.from_coordinates([(v1.x + 400, v1.y), (v2.x + 400, v2.y), (v0.x + 400, v0.y)])
    assert evaluate(subject, relabelled, CriterionMode.SSS).congruence_holds
    assert not evaluate(subject, relabelled, CriterionMode.SAS).congruence_holds


@pytest.mark.parametrize("coords", [
    [(0, 0), (150, 0), (40, 90)],
    [(0, 0), (120, 0), (0, 160)],
    [(10, 10), (10, 10), (10, 10)],
])
def test_sss_is_symmetric(subject, coords):
    other = Triangle.from_coordinates(coords)
    assert evaluate(subject, other, CriterionMode.SSS) == evaluate(other, subject, CriterionMode.SSS)


def test_different_sizes_fail_sss(subject):
    bigger = right_triangle(500, 300, 240, 320)
    assert evaluate(subject, bigger, CriterionMode.SSS) == Verdict(False)


def test_aaa_never_congruent_for_similar_triangles():
    small = right_triangle(100, 300, 60, 80)
    large = right_triangle(400, 300, 120, 160)
    verdict = evaluate(small, large, CriterionMode.AAA)
    assert verdict == Verdict(False, DiagnosticTag.ANGLES_ONLY_MATCH)


def test_aaa_never_congruent_even_for_identical_triangles(subject, reference):
    verdict = evaluate(subject, reference, CriterionMode.AAA)
    assert not verdict.congruence_holds
    assert verdict.diagnostic is DiagnosticTag.ANGLES_ONLY_MATCH


def test_aaa_mismatch_has_no_diagnostic(subject):
    other = Triangle.from_coordinates([(0, 0), (150, 0), (40, 90)])
    assert evaluate(subject, other, CriterionMode.AAA) == Verdict(False)


def test_ass_ambiguous_case_is_not_congruent():
    first, second = ssa_pair()
    assert evaluate(first, second, CriterionMode.ASS) == Verdict(False, DiagnosticTag.SIDE_SIDE_ANGLE_ONLY_MATCH)
    # Genuinely different triangles
    assert not evaluate(first, second, CriterionMode.SSS).congruence_holds


def test_ass_with_right_angle_is_promoted():
    a = right_angle_at_vertex0(100, 300)
    b = right_angle_at_vertex0(450, 250)
    assert evaluate(a, b, CriterionMode.ASS) == Verdict(True, DiagnosticTag.RIGHT_ANGLE_DEGENERATE_CONGRUENT)


def test_ass_promotion_can_be_disabled():
    a = right_angle_at_vertex0(100, 300)
    b = right_angle_at_vertex0(450, 250)
    verdict = evaluate(a, b, CriterionMode.ASS, promote_right_angle_ass=False)
    assert verdict == Verdict(False, DiagnosticTag.SIDE_SIDE_ANGLE_ONLY_MATCH)


def test_ass_mismatch():
    other = right_angle_at_vertex0(450, 250)
    other.vertices[2].move_to(other.vertices[2].x + 100, other.vertices[2].y)
    assert evaluate(right_angle_at_vertex0(100, 300), other, CriterionMode.ASS) == Verdict(False)


def test_rhs_missing_right_angle():
    corner = (200.0, 300.0)
    tilt = math.radians(85)
    tilted = Triangle.from_coordinates([
        (corner[0] + 120 * math.cos(tilt), corner[1] - 120 * math.sin(tilt)),
        corner,
        (corner[0] + 160, corner[1]),
    ])
    assert tilted.interior_angles()[1] == pytest.approx(85.0)

    verdict = evaluate(tilted, tilted.copy(), CriterionMode.RHS)
    assert verdict == Verdict(False, DiagnosticTag.RIGHT_ANGLE_MISSING)


def test_rhs_requires_the_right_angle_on_both(subject):
    skewed = Triangle.from_coordinates([(0, 0), (150, 0), (40, 90)])
    assert evaluate(subject, skewed, CriterionMode.RHS).diagnostic is DiagnosticTag.RIGHT_ANGLE_MISSING


def test_rhs_compares_leg_and_hypotenuse(subject):
    # Same hypotenuse (200) but legs swapped: side[0] differs
    swapped = right_triangle(500, 300, 160, 120)
    verdict = evaluate(subject, swapped, CriterionMode.RHS)
    assert verdict == Verdict(False, DiagnosticTag.NONE)


def test_asa_detects_changed_included_side(subject):
    scaled = right_triangle(500, 300, 150, 200)
    assert not evaluate(subject, scaled, CriterionMode.ASA).congruence_holds
    assert not evaluate(subject, scaled, CriterionMode.AAS).congruence_holds


@pytest.mark.parametrize("mode, expected", [
    (CriterionMode.SSS, ((0, 1, 2), ())),
    (CriterionMode.ALL, ((0, 1, 2), (0, 1, 2))),
    (CriterionMode.SAS, ((0, 2), (0,))),
    (CriterionMode.ASA, ((1,), (1, 2))),
    (CriterionMode.AAS, ((2,), (1, 2))),
    (CriterionMode.RHS, ((0, 2), (1,))),
    (CriterionMode.AAA, ((), (0, 1, 2))),
    (CriterionMode.ASS, ((1, 2), (0,))),
])
def test_relevant_measurements(mode, expected):
    assert relevant_measurements(mode) == expected


def test_rhs_needs_the_right_angle_at_the_corner_vertex():
    a = right_angle_at_vertex0(100, 300)
    b = right_angle_at_vertex0(500, 300)
    assert measure(a).right_angle_vertices() == (0,)
    assert evaluate(a, b, CriterionMode.RHS) == Verdict(False, DiagnosticTag.RIGHT_ANGLE_MISSING)
