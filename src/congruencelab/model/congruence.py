"""
Congruence Evaluation Engine
============================
Decides whether two triangles satisfy the active criterion.

The engine is pure: it reads both triangles through the measurement formatter,
compares the subset the criterion names, and returns a fresh Verdict. It never
mutates either triangle, so it may run once per redraw tick.

Criterion table (indices follow the Triangle conventions):

    SSS / ALL  all sides, sorted
    SAS        side[2], angle[0], side[0]
    ASA        angle[1], side[1], angle[2]
    AAS        angle[1], angle[2], side[2]
    RHS        angle[1] == 90 on both (precondition), side[0], side[2]
    AAA        all angles, sorted; never congruent
    ASS        angle[0], side[1], side[2]; congruent only in the right-angle case
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Sequence

from congruencelab import config
from congruencelab.model.criteria import CriterionMode
from congruencelab.model.measurements import Measurements, measure, measurements_equal
from congruencelab.model.triangle import RIGHT_ANGLE_VERTEX, Triangle

SIDE = "side"
ANGLE = "angle"


class DiagnosticTag(StrEnum):
    """Pedagogical feedback attached to a verdict. Not an error."""
    NONE = "none"
    ANGLES_ONLY_MATCH = "anglesOnlyMatch"
    SIDE_SIDE_ANGLE_ONLY_MATCH = "sideSideAngleOnlyMatch"
    RIGHT_ANGLE_MISSING = "rightAngleMissing"
    RIGHT_ANGLE_DEGENERATE_CONGRUENT = "rightAngleDegenerateCongruent"


@dataclass(frozen=True)
class Verdict:
    congruence_holds: bool
    diagnostic: DiagnosticTag = DiagnosticTag.NONE


# Ordered (kind, index) pairs compared position by position.
_PAIRED_SUBSETS: dict[CriterionMode, tuple[tuple[str, int], ...]] = {
    CriterionMode.SAS: ((SIDE, 2), (ANGLE, 0), (SIDE, 0)),
    CriterionMode.ASA: ((ANGLE, 1), (SIDE, 1), (ANGLE, 2)),
    CriterionMode.AAS: ((ANGLE, 1), (ANGLE, 2), (SIDE, 2)),
    CriterionMode.RHS: ((SIDE, 0), (SIDE, 2)),
    CriterionMode.ASS: ((ANGLE, 0), (SIDE, 1), (SIDE, 2)),
}

_ALL_INDICES = (0, 1, 2)


def relevant_measurements(mode: CriterionMode) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """
    Which measurements the criterion looks at, as ``(side_indices, angle_indices)``.

    Lets the presentation layer label exactly what is being compared.
    """
    if mode in (CriterionMode.SSS, CriterionMode.ALL):
        angles = _ALL_INDICES if mode == CriterionMode.ALL else ()
        return _ALL_INDICES, angles
    if mode == CriterionMode.AAA:
        return (), _ALL_INDICES

    pairs = _PAIRED_SUBSETS[mode]
    sides = tuple(sorted(i for kind, i in pairs if kind == SIDE))
    angles = {i for kind, i in pairs if kind == ANGLE}
    if mode == CriterionMode.RHS:
        angles.add(RIGHT_ANGLE_VERTEX)
    return sides, tuple(sorted(angles))


def _sequences_equal(a: Sequence[int], b: Sequence[int]) -> bool:
    return len(a) == len(b) and all(measurements_equal(x, y) for x, y in zip(a, b))


def _subset(m: Measurements, pairs: tuple[tuple[str, int], ...]) -> tuple[int, ...]:
    return tuple(m.sides[i] if kind == SIDE else m.angles[i] for kind, i in pairs)


def _paired_match(mode: CriterionMode, a: Measurements, b: Measurements) -> bool:
    pairs = _PAIRED_SUBSETS[mode]
    return _sequences_equal(_subset(a, pairs), _subset(b, pairs))


def evaluate(
    subject: Triangle,
    reference: Triangle,
    mode: CriterionMode,
    *,
    promote_right_angle_ass: bool = config.ASS_RIGHT_ANGLE_PROMOTION,
) -> Verdict:
    """
    Compare two triangles under ``mode``.

    Args:
        subject: The triangle the learner is manipulating.
        reference: The triangle it is compared against.
        mode: Active criterion.
        promote_right_angle_ass: When True, an ASS match whose shared angle is
            90° on both triangles is reported as congruent (the RHS case).

    Returns:
        A new Verdict. Neither triangle is modified.
    """
    a = measure(subject)
    b = measure(reference)

    if mode in (CriterionMode.SSS, CriterionMode.ALL):
        return Verdict(_sequences_equal(a.sorted_sides(), b.sorted_sides()))

    if mode == CriterionMode.AAA:
        if _sequences_equal(a.sorted_angles(), b.sorted_angles()):
            return Verdict(False, DiagnosticTag.ANGLES_ONLY_MATCH)
        return Verdict(False)

    if mode == CriterionMode.RHS:
        corners = (a.right_angle_vertices(), b.right_angle_vertices())
        if not all(RIGHT_ANGLE_VERTEX in found for found in corners):
            return Verdict(False, DiagnosticTag.RIGHT_ANGLE_MISSING)
        return Verdict(_paired_match(mode, a, b))

    if mode == CriterionMode.ASS:
        if not _paired_match(mode, a, b):
            return Verdict(False)
        if promote_right_angle_ass and 0 in a.right_angle_vertices() and 0 in b.right_angle_vertices():
            return Verdict(True, DiagnosticTag.RIGHT_ANGLE_DEGENERATE_CONGRUENT)
        return Verdict(False, DiagnosticTag.SIDE_SIDE_ANGLE_ONLY_MATCH)

    return Verdict(_paired_match(mode, a, b))
