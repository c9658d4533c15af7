"""
Measurement Formatter
=====================
Converts raw side lengths (pixels) and interior angles (degrees) into the
quantized integers the congruence engine compares.

Equality policy: quantized-exact.
    side  -> round_half_up(raw / SIDE_SCALE)
    angle -> round_half_up(raw)
Two measurements are equal only when their quantized values are identical.
The transform controller snaps dragged vertices to integer pixels so that this
equality is reachable by hand.

The label helpers at the bottom are for display only. Comparisons never go
through strings.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from congruencelab import config
from congruencelab.model.triangle import Triangle


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3)."""
    if not math.isfinite(value):
        return 0
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def quantize_side(raw_length: float) -> int:
    return round_half_up(raw_length / config.SIDE_SCALE)


def quantize_angle(raw_degrees: float) -> int:
    return round_half_up(raw_degrees)


def measurements_equal(a: int, b: int) -> bool:
    """The single equality predicate used for every comparison in the engine."""
    return a == b


def is_right_angle(quantized_angle: int) -> bool:
    return measurements_equal(quantized_angle, config.RIGHT_ANGLE)


@dataclass(frozen=True)
class Measurements:
    """Quantized measurements of one triangle, in vertex order."""
    sides: tuple[int, int, int]
    angles: tuple[int, int, int]

    def sorted_sides(self) -> tuple[int, ...]:
        return tuple(sorted(self.sides))

    def sorted_angles(self) -> tuple[int, ...]:
        return tuple(sorted(self.angles))

    def right_angle_vertices(self) -> tuple[int, ...]:
        """Indices of the vertices whose angle quantizes to 90°."""
        return tuple(i for i, a in enumerate(self.angles) if is_right_angle(a))


def measure(triangle: Triangle) -> Measurements:
    return Measurements(
        sides=tuple(quantize_side(s) for s in triangle.side_lengths()),
        angles=tuple(quantize_angle(a) for a in triangle.interior_angles()),
    )


def side_label(quantized_side: int) -> str:
    return f"{quantized_side}"


def angle_label(quantized_angle: int) -> str:
    return f"{quantized_angle}°"
