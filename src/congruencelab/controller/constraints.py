"""
Shape constraints for the RHS criterion.

Vertex 1 is the right-angle corner. The legs are v1-v0 and v1-v2, v0-v2 is the
hypotenuse.
"""
from __future__ import annotations

import logging
import math
from typing import Optional

from congruencelab import config
from congruencelab.model.geometry_primitives import Point
from congruencelab.model.triangle import Triangle

logger = logging.getLogger(__name__)


def snap_coordinate(value: float) -> float:
    """Round a pixel coordinate to the grid (halves go up, as on screen)."""
    return float(math.floor(value + 0.5))


def project_onto_perpendicular(corner: Point, fixed_end: Point, px: float, py: float) -> Optional[Point]:
    """
    Orthogonal projection of (px, py) onto the line through ``corner`` that is
    perpendicular to the leg ``corner -> fixed_end``.

    Returns None when the fixed leg has zero length (no direction to lock to).
    """
    perpendicular = (fixed_end - corner).perpendicular()
    mag_sq = perpendicular.magnitude_squared
    if mag_sq == 0.0:
        return None
    scalar = (Point(px, py) - corner).dot(perpendicular) / mag_sq
    return corner + perpendicular * scalar


def align_right_angle(triangle: Triangle, snap_to_grid: bool = config.SNAP_TO_GRID) -> None:
    """
    One-shot correction that makes the corner an axis-aligned right angle.

    Vertex 0 moves onto the vertical through the corner, vertex 2 onto the
    horizontal. Each keeps its current distance from the corner and the side it
    was on; a leg that has collapsed gets the default length instead.
    """
    vertical_default, horizontal_default = config.DEFAULT_LEG_LENGTHS
    p0, corner, p2 = triangle.vertices

    leg_v = p0.distance_to(corner)
    if leg_v < config.MIN_LEG_LENGTH:
        leg_v = vertical_default
    leg_h = p2.distance_to(corner)
    if leg_h < config.MIN_LEG_LENGTH:
        leg_h = horizontal_default

    # Screen coordinates: "up" is -y
    sign_v = 1.0 if p0.y > corner.y else -1.0
    sign_h = -1.0 if p2.x < corner.x else 1.0

    y0 = corner.y + sign_v * leg_v
    x2 = corner.x + sign_h * leg_h
    if snap_to_grid:
        y0 = snap_coordinate(y0)
        x2 = snap_coordinate(x2)

    p0.move_to(corner.x, y0)
    p2.move_to(x2, corner.y)
    logger.debug(f"Aligned right angle: {triangle!r}")
