"""
Triangle Model
==============
A triangle owns exactly three mutable Points in a fixed order (0, 1, 2). All
measurements are derived on demand from the current coordinates.

Conventions:
    side[i]  = |v[i] -> v[(i+1) % 3]|
    angle[i] = interior angle at v[i], degrees in [0, 180]

Vertex 1 is the designated right-angle corner used by the RHS criterion.

Degenerate (collinear or coincident) vertices are a legal transient state while
the user drags. None of the queries raise for them; they return 0-valued or
fallback results instead.
"""
from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence, TYPE_CHECKING

import numpy as np

from congruencelab import config
from congruencelab.model.geometry_primitives import Point, Vector

if TYPE_CHECKING:
    import numpy.typing as npt

RIGHT_ANGLE_VERTEX = 1


class Triangle:
    """Three vertices plus the derived geometry the evaluator and controller need."""

    def __init__(self, points: Iterable[Point]) -> None:
        pts = list(points)
        if len(pts) != 3:
            raise ValueError(f"A triangle needs exactly 3 vertices, got {len(pts)}.")
        self._points: tuple[Point, Point, Point] = (pts[0], pts[1], pts[2])

    @classmethod
    def from_coordinates(cls, coordinates: Sequence[Sequence[float]]) -> Triangle:
        """Build from ``[(x0, y0), (x1, y1), (x2, y2)]``."""
        return cls(Point(float(x), float(y)) for x, y in coordinates)

    def __repr__(self) -> str:
        coords = ", ".join(f"({p.x:g}, {p.y:g})" for p in self._points)
        return f"Triangle({coords})"

    # -------------------------------------------------------------------------
    # Read-only queries
    # -------------------------------------------------------------------------

    @property
    def vertices(self) -> tuple[Point, Point, Point]:
        return self._points

    def to_array(self) -> npt.NDArray[np.float64]:
        """Vertices as a (3, 2) array."""
        return np.array([[p.x, p.y] for p in self._points], dtype=float)

    def centroid(self) -> Point:
        cx, cy = self.to_array().mean(axis=0)
        return Point(float(cx), float(cy))

    def side_lengths(self) -> tuple[float, float, float]:
        pts = self.to_array()
        lengths = np.linalg.norm(np.roll(pts, -1, axis=0) - pts, axis=1)
        return tuple(float(s) for s in lengths)

    def interior_angles(self) -> tuple[float, float, float]:
        angles = []
        for i in range(3):
            apex = self._points[i]
            to_next = self._points[(i + 1) % 3] - apex
            to_prev = self._points[(i + 2) % 3] - apex
            degrees = math.degrees(to_next.angle_to(to_prev))
            angles.append(min(max(degrees, 0.0), 180.0))
        return tuple(angles)

    def area(self) -> float:
        """Signed area. Positive for counter-clockwise vertices in y-up axes."""
        p0, p1, p2 = self._points
        return 0.5 * ((p1 - p0).cross(p2 - p0))

    def rotation_handle(self, distance: float = config.HANDLE_DISTANCE) -> Point:
        """
        Position of the rotation grip.

        It lies on the ray from vertex 1 through the centroid, ``distance``
        beyond the centroid. When the centroid coincides with vertex 1 the
        grip is placed straight up (screen coordinates).
        """
        c = self.centroid()
        direction = (c - self._points[RIGHT_ANGLE_VERTEX]).normalize()
        if direction.magnitude == 0.0:
            direction = Vector(0.0, -1.0)
        return c + direction * distance

    def contains_point(self, px: float, py: float) -> bool:
        """Strict point-in-triangle test using barycentric coordinates."""
        area = self.area()
        if abs(area) < config.AREA_EPSILON:
            return False

        p0, p1, p2 = self._points
        s = (p0.y * p2.x - p0.x * p2.y + (p2.y - p0.y) * px + (p0.x - p2.x) * py) / (2.0 * area)
        t = (p0.x * p1.y - p0.y * p1.x + (p0.y - p1.y) * px + (p1.x - p0.x) * py) / (2.0 * area)
        return s > 0 and t > 0 and (1 - s - t) > 0

    # -------------------------------------------------------------------------
    # In-place rigid transforms
    # -------------------------------------------------------------------------

    def translate(self, dx: float, dy: float) -> None:
        for p in self._points:
            p.move_to(p.x + dx, p.y + dy)

    def rotate(self, delta_radians: float, pivot: Optional[Point] = None) -> None:
        """Rotate all vertices rigidly about ``pivot`` (default: centroid)."""
        c = pivot if pivot is not None else self.centroid()
        cos_a = math.cos(delta_radians)
        sin_a = math.sin(delta_radians)
        rotation = np.array([[cos_a, -sin_a], [sin_a, cos_a]])

        origin = np.array([c.x, c.y])
        rotated = (self.to_array() - origin) @ rotation.T + origin
        for p, (x, y) in zip(self._points, rotated):
            p.move_to(float(x), float(y))

    def copy(self) -> Triangle:
        return Triangle(p.copy() for p in self._points)
