"""
Geometric Primitives for the 2D canvas.

Coordinates are screen coordinates: x grows to the right, y grows downwards.
"""
from __future__ import annotations
from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Vector:
    """
    A vector in the plane representing direction and magnitude.
    """
    x: float
    y: float

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector(self.x / scalar, self.y / scalar)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> Vector:
        mag = self.magnitude
        if mag == 0.0: return Vector(0.0, 0.0)
        return self / mag

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector) -> float:
        """Z component of the 3D cross product of the two in-plane vectors."""
        return self.x * other.y - self.y * other.x

    def perpendicular(self) -> Vector:
        return Vector(-self.y, self.x)

    def angle_to(self, other: Vector) -> float:
        """
        Returns the unsigned angle in radians between this vector and another.

        Independent of orientation, so the result is the same for clockwise
        and counter-clockwise pairs. A zero-length vector yields 0.0.
        """
        return math.atan2(abs(self.cross(other)), self.dot(other))


@dataclass
class Point:
    """A mutable point on the canvas. Owned by its parent triangle."""
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Point) -> Vector:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Point from a Point.")

    def move_to(self, x: float, y: float) -> None:
        """Update the coordinates in place, keeping the object identity."""
        self.x = x
        self.y = y

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def distance_to_xy(self, x: float, y: float) -> float:
        return math.hypot(self.x - x, self.y - y)

    def copy(self) -> Point:
        return Point(self.x, self.y)
