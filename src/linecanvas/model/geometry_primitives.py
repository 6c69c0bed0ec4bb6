"""
Geometric Primitives for line poses.
"""
from __future__ import annotations
from dataclasses import dataclass
import math


def deg2rad(degrees: float) -> float:
    return degrees * math.pi / 180


@dataclass
class Vector:
    """
    A vector in 2D scene space representing direction and magnitude.
    """
    x: float
    y: float

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector:
        mag = self.magnitude
        if mag == 0.0: return Vector(0.0, 0.0)
        return Vector(self.x / mag, self.y / mag)

    @classmethod
    def from_angle(cls, angle_deg: float) -> Vector:
        """Unit vector pointing at `angle_deg` (scene coordinates, y down)."""
        rad = deg2rad(angle_deg)
        return cls(math.cos(rad), math.sin(rad))


@dataclass
class Point:
    """A simple geometric point in 2D scene space."""
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

    def translated(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)


@dataclass
class PoseState:
    """
    Polar pose of a line: an origin, a length and an angle.

    The angle is in degrees, measured in scene coordinates (y grows downward),
    so increasing it turns the line clockwise on screen. It is never
    normalized; it is only ever read through sine and cosine.
    """
    origin: Point
    length: float = 0.0
    angle: float = 0.0

    @classmethod
    def from_segment(cls, start: Point, end: Point) -> PoseState:
        direction = end - start
        return cls(
            origin=Point(start.x, start.y),
            length=direction.magnitude,
            angle=math.degrees(math.atan2(direction.y, direction.x)),
        )

    @property
    def end(self) -> Point:
        """Derived second endpoint: origin + length * (cos(angle), sin(angle))."""
        return self.origin + Vector.from_angle(self.angle) * self.length

    def translate(self, dx: float, dy: float) -> None:
        self.origin = self.origin.translated(dx, dy)

    def rotate(self, delta_deg: float) -> None:
        self.angle += delta_deg

    def resize(self, delta: float, min_length: float = 0.0) -> None:
        """Change the length by `delta`, flooring at `min_length` (never an error)."""
        self.length = max(min_length, self.length + delta)
