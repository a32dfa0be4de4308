"""Two-dimensional vectors with dot products, rotation and normalisation."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """A geometric object with magnitude and direction."""

    x: float = 0.0
    y: float = 0.0

    def rotate(self, angle: float) -> Vector:
        """Return the vector rotated by ``angle`` radians."""
        cos, sin = math.cos(angle), math.sin(angle)
        return Vector(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def add(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def sub(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def scale(self, k: float) -> Vector:
        return Vector(self.x * k, self.y * k)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    def norm(self) -> Vector:
        """Return a unit vector in the same direction, or ``ZN`` for a zero vector."""
        len2 = self.len2()
        if len2 == 0:
            return ZN
        return self.scale(1 / math.sqrt(len2))

    def len2(self) -> float:
        """Return the squared length."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.len2())

    def __add__(self, other: Vector) -> Vector:
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        return self.sub(other)

    def __neg__(self) -> Vector:
        return self.scale(-1)


# The "zero normal": used wherever a normal of a zero-length vector is asked for.
ZN = Vector(0.0, 1.0)