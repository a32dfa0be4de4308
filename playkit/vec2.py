"""Plain two-dimensional vectors used by the ray caster."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    x: float = 0.0
    y: float = 0.0

    def add(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def sub(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def scale(self, k: float) -> Vec2:
        return Vec2(self.x * k, self.y * k)

    def rotate(self, phi: float) -> Vec2:
        """Return the vector rotated by ``phi`` radians."""
        cos, sin = math.cos(phi), math.sin(phi)
        return Vec2(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def norm(self) -> Vec2:
        """Return the unit vector; a zero vector raises ZeroDivisionError."""
        length = self.length()
        return Vec2(self.x / length, self.y / length)