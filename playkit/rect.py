"""Integer points and half-open rectangles in screen coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0

    def add(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def sub(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def in_rect(self, rect: Rectangle) -> bool:
        """Report whether the point lies in the half-open rectangle."""
        return rect.min.x <= self.x < rect.max.x and rect.min.y <= self.y < rect.max.y


@dataclass(frozen=True)
class Rectangle:
    """A rectangle covering min <= p < max."""

    min: Point = Point()
    max: Point = Point()

    def dx(self) -> int:
        return self.max.x - self.min.x

    def dy(self) -> int:
        return self.max.y - self.min.y

    def size(self) -> Point:
        return Point(self.dx(), self.dy())

    def add(self, point: Point) -> Rectangle:
        """Return the rectangle translated by ``point``."""
        return Rectangle(self.min.add(point), self.max.add(point))

    def contains(self, point: Point) -> bool:
        return point.in_rect(self)