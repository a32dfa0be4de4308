"""Intersection tests for circles, axis-aligned rectangles and convex polygons."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Sequence

from playkit.vector import ZN, Vector

EPSILON = 1e-10

Edge = tuple[int, int]


@dataclass
class Circle:
    """A circle with the given centre and radius."""

    x: float
    y: float
    r: float

    def move_to(self, x: float, y: float) -> None:
        self.x, self.y = x, y


@dataclass
class Rect:
    """An axis-aligned bounding box given by its centre and size."""

    x: float
    y: float
    w: float
    h: float
    phi: float = 0.0

    def move_to(self, x: float, y: float) -> None:
        self.x, self.y = x, y


@dataclass
class Polygon:
    """A polygon centred at (x, y), given as vertices and edges between them."""

    x: float
    y: float
    phi: float = 0.0
    vertices: list[Vector] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    def move_to(self, x: float, y: float) -> None:
        self.x, self.y = x, y


@dataclass(frozen=True)
class Intersection:
    """Penetration depth, intersection normal and support point."""

    penetration: float = 0.0
    normal: Vector = Vector()
    support: Vector = Vector()


def is_zero(value: float) -> bool:
    """Report whether a value is treated as zero.

    Negative values are compared against the positive epsilon, so they never
    count as zero.
    """
    if value >= 0:
        return value < EPSILON
    return value > EPSILON


def support(direction: Vector, vertices: Sequence[Vector]) -> Vector:
    """Return the vertex furthest along ``direction``."""
    best = -math.inf
    found = Vector()
    for v in vertices:
        prod = v.dot(direction)
        if prod > best:
            best, found = prod, v
    return found


def least_penetration(
    v1: Sequence[Vector],
    e1: Sequence[Edge],
    v2: Sequence[Vector],
    e2: Sequence[Edge],
) -> tuple[float, Vector, Vector]:
    """Return the least penetration of the second polygon into the first.

    The result is a ``(penetration, normal, support)`` triple.
    """
    pen = -math.inf
    normal = Vector()
    sup = Vector()
    for start, end in e1:
        f = v1[end].sub(v1[start])
        n = Vector(-f.y, f.x).norm()
        s = support(n.scale(-1), v2)
        p = s.sub(v1[end]).dot(n)
        if p > pen:
            pen, normal, sup = p, n, s
    return pen, normal, sup


def to_scene(x: float, y: float, phi: float, vertices: Sequence[Vector]) -> list[Vector]:
    """Rotate vertices by ``phi`` and move them to the centre (x, y)."""
    centre = Vector(x, y)
    return [v.rotate(phi).add(centre) for v in vertices]


def circles(a: Circle, b: Circle) -> Optional[Intersection]:
    """Intersect two circles; return None when they do not touch."""
    dx, dy = b.x - a.x, b.y - a.y
    len2 = dx * dx + dy * dy
    rr = a.r + b.r
    if len2 > rr * rr:
        return None
    length = math.sqrt(len2)
    normal = ZN if is_zero(len2) else Vector(dx / length, dy / length)
    return Intersection(penetration=rr - length, normal=normal)


def rectangles(a: Rect, b: Rect) -> Optional[Intersection]:
    """Intersect two axis-aligned rectangles; return None when they do not overlap."""
    dx = b.x - a.x
    px = (a.w + b.w) / 2 - abs(dx)
    if px <= 0:
        return None
    dy = b.y - a.y
    py = (a.h + b.h) / 2 - abs(dy)
    if py <= 0:
        return None
    if px <= py:
        return Intersection(penetration=px, normal=Vector(1, 0) if dx > 0 else Vector(-1, 0))
    return Intersection(penetration=py, normal=Vector(0, 1) if dy > 0 else Vector(0, -1))


def polygons(a: Polygon, b: Polygon) -> Optional[Intersection]:
    """Intersect two convex polygons; return None when a separating edge exists."""
    av = to_scene(a.x, a.y, a.phi, a.vertices)
    bv = to_scene(b.x, b.y, b.phi, b.vertices)
    p1, n1, s1 = least_penetration(av, a.edges, bv, b.edges)
    if p1 > 0:
        return None
    p2, n2, s2 = least_penetration(bv, b.edges, av, a.edges)
    if p2 > 0:
        return None
    if p1 >= p2:
        return Intersection(penetration=p1, normal=n1, support=s1)
    return Intersection(penetration=-p2, normal=n2.scale(-1), support=s2)