"""Three-dimensional points, rotations, back-face culling and projection."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Point3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def add(self, other: Point3) -> Point3:
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: Point3) -> Point3:
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)

    def cross(self, other: Point3) -> Point3:
        return Point3(
            self.y * other.z - self.z * other.y,
            -self.x * other.z + self.z * other.x,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Point3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def scale(self, k: float) -> Point3:
        return Point3(self.x * k, self.y * k, self.z * k)

    def normalize(self) -> Point3:
        length = self.length()
        return Point3(self.x / length, self.y / length, self.z / length)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


def rotate_x(phi: float, points: Sequence[Point3]) -> list[Point3]:
    cos, sin = math.cos(phi), math.sin(phi)
    return [Point3(p.x, p.y * cos + p.z * sin, -p.y * sin + p.z * cos) for p in points]


def rotate_y(phi: float, points: Sequence[Point3]) -> list[Point3]:
    cos, sin = math.cos(phi), math.sin(phi)
    return [Point3(p.x * cos - p.z * sin, p.y, p.x * sin + p.z * cos) for p in points]


def rotate_z(phi: float, points: Sequence[Point3]) -> list[Point3]:
    cos, sin = math.cos(phi), math.sin(phi)
    return [Point3(p.x * cos - p.y * sin, p.x * sin + p.y * cos, p.z) for p in points]


def circle_points(x: int, y: int, r: int) -> list[tuple[int, int]]:
    """Return the pixels of a circle in drawing order (midpoint algorithm)."""
    points = [(x, y + r), (x, y - r), (x + r, y), (x - r, y)]
    xi, yi, d = 0, r, 3 - 2 * r
    while xi <= yi:
        if d > 0:
            d, yi = d + 4 * (xi - yi) + 10, yi - 1
        else:
            d += 4 * xi + 6
        xi += 1
        points += [
            (x + xi, y + yi), (x - xi, y + yi), (x + xi, y - yi), (x - xi, y - yi),
            (x + yi, y + xi), (x - yi, y + xi), (x + yi, y - xi), (x - yi, y - xi),
        ]
    return points


def build_antiprism() -> tuple[list[Point3], list[list[int]]]:
    """Build the twelve-vertex closed mesh: a zig-zag ring capped by two apexes."""
    fi = 2 * math.pi / 10
    cos, sin = math.cos(fi), math.sin(fi)
    verts = [Point3(x=100, z=50)]
    for _ in range(9):
        p = verts[-1]
        verts.append(Point3(p.x * cos - p.y * sin, p.x * sin + p.y * cos, -p.z))
    facets = [
        [i, (i + 1) % 10, (i + 2) % 10] if i % 2 == 0 else [(i + 2) % 10, (i + 1) % 10, i]
        for i in range(10)
    ]
    cap = (50 * math.sqrt(5) - 1) / 2 + 50
    verts += [Point3(z=cap), Point3(z=-cap)]
    for i in range(0, 10, 2):
        facets.append([10, i, (i + 2) % 10])
        facets.append([(i + 3) % 10, i + 1, 11])
    return verts, facets


def visible_facets(
    verts: Sequence[Point3],
    facets: Sequence[Sequence[int]],
    offset: Point3 = Point3(z=300),
) -> list[Sequence[int]]:
    """Return the facets that face the viewer once the mesh is moved by ``offset``."""
    visible = []
    for facet in facets:
        a = verts[facet[2]].sub(verts[facet[1]])
        b = verts[facet[0]].sub(verts[facet[1]])
        normal = a.cross(b)
        if verts[facet[0]].add(offset).dot(normal) < 0:
            visible.append(facet)
    return visible


def project(
    k: float, dx: float, dy: float, a: Point3, b: Point3
) -> tuple[tuple[float, float], tuple[float, float]]:
    """Centrally project a segment onto the screen, shifted by (dx, dy)."""
    return (
        (k * a.x / a.z + dx, k * a.y / a.z + dy),
        (k * b.x / b.z + dx, k * b.y / b.z + dy),
    )