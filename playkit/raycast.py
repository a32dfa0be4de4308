"""Grid ray casting with the digital differential analyser."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Protocol

from playkit.vec2 import Vec2


class _Grid(Protocol):
    def empty_at(self, row: int, col: int) -> bool: ...


@dataclass(frozen=True)
class Hit:
    """Distance along the ray to a wall, and whether a horizontal grid line was hit."""

    distance: float
    vertical_side: bool


def _inverse_abs(value: float) -> float:
    return math.inf if value == 0 else abs(1 / value)


def dda_params(pos: Vec2, direction: Vec2) -> tuple[Vec2, Vec2, int, int]:
    """Return the first side distances, per-cell distances and column/row steps."""
    len_x = _inverse_abs(direction.x)
    if direction.x < 0:
        dx = -1
        dist_x = (pos.x - math.trunc(pos.x)) * len_x
    else:
        dx = 1
        dist_x = (math.trunc(pos.x + 1) - pos.x) * len_x
    len_y = _inverse_abs(direction.y)
    if direction.y < 0:
        dy = -1
        dist_y = (pos.y - math.trunc(pos.y)) * len_y
    else:
        dy = 1
        dist_y = (math.trunc(pos.y + 1) - pos.y) * len_y
    return Vec2(dist_x, dist_y), Vec2(len_x, len_y), dx, dy


def solve(world: _Grid, pos: Vec2, direction: Vec2) -> Hit:
    """Walk the grid from ``pos`` along ``direction`` until a wall is met."""
    dist, step, dcol, drow = dda_params(pos, direction)
    dist_x, dist_y = dist.x, dist.y
    col, row = int(pos.x), int(pos.y)
    while True:
        if dist_x < dist_y:
            distance = dist_x
            dist_x += step.x
            col += dcol
            vertical = False
        else:
            distance = dist_y
            dist_y += step.y
            row += drow
            vertical = True
        if not world.empty_at(row, col):
            return Hit(distance, vertical)


def fov(
    world: _Grid, pos: Vec2, direction: Vec2, screen_width: int
) -> Iterator[tuple[Vec2, int, Hit]]:
    """Cast one ray per screen column, yielding (ray direction, column, hit)."""
    for x in range(screen_width):
        proj = 2 * x / screen_width - 1
        ray = direction.add(Vec2(direction.y * proj, -direction.x * proj))
        yield ray, x, solve(world, pos, ray)