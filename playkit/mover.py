"""A moving point with a direction, and keyboard-style controls for it."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from playkit.vec2 import Vec2


class _Grid(Protocol):
    def empty_at(self, row: int, col: int) -> bool: ...


@dataclass(frozen=True)
class Mover:
    """A position and a velocity (which also serves as the facing direction)."""

    pos: Vec2
    velocity: Vec2

    def move(self, dt: float) -> Mover:
        return Mover(self.pos.add(self.velocity.scale(dt)), self.velocity)

    def rotate(self, angle: float) -> Mover:
        return Mover(self.pos, self.velocity.rotate(angle))


def handle_direction(
    pos: Vec2, velocity: Vec2, world: _Grid, dt: float, forward: bool, backward: bool
) -> Vec2:
    """Step forward or backward, sliding along walls one axis at a time."""
    if forward == backward:
        return pos
    step = dt if forward else -dt
    x, y = pos.x, pos.y
    if world.empty_at(int(y + velocity.y * step), int(x)):
        y += velocity.y * step
    if world.empty_at(int(y), int(x + velocity.x * step)):
        x += velocity.x * step
    return Vec2(x, y)


def handle_rotation(velocity: Vec2, dt: float, left: bool, right: bool) -> Vec2:
    """Turn by half a revolution per second; left and right cancel out."""
    step = 0.0
    if left:
        step += dt
    if right:
        step -= dt
    return velocity.rotate(math.pi * step)


def handle_input(
    mover: Mover,
    world: _Grid,
    dt: float,
    forward: bool,
    backward: bool,
    left: bool,
    right: bool,
) -> Mover:
    """Apply one frame of input lasting ``dt`` seconds."""
    return Mover(
        pos=handle_direction(mover.pos, mover.velocity, world, dt, forward, backward),
        velocity=handle_rotation(mover.velocity, dt, left, right),
    )