"""Rigid-body collisions between axis-aligned boxes and discs, with impulse resolution."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Union

from playkit.vector import Vector

EPSILON = 1e-10
RESTITUTION = 1.0
CORRECTION_PERCENT = 0.2
MIN_PENETRATION = 0.02

Contact = tuple[Vector, float]


def is_zero(value: float) -> bool:
    """Report whether ``value`` lies strictly within epsilon of zero."""
    if value > 0:
        return value < EPSILON
    return value > -EPSILON


def minmax(a: float, b: float) -> tuple[float, float]:
    """Return the two values ordered as (smaller, larger)."""
    return (a, b) if a <= b else (b, a)


def find_closest(lo: float, hi: float, value: float) -> float:
    """Clamp ``value`` into the range [lo, hi]."""
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def invert_mass(mass: float) -> float:
    """Return 1/mass, treating a zero mass as infinitely heavy."""
    return 0.0 if mass == 0 else 1 / mass


@dataclass(frozen=True)
class Aabb:
    """An axis-aligned bounding box given by its minimum and maximum corners."""

    lo: Vector
    hi: Vector

    def intersects(self, other: Aabb) -> bool:
        """Report whether the boxes overlap; touching edges count."""
        return (
            self.lo.x <= other.hi.x
            and other.lo.x <= self.hi.x
            and self.lo.y <= other.hi.y
            and other.lo.y <= self.hi.y
        )


@dataclass(eq=False)
class Box:
    """A box with corners relative to its centre ``r``, turned by ``theta``."""

    pts: Aabb
    r: Vector = Vector()
    theta: float = 0.0

    @classmethod
    def of_size(cls, width: float, height: float, r: Vector = Vector()) -> Box:
        hw, hh = width / 2, height / 2
        return cls(Aabb(Vector(-hw, -hh), Vector(hw, hh)), r, 0.0)

    @property
    def pos(self) -> Vector:
        return self.r

    def aabb(self) -> Aabb:
        """Return the bounding box of the rotated corners in world coordinates."""
        lo, hi = self.pts.lo, self.pts.hi
        corners = [lo, Vector(lo.x, hi.y), hi, Vector(hi.x, lo.y)]
        rotated = [p.rotate(self.theta) for p in corners]
        xs = [p.x for p in rotated]
        ys = [p.y for p in rotated]
        return Aabb(Vector(min(xs), min(ys)).add(self.r), Vector(max(xs), max(ys)).add(self.r))

    def translate(self, d: Vector) -> None:
        self.r = self.r.add(d)

    def rotate(self, theta: float) -> None:
        self.theta += theta

    def change_origin(self, r: Vector, theta: float) -> Box:
        """Return this box expressed in a frame at ``r`` turned by ``theta``."""
        return Box(self.pts, self.r.sub(r).rotate(-theta), self.theta - theta)


@dataclass(eq=False)
class Disc:
    """A circle with radius ``rad`` centred at ``r``; it looks the same at any angle."""

    rad: float
    r: Vector = Vector()

    @property
    def pos(self) -> Vector:
        return self.r

    def aabb(self) -> Aabb:
        return Aabb(
            Vector(-self.rad, -self.rad).add(self.r),
            Vector(self.rad, self.rad).add(self.r),
        )

    def translate(self, d: Vector) -> None:
        self.r = self.r.add(d)


Shape = Union[Box, Disc]


def collide_box_with_disc(box: Box, disc: Disc) -> Optional[Contact]:
    """Return (normal from box to disc, penetration), or None; box rotation is ignored."""
    diag = box.pts.hi.sub(box.pts.lo)
    half_w, half_h = diag.x / 2, diag.y / 2
    dist = disc.r.sub(box.r)
    closest = Vector(find_closest(-half_w, half_w, dist.x), find_closest(-half_h, half_h, dist.y))
    normal = dist.sub(closest)
    if normal.len2() > disc.rad * disc.rad:
        return None
    pen = abs(disc.rad - disc.r.sub(closest.add(box.r)).length())
    return normal.norm(), pen


def collide_boxes(b1: Box, b2: Box) -> Optional[Contact]:
    """Return (axis normal from b1 to b2, penetration) for overlapping boxes, or None."""
    if not b1.aabb().intersects(b2.aabb()):
        return None
    n = b2.r.sub(b1.r)
    ext1 = b1.pts.hi.sub(b1.pts.lo)
    ext2 = b2.pts.hi.sub(b2.pts.lo)
    x_overlap = (ext1.x + ext2.x) / 2 - abs(n.x)
    if x_overlap < 0:
        return None
    y_overlap = (ext1.y + ext2.y) / 2 - abs(n.y)
    if y_overlap < 0:
        return None
    if y_overlap < x_overlap:
        return (Vector(0, -1) if n.y < 0 else Vector(0, 1)), y_overlap
    return (Vector(-1, 0) if n.x < 0 else Vector(1, 0)), x_overlap


def collide_discs(d1: Disc, d2: Disc) -> Optional[Contact]:
    """Return (normal from d1 to d2, penetration) for touching discs, or None."""
    if not d1.aabb().intersects(d2.aabb()):
        return None
    radii = d1.rad + d2.rad
    n = d2.r.sub(d1.r)
    dist2 = n.len2()
    if radii * radii < dist2:
        return None
    return n.norm(), radii - math.sqrt(dist2)


@dataclass(eq=False)
class RigidBody:
    """A shape moving with constant velocity; a zero mass means immovable."""

    shape: Shape
    velocity: Vector = Vector()
    mass: float = 0.0

    def update(self) -> None:
        self.shape.translate(self.velocity)


@dataclass
class _BodyState:
    dv: Vector = Vector()
    dpos: Vector = Vector()


@dataclass
class _Collision:
    normal: Vector
    penetration: float


class CollisionResolver:
    """Collects collisions during a tick and resolves them with impulses."""

    def __init__(self) -> None:
        self._bodies: dict[RigidBody, _BodyState] = {}
        self._collisions: dict[RigidBody, dict[RigidBody, _Collision]] = {}

    def add_collision(
        self, b1: RigidBody, b2: RigidBody, normal: Vector, penetration: float
    ) -> None:
        """Record a collision; a pair already recorded (in either order) is kept as is."""
        collisions = self._collisions.get(b1)
        if collisions is None:
            collisions = self._collisions.get(b2)
            if collisions is not None:
                b1, b2 = b2, b1
            else:
                collisions = self._collisions.setdefault(b1, {})
        collisions.setdefault(b2, _Collision(normal, penetration))

    def _state(self, body: RigidBody) -> _BodyState:
        return self._bodies.setdefault(body, _BodyState())

    def _resolve_pair(self, b1: RigidBody, b2: RigidBody, c: _Collision) -> None:
        inv1, inv2 = invert_mass(b1.mass), invert_mass(b2.mass)
        inv_sum = inv1 + inv2
        if inv_sum == 0:
            return
        du = b2.velocity.dot(c.normal) - b1.velocity.dot(c.normal)
        if du > 0:
            return
        j = du * (1 + RESTITUTION) / inv_sum
        if is_zero(j):
            return
        _, k = minmax(0, c.penetration - MIN_PENETRATION)
        k = k / inv_sum * CORRECTION_PERCENT
        correction = c.normal.scale(k)

        s1 = self._state(b1)
        s1.dv = s1.dv.add(c.normal.scale(j * inv1))
        s1.dpos = s1.dpos.sub(correction.scale(inv2))

        s2 = self._state(b2)
        s2.dv = s2.dv.sub(c.normal.scale(j * inv2))
        s2.dpos = s2.dpos.add(correction.scale(inv2))

    def resolve(self) -> None:
        """Apply impulses and position corrections, then forget this tick's collisions."""
        for b1, collisions in self._collisions.items():
            for b2, collision in collisions.items():
                self._resolve_pair(b1, b2, collision)
        for body, state in self._bodies.items():
            body.shape.translate(state.dpos)
            body.velocity = body.velocity.add(state.dv)
        self._bodies = {}
        self._collisions = {}


def _check(s1: Shape, s2: Shape) -> Optional[Contact]:
    if not s1.aabb().intersects(s2.aabb()):
        return None
    if isinstance(s1, Disc):
        if isinstance(s2, Disc):
            return collide_discs(s1, s2)
        contact = collide_box_with_disc(s2, s1)
        return None if contact is None else (contact[0].scale(-1), contact[1])
    if isinstance(s2, Box):
        return collide_boxes(s1, s2)
    return collide_box_with_disc(s1, s2)


@dataclass
class PhysicsWorld:
    """Rigid bodies that move, collide and bounce once per ``step``."""

    bodies: list[RigidBody] = field(default_factory=list)
    resolver: CollisionResolver = field(default_factory=CollisionResolver)

    def add_rigid_body(self, body: RigidBody) -> None:
        self.bodies.append(body)

    def step(self) -> None:
        """Detect collisions, move every body, then resolve the collisions."""
        for a in self.bodies:
            for b in self.bodies:
                if a is b:
                    continue
                contact = _check(a.shape, b.shape)
                if contact is not None:
                    self.resolver.add_collision(a, b, *contact)
        for body in self.bodies:
            body.update()
        self.resolver.resolve()