"""A sprite-based firework: explosive shells that burst into shadowed sparks."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Any, Optional

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480
GRAVITY_Y = -200.0
DT = 0.016
SHELL_SHADOW_TICKS = 20
SPARK_SHADOW_TICKS = 10


@dataclass(frozen=True)
class BulletImage:
    """A solid square sprite image."""

    width: int
    height: int


EXPLOSIVE_IMAGE = BulletImage(2, 2)
NORMAL_IMAGE = BulletImage(1, 1)


@dataclass(eq=False)
class Bullet:
    """A coloured point falling under gravity; gone once below the ground."""

    x: float = 0.0
    y: float = 0.0
    image: Any = None
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0
    enabled: bool = True
    vx: float = 0.0
    vy: float = 0.0

    def active(self) -> bool:
        return self.y >= 0 and self.enabled

    def pos(self) -> tuple[float, float]:
        return self.x, self.y

    def color(self) -> tuple[float, float, float, float]:
        return self.r, self.g, self.b, self.a

    def update(self, world: SparkWorld, dt: float) -> None:
        if self.y < 0:
            return
        self.vy += GRAVITY_Y * dt
        self.x += self.vx * dt
        self.y += self.vy * dt


@dataclass(eq=False)
class Explosive(Bullet):
    """A bullet that bursts into sparks when its tick counter runs out."""

    ticks: int = 0

    def active(self) -> bool:
        return self.ticks >= 0

    def update(self, world: SparkWorld, dt: float) -> None:
        self.ticks -= 1
        if self.ticks <= 0:
            self.explode(world)
            return
        super().update(world, dt)

    def explode(self, world: SparkWorld) -> None:
        """Add a random number of shadowed sparks flying out of this bullet."""
        rng = world.rng
        for _ in range(5 + rng.randrange(50)):
            strength = 200 + rng.random() * 100
            angle = rng.random() * 2 * math.pi
            spark = Bullet(
                x=self.x,
                y=self.y,
                image=world.normal_bullet,
                r=self.r,
                g=self.g,
                b=self.b,
                a=self.a,
                enabled=self.enabled,
                vx=self.vx + strength * math.cos(angle),
                vy=self.vy + strength * math.sin(angle),
            )
            world.add(WithShadow(spark, SPARK_SHADOW_TICKS))


class WithShadow:
    """Wraps a sprite and leaves a fading shadow behind it on every update."""

    def __init__(self, sprite: Any, ticks: int) -> None:
        self.sprite = sprite
        self.ticks = ticks

    def active(self) -> bool:
        return self.sprite.active()

    def pos(self) -> tuple[float, float]:
        return self.sprite.pos()

    def color(self) -> tuple[float, float, float, float]:
        return self.sprite.color()

    @property
    def image(self) -> Any:
        return self.sprite.image

    def update(self, world: SparkWorld, dt: float) -> None:
        if self.ticks <= 0:
            return
        x, y = self.pos()
        r, g, b, a = self.color()
        world.add(Shadow(x, y, self.image, r, g, b, a, self.ticks, a / (self.ticks + 1)))
        self.sprite.update(world, dt)


@dataclass(eq=False)
class Shadow:
    """A still copy of a sprite that fades out over ``ticks`` updates."""

    x: float
    y: float
    image: Any
    r: float
    g: float
    b: float
    a: float
    ticks: int
    da: float

    def active(self) -> bool:
        return self.ticks > 0

    def pos(self) -> tuple[float, float]:
        return self.x, self.y

    def color(self) -> tuple[float, float, float, float]:
        return self.r, self.g, self.b, self.a

    def update(self, world: SparkWorld, dt: float) -> None:
        self.ticks -= 1
        self.a -= self.da


def random_shoot_ticks(rng: random.Random) -> int:
    """Return the number of ticks until the next volley."""
    return 200 + rng.randrange(200)


class SparkWorld:
    """All live sprites, advanced with a fixed time step."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        width: float = SCREEN_WIDTH,
        height: float = SCREEN_HEIGHT,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.width = width
        self.height = height
        self.explosive_bullet = EXPLOSIVE_IMAGE
        self.normal_bullet = NORMAL_IMAGE
        self.ticks = 0
        self.shoot_ticks = 0
        self.sprites: dict[Any, None] = {}

    def add(self, sprite: Any) -> None:
        self.sprites[sprite] = None

    def update(self) -> None:
        """Advance one tick: update and prune sprites, and shoot when it is time."""
        for sprite in list(self.sprites):
            if sprite.active():
                sprite.update(self, DT)
            if not sprite.active():
                del self.sprites[sprite]
        self.shoot_ticks -= 1
        if self.shoot_ticks <= 0:
            add_explosive_bullets(self)
            self.shoot_ticks = random_shoot_ticks(self.rng)
        self.ticks += 1


def add_explosive_bullets(world: SparkWorld) -> None:
    """Launch a volley of explosive shells from a random point on the ground."""
    rng = world.rng
    count = 2 + rng.randrange(10)
    shot_x = world.width * rng.random()
    for _ in range(count):
        x = shot_x + rng.random() * 10
        r, g, b = rng.random(), rng.random(), rng.random()
        vx = -50 + rng.random() * 100
        vy = 400 + rng.random() * 50
        ticks = rng.randrange(100) + 100
        shell = Explosive(
            x=x,
            y=0.0,
            image=world.explosive_bullet,
            r=r,
            g=g,
            b=b,
            a=1.0,
            enabled=True,
            vx=vx,
            vy=vy,
            ticks=ticks,
        )
        world.add(WithShadow(shell, SHELL_SHADOW_TICKS))