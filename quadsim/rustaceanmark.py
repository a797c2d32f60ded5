"""A sprite-bouncing benchmark: many crabs moving and bouncing off the edges."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .geometry import Vec2
from .particle_config import Color

SPAWN_BATCH = 100
_SPEED_RANGE = 250.0
_FRAMES_PER_SECOND = 60.0


@dataclass
class Rustacean:
    pos: Vec2
    speed: Vec2
    color: Color


class Rustaceanmark:
    """All the bouncing sprites on a screen of the given size."""

    def __init__(
        self,
        width: float,
        height: float,
        sprite_w: float,
        sprite_h: float,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.sprite_w = sprite_w
        self.sprite_h = sprite_h
        self._rng = rng if rng is not None else random.Random()
        self.rustaceans: list[Rustacean] = []

    def __len__(self) -> int:
        return len(self.rustaceans)

    def _random_speed(self) -> float:
        return self._rng.uniform(-_SPEED_RANGE, _SPEED_RANGE) / _FRAMES_PER_SECOND

    def spawn(self, pos: Vec2) -> None:
        """Add a batch of sprites at ``pos`` with random speeds and tints."""
        rng = self._rng
        for _ in range(SPAWN_BATCH):
            color = Color(
                rng.randrange(50, 240) / 255.0,
                rng.randrange(80, 240) / 255.0,
                rng.randrange(100, 240) / 255.0,
                1.0,
            )
            speed = Vec2(self._random_speed(), self._random_speed())
            self.rustaceans.append(Rustacean(pos, speed, color))

    def step(self) -> None:
        """Move every sprite one frame, bouncing its centre off the edges."""
        half_w = self.sprite_w / 2.0
        half_h = self.sprite_h / 2.0
        for crab in self.rustaceans:
            crab.pos = crab.pos + crab.speed
            center_x = crab.pos.x + half_w
            center_y = crab.pos.y + half_h
            sx, sy = crab.speed
            if center_x > self.width or center_x < 0.0:
                sx = -sx
            if center_y > self.height or center_y < 0.0:
                sy = -sy
            crab.speed = Vec2(sx, sy)