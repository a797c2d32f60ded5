"""Asteroids game logic: a ship, bullets and splitting rocks on a wrapping screen."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from .geometry import Vec2
from .keys import InputState, Key

SHIP_HEIGHT = 25.0
SHIP_BASE = 22.0
MAX_SPEED = 5.0
BULLET_SPEED = 7.0
BULLET_LIFETIME = 1.5
SHOT_COOLDOWN = 0.5
TURN_STEP = 5.0
ASTEROID_COUNT = 10

WIN_TEXT = "You Win!. Press [enter] to play again."
LOSE_TEXT = "Game Over. Press [enter] to play again."


def wrap_around(v: Vec2, width: float, height: float) -> Vec2:
    """Move a point that left the screen to the opposite edge."""
    x, y = v.x, v.y
    if x > width:
        x = 0.0
    if x < 0.0:
        x = width
    if y > height:
        y = 0.0
    if y < 0.0:
        y = height
    return Vec2(x, y)


@dataclass
class Ship:
    pos: Vec2
    rot: float = 0.0
    vel: Vec2 = Vec2(0.0, 0.0)

    def outline(self) -> tuple[Vec2, Vec2, Vec2]:
        """Triangle corners: nose, then the two rear corners."""
        r = math.radians(self.rot)
        s, c = math.sin(r), math.cos(r)
        p = self.pos
        nose = Vec2(p.x + s * SHIP_HEIGHT / 2.0, p.y - c * SHIP_HEIGHT / 2.0)
        left = Vec2(
            p.x - c * SHIP_BASE / 2.0 - s * SHIP_HEIGHT / 2.0,
            p.y - s * SHIP_BASE / 2.0 + c * SHIP_HEIGHT / 2.0,
        )
        right = Vec2(
            p.x + c * SHIP_BASE / 2.0 - s * SHIP_HEIGHT / 2.0,
            p.y + s * SHIP_BASE / 2.0 + c * SHIP_HEIGHT / 2.0,
        )
        return nose, left, right


@dataclass
class Bullet:
    pos: Vec2
    vel: Vec2
    shot_at: float
    collided: bool = False


@dataclass
class Asteroid:
    pos: Vec2
    vel: Vec2
    rot: float
    rot_speed: float
    size: float
    sides: int
    collided: bool = False


class AsteroidsGame:
    """Game state advanced one frame at a time."""

    def __init__(
        self,
        width: float = 800.0,
        height: float = 600.0,
        rng: random.Random | None = None,
        now: float = 0.0,
    ) -> None:
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self.ship = Ship(self._center())
        self.bullets: list[Bullet] = []
        self.asteroids: list[Asteroid] = []
        self.last_shot = now
        self.gameover = False

    def _center(self) -> Vec2:
        return Vec2(self.width / 2.0, self.height / 2.0)

    def _wrap(self, v: Vec2) -> Vec2:
        return wrap_around(v, self.width, self.height)

    def _random_direction(self) -> Vec2:
        while True:
            v = Vec2(self._rng.uniform(-1.0, 1.0), self._rng.uniform(-1.0, 1.0))
            if v.length() > 0.0:
                return v.normalize()

    def restart(self) -> None:
        """Start a new round with a ring of fresh asteroids."""
        self.ship = Ship(self._center())
        self.bullets = []
        self.gameover = False
        short_side = min(self.width, self.height)
        rng = self._rng
        self.asteroids = []
        for _ in range(ASTEROID_COUNT):
            pos = self._center() + self._random_direction() * short_side / 2.0
            vel = Vec2(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0))
            self.asteroids.append(
                Asteroid(
                    pos=pos,
                    vel=vel,
                    rot=0.0,
                    rot_speed=rng.uniform(-2.0, 2.0),
                    size=short_side / 10.0,
                    sides=rng.randrange(3, 8),
                )
            )

    def _fragment(self, asteroid: Asteroid, direction: Vec2) -> Asteroid:
        rng = self._rng
        return Asteroid(
            pos=asteroid.pos,
            vel=direction.normalize() * rng.uniform(1.0, 3.0),
            rot=rng.uniform(0.0, 360.0),
            rot_speed=rng.uniform(-2.0, 2.0),
            size=asteroid.size * 0.8,
            sides=asteroid.sides - 1,
        )

    def step(self, now: float, keys: InputState) -> None:
        """Advance one frame at time ``now`` with the given keys held."""
        if self.gameover:
            if keys.is_down(Key.ENTER):
                self.restart()
            return

        ship = self.ship
        rotation = math.radians(ship.rot)
        heading = Vec2(math.sin(rotation), -math.cos(rotation))

        acc = -ship.vel / 100.0
        if keys.is_down(Key.UP):
            acc = heading / 3.0

        if keys.is_down(Key.SPACE) and now - self.last_shot > SHOT_COOLDOWN:
            self.bullets.append(
                Bullet(ship.pos + heading * SHIP_HEIGHT / 2.0, heading * BULLET_SPEED, now)
            )
            self.last_shot = now

        if keys.is_down(Key.RIGHT):
            ship.rot += TURN_STEP
        elif keys.is_down(Key.LEFT):
            ship.rot -= TURN_STEP

        ship.vel = ship.vel + acc
        if ship.vel.length() > MAX_SPEED:
            ship.vel = ship.vel.normalize() * MAX_SPEED
        ship.pos = self._wrap(ship.pos + ship.vel)

        for bullet in self.bullets:
            bullet.pos = bullet.pos + bullet.vel
        for asteroid in self.asteroids:
            asteroid.pos = self._wrap(asteroid.pos + asteroid.vel)
            asteroid.rot += asteroid.rot_speed

        self.bullets = [b for b in self.bullets if b.shot_at + BULLET_LIFETIME > now]

        new_asteroids: list[Asteroid] = []
        for asteroid in self.asteroids:
            if (asteroid.pos - ship.pos).length() < asteroid.size + SHIP_HEIGHT / 3.0:
                self.gameover = True
                break
            for bullet in self.bullets:
                if (asteroid.pos - bullet.pos).length() < asteroid.size:
                    asteroid.collided = True
                    bullet.collided = True
                    if asteroid.sides > 3:
                        new_asteroids.append(
                            self._fragment(asteroid, Vec2(bullet.vel.y, -bullet.vel.x))
                        )
                        new_asteroids.append(
                            self._fragment(asteroid, Vec2(-bullet.vel.y, bullet.vel.x))
                        )
                    break

        self.bullets = [
            b for b in self.bullets if b.shot_at + BULLET_LIFETIME > now and not b.collided
        ]
        self.asteroids = [a for a in self.asteroids if not a.collided] + new_asteroids

        if not self.asteroids:
            self.gameover = True

    def message(self) -> str | None:
        """The end-of-round text, or None while playing."""
        if not self.gameover:
            return None
        return LOSE_TEXT if self.asteroids else WIN_TEXT