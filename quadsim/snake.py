"""Grid snake game logic."""

from __future__ import annotations

import random
from collections import deque

from .keys import InputState, Key

Point = tuple[int, int]

UP: Point = (0, -1)
DOWN: Point = (0, 1)
RIGHT: Point = (1, 0)
LEFT: Point = (-1, 0)

_START_SPEED = 0.3
_FRUIT_SCORE = 100
_SPEEDUP = 0.9


class SnakeGame:
    """State of a snake game on a square grid, advanced by wall-clock time."""

    def __init__(
        self,
        rng: random.Random | None = None,
        now: float = 0.0,
        squares: int = 16,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.squares = squares
        self.restart(now)

    def _random_cell(self) -> Point:
        x = self._rng.randrange(self.squares)
        y = self._rng.randrange(self.squares)
        return (x, y)

    def restart(self, now: float) -> None:
        """Reset everything to a fresh game started at ``now``."""
        self.head: Point = (0, 0)
        self.direction: Point = RIGHT
        self.body: deque[Point] = deque()
        self.fruit: Point = self._random_cell()
        self.score = 0
        self.speed = _START_SPEED
        self.last_update = now
        self.navigation_lock = False
        self.game_over = False

    def steer(self, keys: InputState) -> None:
        """Turn according to the keys; one turn per tick, no reversing."""
        if self.game_over or self.navigation_lock:
            return
        for key, heading, opposite in (
            (Key.RIGHT, RIGHT, LEFT),
            (Key.LEFT, LEFT, RIGHT),
            (Key.UP, UP, DOWN),
            (Key.DOWN, DOWN, UP),
        ):
            if keys.is_down(key) and self.direction != opposite:
                self.direction = heading
                self.navigation_lock = True
                return

    def update(self, now: float) -> bool:
        """Advance one cell if enough time has passed; True if it moved."""
        if self.game_over or now - self.last_update <= self.speed:
            return False
        self.last_update = now
        self.body.appendleft(self.head)
        self.head = (self.head[0] + self.direction[0], self.head[1] + self.direction[1])
        if self.head == self.fruit:
            self.fruit = self._random_cell()
            self.score += _FRUIT_SCORE
            self.speed *= _SPEEDUP
        else:
            self.body.pop()

        x, y = self.head
        if not (0 <= x < self.squares and 0 <= y < self.squares):
            self.game_over = True
        if self.head in self.body:
            self.game_over = True
        self.navigation_lock = False
        return True