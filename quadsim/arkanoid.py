"""Brick-breaker game logic in a 20x20 world."""

from __future__ import annotations

from .geometry import Rect
from .keys import InputState, Key


class Arkanoid:
    """Paddle, ball and a wall of blocks, advanced by frame time."""

    BLOCKS_W = 10
    BLOCKS_H = 10
    SCR_W = 20.0
    SCR_H = 20.0
    PLATFORM_WIDTH = 5.0
    PLATFORM_HEIGHT = 0.2
    PLATFORM_SPEED = 3.0
    BALL_RADIUS = 0.2
    BLOCKS_AREA_HEIGHT = 7.0

    def __init__(self) -> None:
        self.blocks: list[list[bool]] = [
            [True] * self.BLOCKS_W for _ in range(self.BLOCKS_H)
        ]
        self.ball_x = 12.0
        self.ball_y = 7.0
        self.dx = 3.5
        self.dy = -3.5
        self.platform_x = 10.0
        self.stick = True

    @property
    def block_w(self) -> float:
        return self.SCR_W / self.BLOCKS_W

    @property
    def block_h(self) -> float:
        return self.BLOCKS_AREA_HEIGHT / self.BLOCKS_H

    def _block_origin(self, i: int, j: int) -> tuple[float, float]:
        return (i * self.block_w + 0.05, j * self.block_h + 0.05)

    def step(self, dt: float, keys: InputState) -> None:
        """Advance the game by ``dt`` seconds with the given keys held."""
        half_platform = self.PLATFORM_WIDTH / 2.0
        if keys.is_down(Key.RIGHT) and self.platform_x < self.SCR_W - half_platform:
            self.platform_x += self.PLATFORM_SPEED * dt
        if keys.is_down(Key.LEFT) and self.platform_x > half_platform:
            self.platform_x -= self.PLATFORM_SPEED * dt

        if not self.stick:
            self.ball_x += self.dx * dt
            self.ball_y += self.dy * dt
        else:
            self.ball_x = self.platform_x
            self.ball_y = self.SCR_H - 0.5
            self.stick = not keys.is_down(Key.SPACE)

        if self.ball_x <= 0.0 or self.ball_x > self.SCR_W:
            self.dx = -self.dx
        on_platform = (
            self.ball_y > self.SCR_H - self.PLATFORM_HEIGHT - 0.15 / 2.0
            and self.platform_x - half_platform <= self.ball_x <= self.platform_x + half_platform
        )
        if self.ball_y <= 0.0 or on_platform:
            self.dy = -self.dy
        if self.ball_y >= self.SCR_H:
            self.ball_y = 10.0
            self.dy = -abs(self.dy)
            self.stick = True

        for j, row in enumerate(self.blocks):
            for i, alive in enumerate(row):
                if not alive:
                    continue
                block_x, block_y = self._block_origin(i, j)
                if (
                    block_x <= self.ball_x < block_x + self.block_w
                    and block_y <= self.ball_y < block_y + self.block_h
                ):
                    self.dy = -self.dy
                    row[i] = False

    def block_rects(self) -> list[Rect]:
        """Drawn rectangles of the blocks still standing, row by row."""
        rects = []
        for j, row in enumerate(self.blocks):
            for i, alive in enumerate(row):
                if alive:
                    x, y = self._block_origin(i, j)
                    rects.append(Rect(x, y, self.block_w - 0.1, self.block_h - 0.1))
        return rects