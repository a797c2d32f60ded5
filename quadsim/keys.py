"""Keyboard state and the arrow-key ball."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable


class Key(Enum):
    RIGHT = auto()
    LEFT = auto()
    UP = auto()
    DOWN = auto()
    SPACE = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    LEFT_CONTROL = auto()
    Q = auto()
    W = auto()
    A = auto()
    S = auto()
    D = auto()


@dataclass
class InputState:
    """The set of keys currently held down."""

    down: set[Key] = field(default_factory=set)

    def __post_init__(self) -> None:
        self.down = set(self.down)

    @classmethod
    def of(cls, keys: Iterable[Key]) -> InputState:
        return cls(set(keys))

    def press(self, key: Key) -> None:
        self.down.add(key)

    def release(self, key: Key) -> None:
        self.down.discard(key)

    def is_down(self, key: Key) -> bool:
        return key in self.down


@dataclass
class ArrowBall:
    """A ball that moves one unit per step for each arrow key held."""

    x: float
    y: float

    STEP = 1.0

    def step(self, keys: InputState) -> None:
        if keys.is_down(Key.RIGHT):
            self.x += self.STEP
        if keys.is_down(Key.LEFT):
            self.x -= self.STEP
        if keys.is_down(Key.DOWN):
            self.y += self.STEP
        if keys.is_down(Key.UP):
            self.y -= self.STEP