"""Angle interpolation and the controls of a 2D camera."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

from .geometry import Vec2
from .keys import InputState, Key

_FULL_TURN = 360.0
_PAN_STEP = 0.1
_ROTATION_STEP = 10.0
_ZOOM_FACTOR = 1.1
_SMOOTHING = 0.1


def short_angle_dist(a0: float, a1: float) -> float:
    """Signed shortest rotation, in degrees, from ``a0`` to ``a1``."""
    da = math.fmod(a1 - a0, _FULL_TURN)
    return math.fmod(2.0 * da, _FULL_TURN) - da


def angle_lerp(a0: float, a1: float, t: float) -> float:
    """Interpolate between angles along the shortest way round."""
    return a0 + short_angle_dist(a0, a1) * t


def _display(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


@dataclass
class CameraControls:
    """Target, zoom, rotation and offset of a camera driven by keys and wheel."""

    target: Vec2 = field(default_factory=Vec2)
    zoom: float = 1.0
    rotation: float = 0.0
    smooth_rotation: float = 0.0
    offset: Vec2 = field(default_factory=Vec2)

    def apply_keys(self, keys: InputState) -> bool:
        """Pan the target and offset; True if quitting was requested."""
        tx, ty = self.target
        ox, oy = self.offset
        if keys.is_down(Key.W):
            ty -= _PAN_STEP
        if keys.is_down(Key.S):
            ty += _PAN_STEP
        if keys.is_down(Key.A):
            tx += _PAN_STEP
        if keys.is_down(Key.D):
            tx -= _PAN_STEP
        if keys.is_down(Key.LEFT):
            ox -= _PAN_STEP
        if keys.is_down(Key.RIGHT):
            ox += _PAN_STEP
        if keys.is_down(Key.UP):
            oy += _PAN_STEP
        if keys.is_down(Key.DOWN):
            oy -= _PAN_STEP
        self.target = replace(self.target, x=tx, y=ty)
        self.offset = replace(self.offset, x=ox, y=oy)
        return keys.is_down(Key.Q) or keys.is_down(Key.ESCAPE)

    def apply_wheel(self, y: float, ctrl: bool) -> None:
        """Zoom with control held, otherwise rotate, by wheel amount ``y``."""
        if y == 0.0:
            return
        if ctrl:
            self.zoom *= _ZOOM_FACTOR**y
            return
        rotation = self.rotation + _ROTATION_STEP * y
        if rotation >= _FULL_TURN:
            rotation -= _FULL_TURN
        elif rotation < 0.0:
            rotation += _FULL_TURN
        self.rotation = rotation

    def update(self) -> None:
        """Ease the displayed rotation towards the requested one."""
        self.smooth_rotation = angle_lerp(self.smooth_rotation, self.rotation, _SMOOTHING)

    def describe(self) -> list[str]:
        """Status lines shown over the scene."""
        return [
            f"target (WASD keys) = ({self.target.x:+.2f}, {self.target.y:+.2f})",
            f"rotation (mouse wheel) = {_display(self.rotation)} degrees",
            f"zoom (ctrl + mouse wheel) = {self.zoom:.2f}",
            f"offset (arrow keys) = ({self.offset.x:+.2f}, {self.offset.y:+.2f})",
        ]