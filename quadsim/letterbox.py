"""Scaling a fixed-size virtual screen into a window with letterboxing."""

from __future__ import annotations

from .geometry import Vec2

VIRTUAL_WIDTH = 1280.0
VIRTUAL_HEIGHT = 720.0


def letterbox_scale(
    screen_w: float,
    screen_h: float,
    virtual_w: float = VIRTUAL_WIDTH,
    virtual_h: float = VIRTUAL_HEIGHT,
) -> float:
    """Largest scale at which the virtual screen fits in the window."""
    if virtual_w <= 0 or virtual_h <= 0:
        raise ValueError("virtual screen dimensions must be positive")
    return min(screen_w / virtual_w, screen_h / virtual_h)


def letterbox_origin(
    screen_w: float,
    screen_h: float,
    virtual_w: float = VIRTUAL_WIDTH,
    virtual_h: float = VIRTUAL_HEIGHT,
) -> Vec2:
    """Window position of the scaled virtual screen's top-left corner."""
    scale = letterbox_scale(screen_w, screen_h, virtual_w, virtual_h)
    return Vec2(
        (screen_w - virtual_w * scale) * 0.5,
        (screen_h - virtual_h * scale) * 0.5,
    )


def virtual_mouse(
    mouse: Vec2,
    screen_w: float,
    screen_h: float,
    virtual_w: float = VIRTUAL_WIDTH,
    virtual_h: float = VIRTUAL_HEIGHT,
) -> Vec2:
    """Map a window mouse position into virtual-screen coordinates."""
    scale = letterbox_scale(screen_w, screen_h, virtual_w, virtual_h)
    if scale == 0:
        raise ValueError("window has no area to draw into")
    origin = letterbox_origin(screen_w, screen_h, virtual_w, virtual_h)
    return (mouse - origin) / scale