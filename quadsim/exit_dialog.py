"""A confirm-before-quit dialog."""

from __future__ import annotations

from .geometry import Vec2

DIALOG_WIDTH = 200.0
DIALOG_HEIGHT = 70.0
QUESTION = "Do you really want to quit?"


def dialog_position(
    screen_w: float,
    screen_h: float,
    dialog_w: float = DIALOG_WIDTH,
    dialog_h: float = DIALOG_HEIGHT,
) -> Vec2:
    """Top-left corner that centres the dialog on the screen."""
    return Vec2(screen_w, screen_h) / 2.0 - Vec2(dialog_w, dialog_h) / 2.0


class ExitDialog:
    """Whether the dialog is open and whether the user chose to leave."""

    def __init__(self) -> None:
        self.visible = False
        self.user_decided_to_exit = False

    def request_quit(self) -> None:
        """The window was asked to close: show the dialog."""
        self.visible = True

    def answer(self, yes: bool) -> None:
        """Press Yes or No in the open dialog."""
        if not self.visible:
            raise RuntimeError("the exit dialog is not shown")
        if yes:
            self.user_decided_to_exit = True
        else:
            self.visible = False

    def should_exit(self) -> bool:
        return self.user_decided_to_exit