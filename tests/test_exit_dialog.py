import pytest

from quadsim.exit_dialog import DIALOG_HEIGHT, DIALOG_WIDTH, ExitDialog, dialog_position
from quadsim.geometry import Vec2


def test_dialog_is_centred():
    pos = dialog_position(800.0, 600.0, 200.0, 70.0)
    assert pos + Vec2(100.0, 35.0) == Vec2(400.0, 300.0)


def test_default_size_centres():
    pos = dialog_position(1000.0, 500.0)
    assert pos + Vec2(DIALOG_WIDTH, DIALOG_HEIGHT) / 2.0 == Vec2(500.0, 250.0)


def test_starts_hidden():
    dialog = ExitDialog()
    assert not dialog.visible
    assert not dialog.should_exit()


def test_answer_without_dialog_fails():
    with pytest.raises(RuntimeError):
        ExitDialog().answer(True)


def test_yes_exits():
    dialog = ExitDialog()
    dialog.request_quit()
    assert dialog.visible
    dialog.answer(True)
    assert dialog.should_exit()


def test_no_closes_dialog():
    dialog = ExitDialog()
    dialog.request_quit()
    dialog.answer(False)
    assert not dialog.visible
    assert not dialog.should_exit()
    with pytest.raises(RuntimeError):
        dialog.answer(True)