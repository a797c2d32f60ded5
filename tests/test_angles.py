import math

import pytest

from quadsim.angles import CameraControls, angle_lerp, short_angle_dist
from quadsim.keys import InputState, Key


def test_short_way_round():
    assert short_angle_dist(0.0, 270.0) == pytest.approx(-90.0)
    assert short_angle_dist(350.0, 10.0) == pytest.approx(20.0)


@pytest.mark.parametrize("a0, a1", [(0.0, 90.0), (10.0, 200.0), (300.0, 40.0), (45.0, 45.0)])
def test_distance_is_short_and_consistent(a0, a1):
    d = short_angle_dist(a0, a1)
    assert -180.0 <= d <= 180.0
    reached = math.fmod(a0 + d - a1, 360.0)
    assert min(abs(reached), 360.0 - abs(reached)) == pytest.approx(0.0, abs=1e-9)


def test_lerp_endpoints():
    assert angle_lerp(350.0, 10.0, 0.0) == pytest.approx(350.0)
    assert angle_lerp(350.0, 10.0, 1.0) == pytest.approx(350.0 + short_angle_dist(350.0, 10.0))


def test_keys_pan_target_and_offset():
    controls = CameraControls()
    quit_requested = controls.apply_keys(InputState.of([Key.W, Key.A, Key.RIGHT, Key.UP]))
    assert quit_requested is False
    assert controls.target.y == pytest.approx(-0.1)
    assert controls.target.x == pytest.approx(0.1)
    assert controls.offset.x == pytest.approx(0.1)
    assert controls.offset.y == pytest.approx(0.1)


def test_quit_keys():
    assert CameraControls().apply_keys(InputState.of([Key.Q])) is True
    assert CameraControls().apply_keys(InputState.of([Key.ESCAPE])) is True


def test_wheel_rotates_and_wraps():
    controls = CameraControls()
    controls.apply_wheel(1.0, False)
    assert controls.rotation == pytest.approx(10.0)
    controls.apply_wheel(-2.0, False)
    assert controls.rotation == pytest.approx(350.0)


def test_ctrl_wheel_zooms():
    controls = CameraControls()
    controls.apply_wheel(1.0, True)
    assert controls.zoom == pytest.approx(1.1)
    assert controls.rotation == 0.0
    controls.apply_wheel(-1.0, True)
    assert controls.zoom == pytest.approx(1.0)


def test_zero_wheel_changes_nothing():
    controls = CameraControls()
    controls.apply_wheel(0.0, True)
    controls.apply_wheel(0.0, False)
    assert controls.zoom == 1.0
    assert controls.rotation == 0.0


def test_smooth_rotation_converges():
    controls = CameraControls(rotation=90.0)
    previous_gap = 90.0
    for _ in range(200):
        controls.update()
        gap = abs(controls.rotation - controls.smooth_rotation)
        assert gap <= previous_gap
        previous_gap = gap
    assert controls.smooth_rotation == pytest.approx(90.0, abs=1e-6)


def test_describe_initial_state():
    lines = CameraControls().describe()
    assert lines[0] == "target (WASD keys) = (+0.00, +0.00)"
    assert lines[1] == "rotation (mouse wheel) = 0 degrees"
    assert lines[2] == "zoom (ctrl + mouse wheel) = 1.00"
    assert lines[3] == "offset (arrow keys) = (+0.00, +0.00)"