import math

import pytest

from quadsim.geometry import Vec2
from quadsim.particle_config import BlendMode
from quadsim.presets import explosion, fire, fountain, smoke


def test_explosion():
    config = explosion()
    assert config.one_shot is True
    assert config.emitting is False
    assert config.amount == 30
    assert config.lifetime == 0.3
    assert config.explosiveness == 0.95
    assert config.initial_direction_spread == pytest.approx(2.0 * math.pi)
    assert config.gravity == Vec2(0.0, -1000.0)
    assert config.blend_mode is BlendMode.ADDITIVE
    assert config.atlas.start_index == 8
    assert config.atlas.end_index == config.atlas.n * config.atlas.m


def test_smoke():
    config = smoke()
    assert config.lifetime == 0.8
    assert config.amount == 20
    assert config.initial_direction_spread == 0.2
    assert (config.atlas.start_index, config.atlas.end_index) == (0, 8)
    assert config.blend_mode is BlendMode.ALPHA
    assert config.emitting is True


def test_fire():
    config = fire()
    assert config.lifetime == 0.4
    assert config.amount == 10
    assert config.initial_velocity == 300.0
    assert config.size == 20.0
    assert config.blend_mode is BlendMode.ADDITIVE
    assert config.atlas.start_index == 8


def test_fountain():
    config = fountain()
    assert config.amount == 5
    assert config.initial_velocity == -50.0
    assert config.size == 2.0
    assert config.size_curve.points == [(0.0, 0.5), (0.5, 1.0), (1.0, 0.0)]
    batched = config.size_curve.batch()
    assert batched.get(0.0) == pytest.approx(0.5)
    assert max(batched.points) == pytest.approx(1.0)


def test_presets_are_independent():
    first = explosion()
    first.emitting = True
    assert explosion().emitting is False