import random
from collections import deque

import pytest

from quadsim.keys import InputState, Key
from quadsim.snake import SnakeGame


def new_game(**kwargs):
    game = SnakeGame(random.Random(7), 0.0, **kwargs)
    game.fruit = (10, 10)
    return game


def test_initial_state():
    game = SnakeGame(random.Random(1), 2.0)
    assert game.head == (0, 0)
    assert game.direction == (1, 0)
    assert list(game.body) == []
    assert game.score == 0
    assert game.last_update == 2.0
    assert 0 <= game.fruit[0] < 16 and 0 <= game.fruit[1] < 16


def test_waits_for_interval():
    game = new_game()
    assert game.update(0.2) is False
    assert game.head == (0, 0)


def test_moves_after_interval():
    game = new_game()
    assert game.update(0.31) is True
    assert game.head == (1, 0)
    assert list(game.body) == []
    assert game.last_update == 0.31


def test_eating_fruit_grows_and_speeds_up():
    game = new_game()
    game.fruit = (1, 0)
    game.update(0.31)
    assert game.score == 100
    assert list(game.body) == [(0, 0)]
    assert game.speed < 0.3
    assert 0 <= game.fruit[0] < 16 and 0 <= game.fruit[1] < 16


def test_wall_collision_ends_game():
    game = new_game()
    game.steer(InputState({Key.UP}))
    game.update(0.31)
    assert game.game_over
    assert game.update(10.0) is False


def test_self_collision_ends_game():
    game = new_game()
    game.head = (0, 0)
    game.body = deque([(0, 1), (1, 1), (1, 0), (2, 0)])
    game.update(0.31)
    assert game.head == (1, 0)
    assert game.game_over


def test_cannot_reverse():
    game = new_game()
    game.steer(InputState({Key.LEFT}))
    assert game.direction == (1, 0)
    assert not game.navigation_lock


def test_navigation_lock_until_tick():
    game = new_game()
    game.steer(InputState({Key.DOWN}))
    assert game.direction == (0, 1)
    game.steer(InputState({Key.RIGHT}))
    assert game.direction == (0, 1)
    game.update(0.31)
    assert not game.navigation_lock
    game.steer(InputState({Key.RIGHT}))
    assert game.direction == (1, 0)


def test_steer_priority_follows_key_order():
    game = new_game()
    game.steer(InputState({Key.UP, Key.DOWN}))
    assert game.direction == (0, -1)


def test_smaller_board_edge():
    game = new_game(squares=4)
    game.fruit = (0, 3)
    moved = [game.update(0.31 * step) for step in range(1, 5)]
    assert all(moved)
    assert game.game_over
    assert game.head == (4, 0)


def test_restart_resets_state():
    game = new_game()
    game.steer(InputState({Key.UP}))
    game.update(0.31)
    assert game.game_over
    game.restart(5.0)
    assert not game.game_over
    assert game.head == (0, 0)
    assert game.score == 0
    assert game.speed == pytest.approx(0.3)
    assert game.last_update == 5.0
    assert list(game.body) == []


def test_fruit_stays_on_board_across_seeds():
    for seed in range(20):
        game = SnakeGame(random.Random(seed), 0.0, squares=5)
        assert 0 <= game.fruit[0] < 5
        assert 0 <= game.fruit[1] < 5