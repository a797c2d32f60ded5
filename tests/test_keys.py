from quadsim.keys import ArrowBall, InputState, Key


def test_press_and_release():
    state = InputState()
    assert not state.is_down(Key.SPACE)
    state.press(Key.SPACE)
    assert state.is_down(Key.SPACE)
    state.release(Key.SPACE)
    assert not state.is_down(Key.SPACE)


def test_release_of_unpressed_key_is_harmless():
    state = InputState({Key.UP})
    state.release(Key.DOWN)
    assert state.down == {Key.UP}


def test_of_builds_state():
    state = InputState.of([Key.A, Key.D])
    assert state.is_down(Key.A)
    assert state.is_down(Key.D)
    assert not state.is_down(Key.W)


def test_ball_moves_right_and_down():
    ball = ArrowBall(10.0, 20.0)
    ball.step(InputState({Key.RIGHT, Key.DOWN}))
    assert (ball.x, ball.y) == (11.0, 21.0)


def test_ball_opposite_keys_cancel():
    ball = ArrowBall(5.0, 5.0)
    ball.step(InputState({Key.RIGHT, Key.LEFT, Key.UP, Key.DOWN}))
    assert (ball.x, ball.y) == (5.0, 5.0)


def test_ball_steps_accumulate():
    ball = ArrowBall(0.0, 0.0)
    keys = InputState({Key.LEFT, Key.UP})
    for _ in range(3):
        ball.step(keys)
    assert (ball.x, ball.y) == (-3.0, -3.0)


def test_ball_idle_without_keys():
    ball = ArrowBall(1.0, 2.0)
    ball.step(InputState())
    assert (ball.x, ball.y) == (1.0, 2.0)