from snake.game import update


def test_no_move_before_period(make_state):
    state = make_state([(2, 2)], food=(0, 0))
    assert update(state, 0.1) is False
    assert state.snake == [(2, 2)]
    assert state.move_timer == 0.1


def test_exact_period_does_not_move(make_state):
    state = make_state([(2, 2)], food=(0, 0), move_period=0.25)
    assert update(state, 0.25) is False
    assert state.snake == [(2, 2)]


def test_crossing_period_moves_once_and_resets(make_state):
    state = make_state([(1, 2)], food=(0, 0), move_period=0.2)
    assert update(state, 0.7) is True
    assert state.snake == [(2, 2)]
    # surplus is dropped, not carried over
    assert state.move_timer == 0.0


def test_time_accumulates_across_frames(make_state):
    state = make_state([(1, 2)], food=(0, 0), move_period=0.25)
    moved = [update(state, 0.1) for _ in range(3)]
    assert moved == [False, False, True]
    assert state.snake == [(2, 2)]
    assert state.move_timer == 0.0


def test_update_after_game_over_keeps_state(make_state):
    state = make_state([(4, 2)], food=(0, 0), move_period=0.2)
    update(state, 0.3)
    assert state.over is True
    update(state, 0.3)
    assert state.snake == [(4, 2)]
