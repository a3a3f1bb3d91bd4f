from dataclasses import replace

import pytest

from arcade_sim.snake.config import UP, DOWN, LEFT, RIGHT, Config
from arcade_sim.snake.game import (
    SnakeState, Status,
    create_initial_state, place_food, queue_direction, start_game, step_game,
    toggle_pause, would_collide,
)


def running_state(**changes) -> SnakeState:
    base = create_initial_state(8, 8, lambda: 0.5)
    return replace(base, status=Status.RUNNING, **changes)


LINE = ((3, 3), (2, 3), (1, 3))


# ---------- create / start / pause ----------

def test_initial_state_is_ready_and_centered():
    state = create_initial_state(8, 8, lambda: 0.5)

    assert state.status is Status.READY
    assert state.snake == ((4, 4), (3, 4), (2, 4))
    assert state.direction == RIGHT
    assert state.queued_direction is None
    assert state.score == 0
    # 61 free cells, index floor(0.5 * 61) = 30 in row-major order
    assert state.food == (6, 3)


def test_initial_head_keeps_body_on_narrow_board():
    state = create_initial_state(4, 1, lambda: 0.0)
    assert state.snake == ((2, 0), (1, 0), (0, 0))
    assert state.food == (3, 0)


@pytest.mark.parametrize("cols, rows", [(3, 1), (2, 5), (5, 0)])
def test_board_must_fit_snake_and_food(cols, rows):
    with pytest.raises(AssertionError):
        create_initial_state(cols, rows, lambda: 0.0)


def test_start_only_from_ready():
    state = create_initial_state(8, 8, lambda: 0.5)
    started = start_game(state)
    assert started.status is Status.RUNNING
    assert start_game(started) is started


def test_toggle_pause_round_trip():
    state = running_state()
    paused = toggle_pause(state)
    assert paused.status is Status.PAUSED
    assert toggle_pause(paused).status is Status.RUNNING


@pytest.mark.parametrize("status", [Status.READY, Status.GAME_OVER])
def test_toggle_pause_ignored_outside_play(status):
    state = replace(running_state(), status=status)
    assert toggle_pause(state) is state


@pytest.mark.parametrize("status", [Status.READY, Status.PAUSED, Status.GAME_OVER])
def test_step_does_nothing_unless_running(status):
    state = replace(running_state(), status=status)
    assert step_game(state, lambda: 0.0) is state


# ---------- queued direction ----------

def test_reverse_direction_is_ignored():
    state = running_state(direction=RIGHT, queued_direction=None)
    assert queue_direction(state, LEFT) is state


def test_reverse_checked_against_queued_heading():
    state = running_state(direction=RIGHT, queued_direction=UP)

    assert queue_direction(state, DOWN).queued_direction == UP
    assert queue_direction(state, LEFT).queued_direction == LEFT


def test_queued_direction_applied_then_cleared():
    state = queue_direction(running_state(snake=LINE, direction=RIGHT, food=(7, 7)), DOWN)

    nxt = step_game(state, lambda: 0.0)

    assert nxt.snake[0] == (3, 4)
    assert nxt.direction == DOWN
    assert nxt.queued_direction is None


# ---------- movement ----------

def test_moves_one_cell_without_growth():
    state = running_state(snake=LINE, direction=RIGHT, food=(7, 7))

    nxt = step_game(state, lambda: 0.3)

    assert nxt.snake == ((4, 3), (3, 3), (2, 3))
    assert nxt.score == 0
    assert nxt.status is Status.RUNNING
    assert nxt.food == (7, 7)


def test_grows_and_scores_when_food_eaten():
    state = running_state(snake=LINE, direction=RIGHT, food=(4, 3))

    nxt = step_game(state, lambda: 0.0)

    assert len(nxt.snake) == 4
    assert nxt.snake[0] == (4, 3)
    assert nxt.score == 1
    assert nxt.food == (0, 0)
    assert nxt.food != (4, 3)
    assert nxt.food not in nxt.snake


def test_wall_collision_ends_game_without_moving():
    snake = ((7, 4), (6, 4), (5, 4))
    state = running_state(snake=snake, direction=UP, queued_direction=RIGHT, food=(0, 0))

    nxt = step_game(state, lambda: 0.0)

    assert nxt.status is Status.GAME_OVER
    assert nxt.snake == snake
    assert nxt.direction == RIGHT
    assert nxt.queued_direction is None


def test_self_collision_ends_game():
    snake = ((3, 3), (4, 3), (4, 2), (3, 2), (2, 2), (2, 3))
    state = running_state(snake=snake, direction=UP, food=(0, 0))

    nxt = step_game(state, lambda: 0.0)

    assert nxt.status is Status.GAME_OVER
    assert nxt.snake == snake


def test_chasing_the_tail_is_legal():
    # 2x2 loop: the head moves into the cell the tail leaves this tick
    snake = ((1, 1), (2, 1), (2, 2), (1, 2))
    state = running_state(snake=snake, direction=LEFT, queued_direction=DOWN, food=(7, 7))

    assert not would_collide(state, DOWN)
    nxt = step_game(state, lambda: 0.0)

    assert nxt.status is Status.RUNNING
    assert nxt.snake == ((1, 2), (1, 1), (2, 1), (2, 2))


def test_full_board_ends_game_after_scoring():
    state = replace(
        create_initial_state(4, 1, lambda: 0.0),
        snake=((2, 0), (1, 0), (0, 0)),
        food=(3, 0),
        status=Status.RUNNING,
    )

    nxt = step_game(state, lambda: 0.0)

    assert nxt.score == 1
    assert nxt.status is Status.GAME_OVER
    assert nxt.snake == ((3, 0), (2, 0), (1, 0), (0, 0))


def test_length_preserved_unless_eating():
    import random
    rng = random.Random(7)
    moves = (UP, DOWN, LEFT, RIGHT)
    state = start_game(create_initial_state(10, 10, rng.random))

    for _ in range(300):
        if state.status is not Status.RUNNING:
            break
        before = state
        state = queue_direction(state, rng.choice(moves))
        state = step_game(state, rng.random)
        if state.status is Status.RUNNING:
            grew = state.score - before.score
            assert len(state.snake) == len(before.snake) + grew
            assert grew in (0, 1)
            assert state.food not in state.snake
            assert len(set(state.snake)) == len(state.snake)


def test_step_does_not_mutate_input():
    state = running_state(snake=LINE, direction=RIGHT, food=(4, 3))
    step_game(state, lambda: 0.0)
    assert state.snake == LINE
    assert state.score == 0


# ---------- food placement ----------

def test_food_lands_on_only_free_cell():
    occupied = [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1), (0, 2), (1, 2)]
    assert place_food(3, 3, occupied, lambda: 0.99) == (2, 2)


def test_food_is_none_on_full_board():
    occupied = [(x, y) for x in range(2) for y in range(2)]
    assert place_food(2, 2, occupied, lambda: 0.5) is None


def test_food_index_is_clamped():
    assert place_food(3, 1, [], lambda: 1.0) == (2, 0)


def test_food_placement_is_deterministic():
    occupied = [(1, 1), (2, 1), (3, 1)]
    first = place_food(6, 5, occupied, lambda: 0.42)
    second = place_food(6, 5, list(reversed(occupied)), lambda: 0.42)
    assert first == second
    assert first not in occupied


# ---------- tick tunables ----------

def test_move_interval_constant_without_speedup():
    cfg = Config()
    assert cfg.move_interval_ms(0) == 130
    assert cfg.move_interval_ms(40) == 130


def test_move_interval_speeds_up_to_floor():
    cfg = Config(speedup=True)
    assert cfg.move_interval_ms(4) == 130
    assert cfg.move_interval_ms(5) == 120
    assert cfg.move_interval_ms(22) == 90
    assert cfg.move_interval_ms(500) == 60
