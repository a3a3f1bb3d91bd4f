from dataclasses import replace

from arcade_sim.autoplay.policies import (
    SNAKE_POLICIES, policy_eps_greedy, policy_greedy, policy_random,
)
from arcade_sim.snake.config import UP, DOWN, LEFT, RIGHT
from arcade_sim.snake.game import Status, create_initial_state


def snake_state(snake, direction, food):
    base = create_initial_state(8, 8, lambda: 0.5)
    return replace(base, snake=snake, direction=direction, food=food, status=Status.RUNNING)


def test_greedy_heads_for_food():
    state = snake_state(((0, 0), (0, 1), (0, 2)), UP, (5, 0))
    assert policy_greedy(state) == RIGHT


def test_greedy_turns_instead_of_reversing():
    state = snake_state(((4, 4), (3, 4), (2, 4)), RIGHT, (0, 4))
    assert policy_greedy(state) == UP


def test_greedy_avoids_walls_and_body():
    # food straight behind; up and left are walls
    state = snake_state(((0, 0), (0, 1), (0, 2)), UP, (0, 5))
    assert policy_greedy(state) == RIGHT


def test_greedy_keeps_heading_when_boxed_in():
    # head in the corner, walls up/left, body below and to the right
    snake = ((0, 0), (1, 0), (1, 1), (0, 1), (0, 2))
    state = snake_state(snake, LEFT, (7, 7))
    assert policy_greedy(state) == LEFT


def test_random_policy_maps_uniform_draws():
    state = snake_state(((4, 4), (3, 4), (2, 4)), RIGHT, (7, 7))
    assert policy_random(state, lambda: 0.0) == UP
    assert policy_random(state, lambda: 0.3) == DOWN
    assert policy_random(state, lambda: 0.6) == LEFT
    assert policy_random(state, lambda: 0.99) == RIGHT


def test_eps_greedy_switches_on_epsilon():
    state = snake_state(((4, 4), (3, 4), (2, 4)), RIGHT, (4, 0))
    assert policy_eps_greedy(state, lambda: 0.05, epsilon=0.1) == UP
    assert policy_eps_greedy(state, lambda: 0.5, epsilon=0.1) == policy_greedy(state)
    assert policy_eps_greedy(state, lambda: 0.0, epsilon=0.0) == policy_greedy(state)


def test_registry_lists_snake_policies():
    assert set(SNAKE_POLICIES) == {"random", "greedy", "eps-greedy"}
