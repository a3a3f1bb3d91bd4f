# src/arcade_sim/autoplay/policies/random.py
import math

from arcade_sim.snake.config import UP, DOWN, LEFT, RIGHT

MOVES = (UP, DOWN, LEFT, RIGHT)


def policy_random(state, random_fn, epsilon: float = 0.0):
    """
    Random policy: pick a uniformly random heading.
    Reversals are rejected by queue_direction, so those picks keep the current heading.
    """
    return MOVES[min(math.floor(random_fn() * len(MOVES)), len(MOVES) - 1)]
