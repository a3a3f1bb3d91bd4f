# src/arcade_sim/autoplay/policies/greedy.py
from arcade_sim.snake.config import UP, DOWN, LEFT, RIGHT, OPPOSITE
from arcade_sim.snake.game import would_collide


def best_move_toward_food(hx: int, hy: int, fx: int, fy: int):
    """
    Returns a preference ordering of moves that reduce Manhattan distance to food.
    Does NOT check collisions; caller should filter unsafe moves.
    """
    prefs = []
    if fx < hx:
        prefs.append(LEFT)
    elif fx > hx:
        prefs.append(RIGHT)
    if fy < hy:
        prefs.append(UP)
    elif fy > hy:
        prefs.append(DOWN)
    # Orthogonal options go last so a blocked primary axis still leaves choices.
    for d in (UP, DOWN, LEFT, RIGHT):
        if d not in prefs:
            prefs.append(d)
    return prefs  # length 4


def policy_greedy(state, random_fn=None, epsilon: float = 0.0):
    """
    Greedy on food distance with simple safety:
    - prefer moves that reduce Manhattan distance
    - never reverse onto the neck
    - skip any move that would hit a wall or the body
    - if every move is fatal, keep the current heading
    """
    heading = state.effective_direction
    hx, hy = state.head
    fx, fy = state.food

    for d in best_move_toward_food(hx, hy, fx, fy):
        if d == OPPOSITE[heading]:
            continue
        if not would_collide(state, d):
            return d

    # Boxed in
    return heading
