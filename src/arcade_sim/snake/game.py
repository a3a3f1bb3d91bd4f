# game.py
from __future__ import annotations

from dataclasses import dataclass, replace
import enum
import math
import random
from typing import Callable, Iterable, Optional, Tuple

from .config import UP, DOWN, LEFT, RIGHT, OPPOSITE

Point = Tuple[int, int]
Direction = Tuple[int, int]
RandomFn = Callable[[], float]


class Status(enum.Enum):
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "gameOver"


# ---------- State ----------
@dataclass(frozen=True)
class SnakeState:
    cols: int
    rows: int
    snake: Tuple[Point, ...]            # head at index 0
    direction: Direction
    queued_direction: Optional[Direction]
    food: Point
    score: int
    status: Status

    @property
    def head(self) -> Point:
        return self.snake[0]

    @property
    def effective_direction(self) -> Direction:
        """Heading the next step will use: the queued one if any."""
        return self.queued_direction or self.direction


# ---------- Helpers ----------
def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def is_out_of_bounds(point: Point, cols: int, rows: int) -> bool:
    x, y = point
    return x < 0 or x >= cols or y < 0 or y >= rows

def move_head(head: Point, direction: Direction) -> Point:
    return (head[0] + direction[0], head[1] + direction[1])

def _collision_body(snake: Tuple[Point, ...], eating: bool) -> Tuple[Point, ...]:
    # The tail vacates its cell this tick unless the snake grows.
    return snake if eating else snake[:-1]

def would_collide(state: SnakeState, direction: Direction) -> bool:
    """
    True if moving one cell in 'direction' would end the game, using the same
    tail rule as step_game (chasing the tail is legal when not growing).
    """
    nxt = move_head(state.head, direction)
    if is_out_of_bounds(nxt, state.cols, state.rows):
        return True
    return nxt in _collision_body(state.snake, nxt == state.food)


def place_food(
    cols: int,
    rows: int,
    occupied: Iterable[Point],
    random_fn: RandomFn = random.random,
) -> Optional[Point]:
    """
    Pick a free cell for the food.

    Free cells are enumerated row-major and the one at
    floor(random_fn() * free_count) is returned, so a fixed random_fn and
    occupied set always give the same cell. Returns None on a full board.
    """
    taken = set(occupied)
    available = [
        (x, y)
        for y in range(rows)
        for x in range(cols)
        if (x, y) not in taken
    ]
    if not available:
        return None

    index = math.floor(random_fn() * len(available))
    return available[min(max(index, 0), len(available) - 1)]


# ---------- Lifecycle ----------
def create_initial_state(
    cols: int,
    rows: int,
    random_fn: RandomFn = random.random,
) -> SnakeState:
    assert cols >= 3 and rows >= 1 and cols * rows > 3, f"Board {cols}x{rows} has no room for a 3-cell snake and its food"

    head_x = max(2, cols // 2)
    head_y = rows // 2
    snake = (
        (head_x, head_y),
        (head_x - 1, head_y),
        (head_x - 2, head_y),
    )
    food = place_food(cols, rows, snake, random_fn)
    return SnakeState(
        cols=cols,
        rows=rows,
        snake=snake,
        direction=RIGHT,
        queued_direction=None,
        food=food,
        score=0,
        status=Status.READY,
    )

def queue_direction(state: SnakeState, direction: Direction) -> SnakeState:
    """Buffer a heading for the next step; 180° turns are ignored."""
    assert direction in OPPOSITE, f"Invalid direction {direction}"
    if is_opposite(state.effective_direction, direction):
        return state
    return replace(state, queued_direction=direction)

def start_game(state: SnakeState) -> SnakeState:
    if state.status is not Status.READY:
        return state
    return replace(state, status=Status.RUNNING)

def toggle_pause(state: SnakeState) -> SnakeState:
    if state.status is Status.RUNNING:
        return replace(state, status=Status.PAUSED)
    if state.status is Status.PAUSED:
        return replace(state, status=Status.RUNNING)
    return state


# ---------- Update ----------
def step_game(state: SnakeState, random_fn: RandomFn = random.random) -> SnakeState:
    """
    Advance the game by one tick.
    - Does nothing unless the game is running.
    - Wall or self collision ends the game without moving the snake.
    - Eating grows the snake by one, scores, and places new food; a board
      with no free cell left ends the game on that same step.
    """
    if state.status is not Status.RUNNING:
        return state

    # Commit direction once per tick
    direction = state.effective_direction
    new_head = move_head(state.head, direction)

    if is_out_of_bounds(new_head, state.cols, state.rows):
        return replace(state, direction=direction, queued_direction=None,
                       status=Status.GAME_OVER)

    eating = new_head == state.food
    if new_head in _collision_body(state.snake, eating):
        return replace(state, direction=direction, queued_direction=None,
                       status=Status.GAME_OVER)

    if not eating:
        return replace(
            state,
            snake=(new_head,) + state.snake[:-1],
            direction=direction,
            queued_direction=None,
        )

    snake = (new_head,) + state.snake
    food = place_food(state.cols, state.rows, snake, random_fn)
    if food is None:
        # Board full: nothing left to eat
        return replace(state, snake=snake, direction=direction, queued_direction=None,
                       score=state.score + 1, status=Status.GAME_OVER)

    return replace(
        state,
        snake=snake,
        food=food,
        direction=direction,
        queued_direction=None,
        score=state.score + 1,
    )


__all__ = [
    "UP", "DOWN", "LEFT", "RIGHT",
    "Point", "Direction", "Status", "SnakeState",
    "is_opposite", "is_out_of_bounds", "move_head", "would_collide",
    "place_food", "create_initial_state", "queue_direction",
    "start_game", "toggle_pause", "step_game",
]
