"""
physics.py: The deterministic flyer simulation.

Every function here is pure: it takes a FlyerState and returns a new one.
The host owns the clock, the input device and the renderer and calls step()
once per frame with a normalized dt.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, replace
from typing import Callable, List, Tuple

from .autopilot import apply_autopilot
from .config import DEFAULT_MODE, DEFAULT_WORLD, FRAME_MS, MAX_DT, Mode, World, get_mode

RandomFn = Callable[[], float]


@dataclass(frozen=True)
class Pipe:
    """A pipe pair; gap_y is the centre of the passable gap."""
    x: float
    gap_y: float
    passed: bool = False


@dataclass(frozen=True)
class FlyerState:
    y: float                        # top of the flyer hitbox
    velocity: float
    pipes: Tuple[Pipe, ...]         # leftmost first, never empty
    score: int = 0
    is_game_over: bool = False
    is_playing: bool = False
    is_autopilot: bool = False
    mode: str = DEFAULT_MODE

    @property
    def config(self) -> Mode:
        return get_mode(self.mode)


# -------- Clock & difficulty --------

def normalize_dt(elapsed_ms: float) -> float:
    """Elapsed wall time as a count of normal frames, capped to bound tunneling."""
    assert not math.isnan(elapsed_ms), "elapsed_ms is NaN"
    return min(max(elapsed_ms / FRAME_MS, 0.0), MAX_DT)

def stage(score: int, mode: Mode) -> int:
    """1-based difficulty tier; it changes every mode.score_step points."""
    return score // mode.score_step + 1

def speed_multiplier(score: int, mode: Mode) -> float:
    return min(mode.speed_max, mode.speed_base + (score // mode.score_step) * mode.speed_increment)

def gap_size(score: int, mode: Mode) -> float:
    """Distance from gap centre to each gap edge; shrinks to mode.gap_floor."""
    return max(mode.gap_floor, mode.gap_base - (score // mode.score_step) * mode.gap_decrement)


# -------- Lifecycle --------

def _initial_pipes(world: World) -> Tuple[Pipe, ...]:
    return (Pipe(x=float(world.width), gap_y=world.height / 2),)

def new_game(world: World = DEFAULT_WORLD, mode: str = DEFAULT_MODE, autopilot: bool = False) -> FlyerState:
    """A fresh run at mid-screen. Autopilot runs start flying right away."""
    get_mode(mode)
    return FlyerState(
        y=world.height / 2,
        velocity=0.0,
        pipes=_initial_pipes(world),
        is_playing=autopilot,
        is_autopilot=autopilot,
        mode=mode,
    )

def restart(state: FlyerState, world: World = DEFAULT_WORLD) -> FlyerState:
    """Reset position, pipes and score; mode and autopilot flag carry over."""
    return replace(
        state,
        y=world.height / 2,
        velocity=-state.config.restart_impulse,
        pipes=_initial_pipes(world),
        score=0,
        is_game_over=False,
        is_playing=True,
    )

def flap(state: FlyerState, world: World = DEFAULT_WORLD) -> FlyerState:
    """
    Manual lift input. Ignored while the autopilot flies; a tap after a crash
    restarts the run.
    """
    if state.is_autopilot:
        return state
    if state.is_game_over:
        return restart(state, world)
    return replace(state, is_playing=True, velocity=-state.config.flap_impulse)


# -------- Kinematics & collision --------

def apply_gravity_and_movement(y: float, velocity: float, gravity: float, dt: float) -> Tuple[float, float]:
    """Semi-implicit Euler: velocity first, then position with the new velocity."""
    velocity += gravity * dt
    y += velocity * dt
    return y, velocity

def is_out_of_bounds(y: float, world: World) -> bool:
    """Ceiling or ground hit."""
    return y < -world.ceiling_margin or y > world.height - world.ground_margin

def hits_pipe(y: float, pipe: Pipe, gap: float, world: World, mode: Mode) -> bool:
    f = mode.forgiveness
    left = world.flyer_left + f
    right = world.flyer_right - f
    top = y + f
    bottom = y + world.flyer_size - f

    if not (right > pipe.x and left < pipe.x + world.pipe_width):
        return False
    return top < pipe.gap_y - gap or bottom > pipe.gap_y + gap

def spawn_pipe(world: World, gap: float, random_fn: RandomFn = random.random) -> Pipe:
    """New pipe at the right edge with its gap centre drawn from the safe band."""
    low = gap + world.spawn_margin
    high = world.height - gap - world.spawn_margin
    return Pipe(x=float(world.width), gap_y=low + random_fn() * max(high - low, 0.0))


# -------- Step --------

def step(
    state: FlyerState,
    dt: float,
    world: World = DEFAULT_WORLD,
    random_fn: RandomFn = random.random,
) -> FlyerState:
    """
    Advance the simulation by dt normal frames.
    Order: autopilot, integration, bounds, difficulty, pipes (move, collide,
    score), spawn, despawn.
    """
    if not state.is_playing or state.is_game_over:
        return state
    assert 0.0 <= dt <= MAX_DT, f"dt out of range: {dt}"

    mode = state.config

    # 1. Autopilot
    if state.is_autopilot:
        state = apply_autopilot(state, world)

    # 2. Physics
    y, velocity = apply_gravity_and_movement(state.y, state.velocity, mode.gravity, dt)

    # 3. Ground & ceiling
    game_over = is_out_of_bounds(y, world)

    # 4. Difficulty for this score
    score = state.score
    multiplier = speed_multiplier(score, mode)
    gap = gap_size(score, mode)

    # 5. Pipes: move, hit detection, scoring
    dx = mode.scroll_speed * multiplier * dt
    pipes: List[Pipe] = []
    for pipe in state.pipes:
        pipe = replace(pipe, x=pipe.x - dx)

        if hits_pipe(y, pipe, gap, world, mode):
            game_over = True

        if not pipe.passed and pipe.x + world.pipe_width < world.flyer_left:
            pipe = replace(pipe, passed=True)
            score += 1

        pipes.append(pipe)

    # 6. Spawn
    if pipes[-1].x < world.width - world.spawn_distance / multiplier:
        pipes.append(spawn_pipe(world, gap, random_fn))

    # 7. Despawn
    if pipes[0].x < -world.despawn_margin:
        pipes.pop(0)

    return replace(
        state,
        y=y,
        velocity=velocity,
        pipes=tuple(pipes),
        score=score,
        is_game_over=game_over,
    )
