# src/arcade_sim/autoplay/harness.py
from __future__ import annotations
import argparse
import csv
import os
from typing import Dict, Sequence, Tuple

import numpy as np  # type: ignore

from arcade_sim.autoplay.policies import SNAKE_POLICIES
from arcade_sim.flyer.config import DEFAULT_WORLD, FRAME_MS, MODES, World
from arcade_sim.flyer import physics
from arcade_sim.snake.config import GRID_COLS, GRID_ROWS
from arcade_sim.snake.game import (
    Status, create_initial_state, queue_direction, start_game, step_game,
)

MAX_STEPS = 10_000


def make_random_fn(seed: int):
    """Seeded uniform source in [0, 1) for the cores' random_fn parameter."""
    rng = np.random.default_rng(seed)
    return lambda: float(rng.random())


# --------------------------
# Snake episodes
# --------------------------
def run_snake_episode(
    policy: str,
    seed: int,
    cols: int = GRID_COLS,
    rows: int = GRID_ROWS,
    max_steps: int = MAX_STEPS,
    epsilon: float = 0.1,
) -> Tuple[int, int, Status]:
    """
    Play one snake game with a built-in policy steering.

    Returns:
        steps: number of ticks taken
        score: foods eaten
        status: final status (GAME_OVER unless max_steps ran out)
    """
    if policy not in SNAKE_POLICIES:
        raise ValueError(f"Unknown policy: {policy}")
    choose = SNAKE_POLICIES[policy]
    random_fn = make_random_fn(seed)

    state = start_game(create_initial_state(cols, rows, random_fn))
    steps = 0
    while state.status is Status.RUNNING and steps < max_steps:
        state = queue_direction(state, choose(state, random_fn, epsilon))
        state = step_game(state, random_fn)
        steps += 1

    return steps, state.score, state.status


# --------------------------
# Flyer episodes
# --------------------------
def run_flyer_episode(
    mode: str,
    seed: int,
    max_ticks: int = MAX_STEPS,
    frame_ms: float = FRAME_MS,
    world: World = DEFAULT_WORLD,
) -> Tuple[int, int, bool]:
    """
    Let the autopilot fly one run with a fixed clock increment.

    Returns:
        ticks: number of steps taken
        score: pipes passed
        is_game_over: whether the run crashed before max_ticks
    """
    random_fn = make_random_fn(seed)
    dt = physics.normalize_dt(frame_ms)

    state = physics.new_game(world, mode=mode, autopilot=True)
    ticks = 0
    while not state.is_game_over and ticks < max_ticks:
        state = physics.step(state, dt, world, random_fn)
        ticks += 1

    return ticks, state.score, state.is_game_over


def summarize(scores: Sequence[int]) -> Dict[str, float]:
    """Mean / max / min of episode scores."""
    arr = np.asarray(scores, dtype=np.float64)
    if arr.size == 0:
        return {"episodes": 0, "mean": 0.0, "max": 0.0, "min": 0.0}
    return {
        "episodes": int(arr.size),
        "mean": float(arr.mean()),
        "max": float(arr.max()),
        "min": float(arr.min()),
    }


# --------------------------
# Main
# --------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(description="Run built-in controllers headless and log results")
    parser.add_argument("--game", type=str, default="snake", choices=["snake", "flyer"])
    parser.add_argument("--episodes", type=int, default=20)
    parser.add_argument(
        "--policy",
        type=str,
        default="greedy",
        choices=sorted(SNAKE_POLICIES),
        help="snake policy (the flyer always uses the autopilot)",
    )
    parser.add_argument("--epsilon", type=float, default=0.1, help="epsilon for eps-greedy")
    parser.add_argument("--mode", type=str, default="medium", choices=sorted(MODES))
    parser.add_argument("--seed", type=int, default=0, help="seed of episode 1; later episodes add one each")
    parser.add_argument("--max-steps", type=int, default=MAX_STEPS)
    parser.add_argument("--frame-ms", type=float, default=FRAME_MS, help="fixed clock increment for the flyer")
    parser.add_argument("--outdir", type=str, default="data/runs", help="CSV is saved here")
    args = parser.parse_args(argv)

    os.makedirs(args.outdir, exist_ok=True)

    if args.game == "snake":
        label = args.policy
        print(f"Running {args.episodes} snake episode(s) with policy={args.policy} ε={args.epsilon}")
        rows = [("ep", "steps", "score", "status")]
    else:
        label = args.mode
        print(f"Running {args.episodes} flyer episode(s) on autopilot, mode={args.mode}")
        rows = [("ep", "ticks", "score", "game_over")]
    print(",".join(rows[0]))

    scores = []
    for ep in range(1, args.episodes + 1):
        seed = args.seed + ep - 1
        if args.game == "snake":
            steps, score, status = run_snake_episode(
                args.policy, seed, max_steps=args.max_steps, epsilon=args.epsilon)
            row = (ep, steps, score, status.value)
        else:
            ticks, score, crashed = run_flyer_episode(
                args.mode, seed, max_ticks=args.max_steps, frame_ms=args.frame_ms)
            row = (ep, ticks, score, crashed)
        print(",".join(str(v) for v in row))
        rows.append(row)
        scores.append(score)

    out_csv = os.path.join(args.outdir, f"{args.game}_{label}.csv")
    with open(out_csv, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(rows)

    stats = summarize(scores)
    print(f"\nmean={stats['mean']:.2f} max={stats['max']:.0f} min={stats['min']:.0f}")
    print(f"Saved results → {out_csv}")
    return stats


if __name__ == "__main__":
    main()
