# main.py
import argparse
import random
from typing import Tuple

import pygame # type: ignore

from .config import (
    CELL_SIZE, HUD_HEIGHT,
    BG, GRID, GREEN, HEAD, RED, TEXT,
    GRID_COLS, GRID_ROWS, DIRECTIONS, Config,
)
from .game import (
    SnakeState, Status,
    create_initial_state, queue_direction, start_game, toggle_pause, step_game,
)

KEY_DIRECTIONS = {
    pygame.K_UP: DIRECTIONS["up"],    pygame.K_w: DIRECTIONS["up"],
    pygame.K_DOWN: DIRECTIONS["down"], pygame.K_s: DIRECTIONS["down"],
    pygame.K_LEFT: DIRECTIONS["left"], pygame.K_a: DIRECTIONS["left"],
    pygame.K_RIGHT: DIRECTIONS["right"], pygame.K_d: DIRECTIONS["right"],
}

STATUS_LABELS = {
    Status.READY: "Press Space to start",
    Status.RUNNING: "Running",
    Status.PAUSED: "Paused",
    Status.GAME_OVER: "Game Over - press R",
}

# ---------- Draw ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE + 1, HUD_HEIGHT + gy * CELL_SIZE + 1, CELL_SIZE - 2, CELL_SIZE - 2)
    pygame.draw.rect(screen, color, rect)

def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: SnakeState) -> None:
    screen.fill(BG)
    for gy in range(state.rows):
        for gx in range(state.cols):
            draw_cell(screen, gx, gy, GRID)
    draw_cell(screen, state.food[0], state.food[1], RED)
    for i, (x, y) in enumerate(state.snake):
        draw_cell(screen, x, y, HEAD if i == 0 else GREEN)

    txt = font.render(f"Score: {state.score}   {STATUS_LABELS[state.status]}", True, TEXT)
    screen.blit(txt, (8, 8))

# ---------- Loop ----------
def main():
    parser = argparse.ArgumentParser(description="Grid snake")
    parser.add_argument("--cols", type=int, default=GRID_COLS)
    parser.add_argument("--rows", type=int, default=GRID_ROWS)
    parser.add_argument("--tick-ms", type=int, default=Config.move_every_ms)
    parser.add_argument("--speedup", action="store_true", help="shorten the tick as the score grows")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--autoplay", action="store_true", help="let the greedy policy steer")
    args = parser.parse_args()

    cfg = Config(seed=args.seed, move_every_ms=args.tick_ms, speedup=args.speedup)
    rng = random.Random(cfg.seed)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((args.cols * CELL_SIZE, HUD_HEIGHT + args.rows * CELL_SIZE))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    policy = None
    if args.autoplay:
        from arcade_sim.autoplay.policies import policy_greedy
        policy = policy_greedy

    state = create_initial_state(args.cols, args.rows, rng.random)
    last_move = pygame.time.get_ticks()
    running = True

    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in KEY_DIRECTIONS:
                    state = queue_direction(state, KEY_DIRECTIONS[event.key])
                elif event.key == pygame.K_SPACE:
                    state = start_game(state) if state.status is Status.READY else toggle_pause(state)
                elif event.key == pygame.K_p:
                    state = toggle_pause(state)
                elif event.key == pygame.K_r:
                    state = create_initial_state(args.cols, args.rows, rng.random)

        # 2) update, gated on the tick interval
        now = pygame.time.get_ticks()
        if now - last_move >= cfg.move_interval_ms(state.score):
            if policy is not None and state.status is Status.RUNNING:
                state = queue_direction(state, policy(state, rng.random))
            state = step_game(state, rng.random)
            last_move = now

        # 3) render
        draw_game(screen, font, state)
        pygame.display.flip()
        clock.tick(60)

    print(f"Final score: {state.score}")
    pygame.quit()

if __name__ == "__main__":
    main()
