#!/usr/bin/env python3
"""
main.py

Pygame host for the flyer: owns the clock, input and drawing, and calls
physics.step once per rendered frame.
"""

import argparse
import random

import pygame # type: ignore

from .config import (
    DEFAULT_WORLD, MODES, RENDER_FPS,
    SKY, PIPE_COLOR, FLYER_COLOR, DEAD_COLOR, WHITE, ACCENT,
)
from . import physics


def draw_game(screen, fonts, state, best: int) -> None:
    world = DEFAULT_WORLD
    mode = state.config
    large_font, font = fonts
    screen.fill(SKY)

    # Pipes, drawn with the gap the physics is using right now
    gap = physics.gap_size(state.score, mode)
    for pipe in state.pipes:
        top_height = max(0, pipe.gap_y - gap)
        pygame.draw.rect(screen, PIPE_COLOR, (pipe.x, 0, world.pipe_width, top_height))
        bottom_y = pipe.gap_y + gap
        pygame.draw.rect(screen, PIPE_COLOR, (pipe.x, bottom_y, world.pipe_width, world.height - bottom_y))

    # Ground
    ground_y = world.height - world.ground_margin + world.flyer_size
    pygame.draw.rect(screen, DEAD_COLOR, (0, ground_y, world.width, world.height - ground_y))

    color = DEAD_COLOR if state.is_game_over else FLYER_COLOR
    pygame.draw.rect(screen, color, (world.flyer_left, state.y, world.flyer_size, world.flyer_size))

    # HUD
    score_text = large_font.render(str(state.score), True, WHITE)
    screen.blit(score_text, (world.width // 2 - score_text.get_width() // 2, 20))
    stage_text = font.render(f"STAGE {physics.stage(state.score, mode)}  BEST {best}  {mode.name.upper()}", True, WHITE)
    screen.blit(stage_text, (10, 10))

    if state.is_autopilot:
        msg = font.render("Autopilot Engaged", True, ACCENT)
        screen.blit(msg, (world.width // 2 - msg.get_width() // 2, 70))
    elif state.is_game_over:
        msg = font.render("Crashed - SPACE/CLICK to fly again", True, WHITE)
        screen.blit(msg, (world.width // 2 - msg.get_width() // 2, world.height // 2))
    elif not state.is_playing:
        msg = font.render("SPACE/CLICK to fly", True, WHITE)
        screen.blit(msg, (world.width // 2 - msg.get_width() // 2, world.height // 2))

    pygame.display.flip()


def main():
    parser = argparse.ArgumentParser(description="Obstacle flyer")
    parser.add_argument("--mode", type=str, default="medium", choices=sorted(MODES))
    parser.add_argument("--autopilot", action="store_true", help="let the autopilot fly")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    world = DEFAULT_WORLD
    rng = random.Random(args.seed)

    pygame.init()
    screen = pygame.display.set_mode((world.width, world.height))
    pygame.display.set_caption("Flyer")
    fonts = (pygame.font.Font(None, 56), pygame.font.Font(None, 24))
    clock = pygame.time.Clock()

    state = physics.new_game(world, mode=args.mode, autopilot=args.autopilot)
    best = 0
    running = True

    while running:
        dt = physics.normalize_dt(clock.tick(RENDER_FPS))

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif (event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE) or event.type == pygame.MOUSEBUTTONDOWN:
                state = physics.flap(state, world)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_r and state.is_autopilot:
                state = physics.new_game(world, mode=state.mode, autopilot=True)

        state = physics.step(state, dt, world, rng.random)
        best = max(best, state.score)
        draw_game(screen, fonts, state, best)

    print(f"Best score this session: {best}")
    pygame.quit()


if __name__ == "__main__":
    main()
