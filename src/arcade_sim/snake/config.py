from dataclasses import dataclass
from typing import Optional

# ----- Board -----
GRID_COLS, GRID_ROWS = 16, 20
CELL_SIZE = 28
WIDTH, HEIGHT = GRID_COLS * CELL_SIZE, GRID_ROWS * CELL_SIZE
HUD_HEIGHT = 36

# ----- Colors -----
BG    = (20, 20, 24)
GRID  = (32, 32, 40)
GREEN = (80, 200, 80)
HEAD  = (140, 240, 120)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

DIRECTIONS = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}

OPPOSITE = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    seed: Optional[int] = None
    move_every_ms: int = 130
    foods_per_speedup: int = 5
    speedup_step_ms: int = 10
    min_move_ms: int = 60
    speedup: bool = False

    def move_interval_ms(self, score: int) -> int:
        """Tick interval for the given score; constant unless speed-up is on."""
        if not self.speedup:
            return self.move_every_ms
        steps = score // max(self.foods_per_speedup, 1)
        return max(self.min_move_ms, self.move_every_ms - steps * self.speedup_step_ms)

CFG = Config()
