"""
config.py: World geometry and the per-mode physics tables for the flyer.
"""

from dataclasses import dataclass
from typing import Dict

# -------- Host Config --------
RENDER_FPS = 60
FRAME_MS = 16                   # elapsed time that counts as one normal frame
MAX_DT = 2.0                    # cap on frames simulated by a single step

# -------- Colors --------
SKY = (12, 10, 32)
PIPE_COLOR = (0, 200, 140)
FLYER_COLOR = (255, 220, 0)
DEAD_COLOR = (110, 110, 110)
WHITE = (255, 255, 255)
ACCENT = (255, 0, 255)


@dataclass(frozen=True)
class World:
    """Screen and entity geometry, in pixels."""
    width: int = 400
    height: int = 800
    flyer_size: int = 40            # square hitbox side
    flyer_x_ratio: float = 0.25     # fixed flyer x as a share of width
    pipe_width: int = 70
    ceiling_margin: int = 50        # y may go this far above the top
    ground_margin: int = 100        # ground height from the bottom
    spawn_distance: int = 280       # spacing between pipes at base speed
    despawn_margin: int = 100
    spawn_margin: int = 100         # gap edges keep this far from the screen edges
    hover_offset: int = 50          # autopilot hover line below mid-screen

    @property
    def flyer_left(self) -> float:
        return self.width * self.flyer_x_ratio

    @property
    def flyer_right(self) -> float:
        return self.flyer_left + self.flyer_size


@dataclass(frozen=True)
class Mode:
    """
    One difficulty profile. Values are tuned per mode and are not derived
    from each other; speeds and accelerations are per normal frame.
    """
    name: str
    gravity: float
    flap_impulse: float             # manual lift
    restart_impulse: float          # lift given when a tap restarts the run
    autopilot_impulse: float
    scroll_speed: float
    gap_base: float                 # gap centre to edge at score 0
    gap_floor: float
    gap_decrement: float
    speed_base: float = 1.0
    speed_increment: float = 0.15
    speed_max: float = 2.5          # pipes stay at least spawn_distance / speed_max apart
    score_step: int = 10
    forgiveness: float = 0.0        # hitbox shrink on every side
    autopilot_margin: float = 15.0  # aim point is gap centre minus this
    autopilot_lookahead: float = 3.0
    autopilot_min_velocity: float = -4.0


MODES: Dict[str, Mode] = {
    "slow": Mode(
        name="slow",
        gravity=0.5,
        flap_impulse=9.0,
        restart_impulse=7.5,
        autopilot_impulse=8.0,
        scroll_speed=3.0,
        gap_base=130.0,
        gap_floor=100.0,
        gap_decrement=5.0,
        speed_increment=0.1,
        speed_max=2.0,
        forgiveness=6.0,
        autopilot_margin=-20.0,
        autopilot_min_velocity=-3.0,
    ),
    "medium": Mode(
        name="medium",
        gravity=0.8,
        flap_impulse=12.0,
        restart_impulse=10.0,
        autopilot_impulse=10.5,
        scroll_speed=4.0,
        gap_base=100.0,
        gap_floor=80.0,
        gap_decrement=5.0,
        autopilot_margin=-30.0,
    ),
    "fast": Mode(
        name="fast",
        gravity=1.0,
        flap_impulse=13.5,
        restart_impulse=11.0,
        autopilot_impulse=12.0,
        scroll_speed=5.5,
        gap_base=90.0,
        gap_floor=70.0,
        gap_decrement=5.0,
        speed_increment=0.2,
        autopilot_margin=-35.0,
        autopilot_min_velocity=-5.0,
    ),
}

DEFAULT_MODE = "medium"
DEFAULT_WORLD = World()


def get_mode(name: str) -> Mode:
    try:
        return MODES[name]
    except KeyError:
        raise KeyError(f"Unknown mode {name!r}; expected one of {sorted(MODES)}") from None
