# src/arcade_sim/flyer/autopilot.py
from dataclasses import replace

from .config import World, get_mode


def next_pipe(state, world: World):
    """First pipe whose trailing edge is still ahead of the flyer, or None."""
    for pipe in state.pipes:
        if pipe.x + world.pipe_width > world.flyer_left:
            return pipe
    return None


def policy_autopilot(state, world: World) -> bool:
    """
    Reactive lookahead controller for the flyer. Returns True to flap.

    - aim at the next gap centre minus the mode's margin
    - project y a few frames ahead at the current velocity
    - flap if the projection sinks past the aim point, unless already
      rising faster than the mode's threshold
    - with no pipe ahead, flap to hover once below mid-screen and falling
    """
    mode = get_mode(state.mode)
    pipe = next_pipe(state, world)

    if pipe is not None:
        target_y = pipe.gap_y - mode.autopilot_margin
        projected_y = state.y + state.velocity * mode.autopilot_lookahead
        return projected_y > target_y and state.velocity > mode.autopilot_min_velocity

    return state.y > world.height / 2 + world.hover_offset and state.velocity > 0


def apply_autopilot(state, world: World):
    """Apply the autopilot's decision to a flyer state."""
    if not policy_autopilot(state, world):
        return state
    return replace(state, velocity=-get_mode(state.mode).autopilot_impulse)
