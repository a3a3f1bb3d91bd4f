# src/arcade_sim/autoplay/policies/__init__.py
"""Built-in controllers: snake policies and the flyer autopilot."""

from arcade_sim.autoplay.policies.random import policy_random
from arcade_sim.autoplay.policies.greedy import policy_greedy
from arcade_sim.autoplay.policies.eps_greedy import policy_eps_greedy
from arcade_sim.flyer.autopilot import policy_autopilot, apply_autopilot

SNAKE_POLICIES = {
    "random": policy_random,
    "greedy": policy_greedy,
    "eps-greedy": policy_eps_greedy,
}

__all__ = [
    "policy_random", "policy_greedy", "policy_eps_greedy",
    "policy_autopilot", "apply_autopilot", "SNAKE_POLICIES",
]
