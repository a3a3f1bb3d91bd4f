# src/arcade_sim/autoplay/policies/eps_greedy.py
from arcade_sim.autoplay.policies.random import policy_random
from arcade_sim.autoplay.policies.greedy import policy_greedy


def policy_eps_greedy(state, random_fn, epsilon: float = 0.1):
    """
    Epsilon-greedy policy: with probability epsilon, pick random; else pick greedy.
    """
    if random_fn() < epsilon:
        return policy_random(state, random_fn)
    return policy_greedy(state, random_fn)
