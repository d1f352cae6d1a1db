# src/snake_rl/policies/__init__.py
"""Scripted policies for driving the environment."""

from snake_rl.policies.random import legal_actions, policy_random
from snake_rl.policies.greedy import policy_eps_greedy, policy_greedy

POLICIES = {
    "random": policy_random,
    "greedy": policy_greedy,
    "eps-greedy": policy_eps_greedy,
}

__all__ = ["legal_actions", "policy_random", "policy_greedy", "policy_eps_greedy", "POLICIES"]
