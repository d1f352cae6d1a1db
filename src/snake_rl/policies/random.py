# src/snake_rl/policies/random.py
from typing import List

import numpy as np # type: ignore

from snake_rl.env import ACTIONS


def legal_actions(env) -> List[int]:
    """Every action except the reversal, which the game would ignore anyway."""
    back = env.game.direction.opposite()
    return [a for a, d in ACTIONS.items() if d is not back]


def policy_random(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """Uniform over the three moves the snake can actually make: ahead, left, right."""
    return int(np.random.choice(legal_actions(env)))
