# src/snake_rl/policies/greedy.py
from typing import List, Tuple

import numpy as np # type: ignore

from snake_game.components import Direction
from snake_rl.env import ACTIONS, left_of, right_of
from snake_rl.policies.random import policy_random


def best_move_toward_food(hx: int, hy: int, fx: int, fy: int) -> List[Direction]:
    """
    Returns a preference ordering of moves that reduce Manhattan distance to food.
    Does NOT check collisions; caller should filter unsafe moves.
    """
    prefs = []
    if fx < hx:
        prefs.append(Direction.LEFT)
    elif fx > hx:
        prefs.append(Direction.RIGHT)
    if fy < hy:
        prefs.append(Direction.DOWN)
    elif fy > hy:
        prefs.append(Direction.UP)
    # Remaining directions go last so the caller still has options when blocked
    for d in (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT):
        if d not in prefs:
            prefs.append(d)
    return prefs  # length 4


def dir_to_action(direction: Direction) -> int:
    """Map a Direction to the env action id."""
    for a, d in ACTIONS.items():
        if d is direction:
            return a
    raise KeyError(direction)


def decode_obs(obs: np.ndarray, width: int, height: int) -> Tuple[int, int, int, int, Direction, bool, bool, bool]:
    """
    Matches env.observe() layout (9 dims):
    [hx_n, hy_n, fx_n, fy_n, dx, dy, danger_ahead, danger_left, danger_right]
    Grid coords are recovered by multiplying by (W-1)/(H-1).
    """
    hx_n, hy_n, fx_n, fy_n, dx, dy, dan_f, dan_l, dan_r = obs.tolist()
    hx = int(round(hx_n * (width - 1)))
    hy = int(round(hy_n * (height - 1)))
    fx = int(round(fx_n * (width - 1)))
    fy = int(round(fy_n * (height - 1)))
    heading = next(d for d in Direction if d.offset == (int(dx), int(dy)))
    return hx, hy, fx, fy, heading, bool(dan_f), bool(dan_l), bool(dan_r)


def policy_greedy(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """
    Greedy on food distance with simple safety:
    - prefer actions that reduce Manhattan distance
    - avoid any move flagged dangerous if possible
    - if all preferred moves are dangerous, choose any safe move
    - if all moves look dangerous, fall back to random
    """
    cfg = env.config
    hx, hy, fx, fy, forward, dan_f, dan_l, dan_r = decode_obs(obs, cfg.arena_width, cfg.arena_height)

    danger_map = {
        dir_to_action(forward): dan_f,
        dir_to_action(left_of(forward)): dan_l,
        dir_to_action(right_of(forward)): dan_r,
    }
    # The "back" action is ignored by the game; never prefer it
    all_actions = list(range(env.action_space_n))
    for a in all_actions:
        danger_map.setdefault(a, True)

    # 1) try safe preferred actions in order
    for d in best_move_toward_food(hx, hy, fx, fy):
        a = dir_to_action(d)
        if not danger_map[a]:
            return a

    # 2) boxed in: any legal move
    return policy_random(obs, env)


def policy_eps_greedy(obs: np.ndarray, env, epsilon: float = 0.1) -> int:
    """Explore with a legal random move with probability epsilon, otherwise go greedy."""
    if np.random.rand() < epsilon:
        return policy_random(obs, env)
    return policy_greedy(obs, env)
