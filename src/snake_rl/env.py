# src/snake_rl/env.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np  # type: ignore

from snake_game.components import Direction, Position
from snake_game.config import CFG, BoundaryPolicy, Config
from snake_game.events import GameEvent
from snake_game.game import Game

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Actions: integers -> grid directions
# -----------------------------------------------------------------------------
ACTIONS = {
    0: Direction.UP,
    1: Direction.DOWN,
    2: Direction.LEFT,
    3: Direction.RIGHT,
}

# Clockwise with y pointing up
_CLOCKWISE = [Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN]


# -----------------------------------------------------------------------------
# Small geometry helpers
# -----------------------------------------------------------------------------
def left_of(direction: Direction) -> Direction:
    """Rotate a direction 90° counter-clockwise."""
    return _CLOCKWISE[(_CLOCKWISE.index(direction) - 1) % 4]


def right_of(direction: Direction) -> Direction:
    """Rotate a direction 90° clockwise."""
    return _CLOCKWISE[(_CLOCKWISE.index(direction) + 1) % 4]


def manhattan(a: Position, b: Position) -> int:
    """Manhattan (L1) distance on the grid."""
    return abs(a.x - b.x) + abs(a.y - b.y)


def would_hit(game: Game, direction: Direction) -> bool:
    """
    True if moving the head one cell in `direction` would end the game:
    leaving a walled arena, or running into the body (the tail moves away).
    """
    cfg = game.config
    nxt = game.head_position.step(direction)
    if cfg.boundary is BoundaryPolicy.WALL:
        if not nxt.in_bounds(cfg.arena_width, cfg.arena_height):
            return True
    else:
        nxt = nxt.wrapped(cfg.arena_width, cfg.arena_height)
    return nxt in game.snake_positions()[:-1]


def nearest_food(game: Game) -> Optional[Position]:
    head = game.head_position
    foods = game.food_positions()
    if not foods:
        return None
    return min(foods, key=lambda p: manhattan(head, p))


# -----------------------------------------------------------------------------
# Observation function
# -----------------------------------------------------------------------------
def observe(game: Game) -> np.ndarray:
    """
    Compact 9-D observation vector.

    Features:
      0: hx_n  - head x normalized in [0, 1]
      1: hy_n  - head y normalized in [0, 1]
      2: fx_n  - nearest food x normalized in [0, 1] (head x when there is no food)
      3: fy_n  - nearest food y normalized in [0, 1] (head y when there is no food)
      4: dx    - current heading x component in {-1, 0, 1}
      5: dy    - current heading y component in {-1, 0, 1}
      6: danger_ahead  - 1.0 if the next cell forward would be fatal
      7: danger_left   - 1.0 if the next cell to the left would be fatal
      8: danger_right  - 1.0 if the next cell to the right would be fatal
    """
    cfg = game.config
    head = game.head_position
    food = nearest_food(game) or head

    denom_w = max(cfg.arena_width - 1, 1)
    denom_h = max(cfg.arena_height - 1, 1)

    heading = game.direction
    dx, dy = heading.offset

    return np.array(
        [
            head.x / denom_w, head.y / denom_h,
            food.x / denom_w, food.y / denom_h,
            float(dx), float(dy),
            float(would_hit(game, heading)),
            float(would_hit(game, left_of(heading))),
            float(would_hit(game, right_of(heading))),
        ],
        dtype=np.float32,
    )


# -----------------------------------------------------------------------------
# RL Environment
# -----------------------------------------------------------------------------
@dataclass
class SnakeRLEnv:
    """
    Minimal Gym-like environment over the tick-driven game.

    Every step feeds exactly one move interval of time into Game.tick, so the
    snake moves one cell per step while food keeps spawning and rotting on
    the same clock.

    Rewards:
      + eat_reward  per food eaten
      + shaping_coef * (d_before - d_after) toward the nearest food
      + step_penalty per step (tiny negative to discourage dithering)
      + death_reward on game over (ends the episode)
    """
    config: Config = CFG
    step_penalty: float = -0.001
    eat_reward: float = 1.0
    death_reward: float = -1.0
    shaping_coef: float = 0.01
    seed_value: int = 0

    game: Optional[Game] = field(default=None, init=False)
    score: int = field(default=0, init=False)

    def __post_init__(self):
        # Deterministic RNG for reproducibility
        self.rng = random.Random(self.seed_value)
        np.random.seed(self.seed_value)

    # Gym-like API -------------------------------------------------------------
    def reset(self, seed: Optional[int] = None) -> np.ndarray:
        """Start a new episode. Returns the initial observation."""
        if seed is not None:
            self.rng.seed(seed)
            np.random.seed(seed)

        self.game = Game(self.config, rng=self.rng)
        self.score = 0
        return observe(self.game)

    def step(self, action: int):
        """
        Apply an action (0..3), advance exactly one grid step, and return:
          (obs, reward, terminated, info)

        On game over the world has already been reset inside the tick, so the
        terminal observation is the one from just before the fatal move.
        """
        assert self.game is not None, "Call reset() first."
        assert action in ACTIONS, f"Invalid action {action}"

        game = self.game
        food = nearest_food(game)
        d_before = manhattan(game.head_position, food) if food else None
        last_obs = observe(game)

        events: List[GameEvent] = game.tick(game.world.move_interval_ms, ACTIONS[action])

        if GameEvent.GAME_OVER in events:
            info = {"reason": "death", "score": self.score}
            logger.debug("Episode ended with score %d", self.score)
            return last_obs, self.death_reward, True, info

        reward = self.step_penalty
        eaten = events.count(GameEvent.GROWTH)
        if eaten:
            self.score += eaten
            reward += self.eat_reward * eaten
        elif food is not None and food in game.food_positions():
            # shape only while chasing the same food
            reward += self.shaping_coef * (d_before - manhattan(game.head_position, food))

        return observe(game), reward, False, {"score": self.score}

    @property
    def action_space_n(self) -> int:
        return len(ACTIONS)

    @property
    def observation_space_shape(self):
        # 9 features defined in observe()
        return (9,)
