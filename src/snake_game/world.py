# world.py
from __future__ import annotations

import itertools
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set

from .components import Food, Materials, Position, RandomSource, Snake
from .config import CFG, Config
from .events import EventBus
from .timer import Timer


@dataclass
class World:
    """
    Everything the systems read and write, bundled and passed around explicitly.

    Ownership (the only system allowed to mutate each piece):
      snake segments / last_tail   -> movement, growth, game over
      move_interval_ms / move_timer -> time advance, growth, game over
      foods                         -> spawner, despawner, eating, game over
      spawn_timer                   -> spawner
      food_count                    -> food count tracker
    """
    config: Config
    rng: RandomSource
    materials: Materials
    events: EventBus = field(default_factory=EventBus)

    snake: Snake = field(default_factory=Snake)
    last_tail: Optional[Position] = None
    move_interval_ms: int = 0
    move_timer: Timer = field(default_factory=lambda: Timer(1, repeating=True))

    foods: List[Food] = field(default_factory=list)
    food_count: int = 0
    spawn_timer: Timer = field(default_factory=lambda: Timer(1, repeating=True))

    # Scoreboard across resets
    games_played: int = 0
    best_length: int = 0

    ids: Iterator[int] = field(default_factory=itertools.count)

    def next_id(self) -> int:
        return next(self.ids)

    def occupied(self) -> Set[Position]:
        """Cells taken by a snake segment or a food."""
        cells = {s.position for s in self.snake.segments}
        cells.update(f.position for f in self.foods)
        return cells


def new_world(
    config: Config = CFG,
    rng: Optional[RandomSource] = None,
    materials: Optional[Materials] = None,
) -> World:
    """Fresh world with timers armed from config; the snake is not spawned yet."""
    return World(
        config=config,
        rng=rng if rng is not None else random.Random(config.seed),
        materials=materials or Materials(),
        move_interval_ms=config.base_move_ms,
        move_timer=Timer(config.base_move_ms, repeating=True),
        spawn_timer=Timer(config.food_spawn_ms, repeating=True),
    )
