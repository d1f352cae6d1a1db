# game.py
from __future__ import annotations

from typing import List, Optional

from . import systems
from .components import Direction, Materials, Position, RandomSource
from .config import CFG, Config
from .events import GameEvent
from .world import World, new_world


class Game:
    """
    Owns the World and one event reader per consuming system, and runs the
    systems once per tick in a fixed order.

    The caller supplies the clock (elapsed ms per tick) and the input
    (requested Direction or None); rendering reads `world` afterwards.
    """

    def __init__(
        self,
        config: Config = CFG,
        rng: Optional[RandomSource] = None,
        materials: Optional[Materials] = None,
    ):
        self.world: World = new_world(config, rng=rng, materials=materials)
        bus = self.world.events
        self.growth_reader = bus.reader()
        self.game_over_reader = bus.reader()
        self.food_count_reader = bus.reader()

        systems.spawn_snake(self.world)

    @property
    def config(self) -> Config:
        return self.world.config

    def tick(self, elapsed_ms: float, requested: Optional[Direction] = None) -> List[GameEvent]:
        """Advance one tick. Returns the events sent during it."""
        world = self.world
        world.events.update()

        systems.advance_time(world, elapsed_ms)
        systems.snake_movement(world, requested)
        systems.snake_eating(world)
        systems.snake_growth(world, self.growth_reader)
        systems.game_over(world, self.game_over_reader)
        systems.food_spawner(world, elapsed_ms)
        systems.food_despawner(world, elapsed_ms)
        systems.food_count(world, self.food_count_reader)

        return world.events.current()

    # ---------- Read-only queries ----------
    @property
    def head_position(self) -> Position:
        return self.world.snake.head_segment.position

    @property
    def direction(self) -> Direction:
        return self.world.snake.direction

    @property
    def length(self) -> int:
        return len(self.world.snake)

    def snake_positions(self) -> List[Position]:
        return self.world.snake.positions()

    def food_positions(self) -> List[Position]:
        return [f.position for f in self.world.foods]
