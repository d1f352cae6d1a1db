"""Shared helpers: scripted random sources and hand-built worlds."""

import pytest

from snake_game.components import Direction, Food, Position, Segment, Size, SnakeHead
from snake_game.config import Config
from snake_game.timer import Timer
from snake_game.world import new_world


class ScriptedRandom:
    """Returns the scripted picks in order; each pick must be a valid choice."""

    def __init__(self, picks=()):
        self.picks = list(picks)
        self.seen = []  # every sequence passed to choice()

    def choice(self, seq):
        seq = list(seq)
        self.seen.append(seq)
        if not self.picks:
            return seq[0]
        pick = self.picks.pop(0)
        assert pick in seq, f"scripted pick {pick} is not among the choices"
        return pick


def small_config(**changes):
    return Config(arena_width=15, arena_height=15).replace(**changes)


def place_snake(world, cells, direction):
    world.snake.segments = [
        Segment(world.next_id(), Position(*cell), Size.square(0.8)) for cell in cells
    ]
    world.snake.head = SnakeHead(direction=direction, pending=direction)


def add_food(world, cell, lifespan_ms=5000):
    food = Food(world.next_id(), Position(*cell), Timer(lifespan_ms), Size.square(0.8))
    world.foods.append(food)
    return food


def fire_move_timer(world):
    world.move_timer.tick(world.move_interval_ms)
    assert world.move_timer.just_finished


@pytest.fixture
def rng():
    return ScriptedRandom()


@pytest.fixture
def world(rng):
    """15x15 wrap-around world with the snake at (7,7) heading up, tail at (7,6)."""
    w = new_world(small_config(), rng=rng)
    place_snake(w, [(7, 7), (7, 6)], Direction.UP)
    return w
