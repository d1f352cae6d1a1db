# systems.py
"""
Per-tick systems. Each one is a plain function over the World; the driver in
game.py calls them once per tick in a fixed order:

    advance_time -> snake_movement -> snake_eating -> snake_growth
    -> game_over -> food_spawner -> food_despawner -> food_count

Systems never call each other; they talk through the World and its EventBus.
"""
from __future__ import annotations

import logging
from typing import Optional

from .components import Direction, Food, Position, Segment, Size, SnakeHead
from .config import BoundaryPolicy
from .events import EventReader, GameEvent
from .timer import Timer
from .world import World

logger = logging.getLogger(__name__)


# ---------- Spawning helpers ----------
def spawn_segment(world: World, position: Position) -> Segment:
    return Segment(
        id=world.next_id(),
        position=position,
        size=Size.square(world.config.segment_size),
        material=world.materials.segment,
    )


def spawn_snake(world: World) -> None:
    """Two-cell snake at the centre of the arena, tail behind a random heading."""
    cfg = world.config
    direction = Direction.random(world.rng)
    head_pos = Position(*cfg.center)
    tail_pos = head_pos.step(direction.opposite())

    head = Segment(
        id=world.next_id(),
        position=head_pos,
        size=Size.square(cfg.head_size),
        material=world.materials.head,
    )
    world.snake.segments = [head, spawn_segment(world, tail_pos)]
    world.snake.head = SnakeHead(direction=direction, pending=direction)
    logger.debug("Snake spawned at %s heading %s", head_pos, direction.name)


# ---------- Snake ----------
def advance_time(world: World, elapsed_ms: float) -> None:
    world.move_timer.tick(elapsed_ms)


def snake_movement(world: World, requested: Optional[Direction]) -> None:
    """
    Steer every tick, move only when the move timer fired.

    A request opposite to the heading of the last move is ignored. Collisions
    are checked against the positions from before the move; the tail cell is
    free because the tail leaves it during the same step.
    """
    snake = world.snake
    assert snake.segments and snake.head is not None, "Snake must be spawned before it can move."
    head = snake.head

    if requested is not None and requested != head.direction.opposite():
        head.pending = requested

    if not world.move_timer.just_finished:
        return

    head.direction = head.pending
    before = snake.positions()
    world.last_tail = before[-1]

    cfg = world.config
    new_head = before[0].step(head.direction)
    if cfg.boundary is BoundaryPolicy.WALL:
        if not new_head.in_bounds(cfg.arena_width, cfg.arena_height):
            logger.debug("Snake hit the wall at %s", new_head)
            world.events.send(GameEvent.GAME_OVER)
            return
    else:
        new_head = new_head.wrapped(cfg.arena_width, cfg.arena_height)

    if new_head in before[:-1]:
        logger.debug("Snake bit itself at %s", new_head)
        world.events.send(GameEvent.GAME_OVER)

    snake.segments[0].position = new_head
    for segment, position in zip(snake.segments[1:], before):
        segment.position = position


def snake_eating(world: World) -> None:
    if not world.move_timer.just_finished:
        return

    head_pos = world.snake.head_segment.position
    eaten = [f for f in world.foods if f.position == head_pos]
    if not eaten:
        return

    world.foods = [f for f in world.foods if f.position != head_pos]
    for food in eaten:
        logger.debug("Food %d eaten at %s", food.id, head_pos)
        world.events.send(GameEvent.GROWTH)


def snake_growth(world: World, reader: EventReader) -> None:
    """One new tail segment and a faster move timer per GROWTH event."""
    cfg = world.config
    for event in reader.read(world.events):
        if event is not GameEvent.GROWTH:
            continue
        assert world.last_tail is not None, "Growth without a cached tail position."

        world.snake.segments.append(spawn_segment(world, world.last_tail))
        world.move_interval_ms = max(cfg.min_move_ms, world.move_interval_ms - cfg.move_step_ms)
        world.move_timer = Timer(world.move_interval_ms, repeating=True)
        logger.debug(
            "Snake grew to %d, moving every %d ms", len(world.snake), world.move_interval_ms
        )


def game_over(world: World, reader: EventReader) -> None:
    """Reset to a fresh snake; any number of GAME_OVER events in a tick means one reset."""
    if GameEvent.GAME_OVER not in reader.read(world.events):
        return

    cfg = world.config
    length = len(world.snake)
    world.games_played += 1
    world.best_length = max(world.best_length, length)
    logger.info(
        "Game over: length %d (best %d, games %d)",
        length, world.best_length, world.games_played,
    )

    world.foods.clear()
    world.snake.clear()
    world.last_tail = None
    world.move_interval_ms = cfg.base_move_ms
    world.move_timer = Timer(cfg.base_move_ms, repeating=True)
    spawn_snake(world)


# ---------- Food ----------
def food_spawner(world: World, elapsed_ms: float) -> None:
    cfg = world.config
    world.spawn_timer.tick(elapsed_ms)
    if not world.spawn_timer.just_finished or world.food_count >= cfg.max_food:
        return

    occupied = world.occupied()
    if len(occupied) >= cfg.cell_count:
        # the arena is full: nothing to do until something moves out of the way
        return

    free = [
        Position(x, y)
        for x in range(cfg.arena_width)
        for y in range(cfg.arena_height)
        if Position(x, y) not in occupied
    ]

    food = Food(
        id=world.next_id(),
        position=world.rng.choice(free),
        lifespan=Timer(cfg.food_lifespan_ms),
        size=Size.square(cfg.food_size),
        material=world.materials.food,
    )
    world.foods.append(food)
    world.events.send(GameEvent.FOOD_SPAWNED)
    logger.debug("Food %d spawned at %s", food.id, food.position)


def food_despawner(world: World, elapsed_ms: float) -> None:
    rotted = [f for f in world.foods if f.lifespan.tick(elapsed_ms).just_finished]
    if not rotted:
        return

    world.foods = [f for f in world.foods if not f.lifespan.finished]
    for food in rotted:
        logger.debug("Food %d rotted at %s", food.id, food.position)
        world.events.send(GameEvent.FOOD_ROTTED)


def food_count(world: World, reader: EventReader) -> None:
    for event in reader.read(world.events):
        if event is GameEvent.FOOD_SPAWNED:
            world.food_count += 1
        elif event in (GameEvent.GROWTH, GameEvent.FOOD_ROTTED):
            world.food_count = max(world.food_count - 1, 0)
        elif event is GameEvent.GAME_OVER:
            world.food_count = 0
