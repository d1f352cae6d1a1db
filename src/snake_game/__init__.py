# src/snake_game/__init__.py
"""Tick-driven Snake: event-coupled systems over an explicit World."""

from .components import Direction, Food, Materials, Position, Segment, Size, Snake, SnakeHead
from .config import CFG, BoundaryPolicy, Config
from .events import EventBus, EventReader, GameEvent
from .game import Game
from .timer import Timer
from .world import World, new_world

__all__ = [
    "BoundaryPolicy", "CFG", "Config",
    "Direction", "Food", "Materials", "Position", "Segment", "Size", "Snake", "SnakeHead",
    "EventBus", "EventReader", "GameEvent",
    "Game", "Timer", "World", "new_world",
]
