# components.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Protocol, Sequence, Tuple, TypeVar

from .timer import Timer

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that can pick uniformly from a sequence (random.Random does)."""

    def choice(self, seq: Sequence[T]) -> T: ...


# ---------- Grid ----------
@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def step(self, direction: "Direction") -> "Position":
        dx, dy = direction.offset
        return Position(self.x + dx, self.y + dy)

    def in_bounds(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height

    def wrapped(self, width: int, height: int) -> "Position":
        return Position(self.x % width, self.y % height)


@dataclass(frozen=True)
class Size:
    width: float
    height: float

    @classmethod
    def square(cls, x: float) -> "Size":
        return cls(x, x)


# ---------- Direction ----------
class Direction(Enum):
    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"

    @property
    def offset(self) -> Tuple[int, int]:
        # y grows upwards; the renderer flips it
        return _OFFSETS[self]

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def random(cls, rng: RandomSource) -> "Direction":
        return rng.choice(list(cls))


_OFFSETS = {
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, 1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, -1),
}

_OPPOSITES = {
    Direction.LEFT: Direction.RIGHT,
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
}


# ---------- Materials ----------
@dataclass(frozen=True)
class Materials:
    """Opaque handles attached to entities at creation; never inspected here."""
    head: Any = None
    segment: Any = None
    food: Any = None


# ---------- Snake ----------
@dataclass
class Segment:
    id: int
    position: Position
    size: Size
    material: Any = None


@dataclass
class SnakeHead:
    direction: Direction  # heading of the last move
    pending: Direction    # accepted request, committed on the next move


@dataclass
class Snake:
    segments: List[Segment] = field(default_factory=list)  # head at index 0
    head: Optional[SnakeHead] = None

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def head_segment(self) -> Segment:
        assert self.segments, "Snake has no segments; spawn it first."
        return self.segments[0]

    @property
    def direction(self) -> Direction:
        assert self.head is not None, "Snake has no head; spawn it first."
        return self.head.direction

    def positions(self) -> List[Position]:
        return [s.position for s in self.segments]

    def clear(self) -> None:
        self.segments.clear()
        self.head = None


# ---------- Food ----------
@dataclass
class Food:
    id: int
    position: Position
    lifespan: Timer
    size: Size
    material: Any = None
