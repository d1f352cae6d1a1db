from dataclasses import dataclass, replace as _replace
from enum import Enum
from typing import Optional

# ----- Window -----
WIDTH, HEIGHT = 800, 800
FPS = 60

# ----- Colors (passed through to the renderer as material handles) -----
BG      = (10, 10, 10)
HEAD    = (178, 178, 178)
SEGMENT = (76, 76, 76)
FOOD    = (255, 0, 255)
TEXT    = (220, 220, 230)


class BoundaryPolicy(str, Enum):
    WRAP = "wrap"   # leaving one edge re-enters from the opposite one
    WALL = "wall"   # leaving the arena ends the game


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass(frozen=True)
class Config:
    seed: Optional[int] = None

    # Grid
    arena_width: int = 25
    arena_height: int = 25
    boundary: BoundaryPolicy = BoundaryPolicy.WRAP

    # Snake speed
    base_move_ms: int = 350
    move_step_ms: int = 10  # faster by this much per growth
    min_move_ms: int = 10

    # Food
    food_spawn_ms: int = 2000
    food_lifespan_ms: int = 5000
    max_food: int = 10

    # Logical sizes, as a fraction of one cell
    head_size: float = 0.8
    segment_size: float = 0.65
    food_size: float = 0.8

    def __post_init__(self):
        """Reject settings the game loop cannot run with."""
        if self.arena_width < 3 or self.arena_height < 3:
            # the centred two-cell snake needs a free cell on every side
            raise ValueError(
                f"Arena must be at least 3x3, got {self.arena_width}x{self.arena_height}"
            )
        if self.min_move_ms <= 0 or self.base_move_ms <= 0:
            raise ValueError("Move intervals must be positive")
        if self.min_move_ms > self.base_move_ms:
            raise ValueError(
                f"min_move_ms ({self.min_move_ms}) exceeds base_move_ms ({self.base_move_ms})"
            )
        if self.move_step_ms < 0:
            raise ValueError("move_step_ms cannot be negative")
        if self.food_spawn_ms <= 0 or self.food_lifespan_ms <= 0:
            raise ValueError("Food timers must be positive")
        if self.max_food <= 0:
            raise ValueError("max_food must be positive")
        # Accept plain strings such as "wall" coming from the CLI
        object.__setattr__(self, "boundary", BoundaryPolicy(self.boundary))

    @property
    def center(self):
        return self.arena_width // 2, self.arena_height // 2

    @property
    def cell_count(self) -> int:
        return self.arena_width * self.arena_height

    def replace(self, **changes) -> "Config":
        """Copy with some fields changed (validated again)."""
        return _replace(self, **changes)


CFG = Config()
