# controls.py
from typing import Optional, Sequence

import pygame  # type: ignore

from .components import Direction

# Checked in this order when several keys are held
KEYMAP = (
    ((pygame.K_LEFT, pygame.K_a), Direction.LEFT),
    ((pygame.K_DOWN, pygame.K_s), Direction.DOWN),
    ((pygame.K_UP, pygame.K_w), Direction.UP),
    ((pygame.K_RIGHT, pygame.K_d), Direction.RIGHT),
)


def read_direction(pressed: Sequence[bool]) -> Optional[Direction]:
    """Map polled key state (pygame.key.get_pressed()) to a requested Direction."""
    for keys, direction in KEYMAP:
        if any(pressed[k] for k in keys):
            return direction
    return None
