# render.py
from typing import Tuple

import pygame  # type: ignore

from .components import Position, Size
from .config import BG, TEXT
from .world import World


# ---------- Grid -> pixels ----------
def cell_rect(
    position: Position,
    size: Size,
    arena: Tuple[int, int],
    window: Tuple[int, int],
) -> pygame.Rect:
    """Screen rect for an entity: scaled by its logical size, centred in its cell.

    Grid y grows upwards, screen y grows downwards, so rows are flipped.
    """
    arena_w, arena_h = arena
    win_w, win_h = window
    tile_w = win_w / arena_w
    tile_h = win_h / arena_h

    w = size.width * tile_w
    h = size.height * tile_h
    left = position.x * tile_w + (tile_w - w) / 2
    top = (arena_h - 1 - position.y) * tile_h + (tile_h - h) / 2
    return pygame.Rect(round(left), round(top), round(w), round(h))


def _draw_entity(screen: pygame.Surface, world: World, position: Position, size: Size, material) -> None:
    cfg = world.config
    rect = cell_rect(position, size, (cfg.arena_width, cfg.arena_height), screen.get_size())
    pygame.draw.rect(screen, material, rect)


# ---------- Draw ----------
def draw_world(screen: pygame.Surface, font: pygame.font.Font, world: World) -> None:
    screen.fill(BG)
    for food in world.foods:
        _draw_entity(screen, world, food.position, food.size, food.material)
    # tail first so the head stays on top
    for segment in reversed(world.snake.segments):
        _draw_entity(screen, world, segment.position, segment.size, segment.material)

    hud = f"Length: {len(world.snake)}   Best: {world.best_length}   Games: {world.games_played}"
    screen.blit(font.render(hud, True, TEXT), (8, 6))
