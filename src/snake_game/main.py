# main.py
import argparse
import logging

import pygame  # type: ignore

from .components import Materials
from .config import CFG, FOOD, FPS, HEAD, HEIGHT, SEGMENT, WIDTH, BoundaryPolicy
from .controls import read_direction
from .game import Game
from .render import draw_world

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake.")
    parser.add_argument("--walls", action="store_true", help="leaving the arena ends the game (default: wrap around)")
    parser.add_argument("--width", type=int, default=CFG.arena_width, help="arena width in cells")
    parser.add_argument("--height", type=int, default=CFG.arena_height, help="arena height in cells")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement and headings")
    parser.add_argument("--log-level", type=str, default="INFO", help="DEBUG shows every food and growth event")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        cfg = CFG.replace(
            arena_width=args.width,
            arena_height=args.height,
            seed=args.seed,
            boundary=BoundaryPolicy.WALL if args.walls else BoundaryPolicy.WRAP,
        )
    except ValueError as exc:
        raise SystemExit(f"Invalid settings: {exc}")

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake!")
    clock = pygame.time.Clock()

    game = Game(cfg, materials=Materials(head=HEAD, segment=SEGMENT, food=FOOD))
    logger.info(
        "Starting %dx%d arena, boundary=%s", cfg.arena_width, cfg.arena_height, cfg.boundary.value
    )

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
        if not running:
            break
        requested = read_direction(pygame.key.get_pressed())

        # 2) update; clock.tick() returns the ms since the previous frame
        game.tick(clock.tick(FPS), requested)

        # 3) render
        draw_world(screen, font, game.world)
        pygame.display.flip()

    logger.info("Quit after %d game(s), best length %d", game.world.games_played, game.world.best_length)
    pygame.quit()


if __name__ == "__main__":
    main()
