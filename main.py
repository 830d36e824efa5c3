import argparse
import logging
import sys

import pygame

from tetris_config import CONFIG, setup_logging
from tetris_engine import Tetris
from tetris_input import handle_event
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import PieceRandom
from tetris_timer import IntervalScheduler

log = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Falling-block puzzle (pygame)")
    p.add_argument("--cols", type=int, default=CONFIG["COLS"], help="board width in cells")
    p.add_argument("--rows", type=int, default=CONFIG["ROWS"], help="board height in cells")
    p.add_argument("--seed", type=int, default=CONFIG["SEED"], help="piece chooser seed")
    p.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"], help="cell size in pixels")
    p.add_argument("--log-level", default=CONFIG["LOG_LEVEL"], help="DEBUG, INFO, WARNING...")
    return p.parse_args(argv)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])
    # held Down keeps soft-dropping through key repeat
    pygame.key.set_repeat(170, 50)

    dims = compute_dims(args.cols, args.rows, args.cell_size)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font, big_font)
    scheduler = IntervalScheduler()
    game = Tetris(args.cols, args.rows, renderer=render, scheduler=scheduler,
                  pieces=PieceRandom(args.seed))
    game.add_game_end_listener(lambda score: log.info("press Enter to play again"))
    clock = pygame.time.Clock()
    log.info("press Enter to start")

    while True:
        dt = clock.tick(60)
        for e in pygame.event.get():
            if e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE):
                pygame.quit(); sys.exit()
            handle_event(game, e)

        scheduler.advance(dt)

        render.paused = game.paused
        render.draw(screen)
        pygame.display.flip()


if __name__ == '__main__':
    main()
