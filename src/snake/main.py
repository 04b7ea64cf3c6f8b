# main.py
import argparse
import dataclasses
import logging
from typing import List, Optional

import pygame # type: ignore

from .config import CELL_SIZE, CFG, DOWN, GRID_H, GRID_W, LEFT, RIGHT, UP, Config
from .game import RESTART, new_game_state, set_direction, update
from .render import draw_frame

KEY_MAP = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_r: RESTART,
}
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snake", description="Classic grid snake.")
    parser.add_argument("--grid-width", type=int, default=GRID_W)
    parser.add_argument("--grid-height", type=int, default=GRID_H)
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="pixels per grid cell")
    parser.add_argument("--seed", type=int, default=CFG.seed, help="seed for food placement")
    parser.add_argument("--move-period", type=float, default=CFG.move_period, help="seconds per move")
    parser.add_argument("--fps", type=int, default=CFG.fps)
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    args = parser.parse_args(argv)

    for flag in ("grid_width", "grid_height", "cell_size", "move_period", "fps"):
        if getattr(args, flag) <= 0:
            parser.error(f"--{flag.replace('_', '-')} must be positive, got {getattr(args, flag)}")
    return args

def config_from_args(args: argparse.Namespace) -> Config:
    return dataclasses.replace(
        CFG,
        seed=args.seed,
        move_period=args.move_period,
        fps=args.fps,
        debug=args.debug,
    )

def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    cfg = config_from_args(args)
    logging.basicConfig(
        level=logging.DEBUG if cfg.debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    # Fail on bad dimensions before a window opens
    state = new_game_state(args.grid_width, args.grid_height, cfg)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((args.grid_width * args.cell_size, args.grid_height * args.cell_size))
    pygame.display.set_caption("Snake Game")
    clock = pygame.time.Clock()

    running = True
    while running:
        # 1) input, applied immediately; only the last one before a move counts
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in QUIT_KEYS:
                    running = False
                elif event.key in KEY_MAP:
                    state = set_direction(state, KEY_MAP[event.key])
        if not running:
            break

        # 2) update; movement gated by the move timer
        dt = clock.tick(cfg.fps) / 1000.0
        update(state, dt)

        # 3) render
        draw_frame(screen, font, state, args.cell_size)

    pygame.quit()
    print("Game Over! Score:", state.score)

if __name__ == "__main__":
    main()
