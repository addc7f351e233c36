from __future__ import annotations

import argparse
import logging
import random

import pygame

from ...gl_draw import init_gl, setup_ortho
from ...logs import setup_logging
from ...primitives import GLCanvas
from . import config
from .logic import handle_key, new_game, update_game_logic
from .render import draw_state

log = logging.getLogger(__name__)

TICK = pygame.USEREVENT + 1

CONTROLS = """Controls:
Arrows: steer the snake
P: pause/resume
R: restart
Q or ESC: give up or quit"""


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="snake", description="Snake clone on a continuous grid.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for apple placement.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    rng = random.Random(args.seed)

    pygame.init()
    flags = pygame.OPENGL | pygame.DOUBLEBUF | pygame.RESIZABLE
    pygame.display.set_mode((config.WIDTH, config.HEIGHT), flags)
    pygame.display.set_caption(config.TITLE)
    init_gl(config.CLEAR_COLOR)
    setup_ortho(config.WIDTH, config.HEIGHT, config.VIEW_EXTENT)
    canvas = GLCanvas()

    state = new_game(rng)
    pygame.time.set_timer(TICK, config.TICK_MS)
    clock = pygame.time.Clock()
    print(CONTROLS)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                running = False
            elif event.type == pygame.KEYDOWN:
                state = handle_key(state, event.key, rng)
            elif event.type == pygame.VIDEORESIZE:
                setup_ortho(event.w, event.h, config.VIEW_EXTENT)
            elif event.type == TICK:
                state = update_game_logic(state, rng)

        draw_state(canvas, state)
        pygame.display.flip()
        clock.tick(config.FPS)

    pygame.quit()
    log.info("Final score: %d", state.score)
