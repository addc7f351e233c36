from __future__ import annotations

import argparse
import logging

import pygame

from ...art import ARTWORKS
from ...bezier import CONTROLS, DebugOverlay
from ...gl_draw import init_gl, screen_to_world, setup_ortho
from ...logs import setup_logging
from ...primitives import GLCanvas
from ...texture import TextureLoadError, load_reference
from . import config
from .render import draw_frame, export_png

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="artview", description="Show a procedural artwork.")
    parser.add_argument("art", nargs="?", default=config.DEFAULT_ART, choices=sorted(ARTWORKS))
    parser.add_argument("--reference", metavar="IMAGE", help="Image shown behind the art in debug mode.")
    parser.add_argument("--no-debug", action="store_true", help="Start with the debug overlay hidden.")
    parser.add_argument("--export", metavar="PNG", help="Render to a PNG file and exit (no window).")
    parser.add_argument("--size", type=int, default=config.WIDTH, help="Window or export size in pixels.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    artwork = ARTWORKS[args.art]

    pygame.init()
    reference = None
    if args.reference:
        try:
            reference = load_reference(args.reference)
        except TextureLoadError as e:
            log.error("%s", e)
            pygame.quit()
            raise SystemExit(1)

    overlay = DebugOverlay(reference, enabled=not args.no_debug)

    if args.export:
        export_png(artwork, args.export, args.size, overlay if reference is not None else None)
        pygame.quit()
        return

    size = (args.size, args.size)
    pygame.display.set_mode(size, pygame.OPENGL | pygame.DOUBLEBUF | pygame.RESIZABLE)
    pygame.display.set_caption(artwork.TITLE)
    init_gl(artwork.CLEAR_COLOR)
    setup_ortho(*size, config.VIEW_EXTENT)
    canvas = GLCanvas()
    clock = pygame.time.Clock()
    print(CONTROLS)

    def world(pos):
        w, h = pygame.display.get_window_size()
        return screen_to_world(pos[0], pos[1], w, h, config.VIEW_EXTENT)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                running = False
            elif event.type == pygame.KEYDOWN:
                exported = overlay.handle_key(event.key)
                if exported:
                    print(exported)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                overlay.handle_button(event.button, True, world(event.pos))
            elif event.type == pygame.MOUSEBUTTONUP:
                overlay.handle_button(event.button, False, world(event.pos))
            elif event.type == pygame.MOUSEMOTION:
                overlay.handle_motion(world(event.pos))
            elif event.type == pygame.VIDEORESIZE:
                setup_ortho(event.w, event.h, config.VIEW_EXTENT)

        draw_frame(canvas, artwork, overlay)
        pygame.display.flip()
        clock.tick(config.FPS)

    pygame.quit()
