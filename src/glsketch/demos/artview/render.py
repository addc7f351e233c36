from __future__ import annotations

import logging
from pathlib import Path

import pygame

from ...soft import SoftCanvas
from . import config

log = logging.getLogger(__name__)


def draw_frame(canvas, artwork, overlay=None) -> None:
    canvas.clear(artwork.CLEAR_COLOR)
    if overlay is not None:
        overlay.draw_background(canvas)
    artwork.draw_shape(canvas)
    if overlay is not None:
        overlay.draw(canvas)


def render_surface(artwork, size: int, extent: float = config.VIEW_EXTENT, overlay=None) -> pygame.Surface:
    """Draw one frame with the software backend; no display needed."""
    surface = pygame.Surface((size, size))
    draw_frame(SoftCanvas(surface, extent), artwork, overlay)
    return surface


def export_png(artwork, path: str | Path, size: int, overlay=None) -> Path:
    p = Path(path)
    surface = render_surface(artwork, size, overlay=overlay)
    pygame.image.save(surface, str(p))
    log.info("Saved %s (%dx%d) to %s", artwork.TITLE, size, size, p)
    return p
