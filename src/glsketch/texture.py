from __future__ import annotations

import logging
from pathlib import Path

import pygame

log = logging.getLogger(__name__)


class TextureLoadError(RuntimeError):
    pass


class ReferenceImage:
    """Background image traced over while authoring curves.

    Drawn stretched over the [-1, 1] square in world units.
    """

    def __init__(self, surface: pygame.Surface, name: str = "<surface>"):
        self.surface = surface
        self.name = name

    @property
    def size(self) -> tuple[int, int]:
        return self.surface.get_size()

    @property
    def mode(self) -> str:
        if self.surface.get_flags() & pygame.SRCALPHA:
            return "RGBA"
        return "RGB"

    def rgba_bytes(self, flip: bool = True) -> bytes:
        # GL wants the bottom row first.
        return pygame.image.tobytes(self.surface, "RGBA", flip)


def load_reference(path: str | Path) -> ReferenceImage:
    p = Path(path)
    if not p.is_file():
        raise TextureLoadError(f"Could not load texture file '{p}': no such file")
    try:
        surface = pygame.image.load(str(p))
    except pygame.error as e:
        raise TextureLoadError(f"Could not load texture file '{p}': {e}") from e

    ref = ReferenceImage(surface, p.name)
    w, h = ref.size
    log.info("Loaded texture: %s (%dx%d), %s", p.name, w, h, ref.mode)
    return ref
