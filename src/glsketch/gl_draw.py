from __future__ import annotations

from OpenGL.GL import (
    GL_BLEND,
    GL_LINE_SMOOTH,
    GL_LINE_SMOOTH_HINT,
    GL_MODELVIEW,
    GL_NICEST,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_PROJECTION,
    GL_SRC_ALPHA,
    glBlendFunc,
    glClearColor,
    glEnable,
    glHint,
    glLoadIdentity,
    glMatrixMode,
    glOrtho,
    glViewport,
)

from .viewport import screen_to_world, view_bounds, world_to_screen

__all__ = ["init_gl", "screen_to_world", "setup_ortho", "view_bounds", "world_to_screen"]


def setup_ortho(width: int, height: int, extent: float) -> None:
    glViewport(0, 0, width, max(1, height))
    glMatrixMode(GL_PROJECTION)
    glLoadIdentity()
    left, right, bottom, top = view_bounds(width, height, extent)
    glOrtho(left, right, bottom, top, -1.0, 1.0)
    glMatrixMode(GL_MODELVIEW)
    glLoadIdentity()


def init_gl(clear_color: tuple[int, int, int], smooth_lines: bool = True) -> None:
    r, g, b = [c / 255.0 for c in clear_color]
    glClearColor(r, g, b, 1.0)
    glEnable(GL_BLEND)
    glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
    if smooth_lines:
        glEnable(GL_LINE_SMOOTH)
        glHint(GL_LINE_SMOOTH_HINT, GL_NICEST)
