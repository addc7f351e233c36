from __future__ import annotations

import pygame
from OpenGL.GL import (
    GL_CLAMP_TO_EDGE,
    GL_COLOR_BUFFER_BIT,
    GL_LINEAR,
    GL_LINE_STIPPLE,
    GL_LINE_STRIP,
    GL_POINTS,
    GL_POLYGON,
    GL_QUADS,
    GL_RGBA,
    GL_TEXTURE_2D,
    GL_TEXTURE_MAG_FILTER,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_WRAP_S,
    GL_TEXTURE_WRAP_T,
    GL_UNPACK_ALIGNMENT,
    GL_UNSIGNED_BYTE,
    glBegin,
    glBindTexture,
    glClear,
    glClearColor,
    glColor4ub,
    glDisable,
    glDrawPixels,
    glEnable,
    glEnd,
    glGenTextures,
    glLineStipple,
    glLineWidth,
    glLoadIdentity,
    glPixelStorei,
    glPointSize,
    glPopMatrix,
    glPushMatrix,
    glRasterPos2f,
    glRotatef,
    glScalef,
    glTexCoord2f,
    glTexImage2D,
    glTexParameteri,
    glTranslatef,
    glVertex2f,
)

from .soft import Color, SoftCanvas, font
from .texture import ReferenceImage

__all__ = ["Color", "GLCanvas", "SoftCanvas"]


class GLCanvas:
    """Immediate-mode OpenGL backend; world units come from the ortho projection."""

    def __init__(self) -> None:
        self._textures: dict[int, int] = {}
        self._fonts: dict[int, pygame.font.Font] = {}

    def clear(self, color: Color) -> None:
        r, g, b = [c / 255.0 for c in color]
        glClearColor(r, g, b, 1.0)
        glClear(GL_COLOR_BUFFER_BIT)
        glLoadIdentity()

    def push(self) -> None:
        glPushMatrix()

    def pop(self) -> None:
        glPopMatrix()

    def translate(self, x: float, y: float) -> None:
        glTranslatef(x, y, 0.0)

    def rotate(self, degrees: float) -> None:
        glRotatef(degrees, 0.0, 0.0, 1.0)

    def scale(self, sx: float, sy: float) -> None:
        glScalef(sx, sy, 1.0)

    def polygon(self, xs, ys, color: Color, alpha: int = 255) -> None:
        glColor4ub(*color, alpha)
        glBegin(GL_POLYGON)
        for x, y in zip(xs, ys):
            glVertex2f(x, y)
        glEnd()

    def line_strip(self, xs, ys, width: float, color: Color, alpha: int = 255, dashed: bool = False) -> None:
        glColor4ub(*color, alpha)
        glLineWidth(width)
        if dashed:
            glEnable(GL_LINE_STIPPLE)
            glLineStipple(1, 0xAAAA)
        glBegin(GL_LINE_STRIP)
        for x, y in zip(xs, ys):
            glVertex2f(x, y)
        glEnd()
        if dashed:
            glDisable(GL_LINE_STIPPLE)
        glLineWidth(1.0)

    def points(self, xs, ys, size: float, color: Color, alpha: int = 255) -> None:
        glColor4ub(*color, alpha)
        glPointSize(size)
        glBegin(GL_POINTS)
        for x, y in zip(xs, ys):
            glVertex2f(x, y)
        glEnd()
        glPointSize(1.0)

    def text(self, x: float, y: float, s: str, color: Color, size: int = 24) -> None:
        surf = font(self._fonts, size).render(s, True, color)
        data = pygame.image.tobytes(surf, "RGBA", True)
        glPixelStorei(GL_UNPACK_ALIGNMENT, 1)
        glRasterPos2f(x, y)
        glDrawPixels(surf.get_width(), surf.get_height(), GL_RGBA, GL_UNSIGNED_BYTE, data)

    def _texture_for(self, ref: ReferenceImage) -> int:
        tex = self._textures.get(id(ref))
        if tex is not None:
            return tex
        w, h = ref.size
        tex = glGenTextures(1)
        glBindTexture(GL_TEXTURE_2D, tex)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, GL_CLAMP_TO_EDGE)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, GL_CLAMP_TO_EDGE)
        glPixelStorei(GL_UNPACK_ALIGNMENT, 1)
        glTexImage2D(GL_TEXTURE_2D, 0, GL_RGBA, w, h, 0, GL_RGBA, GL_UNSIGNED_BYTE, ref.rgba_bytes())
        glBindTexture(GL_TEXTURE_2D, 0)
        self._textures[id(ref)] = tex
        return tex

    def image(self, ref: ReferenceImage, alpha: int = 255) -> None:
        tex = self._texture_for(ref)
        glEnable(GL_TEXTURE_2D)
        glBindTexture(GL_TEXTURE_2D, tex)
        # Fixed-function texturing modulates by current color.
        glColor4ub(255, 255, 255, alpha)
        glBegin(GL_QUADS)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(1.0, 1.0)
        glTexCoord2f(0.0, 1.0)
        glVertex2f(-1.0, 1.0)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(-1.0, -1.0)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(1.0, -1.0)
        glEnd()
        glBindTexture(GL_TEXTURE_2D, 0)
        glDisable(GL_TEXTURE_2D)
