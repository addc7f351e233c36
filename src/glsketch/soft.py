from __future__ import annotations

import pygame

from .linalg import Mat3
from .texture import ReferenceImage
from .viewport import view_bounds

Color = tuple[int, int, int]


def font(cache: dict[int, pygame.font.Font], size: int) -> pygame.font.Font:
    f = cache.get(size)
    if f is None:
        if not pygame.font.get_init():
            pygame.font.init()
        f = pygame.font.Font(None, size)
        cache[size] = f
    return f

class SoftCanvas:
    """Software backend: world-space drawing onto a pygame Surface.

    Keeps its own matrix stack so the same drawing code can run headless
    (PNG export, tests) and on the GL backend.
    """

    def __init__(self, surface: pygame.Surface, extent: float):
        self.surface = surface
        self.extent = float(extent)
        self._matrix = Mat3.identity()
        self._stack: list[Mat3] = []
        self._fonts: dict[int, pygame.font.Font] = {}

    @property
    def depth(self) -> int:
        return len(self._stack)

    def clear(self, color: Color) -> None:
        self.surface.fill(color)
        self._matrix = Mat3.identity()
        self._stack.clear()

    def push(self) -> None:
        self._stack.append(self._matrix.clone())

    def pop(self) -> None:
        if not self._stack:
            raise RuntimeError("matrix stack underflow")
        self._matrix = self._stack.pop()

    def translate(self, x: float, y: float) -> None:
        self._matrix = self._matrix @ Mat3.translate(x, y)

    def rotate(self, degrees: float) -> None:
        self._matrix = self._matrix @ Mat3.rotate(degrees)

    def scale(self, sx: float, sy: float) -> None:
        self._matrix = self._matrix @ Mat3.scale(sx, sy)

    def to_pixels(self, xs, ys) -> list[tuple[float, float]]:
        wx, wy = self._matrix.transform_points(xs, ys)
        w, h = self.surface.get_size()
        left, right, bottom, top = view_bounds(w, h, self.extent)
        px = (wx - left) / (right - left) * w
        py = (top - wy) / (top - bottom) * h
        return list(zip(px.tolist(), py.tolist()))

    def _layer(self, alpha: int) -> pygame.Surface:
        if alpha >= 255:
            return self.surface
        return pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)

    def _commit(self, layer: pygame.Surface) -> None:
        if layer is not self.surface:
            self.surface.blit(layer, (0, 0))

    def polygon(self, xs, ys, color: Color, alpha: int = 255) -> None:
        pts = self.to_pixels(xs, ys)
        if len(pts) < 3:
            return
        layer = self._layer(alpha)
        pygame.draw.polygon(layer, (*color, alpha), pts)
        self._commit(layer)

    def line_strip(self, xs, ys, width: float, color: Color, alpha: int = 255, dashed: bool = False) -> None:
        pts = self.to_pixels(xs, ys)
        if len(pts) < 2:
            return
        w = max(1, int(round(width)))
        layer = self._layer(alpha)
        if dashed:
            for i in range(0, len(pts) - 1, 2):
                pygame.draw.line(layer, (*color, alpha), pts[i], pts[i + 1], w)
        else:
            pygame.draw.lines(layer, (*color, alpha), False, pts, w)
        self._commit(layer)

    def points(self, xs, ys, size: float, color: Color, alpha: int = 255) -> None:
        s = max(1, int(round(size)))
        layer = self._layer(alpha)
        for px, py in self.to_pixels(xs, ys):
            rect = pygame.Rect(int(px - s / 2), int(py - s / 2), s, s)
            pygame.draw.rect(layer, (*color, alpha), rect)
        self._commit(layer)

    def text(self, x: float, y: float, s: str, color: Color, size: int = 24) -> None:
        # (x, y) is the bottom-left corner of the rendered string.
        surf = font(self._fonts, size).render(s, True, color)
        (px, py), = self.to_pixels([x], [y])
        self.surface.blit(surf, (int(px), int(py) - surf.get_height()))

    def image(self, ref: ReferenceImage, alpha: int = 255) -> None:
        (x0, y0), (x1, y1) = self.to_pixels([-1.0, 1.0], [1.0, -1.0])
        left, top = min(x0, x1), min(y0, y1)
        w, h = int(abs(x1 - x0)), int(abs(y1 - y0))
        if w <= 0 or h <= 0:
            return
        scaled = pygame.transform.scale(ref.surface, (w, h))
        scaled.set_alpha(alpha)
        self.surface.blit(scaled, (int(left), int(top)))
