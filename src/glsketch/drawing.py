"""Figure drawing helpers shared by every artwork.

All helpers take a canvas (`GLCanvas` or `SoftCanvas`) first and leave its
matrix stack as they found it.
"""

from __future__ import annotations

import math

import numpy as np

from .figures import BLACK, BLUE, DrawMode, Figure, gen_bezier, gen_poly, points_to_figure


def draw(canvas, mode: DrawMode, fig: Figure, w: float = 3, c=BLACK, alpha: int = 255) -> None:
    if fig.size == 0:
        return
    if mode is DrawMode.AREA:
        canvas.polygon(fig.xs, fig.ys, c, alpha)
    elif mode is DrawMode.AREAFIX:
        canvas.polygon(np.concatenate([[0.0], fig.xs]), np.concatenate([[0.0], fig.ys]), c, alpha)
    elif mode is DrawMode.BORDER:
        canvas.line_strip(fig.xs, fig.ys, w, c, alpha)
    elif mode is DrawMode.POINTS:
        canvas.points(fig.xs, fig.ys, w, c, alpha)
    else:
        raise ValueError(f"unknown draw mode: {mode}")


def draw_with_trans(canvas, mode: DrawMode, fig: Figure, cx: float, cy: float, w: float = 3, c=BLACK) -> None:
    canvas.push()
    canvas.translate(cx, cy)
    draw(canvas, mode, fig, w, c)
    canvas.pop()


def draw_with_rotate(canvas, mode: DrawMode, fig: Figure, angle: float, w: float = 3, c=BLACK) -> None:
    canvas.push()
    canvas.rotate(angle)
    draw(canvas, mode, fig, w, c)
    canvas.pop()


def draw_with_scale(canvas, mode: DrawMode, fig: Figure, sx: float, sy: float, w: float = 3, c=BLACK) -> None:
    canvas.push()
    canvas.scale(sx, sy)
    draw(canvas, mode, fig, w, c)
    canvas.pop()


def draw_with_trans_scale(
    canvas, mode: DrawMode, fig: Figure, cx: float, cy: float, sx: float, sy: float, w: float = 3, c=BLACK
) -> None:
    canvas.push()
    canvas.translate(cx, cy)
    canvas.scale(sx, sy)
    draw(canvas, mode, fig, w, c)
    canvas.pop()


def draw_flower(
    canvas,
    mode: DrawMode,
    fig: Figure,
    n: int,
    r: float,
    sx: float,
    sy: float,
    skip: bool = False,
    w: float = 3,
    c=BLACK,
) -> None:
    """Stamp `n` copies of `fig` around a circle of radius `r`.

    Each copy is rotated to face outward. `skip` shifts the ring by half a
    step so it interleaves with an unskipped ring of the same `n`.
    """
    t1 = math.pi / n if skip else 0.0
    for i in range(n):
        theta = 2 * math.pi * i / n + t1
        canvas.push()
        canvas.translate(r * math.cos(theta), r * math.sin(theta))
        canvas.rotate(math.degrees(theta))
        canvas.scale(sx, sy)
        draw(canvas, mode, fig, w, c)
        canvas.pop()


_UNIT_CIRCLE = gen_poly(32)


def draw_circle(canvas, cx: float, cy: float, r: float, c, alpha: int = 255) -> None:
    canvas.push()
    canvas.translate(cx, cy)
    canvas.scale(r, r)
    draw(canvas, DrawMode.AREA, _UNIT_CIRCLE, c=c, alpha=alpha)
    canvas.pop()


def draw_marker(canvas, p, c, size: float = 0.015) -> None:
    x, y = p
    h = size / 2
    canvas.polygon([x - h, x + h, x + h, x - h], [y - h, y - h, y + h, y + h], c)


def draw_solid_bezier_shape(canvas, points, c, border_width: float, with_points: bool = False) -> None:
    """Bezier outline of a flat anchor/control path, optionally with its control cloud."""
    fig = gen_bezier(points)
    if fig.size == 0:
        return
    if with_points:
        draw(canvas, DrawMode.POINTS, points_to_figure(points), 6, BLUE)
    draw(canvas, DrawMode.BORDER, fig, border_width, c)
