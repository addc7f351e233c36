from __future__ import annotations

import math

import numpy as np

from .figure import Figure, lin_space

# Samples per curve (and per Bezier segment).
SEGMENTS = 100


def bezier_point(p0, p1, p2, t: float) -> tuple[float, float]:
    """Point on the quadratic Bezier P0 -> P2 pulled towards control P1."""
    x0, y0 = p0
    x1, y1 = p1
    x2, y2 = p2
    u = 1.0 - t
    uu = u * u
    tt = t * t
    u2t = 2.0 * u * t
    return (uu * x0 + u2t * x1 + tt * x2, uu * y0 + u2t * y1 + tt * y2)


def sample_bezier(p0, p1, p2, n: int = SEGMENTS, include_start: bool = True) -> tuple[np.ndarray, np.ndarray]:
    x0, y0 = p0
    x1, y1 = p1
    x2, y2 = p2
    t = np.arange(0 if include_start else 1, n + 1, dtype=np.float64) / n
    u = 1.0 - t
    xs = u * u * x0 + 2.0 * u * t * x1 + t * t * x2
    ys = u * u * y0 + 2.0 * u * t * y1 + t * t * y2
    return xs, ys


def bezier_segments(points) -> list[tuple]:
    """Split a flat [P0, C1, P1, C2, P2, ...] path into (start, control, end) triples."""
    pts = list(points)
    return [(pts[i], pts[i + 1], pts[i + 2]) for i in range(0, len(pts) - 2, 2)]


def gen_bezier(points, n: int = SEGMENTS) -> Figure:
    """Sample a piecewise quadratic Bezier path.

    `points` alternates anchors and controls, so a valid path has an odd
    number of points, at least three. Anything else gives an empty figure.
    Each segment contributes `n` samples after the shared start anchor, so a
    path of k segments yields k * n + 1 points that pass exactly through every
    anchor.
    """
    pts = [tuple(p) for p in points]
    if len(pts) < 3 or len(pts) % 2 == 0:
        return Figure.empty()

    xs_parts = [np.array([pts[0][0]], dtype=np.float64)]
    ys_parts = [np.array([pts[0][1]], dtype=np.float64)]
    for p0, p1, p2 in bezier_segments(pts):
        xs, ys = sample_bezier(p0, p1, p2, n, include_start=False)
        # Land exactly on the anchor so segments share endpoints bit for bit.
        xs[-1], ys[-1] = p2[0], p2[1]
        xs_parts.append(xs)
        ys_parts.append(ys)
    return Figure(np.concatenate(xs_parts), np.concatenate(ys_parts))


def gen_circle(t1: float = 0.0, t2: float = 2 * math.pi, n: int = SEGMENTS) -> Figure:
    t = lin_space(t1, t2, n)
    return Figure(np.cos(t), np.sin(t))


def gen_poly(n: int, skip: bool = False) -> Figure:
    """Closed regular n-gon on the unit circle (n + 1 points, last == first).

    `skip` rotates it so a flat edge sits at the bottom.
    """
    t1 = -math.pi / 2 - math.pi / n if skip else 0.0
    t = lin_space(0.0, 2 * math.pi, n + 1)
    return Figure(np.cos(t + t1), np.sin(t + t1))


def gen_leaf(h: float = 1.0, l: float = 1.0, n: int = SEGMENTS) -> Figure:
    # Upper arc left to right, then the mirrored lower arc back.
    t = lin_space(0.0, math.pi, n)
    xs = h * (2 * t / math.pi - 1)
    ys = l * np.sin(t)
    return Figure(np.concatenate([xs, xs[::-1]]), np.concatenate([ys, -ys[::-1]]))


def gen_cardioid(t1: float = 0.0, t2: float = 2 * math.pi, a: float = 0.5, n: int = SEGMENTS) -> Figure:
    t = lin_space(t1, t2, n)
    r = a - a * np.sin(t)
    return Figure(r * np.cos(t), r * np.sin(t))


def gen_rose(k: int, skip: bool = False, t1: float = 0.0, t2: float = 2 * math.pi, n: int = SEGMENTS) -> Figure:
    t = lin_space(t1, t2, n)
    r = np.sin(k * t) if skip else np.cos(k * t)
    return Figure(r * np.cos(t), r * np.sin(t))


def gen_lemniscate(t1: float = 0.0, t2: float = 2 * math.pi, a: float = 1.0, n: int = SEGMENTS) -> Figure:
    t = lin_space(t1, t2, n)
    den = 1 + np.sin(t) ** 2
    return Figure(a * np.cos(t) / den, a * np.sin(t) * np.cos(t) / den)
