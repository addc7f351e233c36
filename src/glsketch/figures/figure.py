from __future__ import annotations

from enum import Enum

import numpy as np

# Colors are 0-255 RGB triples; alpha is passed separately to the canvas.
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
ORANGE = (204, 128, 51)
YELLOW = (255, 255, 0)
LIGHTBLUE = (135, 206, 235)


class DrawMode(Enum):
    AREA = "area"
    # Filled polygon fanned from the origin; closes open arcs against (0, 0).
    AREAFIX = "areafix"
    BORDER = "border"
    POINTS = "points"


class Figure:
    """Sampled polyline/polygon held as two parallel coordinate arrays."""

    __slots__ = ("xs", "ys")

    def __init__(self, xs, ys):
        xs = np.array(xs, dtype=np.float64).reshape(-1)
        ys = np.array(ys, dtype=np.float64).reshape(-1)
        if xs.shape != ys.shape:
            raise ValueError("the sizes do not match")
        xs.flags.writeable = False
        ys.flags.writeable = False
        self.xs = xs
        self.ys = ys

    @classmethod
    def empty(cls) -> Figure:
        return cls([], [])

    @property
    def size(self) -> int:
        return int(self.xs.shape[0])

    def __len__(self) -> int:
        return self.size

    def __iter__(self):
        return zip(self.xs.tolist(), self.ys.tolist())

    def __repr__(self) -> str:
        return f"Figure(size={self.size})"

    def points(self) -> list[tuple[float, float]]:
        return list(self)


def points_to_figure(points) -> Figure:
    pts = [tuple(p) for p in points]
    return Figure([p[0] for p in pts], [p[1] for p in pts])


def lin_space(t1: float, t2: float, n: int) -> np.ndarray:
    if n <= 1:
        raise ValueError("n must be greater than 1")
    return t1 + (t2 - t1) * np.arange(n, dtype=np.float64) / (n - 1)
