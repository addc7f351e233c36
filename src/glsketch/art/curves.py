"""Gallery of the parametric figure generators, one per cell of a 3x3 grid."""

from __future__ import annotations

from ..drawing import draw_with_trans_scale
from ..figures import (
    BLACK,
    BLUE,
    GREEN,
    ORANGE,
    RED,
    WHITE,
    DrawMode,
    gen_cardioid,
    gen_leaf,
    gen_lemniscate,
    gen_poly,
    gen_rose,
)

TITLE = "Curves"
CLEAR_COLOR = WHITE

CELL = 0.75
SCALE = 0.3

# (figure, mode, color), row-major from the top-left cell.
CELLS = [
    (gen_poly(3), DrawMode.BORDER, BLACK),
    (gen_poly(4, skip=True), DrawMode.BORDER, BLACK),
    (gen_poly(5), DrawMode.BORDER, BLACK),
    (gen_leaf(), DrawMode.AREA, GREEN),
    (gen_cardioid(), DrawMode.AREAFIX, RED),
    (gen_rose(4), DrawMode.BORDER, ORANGE),
    (gen_rose(3, skip=True), DrawMode.BORDER, BLUE),
    (gen_lemniscate(), DrawMode.BORDER, BLACK),
    (gen_poly(100), DrawMode.POINTS, BLUE),
]


def draw_shape(canvas) -> None:
    for i, (fig, mode, color) in enumerate(CELLS):
        row, col = divmod(i, 3)
        cx = (col - 1) * CELL
        cy = (1 - row) * CELL
        draw_with_trans_scale(canvas, mode, fig, cx, cy, SCALE, SCALE, 3, color)
