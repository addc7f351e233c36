"""Line mandala built from a handful of primitive figures."""

from __future__ import annotations

import math

from ..drawing import draw_flower, draw_with_scale
from ..figures import WHITE, DrawMode, gen_poly, points_to_figure

TITLE = "Mandala"
CLEAR_COLOR = WHITE

R0 = 1.000
R1 = 0.768
R2 = 0.360
GAP = 0.025

_D = R2 * math.cos(math.pi / 4)

# Four-pointed star arm: from the hub out to the inner ring and back.
SHARP = points_to_figure(
    [
        (0.151, 0.0),
        (_D, _D),
        (R1, 0.0),
        (_D, -_D),
        (0.151, 0.0),
    ]
)
SPOKE = points_to_figure([(0.0, 0.0), (R1, 0.0)])
SQUARE = gen_poly(4, skip=True)
CIRCLE = gen_poly(100)


def draw_shape(canvas) -> None:
    draw_with_scale(canvas, DrawMode.BORDER, CIRCLE, R0, R0)
    draw_with_scale(canvas, DrawMode.BORDER, SQUARE, R2, R2, 4)
    draw_with_scale(canvas, DrawMode.BORDER, CIRCLE, R1, R1)

    # Ring of circles filling the band between the two outer circles.
    bead = (R0 - R1) / 2 - GAP
    draw_flower(canvas, DrawMode.BORDER, CIRCLE, 8, (R0 + R1) / 2, bead, bead)
    draw_flower(canvas, DrawMode.BORDER, SHARP, 4, 0.0, 1.0, 1.0)
    draw_flower(canvas, DrawMode.BORDER, SPOKE, 4, 0.0, 1.0, 1.0, skip=True)
