"""Batman emblem: black bat over a yellow ellipse, drawn as a mirrored half."""

from __future__ import annotations

from ..drawing import draw, draw_with_scale
from ..figures import BLACK, WHITE, YELLOW, DrawMode, gen_bezier, gen_circle

TITLE = "Batman"
CLEAR_COLOR = WHITE

R0 = 0.979
# The emblem is an ellipse: squash the unit-circle layout vertically.
SQUASH_Y = 0.56

# Left half of the bat silhouette, anchor/control alternating.
BAT_HALF = [
    (0.000, -0.70795),
    (-0.243515, -0.682845),
    (-0.537238, -0.650209),
    (-0.866109, -0.426778),
    (-0.87364, -0.00251046),
    (-0.87364, 0.474477),
    (-0.374059, 0.738075),
    (-0.115481, 0.810879),
    (0.000, 0.843515),
]

CUTOUT_EAR = [
    (-0.364017, 0.76067),
    (-0.484519, 0.48954),
    (-0.38159, 0.321339),
    (-0.316318, 0.21841),
    (-0.208368, 0.241004),
    (-0.138075, 0.268619),
    (-0.128033, 0.336402),
    (-0.100418, 0.532218),
    (-0.100418, 0.846025),
]

CUTOUT_HEAD = [
    (-0.105439, 0.828452),
    (-0.0451883, 0.637657),
    (-0.032636, 0.615063),
    (-0.0150628, 0.612552),
    (0, 0.612552),
    (0, 0.853557),
    (0, 0.87364),
]

CUTOUT_WING = [
    (-0.519665, -0.672803),
    (-0.615063, -0.519665),
    (-0.567364, -0.358996),
    (-0.504603, -0.228452),
    (-0.421757, -0.288703),
    (-0.321339, -0.361506),
    (-0.303766, -0.429289),
    (-0.238494, -0.587448),
    (-0.188285, -0.70795),
]

CUTOUT_TAIL = [
    (-0.308787, -0.454393),
    (-0.278661, -0.306276),
    (-0.198326, -0.306276),
    (-0.135565, -0.296234),
    (-0.0853556, -0.394142),
    (-0.0225941, -0.542259),
    (0.000, -0.705439),
    (-0.0225941, -0.725523),
    (-0.249, -0.7285),
]

CIRCLE = gen_circle()
BAT = gen_bezier(BAT_HALF)
CUTOUTS = [gen_bezier(pts) for pts in (CUTOUT_EAR, CUTOUT_HEAD, CUTOUT_WING, CUTOUT_TAIL)]


def _draw_half(canvas) -> None:
    draw(canvas, DrawMode.AREA, BAT, 1, BLACK)
    for fig in CUTOUTS:
        draw(canvas, DrawMode.AREA, fig, 1, YELLOW)


def draw_shape(canvas) -> None:
    canvas.push()
    canvas.scale(1.0, SQUASH_Y)
    draw_with_scale(canvas, DrawMode.AREA, CIRCLE, R0, R0, 1, YELLOW)
    draw_with_scale(canvas, DrawMode.BORDER, CIRCLE, R0, R0, 9)
    _draw_half(canvas)
    canvas.push()
    canvas.scale(-1.0, 1.0)
    _draw_half(canvas)
    canvas.pop()
    canvas.pop()
