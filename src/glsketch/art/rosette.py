"""Eight-fold rosette: concentric rings of circles plus stamped ornaments."""

from __future__ import annotations

from ..drawing import draw_flower, draw_with_scale
from ..figures import WHITE, DrawMode, gen_bezier, gen_circle

TITLE = "Rosette"
CLEAR_COLOR = WHITE

FOLD = 8
STROKE = 4

R0 = 0.992
R1 = 0.921

# (ring radius, circle radius, skip) for each ring of small circles.
CIRCLE_RINGS = [
    (0.254, 0.309 - 0.254, False),
    (0.472, 0.522 - 0.472, False),
    (0.472, 0.580 - 0.472, False),
    (0.675, 0.726 - 0.675, False),
    (0.760, 0.806 - 0.760, True),
]

ORNAMENT_1 = [
    (0.868619, -0.306276),
    (0.768201, -0.235983),
    (0.783264, -0.175732),
    (0.823431, -0.11046),
    (0.913808, -0.115481),
    (0.913808, -0.097908),
    (0.916318, -0.100418),
    (0.81841, -0.0677824),
    (0.803347, -0.00251046),
    (0.810879, 0.0728034),
    (0.913808, 0.100418),
    (0.911297, 0.117992),
    (0.911297, 0.117992),
    (0.803347, 0.123013),
    (0.785774, 0.188285),
    (0.768201, 0.251046),
    (0.866109, 0.303766),
]

ORNAMENT_2 = [
    (0.881172, -0.251046),
    (0.833473, -0.220921),
    (0.841004, -0.193305),
    (0.861088, -0.160669),
    (0.903766, -0.168201),
    (0.921339, -0.105439),
    (0.921339, -0.0451883),
    (0.87113, -0.032636),
    (0.863598, 0),
    (0.883682, 0.0527197),
    (0.921339, 0.0476988),
    (0.918828, 0.100418),
    (0.906276, 0.168201),
    (0.846025, 0.168201),
    (0.843515, 0.198326),
    (0.841004, 0.243515),
    (0.883682, 0.253557),
]

ORNAMENT_3 = [
    (0.662762, -0.557322),
    (0.564854, -0.494561),
    (0.552301, -0.421757),
    (0.499582, -0.238494),
    (0.353975, -0.145607),
    (0.283682, -0.0677824),
    (0.253556, -0.0552301),
    (0.138075, -0.0502092),
    (0.138075, -0.0502092),
    (0.0502092, -0.00251046),
    (0.0502092, -0.00251046),
    (0.138075, -0.0527197),
    (0.138075, -0.0527197),
    (0.0351464, -0.0276151),
    (0.0351464, -0.0276151),
    (0.135565, -0.0527197),
    (0.135565, -0.0527197),
    (0.210879, -0.128033),
    (0.210879, -0.128033),
    (0.258577, -0.145607),
    (0.353975, -0.148117),
    (0.542259, -0.16318),
    (0.667782, -0.100418),
    (0.783264, -0.0301255),
    (0.856067, -0.0753138),
]

ORNAMENT_4 = [
    (0.690377, 0.416736),
    (0.632636, 0.37908),
    (0.612552, 0.316318),
    (0.582427, 0.246025),
    (0.582427, 0.246025),
    (0.667782, 0.210879),
    (0.667782, 0.210879),
    (0.738075, 0.180753),
    (0.780753, 0.195816),
]

ORNAMENT_5 = [
    (0.750628, -0.308787),
    (0.846025, -0.351464),
    (0.846025, -0.351464),
]

CIRCLE = gen_circle()
ORNAMENTS = [gen_bezier(pts) for pts in (ORNAMENT_1, ORNAMENT_2, ORNAMENT_3, ORNAMENT_4, ORNAMENT_5)]


def draw_shape(canvas) -> None:
    draw_with_scale(canvas, DrawMode.BORDER, CIRCLE, R0, R0, STROKE)
    draw_with_scale(canvas, DrawMode.BORDER, CIRCLE, R1, R1, STROKE)
    for ring, radius, skip in CIRCLE_RINGS:
        draw_flower(canvas, DrawMode.BORDER, CIRCLE, FOLD, ring, radius, radius, skip, STROKE)
    for fig in ORNAMENTS:
        draw_flower(canvas, DrawMode.BORDER, fig, FOLD, 0.0, 1.0, 1.0, False, STROKE)
