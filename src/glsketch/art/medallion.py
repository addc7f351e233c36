"""Medallion: concentric rings of coloured beads and spirals around a
four-way mirrored centre ornament."""

from __future__ import annotations

from ..drawing import draw, draw_with_scale, draw_with_trans_scale
from ..figures import BLACK, LIGHTBLUE, RED, WHITE, DrawMode, gen_bezier, gen_circle

TITLE = "Medallion"
CLEAR_COLOR = WHITE

AMBER = (255, 165, 0)

R0 = 1.000
R1 = 0.919
R2 = 0.633
R3 = 0.482
R4 = 0.442
R5 = 0.163
R6 = 0.138

# Upper-left quarter of the centre ornament. Fills close on the origin;
# the *_OUTLINE paths stroke only the visible edge.
PROTRUSION_1 = [
    (-0.117992, 0.10795),
    (-0.185774, 0.183264),
    (-0.180753, 0.27364),
    (-0.150628, 0.399163),
    (0.0, 0.414226),
    (0.0, 0.0),
    (0.0, 0.0),
]

PROTRUSION_2 = [
    (-0.0953975, 0.130544),
    (-0.16569, 0.233473),
    (-0.11046, 0.311297),
    (-0.0552301, 0.366527),
    (0.0, 0.364017),
    (0.0, 0.0),
    (0.0, 0.0),
]

PROTRUSION_3 = [
    (-0.0702929, 0.145607),
    (-0.120502, 0.288703),
    (0.0, 0.303766),
    (0.0, 0.0),
    (0.0, 0.0),
]

PROTRUSION_1_OUTLINE = [
    (-0.117992, 0.10795),
    (-0.185774, 0.183264),
    (-0.180753, 0.27364),
    (-0.150628, 0.399163),
    (0.0, 0.414226),
]

PROTRUSION_2_OUTLINE = [
    (-0.0953975, 0.130544),
    (-0.16569, 0.233473),
    (-0.11046, 0.311297),
    (-0.0552301, 0.366527),
    (0.0, 0.364017),
]

PROTRUSION_3_OUTLINE = [
    (-0.0702929, 0.145607),
    (-0.120502, 0.288703),
    (0.0, 0.303766),
]

SPIRAL_1 = [
    (-0.258577, 0.170711),
    (-0.258577, 0.210879),
    (-0.288703, 0.195816),
    (-0.313808, 0.170711),
    (-0.27364, 0.148117),
    (-0.21841, 0.145607),
    (-0.235983, 0.190795),
    (-0.268619, 0.258577),
    (-0.32636, 0.213389),
    (-0.356485, 0.173222),
    (-0.313808, 0.125523),
    (-0.235983, 0.0903766),
    (-0.185774, 0.123013),
    (-0.148117, 0.16569),
    (-0.210879, 0.266109),
    (-0.230962, 0.311297),
    (-0.298745, 0.318828),
]

SPIRAL_2 = [
    (-0.150628, 0.0602511),
    (-0.198326, 0.11046),
    (-0.256067, 0.115481),
    (-0.321339, 0.11046),
    (-0.323849, 0.0602511),
    (-0.313808, 0.0150628),
    (-0.253556, 0.00753138),
    (-0.188285, 0.0175732),
    (-0.195816, 0.0426778),
    (-0.223431, 0.0853557),
    (-0.268619, 0.0702929),
    (-0.286192, 0.032636),
    (-0.241004, 0.0301255),
    (-0.213389, 0.0451883),
    (-0.235983, 0.0577406),
]

INNER_BEAD_1 = [
    (0.469456, 0.123013),
    (0.592469, 0.180753),
    (0.524686, 0.308787),
    (0.449372, 0.414226),
    (0.341423, 0.343933),
]

INNER_BEAD_2 = [
    (0.461925, 0.145607),
    (0.557322, 0.195816),
    (0.502092, 0.298745),
    (0.441841, 0.371548),
    (0.361506, 0.323849),
]

INNER_BEAD_3 = [
    (0.449372, 0.175732),
    (0.519665, 0.210879),
    (0.479498, 0.286193),
    (0.431799, 0.336402),
    (0.37908, 0.303766),
]

MIDDLE_BEAD_1 = [
    (0.238494, 0.582427),
    (0.391632, 0.828452),
    (0.632636, 0.622594),
    (0.8159, 0.3841),
    (0.589958, 0.241004),
]

MIDDLE_BEAD_2 = [
    (0.569874, 0.283682),
    (0.743096, 0.414226),
    (0.587448, 0.6),
    (0.416736, 0.738075),
    (0.286192, 0.567364),
]

MIDDLE_BEAD_3 = [
    (0.542259, 0.331381),
    (0.65272, 0.439331),
    (0.54477, 0.562343),
    (0.414226, 0.645188),
    (0.333891, 0.537239),
]

OUTER_BEAD_1 = [
    (0.916318, 0.0702929),
    (0.98159, 0.092887),
    (0.976569, 0.16318),
    (0.964017, 0.228452),
    (0.893724, 0.223431),
]

OUTER_BEAD_2 = [
    (0.918828, 0.0853557),
    (0.974059, 0.115481),
    (0.964017, 0.16569),
    (0.948954, 0.208368),
    (0.896234, 0.210879),
]

OUTER_BEAD_3 = [
    (0.913808, 0.105439),
    (0.956485, 0.120502),
    (0.946444, 0.16318),
    (0.931381, 0.198326),
    (0.898745, 0.190795),
]

MIDDLE_SPIRAL_1 = [
    (-0.369038, 0.841004),
    (-0.37908, 0.685356),
    (-0.233473, 0.657741),
    (-0.123013, 0.695398),
    (-0.150628, 0.800837),
    (-0.230962, 0.876151),
    (-0.288703, 0.793306),
    (-0.283682, 0.70795),
    (-0.21841, 0.730544),
    (-0.183264, 0.76569),
    (-0.21841, 0.793306),
    (-0.256067, 0.800837),
    (-0.253556, 0.770711),
    (-0.248536, 0.740586),
    (-0.21841, 0.748117),
]

MIDDLE_SPIRAL_2 = [
    (-0.120502, 0.620084),
    (-0.175732, 0.685356),
    (-0.158159, 0.755649),
    (-0.097908, 0.835983),
    (-0.0225941, 0.770711),
    (-0.00251046, 0.697908),
    (-0.0502092, 0.670293),
    (-0.117992, 0.667782),
    (-0.105439, 0.730544),
    (-0.0803347, 0.778243),
    (-0.0527197, 0.728034),
    (-0.0451883, 0.692887),
    (-0.0828452, 0.702929),
    (-0.0953975, 0.735565),
    (-0.0702929, 0.730544),
]

MIDDLE_SPIRAL_3 = [
    (0.128033, 0.622594),
    (0.220921, 0.758159),
    (0.100418, 0.798326),
    (0.00502092, 0.803347),
    (0.0200837, 0.700418),
    (0.0878661, 0.627615),
    (0.115481, 0.712971),
    (0.105439, 0.76569),
    (0.0577406, 0.745607),
    (0.0451883, 0.692887),
    (0.0853556, 0.702929),
    (0.102929, 0.725523),
    (0.0803347, 0.733054),
]

MIDDLE_SPIRAL_4 = [
    (0.361506, 0.838494),
    (0.399163, 0.675314),
    (0.233473, 0.662762),
    (0.123013, 0.705439),
    (0.160669, 0.795816),
    (0.2159, 0.863598),
    (0.278661, 0.808368),
    (0.298745, 0.748117),
    (0.261088, 0.733054),
    (0.210879, 0.715481),
    (0.195816, 0.768201),
    (0.225941, 0.808368),
    (0.253556, 0.783264),
    (0.256067, 0.743096),
    (0.220921, 0.758159),
]

MIDDLE_SPIRAL_FILL_1 = [
    (-0.366527, 0.838494),
    (-0.369038, 0.682845),
    (-0.238494, 0.660251),
    (-0.183264, 0.667782),
    (-0.16318, 0.700418),
    (0.170711, 0.700418),
    (0.170711, 0.700418),
    (0.233473, 0.660251),
    (0.233473, 0.660251),
    (0.346444, 0.685356),
    (0.358996, 0.733054),
    (0.376569, 0.783264),
    (0.364017, 0.838494),
]

MIDDLE_SPIRAL_FILL_2 = [
    (-0.369038, 0.835983),
    (0.364017, 0.833473),
    (0.364017, 0.833473),
    (0.296234, 0.901255),
    (0.0, 0.918829),
    (-0.293724, 0.898745),
    (-0.369038, 0.835983),
]

MIDDLE_SPIRAL_FILL_3 = [
    (-0.160669, 0.71046),
    (0.16569, 0.697908),
    (0.16569, 0.697908),
    (0.128033, 0.622594),
    (0.128033, 0.622594),
    (0.0, 0.637657),
    (-0.117992, 0.625105),
    (-0.158159, 0.65523),
    (-0.158159, 0.70795),
]

CIRCLE = gen_circle()


# (mode, figure, width, color) layers stamped around each ring, in order.
OUTER_RING = [
    (DrawMode.AREA, gen_bezier(OUTER_BEAD_1), 2, AMBER),
    (DrawMode.BORDER, gen_bezier(OUTER_BEAD_1), 2, BLACK),
    (DrawMode.AREA, gen_bezier(OUTER_BEAD_2), 2, RED),
    (DrawMode.BORDER, gen_bezier(OUTER_BEAD_2), 2, BLACK),
    (DrawMode.AREA, gen_bezier(OUTER_BEAD_3), 2, LIGHTBLUE),
    (DrawMode.BORDER, gen_bezier(OUTER_BEAD_3), 2, BLACK),
]

MIDDLE_RING = [
    (DrawMode.AREA, gen_bezier(MIDDLE_BEAD_1), 5, AMBER),
    (DrawMode.BORDER, gen_bezier(MIDDLE_BEAD_1), 5, BLACK),
    (DrawMode.AREA, gen_bezier(MIDDLE_BEAD_2), 5, WHITE),
    (DrawMode.BORDER, gen_bezier(MIDDLE_BEAD_2), 5, BLACK),
    (DrawMode.AREA, gen_bezier(MIDDLE_BEAD_3), 5, LIGHTBLUE),
    (DrawMode.BORDER, gen_bezier(MIDDLE_BEAD_3), 5, BLACK),
    (DrawMode.AREA, gen_bezier(MIDDLE_SPIRAL_FILL_1), 0, LIGHTBLUE),
    (DrawMode.AREA, gen_bezier(MIDDLE_SPIRAL_FILL_2), 0, LIGHTBLUE),
    (DrawMode.AREA, gen_bezier(MIDDLE_SPIRAL_FILL_3), 0, LIGHTBLUE),
    (DrawMode.BORDER, gen_bezier(MIDDLE_SPIRAL_1), 5, BLACK),
    (DrawMode.BORDER, gen_bezier(MIDDLE_SPIRAL_2), 4, BLACK),
    (DrawMode.BORDER, gen_bezier(MIDDLE_SPIRAL_3), 4, BLACK),
    (DrawMode.BORDER, gen_bezier(MIDDLE_SPIRAL_4), 5, BLACK),
]

INNER_RING = [
    (DrawMode.AREA, gen_bezier(INNER_BEAD_1), 3, LIGHTBLUE),
    (DrawMode.BORDER, gen_bezier(INNER_BEAD_1), 3, BLACK),
    (DrawMode.AREA, gen_bezier(INNER_BEAD_2), 3, RED),
    (DrawMode.BORDER, gen_bezier(INNER_BEAD_2), 3, BLACK),
    (DrawMode.AREA, gen_bezier(INNER_BEAD_3), 3, AMBER),
    (DrawMode.BORDER, gen_bezier(INNER_BEAD_3), 3, BLACK),
]

QUARTER = [
    (DrawMode.AREA, gen_bezier(PROTRUSION_1), 0, RED),
    (DrawMode.BORDER, gen_bezier(PROTRUSION_1_OUTLINE), 5, BLACK),
    (DrawMode.AREA, gen_bezier(PROTRUSION_2), 0, WHITE),
    (DrawMode.BORDER, gen_bezier(PROTRUSION_2_OUTLINE), 4, BLACK),
    (DrawMode.AREA, gen_bezier(PROTRUSION_3), 0, AMBER),
    (DrawMode.BORDER, gen_bezier(PROTRUSION_3_OUTLINE), 4, BLACK),
    (DrawMode.BORDER, gen_bezier(SPIRAL_1), 5, BLACK),
    (DrawMode.BORDER, gen_bezier(SPIRAL_2), 4, BLACK),
]


def _layers(canvas, layers) -> None:
    for mode, fig, width, color in layers:
        draw(canvas, mode, fig, width, color)


def _ring(canvas, n: int, layers) -> None:
    for i in range(n):
        canvas.push()
        canvas.rotate(360.0 * i / n)
        _layers(canvas, layers)
        canvas.pop()


def _draw_quarter(canvas) -> None:
    _layers(canvas, QUARTER)
    draw_with_scale(canvas, DrawMode.AREA, CIRCLE, R5, R5, 4, WHITE)
    draw_with_scale(canvas, DrawMode.BORDER, CIRCLE, R5, R5, 4)
    draw_with_scale(canvas, DrawMode.AREA, CIRCLE, R6, R6, 0, RED)
    draw_with_trans_scale(canvas, DrawMode.AREA, CIRCLE, -0.394, 0.038, 0.022, 0.022, 0, RED)
    draw_with_trans_scale(canvas, DrawMode.AREA, CIRCLE, -0.389, 0.088, 0.01, 0.01, 0, RED)


def draw_shape(canvas) -> None:
    draw_with_scale(canvas, DrawMode.AREA, CIRCLE, R0, R0, 0, LIGHTBLUE)
    draw_with_scale(canvas, DrawMode.BORDER, CIRCLE, R0, R0, 2)
    _ring(canvas, 19, OUTER_RING)

    draw_with_scale(canvas, DrawMode.AREA, CIRCLE, R1, R1, 0, RED)
    _ring(canvas, 4, MIDDLE_RING)
    draw_with_scale(canvas, DrawMode.BORDER, CIRCLE, R1, R1, 3)

    draw_with_scale(canvas, DrawMode.AREA, CIRCLE, R2, R2, 0, WHITE)
    draw_with_scale(canvas, DrawMode.BORDER, CIRCLE, R2, R2, 5)
    _ring(canvas, 6, INNER_RING)

    draw_with_scale(canvas, DrawMode.AREA, CIRCLE, R3, R3, 0, LIGHTBLUE)
    draw_with_scale(canvas, DrawMode.BORDER, CIRCLE, R3, R3, 3)
    draw_with_scale(canvas, DrawMode.AREA, CIRCLE, R4, R4, 0, AMBER)
    draw_with_scale(canvas, DrawMode.BORDER, CIRCLE, R4, R4, 4)

    for sx, sy in ((1, 1), (1, -1), (-1, 1), (-1, -1)):
        canvas.push()
        canvas.scale(sx, sy)
        _draw_quarter(canvas)
        canvas.pop()
