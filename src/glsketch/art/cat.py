"""Sitting cat, outline drawing."""

from __future__ import annotations

from ..drawing import draw
from ..figures import WHITE, DrawMode, gen_bezier

TITLE = "Cat"
CLEAR_COLOR = WHITE

OUTLINE = [
    (-0.353975, -0.820921),
    (-0.32887, -0.878661),
    (-0.32887, -0.878661),
    (-0.524686, -0.896234),
    (-0.524686, -0.896234),
    (-0.680335, -0.803347),
    (-0.680335, -0.803347),
    (-0.612552, -0.682845),
    (-0.612552, -0.682845),
    (-0.3841, -0.632636),
    (-0.3841, -0.632636),
    (-0.21841, -0.630126),
    (-0.21841, -0.630126),
    (-0.278661, -0.479498),
    (-0.278661, -0.479498),
    (-0.21841, 0.0125523),
    (-0.21841, 0.0125523),
    (-0.097908, 0.205858),
    (-0.097908, 0.205858),
    (-0.097908, 0.246025),
    (-0.097908, 0.246025),
    (-0.0476987, 0.421757),
    (-0.0476987, 0.421757),
    (-0.155649, 0.431799),
    (-0.155649, 0.431799),
    (-0.251046, 0.512134),
    (-0.251046, 0.512134),
    (-0.251046, 0.542259),
    (-0.251046, 0.542259),
    (-0.208368, 0.612552),
    (-0.208368, 0.612552),
    (-0.2159, 0.665272),
    (-0.2159, 0.665272),
    (-0.198326, 0.730544),
    (-0.198326, 0.730544),
    (-0.128033, 0.803347),
    (-0.128033, 0.803347),
    (-0.213389, 0.923849),
    (-0.213389, 0.923849),
    (-0.0627615, 0.866109),
    (-0.0627615, 0.866109),
    (-0.060251, 0.938912),
    (-0.060251, 0.938912),
    (0.133054, 0.853557),
    (0.133054, 0.853557),
    (0.21841, 0.841004),
    (0.21841, 0.841004),
    (0.296234, 0.76318),
    (0.296234, 0.76318),
    (0.361506, 0.627615),
    (0.361506, 0.630126),
    (0.341423, 0.522176),
    (0.341423, 0.522176),
    (0.459414, 0.351464),
    (0.459414, 0.351464),
    (0.431799, 0.0527197),
    (0.431799, 0.0527197),
    (0.469456, -0.16569),
    (0.469456, -0.16569),
    (0.549791, -0.313808),
    (0.549791, -0.313808),
    (0.537238, -0.534728),
    (0.537238, -0.534728),
    (0.497071, -0.687866),
    (0.497071, -0.687866),
    (0.348954, -0.758159),
    (0.348954, -0.758159),
    (0.361506, -0.785774),
    (0.361506, -0.785774),
    (0.331381, -0.825942),
    (0.331381, -0.825942),
    (0.311297, -0.81841),
    (0.311297, -0.81841),
    (0.288703, -0.833473),
    (0.288703, -0.833473),
    (0.263598, -0.8159),
    (0.263598, -0.8159),
    (0.235983, -0.835983),
    (0.235983, -0.835983),
    (0.213389, -0.81841),
    (0.213389, -0.81841),
    (0.173222, -0.81841),
    (0.173222, -0.81841),
    (0.155649, -0.828452),
    (0.155649, -0.828452),
    (0.125523, -0.823431),
    (0.125523, -0.823431),
    (0.105439, -0.835983),
    (0.10795, -0.835983),
    (0.0853556, -0.828452),
    (0.0853556, -0.828452),
    (0.060251, -0.838494),
    (0.060251, -0.838494),
    (0.0351464, -0.823431),
    (0.0351464, -0.823431),
    (-0.0125523, -0.828452),
    (-0.0125523, -0.828452),
    (-0.0225941, -0.803347),
    (-0.0225941, -0.803347),
    (-0.0225941, -0.773222),
    (-0.0225941, -0.773222),
    (-0.155649, -0.755649),
    (-0.155649, -0.755649),
    (-0.160669, -0.738075),
    (-0.160669, -0.738075),
    (-0.276151, -0.76067),
    (-0.276151, -0.76067),
    (-0.386611, -0.733054),
    (-0.386611, -0.733054),
    (-0.494561, -0.775732),
    (-0.494561, -0.775732),
    (-0.504603, -0.805858),
    (-0.504603, -0.805858),
    (-0.429289, -0.835983),
    (-0.429289, -0.835983),
    (-0.356485, -0.823431),
    (-0.356485, -0.823431),
]

LEG_1 = [
    (0.0803347, 0.268619),
    (-0.060251, 0.0276151),
    (-0.060251, 0.0276151),
    (-0.0878661, -0.243515),
    (-0.0853556, -0.246025),
    (0.0200837, -0.59749),
    (0.0200837, -0.59749),
    (0, -0.71046),
    (0, -0.71046),
    (-0.0251046, -0.740586),
    (-0.0251046, -0.740586),
    (-0.0150628, -0.778243),
    (-0.023, -0.776),
]

LEG_2 = [
    (0.133054, -0.0200837),
    (0.155649, -0.682845),
    (0.155649, -0.682845),
    (0.208368, -0.429289),
    (0.208368, -0.429289),
    (0.193305, 0.00251046),
    (0.193305, 0.00251046),
]

LEG_3 = [
    (0.2159, 0.343933),
    (0.303766, 0.0753138),
    (0.303766, 0.0753138),
    (0.401674, -0.0878661),
    (0.401674, -0.0878661),
    (0.409205, -0.205858),
    (0.409205, -0.208368),
    (0.306276, -0.685356),
    (0.306276, -0.685356),
    (0.348954, -0.76067),
    (0.348954, -0.76067),
]

TAIL_1 = [
    (-0.331381, -0.876151),
    (-0.499582, -0.813389),
    (-0.499582, -0.813389),
    (-0.529707, -0.888703),
    (-0.529707, -0.888703),
    (-0.675314, -0.805858),
    (-0.675314, -0.805858),
    (-0.504603, -0.810879),
    (-0.504603, -0.810879),
    (-0.582427, -0.717992),
    (-0.582427, -0.717992),
    (-0.677824, -0.803347),
    (-0.677824, -0.803347),
    (-0.642678, -0.740586),
    (-0.642678, -0.740586),
    (-0.584937, -0.717992),
    (-0.584937, -0.717992),
    (-0.610042, -0.682845),
    (-0.610042, -0.682845),
    (-0.487029, -0.705439),
    (-0.487029, -0.705439),
    (-0.584937, -0.712971),
    (-0.584937, -0.712971),
    (-0.527197, -0.750628),
    (-0.527197, -0.750628),
    (-0.504603, -0.803347),
    (-0.504603, -0.803347),
    (-0.487029, -0.70795),
    (-0.487029, -0.70795),
    (-0.386611, -0.733054),
    (-0.386611, -0.733054),
    (-0.37908, -0.640167),
    (-0.37908, -0.640167),
    (-0.484519, -0.705439),
    (-0.484519, -0.705439),
]

TAIL_2 = [
    (-0.37908, -0.637657),
    (-0.27113, -0.758159),
    (-0.27113, -0.758159),
    (-0.16569, -0.740586),
    (-0.16569, -0.740586),
    (-0.374059, -0.640167),
    (-0.374059, -0.640167),
    (-0.21841, -0.627615),
    (-0.21841, -0.627615),
    (-0.16318, -0.735565),
    (-0.16318, -0.735565),
]

BODY_1 = [
    (-0.0225941, -0.76569),
    (-0.276151, -0.471967),
    (-0.276151, -0.471967),
    (-0.0803347, -0.175732),
    (-0.0803347, -0.175732),
    (-0.213389, 0.0100418),
    (-0.213389, 0.0100418),
    (-0.097908, 0.208368),
    (-0.097908, 0.208368),
    (-0.0778243, -0.102929),
    (-0.0778243, -0.102929),
    (-0.060251, 0.0251046),
    (-0.060251, 0.0251046),
    (-0.0828452, -0.00753138),
    (-0.0828452, -0.00753138),
]

BODY_2 = [
    (-0.100418, 0.241004),
    (0.0803347, 0.268619),
    (0.0803347, 0.268619),
    (-0.0476987, 0.414226),
    (-0.0476987, 0.414226),
    (0.060251, 0.376569),
    (0.060251, 0.376569),
    (0.123013, 0.414226),
    (0.123013, 0.414226),
    (0.0803347, 0.27364),
    (0.0803347, 0.27364),
    (0.208368, 0.268619),
    (0.208368, 0.268619),
    (0.128033, 0.411716),
    (0.128033, 0.411716),
    (0.210879, 0.343933),
    (0.210879, 0.343933),
    (0.276151, 0.632636),
    (0.276151, 0.632636),
    (0.125523, 0.419247),
    (0.125523, 0.419247),
    (0.0778243, 0.537239),
    (0.0778243, 0.537239),
    (0.0200837, 0.421757),
    (0.0200837, 0.421757),
    (-0.0502092, 0.424268),
    (-0.0502092, 0.424268),
    (0.0753138, 0.537239),
    (0.0753138, 0.537239),
    (0.0803347, 0.660251),
    (0.0803347, 0.660251),
    (0.361506, 0.630126),
    (0.361506, 0.630126),
    (0.203347, 0.740586),
    (0.203347, 0.740586),
    (0.0803347, 0.662762),
    (0.0803347, 0.662762),
    (0.0426778, 0.612552),
    (0.0426778, 0.612552),
    (0.0803347, 0.539749),
    (0.0803347, 0.539749),
    (-0.0401674, 0.552301),
    (-0.0376569, 0.552301),
    (0.0426778, 0.607531),
    (0.0426778, 0.607531),
    (-0.0476987, 0.657741),
    (-0.0476987, 0.657741),
    (-0.0376569, 0.552301),
    (-0.0376569, 0.552301),
    (-0.0502092, 0.43431),
    (-0.0502092, 0.43431),
    (-0.175732, 0.459414),
    (-0.175732, 0.459414),
    (-0.0953975, 0.469456),
    (-0.0953975, 0.469456),
    (-0.0527197, 0.429289),
    (-0.0527197, 0.429289),
]

# (figure, line width): heavy strokes for the silhouette, light ones for detail.
STROKES = [
    (gen_bezier(OUTLINE), 4),
    (gen_bezier(LEG_1), 4),
    (gen_bezier(LEG_2), 4),
    (gen_bezier(LEG_3), 4),
    (gen_bezier(TAIL_1), 2),
    (gen_bezier(TAIL_2), 2),
    (gen_bezier(BODY_1), 2),
    (gen_bezier(BODY_2), 2),
]


def draw_shape(canvas) -> None:
    for fig, width in STROKES:
        draw(canvas, DrawMode.BORDER, fig, width)
