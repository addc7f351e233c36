"""Starbucks siren, outline only. Only the left half is authored; the right
half is its mirror image."""

from __future__ import annotations

from ..drawing import draw, draw_with_scale
from ..figures import WHITE, DrawMode, gen_bezier, gen_circle

TITLE = "Starbucks"
CLEAR_COLOR = WHITE

R0 = 1.0

BODY = [
    (-0.180753, -0.98159),
    (-0.190795, -0.87364),
    (-0.10795, -0.725523),
    (-0.0527197, -0.625105),
    (-0.138075, -0.514644),
    (-0.258577, -0.356485),
    (-0.188285, -0.266109),
    (-0.120502, -0.193305),
    (-0.10795, -0.125523),
    (-0.0953975, -0.092887),
    (-0.065272, -0.11046),
    (0, -0.123013),
    (0, -0.123013),
]

FACE = [
    (0, -0.0677824),
    (-0.097908, -0.0552301),
    (-0.168201, 0.0677824),
    (-0.205858, 0.158159),
    (-0.195816, 0.195816),
    (-0.190795, 0.246025),
    (-0.153138, 0.21841),
    (-0.128033, 0.205858),
    (-0.0753138, 0.223431),
    (-0.0502092, 0.220921),
    (-0.0376569, 0.208368),
    (-0.0200837, 0.318828),
    (-0.065272, 0.321339),
    (-0.138075, 0.356485),
    (-0.188285, 0.32636),
    (-0.173222, 0.446862),
    (0.00251046, 0.454393),
]

HAIR_1 = [
    (-0.251046, -0.966527),
    (-0.256067, -0.886193),
    (-0.203347, -0.783264),
    (-0.138075, -0.675314),
    (-0.158159, -0.6),
    (-0.16569, -0.564854),
    (-0.223431, -0.474477),
    (-0.336402, -0.333891),
    (-0.2159, -0.223431),
    (-0.128033, -0.117992),
    (-0.175732, -0.00251046),
    (-0.313808, 0.258577),
    (-0.170711, 0.429289),
    (-0.241004, 0.401674),
    (-0.276151, 0.308787),
    (-0.341423, 0.195816),
    (-0.241004, -0.00251046),
    (-0.195816, -0.0953975),
    (-0.281172, -0.21841),
    (-0.404184, -0.331381),
    (-0.296234, -0.474477),
    (-0.228452, -0.582427),
    (-0.230962, -0.610042),
    (-0.220921, -0.682845),
    (-0.276151, -0.770711),
    (-0.346444, -0.881172),
    (-0.331381, -0.941423),
]

HAIR_2 = [
    (-0.401674, -0.916318),
    (-0.391632, -0.835983),
    (-0.32636, -0.728034),
    (-0.253556, -0.625105),
    (-0.348954, -0.48954),
    (-0.476987, -0.333891),
    (-0.316318, -0.188285),
    (-0.258577, -0.11046),
    (-0.293724, -0.00502092),
    (-0.414226, 0.238494),
    (-0.256067, 0.406695),
    (-0.376569, 0.348954),
    (-0.391632, 0.170711),
    (-0.386611, 0.0401674),
    (-0.351464, 0),
    (-0.306276, -0.117992),
    (-0.38159, -0.185774),
    (-0.534728, -0.341423),
    (-0.406695, -0.494561),
    (-0.316318, -0.612552),
    (-0.391632, -0.720502),
    (-0.461925, -0.861088),
    (-0.451883, -0.888703),
]

HAIR_3 = [
    (-0.512134, -0.858577),
    (-0.499582, -0.800837),
    (-0.426778, -0.682845),
    (-0.391632, -0.607531),
    (-0.43682, -0.54728),
    (-0.429289, -0.647699),
    (-0.48954, -0.712971),
    (-0.552301, -0.795816),
    (-0.554812, -0.830962),
]

HAIR_4 = [
    (-0.466946, -0.48954),
    (-0.54477, -0.361506),
    (-0.504603, -0.298745),
    (-0.369038, -0.117992),
    (-0.391632, -0.0828452),
    (-0.396653, -0.00251046),
    (-0.421757, 0.0577406),
    (-0.461925, 0.246025),
    (-0.336402, 0.364017),
    (-0.479498, 0.27113),
    (-0.469456, 0.11046),
    (-0.469456, 0.0602511),
    (-0.43682, -0.0527197),
    (-0.424268, -0.140586),
    (-0.527197, -0.241004),
    (-0.579916, -0.323849),
    (-0.562343, -0.353975),
    (-0.635146, -0.414226),
    (-0.728033, -0.424268),
    (-0.720502, -0.461925),
    (-0.715481, -0.479498),
    (-0.778243, -0.49205),
    (-0.833473, -0.54728),
    (-0.798326, -0.59749),
    (-0.798326, -0.59749),
    (-0.717992, -0.517155),
    (-0.695397, -0.532218),
    (-0.680335, -0.572385),
    (-0.680335, -0.569875),
    (-0.605021, -0.6),
    (-0.466946, -0.49205),
]

CROWN = [
    (0, 0.499582),
    (-0.205858, 0.49205),
    (-0.338912, 0.419247),
    (-0.456904, 0.607531),
    (-0.456904, 0.607531),
    (-0.32887, 0.594979),
    (-0.278661, 0.539749),
    (-0.333891, 0.687866),
    (-0.364017, 0.705439),
    (-0.213389, 0.692887),
    (-0.133054, 0.605021),
    (-0.0903766, 0.720502),
    (-0.0878661, 0.720502),
    (-0.185774, 0.808368),
    (-0.185774, 0.808368),
    (-0.0552301, 0.81841),
    (-0.0527197, 0.81841),
    (0, 0.936402),
    (0, 0.936402),
]

CROWN_INNER = [
    (0.00251046, 0.577406),
    (-0.102929, 0.567364),
    (-0.102929, 0.567364),
    (0, 0.650209),
    (0, 0.650209),
]

TAIL_1 = [
    (-0.996653, 0.0225941),
    (-0.901255, 0.0301255),
    (-0.851046, 0.065272),
    (-0.702929, 0.133054),
    (-0.665272, 0.10795),
    (-0.695397, 0.0251046),
    (-0.695397, 0.0251046),
    (-0.775732, 0.0351464),
    (-0.838494, -0.0150628),
    (-0.911297, -0.0602511),
    (-0.994142, -0.0552301),
]

TAIL_2 = [
    (-0.989121, -0.128033),
    (-0.913808, -0.130544),
    (-0.861088, -0.0953975),
    (-0.810879, -0.0476988),
    (-0.717992, -0.0451883),
    (-0.740586, -0.120502),
    (-0.740586, -0.120502),
    (-0.838494, -0.148117),
    (-0.863598, -0.173222),
    (-0.916318, -0.203347),
    (-0.97908, -0.200837),
]

TAIL_3 = [
    (-0.936402, -0.348954),
    (-0.866109, -0.333891),
    (-0.835983, -0.306276),
    (-0.793305, -0.268619),
    (-0.750628, -0.276151),
    (-0.745607, -0.210879),
    (-0.745607, -0.210879),
    (-0.798326, -0.200837),
    (-0.863598, -0.251046),
    (-0.911297, -0.281172),
    (-0.953975, -0.283682),
]

TAIL_4 = [
    (-0.876151, -0.482008),
    (-0.830962, -0.461925),
    (-0.785774, -0.424268),
    (-0.760669, -0.401674),
    (-0.735565, -0.411716),
    (-0.743096, -0.353975),
    (-0.743096, -0.353975),
    (-0.823431, -0.353975),
    (-0.838494, -0.389121),
    (-0.868619, -0.421757),
    (-0.901255, -0.424268),
]

TAIL_5 = [
    (-0.750628, -0.660251),
    (-0.695397, -0.582427),
    (-0.662762, -0.589958),
    (-0.645188, -0.630126),
    (-0.645188, -0.630126),
    (-0.702929, -0.660251),
    (-0.715481, -0.697908),
]

TAIL_6 = [
    (-0.662762, -0.750628),
    (-0.620084, -0.692887),
    (-0.605021, -0.692887),
    (-0.577406, -0.723013),
    (-0.577406, -0.723013),
    (-0.610042, -0.750628),
    (-0.625105, -0.783264),
]

HAND = [
    (-0.974059, 0.105439),
    (-0.916318, 0.0853557),
    (-0.773222, 0.158159),
    (-0.702929, 0.185774),
    (-0.620084, 0.170711),
    (-0.512134, 0.318828),
    (-0.431799, 0.366527),
    (-0.562343, 0.411716),
    (-0.665272, 0.341423),
    (-0.720502, 0.504603),
    (-0.780753, 0.512134),
    (-0.795816, 0.356485),
    (-0.853557, 0.258577),
    (-0.908787, 0.170711),
    (-0.974059, 0.105439),
]

EYE = [
    (-0.175732, 0.256067),
    (-0.135565, 0.288703),
    (-0.0753138, 0.263598),
    (-0.100418, 0.318828),
    (-0.175732, 0.301255),
    (-0.203347, 0.281172),
    (-0.175732, 0.256067),
]

NOSE = [
    (0, 0.10795),
    (-0.0276151, 0.11046),
    (-0.0527197, 0.123013),
    (-0.032636, 0.143096),
    (0.00251046, 0.135565),
]

MOUTH = [
    (0, 0.0125523),
    (-0.065272, 0.0301255),
    (-0.0753138, 0.0677824),
    (-0.00251046, 0.065272),
    (0, 0.065272),
]

CIRCLE = gen_circle()

# Drawing order: body, hair, crown, tails, hand, facial details.
HALF_OUTLINE = [
    gen_bezier(pts)
    for pts in (
        BODY,
        FACE,
        HAIR_1,
        HAIR_2,
        HAIR_3,
        HAIR_4,
        CROWN,
        CROWN_INNER,
        TAIL_1,
        TAIL_2,
        TAIL_3,
        TAIL_4,
        TAIL_5,
        TAIL_6,
        HAND,
        EYE,
        NOSE,
        MOUTH,
    )
]


def _draw_half(canvas) -> None:
    for fig in HALF_OUTLINE:
        draw(canvas, DrawMode.BORDER, fig)


def draw_shape(canvas) -> None:
    draw_with_scale(canvas, DrawMode.BORDER, CIRCLE, R0, R0)
    _draw_half(canvas)
    canvas.push()
    canvas.scale(-1.0, 1.0)
    _draw_half(canvas)
    canvas.pop()
