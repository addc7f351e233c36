"""Five-fold floral medallion.

One sector is authored and stamped five times with `draw_flower`. The
upper group is authored upside down and flipped in place.
"""

from __future__ import annotations

from ..drawing import draw_flower
from ..figures import BLACK, WHITE, DrawMode, gen_bezier

TITLE = "Floral"
CLEAR_COLOR = WHITE

FOLD = 5

PETAL_1 = [
    (0.0577406, -0.0200837),
    (0.160669, -0.0150628),
    (0.210879, 0.0677824),
    (0.115481, 0.100418),
    (0.0376569, 0.0476988),
]

PETAL_2 = [
    (0.21841, -0.0702929),
    (0.311297, 0.0200837),
    (0.321339, 0.102929),
    (0.241004, 0.180753),
    (0.135565, 0.180753),
]

PETAL_3 = [
    (0.266109, -0.0903766),
    (0.361506, 0),
    (0.374059, 0.115481),
    (0.298745, 0.210879),
    (0.168201, 0.223431),
]

PETAL_4 = [
    (0.27364, -0.178243),
    (0.401674, -0.190795),
    (0.474477, -0.155649),
    (0.439331, -0.0903766),
    (0.32636, -0.0200837),
]

PETAL_5 = [
    (0.351464, 0.0225941),
    (0.612552, 0.225941),
    (0.459414, 0.635146),
    (0.032636, 0.65523),
    (-0.0803347, 0.343933),
]

PETAL_6 = [
    (0.351464, 0.180753),
    (0.429289, 0.323849),
    (0.37908, 0.519665),
    (0.21841, 0.519665),
    (0.0702929, 0.391632),
]

PETAL_7 = [
    (0.517155, 0.361506),
    (0.647699, 0.296234),
    (0.504603, 0.16318),
    (0.705439, 0.143096),
    (0.630126, 0.0100418),
]

PETAL_8 = [
    (0.522176, 0.361506),
    (0.748117, 0.451883),
    (0.969038, 0.318828),
    (0.856067, 0.0903766),
    (0.640167, 0.0251046),
]

PETAL_9 = [
    (0.190795, 0.607531),
    (0.230962, 0.725523),
    (0.371548, 0.723013),
    (0.484519, 0.723013),
    (0.534728, 0.735565),
    (0.554812, 0.647699),
    (0.577406, 0.574895),
    (0.615063, 0.411716),
    (0.517155, 0.366527),
]

PETAL_10 = [
    (0.728033, 0.37908),
    (0.755649, 0.632636),
    (0.564854, 0.783264),
    (0.353975, 0.938912),
    (0.100418, 0.81841),
]

PETAL_11 = [
    (0.356485, 0.820921),
    (0.243515, 1.00167),
    (0, 1.01925),
    (-0.258577, 1.01674),
    (-0.38159, 0.8159),
]

LEAF = [
    (-0.125523, 0.645188),
    (-0.100418, 0.866109),
    (0, 0.951465),
    (0.105439, 0.861088),
    (0.133054, 0.640167),
]

DETAIL_1 = [
    (-0.060251, 0.866109),
    (-0.00251046, 0.841004),
    (-0.00502092, 0.841004),
    (0.060251, 0.876151),
    (0.060251, 0.876151),
    (0.0878661, 0.825942),
    (0.0878661, 0.825942),
    (0, 0.775732),
    (0, 0.775732),
    (-0.0853556, 0.820921),
    (-0.0853556, 0.820921),
    (-0.102929, 0.76569),
    (-0.102929, 0.76569),
    (-0.00251046, 0.700418),
    (-0.00251046, 0.700418),
    (0.105439, 0.770711),
    (0.105439, 0.770711),
    (0.120502, 0.71046),
    (0.120502, 0.71046),
    (0, 0.637657),
    (0, 0.637657),
    (-0.112971, 0.705439),
    (-0.112971, 0.705439),
]

DETAIL_2 = [
    (0, 0.336402),
    (0, 0.220921),
    (0, 0.220921),
]

DETAIL_3 = [
    (0.532218, 0.733054),
    (0.459414, 0.632636),
    (0.459414, 0.632636),
]

DETAIL_4 = [
    (-0.0376569, 0.594979),
    (0, 0.567364),
    (0, 0.567364),
    (0.0376569, 0.59749),
    (0.0376569, 0.59749),
]

DETAIL_5 = [
    (0.00251046, 0.948954),
    (0.00251046, 0.534728),
    (0.00251046, 0.534728),
]

OUTER_RING = gen_bezier(PETAL_11)
INNER_RING = gen_bezier(PETAL_10)
LEAVES = gen_bezier(PETAL_8)
FLIPPED_REST = [gen_bezier(pts) for pts in (PETAL_1, PETAL_2, PETAL_3, PETAL_7, PETAL_9)]
UPRIGHT = [
    gen_bezier(pts)
    for pts in (PETAL_4, PETAL_5, PETAL_6, LEAF, DETAIL_1, DETAIL_2, DETAIL_3, DETAIL_4, DETAIL_5)
]


def _stamp(canvas, mode: DrawMode, fig, skip: bool, c=BLACK) -> None:
    draw_flower(canvas, mode, fig, FOLD, 0.0, 1.0, 1.0, skip, 3, c)


def draw_shape(canvas) -> None:
    canvas.push()
    canvas.scale(1.0, -1.0)
    _stamp(canvas, DrawMode.BORDER, OUTER_RING, True)
    # White fills hide the strokes stamped underneath.
    _stamp(canvas, DrawMode.AREA, INNER_RING, True, WHITE)
    _stamp(canvas, DrawMode.BORDER, INNER_RING, True)
    _stamp(canvas, DrawMode.AREA, LEAVES, True, WHITE)
    _stamp(canvas, DrawMode.BORDER, LEAVES, True)
    for fig in FLIPPED_REST:
        _stamp(canvas, DrawMode.BORDER, fig, True)
    canvas.pop()
    for fig in UPRIGHT:
        _stamp(canvas, DrawMode.BORDER, fig, False)
