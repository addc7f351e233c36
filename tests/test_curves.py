import math

import numpy as np
import pytest

from glsketch.figures import (
    SEGMENTS,
    bezier_point,
    bezier_segments,
    gen_bezier,
    gen_cardioid,
    gen_circle,
    gen_leaf,
    gen_lemniscate,
    gen_poly,
    gen_rose,
)
from glsketch.linalg import Vec2

P0, P1, P2 = (0.0, 0.0), (0.5, 1.0), (1.0, 0.0)


def test_bezier_point_endpoints():
    assert bezier_point(P0, P1, P2, 0.0) == P0
    assert bezier_point(P0, P1, P2, 1.0) == P2
    assert bezier_point(P0, P1, P2, 0.5) == pytest.approx((0.5, 0.5))


def test_bezier_point_accepts_vec2():
    assert bezier_point(Vec2(*P0), Vec2(*P1), Vec2(*P2), 1.0) == P2


def test_gen_bezier_point_count():
    path = [P0, P1, P2, (1.5, -1.0), (2.0, 0.0)]
    fig = gen_bezier(path)
    assert fig.size == 2 * SEGMENTS + 1
    assert gen_bezier(path, 10).size == 21


@pytest.mark.parametrize("path", [[], [P0], [P0, P1], [P0, P1, P2, P0]])
def test_gen_bezier_rejects_incomplete_paths(path):
    assert gen_bezier(path).size == 0


def test_gen_bezier_passes_through_anchors():
    path = [P0, P1, P2, (1.5, -1.0), (2.0, 0.0)]
    fig = gen_bezier(path, 20)
    assert (fig.xs[0], fig.ys[0]) == P0
    assert (fig.xs[20], fig.ys[20]) == P2
    assert (fig.xs[-1], fig.ys[-1]) == (2.0, 0.0)


def test_gen_bezier_is_continuous():
    path = [P0, P1, P2, (1.5, -1.0), (2.0, 0.0)]
    fig = gen_bezier(path)
    steps = np.hypot(np.diff(fig.xs), np.diff(fig.ys))
    assert steps.max() < 0.05


def test_bezier_segments_share_anchors():
    segs = bezier_segments([P0, P1, P2, (1.5, -1.0), (2.0, 0.0)])
    assert len(segs) == 2
    assert segs[0][2] == segs[1][0]


def test_gen_poly_is_closed():
    fig = gen_poly(5)
    assert fig.size == 6
    assert fig.xs[0] == pytest.approx(fig.xs[-1])
    assert fig.ys[0] == pytest.approx(fig.ys[-1])
    assert np.hypot(fig.xs, fig.ys) == pytest.approx(np.ones(6))


def test_gen_poly_skip_puts_an_edge_at_the_bottom():
    fig = gen_poly(4, skip=True)
    assert fig.ys[0] == pytest.approx(fig.ys[1])
    assert fig.ys[0] == pytest.approx(-math.sqrt(0.5))


def test_gen_circle_arc():
    fig = gen_circle(0.0, math.pi, 3)
    assert fig.xs == pytest.approx([1.0, 0.0, -1.0], abs=1e-12)
    assert fig.ys == pytest.approx([0.0, 1.0, 0.0], abs=1e-12)


def test_gen_leaf_is_symmetric_and_closed():
    fig = gen_leaf(1.0, 0.5, 50)
    assert fig.size == 100
    assert fig.xs[0] == pytest.approx(-1.0)
    assert fig.xs[49] == pytest.approx(1.0)
    assert fig.ys.max() == pytest.approx(0.5, abs=1e-3)
    assert fig.ys == pytest.approx(-fig.ys[::-1])


def test_gen_cardioid_cusp():
    fig = gen_cardioid(math.pi / 2, math.pi / 2 + 1, n=2)
    # r = a - a*sin(t) vanishes at t = pi/2.
    assert (fig.xs[0], fig.ys[0]) == pytest.approx((0.0, 0.0), abs=1e-12)


def test_gen_rose_radius_bounded():
    for skip in (False, True):
        fig = gen_rose(3, skip)
        assert np.hypot(fig.xs, fig.ys).max() <= 1.0 + 1e-9


def test_gen_lemniscate_crosses_origin():
    fig = gen_lemniscate(n=5)
    # Samples at 0, pi/2, pi, 3pi/2, 2pi.
    assert fig.xs[0] == pytest.approx(1.0)
    assert (fig.xs[1], fig.ys[1]) == pytest.approx((0.0, 0.0), abs=1e-12)
    assert fig.xs[2] == pytest.approx(-1.0)
