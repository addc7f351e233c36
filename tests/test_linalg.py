import math

import pytest

from glsketch.linalg import Mat3, Vec2


def test_vec2_arithmetic():
    a = Vec2(1, 2)
    b = Vec2(3, -1)
    assert a + b == Vec2(4, 1)
    assert b - a == Vec2(2, -3)
    assert 2 * a == Vec2(2, 4)
    assert Vec2(3, 4).mag() == pytest.approx(5.0)
    assert a.dist(a) == 0.0


def test_vec2_value_semantics():
    assert Vec2(0.5, 0.25) == Vec2.of((0.5, 0.25))
    assert len({Vec2(1, 1), Vec2(1.0, 1.0)}) == 1
    assert tuple(Vec2(1, 2)) == (1.0, 2.0)
    assert Vec2(0, 0).lerp(Vec2(2, 4), 0.5) == Vec2(1, 2)
    assert Vec2(0, 1).angle() == pytest.approx(math.pi / 2)


def test_mat3_rotate_is_counter_clockwise():
    x, y = Mat3.rotate(90).transform_point(1.0, 0.0)
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(1.0)


def test_mat3_composition_applies_right_operand_first():
    m = Mat3.translate(1, 0) @ Mat3.scale(2)
    assert m.transform_point(1.0, 0.0) == pytest.approx((3.0, 0.0))


def test_mat3_transform_points_matches_single_point():
    m = Mat3.translate(0.5, -0.5) @ Mat3.rotate(30) @ Mat3.scale(2, 3)
    xs, ys = m.transform_points([0.1, -0.7], [0.2, 0.4])
    for i, (x, y) in enumerate([(0.1, 0.2), (-0.7, 0.4)]):
        assert (xs[i], ys[i]) == pytest.approx(m.transform_point(x, y))


def test_mat3_rejects_wrong_size():
    with pytest.raises(ValueError):
        Mat3([1, 0, 0, 0, 1, 0, 0, 0])
