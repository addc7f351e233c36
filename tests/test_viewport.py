import pytest

from glsketch.linalg import Vec2
from glsketch.viewport import screen_to_world, view_bounds, world_to_screen


def test_square_window():
    assert view_bounds(600, 600, 1.2) == (-1.2, 1.2, -1.2, 1.2)


def test_wide_window_stretches_x():
    left, right, bottom, top = view_bounds(800, 600, 1.0)
    assert (bottom, top) == (-1.0, 1.0)
    assert right == pytest.approx(4 / 3)
    assert left == -right


def test_tall_window_stretches_y():
    left, right, bottom, top = view_bounds(300, 600, 1.0)
    assert (left, right) == (-1.0, 1.0)
    assert top == pytest.approx(2.0)


def test_zero_height_does_not_divide_by_zero():
    assert view_bounds(100, 0, 1.0)[3] == 1.0


def test_screen_to_world_flips_y():
    assert screen_to_world(0, 0, 200, 200, 1.0) == Vec2(-1.0, 1.0)
    assert screen_to_world(100, 100, 200, 200, 1.0) == Vec2(0.0, 0.0)
    assert screen_to_world(200, 200, 200, 200, 1.0) == Vec2(1.0, -1.0)


def test_world_to_screen_inverts_screen_to_world():
    p = screen_to_world(123, 45, 640, 480, 1.2)
    assert world_to_screen(p.x, p.y, 640, 480, 1.2) == pytest.approx((123, 45))
