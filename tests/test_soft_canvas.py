import pytest

from glsketch.drawing import (
    draw,
    draw_circle,
    draw_flower,
    draw_solid_bezier_shape,
    draw_with_rotate,
    draw_with_scale,
    draw_with_trans,
    draw_with_trans_scale,
)
from glsketch.figures import BLACK, RED, DrawMode, Figure, gen_poly, points_to_figure

WHITE = (255, 255, 255)
SQUARE = points_to_figure([(-0.1, -0.1), (0.1, -0.1), (0.1, 0.1), (-0.1, 0.1)])


def rgb(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def test_to_pixels_maps_world_square(canvas):
    assert canvas.to_pixels([-1.0, 0.0, 1.0], [1.0, 0.0, -1.0]) == [
        (0.0, 0.0),
        (100.0, 100.0),
        (200.0, 200.0),
    ]


def test_area_fills(canvas, surface):
    draw(canvas, DrawMode.AREA, SQUARE, c=RED)
    assert rgb(surface, 100, 100) == RED
    assert rgb(surface, 150, 100) == WHITE


def test_areafix_fans_from_origin(canvas, surface):
    # An arc far from the origin still covers the origin once fanned.
    arc = points_to_figure([(0.5, 0.0), (0.5, 0.5), (0.0, 0.5)])
    draw(canvas, DrawMode.AREAFIX, arc, c=RED)
    assert rgb(surface, 110, 90) == RED


def test_border_and_points(canvas, surface):
    draw(canvas, DrawMode.BORDER, points_to_figure([(-0.5, 0.0), (0.5, 0.0)]), 3, BLACK)
    assert rgb(surface, 100, 100) == BLACK
    draw(canvas, DrawMode.POINTS, points_to_figure([(0.0, 0.5)]), 6, RED)
    assert rgb(surface, 100, 50) == RED


def test_empty_figure_is_a_noop(canvas, surface):
    draw(canvas, DrawMode.AREA, Figure.empty(), c=RED)
    assert rgb(surface, 100, 100) == WHITE


def test_unknown_mode_raises(canvas):
    with pytest.raises(ValueError):
        draw(canvas, "outline", SQUARE)


def test_translate_and_rotate(canvas, surface):
    draw_with_trans(canvas, DrawMode.AREA, SQUARE, 0.5, 0.0, c=RED)
    assert rgb(surface, 150, 100) == RED
    assert rgb(surface, 100, 100) == WHITE

    canvas.clear(WHITE)
    canvas.push()
    canvas.rotate(90)
    draw_with_trans(canvas, DrawMode.AREA, SQUARE, 0.5, 0.0, c=RED)
    canvas.pop()
    assert rgb(surface, 100, 50) == RED


def test_scale_wrappers(canvas, surface):
    draw_with_scale(canvas, DrawMode.AREA, SQUARE, 5, 1, c=RED)
    assert rgb(surface, 140, 100) == RED
    canvas.clear(WHITE)
    draw_with_trans_scale(canvas, DrawMode.AREA, SQUARE, -0.5, 0.5, 2, 2, c=RED)
    assert rgb(surface, 65, 50) == RED
    canvas.clear(WHITE)
    draw_with_rotate(canvas, DrawMode.AREA, SQUARE, 45, c=RED)
    assert rgb(surface, 100, 100) == RED


def test_helpers_restore_matrix_stack(canvas):
    draw_flower(canvas, DrawMode.BORDER, gen_poly(8), 6, 0.5, 0.1, 0.1, skip=True)
    draw_circle(canvas, 0.0, 0.0, 0.2, RED)
    draw_solid_bezier_shape(canvas, [(0, 0), (0.5, 0.5), (1, 0)], BLACK, 2, with_points=True)
    assert canvas.depth == 0


def test_draw_flower_places_copies_around_ring(canvas, surface):
    draw_flower(canvas, DrawMode.AREA, SQUARE, 4, 0.5, 1.0, 1.0, c=RED)
    for x, y in [(150, 100), (100, 50), (50, 100), (100, 150)]:
        assert rgb(surface, x, y) == RED
    assert rgb(surface, 100, 100) == WHITE


def test_draw_flower_skip_offsets_half_step(canvas, surface):
    draw_flower(canvas, DrawMode.AREA, SQUARE, 4, 0.5, 1.0, 1.0, skip=True, c=RED)
    assert rgb(surface, 150, 100) == WHITE
    # 45 degrees: (0.354, 0.354) in world units.
    assert rgb(surface, 135, 65) == RED


def test_pop_underflow_raises(canvas):
    with pytest.raises(RuntimeError):
        canvas.pop()


def test_translucent_polygon_blends(canvas, surface):
    canvas.polygon([-0.5, 0.5, 0.5, -0.5], [-0.5, -0.5, 0.5, 0.5], (0, 0, 0), 128)
    r, g, b = rgb(surface, 100, 100)
    assert 100 < r < 160 and r == g == b


def test_text_renders(canvas, surface):
    canvas.text(-0.9, 0.0, "Points: 3", (0, 0, 0), 24)
    dark = [
        (x, y)
        for x in range(0, 100)
        for y in range(70, 100)
        if rgb(surface, x, y) != WHITE
    ]
    assert dark
