import numpy as np
import pytest

from glsketch.figures import Figure, lin_space, points_to_figure


def test_mismatched_sizes_raise():
    with pytest.raises(ValueError, match="the sizes do not match"):
        Figure([0.0, 1.0], [0.0])


def test_figure_is_read_only():
    fig = Figure([0.0, 1.0], [2.0, 3.0])
    with pytest.raises(ValueError):
        fig.xs[0] = 5.0


def test_points_to_figure_keeps_order():
    fig = points_to_figure([(0, 1), (2, 3), (4, 5)])
    assert fig.size == len(fig) == 3
    assert fig.points() == [(0.0, 1.0), (2.0, 3.0), (4.0, 5.0)]


def test_empty_figure():
    assert Figure.empty().size == 0


def test_lin_space_includes_both_ends():
    t = lin_space(-1.0, 1.0, 5)
    assert t.tolist() == [-1.0, -0.5, 0.0, 0.5, 1.0]
    assert t.dtype == np.float64


@pytest.mark.parametrize("n", [0, 1, -3])
def test_lin_space_needs_two_samples(n):
    with pytest.raises(ValueError):
        lin_space(0.0, 1.0, n)
