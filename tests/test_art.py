import numpy as np
import pygame
import pytest

from glsketch.art import ARTWORKS, get_artwork
from glsketch.demos.artview.render import export_png, render_surface
from glsketch.figures import LIGHTBLUE, RED
from glsketch.soft import SoftCanvas


@pytest.mark.parametrize("name", sorted(ARTWORKS))
def test_artwork_interface(name):
    art = ARTWORKS[name]
    assert isinstance(art.TITLE, str) and art.TITLE
    assert len(art.CLEAR_COLOR) == 3
    assert callable(art.draw_shape)


@pytest.mark.parametrize("name", sorted(ARTWORKS))
def test_artwork_draws_something(name):
    art = ARTWORKS[name]
    surface = render_surface(art, 120)
    pixels = pygame.surfarray.array3d(surface)
    assert (pixels != np.array(art.CLEAR_COLOR)).any()


@pytest.mark.parametrize("name", sorted(ARTWORKS))
def test_artwork_restores_matrix_stack(name):
    canvas = SoftCanvas(pygame.Surface((64, 64)), 1.2)
    canvas.clear(ARTWORKS[name].CLEAR_COLOR)
    ARTWORKS[name].draw_shape(canvas)
    assert canvas.depth == 0


def test_registry_names():
    assert {"batman", "starbucks", "mandala", "floral", "medallion"} <= set(ARTWORKS)


def test_unknown_artwork():
    with pytest.raises(ValueError, match="unknown artwork"):
        get_artwork("mona_lisa")


def test_export_png(tmp_path):
    path = export_png(get_artwork("mandala"), tmp_path / "mandala.png", 96)
    assert pygame.image.load(str(path)).get_size() == (96, 96)



def test_medallion_colours():
    surface = render_surface(get_artwork("medallion"), 200)
    # Red hub drawn last by every mirrored quarter.
    assert tuple(surface.get_at((100, 100)))[:3] == RED
    pixels = pygame.surfarray.array3d(surface)
    assert (pixels == np.array(LIGHTBLUE)).all(axis=2).any()
