import pygame
import pytest

from glsketch.texture import ReferenceImage, TextureLoadError, load_reference


def test_load_reference(tmp_path):
    src = pygame.Surface((4, 2))
    src.fill((10, 20, 30))
    path = tmp_path / "ref.png"
    pygame.image.save(src, str(path))

    ref = load_reference(path)
    assert ref.size == (4, 2)
    assert ref.name == "ref.png"
    data = ref.rgba_bytes()
    assert len(data) == 4 * 2 * 4
    assert tuple(data[:4]) == (10, 20, 30, 255)


def test_rgba_bytes_flips_rows():
    surf = pygame.Surface((1, 2))
    surf.set_at((0, 0), (255, 0, 0))
    surf.set_at((0, 1), (0, 0, 255))
    ref = ReferenceImage(surf)
    assert tuple(ref.rgba_bytes(flip=False)[:3]) == (255, 0, 0)
    # GL order: bottom row first.
    assert tuple(ref.rgba_bytes()[:3]) == (0, 0, 255)


def test_alpha_mode():
    assert ReferenceImage(pygame.Surface((1, 1), pygame.SRCALPHA)).mode == "RGBA"
    assert ReferenceImage(pygame.Surface((1, 1))).mode == "RGB"


def test_missing_file(tmp_path):
    with pytest.raises(TextureLoadError, match="no such file"):
        load_reference(tmp_path / "nope.png")


def test_corrupt_file(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"definitely not a png")
    with pytest.raises(TextureLoadError, match="broken.png"):
        load_reference(path)
