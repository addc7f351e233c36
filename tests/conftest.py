import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from glsketch.soft import SoftCanvas  # noqa: E402

WHITE = (255, 255, 255)


@pytest.fixture
def surface():
    return pygame.Surface((200, 200))


@pytest.fixture
def canvas(surface):
    # 200x200 pixels over [-1, 1]^2, so one world unit is 100 pixels.
    c = SoftCanvas(surface, 1.0)
    c.clear(WHITE)
    return c
