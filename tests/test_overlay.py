import pygame

from glsketch.bezier import DebugOverlay, Phase
from glsketch.linalg import Vec2
from glsketch.texture import ReferenceImage

WHITE = (255, 255, 255)


def test_space_toggles_debug():
    overlay = DebugOverlay()
    assert overlay.enabled
    overlay.handle_key(pygame.K_SPACE)
    assert not overlay.enabled


def test_keyboard_drives_session():
    overlay = DebugOverlay()
    assert overlay.handle_key(pygame.K_b) is None
    assert overlay.session.active

    overlay.handle_button(1, True, Vec2(0, 0))
    overlay.handle_button(1, True, Vec2(1, 0))
    overlay.handle_button(3, True, Vec2(0.5, 1))
    overlay.handle_motion(Vec2(0.5, 0.8))
    overlay.handle_button(3, False, Vec2(0.5, 0.8))
    assert overlay.session.phase is Phase.COMPLETE
    assert overlay.clicked == Vec2(0.5, 1)

    overlay.handle_key(pygame.K_RETURN)
    assert overlay.session.path == [Vec2(0, 0), Vec2(0.5, 0.8), Vec2(1, 0)]

    overlay.handle_button(1, True, Vec2(2, 0))
    overlay.handle_key(pygame.K_c)
    assert overlay.session.points == [Vec2(1, 0)]

    exported = overlay.handle_key(pygame.K_b)
    assert exported.startswith("segment_points = [")
    assert "(0.5, 0.8)," in exported


def test_button_release_does_not_move_clicked():
    overlay = DebugOverlay()
    overlay.handle_button(1, True, Vec2(0.25, 0.25))
    overlay.handle_button(1, False, Vec2(0.75, 0.75))
    assert overlay.clicked == Vec2(0.25, 0.25)


def test_draw_in_every_phase(canvas, surface):
    overlay = DebugOverlay()
    overlay.handle_key(pygame.K_b)
    overlay.handle_motion(Vec2(0.1, 0.1))
    overlay.draw(canvas)
    for p in [Vec2(-0.5, 0), Vec2(0.5, 0)]:
        overlay.handle_button(1, True, p)
        overlay.draw(canvas)
    overlay.handle_button(3, True, Vec2(0, 0.5))
    overlay.draw(canvas)
    overlay.handle_key(pygame.K_RETURN)
    overlay.draw(canvas)
    assert canvas.depth == 0
    # Axes cross the centre of the view.
    centre = [tuple(surface.get_at((x, y)))[:3] for x in range(98, 103) for y in range(98, 103)]
    assert any(c != WHITE for c in centre)


def test_disabled_overlay_draws_nothing(canvas, surface):
    overlay = DebugOverlay(enabled=False)
    overlay.handle_button(1, True, Vec2(0.2, 0.2))
    overlay.draw(canvas)
    assert pygame.transform.average_color(surface)[:3] == WHITE


def test_reference_drawn_translucent(canvas, surface):
    black = pygame.Surface((8, 8))
    black.fill((0, 0, 0))
    overlay = DebugOverlay(ReferenceImage(black))
    overlay.draw_background(canvas)
    r, g, b = tuple(surface.get_at((100, 100)))[:3]
    assert 150 < r < 200 and r == g == b
