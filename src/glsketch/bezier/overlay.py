from __future__ import annotations

import logging

import pygame

from ..drawing import draw_marker
from ..figures import sample_bezier
from ..linalg import Vec2
from ..texture import ReferenceImage
from .session import BezierSession, Phase

log = logging.getLogger(__name__)

REFERENCE_ALPHA = 77  # ~30%
AXES_EXTENT = 1.1
AXES_COLOR = (0, 0, 255)
TEXT_COLOR = (0, 0, 0)

START_COLOR = (255, 0, 0)
CONTROL_COLOR = (0, 255, 0)
END_COLOR = (0, 0, 255)
GUIDE_COLOR = (179, 179, 179)
PREVIEW_COLOR = (0, 204, 0)
ACTIVE_COLOR = (0, 153, 0)
POLYGON_COLOR = (128, 128, 128)
PATH_COLOR = (102, 102, 255)
PATH_ANCHOR_COLOR = (77, 77, 204)
PATH_CONTROL_COLOR = (77, 204, 77)

CONTROLS = """Debug controls:
SPACE: toggle debug overlay
B: toggle Bezier mode (prints the collected path when leaving it)
Left click: set P0, then P2
Right click + drag: place the control point P1
ENTER: finalize the segment
C: clear the current segment
Q or ESC: quit"""


class DebugOverlay:
    """Trace-over tooling drawn on top of an artwork.

    Owns the Bezier session and routes pygame input to it. Everything is
    touched from the event loop only.
    """

    def __init__(self, reference: ReferenceImage | None = None, enabled: bool = True):
        self.enabled = enabled
        self.reference = reference
        self.session = BezierSession()
        self.clicked: Vec2 | None = None

    def handle_key(self, key: int) -> str | None:
        """Returns text meant for stdout (the exported path), if any."""
        if key == pygame.K_SPACE:
            self.enabled = not self.enabled
            log.info("Debug mode %s", "ON" if self.enabled else "OFF")
        elif key == pygame.K_b:
            return self.session.toggle()
        elif key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.session.finalize()
        elif key == pygame.K_c:
            self.session.clear()
        return None

    def handle_button(self, button: int, pressed: bool, p: Vec2) -> None:
        if pressed:
            self.clicked = p
        if button == 1 and pressed:
            self.session.left_click(p)
        elif button == 3:
            if pressed:
                self.session.right_press(p)
            else:
                self.session.right_release()

    def handle_motion(self, p: Vec2) -> None:
        self.session.motion(p)

    def draw_background(self, canvas) -> None:
        if self.enabled and self.reference is not None:
            canvas.image(self.reference, REFERENCE_ALPHA)

    def draw(self, canvas) -> None:
        if not self.enabled:
            return
        self._draw_axes(canvas)
        self._draw_coordinates(canvas)
        if self.session.active:
            self._draw_path(canvas)
            self._draw_current(canvas)

    def _draw_axes(self, canvas) -> None:
        e = AXES_EXTENT
        canvas.line_strip([-e, e], [0.0, 0.0], 1.5, AXES_COLOR, 77)
        canvas.line_strip([0.0, 0.0], [-e, e], 1.5, AXES_COLOR, 77)

    def _draw_coordinates(self, canvas) -> None:
        if self.clicked is None:
            return
        p = self.clicked
        label = f"Clicked: X={p.x:.3f}, Y={p.y:.3f}, r={p.mag():.3f}, angle={p.angle():.3f}"
        canvas.text(-1.15, -1.15, label, TEXT_COLOR, 18)

    def _draw_path(self, canvas) -> None:
        for p0, c, p2 in self.session.segments():
            xs, ys = sample_bezier(p0, c, p2, 30)
            canvas.line_strip(xs, ys, 1.5, PATH_COLOR)
            draw_marker(canvas, p0, PATH_ANCHOR_COLOR, 0.01)
            draw_marker(canvas, c, PATH_CONTROL_COLOR, 0.01)
            draw_marker(canvas, p2, PATH_ANCHOR_COLOR, 0.01)

    def _draw_current(self, canvas) -> None:
        s = self.session
        hover = s.hover
        phase = s.phase
        if phase is Phase.EMPTY:
            draw_marker(canvas, hover, (204, 0, 0), 0.01)
            return

        p0 = s.points[0]
        draw_marker(canvas, p0, START_COLOR)
        if phase is Phase.START_SET:
            draw_marker(canvas, hover, (0, 0, 204), 0.01)
            canvas.line_strip([p0.x, hover.x], [p0.y, hover.y], 1.0, GUIDE_COLOR)
        elif phase is Phase.ENDS_SET:
            p2 = s.points[1]
            draw_marker(canvas, p2, END_COLOR)
            canvas.line_strip([p0.x, p2.x], [p0.y, p2.y], 1.0, GUIDE_COLOR)
            # Preview of the curve the hovered point would produce as P1.
            draw_marker(canvas, hover, PREVIEW_COLOR, 0.01)
            xs, ys = sample_bezier(p0, hover, p2, 30)
            canvas.line_strip(xs, ys, 1.0, PREVIEW_COLOR, dashed=True)
        else:
            _, p1, p2 = s.points
            draw_marker(canvas, p1, CONTROL_COLOR)
            draw_marker(canvas, p2, END_COLOR)
            xs, ys = sample_bezier(p0, p1, p2, 30)
            canvas.line_strip(xs, ys, 2.0, ACTIVE_COLOR)
            canvas.line_strip([p0.x, p1.x, p2.x], [p0.y, p1.y, p2.y], 1.0, POLYGON_COLOR)
