from __future__ import annotations

import logging
from enum import Enum

from ..figures import bezier_segments
from ..linalg import Vec2

log = logging.getLogger(__name__)


class Phase(Enum):
    EMPTY = 0
    START_SET = 1  # P0
    ENDS_SET = 2  # P0, P2
    COMPLETE = 3  # P0, P1, P2


class BezierSession:
    """Mouse-driven authoring of a quadratic Bezier path.

    `points` holds the segment being edited: [P0], [P0, P2] or [P0, P1, P2].
    `path` holds finalized segments as [P0, C1, P1, C2, P2, ...].
    """

    def __init__(self) -> None:
        self.active = False
        self.points: list[Vec2] = []
        self.path: list[Vec2] = []
        self.dragging = False
        self.hover = Vec2()

    @property
    def phase(self) -> Phase:
        return Phase(len(self.points))

    def _seed_from_path(self) -> None:
        if self.path:
            last = self.path[-1]
            self.points.append(last)
            log.info("Continuing from last point: P0=(%g, %g)", last.x, last.y)
            log.info("Left-click to set END point (P2).")
        else:
            log.info("Left-click to set START point (P0).")

    def toggle(self) -> str | None:
        """Switch authoring mode; returns the exported path when leaving it."""
        self.active = not self.active
        self.points.clear()
        self.dragging = False
        if self.active:
            log.info("Bezier mode activated")
            self._seed_from_path()
            return None
        log.info("Bezier mode deactivated")
        if not self.path:
            return None
        return self.export_text()

    def clear(self) -> None:
        if not self.active:
            return
        log.info("Current segment cleared")
        self.points.clear()
        self.dragging = False
        self._seed_from_path()

    def left_click(self, p) -> None:
        if not self.active:
            return
        p = Vec2.of(p)
        self.dragging = False
        phase = self.phase
        if phase is Phase.EMPTY:
            self.points.append(p)
            log.info("P0 (start) set: (%g, %g)", p.x, p.y)
        elif phase is Phase.START_SET:
            self.points.append(p)
            log.info("P2 (end) set: (%g, %g)", p.x, p.y)
        elif phase is Phase.ENDS_SET:
            self.points[-1] = p
            log.info("P2 (end) re-set: (%g, %g)", p.x, p.y)
        else:
            # A new end point invalidates the control point.
            self.points[:] = [self.points[0], p]
            log.info("P1 dropped, P2 (end) re-set: (%g, %g)", p.x, p.y)
        if self.phase is Phase.ENDS_SET:
            log.info("Right-click and drag to set CONTROL point (P1).")

    def right_press(self, p) -> None:
        if not self.active:
            return
        p = Vec2.of(p)
        phase = self.phase
        if phase is Phase.ENDS_SET:
            self.points.insert(1, p)
            self.dragging = True
            log.debug("P1 placement started at (%g, %g)", p.x, p.y)
        elif phase is Phase.COMPLETE:
            self.points[1] = p
            self.dragging = True
            log.debug("P1 adjustment started at (%g, %g)", p.x, p.y)
        else:
            log.info("Set P0 and P2 (two left-clicks) before the control point P1.")

    def right_release(self) -> None:
        if not self.active or not self.dragging:
            return
        self.dragging = False
        if self.phase is Phase.COMPLETE:
            c = self.points[1]
            log.info("P1 (control) set: (%g, %g). Press ENTER to finalize.", c.x, c.y)

    def motion(self, p) -> None:
        if not self.active:
            return
        p = Vec2.of(p)
        self.hover = p
        if self.dragging and self.phase is Phase.COMPLETE:
            self.points[1] = p

    def finalize(self) -> bool:
        if not self.active:
            return False
        if self.phase is not Phase.COMPLETE:
            log.warning(
                "Cannot finalize segment: need P0, P1 (control) and P2, have %d point(s)",
                len(self.points),
            )
            return False

        p0, p1, p2 = self.points
        if not self.path or self.path[-1] != p0:
            self.path.append(p0)
        self.path.append(p1)
        self.path.append(p2)
        log.info(
            "Segment added: P0(%g, %g) - P1(%g, %g) - P2(%g, %g)",
            p0.x, p0.y, p1.x, p1.y, p2.x, p2.y,
        )

        # The end anchor starts the next segment.
        self.points[:] = [p2]
        self.dragging = False
        return True

    def segments(self) -> list[tuple[Vec2, Vec2, Vec2]]:
        return bezier_segments(self.path)

    def export_text(self, name: str = "segment_points") -> str:
        return format_points(self.path, name)


def format_points(points, name: str = "segment_points") -> str:
    """Render points as a Python list literal ready to paste into an art module."""
    lines = [f"{name} = ["]
    for p in points:
        x, y = p
        lines.append(f"    ({x:.6g}, {y:.6g}),")
    lines.append("]")
    return "\n".join(lines)
