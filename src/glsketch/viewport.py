"""World/screen mapping shared by the GL and software backends."""

from __future__ import annotations

from .linalg import Vec2


def view_bounds(width: int, height: int, extent: float) -> tuple[float, float, float, float]:
    """Ortho (left, right, bottom, top) keeping a 1:1 aspect.

    The shorter window side spans [-extent, extent]; the longer one is
    stretched by the aspect ratio so figures never deform.
    """
    height = max(1, height)
    width = max(1, width)
    aspect = width / height
    if width >= height:
        return (-extent * aspect, extent * aspect, -extent, extent)
    return (-extent, extent, -extent / aspect, extent / aspect)


def screen_to_world(sx: float, sy: float, width: int, height: int, extent: float) -> Vec2:
    # pygame reports y growing downwards from the top-left corner.
    left, right, bottom, top = view_bounds(width, height, extent)
    fx = sx / max(1, width)
    fy = sy / max(1, height)
    return Vec2(left + (right - left) * fx, top - (top - bottom) * fy)


def world_to_screen(x: float, y: float, width: int, height: int, extent: float) -> tuple[float, float]:
    left, right, bottom, top = view_bounds(width, height, extent)
    return (
        (x - left) / (right - left) * width,
        (top - y) / (top - bottom) * height,
    )
