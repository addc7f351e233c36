"""Artwork registry.

Every artwork module exposes `TITLE`, `CLEAR_COLOR` and `draw_shape(canvas)`.
"""

from __future__ import annotations

from types import ModuleType

from . import batman, cat, curves, floral, mandala, medallion, rosette, starbucks

ARTWORKS: dict[str, ModuleType] = {
    "batman": batman,
    "starbucks": starbucks,
    "mandala": mandala,
    "floral": floral,
    "cat": cat,
    "rosette": rosette,
    "medallion": medallion,
    "curves": curves,
}


def get_artwork(name: str) -> ModuleType:
    try:
        return ARTWORKS[name]
    except KeyError:
        raise ValueError(f"unknown artwork: {name}") from None
