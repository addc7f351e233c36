from .figure import (
    BLACK,
    BLUE,
    GREEN,
    LIGHTBLUE,
    ORANGE,
    RED,
    WHITE,
    YELLOW,
    DrawMode,
    Figure,
    lin_space,
    points_to_figure,
)
from .curves import (
    SEGMENTS,
    bezier_point,
    bezier_segments,
    gen_bezier,
    gen_cardioid,
    gen_circle,
    gen_leaf,
    gen_lemniscate,
    gen_poly,
    gen_rose,
    sample_bezier,
)

__all__ = [
    "BLACK",
    "BLUE",
    "GREEN",
    "LIGHTBLUE",
    "ORANGE",
    "RED",
    "WHITE",
    "YELLOW",
    "DrawMode",
    "Figure",
    "lin_space",
    "points_to_figure",
    "SEGMENTS",
    "bezier_point",
    "bezier_segments",
    "gen_bezier",
    "gen_cardioid",
    "gen_circle",
    "gen_leaf",
    "gen_lemniscate",
    "gen_poly",
    "gen_rose",
    "sample_bezier",
]
