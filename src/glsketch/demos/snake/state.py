from __future__ import annotations

from collections import namedtuple

State = namedtuple(
    "State",
    ["snake", "direction", "heading", "apple", "score", "game_over", "victory", "paused"],
)
# snake: list[(x, y)] in world units, head is first element.
# direction: (dx, dy) applied on the next tick.
# heading: (dx, dy) of the last executed move; turns are checked against it.
# apple: (x, y)
# score: int
# game_over, victory, paused: bool


def add_vectors(a: tuple[float, float], b: tuple[float, float]) -> tuple[float, float]:
    # Snap to the step grid so repeated moves never drift past a bound.
    return (round(a[0] + b[0], 6), round(a[1] + b[1], 6))


def is_running(state: State) -> bool:
    return not (state.game_over or state.victory or state.paused) and bool(state.snake)
