from __future__ import annotations

import logging
import math
import random

import pygame

from . import config
from .state import State, add_vectors, is_running

log = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: (0.0, config.MOVE_STEP),
    pygame.K_DOWN: (0.0, -config.MOVE_STEP),
    pygame.K_LEFT: (-config.MOVE_STEP, 0.0),
    pygame.K_RIGHT: (config.MOVE_STEP, 0.0),
}


def same_cell(a: tuple[float, float], b: tuple[float, float]) -> bool:
    """Two points share a grid cell when they are within half a step on both axes."""
    h = config.MOVE_STEP / 2
    return abs(a[0] - b[0]) < h and abs(a[1] - b[1]) < h


def circles_overlap(p1, r1: float, p2, r2: float) -> bool:
    d = math.hypot(p1[0] - p2[0], p1[1] - p2[1])
    return d < r1 + r2 - config.MOVE_STEP * 0.1


def apple_grid() -> tuple[int, int]:
    steps_x = round((config.MAX_X - config.MIN_X - 2 * config.APPLE_RADIUS) / config.MOVE_STEP)
    steps_y = round((config.MAX_Y - config.MIN_Y - 2 * config.APPLE_RADIUS) / config.MOVE_STEP)
    return max(1, steps_x), max(1, steps_y)


def spawn_apple(snake, rng: random.Random) -> tuple[float, float]:
    """Pick a free spot on the apple grid, which sits half a step off the snake grid."""
    steps_x, steps_y = apple_grid()
    reach = config.SNAKE_RADIUS + config.APPLE_RADIUS
    while True:
        apple = (
            round(config.MIN_X + config.APPLE_RADIUS + rng.randrange(steps_x) * config.MOVE_STEP, 6),
            round(config.MIN_Y + config.APPLE_RADIUS + rng.randrange(steps_y) * config.MOVE_STEP, 6),
        )
        if all(math.hypot(x - apple[0], y - apple[1]) >= reach for x, y in snake):
            return apple


def new_game(rng: random.Random) -> State:
    head = ((config.MIN_X + config.MAX_X) / 2, (config.MIN_Y + config.MAX_Y) / 2)
    snake = [head]
    direction = (config.MOVE_STEP, 0.0)
    return State(
        snake=snake,
        direction=direction,
        heading=direction,
        apple=spawn_apple(snake, rng),
        score=0,
        game_over=False,
        victory=False,
        paused=False,
    )


def out_of_bounds(p: tuple[float, float]) -> bool:
    x, y = p
    return x < config.MIN_X or x > config.MAX_X or y < config.MIN_Y or y > config.MAX_Y


def turn(state: State, direction: tuple[float, float]) -> State:
    if not is_running(state):
        return state
    dx, dy = direction
    hx, hy = state.heading
    # Only perpendicular turns; the snake can never fold back on its neck.
    if (dx == 0) == (hx == 0):
        return state
    return state._replace(direction=direction)


def update_game_logic(state: State, rng: random.Random) -> State:
    """Advance the game by one tick."""
    if not is_running(state):
        return state

    head = add_vectors(state.snake[0], state.direction)
    if out_of_bounds(head) or any(same_cell(head, seg) for seg in state.snake):
        log.info("Game over, score %d", state.score)
        return state._replace(game_over=True)

    snake = [head] + state.snake
    state = state._replace(snake=snake, heading=state.direction)
    if not circles_overlap(head, config.SNAKE_RADIUS, state.apple, config.APPLE_RADIUS):
        return state._replace(snake=snake[:-1])

    score = state.score + 1
    if score >= config.WIN_SCORE:
        log.info("Victory with %d points", score)
        return state._replace(score=score, victory=True)
    log.debug("Apple eaten at (%g, %g), score %d", state.apple[0], state.apple[1], score)
    return state._replace(score=score, apple=spawn_apple(snake, rng))


def toggle_pause(state: State) -> State:
    if state.game_over or state.victory:
        return state
    return state._replace(paused=not state.paused)


def restart(state: State, rng: random.Random) -> State:
    if not (state.game_over or state.victory):
        return state
    log.info("Restarting")
    return new_game(rng)


def handle_key(state: State, key: int, rng: random.Random) -> State:
    if key in KEY_DIRECTIONS:
        return turn(state, KEY_DIRECTIONS[key])
    if key == pygame.K_p:
        return toggle_pause(state)
    if key == pygame.K_r:
        return restart(state, rng)
    return state
