from __future__ import annotations

from ...drawing import draw_circle
from . import config
from .state import State


def draw_border(canvas) -> None:
    r = config.SNAKE_RADIUS
    x0, x1 = config.MIN_X - r, config.MAX_X + r
    y0, y1 = config.MIN_Y - r, config.MAX_Y + r
    canvas.line_strip([x0, x1, x1, x0, x0], [y0, y0, y1, y1, y0], 2.0, config.BORDER_COLOR)


def draw_state(canvas, state: State) -> None:
    canvas.clear(config.CLEAR_COLOR)
    draw_border(canvas)

    if state.game_over:
        canvas.text(-0.35, 0.1, "YOU LOST :'v!", config.LOSE_COLOR)
        canvas.text(-0.3, 0.0, f"Points: {state.score}", config.TEXT_COLOR)
        canvas.text(-0.45, -0.1, "Press 'R' to restart or 'Q' to give up", config.HINT_COLOR)
    elif state.victory:
        canvas.text(-0.35, 0.1, "TODAY'S DINNER IS CHICKEN!", config.WIN_COLOR)
        canvas.text(-0.4, 0.0, f"You reached {state.score} points!", config.TEXT_COLOR)
        canvas.text(-0.45, -0.1, "Press 'R' to restart or 'Q' to quit", config.HINT_COLOR)
    elif state.paused:
        canvas.text(-0.25, 0.0, "AAAAAAA!", config.PAUSE_COLOR)
        canvas.text(-0.45, -0.1, "Press 'P' to resume or 'Q' to give up", config.HINT_COLOR)
    else:
        ax, ay = state.apple
        draw_circle(canvas, ax, ay, config.APPLE_RADIUS, config.APPLE_COLOR)
        for x, y in state.snake:
            draw_circle(canvas, x, y, config.SNAKE_RADIUS, config.SNAKE_COLOR)
        canvas.text(config.MIN_X + 0.02, config.MAX_Y + 0.03, f"Points: {state.score}", config.TEXT_COLOR)
        canvas.text(config.MIN_X + 0.02, config.MIN_Y - 0.08, "P: Pause, Q: Quit", config.HINT_COLOR)
