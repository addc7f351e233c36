WIDTH, HEIGHT = 700, 700
VIEW_EXTENT = 1.0
FPS = 60
TITLE = "Snake (only 6 points, 20 is a lot)"

# Play field, in world units.
MIN_X, MAX_X = -0.9, 0.9
MIN_Y, MAX_Y = -0.9, 0.9

APPLE_RADIUS = 0.025
SNAKE_RADIUS = 0.025
MOVE_STEP = 0.05

WIN_SCORE = 6
TICK_MS = 150

CLEAR_COLOR = (26, 26, 38)
BORDER_COLOR = (77, 77, 77)
APPLE_COLOR = (255, 0, 0)
SNAKE_COLOR = (0, 128, 255)
TEXT_COLOR = (255, 255, 255)
HINT_COLOR = (179, 179, 179)
LOSE_COLOR = (255, 51, 51)
WIN_COLOR = (51, 255, 51)
PAUSE_COLOR = (255, 255, 51)
