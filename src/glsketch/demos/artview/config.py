WIDTH, HEIGHT = 600, 600
# Half-width of the visible square; artwork lives in [-1, 1].
VIEW_EXTENT = 1.2
FPS = 60
DEFAULT_ART = "batman"
