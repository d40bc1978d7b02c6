"""Game constants for the grid snake engine and its pygame frontend."""

# Board configuration
GRID_SIZE = 20
START_CELL = (10, 10)
TICK_MS = 200

# Movement directions as (dx, dy) unit vectors; y grows downwards.
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# Window configuration
CELL_SIZE = 24
HUD_HEIGHT = 64
CONTROLS_HEIGHT = 96
FPS = 60

# Colors (R, G, B)
BG_TOP = (18, 26, 38)
BG_BOTTOM = (9, 14, 22)
GRID_LINE = (30, 44, 61)
HEAD_COLOR = (112, 224, 120)
BODY_COLOR = (66, 168, 90)
FOOD_COLOR = (255, 83, 95)
FOOD_INNER = (255, 178, 184)
BUTTON_COLOR = (55, 65, 81)
WHITE = (240, 240, 240)
SHADOW = (0, 0, 0)
SAMPLE_RATE = 44100
