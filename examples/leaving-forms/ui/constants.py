"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
SCREEN_W = 960
SCREEN_H = 540
STATUS_H = 36
UNITS_TO_PX = 100  # world units -> pixels

# Forms: (rx, ry, initially growing, centre offset in world units)
FORMS = [
    (2.0, 1.6, True, (-2.2, 0.3)),
    (2.0, 1.6, False, (2.2, 0.3)),
]

LINE_WIDTH = 4
POINT_RADIUS = 5

# Colors
BG_COLOR = (20, 20, 30)
LINE_COLOR = (255, 255, 255)
OUTLINE_COLOR = (60, 60, 80)
POINT_COLOR = (255, 0, 0)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)

MAX_SPEED = 10
