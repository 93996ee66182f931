import math

# Piece levels (cell counts) accepted by the shape generator.
MIN_LEVEL = 1
MAX_LEVEL = 8

DEFAULT_BOARD_WIDTH = 8
DEFAULT_BOARD_HEIGHT = 8

# Full-board scans per placement request, one per 90 degree orientation.
ROTATION_ATTEMPTS = 4

QUARTER_TURN = math.pi / 2
# Angles this close to a multiple of QUARTER_TURN take the exact integer path.
QUARTER_TURN_TOLERANCE = 1e-6

DEFAULT_ROTATION_DEGREES = 90.0
DEFAULT_ROTATION_RADIANS = QUARTER_TURN

# Random walk directions
UP = 0
DOWN = 1
LEFT = 2
RIGHT = 3
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# Owner ids are unbounded ints; owner n renders as chr(ord(OWNER_SYMBOL_BASE) + n).
INITIAL_OWNER_ID = 0
OWNER_SYMBOL_BASE = "A"
EMPTY_SYMBOL = " "
