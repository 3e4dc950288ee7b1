"""
Game constants for the Battlesnake engine.
"""

# Movement directions (wire labels)
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"

# Canonical order; also the order neighbours are expanded and safe moves listed
VALID_MOVES = (UP, DOWN, LEFT, RIGHT)

DIRECTION_DELTAS = {
    UP: (0, 1),     # Up => y + 1
    DOWN: (0, -1),  # Down => y - 1
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Submitted when no move survives
DEFAULT_MOVE = DOWN

API_VERSION = "1"
