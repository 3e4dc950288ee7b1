"""
Domain entities for the Battlesnake decision engine.

This module contains the per-turn game entities and grid queries that are
independent of infrastructure concerns (HTTP, configuration, etc.).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTION_DELTAS, DEFAULT_MOVE, API_VERSION,
)
from .errors import InvalidGameStateError
from .coord import Coord
from .snake import Snake
from .game_state import Game, Board, GameState
from .grid import Grid, vacate_tail, build_obstacles

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTION_DELTAS',
    'DEFAULT_MOVE', 'API_VERSION',
    'InvalidGameStateError',
    'Coord',
    'Snake',
    'Game', 'Board', 'GameState',
    'Grid', 'vacate_tail', 'build_obstacles',
]
