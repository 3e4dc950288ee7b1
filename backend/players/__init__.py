"""
Player implementations for the Battlesnake engine.

This module contains the player abstraction, the safety filter and path
engine they build on, and the variant registry used to pick one at startup.
"""

from .base import Player
from .random_player import RandomPlayer
from .pathfinder_player import PathfinderPlayer, MoveDecision
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'RandomPlayer',
    'PathfinderPlayer',
    'MoveDecision',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
