"""
Base player interface for the decision engine.
"""

import random
from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    Each player returns a move for the snake in game_state.you. Players keep
    no memory between turns; the only state is the random source used for
    tie-breaks, which can be injected (seeded) for reproducible decisions.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "up", "down", "left", "right"
        """
        raise NotImplementedError
