"""
Random player implementation - picks random safe moves.
"""

from domain.constants import DEFAULT_MOVE
from domain.game_state import GameState
from .base import Player
from .safety import compute_move_safety, safe_moves


class RandomPlayer(Player):
    """
    Picks uniformly among the moves the safety filter allows.
    """

    def get_move(self, game_state: GameState) -> str:
        valid_moves = safe_moves(compute_move_safety(game_state))

        # If no valid moves, we'll die anyway
        if not valid_moves:
            return DEFAULT_MOVE

        return self.rng.choice(valid_moves)
