"""
Move selector - combines the safety filter and the path engine into one
decision per turn.
"""

import logging
import time
from dataclasses import dataclass
from typing import List, Optional

from domain.constants import DEFAULT_MOVE
from domain.game_state import GameState
from .base import Player
from .pathfinding import PlannedPath, choose_goal_path
from .safety import compute_move_safety, safe_moves

logger = logging.getLogger(__name__)

REASON_PATH = "path"
REASON_RANDOM_SAFE = "random_safe"
REASON_DEFAULT = "default"


@dataclass(frozen=True)
class MoveDecision:
    """
    Outcome of one turn.

    Attributes:
        move: direction to submit
        reason: REASON_PATH, REASON_RANDOM_SAFE or REASON_DEFAULT
        safe_moves: directions the safety filter allowed
        suggested: directions derived from the planned path (may be empty)
        plan: the planned path, if any goal was reachable
    """

    move: str
    reason: str
    safe_moves: List[str]
    suggested: List[str]
    plan: Optional[PlannedPath] = None


class PathfinderPlayer(Player):
    """
    Follows the shortest path to the nearest food (or our tail) as far as
    it stays safe, falling back to a random safe move, then to "down".
    """

    def decide(self, game_state: GameState) -> MoveDecision:
        start = time.perf_counter_ns()

        allowed = safe_moves(compute_move_safety(game_state))

        plan = choose_goal_path(game_state)
        suggested = plan.directions() if plan is not None else []
        if plan is not None:
            logger.debug(f"Path to {plan.kind} at {plan.goal} contains {list(plan.path)}")
        logger.debug(f"suggested_best_move : {suggested}")

        decision = self._select(allowed, suggested, plan)

        duration = time.perf_counter_ns() - start
        logger.info(f"Logic took {duration}ns")
        logger.info(f"MOVE {game_state.turn}: {decision.move} ({decision.reason})")
        return decision

    def _select(
        self,
        allowed: List[str],
        suggested: List[str],
        plan: Optional[PlannedPath],
    ) -> MoveDecision:
        for move in suggested:
            if move in allowed:
                return MoveDecision(move, REASON_PATH, allowed, suggested, plan)

        if allowed:
            return MoveDecision(self.rng.choice(allowed), REASON_RANDOM_SAFE, allowed, suggested, plan)

        return MoveDecision(DEFAULT_MOVE, REASON_DEFAULT, allowed, suggested, plan)

    def get_move(self, game_state: GameState) -> str:
        return self.decide(game_state).move
