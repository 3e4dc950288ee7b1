"""
Safety filter - which of the four moves would not kill us this turn.

Each filter is a pure function that returns the directions it forbids.
evaluate_safety() folds them over an immutable MoveSafety mapping in a
fixed order; a flag can only go from True to False.
"""

import logging
from dataclasses import dataclass
from functools import reduce
from types import MappingProxyType
from typing import Callable, FrozenSet, List, Mapping, Optional, Set, Tuple

from domain.constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES
from domain.coord import Coord
from domain.game_state import GameState
from domain.grid import Grid, vacate_tail

logger = logging.getLogger(__name__)

MoveSafety = Mapping[str, bool]


@dataclass(frozen=True)
class SafetyContext:
    """
    Inputs shared by every filter.

    own_body and opponent_cells are already tail-vacated.
    """

    head: Coord
    neck: Optional[Coord]
    grid: Grid
    own_body: FrozenSet[Coord]
    opponent_cells: FrozenSet[Coord]
    hazards: FrozenSet[Coord]

    @classmethod
    def from_game_state(cls, game_state: GameState) -> "SafetyContext":
        you = game_state.you
        opponent_cells = set()
        for snake in game_state.opponents():
            opponent_cells.update(vacate_tail(snake.body))
        return cls(
            head=you.head,
            neck=you.neck,
            grid=Grid.for_board(game_state.board),
            own_body=frozenset(vacate_tail(you.body)),
            opponent_cells=frozenset(opponent_cells),
            hazards=frozenset(game_state.board.hazards),
        )


def initial_safety() -> MoveSafety:
    return MappingProxyType({move: True for move in VALID_MOVES})


def narrow(safety: MoveSafety, forbidden: Set[str]) -> MoveSafety:
    """Return a new mapping with the forbidden directions switched off."""
    return MappingProxyType({
        move: safety[move] and move not in forbidden for move in VALID_MOVES
    })


def safe_moves(safety: MoveSafety) -> List[str]:
    """Directions still flagged safe, in VALID_MOVES order."""
    return [move for move in VALID_MOVES if safety[move]]


def _targets(ctx: SafetyContext) -> List[Tuple[str, Coord]]:
    return [(move, ctx.head.moved(move)) for move in VALID_MOVES]


def prevent_backwards(ctx: SafetyContext) -> Set[str]:
    """Never reverse onto the neck. A stacked neck (turn 0) forbids nothing."""
    head, neck = ctx.head, ctx.neck
    if neck is None:
        return set()
    if neck.x < head.x:
        return {LEFT}
    if neck.x > head.x:
        return {RIGHT}
    if neck.y < head.y:
        return {DOWN}
    if neck.y > head.y:
        return {UP}
    return set()


def prevent_walls(ctx: SafetyContext) -> Set[str]:
    return {move for move, target in _targets(ctx) if not ctx.grid.in_bounds(target)}


def prevent_self_destruction(ctx: SafetyContext) -> Set[str]:
    return {move for move, target in _targets(ctx) if Grid.is_obstacle(target, ctx.own_body)}


def prevent_other_snakes(ctx: SafetyContext) -> Set[str]:
    return {move for move, target in _targets(ctx) if Grid.is_obstacle(target, ctx.opponent_cells)}


def prevent_hazards(ctx: SafetyContext) -> Set[str]:
    # Hazards only drain health under the rules; we still refuse to enter them
    return {move for move, target in _targets(ctx) if Grid.is_obstacle(target, ctx.hazards)}


SafetyFilter = Callable[[SafetyContext], Set[str]]

# Applied in this order
SAFETY_FILTERS: Tuple[Tuple[str, SafetyFilter], ...] = (
    ("prevent_backwards", prevent_backwards),
    ("prevent_walls", prevent_walls),
    ("prevent_self_destruction", prevent_self_destruction),
    ("prevent_other_snakes", prevent_other_snakes),
    ("prevent_hazards", prevent_hazards),
)


def _log_moves(head: Coord, method: str, safety: MoveSafety) -> None:
    logger.debug(
        f"head: {head} is_move_safe after {method} "
        f"up ({safety[UP]}), down ({safety[DOWN]}), left ({safety[LEFT]}), right ({safety[RIGHT]})"
    )


def evaluate_safety(
    ctx: SafetyContext,
    filters: Tuple[Tuple[str, SafetyFilter], ...] = SAFETY_FILTERS,
) -> MoveSafety:
    def apply(safety: MoveSafety, named_filter: Tuple[str, SafetyFilter]) -> MoveSafety:
        name, move_filter = named_filter
        narrowed = narrow(safety, move_filter(ctx))
        _log_moves(ctx.head, name, narrowed)
        return narrowed

    return reduce(apply, filters, initial_safety())


def compute_move_safety(game_state: GameState) -> MoveSafety:
    """MoveSafety for our head on this turn's board."""
    return evaluate_safety(SafetyContext.from_game_state(game_state))
