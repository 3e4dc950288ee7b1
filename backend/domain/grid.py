"""
Grid model - read-only geometry and occupancy queries.

Both the safety filter and the path engine ask this module what is
"occupied", so the two never disagree about which cells are passable.
"""

from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, List, Sequence, Tuple

from .coord import Coord
from .game_state import Board
from .snake import Snake


@dataclass(frozen=True)
class Grid:
    width: int
    height: int

    @classmethod
    def for_board(cls, board: Board) -> "Grid":
        return cls(board.width, board.height)

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def in_bounds(self, coord: Coord) -> bool:
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    @staticmethod
    def is_obstacle(coord: Coord, obstacles: AbstractSet[Coord]) -> bool:
        return coord in obstacles

    def passable_neighbours(self, coord: Coord, obstacles: AbstractSet[Coord]) -> List[Coord]:
        """In-bounds, unobstructed cardinal neighbours in VALID_MOVES order."""
        return [
            n for n in coord.neighbours()
            if self.in_bounds(n) and not self.is_obstacle(n, obstacles)
        ]


def vacate_tail(body: Sequence[Coord]) -> Tuple[Coord, ...]:
    """
    The body as it will block movement this turn.

    The last segment moves out of the way as every snake moves, so it is
    dropped. A snake that just ate has a stacked tail (last two segments
    equal), so the cell stays covered by the segment before it.
    """
    return tuple(body[:-1])


def build_obstacles(board: Board, you: Snake, include_self: bool = True) -> FrozenSet[Coord]:
    """
    Cells a path may not cross: hazards, every other snake's body and,
    unless include_self is False, our own body - all with tails vacated.
    """
    obstacles = set(board.hazards)
    for snake in board.snakes:
        if snake.id == you.id:
            continue
        obstacles.update(vacate_tail(snake.body))
    if include_self:
        obstacles.update(vacate_tail(you.body))
    return frozenset(obstacles)
