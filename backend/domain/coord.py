"""
Coord value object - a single cell on the board.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .constants import UP, DOWN, LEFT, RIGHT, DIRECTION_DELTAS, VALID_MOVES
from .errors import InvalidGameStateError, require_int


@dataclass(frozen=True)
class Coord:
    """
    An immutable board position.

    (0, 0) is the bottom-left cell; x grows to the right and y grows upwards.
    """

    x: int
    y: int

    def moved(self, direction: str) -> "Coord":
        dx, dy = DIRECTION_DELTAS[direction]
        return Coord(self.x + dx, self.y + dy)

    def neighbours(self) -> List["Coord"]:
        """The four cardinal neighbours, in VALID_MOVES order (may be off-board)."""
        return [self.moved(direction) for direction in VALID_MOVES]

    def distance(self, other: "Coord") -> int:
        """Manhattan distance."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def direction_to(self, other: "Coord") -> Optional[str]:
        """
        Direction of a single step from this cell to an adjacent one.

        Returns None when the cells are not 4-adjacent.
        """
        if self.x == other.x:
            if other.y == self.y + 1:
                return UP
            if other.y == self.y - 1:
                return DOWN
        elif self.y == other.y:
            if other.x == self.x - 1:
                return LEFT
            if other.x == self.x + 1:
                return RIGHT
        return None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Coord":
        try:
            x, y = data["x"], data["y"]
        except (KeyError, TypeError) as e:
            raise InvalidGameStateError(f"Invalid coordinate {data!r}") from e
        return cls(require_int(x, "x"), require_int(y, "y"))

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}

    def __repr__(self):
        return f"({self.x}, {self.y})"
