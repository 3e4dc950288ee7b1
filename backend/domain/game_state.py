"""
GameState entity - a snapshot of the game at a point in time.

Built fresh from every move request and discarded once a move is chosen;
nothing here is carried between turns.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Tuple

from .coord import Coord
from .errors import InvalidGameStateError, require_int
from .snake import Snake


@dataclass(frozen=True)
class Game:
    """
    Game metadata.

    Attributes:
        id: game identifier
        ruleset: ruleset name/version/settings as sent by the engine
        timeout: per-turn response budget in milliseconds
        source: where the game was started from (league, custom, ...)
    """

    id: str
    ruleset: Dict[str, Any] = field(default_factory=dict, compare=False)
    timeout: int = 500
    source: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Game":
        try:
            return cls(
                id=str(data["id"]),
                ruleset=dict(data.get("ruleset") or {}),
                timeout=require_int(data.get("timeout", 500), "game.timeout"),
                source=str(data.get("source") or ""),
            )
        except InvalidGameStateError:
            raise
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidGameStateError(f"Invalid game payload: {e}") from e


@dataclass(frozen=True)
class Board:
    """
    The board for one turn.

    Attributes:
        width, height: board dimensions
        food: food cells in the order the engine listed them
        hazards: hazard cells
        snakes: every snake still in play, including our own
    """

    width: int
    height: int
    food: Tuple[Coord, ...] = ()
    hazards: FrozenSet[Coord] = frozenset()
    snakes: Tuple[Snake, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Board":
        try:
            width = require_int(data["width"], "board.width")
            height = require_int(data["height"], "board.height")
            food = tuple(Coord.from_dict(c) for c in data.get("food") or [])
            hazards = frozenset(Coord.from_dict(c) for c in data.get("hazards") or [])
            snakes = tuple(Snake.from_dict(s) for s in data.get("snakes") or [])
        except InvalidGameStateError:
            raise
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidGameStateError(f"Invalid board payload: {e}") from e

        if width <= 0 or height <= 0:
            raise InvalidGameStateError(f"Board dimensions must be positive, got {width}x{height}")

        board = cls(width=width, height=height, food=food, hazards=hazards, snakes=snakes)
        board._check_bounds()
        return board

    def _check_bounds(self):
        cells = list(self.food) + list(self.hazards)
        for snake in self.snakes:
            cells.extend(snake.body)
        for cell in cells:
            if not (0 <= cell.x < self.width and 0 <= cell.y < self.height):
                raise InvalidGameStateError(
                    f"Coordinate {cell} lies outside the {self.width}x{self.height} board"
                )


@dataclass(frozen=True)
class GameState:
    """
    Everything the engine gets to see for one decision.

    Attributes:
        game: game metadata
        turn: current turn number (0-based)
        board: board snapshot
        you: the snake under our control
    """

    game: Game
    turn: int
    board: Board
    you: Snake

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "GameState":
        """
        Build a GameState from a Battlesnake request body.

        Raises:
            InvalidGameStateError: if the payload is malformed
        """
        if not isinstance(payload, dict):
            raise InvalidGameStateError("Request body must be a JSON object")
        try:
            game = Game.from_dict(payload["game"])
            board = Board.from_dict(payload["board"])
            you = Snake.from_dict(payload["you"])
            turn = require_int(payload.get("turn", 0), "turn")
        except InvalidGameStateError:
            raise
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidGameStateError(f"Invalid move request: {e}") from e

        for cell in you.body:
            if not (0 <= cell.x < board.width and 0 <= cell.y < board.height):
                raise InvalidGameStateError(f"Our snake has segment {cell} outside the board")

        return cls(game=game, turn=turn, board=board, you=you)

    def opponents(self) -> Tuple[Snake, ...]:
        """Every snake on the board that is not ours, matched by id."""
        return tuple(s for s in self.board.snakes if s.id != self.you.id)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = hazard
        Y = our head, y = our body
        0,1,2... = opponent head (index among opponents), s = opponent body
        (0,0) is at the bottom left, with x-axis labels at the bottom.
        """
        board = [['.' for _ in range(self.board.width)] for _ in range(self.board.height)]

        for cell in self.board.hazards:
            board[cell.y][cell.x] = 'H'

        for cell in self.board.food:
            board[cell.y][cell.x] = 'F'

        for i, snake in enumerate(self.opponents()):
            # Draw tail first so the head wins on stacked segments
            for pos_idx, cell in reversed(list(enumerate(snake.body))):
                board[cell.y][cell.x] = str(i % 10) if pos_idx == 0 else 's'

        for pos_idx, cell in reversed(list(enumerate(self.you.body))):
            board[cell.y][cell.x] = 'Y' if pos_idx == 0 else 'y'

        result = []
        # Print rows in reverse order (bottom to top)
        for y in range(self.board.height - 1, -1, -1):
            result.append(f"{y:2d} {' '.join(board[y])}")

        result.append("   " + " ".join(str(i % 10) for i in range(self.board.width)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState game={self.game.id} turn={self.turn}, food={list(self.board.food)}, "
            f"snakes={len(self.board.snakes)}, you={self.you.id}>"
        )
