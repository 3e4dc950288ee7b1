"""
Snake entity as reported by the game engine for one turn.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .coord import Coord
from .errors import InvalidGameStateError, require_int


@dataclass(frozen=True)
class Snake:
    """
    Represents a snake on the board.

    Attributes:
        id: engine-assigned identifier, unique within a game
        name: display name
        health: remaining health (the snake dies at 0)
        body: coordinates from head at index 0 to tail at the end
        head: copy of body[0]
        length: number of body segments
        latency: last response latency reported by the engine
        shout: optional message the snake sent last turn
    """

    id: str
    name: str
    health: int
    body: Tuple[Coord, ...]
    head: Coord
    length: int
    latency: str = "0"
    shout: Optional[str] = None

    @property
    def neck(self) -> Optional[Coord]:
        """Second body segment, or None for a single-segment snake."""
        return self.body[1] if len(self.body) > 1 else None

    @property
    def tail(self) -> Coord:
        return self.body[-1]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Snake":
        try:
            body = tuple(Coord.from_dict(segment) for segment in data["body"])
            snake_id = str(data["id"])
            name = str(data.get("name", ""))
            health = require_int(data.get("health", 0), "snake.health")
            head = Coord.from_dict(data["head"]) if "head" in data else (body[0] if body else None)
        except InvalidGameStateError:
            raise
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidGameStateError(f"Invalid snake payload: {e}") from e

        if not body:
            raise InvalidGameStateError(f"Snake {snake_id} has an empty body")
        if head != body[0]:
            raise InvalidGameStateError(
                f"Snake {snake_id} head {head} does not match first body segment {body[0]}"
            )

        shout = data.get("shout")
        return cls(
            id=snake_id,
            name=name,
            health=health,
            body=body,
            head=head,
            length=require_int(data.get("length", len(body)), "snake.length"),
            latency=str(data.get("latency", "0")),
            shout=shout if shout else None,
        )
