"""
Shared builders for Battlesnake move requests.
"""

import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.game_state import GameState  # noqa: E402


def _coords(cells):
    return [{"x": x, "y": y} for x, y in cells]


def _snake(snake_id, body, name=None, health=90):
    return {
        "id": snake_id,
        "name": name or snake_id,
        "health": health,
        "body": _coords(body),
        "head": _coords(body)[0],
        "length": len(body),
        "latency": "12",
        "shout": "",
    }


def build_move_request(you, width=11, height=11, food=(), hazards=(), others=(), turn=3, game_id="game-1"):
    """
    A move request body as the game engine sends it.

    you and each entry of others are bodies given as (x, y) tuples, head first.
    """
    you_snake = _snake("you", you, name="pathfinder")
    snakes = [you_snake] + [_snake(f"opponent-{i}", body) for i, body in enumerate(others)]
    return {
        "game": {
            "id": game_id,
            "ruleset": {"name": "standard", "version": "v1.2.3"},
            "timeout": 500,
            "source": "custom",
        },
        "turn": turn,
        "board": {
            "width": width,
            "height": height,
            "food": _coords(food),
            "hazards": _coords(hazards),
            "snakes": snakes,
        },
        "you": you_snake,
    }


@pytest.fixture
def move_request():
    return build_move_request


@pytest.fixture
def make_state():
    def _make(*args, **kwargs):
        return GameState.from_dict(build_move_request(*args, **kwargs))
    return _make
