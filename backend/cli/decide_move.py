#!/usr/bin/env python3
"""Run the decision engine on saved move requests.

Each input file holds one Battlesnake move request body (the JSON the game
engine POSTs to /move). For every file the tool prints the chosen move and
why it was chosen, optionally with the rendered board.

Usage:
    python backend/cli/decide_move.py turn_042.json
    python backend/cli/decide_move.py requests/*.json --seed 7 --show-board
    python backend/cli/decide_move.py turn_042.json --variant random
"""

import argparse
import json
import logging
import os
import random
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from domain.errors import InvalidGameStateError  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from players.pathfinder_player import PathfinderPlayer  # noqa: E402
from players.variant_registry import AVAILABLE_VARIANTS, get_player_class  # noqa: E402


logger = logging.getLogger(__name__)


def load_game_state(path: Path) -> GameState:
    """
    Read and parse one move request.

    Raises:
        SystemExit: if the file cannot be read or is not a valid game state
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise SystemExit(f"Could not read {path}: {exc}")

    try:
        return GameState.from_dict(payload)
    except InvalidGameStateError as exc:
        raise SystemExit(f"{path} is not a valid move request: {exc}")


def describe(path: Path, game_state: GameState, player, show_board: bool) -> str:
    lines = []
    if isinstance(player, PathfinderPlayer):
        decision = player.decide(game_state)
        goal = f"{decision.plan.kind} at {decision.plan.goal}" if decision.plan else "none"
        lines.append(
            f"{path.name}: turn {game_state.turn} -> {decision.move} "
            f"(reason={decision.reason}, safe={decision.safe_moves}, goal={goal})"
        )
    else:
        lines.append(f"{path.name}: turn {game_state.turn} -> {player.get_move(game_state)}")

    if show_board:
        lines.append(game_state.print_board())
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Choose a move for saved Battlesnake move requests",
    )
    parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        help="JSON files containing a move request body",
    )
    parser.add_argument(
        "--variant",
        type=str,
        default="default",
        choices=AVAILABLE_VARIANTS,
        help="Player variant to run (default: default)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random tie-break (default: unseeded)",
    )
    parser.add_argument(
        "--show-board",
        action="store_true",
        help="Print the board below each decision",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log the safety filter and path details",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
    )

    player_class = get_player_class(args.variant)

    for path in args.files:
        game_state = load_game_state(path)
        # A fresh player per file so a seeded run does not depend on file order
        player = player_class(rng=random.Random(args.seed) if args.seed is not None else None)
        print(describe(path, game_state, player, args.show_board))

    return 0


if __name__ == "__main__":
    sys.exit(main())
