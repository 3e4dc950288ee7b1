import os
import random
import logging
from flask import Flask, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv
from typing import Optional

from domain.constants import API_VERSION
from domain.errors import InvalidGameStateError
from domain.game_state import GameState
from players.base import Player
from players.variant_registry import get_player_class

load_dotenv()

app = Flask(__name__)
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Browser-side previews fetch the snake info from a different origin.
# Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
if allowed_origins_env:
    allowed_origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
else:
    allowed_origins = ["https://play.battlesnake.com"]

CORS(app, resources={r"^/$": {"origins": allowed_origins}})

SERVER_ID = os.getenv("SERVER_ID", "battlesnake-pathfinder")
PLAYER_VARIANT = os.getenv("SNAKE_PLAYER_VARIANT")
RANDOM_SEED = os.getenv("SNAKE_RANDOM_SEED")


def build_player(game_state: Optional[GameState] = None) -> Player:
    """
    Instantiate the configured player variant for one decision.

    SNAKE_PLAYER_VARIANT picks the class. When SNAKE_RANDOM_SEED is set the
    tie-break random source is seeded from the seed, game id and turn, so the
    same request always gets the same answer whatever came before it.
    """
    player_class = get_player_class(PLAYER_VARIANT)
    rng = None
    if RANDOM_SEED:
        key = f"{RANDOM_SEED}:{game_state.game.id}:{game_state.turn}" if game_state else RANDOM_SEED
        rng = random.Random(key)
    return player_class(rng=rng)


# Fail at startup on an unknown variant rather than on the first move
logger.info(f"Using player {type(build_player()).__name__} (seed={RANDOM_SEED or 'none'})")


def snake_info() -> dict:
    return {
        "apiversion": API_VERSION,
        "author": os.getenv("BATTLESNAKE_AUTHOR", ""),
        "color": os.getenv("BATTLESNAKE_COLOR", "#FFFF33"),
        "head": os.getenv("BATTLESNAKE_HEAD", "whale"),
        "tail": os.getenv("BATTLESNAKE_TAIL", "dragon"),
        "version": os.getenv("BATTLESNAKE_VERSION", "0.1.0"),
    }


def _parse_game_state() -> GameState:
    payload = request.get_json(silent=True)
    if payload is None:
        raise InvalidGameStateError("Request body must be JSON")
    return GameState.from_dict(payload)


@app.after_request
def add_server_header(response):
    response.headers["Server"] = SERVER_ID
    return response


@app.route("/", methods=["GET"])
def handle_index():
    """Snake metadata: API version, author and appearance."""
    logger.info("INFO")
    return jsonify(snake_info())


@app.route("/start", methods=["POST"])
def handle_start():
    try:
        game_state = _parse_game_state()
    except InvalidGameStateError as error:
        logger.warning(f"Rejected start request: {error}")
        return jsonify({"error": str(error)}), 400

    logger.info(f"GAME START {game_state.game.id} ({game_state.board.width}x{game_state.board.height}, "
                f"{len(game_state.board.snakes)} snakes)")
    return "", 200


@app.route("/move", methods=["POST"])
def handle_move():
    """
    Choose this turn's move.

    Returns:
    - {"move": "up" | "down" | "left" | "right"}
    - 400 if the request is not a valid game state
    """
    try:
        game_state = _parse_game_state()
    except InvalidGameStateError as error:
        logger.warning(f"Rejected move request: {error}")
        return jsonify({"error": str(error)}), 400

    try:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Board for turn {game_state.turn}:\n{game_state.print_board()}")
        move = build_player(game_state).get_move(game_state)
        return jsonify({"move": move})

    except Exception as error:
        logging.error(f"Error choosing move for game {game_state.game.id}: {error}")
        return jsonify({"error": "Failed to choose a move"}), 500


@app.route("/end", methods=["POST"])
def handle_end():
    try:
        game_state = _parse_game_state()
    except InvalidGameStateError as error:
        logger.warning(f"Rejected end request: {error}")
        return jsonify({"error": str(error)}), 400

    logger.info(f"GAME OVER {game_state.game.id} after {game_state.turn} turns")
    return "", 200


if __name__ == "__main__":
    logger.info("Starting Battlesnake Server...")
    app.run(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        debug=os.getenv("FLASK_DEBUG") == "1",
    )
