"""
Registry for player variants.

Maps variant keys (e.g., 'default', 'random') to player classes. To add a
variant, create the player module, add a loader that imports it, and add an entry to
PLAYER_VARIANT_LOADERS.
"""

from typing import Callable, Dict, List, Optional, Type
from .base import Player


# Each loader imports its player module only when that variant is requested
def _get_default_player() -> Type[Player]:
    from .pathfinder_player import PathfinderPlayer
    return PathfinderPlayer


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


PLAYER_VARIANT_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "default": _get_default_player,
    "random": _get_random_player,
}

AVAILABLE_VARIANTS = list(PLAYER_VARIANT_LOADERS.keys())


def get_player_class(variant_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given variant key.

    Args:
        variant_key: One of 'default' or 'random'. If None or empty, returns default.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If variant_key is not recognized.
    """
    if not variant_key or variant_key.strip() == "":
        variant_key = "default"

    variant_key = variant_key.strip()

    if variant_key not in PLAYER_VARIANT_LOADERS:
        available = ", ".join(AVAILABLE_VARIANTS)
        raise ValueError(
            f"Unknown player variant '{variant_key}'. Available variants: {available}"
        )

    return PLAYER_VARIANT_LOADERS[variant_key]()


def list_variants() -> List[Dict[str, str]]:
    """
    Return metadata about all available player variants.

    Returns:
        List of dicts with 'key' and 'description' for each variant.
    """
    return [
        {"key": "default", "description": "Shortest path to nearest food (tail-chase without food), safety-filtered"},
        {"key": "random", "description": "Uniformly random safe move"},
    ]
