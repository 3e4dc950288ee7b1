"""
Errors raised while turning a request payload into domain objects.
"""


class InvalidGameStateError(ValueError):
    """The payload does not describe a well-formed game state."""


def require_int(value, name: str) -> int:
    """Return value if it is a JSON integer (bools and floats are rejected)."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidGameStateError(f"{name} must be an integer, got {value!r}")
    return value
