from backend.engine.gameplay.moves import (
    direction_between,
    directions_for_path,
    possible_moves,
    slide,
    successors,
)

__all__ = [
    "direction_between",
    "directions_for_path",
    "possible_moves",
    "slide",
    "successors",
]
