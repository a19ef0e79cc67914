"""Manhattan-distance heuristic for the 8-puzzle."""

from __future__ import annotations

from backend.models.board import GOAL, SIZE, Board

_GOAL_POS: dict[int, tuple[int, int]] = {
    tile: divmod(index, SIZE) for index, tile in enumerate(GOAL.tiles)
}


def manhattan_distance(board: Board) -> int:
    """Sum of Manhattan distances of every tile to its goal cell (blank ignored).

    Admissible and consistent for unit-cost sliding moves, so A* using it
    returns shortest paths.
    """
    dist = 0
    for index, tile in enumerate(board.tiles):
        if tile == 0:
            continue
        r, c = divmod(index, SIZE)
        gr, gc = _GOAL_POS[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist
