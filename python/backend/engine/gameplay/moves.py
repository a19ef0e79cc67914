"""Move generation — legal blank moves and their successor boards."""

from __future__ import annotations

from backend.models.board import SIZE, Board, Direction

# Offset from the blank to the tile that slides into it.
# UP    → tile below the blank moves up
# DOWN  → tile above the blank moves down
# LEFT  → tile right of the blank moves left
# RIGHT → tile left of the blank moves right
_OFFSETS: dict[Direction, int] = {
    Direction.UP: SIZE,
    Direction.DOWN: -SIZE,
    Direction.LEFT: 1,
    Direction.RIGHT: -1,
}
_DIRECTIONS = {offset: direction for direction, offset in _OFFSETS.items()}


def possible_moves(blank: int) -> list[int]:
    """Return the indices whose tile can slide into *blank*.

    Order is fixed (left, right, up, down neighbour of the blank) so
    that every engine expands successors deterministically.
    """
    moves: list[int] = []
    if blank % SIZE != 0:
        moves.append(blank - 1)
    if blank % SIZE != SIZE - 1:
        moves.append(blank + 1)
    if blank >= SIZE:
        moves.append(blank - SIZE)
    if blank < SIZE * (SIZE - 1):
        moves.append(blank + SIZE)
    return moves


def successors(board: Board) -> list[Board]:
    """Return the 2-4 boards reachable from *board* in one move.

    *board* is never modified; each successor is a fresh copy.
    """
    return [board.swapped(board.blank, target) for target in possible_moves(board.blank)]


def slide(board: Board, direction: Direction) -> Board | None:
    """Slide a tile in *direction* into the blank.

    E.g. ``Direction.UP`` moves the tile **below** the blank upward.
    Returns the new board, or ``None`` if no tile can move that way.
    """
    target = board.blank + _OFFSETS[direction]
    if target not in possible_moves(board.blank):
        return None
    return board.swapped(board.blank, target)


def direction_between(before: Board, after: Board) -> Direction:
    """Return the tile move that turns *before* into *after*."""
    offset = after.blank - before.blank
    if after.blank not in possible_moves(before.blank) or before.swapped(
        before.blank, after.blank
    ) != after:
        raise ValueError(f"Boards {before.key} and {after.key} are not one move apart.")
    return _DIRECTIONS[offset]


def directions_for_path(path: list[Board]) -> list[Direction]:
    """Convert a board path into the tile moves that walk it."""
    return [direction_between(a, b) for a, b in zip(path, path[1:])]
