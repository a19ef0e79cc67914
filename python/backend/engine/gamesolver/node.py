"""Search tree nodes and path reconstruction."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import Board


@dataclass(eq=False)
class Node:
    """A board plus a back-reference to the node it was generated from.

    ``g`` is the number of moves from the root and ``h`` the heuristic
    estimate; engines that do not use costs leave ``h`` at zero.
    """

    board: Board
    parent: Node | None = None
    g: int = 0
    h: int = 0

    @property
    def f(self) -> int:
        return self.g + self.h

    @property
    def depth(self) -> int:
        return self.g


def path_from_root(node: Node) -> list[Board]:
    """Walk parent links up to the root and return boards root-first."""
    path: list[Board] = []
    current: Node | None = node
    while current is not None:
        path.append(current.board)
        current = current.parent
    path.reverse()
    return path
