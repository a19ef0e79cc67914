"""
Greedy Engine - Best-first search on the heuristic alone.
"""

from __future__ import annotations

from backend.engine.gamesolver.base import SearchEngine
from backend.engine.gamesolver.factory import register_engine
from backend.engine.gamesolver.frontier import PriorityFrontier
from backend.engine.gamesolver.heuristic import manhattan_distance
from backend.engine.gamesolver.node import Node
from backend.models.board import Board


@register_engine
class GreedyEngine(SearchEngine):
    """
    Greedy best-first search: always expands the board that looks
    closest to the goal, ignoring how many moves it took to get there.

    Usually fast, but the path it returns can be longer than the
    shortest one.

    Every successor is pushed, visited or not; duplicates are dropped
    when popped, so ``max_frontier_size`` includes them.
    ``generated_nodes`` grows by one per newly visited state.
    """
    name = "greedy"
    description = "Greedy best-first (fast, not optimal) - Orders the frontier by Manhattan distance"
    skips_visited_successors = False

    def _new_frontier(self) -> PriorityFrontier:
        return PriorityFrontier(lambda node: node.h)

    def _make_node(self, board: Board, parent: Node | None) -> Node:
        # g only tracks depth here; it never affects ordering.
        g = parent.g + 1 if parent is not None else 0
        return Node(board=board, parent=parent, g=g, h=manhattan_distance(board))
