"""
DFS Engine - Uninformed depth-first search with a visited set.
"""

from __future__ import annotations

from backend.engine.gamesolver.base import SearchEngine
from backend.engine.gamesolver.factory import register_engine
from backend.engine.gamesolver.frontier import StackFrontier
from backend.engine.gamesolver.node import Node
from backend.models.board import Board


@register_engine
class DepthFirstEngine(SearchEngine):
    """
    Depth-first search over an explicit stack.

    There is no depth bound: the visited set alone keeps it finite, so
    on a solvable board it always terminates, but it may wander through
    a large part of the 181 440 reachable states first and the path it
    returns is usually far from shortest.

    Every successor is pushed, visited or not; duplicates are dropped
    when popped. ``generated_nodes`` grows by one per newly visited
    state.
    """
    name = "dfs"
    description = "Depth-first (uninformed) - Explores the newest branch first, no heuristic"
    skips_visited_successors = False

    def _new_frontier(self) -> StackFrontier:
        return StackFrontier()

    def _make_node(self, board: Board, parent: Node | None) -> Node:
        g = parent.g + 1 if parent is not None else 0
        return Node(board=board, parent=parent, g=g)
