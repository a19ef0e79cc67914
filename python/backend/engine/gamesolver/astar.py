"""
A* Engine - Best-first search on f = g + h with the Manhattan heuristic.
"""

from __future__ import annotations

from backend.engine.gamesolver.base import SearchEngine
from backend.engine.gamesolver.factory import register_engine
from backend.engine.gamesolver.frontier import PriorityFrontier
from backend.engine.gamesolver.heuristic import manhattan_distance
from backend.engine.gamesolver.node import Node
from backend.models.board import Board


@register_engine
class AStarEngine(SearchEngine):
    """
    A* search. Because the heuristic is consistent, the first time the
    goal leaves the frontier its path is a shortest one.

    Ties on f are broken by insertion order. ``generated_nodes`` counts
    every successor produced by an expansion, including ones that are
    then dropped because their state was already expanded.
    """
    name = "astar"
    description = "A* (optimal) - Orders the frontier by moves taken + Manhattan distance"
    counts_raw_successors = True

    def _new_frontier(self) -> PriorityFrontier:
        return PriorityFrontier(lambda node: node.f)

    def _make_node(self, board: Board, parent: Node | None) -> Node:
        g = parent.g + 1 if parent is not None else 0
        return Node(board=board, parent=parent, g=g, h=manhattan_distance(board))
