"""
Base Engine Module - Shared driver for the 8-puzzle search strategies.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from backend.engine.gameplay.moves import successors
from backend.engine.gamesolver.frontier import PriorityFrontier, StackFrontier
from backend.engine.gamesolver.node import Node, path_from_root
from backend.engine.gamestate.state import SearchStats, SearchStatus
from backend.models.board import Board

logger = logging.getLogger(__name__)


class SearchEngine(ABC):
    """
    Abstract base class for all search engines.

    An engine owns its frontier, visited set, statistics and solution
    path. A run moves ``idle -> running -> solved | exhausted``; it can be
    driven to the end with ``solve()`` or one expansion at a time with
    ``advance_one_step()``. Both go through the same iteration, so they
    finish with identical statistics and path.

    Subclasses choose the frontier policy and how successors are
    accounted for.

    Attributes:
        name: Short identifier used by the engine registry
        description: Human-readable description for the CLI
        counts_raw_successors: If True, ``generated_nodes`` grows by every
            successor produced; otherwise by one per newly visited state
        skips_visited_successors: If True, successors already in the
            visited set are not pushed
    """
    name: str = "base"
    description: str = "Base engine"
    counts_raw_successors: bool = False
    skips_visited_successors: bool = True

    def __init__(self, initial: Board) -> None:
        self.initial = initial
        self.reset_state()

    # -- strategy hooks -------------------------------------------------------

    @abstractmethod
    def _new_frontier(self) -> PriorityFrontier | StackFrontier:
        """Return an empty frontier ordered the way this strategy needs."""

    @abstractmethod
    def _make_node(self, board: Board, parent: Node | None) -> Node:
        """Wrap *board* in a node, filling in whatever costs the strategy uses."""

    # -- public API -----------------------------------------------------------

    def reset_state(self, initial: Board | None = None) -> None:
        """Clear all search state, optionally switching to a new initial board."""
        if initial is not None:
            self.initial = initial
        self.status = SearchStatus.IDLE
        self.stats = SearchStats()
        self.visited: set[str] = set()
        self.path: list[Board] = []
        self.frontier = self._new_frontier()

    def solve(self) -> SearchStatus:
        """Run until solved or exhausted and return the final status."""
        if self.status.is_terminal:
            logger.warning("%s: search already finished (%s)", self.name, self.status)
            return self.status
        if self.status is SearchStatus.IDLE:
            self._start()
        while not self.status.is_terminal:
            self._iterate()
        return self.status

    def advance_one_step(self) -> Board | None:
        """
        Examine the next frontier node.

        Frontier entries whose state has already been expanded are
        discarded on the way. Returns the examined board (the goal when
        the run just succeeded), or ``None`` when the frontier ran dry or
        the run had already finished.
        """
        if self.status.is_terminal:
            logger.warning("%s: search already finished (%s)", self.name, self.status)
            return None
        if self.status is SearchStatus.IDLE:
            self._start()
        while True:
            board = self._iterate()
            if board is not None or self.status.is_terminal:
                return board

    def frontier_states(self) -> list[Board]:
        """Boards currently in the frontier, next to be removed first."""
        return [node.board for node in self.frontier.nodes()]

    # -- accessors ------------------------------------------------------------

    @property
    def is_solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    @property
    def is_finished(self) -> bool:
        return self.status.is_terminal

    @property
    def optimal_path(self) -> list[Board]:
        return self.path

    @property
    def open_nodes(self) -> int:
        return self.stats.open_nodes

    @property
    def generated_nodes(self) -> int:
        return self.stats.generated_nodes

    @property
    def max_frontier_size(self) -> int:
        return self.stats.max_frontier_size

    @property
    def max_depth(self) -> int:
        return self.stats.max_depth

    @property
    def solution_depth(self) -> int:
        return self.stats.solution_depth

    @property
    def execution_time_ms(self) -> float:
        return self.stats.execution_time_ms

    # -- iteration ------------------------------------------------------------

    def _start(self) -> None:
        logger.info("%s: starting search from %s", self.name, self.initial.key)
        self.status = SearchStatus.RUNNING
        self.stats.start()
        self.frontier.push(self._make_node(self.initial, None))

    def _finish(self, status: SearchStatus) -> None:
        self.status = status
        self.stats.stop()
        if status is SearchStatus.SOLVED:
            logger.info(
                "%s: solved in %d moves (%d expanded, %.1f ms)",
                self.name,
                self.stats.solution_depth,
                self.stats.open_nodes,
                self.stats.execution_time_ms,
            )
        else:
            logger.warning(
                "%s: no solution found after %d expansions", self.name, self.stats.open_nodes
            )

    def _iterate(self) -> Board | None:
        """Pop one node and act on it.

        Returns the board examined, or ``None`` if the node was a stale
        duplicate or the frontier was empty.
        """
        node = self.frontier.pop()
        if node is None:
            self._finish(SearchStatus.EXHAUSTED)
            return None

        if node.board.is_solved():
            self.path = path_from_root(node)
            self.stats.solution_depth = node.depth
            self._finish(SearchStatus.SOLVED)
            return node.board

        key = node.board.key
        if key in self.visited:
            return None

        self._expand(node, key)
        return node.board

    def _expand(self, node: Node, key: str) -> None:
        self.visited.add(key)
        self.stats.open_nodes += 1
        self.stats.record_depth(node.depth)

        children = successors(node.board)
        if self.counts_raw_successors:
            self.stats.generated_nodes += len(children)
        else:
            self.stats.generated_nodes += 1

        for board in children:
            if self.skips_visited_successors and board.key in self.visited:
                continue
            self.frontier.push(self._make_node(board, node))

        self.stats.record_frontier(len(self.frontier))
        logger.debug(
            "%s: expanded %s at depth %d, frontier=%d",
            self.name,
            key,
            node.depth,
            len(self.frontier),
        )
