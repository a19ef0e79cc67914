"""Tracks the mutable state of a search in progress."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum


class SearchStatus(StrEnum):
    IDLE = "idle"
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"

    @property
    def is_terminal(self) -> bool:
        return self in (SearchStatus.SOLVED, SearchStatus.EXHAUSTED)


@dataclass
class SearchStats:
    """Counters for one run, mutated only by the engine that owns them.

    ``open_nodes`` counts expansions. ``generated_nodes`` follows each
    engine's own accounting (see the engine docstrings). Depths are in
    moves from the initial board.
    """

    open_nodes: int = 0
    generated_nodes: int = 0
    max_frontier_size: int = 0
    max_depth: int = 0
    solution_depth: int = 0
    execution_time_ms: float = 0.0
    _started_at: float | None = field(default=None, repr=False, compare=False)

    # -- time tracking --------------------------------------------------------

    def start(self) -> None:
        self._started_at = time.perf_counter()

    def stop(self) -> None:
        if self._started_at is not None:
            self.execution_time_ms = (time.perf_counter() - self._started_at) * 1000
            self._started_at = None

    # -- counters -------------------------------------------------------------

    def record_depth(self, depth: int) -> None:
        self.max_depth = max(self.max_depth, depth)

    def record_frontier(self, size: int) -> None:
        self.max_frontier_size = max(self.max_frontier_size, size)

    def as_dict(self) -> dict[str, float | int]:
        return {
            "open_nodes": self.open_nodes,
            "generated_nodes": self.generated_nodes,
            "max_frontier_size": self.max_frontier_size,
            "max_depth": self.max_depth,
            "solution_depth": self.solution_depth,
            "execution_time_ms": self.execution_time_ms,
        }
