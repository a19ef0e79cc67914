"""Open-set containers used by the search engines."""

from __future__ import annotations

import heapq
import itertools
from typing import Callable

from backend.engine.gamesolver.node import Node


class PriorityFrontier:
    """Min-heap keyed by ``priority(node)``.

    Equal priorities come out in insertion order, so runs are
    reproducible.
    """

    def __init__(self, priority: Callable[[Node], int]) -> None:
        self._priority = priority
        self._heap: list[tuple[int, int, Node]] = []
        self._counter = itertools.count()

    def push(self, node: Node) -> None:
        heapq.heappush(self._heap, (self._priority(node), next(self._counter), node))

    def pop(self) -> Node | None:
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def nodes(self) -> list[Node]:
        """Pending nodes in the order they would be popped."""
        return [entry[2] for entry in sorted(self._heap, key=lambda e: (e[0], e[1]))]

    def __len__(self) -> int:
        return len(self._heap)


class StackFrontier:
    """LIFO stack: the most recently pushed node is popped first."""

    def __init__(self) -> None:
        self._stack: list[Node] = []

    def push(self, node: Node) -> None:
        self._stack.append(node)

    def pop(self) -> Node | None:
        if not self._stack:
            return None
        return self._stack.pop()

    def nodes(self) -> list[Node]:
        return self._stack[::-1]

    def __len__(self) -> int:
        return len(self._stack)
