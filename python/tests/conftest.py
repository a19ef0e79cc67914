"""Shared fixtures: JSON boards and a breadth-first distance oracle."""

from __future__ import annotations

import json
from collections import deque
from pathlib import Path

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay.moves import successors
from backend.models.board import GOAL, Board

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


def load_fixture(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def sampled_boards(count: int = 12, moves: int = 18) -> list[Board]:
    """Reproducible scrambled boards of moderate difficulty."""
    return [GameGenerator.generate(moves, seed=seed) for seed in range(count)]


@pytest.fixture(scope="session")
def distances() -> dict[str, int]:
    """True distance to the goal for every solvable board, keyed by ``Board.key``."""
    dist = {GOAL.key: 0}
    queue = deque([GOAL])
    while queue:
        board = queue.popleft()
        d = dist[board.key] + 1
        for nxt in successors(board):
            if nxt.key not in dist:
                dist[nxt.key] = d
                queue.append(nxt)
    return dist
