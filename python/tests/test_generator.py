"""Board generation."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver.solver import Solver
from backend.models.board import GOAL


def test_solved_is_goal() -> None:
    assert GameGenerator.solved() == GOAL


def test_generate_is_reproducible() -> None:
    assert GameGenerator.generate(25, seed=11) == GameGenerator.generate(25, seed=11)


@pytest.mark.parametrize("seed", range(10))
def test_generated_boards_are_solvable(seed: int) -> None:
    board = GameGenerator.generate(30, seed=seed)
    assert not board.is_solved()
    assert Solver.is_solvable(board)


def test_odd_scramble_never_lands_on_goal() -> None:
    board = GameGenerator.scramble(GOAL, 7, random.Random(0))
    # Each move flips the blank's checkerboard colour.
    assert board != GOAL
    assert sum(divmod(board.blank, 3)) % 2 == 1


def test_generate_rejects_empty_scramble() -> None:
    with pytest.raises(ValueError):
        GameGenerator.generate(0)
