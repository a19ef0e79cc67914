"""Generates solvable 8-puzzle boards."""

from __future__ import annotations

import random

from backend.engine.gameplay.moves import possible_moves
from backend.models.board import GOAL, Board


class GameGenerator:
    """Creates solvable puzzles by shuffling from the solved state."""

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return GOAL

    @staticmethod
    def scramble(board: Board, moves: int, rng: random.Random | None = None) -> Board:
        """Return *board* after *moves* random legal blank moves.

        The blank never steps straight back to where it just came from,
        so the result is usually (but not always) *moves* away from the
        start.
        """
        rng = rng or random.Random()
        prev_pos: int | None = None

        for _ in range(moves):
            neighbors = possible_moves(board.blank)
            if prev_pos in neighbors and len(neighbors) > 1:
                neighbors.remove(prev_pos)
            target = rng.choice(neighbors)
            prev_pos = board.blank
            board = board.swapped(board.blank, target)

        return board

    @staticmethod
    def generate(moves: int = 30, seed: int | None = None) -> Board:
        """Return a random *solvable* board that is not already solved."""
        if moves < 1:
            raise ValueError("A scramble needs at least one move.")
        rng = random.Random(seed)
        while True:
            board = GameGenerator.scramble(GameGenerator.solved(), moves, rng)
            if not board.is_solved():
                return board
