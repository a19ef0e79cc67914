"""8-puzzle solver façade over the search engines."""

from __future__ import annotations

from backend.engine.gameplay.moves import directions_for_path
from backend.engine.gamesolver.factory import create_engine, get_default_engine_name
from backend.models.board import Board, Direction


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(board: Board, algorithm: str | None = None) -> list[Direction]:
        """Return a move sequence that solves *board*, or ``[]`` if solved / unsolvable."""
        if board.is_solved():
            return []

        if not Solver.is_solvable(board):
            return []

        engine = create_engine(algorithm or get_default_engine_name(), board)
        engine.solve()
        return directions_for_path(engine.optimal_path)

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the first move of a shortest solution, or ``None`` if solved / unsolvable."""
        moves = Solver.solve(board, "astar")
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        On an odd-width board a blank move never changes the parity of
        the number of inversions among the numbered tiles, and the goal
        has none.
        """
        tiles = [v for v in board.tiles if v != 0]
        inversions = sum(
            1
            for i in range(len(tiles))
            for j in range(i + 1, len(tiles))
            if tiles[i] > tiles[j]
        )
        return inversions % 2 == 0
