"""
Search engines for the 8-puzzle.

Importing this package registers the built-in engines (``astar``,
``greedy``, ``dfs``) with the factory.

Usage:
    from backend.engine.gamesolver import create_engine
    from backend.models import Board

    engine = create_engine("astar", Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8]))
    engine.solve()
    print(engine.solution_depth, engine.optimal_path)
"""

from backend.engine.gamesolver.base import SearchEngine
from backend.engine.gamesolver.factory import (
    UnknownAlgorithmError,
    create_engine,
    get_default_engine_name,
    get_engine_info,
    get_engine_names,
    register_engine,
)
from backend.engine.gamesolver.heuristic import manhattan_distance
from backend.engine.gamesolver.node import Node, path_from_root

# Import engines to register them
from backend.engine.gamesolver.astar import AStarEngine
from backend.engine.gamesolver.greedy import GreedyEngine
from backend.engine.gamesolver.dfs import DepthFirstEngine
from backend.engine.gamesolver.solver import Solver

__all__ = [
    "AStarEngine",
    "DepthFirstEngine",
    "GreedyEngine",
    "Node",
    "SearchEngine",
    "Solver",
    "UnknownAlgorithmError",
    "create_engine",
    "get_default_engine_name",
    "get_engine_info",
    "get_engine_names",
    "manhattan_distance",
    "path_from_root",
    "register_engine",
]
