"""
Engine Factory Module - Registry and factory for search engine instantiation.
"""

from __future__ import annotations

from typing import Any

from backend.engine.gamesolver.base import SearchEngine
from backend.models.board import Board


class UnknownAlgorithmError(ValueError):
    """Raised when an engine name is not registered."""


# Global registry of engines
_ENGINES: dict[str, type[SearchEngine]] = {}


def register_engine(cls: type[SearchEngine]) -> type[SearchEngine]:
    """
    Decorator to register an engine class under its ``name``.

    Usage:
        @register_engine
        class MyEngine(SearchEngine):
            name = "my_engine"
            ...
    """
    _ENGINES[cls.name] = cls
    return cls


def create_engine(name: str, initial: Board, **kwargs: Any) -> SearchEngine:
    """
    Create an engine instance by name.

    Args:
        name: Engine name (e.g., "astar", "greedy", "dfs")
        initial: Board to search from
        **kwargs: Additional arguments passed to the engine constructor

    Raises:
        UnknownAlgorithmError: If the name is not registered
    """
    if name not in _ENGINES:
        available = ", ".join(_ENGINES)
        raise UnknownAlgorithmError(f"Unknown algorithm: {name}. Available: {available}")
    return _ENGINES[name](initial, **kwargs)


def get_engine_names() -> list[str]:
    return list(_ENGINES)


def get_engine_info() -> list[dict[str, str]]:
    """Name and description of every registered engine."""
    return [{"name": cls.name, "description": cls.description} for cls in _ENGINES.values()]


def get_default_engine_name() -> str:
    """Return "astar" if available, else the first registered engine."""
    if "astar" in _ENGINES:
        return "astar"
    return next(iter(_ENGINES), "")
