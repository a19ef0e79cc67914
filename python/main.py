#!/usr/bin/env python3
"""8-Puzzle Search.

Usage::

    python main.py solve -b 1,2,3,4,5,6,7,0,8          # A* (default)
    python main.py solve -a greedy --scramble 20 --seed 7
    python main.py step -b 123456708 --delay 0.5       # animate A*
    python main.py scramble --moves 25 --seed 1        # print a board
    python main.py algorithms                          # list engines
"""

import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gamesolver import (  # noqa: E402
    SearchEngine,
    Solver,
    UnknownAlgorithmError,
    create_engine,
    get_default_engine_name,
    get_engine_info,
)
from backend.models.board import Board, InvalidBoardError  # noqa: E402
from frontend.cli.rich import app as rich_app  # noqa: E402

logger = logging.getLogger(__name__)


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=rich_app.console, show_path=False)],
        force=True,
    )


def _resolve_board(board: Optional[str], scramble: int, seed: Optional[int]) -> Board:
    if board is not None:
        try:
            return Board.parse(board)
        except InvalidBoardError as exc:
            raise typer.BadParameter(str(exc), param_hint="--board") from exc
    return GameGenerator.generate(scramble, seed)


def _build_engine(algorithm: str, initial: Board) -> SearchEngine:
    if not Solver.is_solvable(initial):
        logger.warning("Board %s is unsolvable; the search will exhaust", initial.key)
    try:
        return create_engine(algorithm, initial)
    except UnknownAlgorithmError as exc:
        raise typer.BadParameter(str(exc), param_hint="--algorithm") from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)

_BOARD = typer.Option(
    None, "-b", "--board",
    help='Initial board, e.g. "1,2,3,4,5,6,7,0,8" (0 is the blank).',
)
_ALGORITHM = typer.Option(
    get_default_engine_name(), "-a", "--algorithm",
    envvar="PUZZLE_ALGORITHM",
    help="Search engine: astar, greedy or dfs.",
)
_SCRAMBLE = typer.Option(
    20, "--scramble",
    min=1,
    help="Random moves from the goal when no --board is given.",
)
_SEED = typer.Option(None, "--seed", help="Seed for --scramble.")


@app.callback()
def main(
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        envvar="PUZZLE_LOG_LEVEL",
        case_sensitive=False,
        help="Logging verbosity.",
    ),
) -> None:
    """8-Puzzle search engines: A*, greedy best-first and depth-first."""
    _configure_logging(log_level)


@app.command()
def solve(
    board: Optional[str] = _BOARD,
    algorithm: str = _ALGORITHM,
    scramble: int = _SCRAMBLE,
    seed: Optional[int] = _SEED,
) -> None:
    """Run a search to completion and print its statistics."""
    initial = _resolve_board(board, scramble, seed)
    engine = _build_engine(algorithm, initial)
    if not rich_app.run(engine):
        raise typer.Exit(code=1)


@app.command()
def step(
    board: Optional[str] = _BOARD,
    algorithm: str = _ALGORITHM,
    scramble: int = _SCRAMBLE,
    seed: Optional[int] = _SEED,
    delay: float = typer.Option(0.2, "--delay", min=0.0, help="Seconds between steps."),
    max_steps: Optional[int] = typer.Option(
        None, "--max-steps", min=1, help="Stop after this many steps."
    ),
) -> None:
    """Animate a search one expansion at a time."""
    initial = _resolve_board(board, scramble, seed)
    engine = _build_engine(algorithm, initial)
    if not rich_app.run_steps(engine, delay=delay, max_steps=max_steps):
        raise typer.Exit(code=1)


@app.command("scramble")
def scramble_cmd(
    moves: int = typer.Option(20, "--moves", min=1, help="Random moves from the goal."),
    seed: Optional[int] = _SEED,
) -> None:
    """Print a random solvable board as a comma-separated list."""
    board = GameGenerator.generate(moves, seed)
    typer.echo(",".join(str(v) for v in board.tiles))


@app.command()
def algorithms() -> None:
    """List the available search engines."""
    for info in get_engine_info():
        typer.echo(f"{info['name']:<8} {info['description']}")


if __name__ == "__main__":
    app()
