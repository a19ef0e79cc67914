"""Rich terminal frontend — boards, statistics, and step-through search.

Uses the ``rich`` library for styled output. It only consumes the public
engine API: ``solve``, ``advance_one_step``, the statistics accessors
and ``frontier_states``.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay.moves import directions_for_path
from backend.engine.gamesolver import SearchEngine, manhattan_distance
from backend.models.board import SIZE, Board

console = Console()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, title: str | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        title=title,
        title_style="dim",
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(SIZE):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def render_stats(engine: SearchEngine) -> Table:
    """Return a two-column table of the engine's run statistics."""
    table = Table(
        show_header=False,
        box=rich.box.ROUNDED,
        border_style="dim",
    )
    table.add_column("Stat", style="dim")
    table.add_column("Value", justify="right", style="yellow")

    table.add_row("Status", str(engine.status))
    table.add_row("Solution depth", str(engine.solution_depth))
    table.add_row("Expanded (open) nodes", str(engine.open_nodes))
    table.add_row("Generated nodes", str(engine.generated_nodes))
    table.add_row("Max frontier size", str(engine.max_frontier_size))
    table.add_row("Max depth", str(engine.max_depth))
    table.add_row("Execution time", f"{engine.execution_time_ms:.1f} ms")
    return table


def _render_frontier(engine: SearchEngine, limit: int = 5) -> Group:
    """Preview of the next boards the engine will examine."""
    states = engine.frontier_states()
    row = Table.grid(padding=(0, 2))
    boards = [render_board(b, title=f"h={manhattan_distance(b)}") for b in states[:limit]]
    if boards:
        row.add_row(*boards)
    caption = Text(f"  Frontier: {len(states)} boards", style="dim")
    return Group(caption, row)


# -- screens ------------------------------------------------------------------


def _draw_step(engine: SearchEngine, board: Board | None, step: int) -> None:
    console.clear()

    body = Group(
        Align.center(render_board(board) if board is not None else Text("-")),
        Text(""),
        Align.center(render_stats(engine)),
        Text(""),
        _render_frontier(engine),
    )
    panel = Panel(
        body,
        title=f"[bold cyan]{engine.name}  step {step}[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


def show_result(engine: SearchEngine) -> None:
    """Print the final statistics and, when solved, the move sequence."""
    if engine.is_solved:
        moves = directions_for_path(engine.optimal_path)
        summary = Text()
        summary.append(f"  Solved in {len(moves)} moves", style="bold green")
        if moves:
            summary.append(": " + " ".join(m.value for m in moves), style="dim")
        border = "bold green"
    else:
        summary = Text("  No solution found.", style="bold red")
        border = "red"

    panel = Panel(
        Group(
            Align.center(render_board(engine.initial, title="initial")),
            Text(""),
            Align.center(render_stats(engine)),
            Text(""),
            summary,
        ),
        title=f"[bold]{engine.name}[/bold]",
        border_style=border,
        padding=(1, 2),
    )
    console.print(panel)


# -- public entry points ------------------------------------------------------


def run(engine: SearchEngine) -> bool:
    """Solve to completion and show the result. Returns True if solved."""
    with console.status(f"[cyan]Searching with {engine.name}…[/cyan]"):
        engine.solve()
    show_result(engine)
    return engine.is_solved


def run_steps(engine: SearchEngine, delay: float = 0.2, max_steps: int | None = None) -> bool:
    """Animate the search one ``advance_one_step`` at a time.

    Stops early (leaving the engine resumable) after *max_steps* steps.
    Returns True if the goal was reached.
    """
    step = 0
    while not engine.is_finished:
        if max_steps is not None and step >= max_steps:
            console.print(
                Align.center(Text(f"\n  Stopped after {step} steps.\n", style="yellow"))
            )
            return False
        board = engine.advance_one_step()
        step += 1
        _draw_step(engine, board, step)
        if delay:
            time.sleep(delay)

    show_result(engine)
    return engine.is_solved
