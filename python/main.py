#!/usr/bin/env python3
"""Sliding puzzle search engine.

Usage::

    python main.py play                       # shuffle, solve, then play
    python main.py shuffle -r 4 -c 4 -m 8     # print a scrambled 4×4 board
    python main.py solve 1 0 2 3 4 5 6 7 8    # solve a 3×3 board
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.logging import RichHandler
from rich.markup import escape

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from frontend.cli import app as cli  # noqa: E402
from slidesearch.errors import NoScrambleFound, NoSolutionFound, PuzzleError  # noqa: E402

DEFAULT_SIZE = 3
DEFAULT_MIN_MISPLACED = 4
DEFAULT_MIN_FINAL_STATES = 3


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbose, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=cli.console, show_path=False)],
        force=True,
    )


def _fail(exc: PuzzleError) -> None:
    cli.console.print(f"[red]{escape(str(exc))}[/red]")
    if isinstance(exc, NoSolutionFound):
        cli.console.print("[dim]Retry with a larger --max-depth.[/dim]")
    elif isinstance(exc, NoScrambleFound):
        cli.console.print("[dim]Retry with a smaller --min-misplaced.[/dim]")
    raise typer.Exit(code=1)


# -- shared options -----------------------------------------------------------

RowsOption = typer.Option(
    DEFAULT_SIZE, "-r", "--rows", min=1, envvar="SLIDESEARCH_ROWS", help="Grid rows."
)
ColsOption = typer.Option(
    DEFAULT_SIZE, "-c", "--cols", min=1, envvar="SLIDESEARCH_COLS", help="Grid columns."
)
MinMisplacedOption = typer.Option(
    DEFAULT_MIN_MISPLACED, "-m", "--min-misplaced", min=1,
    envvar="SLIDESEARCH_MIN_MISPLACED",
    help="Tiles that must be out of place in a scrambled board.",
)
MinFinalStatesOption = typer.Option(
    DEFAULT_MIN_FINAL_STATES, "--min-final-states", min=1,
    envvar="SLIDESEARCH_MIN_FINAL_STATES",
    help="Candidates collected before one is picked at random.",
)
MaxDepthOption = typer.Option(
    None, "-d", "--max-depth", min=0, envvar="SLIDESEARCH_MAX_DEPTH",
    help="Search depth bound. Omit for an unbounded search.",
)
SeedOption = typer.Option(
    None, "--seed", envvar="SLIDESEARCH_SEED",
    help="Random seed. Defaults to the current time.",
)
PermutationOption = typer.Option(
    False, "--permutation",
    help="Scramble with a random solvable permutation instead of a graph walk.",
)
VerboseOption = typer.Option(
    0, "-v", "--verbose", count=True, help="Repeat for more log output."
)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Sliding puzzle shuffler and solver.")


@app.command()
def play(
    rows: int = RowsOption,
    cols: int = ColsOption,
    min_misplaced: int = MinMisplacedOption,
    min_final_states: int = MinFinalStatesOption,
    max_depth: Optional[int] = MaxDepthOption,
    seed: Optional[int] = SeedOption,
    permutation: bool = PermutationOption,
    verbose: int = VerboseOption,
) -> None:
    """Shuffle a board, show a solution, then play it interactively."""
    _configure_logging(verbose)
    settings = cli.SearchSettings(
        rows, cols, min_misplaced, min_final_states, max_depth, seed, permutation
    )
    try:
        cli.play(settings)
    except PuzzleError as exc:
        _fail(exc)


@app.command()
def shuffle(
    rows: int = RowsOption,
    cols: int = ColsOption,
    min_misplaced: int = MinMisplacedOption,
    min_final_states: int = MinFinalStatesOption,
    max_depth: Optional[int] = MaxDepthOption,
    seed: Optional[int] = SeedOption,
    permutation: bool = PermutationOption,
    verbose: int = VerboseOption,
) -> None:
    """Print a scrambled board and the moves that undo it."""
    _configure_logging(verbose)
    settings = cli.SearchSettings(
        rows, cols, min_misplaced, min_final_states, max_depth, seed, permutation
    )
    try:
        cli.show_shuffle(settings)
    except PuzzleError as exc:
        _fail(exc)


@app.command()
def solve(
    tiles: List[int] = typer.Argument(..., help="Tiles in row-major order, 0 is blank."),
    rows: int = RowsOption,
    cols: int = ColsOption,
    max_depth: Optional[int] = MaxDepthOption,
    verbose: int = VerboseOption,
) -> None:
    """Solve a board given as a row-major tile list."""
    _configure_logging(verbose)
    settings = cli.SearchSettings(rows=rows, cols=cols, max_depth=max_depth)
    try:
        cli.show_solve(tiles, settings)
    except PuzzleError as exc:
        _fail(exc)


if __name__ == "__main__":
    app()
