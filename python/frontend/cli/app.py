"""Rich terminal frontend: interactive play plus one-shot shuffle/solve views."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.prompt import IntPrompt
from rich.text import Text

from frontend.cli.render import render_board, render_distance, render_moves
from slidesearch.engine.shuffler import Shuffler, permutation_shuffle
from slidesearch.engine.solver import Solver
from slidesearch.errors import NoSolutionFound
from slidesearch.models.board import Board
from slidesearch.models.state import BoardState, Direction

console = Console()


@dataclass
class SearchSettings:
    rows: int = 3
    cols: int = 3
    min_misplaced: int = 4
    min_final_states: int = 3
    max_depth: int | None = None
    seed: int | None = None
    permutation: bool = False


# -- helpers ------------------------------------------------------------------


def _scramble(board: Board, settings: SearchSettings) -> list[Direction]:
    """Assign a scrambled state to *board*; return the moves that undo it."""
    if settings.permutation:
        board.set_state(permutation_shuffle(board.goal_state(), seed=settings.seed))
        return []
    result = Shuffler(
        board.goal_state(),
        settings.min_misplaced,
        settings.min_final_states,
        max_depth=settings.max_depth,
        seed=settings.seed,
    ).shuffle()
    board.set_state(result.state)
    return result.solution()


def _solve(board: Board, settings: SearchSettings) -> list[Direction]:
    steps = Solver(board.current_state(), board.goal_state(), settings.max_depth).solve()
    return [step.move for step in steps]


def _apply_hint(board: Board, settings: SearchSettings) -> str:
    """Apply a single solver hint.  Returns a status message."""
    try:
        hint = Solver(board.current_state(), board.goal_state(), settings.max_depth).hint()
    except NoSolutionFound:
        return "[yellow]No hint available within the depth bound.[/yellow]"
    if hint is None:
        return "[green]Already solved![/green]"
    board.move(hint)
    return f"[cyan]Hint:[/cyan] moved [bold]{hint.value}[/bold]"


def _draw(board: Board, title: str, *lines: Text) -> None:
    panel = Panel(
        Align.center(render_board(board.current_state(), board.goal_state())),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Group(render_distance(board.distance()), *lines))


# -- one-shot commands --------------------------------------------------------


def show_shuffle(settings: SearchSettings) -> BoardState:
    board = Board(
        BoardState.ordered(settings.rows, settings.cols),
        BoardState.ordered(settings.rows, settings.cols),
    )
    undo = _scramble(board, settings)
    lines = [] if settings.permutation else [render_moves("Shuffler", undo)]
    _draw(board, f"Shuffled  {settings.rows}×{settings.cols}", *lines)
    return board.current_state()


def show_solve(tiles: Sequence[int], settings: SearchSettings) -> list[Direction]:
    board = Board(
        BoardState.from_flat(settings.rows, settings.cols, list(tiles)),
        BoardState.ordered(settings.rows, settings.cols),
    )
    moves = _solve(board, settings)
    _draw(board, f"Solve  {settings.rows}×{settings.cols}", render_moves("Solver", moves))
    return moves


# -- interactive play ---------------------------------------------------------


def play(settings: SearchSettings) -> None:
    """Scramble a board and let the player pick tiles until it is solved."""
    goal = BoardState.ordered(settings.rows, settings.cols)
    board = Board(goal, goal)

    console.print("[dim]Shuffling board...[/dim]")
    undo = _scramble(board, settings)
    console.print("[dim]Solving board...[/dim]")
    solution = _solve(board, settings)

    hints = [render_moves("Solver", solution)]
    if not settings.permutation:
        hints.insert(0, render_moves("Shuffler", undo))

    while not board.reached_goal():
        _draw(board, "Current State", *hints)

        moves = board.moves()
        console.print("\n  [bold]Possible moves:[/bold]")
        blank_row, blank_col = board.current_state().blank_position()
        for i, (direction, state) in enumerate(moves, 1):
            # The tile that slides lands where the blank was.
            tile = state.tile_at(blank_row, blank_col)
            console.print(f"  [cyan]{i}[/cyan]: Swap with tile {tile} ({direction.value})")

        choice = IntPrompt.ask(
            "  Enter the number of the tile to move (0 for a hint)", console=console
        )
        if choice == 0:
            console.print(f"  {_apply_hint(board, settings)}")
            continue
        if not 1 <= choice <= len(moves):
            console.print("  [red]Invalid move. Please try again.[/red]")
            continue
        board.set_state(moves[choice - 1][1])

    _draw(board, "Solved")
    console.print("\n  [bold green]Congratulations! You reached the goal state.[/bold green]")
