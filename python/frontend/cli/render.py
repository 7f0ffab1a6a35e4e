"""Rich renderables for boards, distances and move lists."""

from __future__ import annotations

from collections.abc import Sequence

import rich.box
from rich.table import Table
from rich.text import Text

from slidesearch.models.state import BLANK, BoardState, Direction, Distance


def render_board(state: BoardState, goal: BoardState) -> Table:
    """Return a Rich Table of *state*, tiles already home shown in green."""
    width = len(str(state.rows * state.cols - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(state.cols):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(state.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == BLANK:
                cells.append("[dim]·[/dim]")
            elif goal.tile_at(r, c) == val:
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def render_distance(distance: Distance) -> Text:
    text = Text()
    text.append("  Misplaced: ", style="dim")
    text.append(str(distance.misplaced), style="bold yellow")
    text.append("    Average: ", style="dim")
    text.append(f"{distance.average:.3f}", style="bold yellow")
    text.append("    Score: ", style="dim")
    text.append(f"{distance.total_average:.3f}", style="bold yellow")
    return text


def render_moves(label: str, moves: Sequence[Direction]) -> Text:
    text = Text()
    text.append(f"  {label}: ", style="bold cyan")
    if moves:
        text.append(", ".join(m.value for m in moves))
    else:
        text.append("(none)", style="dim")
    return text
