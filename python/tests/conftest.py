"""Shared boards for the test suite."""

from __future__ import annotations

import pytest

from slidesearch.models.state import BoardState, Direction

GOAL_GRID = [[0, 1, 2], [3, 4, 5], [6, 7, 8]]


def walk(start: BoardState, moves: list[Direction]) -> BoardState:
    """Apply *moves* to *start* one by one."""
    state = start
    for direction in moves:
        state = state.move(direction)
    return state


@pytest.fixture
def goal() -> BoardState:
    return BoardState.from_grid(GOAL_GRID)
