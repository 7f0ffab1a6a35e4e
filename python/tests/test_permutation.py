"""Permutation scrambler and inversion-parity solvability check."""

from __future__ import annotations

import pytest

from slidesearch.engine.shuffler import is_solvable, permutation_shuffle
from slidesearch.engine.solver import Solver
from slidesearch.models.state import BoardState, Direction

from conftest import walk


# -- solvability --------------------------------------------------------------


@pytest.mark.parametrize(
    "flat, expected",
    [
        ([0, 1, 2, 3, 4, 5, 6, 7, 8], True),
        ([3, 1, 2, 0, 4, 5, 6, 7, 8], True),
        ([0, 2, 1, 3, 4, 5, 6, 7, 8], False),
        ([8, 1, 2, 3, 4, 5, 6, 7, 0], False),
    ],
    ids=["goal", "one-move", "swapped-pair", "corner-swap"],
)
def test_parity_3x3(goal: BoardState, flat: list[int], expected: bool) -> None:
    assert is_solvable(BoardState.from_flat(3, 3, flat), goal) is expected


def test_parity_even_width_tracks_blank_row() -> None:
    goal = BoardState.ordered(4, 4)
    assert is_solvable(walk(goal, [Direction.DOWN]), goal)
    assert is_solvable(walk(goal, [Direction.DOWN, Direction.RIGHT, Direction.DOWN]), goal)

    flat = list(goal.key)
    flat[1], flat[2] = flat[2], flat[1]
    assert not is_solvable(BoardState.from_flat(4, 4, flat), goal)


def test_parity_with_blank_last_goal() -> None:
    goal = BoardState.from_flat(4, 4, list(range(1, 16)) + [0])
    near = BoardState.from_flat(4, 4, list(range(1, 12)) + [0, 13, 14, 15, 12])
    assert is_solvable(near, goal)
    swapped = BoardState.from_flat(4, 4, [2, 1] + list(range(3, 16)) + [0])
    assert not is_solvable(swapped, goal)


def test_single_line_keeps_tile_order() -> None:
    goal = BoardState.ordered(1, 4)
    assert is_solvable(BoardState.from_flat(1, 4, [1, 2, 0, 3]), goal)
    assert not is_solvable(BoardState.from_flat(1, 4, [2, 1, 0, 3]), goal)


def test_shape_mismatch_is_unsolvable(goal: BoardState) -> None:
    assert not is_solvable(BoardState.ordered(2, 2), goal)


# -- permutation shuffle ------------------------------------------------------


@pytest.mark.parametrize("rows, cols", [(2, 2), (2, 3), (3, 3), (4, 4), (3, 4)])
def test_output_always_solvable(rows: int, cols: int) -> None:
    goal = BoardState.ordered(rows, cols)
    for seed in range(25):
        state = permutation_shuffle(goal, seed=seed)
        assert state != goal
        assert sorted(state.key) == sorted(goal.key)
        assert is_solvable(state, goal)


def test_single_line_output() -> None:
    line = BoardState.ordered(1, 5)
    for seed in range(10):
        state = permutation_shuffle(line, seed=seed)
        assert state != line
        assert [v for v in state.key if v] == [1, 2, 3, 4]


def test_one_cell_board_is_returned_unchanged() -> None:
    single = BoardState.ordered(1, 1)
    assert permutation_shuffle(single, seed=1) == single


def test_seeded_output_is_repeatable(goal: BoardState) -> None:
    assert permutation_shuffle(goal, seed=77) == permutation_shuffle(goal, seed=77)


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_solver_handles_permuted_boards(goal: BoardState, seed: int) -> None:
    start = permutation_shuffle(goal, seed=seed)
    steps = Solver(start, goal).solve()
    assert walk(start, [step.move for step in steps]) == goal
