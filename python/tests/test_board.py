"""Board handle used by the frontends."""

from __future__ import annotations

import pytest

from slidesearch.models.board import Board, create_board
from slidesearch.models.state import BoardState, Direction

from conftest import GOAL_GRID


def test_create_board_tracks_state_and_goal() -> None:
    board = create_board([[1, 0, 2], [3, 4, 5], [6, 7, 8]], GOAL_GRID)
    assert board.current_state().grid() == [[1, 0, 2], [3, 4, 5], [6, 7, 8]]
    assert board.goal_state().grid() == GOAL_GRID
    assert not board.reached_goal()
    assert board.distance().misplaced == 2
    assert len(board.neighbor_states()) == 3


def test_set_state_reaches_goal(goal: BoardState) -> None:
    board = create_board([[1, 0, 2], [3, 4, 5], [6, 7, 8]], GOAL_GRID)
    board.set_state(goal)
    assert board.reached_goal()
    assert board.neighbor_states() == goal.neighbors()


def test_move_reports_legality(goal: BoardState) -> None:
    board = Board(goal, goal)
    assert not board.move(Direction.UP)
    assert board.current_state() == goal
    assert board.move(Direction.RIGHT)
    assert board.current_state().tile_at(0, 1) == 0
    assert [d for d, _ in board.moves()] == [Direction.DOWN, Direction.LEFT, Direction.RIGHT]


def test_shape_mismatch_rejected(goal: BoardState) -> None:
    with pytest.raises(ValueError):
        Board(BoardState.ordered(2, 2), goal)


def test_set_state_rejects_other_shapes(goal: BoardState) -> None:
    board = Board(goal, goal)
    with pytest.raises(ValueError):
        board.set_state(BoardState.ordered(2, 2))
    assert board.current_state() == goal


def test_set_state_rejects_other_tiles(goal: BoardState) -> None:
    board = Board(goal, goal)
    foreign = BoardState(((0, 1, 2), (3, 4, 5), (6, 7, 9)))
    with pytest.raises(ValueError):
        board.set_state(foreign)
    assert board.current_state() == goal
