"""Board handle pairing the current state with the goal it is solved towards."""

from __future__ import annotations

from collections.abc import Sequence

from slidesearch.models.state import BoardState, Direction, Distance


class Board:
    """Mutable holder of a current state; the states themselves never change."""

    def __init__(self, initial: BoardState, goal: BoardState) -> None:
        _check_compatible(initial, goal)
        self._state = initial
        self._goal = goal

    # -- queries --------------------------------------------------------------

    def current_state(self) -> BoardState:
        return self._state

    def goal_state(self) -> BoardState:
        return self._goal

    def neighbor_states(self) -> list[BoardState]:
        return self._state.neighbors()

    def moves(self) -> list[tuple[Direction, BoardState]]:
        return list(self._state.moves())

    def distance(self) -> Distance:
        return self._state.distance_from(self._goal)

    def reached_goal(self) -> bool:
        return self._state.equals(self._goal)

    # -- updates --------------------------------------------------------------

    def set_state(self, state: BoardState) -> None:
        _check_compatible(state, self._goal)
        self._state = state

    def move(self, direction: Direction) -> bool:
        """Slide the blank in *direction*.  Returns True if the move was legal."""
        try:
            self._state = self._state.move(direction)
        except ValueError:
            return False
        return True


def _check_compatible(state: BoardState, goal: BoardState) -> None:
    if (state.rows, state.cols) != (goal.rows, goal.cols):
        raise ValueError(
            f"Board is {state.rows}×{state.cols} but the goal is "
            f"{goal.rows}×{goal.cols}."
        )
    if sorted(state.key) != sorted(goal.key):
        raise ValueError("Board and goal do not hold the same tiles.")


def create_board(
    initial: Sequence[Sequence[int]], goal: Sequence[Sequence[int]]
) -> Board:
    """Build a :class:`Board` from two grid literals."""
    return Board(BoardState.from_grid(initial), BoardState.from_grid(goal))
