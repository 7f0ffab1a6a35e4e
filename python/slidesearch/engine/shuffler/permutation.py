"""Permutation scrambler and the inversion-parity solvability test.

The scrambler does not walk the move graph, so it yields no move path; it
only guarantees the returned state can reach the goal.
"""

from __future__ import annotations

import logging
import random
import time

from slidesearch.models.state import BLANK, BoardState

logger = logging.getLogger(__name__)


def _inversions(tiles: list[int]) -> int:
    count = 0
    for i in range(len(tiles)):
        for j in range(i + 1, len(tiles)):
            if tiles[i] > tiles[j]:
                count += 1
    return count


def _parity(state: BoardState) -> int:
    """Quantity preserved modulo 2 by every legal move.

    A horizontal move leaves the inversion count alone.  A vertical move
    jumps one tile over ``cols - 1`` others, which flips the inversion
    parity only when the width is even; the blank's row flips with it.
    """
    tiles = [v for v in state.key if v != BLANK]
    inv = _inversions(tiles)
    if state.cols % 2 == 1:
        return inv % 2
    blank_row_from_bottom = state.rows - state.blank_position()[0]
    return (inv + blank_row_from_bottom) % 2


def is_solvable(state: BoardState, goal: BoardState) -> bool:
    """Return True if *state* can reach *goal* through legal moves."""
    if (state.rows, state.cols) != (goal.rows, goal.cols):
        return False
    if state.rows == 1 or state.cols == 1:
        # The blank can only slide along the line; tile order is fixed.
        return [v for v in state.key if v != BLANK] == [
            v for v in goal.key if v != BLANK
        ]
    return _parity(state) == _parity(goal)


def permutation_shuffle(
    goal: BoardState, *, seed: int | None = None, rng: random.Random | None = None
) -> BoardState:
    """Return a random solvable arrangement of *goal*'s tiles.

    Never returns *goal* itself unless it is the only arrangement.
    """
    if rng is None:
        rng = random.Random(seed if seed is not None else time.time_ns())

    rows, cols = goal.rows, goal.cols
    if rows * cols < 2:
        return goal

    if rows == 1 or cols == 1:
        return _slide_blank(goal, rng)

    while True:
        flat = list(goal.key)
        rng.shuffle(flat)
        state = BoardState.from_flat(rows, cols, flat)
        if not is_solvable(state, goal):
            first, second = [i for i, v in enumerate(flat) if v != BLANK][:2]
            flat[first], flat[second] = flat[second], flat[first]
            state = BoardState.from_flat(rows, cols, flat)
            logger.debug("Swapped cells %d and %d to fix parity", first, second)
        if state != goal:
            return state


def _slide_blank(goal: BoardState, rng: random.Random) -> BoardState:
    """Single-line boards: keep tile order, drop the blank somewhere else."""
    tiles = [v for v in goal.key if v != BLANK]
    current = goal.key.index(BLANK)
    index = rng.choice([i for i in range(len(tiles) + 1) if i != current])
    tiles.insert(index, BLANK)
    return BoardState.from_flat(goal.rows, goal.cols, tiles)
