"""Scrambles a goal state by exploring the move graph away from it."""

from __future__ import annotations

import heapq
import itertools
import logging
import random
import time
from dataclasses import dataclass

from slidesearch.errors import NoScrambleFound
from slidesearch.models.board import Board
from slidesearch.models.node import SearchNode, Step
from slidesearch.models.state import BoardState, Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShuffleResult:
    """A scrambled state and the moves that led to it from the goal."""

    state: BoardState
    path: list[Step]

    def solution(self) -> list[Direction]:
        """Moves that undo the scramble, leading back to the goal."""
        return [step.move.opposite for step in reversed(self.path)]


class Shuffler:
    """Best-first walk outward from the goal, preferring distant states.

    Every popped state with at least *min_misplaced* tiles out of place
    becomes a candidate and is not expanded further.  Once
    *min_final_states* candidates exist one of them is picked at random.
    """

    def __init__(
        self,
        goal: BoardState,
        min_misplaced: int,
        min_final_states: int = 1,
        *,
        max_depth: int | None = None,
        seed: int | None = None,
    ) -> None:
        if min_misplaced < 1:
            raise ValueError(f"min_misplaced must be at least 1, got {min_misplaced}.")
        self.goal = goal
        self.min_misplaced = min_misplaced
        self.min_final_states = max(1, min_final_states)
        self.max_depth = max_depth
        self.seed = seed if seed is not None else time.time_ns()
        self.random = random.Random(self.seed)

    def shuffle(self) -> ShuffleResult:
        root = SearchNode(self.goal)
        counter = itertools.count()
        frontier: list[tuple[float, int, SearchNode]] = [(0.0, next(counter), root)]
        visited = {self.goal.key}
        candidates: list[SearchNode] = []

        while frontier:
            _, _, node = heapq.heappop(frontier)

            if node.state.distance_from(self.goal).misplaced >= self.min_misplaced:
                candidates.append(node)
                if len(candidates) >= self.min_final_states:
                    break
                continue

            if self.max_depth is not None and node.depth >= self.max_depth:
                continue

            neighbors = node.state.neighbors()
            self.random.shuffle(neighbors)
            for state in neighbors:
                if state.key in visited:
                    continue
                visited.add(state.key)
                priority = -state.distance_from(self.goal).total_average
                heapq.heappush(frontier, (priority, next(counter), node.child(state)))

        logger.debug(
            "Shuffle explored %d states, %d candidate(s)", len(visited), len(candidates)
        )
        if not candidates:
            raise NoScrambleFound(
                f"No state with {self.min_misplaced} misplaced tiles is reachable "
                f"(max depth {self.max_depth})."
            )

        chosen = self.random.choice(candidates)
        logger.info(
            "Scrambled to depth %d from %d candidate(s)", chosen.depth, len(candidates)
        )
        return ShuffleResult(state=chosen.state, path=chosen.path())


def shuffle(
    board: Board,
    min_misplaced: int,
    min_final_states: int = 1,
    *,
    max_depth: int | None = None,
    seed: int | None = None,
) -> BoardState:
    """Return a scrambled state for *board*'s goal, ready for ``set_state``."""
    shuffler = Shuffler(
        board.goal_state(),
        min_misplaced,
        min_final_states,
        max_depth=max_depth,
        seed=seed,
    )
    return shuffler.shuffle().state
