"""Greedy best-first sliding puzzle solver.

The frontier is ordered by heuristic distance to the goal alone; no path
cost is accumulated, so the returned solution is not necessarily the
shortest one.
"""

from __future__ import annotations

import heapq
import itertools
import logging

from slidesearch.engine.shuffler.permutation import is_solvable
from slidesearch.errors import NoSolutionFound
from slidesearch.models.board import Board
from slidesearch.models.node import SearchNode, Step
from slidesearch.models.state import BoardState, Direction

logger = logging.getLogger(__name__)


class Solver:
    """Finds a move sequence from *start* to *goal*.

    *max_depth* of ``None`` leaves the search unbounded; otherwise nodes
    deeper than it are discarded without expansion.
    """

    def __init__(
        self, start: BoardState, goal: BoardState, max_depth: int | None = None
    ) -> None:
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be None or >= 0, got {max_depth}.")
        self.start = start
        self.goal = goal
        self.max_depth = max_depth

    def solve(self) -> list[Step]:
        """Return the steps leading to the goal, or raise ``NoSolutionFound``."""
        if not is_solvable(self.start, self.goal):
            raise NoSolutionFound("The start state cannot reach the goal.")

        counter = itertools.count()
        root = SearchNode(self.start)
        frontier: list[tuple[float, int, SearchNode]] = [
            (self._score(self.start), next(counter), root)
        ]
        visited: set[tuple[int, ...]] = set()
        expanded = 0

        while frontier:
            _, _, node = heapq.heappop(frontier)
            key = node.state.key
            if key in visited:
                continue

            if self.max_depth is not None and node.depth > self.max_depth:
                visited.add(key)
                continue

            if node.state.equals(self.goal):
                steps = node.path()
                logger.info(
                    "Solved in %d moves after expanding %d states", len(steps), expanded
                )
                return steps

            visited.add(key)
            expanded += 1
            for state in node.state.neighbors():
                if state.key not in visited:
                    heapq.heappush(
                        frontier, (self._score(state), next(counter), node.child(state))
                    )

        logger.debug("Frontier exhausted after expanding %d states", expanded)
        raise NoSolutionFound(
            f"No solution within max depth {self.max_depth}; "
            "try again with a larger bound."
        )

    def hint(self) -> Direction | None:
        """Return the first move of a solution, or ``None`` if already solved."""
        steps = self.solve()
        return steps[0].move if steps else None

    def _score(self, state: BoardState) -> float:
        return state.distance_from(self.goal).total_average


def solve(board: Board, max_depth: int | None = None) -> list[Step]:
    """Solve *board* from its current state to its goal."""
    return Solver(board.current_state(), board.goal_state(), max_depth).solve()
