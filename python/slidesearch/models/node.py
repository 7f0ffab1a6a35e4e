"""Search tree nodes shared by the shuffler and the solver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from slidesearch.models.state import BoardState, Direction


class Step(NamedTuple):
    """A state reached by applying *move* to the previous state."""

    state: BoardState
    move: Direction


@dataclass(frozen=True, eq=False)
class SearchNode:
    """A board state plus the route that produced it.

    ``depth`` is ``parent.depth + 1`` for every child and 0 for a root;
    ``move`` is ``None`` only on a root.
    """

    state: BoardState
    parent: SearchNode | None = None
    depth: int = 0
    move: Direction | None = None

    def child(self, state: BoardState) -> SearchNode:
        """Wrap a neighbor of this node's state."""
        move = Direction.between(self.state.blank_position(), state.blank_position())
        return SearchNode(state=state, parent=self, depth=self.depth + 1, move=move)

    def path(self) -> list[Step]:
        """Return the root-to-here steps, root excluded."""
        steps: list[Step] = []
        node: SearchNode | None = self
        while node is not None and node.move is not None:
            steps.append(Step(node.state, node.move))
            node = node.parent
        steps.reverse()
        return steps
