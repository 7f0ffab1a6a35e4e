"""Immutable board configurations and the heuristic used to rank them."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import StrEnum
from functools import cached_property

from slidesearch.errors import InvalidStateError

BLANK = 0

Position = tuple[int, int]
Grid = tuple[tuple[int, ...], ...]


class Direction(StrEnum):
    """Direction the *blank* travels during a move."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Position:
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def between(cls, start: Position, end: Position) -> Direction:
        """Return the move that carries the blank from *start* to *end*."""
        delta = (end[0] - start[0], end[1] - start[1])
        for direction, d in _DELTAS.items():
            if d == delta:
                return direction
        raise ValueError(f"{start} and {end} are not orthogonally adjacent.")


_DELTAS: dict[Direction, Position] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Distance:
    """How far one state is from another.

    ``misplaced`` counts cells (blank included) whose value differs from the
    target, ``average`` is the summed Manhattan displacement of those values
    divided by the cell count, and ``total_average`` is the mean of the two.
    """

    misplaced: int
    average: float

    @property
    def total_average(self) -> float:
        return (self.misplaced + self.average) / 2


@dataclass(frozen=True)
class BoardState:
    """An R×C grid of distinct tiles with exactly one blank (``0``).

    States are value objects: every transition returns a new instance, and
    equality and hashing compare the tiles only.
    """

    tiles: Grid

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> BoardState:
        """Build a validated state from a 2D literal.

        Example::

            BoardState.from_grid([[0, 1, 2], [3, 4, 5], [6, 7, 8]])
        """
        tiles = tuple(tuple(int(v) for v in row) for row in grid)
        if not tiles or not tiles[0]:
            raise InvalidStateError("A board needs at least one row and column.")
        cols = len(tiles[0])
        if any(len(row) != cols for row in tiles):
            raise InvalidStateError("Every row must have the same length.")

        values = sorted(v for row in tiles for v in row)
        if values != list(range(len(tiles) * cols)):
            raise InvalidStateError(
                f"Tiles must be a permutation of 0..{len(tiles) * cols - 1}, "
                f"got {values}."
            )
        return cls(tiles)

    @classmethod
    def from_flat(cls, rows: int, cols: int, flat: Sequence[int]) -> BoardState:
        """Create a state from a flat row-major tile list."""
        if len(flat) != rows * cols:
            raise InvalidStateError(
                f"Expected {rows * cols} tiles for a {rows}×{cols} board, "
                f"got {len(flat)}."
            )
        return cls.from_grid([flat[r * cols : (r + 1) * cols] for r in range(rows)])

    @classmethod
    def ordered(cls, rows: int, cols: int) -> BoardState:
        """Return the conventional goal: blank first, then 1.. row-major."""
        return cls.from_flat(rows, cols, list(range(rows * cols)))

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> int:
        return len(self.tiles)

    @property
    def cols(self) -> int:
        return len(self.tiles[0])

    @property
    def key(self) -> tuple[int, ...]:
        """Flattened tiles, usable as a visited-set key."""
        return tuple(v for row in self.tiles for v in row)

    @cached_property
    def positions(self) -> dict[int, Position]:
        """Map every tile value to its (row, col)."""
        return {
            v: (r, c) for r, row in enumerate(self.tiles) for c, v in enumerate(row)
        }

    def tile_at(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def grid(self) -> list[list[int]]:
        return [list(row) for row in self.tiles]

    def blank_position(self) -> Position:
        try:
            return self.positions[BLANK]
        except KeyError:
            raise InvalidStateError("Board has no blank tile.") from None

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def equals(self, other: BoardState) -> bool:
        return self.tiles == other.tiles

    def distance_from(self, goal: BoardState) -> Distance:
        """Compare against *goal*, which must hold the same tiles and shape."""
        if (self.rows, self.cols) != (goal.rows, goal.cols):
            raise ValueError(
                f"Cannot compare a {self.rows}×{self.cols} board with a "
                f"{goal.rows}×{goal.cols} one."
            )
        targets = goal.positions
        misplaced = 0
        total = 0
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                gr, gc = targets[v]
                if (r, c) != (gr, gc):
                    misplaced += 1
                    total += abs(r - gr) + abs(c - gc)
        return Distance(misplaced=misplaced, average=total / (self.rows * self.cols))

    # -- transitions ----------------------------------------------------------

    def move(self, direction: Direction) -> BoardState:
        """Return the state after sliding the blank in *direction*."""
        br, bc = self.blank_position()
        dr, dc = direction.delta
        tr, tc = br + dr, bc + dc
        if not self.in_bounds(tr, tc):
            raise ValueError(f"Cannot move the blank {direction.value} from {(br, bc)}.")
        return self._swap((br, bc), (tr, tc))

    def moves(self) -> Iterator[tuple[Direction, BoardState]]:
        """Yield every legal move with the state it produces."""
        br, bc = self.blank_position()
        for direction in Direction:
            dr, dc = direction.delta
            tr, tc = br + dr, bc + dc
            if self.in_bounds(tr, tc):
                yield direction, self._swap((br, bc), (tr, tc))

    def neighbors(self) -> list[BoardState]:
        return [state for _, state in self.moves()]

    # -- helpers --------------------------------------------------------------

    def _swap(self, blank: Position, target: Position) -> BoardState:
        grid = self.grid()
        (br, bc), (tr, tc) = blank, target
        grid[br][bc], grid[tr][tc] = grid[tr][tc], grid[br][bc]
        return BoardState(tuple(tuple(row) for row in grid))

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v) for v in row) for row in self.tiles)
