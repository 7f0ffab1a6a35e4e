"""State-space search over sliding tile puzzles."""

from slidesearch.engine import (
    ShuffleResult,
    Shuffler,
    Solver,
    is_solvable,
    permutation_shuffle,
    shuffle,
    solve,
)
from slidesearch.errors import (
    InvalidStateError,
    NoScrambleFound,
    NoSolutionFound,
    PuzzleError,
)
from slidesearch.models import (
    Board,
    BoardState,
    Direction,
    Distance,
    SearchNode,
    Step,
    create_board,
)

__all__ = [
    "Board",
    "BoardState",
    "Direction",
    "Distance",
    "InvalidStateError",
    "NoScrambleFound",
    "NoSolutionFound",
    "PuzzleError",
    "SearchNode",
    "ShuffleResult",
    "Shuffler",
    "Solver",
    "Step",
    "create_board",
    "is_solvable",
    "permutation_shuffle",
    "shuffle",
    "solve",
]
