from slidesearch.engine.shuffler import (
    ShuffleResult,
    Shuffler,
    is_solvable,
    permutation_shuffle,
    shuffle,
)
from slidesearch.engine.solver import Solver, solve

__all__ = [
    "ShuffleResult",
    "Shuffler",
    "Solver",
    "is_solvable",
    "permutation_shuffle",
    "shuffle",
    "solve",
]
