from slidesearch.engine.shuffler.permutation import is_solvable, permutation_shuffle
from slidesearch.engine.shuffler.shuffler import ShuffleResult, Shuffler, shuffle

__all__ = [
    "ShuffleResult",
    "Shuffler",
    "is_solvable",
    "permutation_shuffle",
    "shuffle",
]
