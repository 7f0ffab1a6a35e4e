from slidesearch.models.board import Board, create_board
from slidesearch.models.node import SearchNode, Step
from slidesearch.models.state import BoardState, Direction, Distance

__all__ = [
    "Board",
    "BoardState",
    "Direction",
    "Distance",
    "SearchNode",
    "Step",
    "create_board",
]
