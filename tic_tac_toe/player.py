from abc import ABC, abstractmethod

from tic_tac_toe.board import Board, Move
from tic_tac_toe.board_utils import Mark
from tic_tac_toe.exception import InvalidArgumentError


class Player(ABC):
    """Produces moves for a fixed mark.

    Implementations are expected to return a move carrying their own mark. The board
    doesn't enforce it.
    """

    def __init__(self, mark: Mark) -> None:
        if not isinstance(mark, Mark) or mark is Mark.EMPTY:
            raise InvalidArgumentError("Player mark must be X or O.")
        self._mark = mark

    @property
    def mark(self) -> Mark:
        return self._mark

    def next_move(self, board: Board | None) -> Move:
        if board is None:
            raise InvalidArgumentError("Board cannot be None.")
        return self._next_move(board)

    @abstractmethod
    def _next_move(self, board: Board) -> Move:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._mark})"
