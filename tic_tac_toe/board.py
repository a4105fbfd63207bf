from dataclasses import dataclass
from typing import Final

from tic_tac_toe.board_utils import Grid, Mark, get_available_positions, get_winner, is_board_full, is_draw
from tic_tac_toe.exception import InvalidArgumentError, InvalidMoveError

DEFAULT_BOARD_SIZE: Final = 3
MIN_BOARD_SIZE: Final = 3


@dataclass(frozen=True, slots=True)
class Move:
    """A placement of a player's mark.

    Only non-negativity and the mark are checked here. Bounds and occupancy depend on a
    specific board and are validated by `Board.place`.
    """

    row: int
    col: int
    mark: Mark

    def __post_init__(self) -> None:
        if self.row < 0 or self.col < 0:
            raise InvalidArgumentError("Row and column must be non-negative.")
        if not isinstance(self.mark, Mark) or self.mark is Mark.EMPTY:
            raise InvalidArgumentError("Move mark must be X or O.")


class Board:
    """Square grid of marks.

    The board doesn't know whose turn it is. Placing the right mark at the right time is
    up to the caller (normally `GameEngine`).
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE) -> None:
        if size < MIN_BOARD_SIZE:
            msg = f"Board size must be >= {MIN_BOARD_SIZE}, got {size}."
            raise InvalidArgumentError(msg)
        self._size = size
        self._board: list[list[Mark]] = [[Mark.EMPTY] * size for _ in range(size)]

    @property
    def size(self) -> int:
        return self._size

    def snapshot(self) -> Grid:
        """Immutable copy of the current cells."""
        return tuple(tuple(row) for row in self._board)

    def get_cell(self, row: int, col: int) -> Mark:
        if not self._in_bounds(row, col):
            msg = f"Cell ({row}, {col}) out of bounds."
            raise InvalidArgumentError(msg)
        return self._board[row][col]

    def place(self, move: Move | None) -> None:
        if move is None:
            raise InvalidArgumentError("Move cannot be None.")

        if not self._in_bounds(move.row, move.col):
            raise InvalidMoveError("Move out of bounds.")

        if self._board[move.row][move.col] is not Mark.EMPTY:
            raise InvalidMoveError("Cell occupied.")

        self._board[move.row][move.col] = move.mark

    def reset(self) -> None:
        for row in self._board:
            row[:] = [Mark.EMPTY] * self._size

    def get_available_positions(self) -> list[tuple[int, int]]:
        return get_available_positions(self.snapshot())

    def is_full(self) -> bool:
        return is_board_full(self.snapshot())

    def get_winner(self) -> Mark | None:
        return get_winner(self.snapshot())

    def is_draw(self) -> bool:
        return is_draw(self.snapshot())

    def is_game_over(self) -> bool:
        return self.get_winner() is not None or self.is_full()

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._size and 0 <= col < self._size
