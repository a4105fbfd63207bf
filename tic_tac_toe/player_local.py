from collections.abc import Callable
from queue import Empty, Full, Queue

from tic_tac_toe.board import Board, Move
from tic_tac_toe.board_utils import Mark
from tic_tac_toe.exception import InvalidArgumentError, LogicError
from tic_tac_toe.player import Player


class LocalPlayer(Player):
    """Human player typing ``row col`` on a line.

    Asks again until the input names an empty, in-bounds cell. This only improves the
    experience; the board still validates the move on its own.
    """

    def __init__(self, mark: Mark, read_input: Callable[[str], str] = input) -> None:
        super().__init__(mark)
        self._read_input = read_input
        self._input_error_cbs: list[Callable[[Exception], None]] = []

    def add_input_error_cb(self, callback: Callable[[Exception], None]) -> None:
        self._input_error_cbs.append(callback)

    def _next_move(self, board: Board) -> Move:
        max_index = board.size - 1
        while True:
            input_str = self._read_input(f"Player {self._mark}, enter your move as 'row col' (0-{max_index}): ")
            try:
                row, col = self._parse_position(input_str, board)
            except InvalidArgumentError as e:
                self._notify_input_error(e)
                continue
            return Move(row, col, self._mark)

    @staticmethod
    def _parse_position(input_str: str, board: Board) -> tuple[int, int]:
        tokens = input_str.split()
        if len(tokens) != 2:  # noqa: PLR2004
            raise InvalidArgumentError("Please enter two integers.")
        try:
            row, col = int(tokens[0]), int(tokens[1])
        except ValueError as e:
            msg = f"Invalid input '{input_str.strip()}'. Please enter two integers."
            raise InvalidArgumentError(msg) from e

        max_index = board.size - 1
        if not (0 <= row <= max_index) or not (0 <= col <= max_index):
            msg = f"Out of bounds: ({row},{col}). Valid range is 0..{max_index}."
            raise InvalidArgumentError(msg)

        if board.get_cell(row, col) is not Mark.EMPTY:
            msg = f"Cell ({row},{col}) is occupied. Choose another."
            raise InvalidArgumentError(msg)

        return row, col

    def _notify_input_error(self, exception: Exception) -> None:
        for callback in list(self._input_error_cbs):
            callback(exception)


class QueuedPlayer(Player):
    """Human player fed by an event loop (e.g. mouse clicks).

    The loop queues a position, then lets the engine ask for the move.
    """

    def __init__(self, mark: Mark) -> None:
        super().__init__(mark)
        self._move_queue: Queue[tuple[int, int]] = Queue(maxsize=1)

    @property
    def has_pending_move(self) -> bool:
        return not self._move_queue.empty()

    def queue_move(self, row: int, col: int) -> None:
        """Queue a move to be picked up by the next call to `next_move`."""
        try:
            self._move_queue.put_nowait((row, col))
        except Full as e:
            raise LogicError("Pending move queue is full.") from e

    def clear(self) -> None:
        try:
            self._move_queue.get_nowait()
        except Empty:
            return

    def _next_move(self, board: Board) -> Move:  # noqa: ARG002
        try:
            row, col = self._move_queue.get_nowait()
        except Empty as e:
            msg = f"No pending move for player {self._mark}."
            raise LogicError(msg) from e
        return Move(row, col, self._mark)
