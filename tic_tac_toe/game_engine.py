import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from tic_tac_toe.board import Board, Move
from tic_tac_toe.board_utils import Mark
from tic_tac_toe.exception import InvalidArgumentError, InvalidMoveError
from tic_tac_toe.player import Player

logger = logging.getLogger(__name__)


class GameState(Enum):
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()


@dataclass(frozen=True, slots=True)
class GameStatus:
    state: GameState
    winner: Mark | None = None

    @property
    def is_over(self) -> bool:
        return self.state is not GameState.IN_PROGRESS


class GameEngine:
    """Drives two players against a shared board until someone wins or the board fills up.

    Everything runs synchronously on the caller's thread. A player proposing an occupied or
    out-of-bounds cell is asked again, without passing the turn. Any other error propagates.
    """

    def __init__(self, board: Board, first: Player, second: Player) -> None:
        if board is None or first is None or second is None:
            raise InvalidArgumentError("Board and players cannot be None.")
        if Mark.EMPTY in (first.mark, second.mark):
            raise InvalidArgumentError("Player marks must be X or O.")
        if first.mark is second.mark:
            raise InvalidArgumentError("Players must have different marks.")

        self._board = board
        self._first = first
        self._second = second
        self._current = first
        self._board_updated_cbs: list[Callable[[Move], None]] = []
        self._on_error_cbs: list[Callable[[Exception], None]] = []

    @property
    def board(self) -> Board:
        return self._board

    @property
    def first_player(self) -> Player:
        return self._first

    @property
    def second_player(self) -> Player:
        return self._second

    @property
    def current_player(self) -> Player:
        return self._current

    @property
    def status(self) -> GameStatus:
        winner = self._board.get_winner()
        if winner is not None:
            return GameStatus(GameState.WON, winner)
        if self._board.is_full():
            return GameStatus(GameState.DRAW)
        return GameStatus(GameState.IN_PROGRESS)

    def add_board_updated_cb(self, callback: Callable[[Move], None]) -> None:
        self._board_updated_cbs.append(callback)

    def add_on_error_cb(self, callback: Callable[[Exception], None]) -> None:
        self._on_error_cbs.append(callback)

    def run(self) -> Mark | None:
        """Play until the game is over. Return the winning mark, or None on a draw."""
        while True:
            status = self.tick()
            if status.is_over:
                logger.info("Game over: %s", f"{status.winner} wins" if status.winner else "draw")
                return status.winner

    def tick(self) -> GameStatus:
        """Process one move request.

        Nobody is asked for a move if the board is already in a terminal state. The turn
        only passes to the other player after a successful, non-terminal placement.
        """
        status = self.status
        if status.is_over:
            return status

        move = self._current.next_move(self._board)
        try:
            self._board.place(move)
        except InvalidMoveError as e:
            logger.debug("Rejected %s from %r: %s", move, self._current, e)
            self._notify_on_error(e)
            return status

        logger.debug("Applied %s", move)
        self._notify_board_updated(move)

        status = self.status
        if not status.is_over:
            self._current = self._second if self._current is self._first else self._first
        return status

    def reset(self) -> None:
        """Clear the board for a new round. The first player starts again."""
        self._board.reset()
        self._current = self._first

    def _notify_board_updated(self, move: Move) -> None:
        for callback in list(self._board_updated_cbs):
            callback(move)

    def _notify_on_error(self, exception: Exception) -> None:
        for callback in list(self._on_error_cbs):
            callback(exception)
