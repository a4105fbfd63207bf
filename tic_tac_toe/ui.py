from abc import ABC, abstractmethod
from dataclasses import dataclass

from tic_tac_toe.board import Move
from tic_tac_toe.board_utils import Mark
from tic_tac_toe.game_engine import GameEngine, GameState, GameStatus


@dataclass
class Scoreboard:
    """Session results. Nothing is persisted."""

    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def record(self, status: GameStatus) -> None:
        match status.state:
            case GameState.WON if status.winner is Mark.X:
                self.x_wins += 1
            case GameState.WON:
                self.o_wins += 1
            case GameState.DRAW:
                self.draws += 1
            case _:
                pass

    def __str__(self) -> str:
        return f"X: {self.x_wins}  O: {self.o_wins}  Draws: {self.draws}"


def end_message(status: GameStatus) -> str:  # noqa: D103
    if status.state is GameState.WON:
        return f"Winner: {status.winner}"
    return "It's a draw"


class Ui(ABC):
    def __init__(self, game_engine: GameEngine) -> None:
        self._game_engine = game_engine
        self._running = False
        self._game_engine.add_board_updated_cb(self.on_board_updated)
        self._game_engine.add_on_error_cb(self.on_error)

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        self._running = True

    def _stop(self) -> None:
        self._running = False

    def on_board_updated(self, move: Move) -> None:
        if not self._running:
            return
        self._render_board(move)
        status = self._game_engine.status
        if status.is_over:
            self._show_end_message(end_message(status))

    def on_error(self, exception: Exception) -> None:
        if not self._running:
            return
        self._on_input_error(exception)

    @abstractmethod
    def _render_board(self, move: Move | None) -> None:
        pass

    @abstractmethod
    def _show_end_message(self, message: str) -> None:
        pass

    @abstractmethod
    def _on_input_error(self, exception: Exception) -> None:
        pass
