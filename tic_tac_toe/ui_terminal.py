# ruff: noqa: T201

from tic_tac_toe.board import Board, Move
from tic_tac_toe.game_engine import GameEngine
from tic_tac_toe.ui import Ui, end_message


def render_board(board: Board) -> str:
    """Text rendering through the board's read accessors."""
    rows = []
    for r in range(board.size):
        row = "|".join(f" {board.get_cell(r, c)} " for c in range(board.size))
        rows.append(row)

    separator = "\n" + "+".join(["---"] * board.size) + "\n"
    return separator.join(rows)


class TerminalUi(Ui):
    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self.end_message: str | None = None

    def run(self) -> None:
        super().run()
        print("=== Tic-Tac-Toe ===", flush=True)
        print(self._describe_players() + "\n", flush=True)
        try:
            status = self._game_engine.status
            while not status.is_over:
                print(f"Current board (player {self._game_engine.current_player.mark} to move):", flush=True)
                self._print_board()
                status = self._game_engine.tick()
            if self.end_message is None:
                self._show_end_message(end_message(status))  # Board was already finished
        except (KeyboardInterrupt, EOFError):
            print("\nGame aborted", flush=True)
        finally:
            self._stop()

    def _describe_players(self) -> str:
        first = self._game_engine.first_player
        second = self._game_engine.second_player
        return f"{first.mark}: {type(first).__name__}, {second.mark}: {type(second).__name__}. {first.mark} starts."

    def _print_board(self) -> None:
        print(f"\n{render_board(self._game_engine.board)}\n", flush=True)

    def _render_board(self, move: Move | None) -> None:
        if move is not None:
            print(f"Player {move.mark} placed at ({move.row},{move.col})", flush=True)

    def _show_end_message(self, message: str) -> None:
        self.end_message = message
        self._print_board()
        print("=== Final Result ===", flush=True)
        print(message, flush=True)

    def _on_input_error(self, exception: Exception) -> None:
        print(f"Invalid move: {exception}", flush=True)

    def on_local_input_error(self, exception: Exception) -> None:
        """Report a line a local player couldn't use."""
        print(str(exception), flush=True)
