import random
from abc import ABC, abstractmethod

from tic_tac_toe.board import Board, Move
from tic_tac_toe.board_utils import Grid, Mark, get_available_positions
from tic_tac_toe.exception import LogicError
from tic_tac_toe.minimax import choose_move
from tic_tac_toe.player import Player


class AiPlayer(Player, ABC):
    def __init__(self, mark: Mark, rng: random.Random | None = None) -> None:
        super().__init__(mark)
        self._rng = rng if rng is not None else random.Random()  # noqa: S311

    def _next_move(self, board: Board) -> Move:
        move = self._find_move(board.snapshot())
        if move is None:
            msg = f"No moves available for player {self._mark}, but game not over."
            raise LogicError(msg)
        row, col = move
        return Move(row, col, self._mark)

    @abstractmethod
    def _find_move(self, grid: Grid) -> tuple[int, int] | None:
        pass


class RandomAiPlayer(AiPlayer):
    def _find_move(self, grid: Grid) -> tuple[int, int] | None:
        available_positions = get_available_positions(grid)
        if not available_positions:
            return None
        return self._rng.choice(available_positions)


class MinimaxAiPlayer(AiPlayer):
    """Plays perfectly; picks randomly among equally good moves."""

    def _find_move(self, grid: Grid) -> tuple[int, int] | None:
        if not get_available_positions(grid):
            return None
        return choose_move(grid, self._mark, self._rng)
