"""Minimax search with alpha-beta pruning.

Scores are always computed from the point of view of ``perspective``:

- a win scores ``WIN_SCORE - depth`` (faster wins score higher),
- a loss scores ``depth - WIN_SCORE`` (slower losses score higher),
- a draw scores ``0``.

The search works on immutable grid snapshots, so every branch gets its own copy and there
is nothing to undo when backtracking.
"""

import logging
import math
import random
from typing import Final

from tic_tac_toe.board_utils import Grid, Mark, get_available_positions, get_winner, is_board_full, with_mark
from tic_tac_toe.exception import LogicError

logger = logging.getLogger(__name__)

WIN_SCORE: Final = 10


def minimax(grid: Grid, turn: Mark, depth: int, alpha: float, beta: float, perspective: Mark) -> int:
    """Score ``grid`` with ``turn`` to move, ``depth`` plies below the root."""
    winner = get_winner(grid)
    if winner is not None:
        return WIN_SCORE - depth if winner is perspective else depth - WIN_SCORE
    if is_board_full(grid):
        return 0

    is_maximizing = turn is perspective
    best_score = -math.inf if is_maximizing else math.inf

    for row, col in get_available_positions(grid):
        score = minimax(with_mark(grid, row, col, turn), turn.opponent, depth + 1, alpha, beta, perspective)
        if is_maximizing:
            best_score = max(best_score, score)
            alpha = max(alpha, best_score)
        else:
            best_score = min(best_score, score)
            beta = min(beta, best_score)
        if beta <= alpha:
            break  # Prune

    return int(best_score)


def score_moves(grid: Grid, perspective: Mark) -> dict[tuple[int, int], int]:
    """Exact minimax score of every empty cell, if ``perspective`` plays there next.

    Each root move gets a full alpha-beta window. Sharing bounds between root siblings would
    turn some scores into bounds and make ties look like they aren't.
    """
    return {
        (row, col): minimax(
            with_mark(grid, row, col, perspective),
            perspective.opponent,
            1,
            -math.inf,
            math.inf,
            perspective,
        )
        for row, col in get_available_positions(grid)
    }


def find_best_moves(grid: Grid, perspective: Mark) -> tuple[int, list[tuple[int, int]]]:
    """Return the best score and every position achieving it, in row-major order."""
    scores = score_moves(grid, perspective)
    if not scores:
        raise LogicError("No empty cells remain.")

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Score matrix for %s (### = occupied):\n%s", perspective, format_score_matrix(grid, scores))

    best_score = max(scores.values())
    return best_score, [position for position, score in scores.items() if score == best_score]


def choose_move(grid: Grid, perspective: Mark, rng: random.Random) -> tuple[int, int]:
    """Pick an optimal position for ``perspective``, breaking ties uniformly at random."""
    best_score, best_moves = find_best_moves(grid, perspective)
    position = rng.choice(best_moves)
    logger.debug("%s picks %s with score %d among %d best moves", perspective, position, best_score, len(best_moves))
    return position


def format_score_matrix(grid: Grid, scores: dict[tuple[int, int], int]) -> str:
    size = len(grid)
    rows = []
    for r in range(size):
        cells = []
        for c in range(size):
            if grid[r][c] is not Mark.EMPTY:
                cells.append(" ### ")
            else:
                cells.append(f" {scores.get((r, c), 0):>3} ")
        rows.append("|".join(cells))
    separator = "\n" + "+".join(["-----"] * size) + "\n"
    return separator.join(rows)
