from enum import StrEnum
from typing import TypeAlias

from tic_tac_toe.exception import InvalidArgumentError


class Mark(StrEnum):
    X = "X"
    O = "O"
    EMPTY = " "

    @property
    def opponent(self) -> "Mark":
        if self is Mark.EMPTY:
            raise InvalidArgumentError("EMPTY is not a player mark.")
        return Mark.O if self is Mark.X else Mark.X


Grid: TypeAlias = tuple[tuple[Mark, ...], ...]


def empty_grid(size: int) -> Grid:  # noqa: D103
    return tuple((Mark.EMPTY,) * size for _ in range(size))


def with_mark(grid: Grid, row: int, col: int, mark: Mark) -> Grid:
    """Return a copy of the grid with a single cell changed."""
    changed = list(grid[row])
    changed[col] = mark
    return (*grid[:row], tuple(changed), *grid[row + 1 :])


def is_board_full(grid: Grid) -> bool:  # noqa: D103
    return all(all(cell is not Mark.EMPTY for cell in row) for row in grid)


def get_available_positions(grid: Grid) -> list[tuple[int, int]]:  # noqa: D103
    return [(r, c) for r in range(len(grid)) for c in range(len(grid[0])) if grid[r][c] is Mark.EMPTY]


def get_winner(grid: Grid) -> Mark | None:
    """Return the mark owning a complete line, or None.

    Lines are scanned rows first, then columns, then the main diagonal and finally the anti-diagonal.
    """
    lines: list[tuple[Mark, ...]] = []

    lines.extend(grid)  # Horizontal lines
    lines.extend(zip(*grid, strict=True))  # Vertical lines
    lines.append(tuple(grid[i][i] for i in range(len(grid))))  # First diagonal
    lines.append(tuple(grid[i][len(grid) - 1 - i] for i in range(len(grid))))  # Second diagonal

    for line in lines:
        if line[0] is not Mark.EMPTY and all(cell is line[0] for cell in line[1:]):
            return line[0]
    return None


def is_draw(grid: Grid) -> bool:  # noqa: D103
    return is_board_full(grid) and get_winner(grid) is None
