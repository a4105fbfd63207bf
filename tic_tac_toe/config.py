import argparse
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, Literal, TypeAlias

from tic_tac_toe.board import DEFAULT_BOARD_SIZE, MIN_BOARD_SIZE
from tic_tac_toe.board_utils import Mark

PlayerType: TypeAlias = Literal["human", "easy-ai", "hard-ai"]
UiType: TypeAlias = Literal["terminal", "pygame"]

PLAYER_TYPES: Final = ("human", "easy-ai", "hard-ai")
UI_TYPES: Final = ("terminal", "pygame")
LOG_LEVELS: Final = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True, slots=True)
class GameConfig:
    ui: UiType | None = None
    player_x: PlayerType = "human"
    player_o: PlayerType = "hard-ai"
    first: Mark = Mark.X
    size: int = DEFAULT_BOARD_SIZE
    seed: int | None = None
    log_level: int = logging.WARNING


def _board_size(value: str) -> int:
    size = int(value)
    if size < MIN_BOARD_SIZE:
        msg = f"board size must be >= {MIN_BOARD_SIZE}"
        raise argparse.ArgumentTypeError(msg)
    return size


def build_parser() -> argparse.ArgumentParser:  # noqa: D103
    parser = argparse.ArgumentParser(prog="tic-tac-toe", description="Tic-tac-toe with random and minimax AIs.")

    parser.add_argument("--ui", choices=UI_TYPES, help="front-end; asked interactively when omitted")

    parser.add_argument("--player-x", choices=PLAYER_TYPES, default="human")
    parser.add_argument("--player-o", choices=PLAYER_TYPES, default="hard-ai")
    parser.add_argument("--first", choices=("X", "O"), default="X", help="mark that moves first")

    parser.add_argument("--size", type=_board_size, default=DEFAULT_BOARD_SIZE, help="board dimension (N x N)")
    parser.add_argument("--seed", type=int, help="seed for the AI random source")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING")

    return parser


def parse_args(argv: Sequence[str] | None = None) -> GameConfig:  # noqa: D103
    args = build_parser().parse_args(argv)
    return GameConfig(
        ui=args.ui,
        player_x=args.player_x,
        player_o=args.player_o,
        first=Mark(args.first),
        size=args.size,
        seed=args.seed,
        log_level=logging.getLevelNamesMapping()[args.log_level],
    )
