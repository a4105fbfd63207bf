"""Factory functions for creating game components from a `GameConfig`."""

import logging
import random

from tic_tac_toe.board import DEFAULT_BOARD_SIZE, Board
from tic_tac_toe.board_utils import Mark
from tic_tac_toe.config import GameConfig, PlayerType, UiType
from tic_tac_toe.game_engine import GameEngine
from tic_tac_toe.player import Player
from tic_tac_toe.player_ai import MinimaxAiPlayer, RandomAiPlayer
from tic_tac_toe.player_local import LocalPlayer, QueuedPlayer
from tic_tac_toe.ui import Ui

logger = logging.getLogger(__name__)


# ============================================================================
# Player Factories
# ============================================================================


def create_player(
    player_type: PlayerType,
    mark: Mark,
    ui_type: UiType,
    rng: random.Random,
    size: int = DEFAULT_BOARD_SIZE,
) -> Player:
    match player_type:
        case "human":
            # The GUI feeds human moves from clicks, the terminal reads them from stdin.
            return QueuedPlayer(mark) if ui_type == "pygame" else LocalPlayer(mark)
        case "easy-ai":
            return RandomAiPlayer(mark, rng)
        case "hard-ai":
            if size > DEFAULT_BOARD_SIZE:
                logger.warning(
                    "Minimax player %s on a %dx%d board: exhaustive search may take very long.",
                    mark,
                    size,
                    size,
                )
            return MinimaxAiPlayer(mark, rng)
        case _:
            msg = f"Unknown player type: {player_type}. Choose from 'human', 'easy-ai', 'hard-ai'."
            raise ValueError(msg)


def create_players(config: GameConfig, ui_type: UiType) -> tuple[Player, Player]:
    """Return the players in turn order: first to move, then second."""
    rng = random.Random(config.seed)  # noqa: S311
    player_x = create_player(config.player_x, Mark.X, ui_type, rng, config.size)
    player_o = create_player(config.player_o, Mark.O, ui_type, rng, config.size)
    return (player_x, player_o) if config.first is Mark.X else (player_o, player_x)


# ============================================================================
# UI Factories
# ============================================================================


def create_ui(ui_type: UiType, game_engine: GameEngine) -> Ui:
    # pygame is only imported when the GUI is selected.
    match ui_type:
        case "terminal":
            from tic_tac_toe.ui_terminal import TerminalUi  # noqa: PLC0415

            terminal_ui = TerminalUi(game_engine)
            for player in (game_engine.first_player, game_engine.second_player):
                if isinstance(player, LocalPlayer):
                    player.add_input_error_cb(terminal_ui.on_local_input_error)
            return terminal_ui
        case "pygame":
            from tic_tac_toe.ui_pygame import PygameUi  # noqa: PLC0415

            return PygameUi(game_engine)
        case _:
            msg = f"Unknown UI type: {ui_type}. Choose from 'terminal', 'pygame'."
            raise ValueError(msg)


# ============================================================================
# Complete Game Setup
# ============================================================================


def create_game(config: GameConfig, ui_type: UiType) -> tuple[GameEngine, Ui]:
    first, second = create_players(config, ui_type)
    game_engine = GameEngine(Board(config.size), first, second)
    return game_engine, create_ui(ui_type, game_engine)
