import logging
import random
from collections.abc import Callable

import pytest

from tic_tac_toe.__main__ import _prompt_ui_choice
from tic_tac_toe.board import Board, Move
from tic_tac_toe.board_utils import Mark
from tic_tac_toe.config import GameConfig, parse_args
from tic_tac_toe.factories import create_game, create_player, create_players
from tic_tac_toe.game_engine import GameEngine
from tic_tac_toe.player_ai import MinimaxAiPlayer, RandomAiPlayer
from tic_tac_toe.player_local import LocalPlayer, QueuedPlayer
from tic_tac_toe.ui_terminal import TerminalUi, render_board


def scripted_input(lines: list[str]) -> Callable[[str], str]:
    remaining = iter(lines)

    def read(_prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read


class TestConfig:
    def test_defaults(self) -> None:
        assert parse_args([]) == GameConfig()

    def test_all_options(self) -> None:
        config = parse_args(
            [
                "--ui", "terminal",
                "--player-x", "easy-ai",
                "--player-o", "human",
                "--first", "O",
                "--size", "4",
                "--seed", "7",
                "--log-level", "DEBUG",
            ],
        )  # fmt: skip
        assert config == GameConfig(
            ui="terminal",
            player_x="easy-ai",
            player_o="human",
            first=Mark.O,
            size=4,
            seed=7,
            log_level=logging.DEBUG,
        )

    @pytest.mark.parametrize("argv", [["--size", "2"], ["--size", "x"], ["--player-x", "robot"], ["--first", "Z"]])
    def test_rejects_invalid_options(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit):
            parse_args(argv)


class TestFactories:
    def test_create_player_types(self) -> None:
        rng = random.Random(0)
        assert isinstance(create_player("human", Mark.X, "terminal", rng), LocalPlayer)
        assert isinstance(create_player("human", Mark.X, "pygame", rng), QueuedPlayer)
        assert isinstance(create_player("easy-ai", Mark.O, "terminal", rng), RandomAiPlayer)
        assert isinstance(create_player("hard-ai", Mark.O, "terminal", rng), MinimaxAiPlayer)
        with pytest.raises(ValueError, match="Unknown player type"):
            create_player("robot", Mark.O, "terminal", rng)  # type: ignore[arg-type]

    def test_minimax_on_bigger_board_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="tic_tac_toe.factories"):
            create_players(GameConfig(player_x="easy-ai", player_o="hard-ai", size=4), "terminal")
        assert "Minimax player O on a 4x4 board" in caplog.text

    def test_minimax_on_standard_board_does_not_warn(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="tic_tac_toe.factories"):
            create_players(GameConfig(player_x="hard-ai", player_o="hard-ai"), "terminal")
            create_players(GameConfig(player_x="easy-ai", player_o="easy-ai", size=5), "terminal")
        assert caplog.records == []

    def test_turn_order_follows_first_mark(self) -> None:
        first, second = create_players(GameConfig(first=Mark.O), "terminal")
        assert (first.mark, second.mark) == (Mark.O, Mark.X)
        assert isinstance(first, MinimaxAiPlayer)
        assert isinstance(second, LocalPlayer)

    def test_create_terminal_game(self) -> None:
        game_engine, ui = create_game(GameConfig(size=5, player_x="easy-ai"), "terminal")
        assert isinstance(ui, TerminalUi)
        assert game_engine.board.size == 5
        assert game_engine.first_player.mark is Mark.X

    def test_create_pygame_game(self) -> None:
        pytest.importorskip("pygame")
        from tic_tac_toe.ui_pygame import PygameUi

        game_engine, ui = create_game(GameConfig(), "pygame")
        assert isinstance(ui, PygameUi)
        assert isinstance(game_engine.first_player, QueuedPlayer)


class TestPromptUiChoice:
    def test_reprompts_until_valid(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _prompt_ui_choice(scripted_input(["x", "2", " 1 "])) == "terminal"
        assert "WELCOME TO TIC-TAC-TOE" in capsys.readouterr().out

    def test_gui(self) -> None:
        assert _prompt_ui_choice(scripted_input(["0"])) == "pygame"


class TestTerminalUi:
    def test_render_board(self) -> None:
        board = Board()
        board.place(Move(0, 0, Mark.X))
        board.place(Move(1, 1, Mark.O))
        assert render_board(board) == " X |   |   \n---+---+---\n   | O |   \n---+---+---\n   |   |   "

    def test_full_game(self, capsys: pytest.CaptureFixture[str]) -> None:
        player_x = LocalPlayer(Mark.X, scripted_input(["0 0", "o ops", "0 1", "0 2"]))
        player_o = LocalPlayer(Mark.O, scripted_input(["1 1", "0 0", "2 2"]))
        game_engine = GameEngine(Board(), player_x, player_o)
        ui = TerminalUi(game_engine)
        player_x.add_input_error_cb(ui.on_local_input_error)
        player_o.add_input_error_cb(ui.on_local_input_error)

        ui.run()

        out = capsys.readouterr().out
        assert "Player X placed at (0,0)" in out
        assert "Invalid input 'o ops'" in out
        assert "Cell (0,0) is occupied" in out
        assert "=== Final Result ===\nWinner: X" in out
        assert ui.end_message == "Winner: X"
        assert not ui.running

    def test_end_of_input_aborts(self, capsys: pytest.CaptureFixture[str]) -> None:
        player_x = LocalPlayer(Mark.X, scripted_input(["1 1"]))
        player_o = LocalPlayer(Mark.O, scripted_input([]))
        ui = TerminalUi(GameEngine(Board(), player_x, player_o))

        ui.run()

        assert "Game aborted" in capsys.readouterr().out
        assert ui.end_message is None


class TestPygameUiModel:
    """Game flow of the GUI without opening a window."""

    @pytest.fixture
    def ui(self):  # noqa: ANN201
        pytest.importorskip("pygame")
        from tic_tac_toe.ui_pygame import PygameUi

        _game_engine, ui = create_game(GameConfig(player_o="easy-ai", seed=1), "pygame")
        assert isinstance(ui, PygameUi)
        ui._running = True
        return ui

    def test_click_then_ai_reply(self, ui) -> None:  # noqa: ANN001
        board = ui._game_engine.board
        ui._on_click((ui._cell_size // 2, ui._cell_size // 2))
        ui._advance_game()
        assert board.get_cell(0, 0) is Mark.X
        ui._advance_game()
        assert sum(1 for r in range(3) for c in range(3) if board.get_cell(r, c) is Mark.O) == 1
        assert ui._game_engine.current_player.mark is Mark.X

    def test_click_on_occupied_cell_is_ignored(self, ui) -> None:  # noqa: ANN001
        ui._on_click((5, 5))
        ui._advance_game()
        ui._advance_game()
        assert ui._game_engine.current_player.mark is Mark.X
        ui._on_click((5, 5))
        assert not ui._game_engine.first_player.has_pending_move

    def test_rounds_are_scored(self, ui) -> None:  # noqa: ANN001
        while not ui._game_engine.status.is_over:
            if ui._game_engine.current_player.mark is Mark.X:
                row, col = ui._game_engine.board.get_available_positions()[0]
                ui._on_click((col * ui._cell_size + 1, row * ui._cell_size + 1))
            ui._advance_game()
        assert ui._end_message
        assert str(ui._scoreboard).count("1") == 1

        ui._new_round()
        assert ui._end_message == ""
        assert ui._game_engine.board.get_available_positions() == [(r, c) for r in range(3) for c in range(3)]
        assert "Your turn (X)" in ui._status_text
