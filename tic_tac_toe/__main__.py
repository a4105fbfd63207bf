# ruff: noqa: T201

import logging
from collections.abc import Callable, Sequence

from tic_tac_toe.config import GameConfig, UiType, parse_args
from tic_tac_toe.factories import create_game

WELCOME_ART = r"""
 __          __  _
 \ \        / / | |
  \ \  /\  / /__| | ___ ___  _ __ ___   ___
   \ \/  \/ / _ \ |/ __/ _ \| '_ ` _ \ / _ \
    \  /\  /  __/ | (_| (_) | | | | | |  __/
     \/  \/ \___|_|\___\___/|_| |_| |_|\___|

                WELCOME TO TIC-TAC-TOE
"""


def main(argv: Sequence[str] | None = None) -> None:
    config = parse_args(argv)

    logging.basicConfig(level=config.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    ui_type = config.ui if config.ui is not None else _prompt_ui_choice()
    _run(config, ui_type)


def _prompt_ui_choice(read_input: Callable[[str], str] = input) -> UiType:
    print(WELCOME_ART)
    print("Select application mode:")
    print("  0: GUI")
    print("  1: CLI (console-based Tic-Tac-Toe)")

    while True:
        match read_input("Enter 0 or 1: ").strip():
            case "0":
                print("\nLaunching GUI mode...\n")
                return "pygame"
            case "1":
                print("\nLaunching CLI mode...\n")
                return "terminal"
            case _:
                continue


def _run(config: GameConfig, ui_type: UiType) -> None:
    _game_engine, ui = create_game(config, ui_type)
    ui.run()


if __name__ == "__main__":
    main()
