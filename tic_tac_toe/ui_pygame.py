from typing import Final

import pygame

from tic_tac_toe.board import Move
from tic_tac_toe.board_utils import Mark
from tic_tac_toe.game_engine import GameEngine
from tic_tac_toe.player_local import QueuedPlayer
from tic_tac_toe.ui import Scoreboard, Ui


class PygameUi(Ui):
    """Clickable board with a session scoreboard.

    The model is driven from the pygame loop itself: one `GameEngine.tick()` per frame at most,
    and only once the current player has something to play. Human players must be `QueuedPlayer`s.
    """

    TITLE: Final = "Tic-Tac-Toe (Pygame)"
    WINDOW_SIZE: Final = 480
    STATUS_HEIGHT: Final = 64
    LINE_WIDTH: Final = 4
    FPS: Final = 30

    BG_COLOR: Final = (0, 0, 0)
    LINE_COLOR: Final = (127, 127, 127)
    X_COLOR: Final = (191, 63, 63)
    O_COLOR: Final = (63, 63, 191)
    TEXT_COLOR: Final = (255, 255, 255)

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._cell_size = self.WINDOW_SIZE // self._game_engine.board.size
        self._scoreboard = Scoreboard()
        self._status_text = ""
        self._end_message = ""

    def run(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode((self.WINDOW_SIZE, self.WINDOW_SIZE + self.STATUS_HEIGHT))
        pygame.display.set_caption(self.TITLE)

        self._font = pygame.font.SysFont(None, max(32, self._cell_size))
        self._small_font = pygame.font.SysFont(None, 48)
        self._status_font = pygame.font.SysFont(None, 24)

        super().run()
        self._update_status_text()
        self._main_loop()

    def _main_loop(self) -> None:
        clock = pygame.time.Clock()
        while self._running:
            clock.tick(self.FPS)
            self._handle_events()
            self._advance_game()
            self._render()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            match event.type:
                case pygame.QUIT:
                    self._stop()
                case pygame.KEYDOWN if event.key == pygame.K_r:
                    self._new_round()
                case pygame.MOUSEBUTTONDOWN:
                    if self._end_message:
                        self._new_round()
                    else:
                        self._on_click(event.pos)

    def _advance_game(self) -> None:
        if self._game_engine.status.is_over:
            return
        player = self._game_engine.current_player
        if isinstance(player, QueuedPlayer) and not player.has_pending_move:
            return
        self._game_engine.tick()
        self._update_status_text()

    def _on_click(self, pos: tuple[int, int]) -> None:
        player = self._game_engine.current_player
        if not isinstance(player, QueuedPlayer) or player.has_pending_move:
            return

        x, y = pos
        col = x // self._cell_size
        row = y // self._cell_size
        board = self._game_engine.board
        if not (0 <= row < board.size) or not (0 <= col < board.size):
            return
        if board.get_cell(row, col) is not Mark.EMPTY:
            return  # Ignore clicks on occupied cells
        player.queue_move(row, col)

    def _new_round(self) -> None:
        for player in (self._game_engine.first_player, self._game_engine.second_player):
            if isinstance(player, QueuedPlayer):
                player.clear()
        self._game_engine.reset()
        self._end_message = ""
        self._update_status_text()

    def _update_status_text(self) -> None:
        if self._end_message:
            self._status_text = self._end_message
            return
        player = self._game_engine.current_player
        if isinstance(player, QueuedPlayer):
            self._status_text = f"Your turn ({player.mark}). Click a square."
        else:
            self._status_text = f"Player {player.mark} is thinking..."

    def _render(self) -> None:
        self._screen.fill(self.BG_COLOR)
        self._draw_grid()
        self._draw_marks()
        self._draw_status_bar()
        self._draw_end_message()
        pygame.display.flip()

    def _render_board(self, move: Move | None) -> None:  # noqa: ARG002
        self._update_status_text()

    def _show_end_message(self, message: str) -> None:
        self._end_message = message
        self._scoreboard.record(self._game_engine.status)
        self._update_status_text()

    def _on_input_error(self, _exception: Exception) -> None:
        pass

    def _draw_grid(self) -> None:
        for i in range(1, self._game_engine.board.size):
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (0, i * self._cell_size),
                (self.WINDOW_SIZE, i * self._cell_size),
                self.LINE_WIDTH,
            )
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (i * self._cell_size, 0),
                (i * self._cell_size, self.WINDOW_SIZE),
                self.LINE_WIDTH,
            )

    def _draw_marks(self) -> None:
        board = self._game_engine.board
        for row in range(board.size):
            for col in range(board.size):
                value = board.get_cell(row, col)
                if value is Mark.EMPTY:
                    continue
                text = self._font.render(value, True, self.X_COLOR if value is Mark.X else self.O_COLOR)  # noqa: FBT003
                rect = text.get_rect(
                    center=(col * self._cell_size + self._cell_size // 2, row * self._cell_size + self._cell_size // 2),
                )
                self._screen.blit(text, rect)

    def _draw_status_bar(self) -> None:
        top = self.WINDOW_SIZE + self.LINE_WIDTH
        pygame.draw.line(self._screen, self.LINE_COLOR, (0, top), (self.WINDOW_SIZE, top), self.LINE_WIDTH)
        status_text = self._status_font.render(self._status_text, True, self.TEXT_COLOR)  # noqa: FBT003
        score_text = self._status_font.render(str(self._scoreboard), True, self.TEXT_COLOR)  # noqa: FBT003
        middle = self.WINDOW_SIZE + self.STATUS_HEIGHT // 2
        self._screen.blit(status_text, status_text.get_rect(midleft=(10, middle)))
        self._screen.blit(score_text, score_text.get_rect(midright=(self.WINDOW_SIZE - 10, middle)))

    def _draw_end_message(self) -> None:
        if not self._end_message:
            return
        main_text = self._small_font.render(self._end_message, True, self.TEXT_COLOR)  # noqa: FBT003
        click_text = self._status_font.render("Click or press R for a new round", True, self.TEXT_COLOR)  # noqa: FBT003
        main_rect = main_text.get_rect(center=(self.WINDOW_SIZE // 2, self.WINDOW_SIZE // 2 - 20))
        click_rect = click_text.get_rect(center=(self.WINDOW_SIZE // 2, self.WINDOW_SIZE // 2 + 20))
        self._screen.blit(main_text, main_rect)
        self._screen.blit(click_text, click_rect)
