from typing import Final

import pygame

from tic_tac_toe.board import BOARD_SIZE, EMPTY, MARKER_A, Cell
from tic_tac_toe.match import Match
from tic_tac_toe.ui import Ui


class PygameUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Pygame)"
    BOARD_PIXELS: Final = 480
    STATUS_BAR_HEIGHT: Final = 64
    CELL_SIZE: Final = BOARD_PIXELS // BOARD_SIZE
    LINE_WIDTH: Final = 4

    BG_COLOR: Final = (0, 0, 0)
    LINE_COLOR: Final = (127, 127, 127)
    X_COLOR: Final = (191, 63, 63)
    O_COLOR: Final = (63, 63, 191)
    TEXT_COLOR: Final = (255, 255, 255)

    def __init__(self, match: Match, player1_name: str = "", player2_name: str = "") -> None:
        super().__init__(match, player1_name, player2_name)
        self._board = self._match.get_board()
        self._status = ""

    def run(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode((self.BOARD_PIXELS, self.BOARD_PIXELS + self.STATUS_BAR_HEIGHT))
        pygame.display.set_caption(self.TITLE)

        self._font = pygame.font.SysFont(None, 96)
        self._status_font = pygame.font.SysFont(None, 36)
        self._hint_font = pygame.font.SysFont(None, 20)

        super().run()
        self._start_match(self._player1_name, self._player2_name)
        self._main_loop()

    def _main_loop(self) -> None:
        clock = pygame.time.Clock()
        while self._running:
            clock.tick(30)
            self._handle_events()
            self._render()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            match event.type:
                case pygame.QUIT:
                    self._stop()
                case pygame.KEYDOWN if event.key == pygame.K_r:
                    self._start_match(self._player1_name, self._player2_name)
                case pygame.MOUSEBUTTONDOWN:
                    self._on_click(event.pos)

    def _on_click(self, pos: tuple[int, int]) -> None:
        x, y = pos
        col = x // self.CELL_SIZE
        row = y // self.CELL_SIZE
        if not (0 <= row < BOARD_SIZE) or not (0 <= col < BOARD_SIZE):
            return
        self._select_cell(row * BOARD_SIZE + col)

    def _render_board(self, board: tuple[Cell, ...]) -> None:
        self._board = board

    def _show_status(self, message: str) -> None:
        self._status = message
        pygame.display.set_caption(f"{self.TITLE} - {message}")

    # -----------------------------
    # Drawing
    # -----------------------------

    def _render(self) -> None:
        self._screen.fill(self.BG_COLOR)
        self._draw_grid()
        self._draw_marks()
        self._draw_status()
        pygame.display.flip()

    def _draw_grid(self) -> None:
        for i in range(1, BOARD_SIZE + 1):
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (0, i * self.CELL_SIZE),
                (self.BOARD_PIXELS, i * self.CELL_SIZE),
                self.LINE_WIDTH,
            )
        for i in range(1, BOARD_SIZE):
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (i * self.CELL_SIZE, 0),
                (i * self.CELL_SIZE, self.BOARD_PIXELS),
                self.LINE_WIDTH,
            )

    def _draw_marks(self) -> None:
        for index, value in enumerate(self._board):
            if value == EMPTY:
                continue
            row, col = divmod(index, BOARD_SIZE)
            text = self._font.render(value, True, self.X_COLOR if value == MARKER_A else self.O_COLOR)  # noqa: FBT003
            rect = text.get_rect(
                center=(col * self.CELL_SIZE + self.CELL_SIZE // 2, row * self.CELL_SIZE + self.CELL_SIZE // 2),
            )
            self._screen.blit(text, rect)

    def _draw_status(self) -> None:
        center_x = self.BOARD_PIXELS // 2
        status_text = self._status_font.render(self._status, True, self.TEXT_COLOR)  # noqa: FBT003
        hint_text = self._hint_font.render("Press R to restart", True, self.LINE_COLOR)  # noqa: FBT003
        status_rect = status_text.get_rect(center=(center_x, self.BOARD_PIXELS + self.STATUS_BAR_HEIGHT // 2 - 8))
        hint_rect = hint_text.get_rect(center=(center_x, self.BOARD_PIXELS + self.STATUS_BAR_HEIGHT - 12))
        self._screen.blit(status_text, status_rect)
        self._screen.blit(hint_text, hint_rect)
