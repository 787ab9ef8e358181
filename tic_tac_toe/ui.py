from abc import ABC, abstractmethod
from typing import Final

from tic_tac_toe.board import Cell
from tic_tac_toe.match import Match

DEFAULT_PLAYER1_NAME: Final = "Player 1"
DEFAULT_PLAYER2_NAME: Final = "Player 2"


class Ui(ABC):
    def __init__(self, match: Match, player1_name: str = "", player2_name: str = "") -> None:
        self._match = match
        self._player1_name = player1_name
        self._player2_name = player2_name
        self._running = False
        # Cell selections are ignored until a match has been started from this UI.
        self._board_active = False
        self._match.add_board_changed_cb(self.on_board_changed)
        self._match.add_status_cb(self.on_status_changed)

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        self._running = True

    def _stop(self) -> None:
        self._running = False

    def _start_match(self, player1_name: str, player2_name: str) -> None:
        """Start (or restart) a match, falling back to default names for empty ones."""
        self._match.start(player1_name or DEFAULT_PLAYER1_NAME, player2_name or DEFAULT_PLAYER2_NAME)
        self._board_active = True

    def _select_cell(self, index: int) -> None:
        if not self._board_active:
            return
        self._match.play_turn(index)

    def on_board_changed(self) -> None:
        if not self._running:
            return
        self._render_board(self._match.get_board())

    def on_status_changed(self, message: str) -> None:
        if not self._running:
            return
        self._show_status(message)

    @abstractmethod
    def _render_board(self, board: tuple[Cell, ...]) -> None:
        pass

    @abstractmethod
    def _show_status(self, message: str) -> None:
        pass
