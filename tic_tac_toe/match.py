import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Final, TypeAlias

from tic_tac_toe.board import BOARD_SIZE, CELL_COUNT, MARKER_A, MARKER_B, Board, Cell, Marker
from tic_tac_toe.player import Player

logger = logging.getLogger(__name__)

WINNING_LINES: Final = (
    *((r, r + 1, r + 2) for r in range(0, CELL_COUNT, BOARD_SIZE)),  # Horizontal lines
    *((c, c + BOARD_SIZE, c + 2 * BOARD_SIZE) for c in range(BOARD_SIZE)),  # Vertical lines
    (0, 4, 8),  # First diagonal
    (2, 4, 6),  # Second diagonal
)


class MatchState(Enum):
    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    FINISHED = auto()


@dataclass(frozen=True, slots=True)
class Won:
    player: Player


@dataclass(frozen=True, slots=True)
class Tied:
    pass


Outcome: TypeAlias = Won | Tied


class Match:
    """Turn sequencing and win/tie evaluation for one two-player match.

    Invalid moves (bad index, occupied cell, no match in progress) are dropped
    silently. Listeners are told about changes through the status and
    board-changed callbacks.
    """

    def __init__(self, board: Board) -> None:
        self._board = board
        self._players: tuple[Player, Player] | None = None
        self._current_player_index = 0
        self._state = MatchState.NOT_STARTED
        self._outcome: Outcome | None = None
        self._status_cbs: list[Callable[[str], None]] = []
        self._board_changed_cbs: list[Callable[[], None]] = []

    @property
    def state(self) -> MatchState:
        return self._state

    @property
    def outcome(self) -> Outcome | None:
        return self._outcome

    @property
    def players(self) -> tuple[Player, Player] | None:
        return self._players

    @property
    def current_player(self) -> Player | None:
        if self._players is None:
            return None
        return self._players[self._current_player_index]

    def get_board(self) -> tuple[Cell, ...]:
        return self._board.get_board()

    def add_status_cb(self, callback: Callable[[str], None]) -> None:
        self._status_cbs.append(callback)

    def add_board_changed_cb(self, callback: Callable[[], None]) -> None:
        self._board_changed_cbs.append(callback)

    def start(self, player1_name: str, player2_name: str) -> None:
        """Start a new match, discarding any previous one and clearing the board."""
        self._players = (Player(player1_name, MARKER_A), Player(player2_name, MARKER_B))
        self._current_player_index = 0
        self._outcome = None
        self._state = MatchState.IN_PROGRESS
        self._board.reset()
        logger.info("Match started: %s (%s) vs %s (%s)", player1_name, MARKER_A, player2_name, MARKER_B)

        self._notify_board_changed()
        self._notify_status(f"{player1_name}'s turn")

    def play_turn(self, index: int) -> None:
        """Place the current player's marker at ``index`` and advance the match."""
        if self._state is not MatchState.IN_PROGRESS or self._players is None:
            logger.debug("Move at %s ignored: match is %s", index, self._state.name)
            return

        player = self._players[self._current_player_index]
        if not self._board.set_cell(index, player.marker):
            logger.debug("Move at %s ignored: cell unavailable", index)
            return

        if self._check_win(player.marker):
            self._finish(Won(player))
            self._notify_status(f"{player.name} wins!")
        elif self._check_tie():
            self._finish(Tied())
            self._notify_status("It's a tie!")
        else:
            self._current_player_index = 1 - self._current_player_index
            self._notify_status(f"{self._players[self._current_player_index].name}'s turn")

        self._notify_board_changed()

    def _check_win(self, marker: Marker) -> bool:
        cells = self._board.get_board()
        return any(all(cells[i] == marker for i in line) for line in WINNING_LINES)

    def _check_tie(self) -> bool:
        return self._board.is_full()

    def _finish(self, outcome: Outcome) -> None:
        self._state = MatchState.FINISHED
        self._outcome = outcome
        logger.info("Match finished: %s", outcome)

    def _notify_status(self, message: str) -> None:
        for callback in list(self._status_cbs):
            callback(message)

    def _notify_board_changed(self) -> None:
        for callback in list(self._board_changed_cbs):
            callback()
