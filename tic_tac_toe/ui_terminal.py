# ruff: noqa: T201

from typing import Final

from tic_tac_toe.board import BOARD_SIZE, CELL_COUNT, EMPTY, Cell
from tic_tac_toe.ui import Ui


class TerminalUi(Ui):
    RESTART_COMMAND: Final = "restart"
    EXIT_COMMAND: Final = "exit"

    def run(self) -> None:
        super().run()
        player1_name = self._player1_name or self._ask_name(1)
        player2_name = self._player2_name or self._ask_name(2)
        if not self._running:
            return
        self._player1_name, self._player2_name = player1_name, player2_name
        self._start_match(player1_name, player2_name)
        while self._running:
            self._get_input()
        print("Terminal UI stopped", flush=True)

    def _ask_name(self, number: int) -> str:
        if not self._running:
            return ""
        try:
            return input(f"Player {number} name: ").strip()
        except (KeyboardInterrupt, EOFError):
            self._stop()
            return ""

    def _get_input(self) -> None:
        try:
            input_str = input(f"Move (1-{CELL_COUNT}), '{self.RESTART_COMMAND}' or '{self.EXIT_COMMAND}': ").strip()
        except (KeyboardInterrupt, EOFError):
            self._stop()
            return

        match input_str:
            case self.EXIT_COMMAND:
                self._stop()
            case self.RESTART_COMMAND:
                self._start_match(self._player1_name, self._player2_name)
            case _:
                try:
                    board_position = int(input_str)
                except ValueError:
                    print(f"Not an integer: {input_str!r}", flush=True)
                    return
                # Out-of-range positions are passed through; the match ignores them.
                self._select_cell(board_position - 1)

    def _render_board(self, board: tuple[Cell, ...]) -> None:
        def _cell_value(index: int) -> str:
            value = board[index]
            return value if value != EMPTY else str(index + 1)

        rows = []
        for r in range(BOARD_SIZE):
            start = r * BOARD_SIZE
            row = " | ".join(_cell_value(start + i) for i in range(BOARD_SIZE))
            rows.append(f" {row} ")

        separator = "\n-----------\n"
        output = separator.join(rows)
        print(f"\n{output}\n", flush=True)

    def _show_status(self, message: str) -> None:
        print(message, flush=True)
