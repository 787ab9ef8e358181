import tkinter as tk
from functools import partial
from typing import Final

from tic_tac_toe.board import BOARD_SIZE, CELL_COUNT, Cell
from tic_tac_toe.match import Match
from tic_tac_toe.ui import Ui


class TkUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Tk)"

    def __init__(self, match: Match, player1_name: str = "", player2_name: str = "") -> None:
        super().__init__(match, player1_name, player2_name)
        self._buttons: list[tk.Button] = []

    def run(self) -> None:
        self._root = tk.Tk()
        self._root.title(self.TITLE)
        self._root.protocol("WM_DELETE_WINDOW", self._stop)
        self._build_controls()
        self._build_grid()
        super().run()
        self._root.mainloop()

    def _stop(self) -> None:
        self._root.after(0, self._root.quit)
        super()._stop()

    # -----------------------------
    # UI construction
    # -----------------------------

    def _build_controls(self) -> None:
        controls = tk.Frame(self._root)
        controls.grid(row=0, column=0, columnspan=BOARD_SIZE, pady=4)

        self._player1_var = tk.StringVar(value=self._player1_name)
        self._player2_var = tk.StringVar(value=self._player2_name)
        tk.Label(controls, text="Player 1 (X)").grid(row=0, column=0)
        tk.Entry(controls, textvariable=self._player1_var).grid(row=0, column=1)
        tk.Label(controls, text="Player 2 (O)").grid(row=1, column=0)
        tk.Entry(controls, textvariable=self._player2_var).grid(row=1, column=1)

        # Start and Restart do the same thing: read the names and begin a fresh match.
        tk.Button(controls, text="Start", command=self._on_start).grid(row=2, column=0, pady=2)
        tk.Button(controls, text="Restart", command=self._on_start).grid(row=2, column=1, pady=2)

        self._result_label = tk.Label(self._root, text="", font=("Helvetica", 16))
        self._result_label.grid(row=BOARD_SIZE + 1, column=0, columnspan=BOARD_SIZE, pady=4)

    def _build_grid(self) -> None:
        for i in range(CELL_COUNT):
            btn = tk.Button(
                self._root,
                text="",
                width=7,
                height=3,
                font=("Helvetica", 32),
                command=partial(self._on_click, i),
            )
            row, col = divmod(i, BOARD_SIZE)
            btn.grid(row=row + 1, column=col, padx=2, pady=2)
            self._buttons.append(btn)

    # -----------------------------
    # Event handling
    # -----------------------------

    def _on_start(self) -> None:
        self._start_match(self._player1_var.get(), self._player2_var.get())

    def _on_click(self, index: int) -> None:
        if not self._running:
            return
        self._select_cell(index)

    def _render_board(self, board: tuple[Cell, ...]) -> None:
        for btn, value in zip(self._buttons, board, strict=True):
            btn.config(text=value)

    def _show_status(self, message: str) -> None:
        self._result_label.config(text=message)
        self._root.title(f"{self.TITLE} - {message}")
