"""Factory functions for creating game components.

Provides factories for creating:
- Matches (with the board they own)
- UIs (terminal, tk, pygame)
"""

from typing import Literal, TypeAlias

from tic_tac_toe.board import Board
from tic_tac_toe.match import Match
from tic_tac_toe.ui import Ui

UiKind: TypeAlias = Literal["terminal", "tk", "pygame"]

UI_CHOICES: tuple[UiKind, ...] = ("terminal", "tk", "pygame")


def create_match() -> Match:
    return Match(Board())


def create_ui(kind: UiKind, match: Match, player1_name: str = "", player2_name: str = "") -> Ui:
    # UI modules are imported on demand so the other front ends' toolkits are not required.
    match kind:
        case "terminal":
            from tic_tac_toe.ui_terminal import TerminalUi  # noqa: PLC0415

            return TerminalUi(match, player1_name, player2_name)
        case "tk":
            from tic_tac_toe.ui_tk import TkUi  # noqa: PLC0415

            return TkUi(match, player1_name, player2_name)
        case "pygame":
            from tic_tac_toe.ui_pygame import PygameUi  # noqa: PLC0415

            return PygameUi(match, player1_name, player2_name)
        case _:
            msg = f"Unknown UI type: {kind}. Choose from {', '.join(UI_CHOICES)}."
            raise ValueError(msg)
