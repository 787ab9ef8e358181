from dataclasses import dataclass

from tic_tac_toe.board import Marker


@dataclass(frozen=True, slots=True)
class Player:
    name: str
    marker: Marker
