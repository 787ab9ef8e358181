from typing import Final, Literal, TypeAlias

BOARD_SIZE: Final = 3
CELL_COUNT: Final = BOARD_SIZE * BOARD_SIZE

Marker: TypeAlias = Literal["X", "O"]
Cell: TypeAlias = Marker | Literal[""]

EMPTY: Final = ""
MARKER_A: Final = "X"
MARKER_B: Final = "O"


class Board:
    def __init__(self) -> None:
        self._cells: list[Cell] = [EMPTY] * CELL_COUNT

    def set_cell(self, index: int, marker: Marker) -> bool:
        """Place a marker on an empty cell.

        Returns False, leaving the board untouched, when the index is outside 0..8
        or the cell is already taken.
        """
        if not (0 <= index < CELL_COUNT) or self._cells[index] != EMPTY:
            return False
        self._cells[index] = marker
        return True

    def get_board(self) -> tuple[Cell, ...]:
        return tuple(self._cells)

    def reset(self) -> None:
        for i in range(CELL_COUNT):
            self._cells[i] = EMPTY

    def is_full(self) -> bool:
        return all(cell != EMPTY for cell in self._cells)
