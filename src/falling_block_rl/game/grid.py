from __future__ import annotations

from typing import Iterable

import numpy as np

from .pieces import Coordinate, Piece


GRID_WIDTH = 10
GRID_HEIGHT = 20


class GameGrid:
    """Fixed 10x20 board of locked cells.

    The grid uses 0 for empty cells and the color identifier (1..7) of the
    piece that filled a cell otherwise. Row 0 is the top. Cells above the top
    (negative y) are allowed for a falling piece but never stored.
    """

    def __init__(self) -> None:
        self.width = GRID_WIDTH
        self.height = GRID_HEIGHT
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def can_place(self, cells: Iterable[Coordinate]) -> bool:
        for x, y in cells:
            if x < 0 or x >= self.width or y >= self.height:
                return False
            # Above the board only the column bounds apply.
            if y >= 0 and self.grid[y, x] != 0:
                return False
        return True

    def is_valid(self, piece: Piece) -> bool:
        return self.can_place(piece.blocks)

    def lock(self, piece: Piece) -> None:
        """Write the piece color into every visible cell; cells with y < 0 are dropped."""
        for x, y in piece.blocks:
            if y >= 0:
                self.grid[y, x] = piece.color

    def is_row_full(self, row: int) -> bool:
        return bool(np.all(self.grid[row] != 0))

    def clear_lines(self) -> None:
        """Remove full rows and let the remaining rows settle downwards.

        Single bottom-up pass with a write cursor; rows above the final cursor
        are zero-filled.
        """
        write_row = self.height - 1
        for read_row in range(self.height - 1, -1, -1):
            if self.is_row_full(read_row):
                continue
            if write_row != read_row:
                self.grid[write_row] = self.grid[read_row]
            write_row -= 1
        if write_row >= 0:
            self.grid[: write_row + 1] = 0

    def read_only_view(self) -> np.ndarray:
        view = self.grid.view()
        view.flags.writeable = False
        return view

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
