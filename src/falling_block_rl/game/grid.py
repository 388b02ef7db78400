from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from .pieces import Piece

EMPTY = 0


class GameGrid:
    """Fixed-size playfield of rows top (0) to bottom (height - 1).

    The grid uses 0 for empty cells and the piece kind value (1..7) for filled
    cells. A ``GameGrid`` is immutable: ``merge`` and ``clear_lines`` return a
    new grid and leave the receiver untouched.
    """

    def __init__(self, width: int, height: int, cells: np.ndarray | None = None) -> None:
        self.width = int(width)
        self.height = int(height)
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {self.width}x{self.height}")
        if cells is None:
            cells = np.zeros((self.height, self.width), dtype=np.int8)
        else:
            cells = np.array(cells, dtype=np.int8)
            if cells.shape != (self.height, self.width):
                raise ValueError(
                    f"expected cells of shape {(self.height, self.width)}, got {cells.shape}"
                )
        cells.setflags(write=False)
        self.grid = cells

    @classmethod
    def empty(cls, width: int, height: int) -> "GameGrid":
        return cls(width, height)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "GameGrid":
        cells = np.array(rows, dtype=np.int8)
        if cells.ndim != 2:
            raise ValueError("rows must form a 2-D grid")
        height, width = cells.shape
        return cls(width, height, cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameGrid):
            return NotImplemented
        return np.array_equal(self.grid, other.grid)

    def __repr__(self) -> str:
        return f"GameGrid({self.width}x{self.height}, filled={self.filled_count()})"

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_filled(self, x: int, y: int) -> bool:
        """Bounds-checked read; anything outside the grid reads as empty."""
        if not self.is_inside(x, y):
            return False
        return bool(self.grid[y, x] != EMPTY)

    def merge(self, piece: Piece) -> "GameGrid":
        """Return a new grid with ``piece`` written in with its color token.

        Cells that fall outside the grid (e.g. above row 0) are dropped.
        """
        cells = self.grid.copy()
        for x, y in piece.cells():
            if self.is_inside(x, y):
                cells[y, x] = piece.color
        return GameGrid(self.width, self.height, cells)

    def clear_lines(self) -> Tuple["GameGrid", int]:
        """Remove full rows, pad empty rows on top, return ``(grid, count)``."""
        full = np.all(self.grid != EMPTY, axis=1)
        num = int(full.sum())
        if num == 0:
            return self, 0
        survivors = self.grid[~full]
        new_rows = np.zeros((num, self.width), dtype=np.int8)
        return GameGrid(self.width, self.height, np.vstack((new_rows, survivors))), num

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def get_max_height(self) -> int:
        # y=0 is top; find first non-empty from top
        non_empty_rows = np.where(np.any(self.grid != EMPTY, axis=1))[0]
        if non_empty_rows.size == 0:
            return 0
        return self.height - int(non_empty_rows[0])

    def count_holes(self) -> int:
        holes = 0
        for x in range(self.width):
            seen_block = False
            for cell in self.grid[:, x]:
                if cell != EMPTY:
                    seen_block = True
                elif seen_block:
                    holes += 1
        return holes

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
