from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Dict, List, Optional, Tuple

import numpy as np


class TetrominoType(IntEnum):
    I = 1
    O = 2
    T = 3
    S = 4
    Z = 5
    J = 6
    L = 7


Shape = np.ndarray


BASE_SHAPES = {
    TetrominoType.I: np.array([[1, 1, 1, 1]], dtype=np.int8),
    TetrominoType.O: np.array([[1, 1], [1, 1]], dtype=np.int8),
    TetrominoType.T: np.array([[0, 1, 0], [1, 1, 1]], dtype=np.int8),
    TetrominoType.S: np.array([[0, 1, 1], [1, 1, 0]], dtype=np.int8),
    TetrominoType.Z: np.array([[1, 1, 0], [0, 1, 1]], dtype=np.int8),
    TetrominoType.J: np.array([[1, 0, 0], [1, 1, 1]], dtype=np.int8),
    TetrominoType.L: np.array([[0, 0, 1], [1, 1, 1]], dtype=np.int8),
}

for _template in BASE_SHAPES.values():
    _template.setflags(write=False)


PIECE_COLORS: Dict[TetrominoType, Tuple[int, int, int]] = {
    TetrominoType.I: (0, 245, 255),
    TetrominoType.O: (255, 215, 0),
    TetrominoType.T: (168, 85, 247),
    TetrominoType.S: (34, 197, 94),
    TetrominoType.Z: (239, 68, 68),
    TetrominoType.J: (59, 130, 246),
    TetrominoType.L: (249, 115, 22),
}


def rotate(shape: Shape) -> Shape:
    """Return the 90 degree clockwise rotation of ``shape`` as a new array.

    An R x C input yields a C x R output with ``out[i][j] == shape[R-1-j][i]``.
    No legality check is made here.
    """
    return np.rot90(shape, 1, axes=(1, 0)).copy()


@dataclass(frozen=True, eq=False)
class Piece:
    """A falling tetromino.

    ``shape`` is the occupancy matrix of the current rotation; ``(x, y)`` is the
    board position of its top-left corner. Pieces are never mutated: moving or
    rotating one produces a new ``Piece``.
    """

    kind: TetrominoType
    shape: Shape = field(repr=False)
    x: int = 0
    y: int = 0

    @classmethod
    def from_kind(cls, kind: TetrominoType, x: int = 0, y: int = 0) -> "Piece":
        shape = BASE_SHAPES[kind].copy()
        shape.setflags(write=False)
        return cls(TetrominoType(kind), shape, x, y)

    @property
    def color(self) -> int:
        # The kind value doubles as the token written into the board.
        return int(self.kind)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return PIECE_COLORS[self.kind]

    @property
    def width(self) -> int:
        return int(self.shape.shape[1])

    @property
    def height(self) -> int:
        return int(self.shape.shape[0])

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def with_shape(self, shape: Shape, dx: int = 0) -> "Piece":
        shape = np.array(shape, dtype=np.int8)
        shape.setflags(write=False)
        return replace(self, shape=shape, x=self.x + dx)

    def rotated(self) -> "Piece":
        return self.with_shape(rotate(self.shape))

    def local_cells(self, shape: Optional[Shape] = None) -> List[Tuple[int, int]]:
        s = self.shape if shape is None else shape
        h, w = s.shape
        cells: List[Tuple[int, int]] = []
        for dy in range(h):
            for dx in range(w):
                if s[dy, dx]:
                    cells.append((dx, dy))
        return cells

    def cells_at(self, origin_x: int, origin_y: int) -> List[Tuple[int, int]]:
        return [(origin_x + dx, origin_y + dy) for dx, dy in self.local_cells()]

    def cells(self) -> List[Tuple[int, int]]:
        return self.cells_at(self.x, self.y)

    def same_as(self, other: Optional["Piece"]) -> bool:
        if other is None:
            return False
        return (
            self.kind == other.kind
            and self.x == other.x
            and self.y == other.y
            and np.array_equal(self.shape, other.shape)
        )
