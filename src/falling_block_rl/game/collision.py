from __future__ import annotations

from typing import Optional

from .grid import GameGrid
from .pieces import Piece, Shape


def is_valid_move(
    grid: GameGrid,
    piece: Piece,
    offset_x: int = 0,
    offset_y: int = 0,
    shape: Optional[Shape] = None,
) -> bool:
    """Whether ``piece`` shifted by the offset (optionally with another shape) is legal.

    Every occupied cell must stay inside the side walls and above the floor.
    Cells above row 0 are allowed and skip the overlap test.
    """
    for dx, dy in piece.local_cells(shape):
        x = piece.x + dx + offset_x
        y = piece.y + dy + offset_y
        if x < 0 or x >= grid.width or y >= grid.height:
            return False
        if y >= 0 and grid.is_filled(x, y):
            return False
    return True


def drop_distance(grid: GameGrid, piece: Piece) -> int:
    """Largest downward offset the piece can travel; the ghost offset."""
    distance = 0
    while is_valid_move(grid, piece, 0, distance + 1):
        distance += 1
    return distance
