from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence

import numpy as np

from falling_block_rl.game import (
    FallingBlockGame,
    GameConfig,
    GameGrid,
    PieceSpawner,
    TetrominoType,
)


class SequenceSpawner(PieceSpawner):
    """Spawner that hands out a fixed list of kinds, then O pieces forever."""

    def __init__(self, kinds: Iterable[TetrominoType], width: int = 10) -> None:
        super().__init__(width)
        self._kinds = list(kinds)

    def _choose_kind(self) -> TetrominoType:
        if self._kinds:
            return self._kinds.pop(0)
        return TetrominoType.O


def make_game(kinds: Sequence[TetrominoType] = (), width: int = 10, height: int = 20,
              start: bool = True) -> FallingBlockGame:
    game = FallingBlockGame(GameConfig(width=width, height=height), spawner=SequenceSpawner(kinds, width))
    if start:
        game.start()
    return game


def grid_with(width: int = 10, height: int = 20, rows: Optional[Dict[int, Sequence[int]]] = None,
              cells: Iterable[tuple[int, int]] = (), value: int = 7) -> GameGrid:
    data = np.zeros((height, width), dtype=np.int8)
    for y, row in (rows or {}).items():
        data[y, :] = row
    for x, y in cells:
        data[y, x] = value
    return GameGrid(width, height, data)


def full_row_except(width: int, holes: Iterable[int] = (), value: int = 7) -> list[int]:
    holes = set(holes)
    return [0 if x in holes else value for x in range(width)]
