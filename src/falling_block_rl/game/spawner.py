from __future__ import annotations

import random
from typing import Optional

from .pieces import Piece, TetrominoType


class PieceSpawner:
    """Uniform random piece source.

    Each kind is equally likely on every draw; there is no bag or history.
    """

    def __init__(self, width: int, rng: Optional[random.Random] = None, spawn_y: int = 0) -> None:
        self.width = int(width)
        self.spawn_y = int(spawn_y)
        self.rng = rng or random.Random()

    def seed(self, seed: Optional[int]) -> None:
        self.rng.seed(seed)

    def _choose_kind(self) -> TetrominoType:
        return self.rng.choice(list(TetrominoType))

    def spawn_kind(self, kind: TetrominoType) -> Piece:
        piece = Piece.from_kind(kind)
        x = self.width // 2 - piece.width // 2
        return piece.moved(x, self.spawn_y)

    def spawn(self) -> Piece:
        return self.spawn_kind(self._choose_kind())
