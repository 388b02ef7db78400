"""Game module for Falling Block RL.

Exports the core game engine and supporting classes:
- GameGrid: Immutable grid with merge and line clearing
- Piece: Tetromino piece with its current rotation shape and position
- TetrominoType: Enum of available piece types
- is_valid_move: The single legality check behind every move
- PieceSpawner: Uniform random piece source
- ScoringRules: Score, level and gravity speed formulas
- FallingBlockGame: Main state machine
"""

from .grid import GameGrid
from .pieces import BASE_SHAPES, PIECE_COLORS, Piece, TetrominoType, rotate
from .collision import drop_distance, is_valid_move
from .spawner import PieceSpawner
from .rules import ScoringRules
from .core import Action, FallingBlockGame, GameConfig, GameSnapshot, GameStatus

__all__ = [
    "GameGrid",
    "Piece",
    "TetrominoType",
    "BASE_SHAPES",
    "PIECE_COLORS",
    "rotate",
    "is_valid_move",
    "drop_distance",
    "PieceSpawner",
    "ScoringRules",
    "FallingBlockGame",
    "GameConfig",
    "GameSnapshot",
    "GameStatus",
    "Action",
]
