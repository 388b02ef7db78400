from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

import numpy as np

from .collision import drop_distance, is_valid_move
from .grid import GameGrid
from .pieces import Piece, rotate
from .rules import ScoringRules
from .spawner import PieceSpawner


# Horizontal offsets tried, in order, when a rotation is blocked.
WALL_KICKS = (0, -1, 1)


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    HARD_DROP = 4
    NONE = 5
    PAUSE = 6


class GameStatus(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None
    spawn_y: int = 0

    def __post_init__(self) -> None:
        # The I piece is four cells long in either orientation.
        if self.width < 4 or self.height < 4:
            raise ValueError(f"board must be at least 4x4, got {self.width}x{self.height}")


@dataclass(frozen=True, eq=False)
class GameSnapshot:
    grid: np.ndarray
    current: Optional[Piece]
    next: Optional[Piece]
    score: int
    level: int
    lines: int
    status: GameStatus
    ghost_offset: int
    gravity_interval_ms: int


class FallingBlockGame:
    """Falling-block state machine.

    Every command is synchronous and applied as one transaction. Commands
    other than ``start`` and ``toggle_pause`` do nothing unless the game is
    playing; blocked moves are ignored rather than reported as errors. Each
    command returns ``True`` when it changed the state.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        spawner: Optional[PieceSpawner] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.spawner = spawner or PieceSpawner(
            self.config.width, random.Random(self.config.random_seed), self.config.spawn_y
        )
        self.grid = GameGrid.empty(self.config.width, self.config.height)
        self.current_piece: Optional[Piece] = None
        self.next_piece: Optional[Piece] = None
        self.score = 0
        self.level = 1
        self.lines_cleared_total = 0
        self.last_lines_cleared = 0
        self.pieces_locked = 0
        self.status = GameStatus.IDLE

    @property
    def is_playing(self) -> bool:
        return self.status is GameStatus.PLAYING

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    @property
    def gravity_interval_ms(self) -> int:
        return self.rules.gravity_interval_ms(self.level)

    def start(self, seed: Optional[int] = None) -> bool:
        if seed is not None:
            self.spawner.seed(seed)
        self.grid = GameGrid.empty(self.config.width, self.config.height)
        self.current_piece = self.spawner.spawn()
        self.next_piece = self.spawner.spawn()
        self.score = 0
        self.level = 1
        self.lines_cleared_total = 0
        self.last_lines_cleared = 0
        self.pieces_locked = 0
        self.status = GameStatus.PLAYING
        return True

    def toggle_pause(self) -> bool:
        if self.status is GameStatus.PLAYING:
            self.status = GameStatus.PAUSED
        elif self.status is GameStatus.PAUSED:
            self.status = GameStatus.PLAYING
        else:
            return False
        return True

    def _can_act(self) -> bool:
        return self.is_playing and self.current_piece is not None

    def move_horizontal(self, direction: int) -> bool:
        if direction not in (-1, 1):
            raise ValueError(f"direction must be -1 or 1, got {direction!r}")
        if not self._can_act():
            return False
        if not is_valid_move(self.grid, self.current_piece, direction, 0):
            return False
        self.current_piece = self.current_piece.moved(direction, 0)
        return True

    def move_left(self) -> bool:
        return self.move_horizontal(-1)

    def move_right(self) -> bool:
        return self.move_horizontal(1)

    def soft_drop(self) -> bool:
        if not self._can_act():
            return False
        if is_valid_move(self.grid, self.current_piece, 0, 1):
            self.current_piece = self.current_piece.moved(0, 1)
        else:
            self._lock_piece()
        return True

    def tick(self) -> bool:
        """Gravity step; identical to a soft drop."""
        return self.soft_drop()

    def rotate(self) -> bool:
        if not self._can_act():
            return False
        rotated = rotate(self.current_piece.shape)
        for dx in WALL_KICKS:
            if is_valid_move(self.grid, self.current_piece, dx, 0, rotated):
                self.current_piece = self.current_piece.with_shape(rotated, dx)
                return True
        return False

    def hard_drop(self) -> bool:
        if not self._can_act():
            return False
        distance = drop_distance(self.grid, self.current_piece)
        self.current_piece = self.current_piece.moved(0, distance)
        self._lock_piece()
        return True

    def ghost_offset(self) -> int:
        if self.current_piece is None:
            return 0
        return drop_distance(self.grid, self.current_piece)

    def _lock_piece(self) -> int:
        assert self.current_piece is not None
        merged = self.grid.merge(self.current_piece)
        cleared_grid, lines = merged.clear_lines()
        total = self.lines_cleared_total + lines
        # Score with the level reached after counting this clear.
        level = self.rules.level_for_lines(total)
        score = self.score + self.rules.score_for_lines(lines, level)

        self.grid = cleared_grid
        self.lines_cleared_total = total
        self.last_lines_cleared = lines
        self.level = level
        self.score = score
        self.pieces_locked += 1

        if self.next_piece is not None and not is_valid_move(self.grid, self.next_piece, 0, 0):
            self.current_piece = None
            self.status = GameStatus.GAME_OVER
            return lines
        self.current_piece = self.next_piece
        self.next_piece = self.spawner.spawn()
        return lines

    def step(self, action: Action) -> Tuple[np.ndarray, int, bool, dict]:
        action = Action(int(action))
        score_before = self.score

        if action == Action.LEFT:
            self.move_left()
        elif action == Action.RIGHT:
            self.move_right()
        elif action == Action.ROTATE:
            self.rotate()
        elif action == Action.SOFT_DROP:
            self.soft_drop()
        elif action == Action.HARD_DROP:
            self.hard_drop()
        elif action == Action.PAUSE:
            self.toggle_pause()

        info = {
            "score": self.score,
            "level": self.level,
            "lines_cleared_total": self.lines_cleared_total,
            "pieces_locked": self.pieces_locked,
            "status": self.status.value,
        }
        return self.get_state(), self.score - score_before, self.game_over, info

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            grid=self.grid.clone_state(),
            current=self.current_piece,
            next=self.next_piece,
            score=self.score,
            level=self.level,
            lines=self.lines_cleared_total,
            status=self.status,
            ghost_offset=self.ghost_offset(),
            gravity_interval_ms=self.gravity_interval_ms,
        )

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for observation
        state = self.grid.clone_state()
        if self.current_piece is not None:
            for x, y in self.current_piece.cells():
                if self.grid.is_inside(x, y):
                    # Use negative to indicate falling piece overlay
                    state[y, x] = -self.current_piece.color
        return state
