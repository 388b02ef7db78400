from __future__ import annotations

from typing import Optional, Tuple

import pygame

from falling_block_rl.game import GameSnapshot, GameStatus, Piece, TetrominoType, PIECE_COLORS


BACKGROUND = (10, 10, 14)
EMPTY_CELL = (20, 20, 26)
PANEL_TEXT = (230, 230, 230)
GHOST_ALPHA = 70


def _color_for_value(v: int) -> Tuple[int, int, int]:
    if v == 0:
        return EMPTY_CELL
    try:
        return PIECE_COLORS[TetrominoType(abs(v))]
    except ValueError:
        return (200, 200, 200)


class Renderer:
    def __init__(self, cell_size: int = 28, margin: int = 20, panel_width: int = 180) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_width = panel_width
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, width: int, height: int) -> Tuple[int, int]:
        return (
            width * self.cell_size + self.panel_width + self.margin * 3,
            height * self.cell_size + self.margin * 2,
        )

    def _font_obj(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        return self._font

    def _cell_rect(self, x: int, y: int, origin: Tuple[int, int] = (0, 0)) -> pygame.Rect:
        return pygame.Rect(
            origin[0] + x * self.cell_size,
            origin[1] + y * self.cell_size,
            self.cell_size - 1,
            self.cell_size - 1,
        )

    def _grid_surface(self, snapshot: GameSnapshot) -> pygame.Surface:
        h, w = snapshot.grid.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                pygame.draw.rect(surf, _color_for_value(int(snapshot.grid[y, x])), self._cell_rect(x, y))

        piece = snapshot.current
        if piece is not None:
            ghost = pygame.Surface((self.cell_size - 1, self.cell_size - 1), pygame.SRCALPHA)
            ghost.fill((*piece.rgb, GHOST_ALPHA))
            for x, y in piece.cells_at(piece.x, piece.y + snapshot.ghost_offset):
                if 0 <= x < w and 0 <= y < h and snapshot.grid[y, x] == 0:
                    surf.blit(ghost, self._cell_rect(x, y))
            for x, y in piece.cells():
                if 0 <= x < w and 0 <= y < h:
                    pygame.draw.rect(surf, piece.rgb, self._cell_rect(x, y))
        return surf

    def _draw_preview(self, screen: pygame.Surface, piece: Optional[Piece], origin: Tuple[int, int]) -> None:
        if piece is None:
            return
        for dx, dy in piece.local_cells():
            pygame.draw.rect(screen, piece.rgb, self._cell_rect(dx, dy, origin))

    def _draw_panel(self, screen: pygame.Surface, snapshot: GameSnapshot, x0: int) -> None:
        font = self._font_obj()
        y = self.margin
        screen.blit(font.render("Next", True, PANEL_TEXT), (x0, y))
        self._draw_preview(screen, snapshot.next, (x0, y + 30))
        y += 30 + self.cell_size * 3
        for label, value in (("Score", snapshot.score), ("Level", snapshot.level), ("Lines", snapshot.lines)):
            screen.blit(font.render(f"{label}: {value}", True, PANEL_TEXT), (x0, y))
            y += 30

    def _draw_status(self, screen: pygame.Surface, snapshot: GameSnapshot, board_w: int, board_h: int) -> None:
        messages = {
            GameStatus.IDLE: "Press Enter to start",
            GameStatus.PAUSED: "Paused",
            GameStatus.GAME_OVER: f"Game Over - {snapshot.score}",
        }
        msg = messages.get(snapshot.status)
        if msg is None:
            return
        shade = pygame.Surface((board_w, board_h), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 200))
        screen.blit(shade, (self.margin, self.margin))
        text = self._font_obj().render(msg, True, (255, 255, 255))
        rect = text.get_rect(center=(self.margin + board_w // 2, self.margin + board_h // 2))
        screen.blit(text, rect)

    def draw(self, screen: pygame.Surface, snapshot: GameSnapshot) -> None:
        grid_surf = self._grid_surface(snapshot)
        screen.fill(BACKGROUND)
        screen.blit(grid_surf, (self.margin, self.margin))
        board_w, board_h = grid_surf.get_size()
        self._draw_panel(screen, snapshot, self.margin * 2 + board_w)
        self._draw_status(screen, snapshot, board_w, board_h)
        pygame.display.flip()
