
"""
Rendering for the pygame host.

Draws a `Snapshot` and nothing else; the renderer never reads or changes
game state directly.

- Cell sprites are pre-rendered per kind (solid + ghost outline).
- The static background (grid lines, panel and preview frames) is built once per Dims.
- Locked cells are cached on a board surface, rebuilt only when the grid changes.
  Grids are immutable, so an identity check is enough to detect a change.
- HUD text surfaces are cached and re-rendered only when their values change.
"""
from __future__ import annotations
import pygame
from typing import Dict, Optional, Tuple
from tetris_board import Grid
from tetris_game import Snapshot, Status
from tetris_layout import Dims, PREVIEW_CELLS
from tetris_piece import COLORS, Piece
from tetris_stats import GameStats

BG = (10,13,34)
GRID_LINE = (40,50,90)
PANEL = (21,25,53)
PANEL_EDGE = (50,60,100)
FRAME = (15,18,40)
FRAME_EDGE = (55,65,110)
TEXT = (200,210,240)
DIM_TEXT = (165,175,215)

CONTROLS = ("←/→ Move", "↓ Soft drop", "↑ Rotate", "Space Hard drop",
            "Shift/C Hold", "P Pause • R Restart")


class RenderAssets:
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_grid: Optional[Grid] = None
        self._text: Dict[str, Tuple[object, pygame.Surface]] = {}

    # ---------- Static background ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        cols, rows = d.board_w // d.cell, d.board_h // d.cell
        for x in range(cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, GRID_LINE, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, GRID_LINE, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, PANEL, panel_rect)
        pygame.draw.rect(self.bg, PANEL_EDGE, panel_rect, 1)
        for ox, oy in (d.hold_origin(), d.next_origin()):
            frame = pygame.Rect(ox-6, oy-6, d.preview*PREVIEW_CELLS+12, d.preview*PREVIEW_CELLS+12)
            pygame.draw.rect(self.bg, FRAME, frame)
            pygame.draw.rect(self.bg, FRAME_EDGE, frame, 1)

    # ---------- Cell sprites ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        self.preview_surf: Dict[str, pygame.Surface] = {}
        c, p = self.dims.cell, self.dims.preview
        for kind, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[kind] = s
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0,0,c-8,c-8), 2)
            self.ghost_surf[kind] = g
            ps = pygame.Surface((p-2, p-2))
            ps.fill(col)
            self.preview_surf[kind] = ps

    # ---------- Locked cells ----------
    def _sync_board(self, grid: Grid):
        if grid is self._board_grid:
            return
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(grid):
            for x, cell in enumerate(row):
                if cell.filled:
                    self.board_surface.blit(self.cell_surf[cell.kind], (x*c + 1, y*c + 1))
        self._board_grid = grid

    def _draw_piece(self, screen, piece: Piece, sprites, inset: int):
        d = self.dims
        for bx, by in piece.cells():
            if by >= 0:
                screen.blit(sprites[piece.kind], (d.board_x + bx*d.cell + inset, d.board_y + by*d.cell + inset))

    def _draw_preview(self, screen, piece: Optional[Piece], origin, dimmed=False):
        if piece is None:
            return
        p = self.dims.preview
        size = len(piece.shape)
        off = (PREVIEW_CELLS - size) // 2
        sprite = self.preview_surf[piece.kind]
        if dimmed:
            sprite = sprite.copy(); sprite.set_alpha(110)
        for r, row in enumerate(piece.shape):
            for c, v in enumerate(row):
                if v:
                    screen.blit(sprite, (origin[0] + (c+off)*p + 1, origin[1] + (r+off)*p + 1))

    # ---------- Text ----------
    def _label(self, key: str, value, text: str, color=TEXT, font=None) -> pygame.Surface:
        cached = self._text.get(key)
        if cached is None or cached[0] != value:
            cached = (value, (font or self.font).render(text, True, color))
            self._text[key] = cached
        return cached[1]

    def _draw_hud(self, screen, snap: Snapshot, best: Optional[GameStats]):
        d = self.dims
        x, y = d.panel_x + 12, d.panel_y + 12
        rows = [
            self._label("title", None, "Tetris", (197,202,233)),
            self._label("score", snap.score, f"Score: {snap.score}"),
            self._label("level", snap.level, f"Level: {snap.level}"),
            self._label("lines", snap.lines, f"Lines: {snap.lines}"),
            self._label("tetris", snap.tetris_count, f"Tetris: {snap.tetris_count}"),
        ]
        for surf in rows:
            screen.blit(surf, (x, y)); y += 24
        screen.blit(self._label("next", None, "Next:"), (x, d.panel_y + 126))
        hx, hy = d.hold_origin()
        screen.blit(self._label("hold", None, "Hold:"), (hx, hy - 28))
        y = d.next_origin()[1] + d.preview*PREVIEW_CELLS + 20
        if best is not None:
            screen.blit(self._label("best", best.high_score, f"Best: {best.high_score}"), (x, y)); y += 20
            screen.blit(self._label("games", best.games_played, f"Games: {best.games_played}", DIM_TEXT), (x, y)); y += 30
        for i, line in enumerate(CONTROLS):
            screen.blit(self._label(f"ctl{i}", None, line, DIM_TEXT), (x, y)); y += 20

    def _draw_banner(self, screen, text: str, sub: str = ""):
        d = self.dims
        cx, cy = d.board_x + d.board_w // 2, d.board_y + d.board_h // 2
        shade = pygame.Surface((d.board_w, d.board_h), pygame.SRCALPHA)
        shade.fill((0,0,0,150))
        screen.blit(shade, (d.board_x, d.board_y))
        msg = self._label("banner:" + text, None, text, (255,230,230), self.big_font)
        screen.blit(msg, msg.get_rect(center=(cx, cy - 16)))
        if sub:
            s = self._label("sub:" + sub, None, sub)
            screen.blit(s, s.get_rect(center=(cx, cy + 20)))

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, snap: Snapshot, best: Optional[GameStats] = None):
        d = self.dims
        screen.blit(self.bg, (0,0))
        self._sync_board(snap.grid)
        screen.blit(self.board_surface, (d.board_x, d.board_y))
        if snap.active is not None:
            self._draw_piece(screen, snap.ghost, self.ghost_surf, 4)
            self._draw_piece(screen, snap.active, self.cell_surf, 1)
        self._draw_preview(screen, snap.held, d.hold_origin(), dimmed=snap.hold_used)
        self._draw_preview(screen, snap.next, d.next_origin())
        self._draw_hud(screen, snap, best)
        if snap.status is Status.PAUSED:
            self._draw_banner(screen, "PAUSED", "P to resume")
        elif snap.status is Status.GAME_OVER:
            self._draw_banner(screen, "GAME OVER", f"Score {snap.score} • R to restart")
