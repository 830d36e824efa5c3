"""
Pygame renderer for the engine's presentation callbacks.

- Pre-render one block Surface per palette color and blit it.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when score/level change.
- Cache a BOARD SURFACE with all *locked* blocks; rebuild only on render_grid.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, List, Optional
from tetris_engine import Renderer
from tetris_layout import Dims
from tetris_overlay import GameOverScreen, format_score
from tetris_piece import COLORS, Shape

@dataclass
class HudCache:
    score: Optional[float] = None
    level: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets(Renderer):
    """Holds pre-rendered assets and the latest state pushed by the engine."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self.cell_surf: Dict[str, pygame.Surface] = {}
        for col in COLORS.values():
            self._cell(col)
        self.hud = HudCache()
        self.overlay = GameOverScreen()
        self.paused = False
        # Board surface cache (only locked blocks)
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self.active: Optional[tuple] = None
        self.score = 0
        self.level = 1

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(d.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)

    @property
    def board_rect(self) -> pygame.Rect:
        d = self.dims
        return pygame.Rect(d.board_x, d.board_y, d.board_w, d.board_h)

    def _cell(self, color: str) -> pygame.Surface:
        s = self.cell_surf.get(color)
        if s is None:
            c = self.dims.cell
            s = pygame.Surface((c-2, c-2))
            s.fill(pygame.Color(color))
            self.cell_surf[color] = s
        return s

    # ---------- Engine callbacks ----------
    def render_grid(self, rows: List[List[Optional[str]]]):
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(rows):
            for x, color in enumerate(row):
                if color is not None:
                    self.board_surface.blit(self._cell(color), (x*c + 1, y*c + 1))

    def render_active(self, shape: Shape, x: int, y: int):
        self.active = (shape.color, shape.cells(x, y))

    def render_score(self, score):
        self.score = score

    def render_level(self, level: int):
        self.level = level

    def show_game_over(self, score):
        self.active = None
        self.overlay.show(score)

    def hide_game_over(self):
        self.overlay.hide()

    # ---------- Drawing ----------
    def draw(self, screen: pygame.Surface):
        d = self.dims
        screen.blit(self.bg, (0,0))
        screen.blit(self.board_surface, (d.board_x, d.board_y))
        if self.active:
            color, cells = self.active
            surf = self._cell(color)
            for bx, by in cells:
                # spawning cells above the board are not drawn
                if 0 <= by < d.rows and 0 <= bx < d.cols:
                    screen.blit(surf, (d.board_x + bx*d.cell + 1, d.board_y + by*d.cell + 1))
        self.draw_panel_hud(screen)
        if self.overlay.active:
            self.overlay.draw(screen, self.font, self.big_font, self.board_rect)
        elif self.paused:
            self.overlay.draw_paused(screen, self.font, self.big_font, self.board_rect)

    def draw_panel_hud(self, screen: pygame.Surface):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if self.score != self.hud.score:
            self.hud.score = self.score
            self.hud.score_s = f.render(f"Score: {format_score(self.score)}", True, (200,210,240))
        if self.level != self.hud.level:
            self.hud.level = self.level
            self.hud.level_s = f.render(f"Level: {self.level}", True, (200,210,240))
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 68))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (200,210,240)),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↓ Soft drop", True, (165,175,215)),
                f.render("↑ Rotate", True, (165,175,215)),
                f.render("P Pause", True, (165,175,215)),
                f.render("Enter Start", True, (165,175,215)),
            ]
        y = d.panel_y + 110
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
