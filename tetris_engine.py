"""Game engine: active piece lifecycle, gravity, scoring, levels"""
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from tetris_board import Grid, LineResult, Row, check_size
from tetris_config import CONFIG
from tetris_piece import Shape
from tetris_rng import PieceRandom
from tetris_timer import IntervalScheduler

log = logging.getLogger(__name__)

LINE_BONUS = {4: 2, 3: 1, 2: 0.5}


class GameState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Renderer:
    """Presentation callbacks. The default does nothing."""

    def render_active(self, shape: Shape, x: int, y: int): pass
    def render_grid(self, rows: List[Row]): pass
    def render_score(self, score): pass
    def render_level(self, level: int): pass
    def show_game_over(self, score): pass
    def hide_game_over(self): pass


@dataclass
class ActivePiece:
    shape: Shape
    x: int
    y: int

    def cells(self, dx: int = 0, dy: int = 0):
        return self.shape.cells(self.x + dx, self.y + dy)


def speed(level: int, max_interval=None, min_interval=None) -> float:
    """Gravity interval in ms for a level."""
    max_interval = CONFIG["MAX_INTERVAL_MS"] if max_interval is None else max_interval
    min_interval = CONFIG["MIN_INTERVAL_MS"] if min_interval is None else min_interval
    if level == 1:
        return max_interval
    return max_interval / level ** 2 + min_interval


def score_for_rows(rows: int, multiplier=None):
    if rows <= 0:
        return 0
    multiplier = CONFIG["SCORE_MULTIPLIER"] if multiplier is None else multiplier
    return (rows + LINE_BONUS.get(rows, 0)) * multiplier


class Tetris:
    def __init__(self, width: Optional[int] = None, height: Optional[int] = None,
                 renderer: Optional[Renderer] = None,
                 scheduler: Optional[IntervalScheduler] = None,
                 pieces: Optional[PieceRandom] = None,
                 config: Optional[dict] = None):
        self.config = {**CONFIG, **(config or {})}
        width = self.config["COLS"] if width is None else width
        height = self.config["ROWS"] if height is None else height
        check_size(width, height)
        self.width = width
        self.height = height
        self.renderer = renderer or Renderer()
        self.scheduler = scheduler or IntervalScheduler()
        self.pieces = pieces or PieceRandom(self.config["SEED"])

        self.grid: Optional[Grid] = None
        self.active: Optional[ActivePiece] = None
        self.score = 0
        self.level = 1
        self.game_over = False
        self.paused = False
        self.input_attached = False
        self._timer = None
        self._game_end_listeners: List[Callable] = []

    # ---------- lifecycle ----------
    @property
    def state(self) -> GameState:
        if self.game_over:
            return GameState.GAME_OVER
        if self.grid is None:
            return GameState.NOT_STARTED
        return GameState.PAUSED if self.paused else GameState.RUNNING

    @property
    def interval(self) -> float:
        return speed(self.level, self.config["MAX_INTERVAL_MS"], self.config["MIN_INTERVAL_MS"])

    @property
    def timer_active(self) -> bool:
        return self._timer is not None and self.scheduler.is_active(self._timer)

    def add_game_end_listener(self, fn: Callable):
        self._game_end_listeners.append(fn)

    def start(self):
        self._clear_timer()
        self.grid = Grid(self.width, self.height)
        self.active = None
        self.score = 0
        self.level = 1
        self.game_over = False
        self.paused = False
        self.input_attached = True
        log.info("new game on %dx%d board", self.width, self.height)
        self.renderer.hide_game_over()
        self.renderer.render_grid(self.grid.snapshot())
        self.renderer.render_score(self.score)
        self.renderer.render_level(self.level)
        self.spawn_next()
        if not self.game_over:
            self._arm_timer()

    def stop(self):
        if self.game_over or self.grid is None:
            return
        self._clear_timer()
        self.active = None
        self.game_over = True
        self.input_attached = False
        log.info("game over, final score %s (level %d)", self.score, self.level)
        self.renderer.show_game_over(self.score)
        for fn in self._game_end_listeners:
            fn(self.score)

    def pause(self):
        if self.state is GameState.RUNNING:
            self.paused = True
            log.info("paused")

    def resume(self):
        if self.state is GameState.PAUSED:
            self.paused = False
            log.info("resumed")
            if not self.timer_active:
                self._arm_timer()

    def toggle_pause(self):
        if self.paused:
            self.resume()
        else:
            self.pause()

    # ---------- timer ----------
    def _arm_timer(self):
        self._clear_timer()
        self._timer = self.scheduler.set_interval(self.interval, self.move_down)

    def _clear_timer(self):
        if self._timer is not None:
            self.scheduler.clear_interval(self._timer)
            self._timer = None

    # ---------- piece flow ----------
    def spawn_next(self):
        if self.game_over:
            return
        x = self.config["SPAWN_X"]
        if x is None:
            x = self.width // 2 - 1
        self.active = ActivePiece(self.pieces.next_shape(), x, self.config["SPAWN_Y"])
        log.debug("spawned %s at x=%d", self.active.shape.kind, x)
        self._render_active()
        self.move_down()

    def _fits(self, dx: int, dy: int) -> bool:
        return all(self.grid.is_valid_coordinate(x, y) for x, y in self.active.cells(dx, dy))

    def move_down(self):
        if self.paused or self.active is None:
            return
        if self._fits(0, 1):
            self.active.y += 1
            self._render_active()
            return
        self._lock()

    def _lock(self):
        piece, self.active = self.active, None
        cells = piece.cells()
        result: LineResult = self.grid.deposit(cells, piece.shape.color)
        log.debug("locked %s at (%d, %d)", piece.shape.kind, piece.x, piece.y)
        self.renderer.render_grid(self.grid.snapshot())
        # cells left above row 0 can never be placed, so that lock ends the game too
        if result.overflow or any(y < 0 for _, y in cells):
            self.stop()
            return
        self.add_score(result.cleared_rows)
        self.spawn_next()

    def add_score(self, rows: int):
        if rows <= 0:
            return
        old = self.score
        self.score = old + score_for_rows(rows, self.config["SCORE_MULTIPLIER"])
        log.debug("%d line(s) cleared, score %s", rows, self.score)
        self.renderer.render_score(self.score)
        bp = self.config["LEVEL_BREAKPOINT"]
        if math.floor(self.score / bp) > math.floor(old / bp):
            self.level += 1
            log.info("level %d, gravity every %.1f ms", self.level, self.interval)
            self.renderer.render_level(self.level)
            if self.timer_active:
                self._arm_timer()

    # ---------- input commands ----------
    def _accepts_input(self) -> bool:
        return self.input_attached and not self.paused and self.active is not None

    def move_horizontal(self, direction: int):
        if direction not in (-1, 1):
            raise ValueError(f"direction must be -1 or 1, got {direction}")
        if not self._accepts_input():
            return
        if self._fits(direction, 0):
            self.active.x += direction
            self._render_active()

    def move_left(self):
        self.move_horizontal(-1)

    def move_right(self):
        self.move_horizontal(1)

    def rotate(self):
        # no collision check here; only the right edge is clamped
        if not self._accepts_input():
            return
        self.active.shape.rotate()
        overflow = self.width - (self.active.x + self.active.shape.width)
        if overflow < 0:
            self.active.x += overflow
        self._render_active()

    def soft_drop_begin(self):
        if not self._accepts_input():
            return
        if self._timer is not None:
            self._clear_timer()
        self.move_down()

    def soft_drop_end(self):
        if not self.input_attached or self.active is None:
            return
        self._arm_timer()

    def _render_active(self):
        a = self.active
        self.renderer.render_active(a.shape, a.x, a.y)
