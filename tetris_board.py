"""Board: locked cells, deposit, line clear, overflow"""
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

log = logging.getLogger(__name__)

Row = List[Optional[str]]


class InvalidGridError(ValueError):
    pass


@dataclass(frozen=True)
class LineResult:
    cleared_rows: int = 0
    overflow: bool = False


OVERFLOW = LineResult(overflow=True)


def is_row_full(row: Row) -> bool:
    return all(c is not None for c in row)


def is_row_empty(row: Row) -> bool:
    return all(c is None for c in row)


def check_size(width: Optional[int], height: Optional[int]):
    if width is None or height is None:
        raise InvalidGridError("Undefined value for width or height.")
    if width <= 0 or height <= 0:
        raise InvalidGridError(f"Grid size must be positive, got {width}x{height}.")


class Grid:
    def __init__(self, width: Optional[int], height: Optional[int]):
        check_size(width, height)
        self.width = width
        self.height = height
        self.rows: List[Row] = [self._empty_row() for _ in range(height)]

    def _empty_row(self) -> Row:
        return [None] * self.width

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Optional[str]:
        if not self.in_bounds(x, y):
            return None
        return self.rows[y][x]

    def is_valid_coordinate(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.rows[y][x] is None

    def deposit(self, cells: Iterable[Tuple[int, int]], color: str) -> LineResult:
        """Write cells into the board, then evaluate lines.

        Cells outside the board (e.g. above row 0 while spawning) are dropped.
        """
        for x, y in cells:
            if self.in_bounds(x, y):
                self.rows[y][x] = color
        return self.evaluate_lines()

    def evaluate_lines(self) -> LineResult:
        if not is_row_empty(self.rows[0]):
            return OVERFLOW
        kept = [r for r in self.rows if not is_row_full(r)]
        n = self.height - len(kept)
        self.rows = [self._empty_row() for _ in range(n)] + kept
        if n:
            log.debug("cleared %d row(s)", n)
        return LineResult(cleared_rows=n)

    def snapshot(self) -> List[Row]:
        return [r[:] for r in self.rows]
