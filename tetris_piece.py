"""Piece model: relative cell offsets, color, clockwise rotation"""
from typing import Dict, List, Tuple

Point = Tuple[int, int]

COLORS: Dict[str, str] = {
    "O": "#264653",
    "I": "#2a9d8f",
    "S": "#e9c46a",
    "L": "#f4a261",
    "T": "#e76f51",
}

# (x, y) offsets relative to the piece's own top-left corner
SHAPES: Dict[str, List[Point]] = {
    "O": [(0,0),(0,1),(1,0),(1,1)],
    "I": [(0,0),(0,1),(0,2),(0,3)],
    "S": [(0,0),(0,1),(1,1),(1,2)],
    "L": [(0,0),(0,1),(0,2),(1,2)],
    "T": [(1,0),(0,1),(1,1),(2,1)],
}


class InvalidShapeError(ValueError):
    pass


class Shape:
    """A piece layout. Points stay non-negative relative to the shape origin."""

    def __init__(self, points, color: str, kind: str = ""):
        if not points:
            raise InvalidShapeError("Shape needs at least one point.")
        pts = [(int(x), int(y)) for x, y in points]
        if any(x < 0 or y < 0 for x, y in pts):
            raise InvalidShapeError(f"Negative offset in shape points: {pts}")
        self.points: List[Point] = pts
        self.color = color
        self.kind = kind
        self.width, self.height = self.dimensions()

    def dimensions(self) -> Tuple[int, int]:
        return (max(x for x, _ in self.points) + 1,
                max(y for _, y in self.points) + 1)

    def rotate(self):
        """Rotate 90 degrees clockwise within the bounding box.

        Transpose, recompute the box, then mirror horizontally. Collisions
        are the caller's business.
        """
        self.points = [(y, x) for x, y in self.points]
        self.width, self.height = self.dimensions()
        self.points = [(self.width - 1 - x, y) for x, y in self.points]

    def cells(self, x: int, y: int) -> List[Point]:
        return [(x + px, y + py) for px, py in self.points]

    def copy(self) -> "Shape":
        return Shape(list(self.points), self.color, self.kind)

    def __repr__(self):
        return f"Shape({self.kind!r}, {self.points}, {self.color!r})"


def make_shape(kind: str) -> Shape:
    return Shape(SHAPES[kind], COLORS[kind], kind)
