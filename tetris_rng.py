"""Uniform random piece chooser"""
import random
from typing import Optional, Sequence

from tetris_piece import SHAPES, Shape, make_shape


class PieceRandom:
    """Picks each piece independently and uniformly from the catalog."""

    def __init__(self, seed: Optional[int] = None, kinds: Optional[Sequence[str]] = None):
        self.kinds = list(kinds) if kinds else list(SHAPES)
        self._rng = random.Random(seed)

    def next_kind(self) -> str:
        return self._rng.choice(self.kinds)

    def next_shape(self) -> Shape:
        return make_shape(self.next_kind())
