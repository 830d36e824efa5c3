import pytest

from tetris_engine import Renderer, Tetris
from tetris_piece import Shape, make_shape
from tetris_timer import IntervalScheduler


class RecordingRenderer(Renderer):
    def __init__(self):
        self.calls = []

    def render_active(self, shape, x, y): self.calls.append(("active", (shape.kind, x, y)))
    def render_grid(self, rows): self.calls.append(("grid", rows))
    def render_score(self, score): self.calls.append(("score", score))
    def render_level(self, level): self.calls.append(("level", level))
    def show_game_over(self, score): self.calls.append(("game_over", score))
    def hide_game_over(self): self.calls.append(("hide_game_over", None))

    def named(self, name):
        return [args for n, args in self.calls if n == name]


class ScriptedPieces:
    """Hands out pieces in a fixed order, repeating the last one."""

    def __init__(self, *items):
        self.items = list(items)

    def next_shape(self):
        item = self.items.pop(0) if len(self.items) > 1 else self.items[0]
        return make_shape(item) if isinstance(item, str) else item.copy()


DOMINO = Shape([(0, 0), (0, 1)], "#abcdef", "D")


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def scheduler():
    return IntervalScheduler()


@pytest.fixture
def make_game(renderer, scheduler):
    def factory(width, height, *pieces, **config):
        return Tetris(width, height, renderer=renderer, scheduler=scheduler,
                      pieces=ScriptedPieces(*(pieces or ("I",))), config=config)
    return factory


@pytest.fixture
def domino():
    return DOMINO
