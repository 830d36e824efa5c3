import pytest

from tetris_piece import COLORS, SHAPES, InvalidShapeError, Shape, make_shape


def test_empty_points_rejected():
    with pytest.raises(InvalidShapeError):
        Shape([], "#000")


def test_negative_offset_rejected():
    with pytest.raises(InvalidShapeError):
        Shape([(0, 0), (-1, 0)], "#000")


def test_dimensions():
    assert make_shape("I").dimensions() == (1, 4)
    assert make_shape("T").dimensions() == (3, 2)
    assert make_shape("O").dimensions() == (2, 2)


def test_rotate_is_clockwise():
    t = make_shape("T")
    t.rotate()
    assert sorted(t.points) == [(0, 0), (0, 1), (0, 2), (1, 1)]
    assert (t.width, t.height) == (2, 3)


def test_rotate_vertical_bar_becomes_horizontal():
    i = make_shape("I")
    i.rotate()
    assert sorted(i.points) == [(0, 0), (1, 0), (2, 0), (3, 0)]
    assert i.dimensions() == (4, 1)


@pytest.mark.parametrize("kind", sorted(SHAPES))
def test_four_rotations_restore_points(kind):
    shape = make_shape(kind)
    original = set(shape.points)
    for _ in range(4):
        shape.rotate()
        assert min(x for x, _ in shape.points) >= 0
        assert min(y for _, y in shape.points) >= 0
    assert set(shape.points) == original


def test_make_shape_returns_independent_copies():
    a = make_shape("L")
    b = make_shape("L")
    a.rotate()
    assert sorted(b.points) == sorted(SHAPES["L"])
    assert a.color == COLORS["L"]


def test_cells_offsets_by_anchor():
    assert make_shape("O").cells(3, -1) == [(3, -1), (3, 0), (4, -1), (4, 0)]
