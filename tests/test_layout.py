from tetris_layout import compute_dims


def test_dims_follow_board_size():
    d = compute_dims(12, 20, 24)
    assert (d.board_w, d.board_h) == (288, 480)
    assert d.panel_x == d.board_x + d.board_w + d.margin
    assert d.total_h == d.board_h + 2 * d.margin
    assert d.total_w == d.panel_x + d.panel_w + d.margin
