from tetris_overlay import GameOverScreen, format_score


def test_format_score():
    assert format_score(0) == "0"
    assert format_score(25.0) == "25"
    assert format_score(1_000_000) == "1000000"
    assert format_score(2_500_000.0) == "2500000"
    assert format_score(12.5) == "12.5"


def test_game_over_screen_show_hide():
    screen = GameOverScreen()
    screen.show(60)
    assert screen.active and screen.final_score == 60
    screen.hide()
    assert not screen.active
