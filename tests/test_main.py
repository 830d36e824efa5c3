import main
from tetris_config import CONFIG


def test_logger_follows_module_name():
    assert main.log.name == main.__name__


def test_parse_args_defaults_and_overrides():
    args = main.parse_args([])
    assert (args.cols, args.rows, args.seed) == (CONFIG["COLS"], CONFIG["ROWS"], CONFIG["SEED"])
    args = main.parse_args(["--cols", "10", "--seed", "7", "--log-level", "DEBUG"])
    assert (args.cols, args.seed, args.log_level) == (10, 7, "DEBUG")
