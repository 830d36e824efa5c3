import logging

CONFIG = {
    "COLS": 12,
    "ROWS": 20,
    "CELL_SIZE": 24,
    "MAX_INTERVAL_MS": 750,
    "MIN_INTERVAL_MS": 100,
    "SCORE_MULTIPLIER": 10,
    "LEVEL_BREAKPOINT": 100,
    "SPAWN_X": None,
    "SPAWN_Y": -1,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}

LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'


def setup_logging(level=None):
    """Configure the root logger once for the whole game."""
    level = level or CONFIG["LOG_LEVEL"]
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO),
                        format=LOG_FORMAT, datefmt='%H:%M:%S')
