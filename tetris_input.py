"""Keyboard -> engine commands"""
import pygame
from tetris_engine import GameState, Tetris

KEYDOWN_COMMANDS = {
    pygame.K_LEFT: "move_left",
    pygame.K_RIGHT: "move_right",
    pygame.K_UP: "rotate",
    pygame.K_DOWN: "soft_drop_begin",
    pygame.K_p: "toggle_pause",
}
KEYUP_COMMANDS = {
    pygame.K_DOWN: "soft_drop_end",
}

def can_start(game: Tetris) -> bool:
    return game.state in (GameState.NOT_STARTED, GameState.GAME_OVER)

def handle_event(game: Tetris, e) -> bool:
    """Dispatch one pygame event. Returns True if it was consumed."""
    if e.type == pygame.KEYDOWN:
        if e.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            if can_start(game):
                game.start()
            return True
        cmd = KEYDOWN_COMMANDS.get(e.key)
    elif e.type == pygame.KEYUP:
        cmd = KEYUP_COMMANDS.get(e.key)
    else:
        return False
    if cmd is None:
        return False
    getattr(game, cmd)()
    return True
