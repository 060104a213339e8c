# controls.py
from typing import Callable, Optional
import pygame # type: ignore

from src.snake.geometry import Direction
from src.snake.game import Game

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,       pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,   pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,   pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT, pygame.K_d: Direction.RIGHT,
}


def handle_key(game: Game, key: int) -> bool:
    """Translate one key press into a game signal. Return False to quit."""
    if key == pygame.K_ESCAPE:
        return False
    if key == pygame.K_SPACE:
        game.press_space()
    elif key in KEY_DIRECTIONS:
        game.set_pending_heading(KEY_DIRECTIONS[key])
    return True


def handle_input(game: Game, on_key: Optional[Callable[[Game], None]] = None) -> bool:
    """Process pending pygame events. Return False to quit.

    `on_key` runs after every key press, e.g. to log the phase it left behind.
    """
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if not handle_key(game, event.key):
                return False
            if on_key is not None:
                on_key(game)
    return True
