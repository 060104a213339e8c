# render.py
from typing import Tuple
import pygame # type: ignore

from src.snake.config import (
    Config, BG, GREEN, RED, TEXT, FONT_SIZE,
    START_TEXT, PAUSED_TEXT, DEAD_TEXT, WON_TEXT,
)
from src.snake.game import Phase, Snapshot

STATUS_TEXT = {
    Phase.NOT_STARTED: START_TEXT,
    Phase.PAUSED: PAUSED_TEXT,
    Phase.DEAD: DEAD_TEXT,
    Phase.WON: WON_TEXT,
}


def status_text(phase: Phase) -> str:
    """HUD line under the score; empty while the game is running."""
    return STATUS_TEXT.get(phase, "")


class Renderer:
    """Draws a Snapshot onto a pygame surface. Holds no game state."""

    def __init__(self, surface: pygame.Surface, cfg: Config, font: pygame.font.Font):
        self.surface = surface
        self.cfg = cfg
        self.font = font

    def draw_cell(self, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
        size = self.cfg.cell_size
        rect = pygame.Rect(gx * size, gy * size, size, size)
        pygame.draw.rect(self.surface, color, rect)

    def draw_centered_text(self, text: str, y: int) -> None:
        txt = self.font.render(text, True, TEXT)
        self.surface.blit(txt, txt.get_rect(center=(self.surface.get_width() // 2, y)))

    def draw(self, snap: Snapshot) -> None:
        self.surface.fill(BG)
        # apple
        self.draw_cell(snap.apple.x, snap.apple.y, RED)
        # snake
        for x, y in snap.snake_body:
            self.draw_cell(x, y, GREEN)
        # HUD
        self.draw_centered_text(f"Score: {snap.score}", 18)
        msg = status_text(snap.phase)
        if msg:
            self.draw_centered_text(msg, 44)
