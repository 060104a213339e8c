from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Colors -----
BG    = (0, 0, 0)
GREEN = (0, 128, 0)
RED   = (255, 0, 0)
TEXT  = (0, 255, 66)

FONT_SIZE = 24

# ----- HUD text -----
START_TEXT  = "Welcome to snake, press SPACE to start."
PAUSED_TEXT = "Paused, press SPACE to resume."
DEAD_TEXT   = "You died, press SPACE to start again."
WON_TEXT    = "Board full, you win! Press SPACE to play again."

# ----- Tunables -----
@dataclass
class Config:
    board_w: int = 40           # cells
    board_h: int = 40           # cells
    cell_size: int = 15         # pixels per cell
    tick_rate: int = 15         # simulation steps per second
    render_fps: int = 60        # frame cap for the pygame loop
    seed: Optional[int] = None
    debug: bool = False

    def __post_init__(self):
        for name in ("board_w", "board_h", "cell_size", "tick_rate", "render_fps"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")

    @property
    def window_size(self) -> Tuple[int, int]:
        return self.board_w * self.cell_size, self.board_h * self.cell_size
