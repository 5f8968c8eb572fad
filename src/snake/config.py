from dataclasses import dataclass
from typing import Optional

# ----- Grid & canvas -----
GRID_SIZE = 20
CELL_SIZE = 15
CANVAS_SIZE = GRID_SIZE * CELL_SIZE

# ----- Window layout (canvas + control panel underneath) -----
PADDING = 16
PANEL_H = 56
BUTTON_SIZE = 40

# ----- Colors -----
SNAKE_COLOR = (76, 175, 80)    # #4CAF50
FOOD_COLOR  = (255, 87, 34)    # #FF5722
CANVAS_BG   = (255, 255, 255)
WINDOW_BG   = (243, 244, 246)
BORDER      = (209, 213, 219)
TEXT        = (17, 24, 39)
PAUSE_BTN   = (59, 130, 246)
RESTART_BTN = (34, 197, 94)
ICON        = (255, 255, 255)

# ----- Directions (dx, dy) -----
UP, RIGHT, DOWN, LEFT = (0, -1), (1, 0), (0, 1), (-1, 0)

# ----- Timing -----
TICK_MS = 100

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None     # None -> unseeded food placement
    tick_ms: int = TICK_MS
    grid_size: int = GRID_SIZE
    debug: bool = False            # per-tick trace lines

    def __post_init__(self):
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")
        if self.grid_size < 2:
            raise ValueError(f"grid_size must be at least 2, got {self.grid_size}")

CFG = Config()
