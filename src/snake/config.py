from dataclasses import dataclass
from typing import Optional

# ----- Window & grid -----
WIDTH, HEIGHT = 400, 400
CELL_SIZE = 20
GRID_W, GRID_H = WIDTH // CELL_SIZE, HEIGHT // CELL_SIZE

# ----- Colors -----
BG    = (0, 0, 0)
GREEN = (0, 255, 0)
DARK_GREEN = (0, 180, 0)
RED   = (255, 0, 0)
TEXT  = (255, 255, 255)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)
DIRECTION_NAMES = {UP: "up", DOWN: "down", LEFT: "left", RIGHT: "right"}

# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    seed: Optional[int] = None
    move_period: float = 0.2           # seconds per move
    fps: int = 60                      # host frame cap; movement gated by move_period
    max_food_attempts: Optional[int] = 1_000  # None = retry forever
    debug: bool = False

CFG = Config()
