# config.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging

logger = logging.getLogger(__name__)

# ----- Window & layout -----
CELL_SIZE = 24
HUD_H = 40        # score / best / speed strip above the board
CONTROLS_H = 72   # button bar below the board
FLASH_MS = 140    # level-up border pulse

# ----- Colors -----
BG        = (224, 247, 255)
GRID_LINE = (200, 214, 224)
SNAKE     = (34, 197, 94)
HEAD      = (11, 114, 133)
FOOD      = (249, 115, 22)
TEXT      = (17, 24, 39)
PANEL     = (30, 41, 59)
PANEL_TXT = (226, 232, 240)
BUTTON    = (51, 65, 85)
FLASH     = (248, 113, 113)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)


# ----- Difficulty -----
class Difficulty(str, Enum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"
    HELL = "hell"

    @property
    def factor(self) -> float:
        return SPEED_FACTORS[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()


SPEED_FACTORS = {
    Difficulty.EASY: 1.0,
    Difficulty.NORMAL: 1.4,
    Difficulty.HARD: 2.0,
    Difficulty.HELL: 3.0,
}

DEFAULT_DIFFICULTY = Difficulty.NORMAL


def parse_difficulty(value) -> Difficulty:
    """Map a selector value onto a Difficulty; unknown values fall back to NORMAL."""
    if isinstance(value, Difficulty):
        return value
    try:
        return Difficulty(str(value).strip().lower())
    except ValueError:
        logger.warning("Unknown difficulty %r, using %s", value, DEFAULT_DIFFICULTY.value)
        return DEFAULT_DIFFICULTY


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass(frozen=True)
class Config:
    cols: int = 20
    rows: int = 20
    base_speed_ms: int = 220
    speed_step_ms: int = 18     # interval lost per level
    min_speed_ms: int = 80
    max_level: int = 8
    food_score: int = 10
    food_for_level_up: int = 5
    min_swipe_dist: int = 24
    seed: Optional[int] = None  # set for reproducible food placement


CFG = Config()
