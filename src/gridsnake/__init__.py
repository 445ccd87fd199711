"""Grid snake: a real-time snake game on a fixed board."""

from .config import CFG, Config, Difficulty, parse_difficulty
from .game import (
    Collision, GameState, Snapshot, Status, StepResult,
    advance, get_speed_ms, new_game_state, snapshot, spawn_food,
)
from .pacer import FramePacer
from .session import Session
from .storage import BestScoreStore, MemoryScoreStore

__all__ = [
    "CFG", "Config", "Difficulty", "parse_difficulty",
    "Collision", "GameState", "Snapshot", "Status", "StepResult",
    "advance", "get_speed_ms", "new_game_state", "snapshot", "spawn_food",
    "FramePacer", "Session", "BestScoreStore", "MemoryScoreStore",
]
