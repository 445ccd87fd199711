# game.py
"""Simulation core: the snake, food, score and level, advanced one tick at a time."""
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Optional, Tuple
import logging

import numpy as np  # type: ignore

from .config import CFG, Config, Difficulty, DEFAULT_DIFFICULTY, RIGHT
from .grid import Direction, Position, empty_cells, in_bounds, is_opposite, moved

logger = logging.getLogger(__name__)


class Status(str, Enum):
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


class Collision(str, Enum):
    WALL = "wall"
    SELF = "self"


# ---------- Helpers ----------
def spawn_food(snake, cfg: Config, rng: np.random.Generator) -> Optional[Position]:
    """Pick a uniformly random free cell, or None when the board is full."""
    free = empty_cells(snake, cfg.cols, cfg.rows)
    if not free:
        return None
    return free[int(rng.integers(len(free)))]


# ---------- State ----------
@dataclass
class GameState:
    snake: Deque[Position]          # tail first, head last
    direction: Direction            # confirmed on the last tick
    pending: Direction              # intent, resolved on the next tick
    food: Optional[Position]
    score: int = 0
    best_score: int = 0
    level: int = 1
    eaten: int = 0
    difficulty: Difficulty = DEFAULT_DIFFICULTY
    status: Status = Status.READY
    cfg: Config = CFG
    rng: np.random.Generator = field(default_factory=np.random.default_rng, repr=False)

    @property
    def head(self) -> Position:
        return self.snake[-1]


@dataclass(frozen=True)
class StepResult:
    alive: bool
    collision: Optional[Collision] = None
    ate: bool = False
    leveled_up: bool = False
    new_best: bool = False


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a GameState handed to renderers."""
    snake: Tuple[Position, ...]
    direction: Direction
    food: Optional[Position]
    score: int
    best_score: int
    level: int
    difficulty: Difficulty
    status: Status
    interval_ms: float
    speed_label: str
    cols: int
    rows: int
    leveled_up: bool = False


def new_game_state(
    cfg: Config = CFG,
    rng: Optional[np.random.Generator] = None,
    best_score: int = 0,
    difficulty: Difficulty = DEFAULT_DIFFICULTY,
) -> GameState:
    if rng is None:
        rng = np.random.default_rng(cfg.seed)
    cx, cy = cfg.cols // 2, cfg.rows // 2
    snake = deque([(cx - 1, cy), (cx, cy)])
    return GameState(
        snake=snake,
        direction=RIGHT,
        pending=RIGHT,
        food=spawn_food(snake, cfg, rng),
        score=0,
        best_score=best_score,
        level=1,
        eaten=0,
        difficulty=difficulty,
        status=Status.READY,
        cfg=cfg,
        rng=rng,
    )


# ---------- Speed ----------
def get_speed_ms(state: GameState) -> float:
    """Tick interval for the current level and difficulty."""
    cfg = state.cfg
    base = max(cfg.min_speed_ms, cfg.base_speed_ms - (state.level - 1) * cfg.speed_step_ms)
    return base / state.difficulty.factor


def speed_multiplier(state: GameState) -> float:
    return state.cfg.base_speed_ms / get_speed_ms(state)


def speed_label(state: GameState) -> str:
    return f"{speed_multiplier(state):.1f}x · {state.difficulty.label}"


# ---------- Update ----------
def advance(state: GameState) -> StepResult:
    """
    Advance the game by one tick.
    Collisions are reported on the result; the snake is left untouched when one occurs.
    """
    if state.status is not Status.RUNNING:
        return StepResult(alive=state.status is not Status.OVER)

    # The intent may have been queued before the last tick committed a turn
    if is_opposite(state.pending, state.direction):
        state.pending = state.direction
    direction = state.pending

    new_head = moved(state.head, direction)

    # Wall collision
    if not in_bounds(new_head, state.cfg.cols, state.cfg.rows):
        return StepResult(alive=False, collision=Collision.WALL)

    # Self collision, tail included even though it would move away
    if new_head in state.snake:
        return StepResult(alive=False, collision=Collision.SELF)

    ate = new_head == state.food
    state.snake.append(new_head)
    if not ate:
        state.snake.popleft()
        state.direction = direction
        return StepResult(alive=True)

    cfg = state.cfg
    state.score += cfg.food_score
    state.eaten += 1

    new_best = state.score > state.best_score
    if new_best:
        state.best_score = state.score

    leveled_up = False
    if state.eaten % cfg.food_for_level_up == 0:
        level = min(cfg.max_level, state.level + 1)
        # pulses on every milestone, max level included
        leveled_up = True
        if level != state.level:
            logger.info("Level %d reached", level)
        state.level = level

    state.food = spawn_food(state.snake, cfg, state.rng)
    state.direction = direction
    return StepResult(alive=True, ate=True, leveled_up=leveled_up, new_best=new_best)


def snapshot(state: GameState, result: Optional[StepResult] = None) -> Snapshot:
    return Snapshot(
        snake=tuple(state.snake),
        direction=state.direction,
        food=state.food,
        score=state.score,
        best_score=state.best_score,
        level=state.level,
        difficulty=state.difficulty,
        status=state.status,
        interval_ms=get_speed_ms(state),
        speed_label=speed_label(state),
        cols=state.cfg.cols,
        rows=state.cfg.rows,
        leveled_up=bool(result and result.leveled_up),
    )
