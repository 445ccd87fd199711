# session.py
"""Session controller: the ready/running/paused/over state machine around one GameState."""
from typing import Callable, List, Optional
import logging

import numpy as np  # type: ignore

from .config import CFG, Config, Difficulty, DEFAULT_DIFFICULTY, parse_difficulty
from .game import (
    GameState, Snapshot, Status, StepResult,
    advance, get_speed_ms, new_game_state, snapshot,
)
from .pacer import FramePacer

logger = logging.getLogger(__name__)

RenderCallback = Callable[[Snapshot], None]


class Session:
    """
    Owns the current GameState, the FramePacer that drives it and the
    best-score store. Only RUNNING lets the pacer call `advance()`.
    """

    def __init__(
        self,
        store,
        cfg: Config = CFG,
        difficulty: Difficulty = DEFAULT_DIFFICULTY,
        rng: Optional[np.random.Generator] = None,
    ):
        self.store = store
        self.cfg = cfg
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)
        self.difficulty = parse_difficulty(difficulty)
        self.pacer = FramePacer(tick=self.tick, interval=self.interval, render=self.render)
        self.renderers: List[RenderCallback] = []
        self._unrendered: Optional[StepResult] = None
        self.state: Optional[GameState] = None
        self.state = self._fresh_state()
        self.ticket: Optional[int] = None

    # ---------- Lifecycle ----------
    def _fresh_state(self) -> GameState:
        best = self.store.get()
        if self.state is not None:
            # an unreadable store must not lower the record mid-process
            best = max(best, self.state.best_score)
        return new_game_state(
            cfg=self.cfg,
            rng=self.rng,
            best_score=best,
            difficulty=self.difficulty,
        )

    @property
    def status(self) -> Status:
        return self.state.status

    def start(self) -> None:
        """Ready/Paused -> Running; from Over, start a fresh game and run it."""
        if self.state.status is Status.RUNNING:
            return
        if self.state.status is Status.OVER:
            self.state = self._fresh_state()
        resumed = self.state.status is Status.PAUSED
        self.state.status = Status.RUNNING
        self.ticket = self.pacer.start()
        logger.info("Game %s", "resumed" if resumed else "started")
        self.render()

    def pause(self) -> None:
        if self.state.status is not Status.RUNNING:
            return
        self.pacer.stop()
        self.state.status = Status.PAUSED
        logger.info("Game paused at score %d", self.state.score)
        self.render()

    def toggle(self) -> None:
        if self.state.status is Status.RUNNING:
            self.pause()
        else:
            self.start()

    def restart(self) -> None:
        """Throw the current game away and wait in Ready."""
        self.pacer.stop()
        self.state = self._fresh_state()
        logger.info("Game restarted")
        self.render()

    def game_over(self, result: StepResult) -> None:
        self.pacer.stop()
        self.state.status = Status.OVER
        cause = result.collision.value if result.collision is not None else "unknown"
        logger.info("Game over (%s) with score %d", cause, self.state.score)

    # ---------- Commands ----------
    def set_difficulty(self, value) -> Difficulty:
        self.difficulty = parse_difficulty(value)
        self.state.difficulty = self.difficulty
        logger.info("Difficulty set to %s", self.difficulty.value)
        self.render()
        return self.difficulty

    def accepts_input(self) -> bool:
        return self.state.status is not Status.OVER

    # ---------- Pacer hooks ----------
    def interval(self) -> float:
        return get_speed_ms(self.state)

    def tick(self) -> StepResult:
        result = advance(self.state)
        self._unrendered = result
        if result.new_best:
            self.store.set(self.state.best_score)
            logger.info("New best score %d", self.state.best_score)
        if not result.alive:
            self.game_over(result)
        return result

    def frame(self, timestamp: float, ticket: Optional[int] = None) -> bool:
        """Offer one frame to the pacer; a ticket taken before a stop or restart no longer ticks."""
        return self.pacer.on_frame(timestamp, ticket)

    def render(self) -> None:
        if not self.renderers:
            return
        snap = snapshot(self.state, self._unrendered)
        self._unrendered = None
        for cb in self.renderers:
            cb(snap)

    def add_renderer(self, cb: RenderCallback) -> None:
        self.renderers.append(cb)
