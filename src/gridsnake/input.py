# input.py
"""Funnels keys, on-screen buttons and swipes into direction intents and session commands."""
from typing import Callable, Optional, Tuple
import logging

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT, Difficulty
from .game import Status
from .grid import DIRECTIONS, Direction, is_opposite

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: UP,    pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}

KEY_DIFFICULTY = {
    pygame.K_1: Difficulty.EASY,
    pygame.K_2: Difficulty.NORMAL,
    pygame.K_3: Difficulty.HARD,
    pygame.K_4: Difficulty.HELL,
}


def classify_swipe(dx: float, dy: float, min_dist: float) -> Optional[Direction]:
    """Dominant-axis direction of a drag, or None for a tap shorter than min_dist on both axes."""
    if abs(dx) < min_dist and abs(dy) < min_dist:
        return None
    if abs(dx) > abs(dy):
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP


class InputRouter:
    """Single entry point for every input source; only stages `pending`, never moves the snake."""

    def __init__(self, session, button_at: Optional[Callable[[Tuple[int, int]], Optional[str]]] = None):
        self.session = session
        self.button_at = button_at
        self.touch_start: Optional[Tuple[int, int]] = None

    def set_direction(self, direction: Direction) -> bool:
        if not self.session.accepts_input():
            return False
        state = self.session.state
        if is_opposite(direction, state.direction):
            logger.debug("Ignoring reverse turn %s while heading %s", direction, state.direction)
            return False
        state.pending = direction
        return True

    def _autostart(self) -> None:
        if self.session.status in (Status.READY, Status.PAUSED):
            self.session.start()

    # ---------- Sources ----------
    def handle_key(self, key: int) -> bool:
        """Returns False when the key asks to quit."""
        if key == pygame.K_ESCAPE:
            return False
        if key in KEY_DIRECTIONS:
            self.set_direction(KEY_DIRECTIONS[key])
        elif key == pygame.K_SPACE:
            self.session.toggle()
        elif key == pygame.K_r:
            self.session.restart()
        elif key in KEY_DIFFICULTY:
            self.session.set_difficulty(KEY_DIFFICULTY[key])
        return True

    def press_button(self, name: str) -> None:
        if name in DIRECTIONS:
            self.set_direction(DIRECTIONS[name])
            self._autostart()
        elif name == "start":
            self.session.start()
        elif name == "pause":
            self.session.pause()
        elif name == "restart":
            self.session.restart()
        else:
            logger.debug("Unknown button %r", name)

    def touch_down(self, pos: Tuple[int, int]) -> None:
        self.touch_start = pos

    def touch_up(self, pos: Tuple[int, int]) -> None:
        if self.touch_start is None:
            return
        sx, sy = self.touch_start
        self.touch_start = None
        direction = classify_swipe(pos[0] - sx, pos[1] - sy, self.session.cfg.min_swipe_dist)
        if direction is None:
            self.session.toggle()
            return
        logger.debug("Swipe classified as %s", direction)
        self.set_direction(direction)
        self._autostart()

    # ---------- pygame ----------
    def handle_event(self, event) -> bool:
        """Dispatch one pygame event. Returns False to quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            return self.handle_key(event.key)
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            name = self.button_at(event.pos) if self.button_at is not None else "board"
            if name == "board":
                self.touch_down(event.pos)
            elif name is not None:
                self.press_button(name)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.touch_up(event.pos)
        return True
