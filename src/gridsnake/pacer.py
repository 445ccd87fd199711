# pacer.py
"""Turns a stream of frame timestamps into fixed-interval simulation ticks."""
from typing import Callable, Optional


class FramePacer:
    """
    Fires `tick` then `render` whenever at least `interval()` ms have passed
    since the previous tick. The interval is re-read on every frame, so level
    or difficulty changes apply from the next qualifying tick.

    `start()` and `stop()` each bump `generation`; a frame delivered with an
    older ticket is ignored, so nothing scheduled before a pause, game over
    or restart can tick afterwards.
    """

    def __init__(
        self,
        tick: Callable[[], object],
        interval: Callable[[], float],
        render: Optional[Callable[[], None]] = None,
    ):
        self.tick = tick
        self.interval = interval
        self.render = render
        self.active = False
        self.generation = 0
        self.last_tick: Optional[float] = None

    def start(self) -> int:
        """Begin pacing; timing restarts so a resume never fast-forwards."""
        self.generation += 1
        self.active = True
        self.last_tick = None
        return self.generation

    def stop(self) -> None:
        if self.active:
            self.generation += 1
        self.active = False

    def on_frame(self, timestamp: float, ticket: Optional[int] = None) -> bool:
        """Handle one rendering opportunity. Returns True if a tick fired."""
        if not self.active:
            return False
        if ticket is not None and ticket != self.generation:
            return False

        if self.last_tick is None:
            self.last_tick = timestamp
        if timestamp - self.last_tick < self.interval():
            return False

        self.tick()
        if self.render is not None:
            self.render()
        self.last_tick = timestamp
        return True
