"""Frame and timer scheduling driven by explicit clock ticks.

The host loop calls ``tick(now_ms)`` once per displayed frame. Frame
callbacks requested before a tick run exactly once on that tick; delayed
callbacks run on the first tick at or after their due time. Nothing here
reads a real clock, so tests can advance time deterministically.
"""

from typing import Callable, List, Tuple
import heapq
import itertools
import logging

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]
TimerCallback = Callable[[], None]


class FrameScheduler:
    """Cooperative scheduler for per-frame and delayed callbacks."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = start_ms
        self._frames: List[FrameCallback] = []
        self._timers: List[Tuple[float, int, TimerCallback]] = []
        self._seq = itertools.count()

    @property
    def now(self) -> float:
        """Time of the last tick in milliseconds."""
        return self._now

    @property
    def pending_frames(self) -> int:
        return len(self._frames)

    @property
    def pending_timers(self) -> int:
        return len(self._timers)

    @property
    def idle(self) -> bool:
        """True when nothing is waiting to run."""
        return not self._frames and not self._timers

    def request_frame(self, callback: FrameCallback) -> None:
        """Run ``callback(now_ms)`` on the next tick."""
        self._frames.append(callback)

    def call_later(self, delay_ms: float, callback: TimerCallback) -> None:
        """Run ``callback()`` once ``delay_ms`` has elapsed."""
        due = self._now + max(0.0, delay_ms)
        heapq.heappush(self._timers, (due, next(self._seq), callback))

    def tick(self, now_ms: float) -> None:
        """Advance the clock and run everything that is due."""
        if now_ms < self._now:
            logger.warning(f"Clock went backwards: {self._now} -> {now_ms}")
            now_ms = self._now
        self._now = now_ms

        # Frames requested while running go to the next tick
        frames, self._frames = self._frames, []
        for callback in frames:
            callback(now_ms)

        while self._timers and self._timers[0][0] <= now_ms:
            _, _, callback = heapq.heappop(self._timers)
            callback()

    def advance(self, delta_ms: float) -> None:
        """Tick ``delta_ms`` after the previous tick."""
        self.tick(self._now + delta_ms)

    def run_until_idle(self, frame_ms: float = 1000 / 60, max_ticks: int = 100_000) -> int:
        """Tick at a fixed frame interval until nothing is pending.

        Returns:
            Number of ticks run
        """
        ticks = 0
        while not self.idle:
            if ticks >= max_ticks:
                raise RuntimeError(f"Scheduler still busy after {max_ticks} ticks")
            self.advance(frame_ms)
            ticks += 1
        return ticks

    def clear(self) -> None:
        """Drop every pending callback."""
        self._frames.clear()
        self._timers.clear()
