"""Spin animation: eased interpolation of the wheel rotation over time."""

from dataclasses import dataclass
from typing import Callable, Optional
import logging

from spinwheel.animation.easing import Easing, interpolate
from spinwheel.animation.scheduler import FrameScheduler
from spinwheel.wheel.geometry import normalize_angle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpinAnimation:
    """Rotation from ``start`` to ``end`` over ``duration_ms``."""

    start: float
    end: float
    duration_ms: float = 5000.0
    easing: Easing | str = Easing.EASE_OUT_CUBIC

    def progress(self, elapsed_ms: float) -> float:
        """Normalized time (0.0 to 1.0)."""
        if self.duration_ms <= 0:
            return 1.0
        return max(0.0, min(1.0, elapsed_ms / self.duration_ms))

    def rotation_at(self, elapsed_ms: float) -> float:
        """Eased rotation after ``elapsed_ms``."""
        return interpolate(self.start, self.end, self.progress(elapsed_ms), self.easing)


class SpinAnimator:
    """Drives a SpinAnimation one frame at a time.

    Each frame reports the current rotation through ``on_frame``. When the
    animation reaches its end, the rotation is wrapped into [0, 2*pi) and
    handed to ``on_complete``. A running spin cannot be cancelled.
    """

    def __init__(self, scheduler: FrameScheduler) -> None:
        self._scheduler = scheduler
        self._animation: Optional[SpinAnimation] = None
        self._started_at: float = 0.0
        self._on_frame: Optional[Callable[[float], None]] = None
        self._on_complete: Optional[Callable[[float], None]] = None
        self._frames: int = 0

    @property
    def is_running(self) -> bool:
        return self._animation is not None

    @property
    def frames_rendered(self) -> int:
        """Frames delivered for the current (or last) spin."""
        return self._frames

    def start(
        self,
        animation: SpinAnimation,
        on_frame: Callable[[float], None],
        on_complete: Callable[[float], None],
    ) -> None:
        """Begin animating on the next frame."""
        if self._animation is not None:
            raise RuntimeError("Spin animation already running")

        self._animation = animation
        self._started_at = self._scheduler.now
        self._on_frame = on_frame
        self._on_complete = on_complete
        self._frames = 0

        logger.debug(
            f"Animating {animation.start:.3f} -> {animation.end:.3f} rad "
            f"over {animation.duration_ms:.0f}ms"
        )
        self._scheduler.request_frame(self._step)

    def _step(self, now_ms: float) -> None:
        animation = self._animation
        elapsed = now_ms - self._started_at
        t = animation.progress(elapsed)
        rotation = animation.rotation_at(elapsed)

        self._frames += 1
        self._on_frame(rotation)

        if t < 1:
            self._scheduler.request_frame(self._step)
            return

        on_complete = self._on_complete
        self._animation = None
        self._on_frame = None
        self._on_complete = None
        logger.debug(f"Spin animation finished after {self._frames} frames")
        on_complete(normalize_angle(rotation))
