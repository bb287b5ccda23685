"""Celebration effects: confetti and the flash ring.

Each piece and ring removes itself on a timer once its lifetime is over.
Nothing carries over between spins.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import logging
import math
import random

from spinwheel.animation.easing import Easing, interpolate, interpolate_color
from spinwheel.animation.scheduler import FrameScheduler
from spinwheel.wheel.segments import hex_to_rgb

logger = logging.getLogger(__name__)

DEFAULT_CONFETTI_COLORS = ("#ffcf33", "#ff8a3d", "#ff2d55", "#38f9d7", "#ffffff")


@dataclass
class ConfettiPiece:
    """A single falling confetti piece."""

    color: Tuple[int, int, int]
    left: float             # horizontal position, 0.0 to 1.0 of the area width
    delay_ms: float         # wait before falling
    duration_ms: float      # time to fall through the area
    spin_speed: float = 360.0  # degrees per second
    age: float = 0.0

    @property
    def progress(self) -> float:
        """Fall progress (0.0 before the delay ends, 1.0 at the bottom)."""
        if self.duration_ms <= 0:
            return 1.0
        return max(0.0, min(1.0, (self.age - self.delay_ms) / self.duration_ms))

    @property
    def started(self) -> bool:
        return self.age >= self.delay_ms

    def update(self, delta_ms: float) -> None:
        self.age += delta_ms

    def position(self, width: float, height: float) -> Tuple[float, float, float]:
        """Current (x, y, angle_degrees) inside a width x height area."""
        t = self.progress
        sway = math.sin(t * math.pi * 4) * 8
        x = self.left * width + sway
        y = interpolate(-10, height + 10, t, Easing.EASE_IN_QUAD)
        angle = (self.age - self.delay_ms) / 1000 * self.spin_speed if self.started else 0.0
        return x, y, angle


@dataclass
class FlashRing:
    """Expanding ring around the wheel rim."""

    duration_ms: float = 1100.0
    age: float = 0.0
    color_start: Tuple[int, int, int] = (255, 255, 255)
    color_end: Tuple[int, int, int] = (255, 207, 51)

    @property
    def progress(self) -> float:
        if self.duration_ms <= 0:
            return 1.0
        return min(1.0, self.age / self.duration_ms)

    def update(self, delta_ms: float) -> None:
        self.age += delta_ms

    @property
    def scale(self) -> float:
        """Radius multiplier relative to the wheel radius."""
        return interpolate(1.0, 1.18, self.progress, Easing.EASE_OUT_CUBIC)

    @property
    def alpha(self) -> float:
        return 1.0 - self.progress

    @property
    def color(self) -> Tuple[int, int, int]:
        return interpolate_color(self.color_start, self.color_end, self.progress)


class EffectsLayer:
    """Owns the live confetti pieces and flash rings."""

    def __init__(
        self,
        scheduler: FrameScheduler,
        confetti_count: int = 40,
        confetti_lifetime_ms: float = 5000.0,
        flash_ring_ms: float = 1100.0,
        colors: Sequence[str] = DEFAULT_CONFETTI_COLORS,
        rng: Optional[random.Random] = None,
    ):
        self._scheduler = scheduler
        self.confetti_count = confetti_count
        self.confetti_lifetime_ms = confetti_lifetime_ms
        self.flash_ring_ms = flash_ring_ms
        self.colors = [hex_to_rgb(c) for c in colors]
        self._rng = rng or random.Random()

        self.confetti: List[ConfettiPiece] = []
        self.rings: List[FlashRing] = []

    @classmethod
    def from_settings(cls, scheduler: FrameScheduler, effects, rng=None) -> "EffectsLayer":
        """Build from ``EffectsSettings``."""
        return cls(
            scheduler,
            confetti_count=effects.confetti_count,
            confetti_lifetime_ms=effects.confetti_lifetime_ms,
            flash_ring_ms=effects.flash_ring_ms,
            colors=effects.confetti_colors,
            rng=rng,
        )

    @property
    def active(self) -> bool:
        return bool(self.confetti or self.rings)

    def celebrate(self) -> None:
        """Flash ring plus a confetti burst."""
        self.flash()
        self.spawn_confetti()

    def flash(self) -> FlashRing:
        ring = FlashRing(duration_ms=self.flash_ring_ms)
        self.rings.append(ring)
        self._scheduler.call_later(self.flash_ring_ms, lambda: self._remove(self.rings, ring))
        return ring

    def spawn_confetti(self) -> List[ConfettiPiece]:
        rng = self._rng
        pieces = []
        for _ in range(self.confetti_count):
            piece = ConfettiPiece(
                color=rng.choice(self.colors),
                left=rng.random(),
                delay_ms=rng.random() * 200,
                duration_ms=3000 + rng.random() * 1500,
                spin_speed=rng.uniform(-360, 360),
            )
            self.confetti.append(piece)
            self._scheduler.call_later(
                self.confetti_lifetime_ms,
                lambda p=piece: self._remove(self.confetti, p),
            )
            pieces.append(piece)

        logger.debug(f"Spawned {len(pieces)} confetti pieces")
        return pieces

    def update(self, delta_ms: float) -> None:
        """Age every live effect."""
        for piece in self.confetti:
            piece.update(delta_ms)
        for ring in self.rings:
            ring.update(delta_ms)

    def clear(self) -> None:
        self.confetti.clear()
        self.rings.clear()

    @staticmethod
    def _remove(items: list, item) -> None:
        # Identity match: equal-valued pieces are still distinct pieces
        for i, existing in enumerate(items):
            if existing is item:
                del items[i]
                return
