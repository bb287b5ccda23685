"""Easing curves for the spin and the celebration effects.

Every curve maps normalized time t in [0, 1] to normalized progress with
f(0) == 0 and f(1) == 1. The spin uses a decelerating curve so the wheel
coasts into the pointer; confetti falls with an accelerating one.
"""

from enum import Enum
from typing import Callable
import math

EasingFunc = Callable[[float], float]


class Easing(Enum):
    """Named curves, selectable from settings by their lowercase name."""

    LINEAR = "linear"
    EASE_IN_QUAD = "ease_in_quad"
    EASE_OUT_QUAD = "ease_out_quad"
    EASE_OUT_CUBIC = "ease_out_cubic"
    EASE_OUT_QUART = "ease_out_quart"
    EASE_OUT_EXPO = "ease_out_expo"
    EASE_OUT_SINE = "ease_out_sine"


def _ease_out_expo(t: float) -> float:
    # 2^-10t never quite reaches zero
    return 1.0 if t >= 1.0 else 1.0 - 2.0 ** (-10.0 * t)


_CURVES: dict[Easing, EasingFunc] = {
    Easing.LINEAR: lambda t: t,
    Easing.EASE_IN_QUAD: lambda t: t * t,
    Easing.EASE_OUT_QUAD: lambda t: 1.0 - (1.0 - t) ** 2,
    Easing.EASE_OUT_CUBIC: lambda t: 1.0 - (1.0 - t) ** 3,
    Easing.EASE_OUT_QUART: lambda t: 1.0 - (1.0 - t) ** 4,
    Easing.EASE_OUT_EXPO: _ease_out_expo,
    Easing.EASE_OUT_SINE: lambda t: math.sin(t * math.pi / 2),
}


def get_easing(easing: Easing | str) -> EasingFunc:
    """Resolve an easing curve.

    Args:
        easing: Easing member or its name, e.g. "ease_out_cubic"

    Raises:
        ValueError: If the name is not a known curve
    """
    if not isinstance(easing, Easing):
        try:
            easing = Easing(str(easing).lower())
        except ValueError:
            raise ValueError(f"Unknown easing function: {easing}") from None
    return _CURVES[easing]


def interpolate(start: float, end: float, t: float, easing: Easing | str = Easing.LINEAR) -> float:
    """Value between ``start`` and ``end`` at eased time ``t`` (clamped to [0, 1])."""
    t = min(1.0, max(0.0, t))
    return start + (end - start) * get_easing(easing)(t)


def interpolate_color(
    start: tuple[int, int, int],
    end: tuple[int, int, int],
    t: float,
    easing: Easing | str = Easing.LINEAR,
) -> tuple[int, int, int]:
    """Blend two RGB colors channel by channel."""
    return tuple(int(interpolate(a, b, t, easing)) for a, b in zip(start, end))
