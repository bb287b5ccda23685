"""Animation module: easing, frame scheduling and the spin animator."""

from spinwheel.animation.easing import Easing, get_easing, interpolate, interpolate_color
from spinwheel.animation.scheduler import FrameScheduler
from spinwheel.animation.animator import SpinAnimation, SpinAnimator

__all__ = [
    # Easing
    "Easing",
    "get_easing",
    "interpolate",
    "interpolate_color",
    # Scheduling
    "FrameScheduler",
    # Spin
    "SpinAnimation",
    "SpinAnimator",
]
