"""Wheel segment definitions.

Segments are drawn as equal slices in declaration order. Their selection
probability comes from the weight model, not from the slice size.
"""

from dataclasses import dataclass
from enum import Enum


class SegmentKind(Enum):
    """How a segment contributes to the probability vector."""

    TASK = "task"                  # shares the remainder by base weight
    SUBSCRIPTION = "subscription"  # gated by the spin counter
    FIXED = "fixed"                # always its fixed percentage


@dataclass(frozen=True)
class Segment:
    """One labeled slice of the wheel."""

    label: str
    color: str
    kind: SegmentKind
    base_weight: float = 0.0
    fixed_pct: float = 0.0

    def __post_init__(self) -> None:
        if self.base_weight < 0:
            raise ValueError(f"Segment {self.label!r}: base_weight must be >= 0")
        if self.fixed_pct < 0:
            raise ValueError(f"Segment {self.label!r}: fixed_pct must be >= 0")

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Segment color as an RGB tuple."""
        return hex_to_rgb(self.color)


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """Convert '#rrggbb' to an RGB tuple."""
    hex_color = color.lstrip("#")
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


DEFAULT_SEGMENTS: tuple[Segment, ...] = (
    Segment("Pushups 30, girls 15", "#ff8a3d", SegmentKind.TASK, base_weight=25),
    Segment("Plank 2 min", "#ffcf33", SegmentKind.TASK, base_weight=35),
    Segment("Squats 50, girls 60", "#38f9d7", SegmentKind.TASK, base_weight=25),
    Segment("YouTube + Music Subscription", "#ff2d55", SegmentKind.SUBSCRIPTION),
    Segment("Pushups 60, girls 30", "#7a8597", SegmentKind.FIXED, fixed_pct=25),
)
