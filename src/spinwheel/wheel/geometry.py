"""Slice geometry and rotation targeting.

Angles are radians measured clockwise on screen from the 3 o'clock
direction, so the pointer at the top of the wheel sits at -pi/2.
"""

import math

TAU = math.pi * 2
POINTER_UP = -math.pi / 2


def normalize_angle(angle: float) -> float:
    """Wrap an angle into [0, 2*pi)."""
    angle = math.fmod(angle, TAU)
    if angle < 0:
        angle += TAU
    # fmod of a tiny negative can round up to exactly TAU
    return 0.0 if angle >= TAU else angle


def slice_angle(count: int) -> float:
    """Angular size of one of ``count`` equal slices."""
    if count <= 0:
        raise ValueError("Wheel needs at least one segment")
    return TAU / count


def slice_center(index: int, count: int) -> float:
    """Unrotated angle of the centre of slice ``index``."""
    size = slice_angle(count)
    return index * size + size / 2


def target_rotation(
    index: int,
    count: int,
    current: float,
    pointer_angle: float = POINTER_UP,
    extra_turns: int = 6,
) -> float:
    """Rotation that lands slice ``index`` under the pointer.

    The result is always ahead of ``current`` by ``extra_turns`` full turns
    plus the minimal forward delta needed for alignment.
    """
    center = slice_center(index, count)
    delta = normalize_angle(pointer_angle - (center + math.fmod(current, TAU)))
    return current + TAU * extra_turns + delta


def index_at_pointer(
    rotation: float,
    count: int,
    pointer_angle: float = POINTER_UP,
) -> int:
    """Index of the slice currently under the pointer."""
    local = normalize_angle(pointer_angle - rotation)
    return min(count - 1, int(local // slice_angle(count)))
