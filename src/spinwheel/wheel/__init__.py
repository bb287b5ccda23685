"""Wheel model: segments, weights, selection and geometry."""

from spinwheel.wheel.segments import Segment, SegmentKind, DEFAULT_SEGMENTS, hex_to_rgb
from spinwheel.wheel.weights import WeightRules, compute_probabilities
from spinwheel.wheel.selector import weighted_random_index
from spinwheel.wheel.geometry import (
    TAU,
    POINTER_UP,
    normalize_angle,
    slice_angle,
    slice_center,
    target_rotation,
    index_at_pointer,
)

__all__ = [
    "Segment",
    "SegmentKind",
    "DEFAULT_SEGMENTS",
    "hex_to_rgb",
    "WeightRules",
    "compute_probabilities",
    "weighted_random_index",
    "TAU",
    "POINTER_UP",
    "normalize_angle",
    "slice_angle",
    "slice_center",
    "target_rotation",
    "index_at_pointer",
]
