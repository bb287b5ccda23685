"""Weighted random selection."""

import random
from typing import Optional, Sequence


def weighted_random_index(
    weights: Sequence[float],
    rng: Optional[random.Random] = None,
) -> int:
    """Pick an index with probability proportional to its weight.

    Returns the first index whose cumulative weight exceeds a uniform draw
    in [0, total). Falls back to the last index when the total is zero or
    rounding leaves nothing selected.

    Raises:
        ValueError: If weights is empty
    """
    if not weights:
        raise ValueError("Cannot select from an empty weight vector")

    rng = rng or random
    total = sum(weights)
    r = rng.random() * total

    acc = 0.0
    for i, weight in enumerate(weights):
        acc += weight
        if r < acc:
            return i

    return len(weights) - 1
