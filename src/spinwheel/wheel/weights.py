"""Weight model: per-segment selection probabilities.

Fixed segments keep their configured percentage, the subscription segment
is worth 0 or ``subscription_pct`` depending on the spin counter, and task
segments split whatever is left in proportion to their base weights.
"""

from dataclasses import dataclass
from typing import Sequence
import logging

from spinwheel.wheel.segments import Segment, SegmentKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeightRules:
    """Counter-dependent rules for the weight model."""

    subscription_threshold: int = 20
    subscription_pct: float = 6.0
    total_pct: float = 100.0

    def subscription_share(self, spin_count: int) -> float:
        """Percentage assigned to subscription segments for this counter."""
        return self.subscription_pct if spin_count >= self.subscription_threshold else 0.0


def compute_probabilities(
    segments: Sequence[Segment],
    spin_count: int,
    rules: WeightRules = WeightRules(),
) -> list[float]:
    """Compute the probability vector for the current spin.

    Args:
        segments: Wheel segments in declaration order
        spin_count: Completed spins so far
        rules: Threshold and percentages

    Returns:
        One non-negative value per segment
    """
    sub = rules.subscription_share(spin_count)
    fixed_total = sum(s.fixed_pct for s in segments if s.kind == SegmentKind.FIXED)
    remaining = max(0.0, rules.total_pct - fixed_total - sub)

    base_sum = sum(s.base_weight for s in segments if s.kind == SegmentKind.TASK)
    scale = remaining / base_sum if base_sum > 0 else 0.0

    weights = []
    for segment in segments:
        if segment.kind == SegmentKind.FIXED:
            weights.append(float(segment.fixed_pct))
        elif segment.kind == SegmentKind.SUBSCRIPTION:
            weights.append(float(sub))
        else:
            weights.append(segment.base_weight * scale)

    logger.debug(f"Probabilities at spin {spin_count}: {[round(w, 2) for w in weights]}")
    return weights
