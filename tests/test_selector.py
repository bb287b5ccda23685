import random
from collections import Counter

import pytest

from spinwheel.wheel.segments import DEFAULT_SEGMENTS
from spinwheel.wheel.selector import weighted_random_index
from spinwheel.wheel.weights import compute_probabilities


def test_empty_weights_raise():
    with pytest.raises(ValueError):
        weighted_random_index([])


def test_all_zero_falls_back_to_last():
    assert weighted_random_index([0, 0, 0], random.Random(1)) == 2


def test_single_positive_weight_always_wins(rng):
    for _ in range(200):
        assert weighted_random_index([0, 5, 0], rng) == 1


def test_zero_weight_entries_are_skipped(fixed_random):
    # r lands exactly on the boundary after index 0
    assert weighted_random_index([10, 0, 10], fixed_random(0.5)) == 2


@pytest.mark.parametrize("value,expected", [
    (0.0, 0),
    (0.19, 0),
    (0.2, 1),
    (0.3, 1),
    (0.999999, 4),
])
def test_cumulative_order(fixed_random, value, expected):
    weights = [20, 20, 20, 20, 20]
    assert weighted_random_index(weights, fixed_random(value)) == expected


def test_draw_at_total_falls_back_to_last(fixed_random):
    assert weighted_random_index([1, 1], fixed_random(1.0)) == 1


def test_distribution_matches_probabilities():
    weights = compute_probabilities(DEFAULT_SEGMENTS, 25)
    rng = random.Random(42)
    draws = 40_000
    counts = Counter(weighted_random_index(weights, rng) for _ in range(draws))

    for index, weight in enumerate(weights):
        assert counts[index] / draws * 100 == pytest.approx(weight, abs=1.0)


def test_subscription_never_drawn_before_threshold():
    weights = compute_probabilities(DEFAULT_SEGMENTS, 0)
    rng = random.Random(7)
    assert all(weighted_random_index(weights, rng) != 3 for _ in range(5000))


@pytest.mark.parametrize("weights,expected", [
    ([100, 0, 0, 0, 0], 0),
    ([0, 0, 0, 0, 100], 4),
])
def test_all_weight_on_one_slice(rng, weights, expected):
    assert {weighted_random_index(weights, rng) for _ in range(500)} == {expected}
