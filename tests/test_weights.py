import pytest

from spinwheel.wheel.segments import DEFAULT_SEGMENTS, Segment, SegmentKind
from spinwheel.wheel.weights import WeightRules, compute_probabilities


def test_default_wheel_before_threshold():
    weights = compute_probabilities(DEFAULT_SEGMENTS, 0)

    assert weights[3] == 0.0
    assert weights[4] == 25.0
    assert weights[0] == pytest.approx(25 * 75 / 85)
    assert weights[1] == pytest.approx(35 * 75 / 85)
    assert weights[2] == pytest.approx(25 * 75 / 85)
    assert sum(weights) == pytest.approx(100.0)


def test_default_wheel_from_threshold_on():
    weights = compute_probabilities(DEFAULT_SEGMENTS, 20)

    assert weights[3] == 6.0
    assert weights[4] == 25.0
    assert weights[1] == pytest.approx(35 * 69 / 85)
    assert sum(weights) == pytest.approx(100.0)


@pytest.mark.parametrize("count,expected", [(0, 0.0), (19, 0.0), (20, 6.0), (21, 6.0), (500, 6.0)])
def test_subscription_gate(count, expected):
    assert compute_probabilities(DEFAULT_SEGMENTS, count)[3] == expected


@pytest.mark.parametrize("count", range(0, 45, 3))
def test_vector_shape_and_sum(count):
    weights = compute_probabilities(DEFAULT_SEGMENTS, count)

    assert len(weights) == len(DEFAULT_SEGMENTS)
    assert all(w >= 0 for w in weights)
    assert sum(weights) == pytest.approx(100.0)


def test_task_ratios_are_preserved():
    weights = compute_probabilities(DEFAULT_SEGMENTS, 30)
    assert weights[1] / weights[0] == pytest.approx(35 / 25)
    assert weights[0] == pytest.approx(weights[2])


def test_no_task_weight_gives_zero_tasks():
    segments = [
        Segment("a", "#000000", SegmentKind.TASK, base_weight=0),
        Segment("b", "#000000", SegmentKind.FIXED, fixed_pct=40),
    ]
    assert compute_probabilities(segments, 0) == [0.0, 40.0]


def test_all_zero_inputs():
    segments = [
        Segment("a", "#000000", SegmentKind.TASK),
        Segment("b", "#000000", SegmentKind.SUBSCRIPTION),
    ]
    assert compute_probabilities(segments, 0) == [0.0, 0.0]


def test_fixed_over_total_clamps_remaining():
    segments = [
        Segment("a", "#000000", SegmentKind.TASK, base_weight=10),
        Segment("b", "#000000", SegmentKind.FIXED, fixed_pct=70),
        Segment("c", "#000000", SegmentKind.FIXED, fixed_pct=50),
    ]
    assert compute_probabilities(segments, 0) == [0.0, 70.0, 50.0]


def test_custom_rules():
    rules = WeightRules(subscription_threshold=2, subscription_pct=10.0)
    assert compute_probabilities(DEFAULT_SEGMENTS, 1, rules)[3] == 0.0
    weights = compute_probabilities(DEFAULT_SEGMENTS, 2, rules)
    assert weights[3] == 10.0
    assert sum(weights) == pytest.approx(100.0)


def test_negative_weights_rejected():
    with pytest.raises(ValueError):
        Segment("a", "#000000", SegmentKind.TASK, base_weight=-1)
    with pytest.raises(ValueError):
        Segment("a", "#000000", SegmentKind.FIXED, fixed_pct=-0.5)


def test_segment_rgb():
    assert DEFAULT_SEGMENTS[0].rgb == (0xFF, 0x8A, 0x3D)
