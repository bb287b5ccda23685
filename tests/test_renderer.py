import dataclasses
import math

import numpy as np
import pytest

from spinwheel.graphics.renderer import WheelRenderer, label_needs_flip, overlay_blend
from spinwheel.graphics.text import break_into_lines, load_font
from spinwheel.wheel.geometry import slice_center
from spinwheel.wheel.segments import DEFAULT_SEGMENTS


def char_width(text: str) -> float:
    return len(text) * 10


class TestBreakIntoLines:

    def test_fits_on_one_line(self):
        assert break_into_lines("Plank 2 min", 200, char_width) == ["Plank 2 min"]

    def test_wraps_greedily(self):
        assert break_into_lines("Pushups 30, girls 15", 100, char_width) == [
            "Pushups", "30, girls", "15",
        ]

    def test_overlong_word_keeps_own_line(self):
        assert break_into_lines("a extraordinarily b", 50, char_width) == [
            "a", "extraordinarily", "b",
        ]

    def test_exact_fit_stays_on_line(self):
        assert break_into_lines("abcd efgh", 90, char_width) == ["abcd efgh"]

    def test_empty_text(self):
        assert break_into_lines("", 100, char_width) == []
        assert break_into_lines("   ", 100, char_width) == []


@pytest.mark.parametrize("angle,expected", [
    (0.1, False),
    (math.pi / 2, False),
    (math.pi / 2 + 0.01, True),
    (math.pi, True),
    (math.pi * 1.5 - 0.01, True),
    (math.pi * 1.5, False),
    (-math.pi, True),
])
def test_label_needs_flip(angle, expected):
    assert label_needs_flip(angle) is expected


def test_overlay_blend():
    base = np.array([0.0, 0.25, 0.5, 1.0], dtype=np.float32)
    assert np.allclose(overlay_blend(base, 1.0), [0.0, 0.5, 1.0, 1.0])
    assert np.allclose(overlay_blend(base, 0.5), base)


@pytest.fixture(scope="module")
def renderer():
    return WheelRenderer(DEFAULT_SEGMENTS, size=200, font=load_font(12))


@pytest.fixture(scope="module")
def bare_renderer():
    """Same wheel without labels, for pixel checks."""
    segments = [dataclasses.replace(s, label="") for s in DEFAULT_SEGMENTS]
    return WheelRenderer(segments, size=200, font=load_font(12))


def pixel_at(frame, renderer, angle, ratio=0.85):
    r = renderer.radius * ratio
    x = int(renderer.radius + math.cos(angle) * r)
    y = int(renderer.radius + math.sin(angle) * r)
    return frame[y, x].astype(int)


def test_frame_shape_and_transparent_corners(renderer):
    frame = renderer.render()

    assert frame.shape == (200, 200, 4)
    assert frame.dtype == np.uint8
    assert frame[0, 0, 3] == 0
    assert frame[199, 199, 3] == 0
    assert frame[100, 100, 3] == 255


def test_slices_use_segment_colors(bare_renderer):
    renderer = bare_renderer
    frame = renderer.render()
    count = len(DEFAULT_SEGMENTS)

    for i, segment in enumerate(DEFAULT_SEGMENTS):
        px = pixel_at(frame, renderer, slice_center(i, count), ratio=0.22)
        # Little shading this close to the centre
        assert np.allclose(px[:3], segment.rgb, atol=8)


def test_rim_is_darker_than_center(bare_renderer):
    renderer = bare_renderer
    frame = renderer.render()
    angle = slice_center(0, len(DEFAULT_SEGMENTS))
    inner = pixel_at(frame, renderer, angle, ratio=0.15)
    outer = pixel_at(frame, renderer, angle, ratio=0.95)
    assert outer[:3].sum() < inner[:3].sum()


def test_highlight_brightens_only_its_slice(bare_renderer):
    renderer = bare_renderer
    count = len(DEFAULT_SEGMENTS)
    plain = renderer.render()
    lit = renderer.render(highlight_index=2)

    lit_px = pixel_at(lit, renderer, slice_center(2, count))
    plain_px = pixel_at(plain, renderer, slice_center(2, count))
    assert lit_px[:3].sum() > plain_px[:3].sum()

    other = slice_center(0, count)
    assert np.array_equal(pixel_at(lit, renderer, other), pixel_at(plain, renderer, other))


def test_out_of_range_highlight_is_ignored(renderer):
    assert np.array_equal(renderer.render(highlight_index=99), renderer.render())


def test_rotation_is_clockwise(bare_renderer):
    renderer = bare_renderer
    count = len(DEFAULT_SEGMENTS)
    plain = renderer.render()
    turned = renderer.render(rotation=math.pi / 2)

    center = slice_center(0, count)
    before = pixel_at(plain, renderer, center, ratio=0.3)
    after = pixel_at(turned, renderer, center + math.pi / 2, ratio=0.3)
    assert np.allclose(before[:3], after[:3], atol=16)


def test_full_turns_match_unrotated(renderer):
    assert np.array_equal(renderer.render(rotation=math.pi * 4), renderer.render())


def test_label_width_and_wrapping(renderer):
    expected = 2 * renderer.radius * 0.55 * math.sin(math.pi / len(DEFAULT_SEGMENTS)) - 20
    assert renderer.label_max_width == pytest.approx(expected)

    for segment in DEFAULT_SEGMENTS:
        lines = renderer.wrap_label(segment.label)
        assert " ".join(lines) == segment.label


def test_empty_segments_rejected():
    with pytest.raises(ValueError):
        WheelRenderer([], size=64, font=load_font(10))


def test_label_origin_is_centred_on_label_radius(renderer):
    # Slice 0 is centred below and right of the hub
    mid = renderer.slice_angle / 2
    x, y = renderer.label_origin(mid, 40, 20)
    cx = renderer.radius + math.cos(mid) * renderer.label_radius
    cy = renderer.radius + math.sin(mid) * renderer.label_radius
    assert abs(x + 20 - cx) <= 1
    assert abs(y + 10 - cy) <= 1


def test_label_past_canvas_edge_is_clipped():
    # Labels on the rim of a tiny wheel overhang the canvas
    renderer = WheelRenderer(
        DEFAULT_SEGMENTS, size=64, label_radius_ratio=0.95, label_padding=0, font=load_font(12),
    )
    top = 3 * math.pi / 2
    x, y = renderer.label_origin(top, 40, 28)
    assert y < 0

    frame = renderer.render()
    assert frame.shape == (64, 64, 4)
