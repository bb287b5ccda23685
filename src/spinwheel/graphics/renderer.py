"""Wheel renderer.

Draws equal slices (slice size never reflects probability), radial
shading, an optional highlight and wrapped labels, then rotates the whole
wheel. Output is an RGBA numpy array ready to blit.
"""

from typing import Dict, Optional, Sequence, Tuple
import logging
import math

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageDraw, ImageFont

from spinwheel.graphics.text import break_into_lines, load_font
from spinwheel.wheel.geometry import TAU, normalize_angle, slice_angle
from spinwheel.wheel.segments import Segment

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]

# Shading: transparent at 20% radius, 35% black at the rim
SHADE_INNER = 0.2
SHADE_ALPHA = 0.35

# Highlight: white at 35% with an overlay blend
HIGHLIGHT_ALPHA = 0.35


def label_needs_flip(mid_angle: float) -> bool:
    """True when a label at ``mid_angle`` would read upside-down."""
    mid_angle = normalize_angle(mid_angle)
    return math.pi / 2 < mid_angle < math.pi * 1.5


def overlay_blend(base: NDArray[np.float32], top: float) -> NDArray[np.float32]:
    """Overlay blend of a constant ``top`` onto ``base`` (values 0..1)."""
    return np.where(
        base < 0.5,
        2 * base * top,
        1 - 2 * (1 - base) * (1 - top),
    )


class WheelRenderer:
    """Renders wheel frames for a fixed segment list.

    The unrotated wheel is cached per highlight index; each frame only
    rotates the cached layer.
    """

    def __init__(
        self,
        segments: Sequence[Segment],
        size: int = 500,
        font_size: int = 18,
        line_height: int = 20,
        label_radius_ratio: float = 0.55,
        label_padding: int = 20,
        label_color: Color = (15, 18, 24),
        font: Optional[ImageFont.ImageFont] = None,
    ):
        if not segments:
            raise ValueError("Wheel needs at least one segment")

        self.segments = tuple(segments)
        self.size = size
        self.radius = size / 2
        self.line_height = line_height
        self.label_radius = self.radius * label_radius_ratio
        self.label_padding = label_padding
        self.label_color = label_color
        self.font = font or load_font(font_size)

        self._layers: Dict[Optional[int], Buffer] = {}
        self._distance, self._angle = self._polar_grid()

    @classmethod
    def from_settings(
        cls,
        segments: Sequence[Segment],
        display,
        label_color: Color = (15, 18, 24),
    ) -> "WheelRenderer":
        """Build a renderer from ``DisplaySettings``."""
        return cls(
            segments,
            size=display.canvas_size,
            font_size=display.font_size,
            line_height=display.line_height,
            label_radius_ratio=display.label_radius_ratio,
            label_padding=display.label_padding,
            label_color=label_color,
        )

    @property
    def slice_angle(self) -> float:
        return slice_angle(len(self.segments))

    @property
    def label_max_width(self) -> float:
        """Chord width available to a label at the label radius."""
        return 2 * self.label_radius * math.sin(self.slice_angle / 2) - self.label_padding

    def wrap_label(self, label: str) -> list[str]:
        """Lines a label is drawn with."""
        return break_into_lines(label, self.label_max_width, self.font.getlength)

    def render(self, rotation: float = 0.0, highlight_index: Optional[int] = None) -> Buffer:
        """Render one frame.

        Args:
            rotation: Wheel rotation in radians, clockwise on screen
            highlight_index: Slice to highlight, if any

        Returns:
            RGBA buffer of shape (size, size, 4)
        """
        layer = self._layer(highlight_index)

        turn = math.fmod(rotation, TAU)
        if abs(turn) < 1e-9:
            return layer.copy()

        # PIL rotates counter-clockwise for positive angles
        rotated = Image.fromarray(layer).rotate(
            -math.degrees(turn),
            resample=Image.Resampling.BILINEAR,
            center=(self.radius, self.radius),
        )
        return np.asarray(rotated, dtype=np.uint8).copy()

    def clear_cache(self) -> None:
        self._layers.clear()

    def _layer(self, highlight_index: Optional[int]) -> Buffer:
        if highlight_index is not None and not 0 <= highlight_index < len(self.segments):
            logger.warning(f"Highlight index {highlight_index} out of range, ignoring")
            highlight_index = None

        if highlight_index not in self._layers:
            self._layers[highlight_index] = self._draw_wheel(highlight_index)
        return self._layers[highlight_index]

    def _polar_grid(self) -> Tuple[NDArray[np.float32], NDArray[np.float32]]:
        """Per-pixel distance from centre and clockwise angle in [0, 2*pi)."""
        coords = np.arange(self.size, dtype=np.float32) + 0.5 - self.radius
        dx = coords[np.newaxis, :]
        dy = coords[:, np.newaxis]
        distance = np.sqrt(dx ** 2 + dy ** 2)
        angle = np.mod(np.arctan2(dy, dx), TAU)
        return distance, angle

    def _draw_wheel(self, highlight_index: Optional[int]) -> Buffer:
        """Slices, shading, highlight and labels without rotation."""
        img = Image.new("RGBA", (self.size, self.size), (0, 0, 0, 0))
        draw = ImageDraw.Draw(img)
        bbox = [0, 0, self.size - 1, self.size - 1]
        step = math.degrees(self.slice_angle)

        for i, segment in enumerate(self.segments):
            draw.pieslice(bbox, i * step, (i + 1) * step, fill=segment.rgb + (255,))

        pixels = np.asarray(img, dtype=np.float32) / 255.0
        rgb = pixels[..., :3]
        inside = self._distance <= self.radius

        # Radial shading towards the rim
        inner = self.radius * SHADE_INNER
        shade = np.clip((self._distance - inner) / (self.radius - inner), 0.0, 1.0) * SHADE_ALPHA
        rgb *= (1.0 - shade * inside)[..., np.newaxis]

        if highlight_index is not None:
            start = highlight_index * self.slice_angle
            mask = inside & (self._angle >= start) & (self._angle < start + self.slice_angle)
            blended = rgb * (1 - HIGHLIGHT_ALPHA) + overlay_blend(rgb, 1.0) * HIGHLIGHT_ALPHA
            rgb[mask] = blended[mask]

        shaded = Image.fromarray((pixels * 255).round().astype(np.uint8))
        for i, segment in enumerate(self.segments):
            self._draw_label(shaded, i, segment.label)

        return np.asarray(shaded, dtype=np.uint8).copy()

    def _draw_label(self, img: Image.Image, index: int, label: str) -> None:
        lines = self.wrap_label(label)
        if not lines:
            return

        mid = index * self.slice_angle + self.slice_angle / 2
        width = int(max(self.font.getlength(line) for line in lines)) + 8
        height = len(lines) * self.line_height + 8

        block = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        block_draw = ImageDraw.Draw(block)
        total_height = (len(lines) - 1) * self.line_height
        for idx, line in enumerate(lines):
            y = height / 2 + idx * self.line_height - total_height / 2
            block_draw.text(
                (width / 2, y), line, fill=self.label_color + (255,),
                font=self.font, anchor="mm",
            )

        if label_needs_flip(mid):
            block = block.rotate(180)

        x, y = self.label_origin(mid, width, height)
        if x + width <= 0 or y + height <= 0 or x >= img.width or y >= img.height:
            return
        # Parts of the block past the canvas edge are clipped, not shifted
        img.alpha_composite(
            block,
            dest=(max(0, x), max(0, y)),
            source=(max(0, -x), max(0, -y)),
        )

    def label_origin(self, mid: float, width: int, height: int) -> tuple[int, int]:
        """Top-left corner of a label block centred on the label radius."""
        cx = self.radius + math.cos(mid) * self.label_radius
        cy = self.radius + math.sin(mid) * self.label_radius
        return int(round(cx - width / 2)), int(round(cy - height / 2))
