"""Graphics module: wheel rendering and label layout."""

from spinwheel.graphics.renderer import WheelRenderer, label_needs_flip, overlay_blend
from spinwheel.graphics.text import break_into_lines, load_font

__all__ = [
    "WheelRenderer",
    "label_needs_flip",
    "overlay_blend",
    "break_into_lines",
    "load_font",
]
