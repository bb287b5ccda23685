"""Label text layout for wheel slices."""

from pathlib import Path
from typing import Callable, List
import logging

from PIL import ImageFont

logger = logging.getLogger(__name__)

# Semi-bold/bold faces first, closest to the wheel's label weight
FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
    "/usr/share/fonts/TTF/DejaVuSans-Bold.ttf",
    "/System/Library/Fonts/Supplemental/Arial Bold.ttf",
    "/Library/Fonts/Arial Bold.ttf",
    "C:/Windows/Fonts/arialbd.ttf",
]


def break_into_lines(
    text: str,
    max_width: float,
    measure: Callable[[str], float],
) -> List[str]:
    """Greedy word wrap by measured width.

    A word joins the current line unless the joined line is wider than
    ``max_width`` and the current line already has content. A single word
    wider than ``max_width`` keeps a line of its own.

    Args:
        text: Text to wrap
        max_width: Maximum line width in pixels
        measure: Returns the rendered width of a string

    Returns:
        List of wrapped lines
    """
    lines: List[str] = []
    current = ""

    for word in text.split():
        test = f"{current} {word}" if current else word
        if measure(test) > max_width and current:
            lines.append(current)
            current = word
        else:
            current = test

    if current:
        lines.append(current)

    return lines


def load_font(size: int) -> ImageFont.FreeTypeFont:
    """Load a bold TrueType font, falling back to Pillow's bundled face."""
    for font_path in FONT_CANDIDATES:
        if Path(font_path).exists():
            try:
                font = ImageFont.truetype(font_path, size)
                logger.debug(f"Font loaded: {font_path} (size {size})")
                return font
            except OSError as e:
                logger.warning(f"Could not load {font_path}: {e}")

    logger.info(f"No system bold font found, using Pillow default (size {size})")
    return ImageFont.load_default(size=size)
