"""Screen layout shared by the window (drawing) and the app (hit testing)."""

from dataclasses import dataclass
from typing import NamedTuple


class Box(NamedTuple):
    """Axis-aligned rectangle in window pixels."""
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height


@dataclass(frozen=True)
class Layout:
    """Positions of every interactive element."""

    wheel: Box
    hub_radius: float
    dialog: Box
    close_button: Box

    @property
    def wheel_center(self) -> tuple[float, float]:
        return self.wheel.center

    def hub_contains(self, px: float, py: float) -> bool:
        """True if the point is on the spin button in the wheel hub."""
        cx, cy = self.wheel_center
        return (px - cx) ** 2 + (py - cy) ** 2 <= self.hub_radius ** 2


def compute_layout(window_width: int, window_height: int, canvas_size: int) -> Layout:
    """Centre the wheel and the result dialog in the window."""
    wheel = Box(
        (window_width - canvas_size) / 2,
        (window_height - canvas_size) / 2,
        canvas_size,
        canvas_size,
    )

    dialog_w = min(420, window_width - 40)
    dialog_h = 200
    dialog = Box(
        (window_width - dialog_w) / 2,
        (window_height - dialog_h) / 2,
        dialog_w,
        dialog_h,
    )

    close_w, close_h = 120, 40
    close_button = Box(
        dialog.x + (dialog_w - close_w) / 2,
        dialog.y + dialog_h - close_h - 20,
        close_w,
        close_h,
    )

    return Layout(
        wheel=wheel,
        hub_radius=canvas_size * 0.12,
        dialog=dialog,
        close_button=close_button,
    )
