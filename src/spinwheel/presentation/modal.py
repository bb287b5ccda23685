"""Result dialog shown when a spin lands."""

from enum import Enum
from typing import Optional
import logging

from spinwheel.core.events import Event, EventBus, EventType
from spinwheel.presentation.layout import Layout

logger = logging.getLogger(__name__)


class ModalHit(Enum):
    """Where a click landed relative to the dialog."""
    CLOSE = "close"
    INSIDE = "inside"
    OUTSIDE = "outside"


class ResultModal:
    """Visibility and hit testing for the result dialog.

    Follows the session through the event bus: shown on RESULT_SHOWN,
    hidden on RESULT_DISMISSED.
    """

    def __init__(self, layout: Layout, event_bus: EventBus):
        self.layout = layout
        self.visible = False
        self.text: str = ""
        self.focus: Optional[str] = None  # "close" while open, "spin" after

        event_bus.subscribe(EventType.RESULT_SHOWN, self._on_result_shown)
        event_bus.subscribe(EventType.RESULT_DISMISSED, self._on_result_dismissed)

    def show(self, text: str) -> None:
        self.text = text
        self.visible = True
        self.focus = "close"
        logger.debug(f"Result modal shown: {text}")

    def hide(self) -> None:
        self.visible = False
        self.focus = "spin"

    def hit_test(self, x: float, y: float) -> ModalHit:
        if self.layout.close_button.contains(x, y):
            return ModalHit.CLOSE
        if self.layout.dialog.contains(x, y):
            return ModalHit.INSIDE
        return ModalHit.OUTSIDE

    def _on_result_shown(self, event: Event) -> None:
        self.show(event.data.get("label", ""))

    def _on_result_dismissed(self, event: Event) -> None:
        self.hide()
