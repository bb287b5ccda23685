"""Application wiring: session, presentation and input handling.

Everything here is independent of pygame. The window turns pygame input
into bus events and asks the app for frames; tests drive the same API
with a manual clock.
"""

from typing import Optional, Tuple
import logging
import random

import numpy as np
from numpy.typing import NDArray

from config.themes import Theme, load_theme
from spinwheel.animation.scheduler import FrameScheduler
from spinwheel.core.events import Event, EventBus, EventType
from spinwheel.core.session import WheelSession
from spinwheel.graphics.renderer import WheelRenderer
from spinwheel.persistence.store import CounterStore, JsonFileStore
from spinwheel.presentation.effects import EffectsLayer
from spinwheel.presentation.layout import Layout, compute_layout
from spinwheel.presentation.modal import ModalHit, ResultModal

logger = logging.getLogger(__name__)


class SpinWheelApp:
    """Wires a WheelSession to the modal, effects and renderer.

    Input arrives as events on the bus (SPIN_PRESS, CLOSE_PRESS, ESCAPE,
    POINTER_CLICK) or through the ``handle_*`` methods directly.
    """

    def __init__(
        self,
        settings,
        store: Optional[CounterStore] = None,
        scheduler: Optional[FrameScheduler] = None,
        event_bus: Optional[EventBus] = None,
        renderer: Optional[WheelRenderer] = None,
        theme: Optional[Theme] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings
        self.theme = theme or load_theme(settings.theme, settings.themes_path)
        self.scheduler = scheduler or FrameScheduler()
        self.event_bus = event_bus or EventBus()
        store = store if store is not None else JsonFileStore(settings.state_file)

        self.session = WheelSession.from_settings(
            settings, store, self.scheduler, event_bus=self.event_bus, rng=rng
        )

        display = settings.display
        self.layout: Layout = compute_layout(
            display.window_width, display.window_height, display.canvas_size
        )
        self.modal = ResultModal(self.layout, self.event_bus)
        self.effects = EffectsLayer.from_settings(self.scheduler, settings.effects, rng=rng)
        self._renderer = renderer

        self._last_tick: Optional[float] = None
        self._frame_key: Optional[Tuple[float, Optional[int]]] = None
        self._frame: Optional[NDArray[np.uint8]] = None
        self._running = True

        self._setup_event_handlers()

    def _setup_event_handlers(self) -> None:
        bus = self.event_bus
        bus.subscribe(EventType.SPIN_PRESS, lambda e: self.handle_spin_press())
        bus.subscribe(EventType.CLOSE_PRESS, lambda e: self.handle_close_press())
        bus.subscribe(EventType.ESCAPE, lambda e: self.handle_escape())
        bus.subscribe(EventType.POINTER_CLICK, self._on_pointer_click)
        bus.subscribe(EventType.SPIN_SETTLING, self._on_spin_settling)
        bus.subscribe(EventType.SHUTDOWN, lambda e: self.stop())

    @property
    def renderer(self) -> WheelRenderer:
        """Wheel renderer, created on first use (loads fonts)."""
        if self._renderer is None:
            self._renderer = WheelRenderer.from_settings(
                self.session.segments,
                self.settings.display,
                label_color=self.theme.colors.to_rgb("label"),
            )
        return self._renderer

    @property
    def running(self) -> bool:
        return self._running

    @property
    def spin_enabled(self) -> bool:
        """Spin control is disabled while a spin is in progress."""
        return not self.session.is_spinning

    def stop(self) -> None:
        logger.info("Shutdown requested")
        self._running = False

    # Input
    def handle_spin_press(self) -> Optional[int]:
        return self.session.spin()

    def handle_close_press(self) -> bool:
        return self.session.dismiss_result(via="close")

    def handle_escape(self) -> bool:
        """Dismiss the result if shown.

        Returns:
            True if the escape was consumed
        """
        if not self.modal.visible:
            return False
        return self.session.dismiss_result(via="escape")

    def handle_click(self, x: float, y: float) -> None:
        """Route a pointer click to the dialog or the spin button."""
        if self.modal.visible:
            hit = self.modal.hit_test(x, y)
            if hit == ModalHit.CLOSE:
                self.session.dismiss_result(via="close")
            elif hit == ModalHit.OUTSIDE:
                self.session.dismiss_result(via="outside")
            return

        if self.layout.hub_contains(x, y):
            self.handle_spin_press()

    def _on_pointer_click(self, event: Event) -> None:
        x, y = event.data.get("pos", (-1, -1))
        self.handle_click(x, y)

    def _on_spin_settling(self, event: Event) -> None:
        self.effects.celebrate()

    # Frame loop
    def update(self, now_ms: float) -> None:
        """Advance time: run due callbacks and age effects."""
        delta = 0.0 if self._last_tick is None else max(0.0, now_ms - self._last_tick)
        self._last_tick = now_ms

        self.scheduler.tick(now_ms)
        self.effects.update(delta)

    def frame(self) -> NDArray[np.uint8]:
        """Current wheel image, re-rendered only when it changed."""
        key = (self.session.rotation, self.session.highlight_index)
        if self._frame is None or key != self._frame_key:
            self._frame = self.renderer.render(*key)
            self._frame_key = key
        return self._frame
