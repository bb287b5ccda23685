"""Wheel session: one object owning the spin counter, rotation and state.

A spin runs through the state machine as

    IDLE -> SPINNING -> SETTLING -> RESULT_SHOWN -> IDLE

Spin requests are ignored while SPINNING or SETTLING. A request made while
a result is shown dismisses it first. The counter increments when the result
is shown, which is also when the busy flag clears.
"""

from dataclasses import dataclass
from typing import Optional, Sequence
import logging
import random

from spinwheel.animation.animator import SpinAnimation, SpinAnimator
from spinwheel.animation.easing import get_easing
from spinwheel.animation.scheduler import FrameScheduler
from spinwheel.core.events import Event, EventBus, EventType
from spinwheel.core.state import StateMachine, StateContext, WheelState
from spinwheel.persistence.store import CounterStore, SpinCounter
from spinwheel.wheel.geometry import POINTER_UP, index_at_pointer, target_rotation
from spinwheel.wheel.segments import DEFAULT_SEGMENTS, Segment
from spinwheel.wheel.selector import weighted_random_index
from spinwheel.wheel.weights import WeightRules, compute_probabilities

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpinConfig:
    """Animation parameters for a spin."""

    extra_turns: int = 6
    duration_ms: float = 5000.0
    settle_delay_ms: float = 650.0
    pointer_angle: float = POINTER_UP
    easing: str = "ease_out_cubic"


class WheelSession:
    """Spin flow for one wheel.

    Args:
        store: Where the spin counter is persisted
        scheduler: Frame/timer scheduler driving the animation
        event_bus: Receives session events (a private bus is created if omitted)
        segments: Wheel segments in visual order
        rules: Weight model rules
        spin_config: Animation parameters
        rng: Random source for selection
    """

    def __init__(
        self,
        store: CounterStore,
        scheduler: FrameScheduler,
        event_bus: Optional[EventBus] = None,
        segments: Sequence[Segment] = DEFAULT_SEGMENTS,
        rules: WeightRules = WeightRules(),
        spin_config: SpinConfig = SpinConfig(),
        rng: Optional[random.Random] = None,
    ):
        if not segments:
            raise ValueError("Wheel needs at least one segment")
        get_easing(spin_config.easing)

        self._segments = tuple(segments)
        self._rules = rules
        self._config = spin_config
        self._rng = rng or random.Random()
        self._scheduler = scheduler
        self._event_bus = event_bus or EventBus()

        self._counter = SpinCounter(store)
        self._machine = StateMachine()
        self._animator = SpinAnimator(scheduler)
        self._rotation: float = 0.0
        self._highlight: Optional[int] = None

        logger.info(
            f"Wheel session ready: {len(self._segments)} segments, "
            f"{self._counter.value} spins so far"
        )

    @classmethod
    def from_settings(
        cls,
        settings,
        store: CounterStore,
        scheduler: FrameScheduler,
        event_bus: Optional[EventBus] = None,
        rng: Optional[random.Random] = None,
    ) -> "WheelSession":
        """Build a session from ``config.settings.Settings``."""
        wheel = settings.wheel
        return cls(
            store=store,
            scheduler=scheduler,
            event_bus=event_bus,
            rules=WeightRules(
                subscription_threshold=wheel.subscription_threshold,
                subscription_pct=wheel.subscription_pct,
            ),
            spin_config=SpinConfig(
                extra_turns=wheel.extra_turns,
                duration_ms=wheel.spin_duration_ms,
                settle_delay_ms=wheel.settle_delay_ms,
                pointer_angle=wheel.pointer_angle,
                easing=wheel.easing,
            ),
            rng=rng,
        )

    # Accessors
    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def spin_count(self) -> int:
        """Completed spins, including previous runs."""
        return self._counter.value

    @property
    def rotation(self) -> float:
        """Current wheel rotation in radians."""
        return self._rotation

    @property
    def state(self) -> WheelState:
        return self._machine.state

    @property
    def context(self) -> StateContext:
        return self._machine.context

    @property
    def is_spinning(self) -> bool:
        """Busy flag: a spin is animating or settling."""
        return self._machine.state in (WheelState.SPINNING, WheelState.SETTLING)

    @property
    def highlight_index(self) -> Optional[int]:
        """Slice highlighted since the last spin landed."""
        return self._highlight

    def probabilities(self) -> list[float]:
        """Probability vector for the next spin."""
        return compute_probabilities(self._segments, self._counter.value, self._rules)

    # Spin flow
    def spin(self) -> Optional[int]:
        """Start a spin.

        Returns:
            The chosen segment index, or None if a spin is already running
        """
        if self.is_spinning:
            logger.debug("Spin request ignored: wheel is busy")
            self._emit(EventType.SPIN_IGNORED, state=self.state.name)
            return None

        if self.state == WheelState.RESULT_SHOWN:
            self.dismiss_result(via="spin")

        weights = self.probabilities()
        index = weighted_random_index(weights, self._rng)
        target = target_rotation(
            index,
            len(self._segments),
            self._rotation,
            pointer_angle=self._config.pointer_angle,
            extra_turns=self._config.extra_turns,
        )

        self._highlight = None
        self._machine.transition(WheelState.SPINNING, selected_index=index, result_label=None)

        label = self._segments[index].label
        logger.info(
            f"Spin {self._counter.value + 1}: landing on #{index} '{label}' "
            f"(weights {[round(w, 2) for w in weights]})"
        )
        self._emit(
            EventType.SPIN_STARTED,
            index=index,
            label=label,
            probabilities=weights,
            target=target,
        )

        self._animator.start(
            SpinAnimation(
                start=self._rotation,
                end=target,
                duration_ms=self._config.duration_ms,
                easing=self._config.easing,
            ),
            on_frame=self._on_frame,
            on_complete=self._on_spin_complete,
        )
        return index

    def dismiss_result(self, via: str = "close") -> bool:
        """Close the result display.

        Returns:
            True if a result was showing
        """
        if self.state != WheelState.RESULT_SHOWN:
            return False

        self._machine.transition(WheelState.IDLE)
        logger.debug(f"Result dismissed via {via}")
        self._emit(EventType.RESULT_DISMISSED, via=via)
        return True

    def _on_frame(self, rotation: float) -> None:
        self._rotation = rotation
        self._emit(EventType.FRAME, rotation=rotation)

    def _on_spin_complete(self, rotation: float) -> None:
        self._rotation = rotation
        index = self._machine.context.selected_index
        self._highlight = index
        self._machine.transition(WheelState.SETTLING)

        landed = index_at_pointer(rotation, len(self._segments), self._config.pointer_angle)
        if landed != index:
            logger.warning(f"Wheel stopped on slice {landed}, selected {index}")
        else:
            logger.debug(f"Wheel stopped on slice {landed}")

        self._emit(
            EventType.SPIN_SETTLING,
            index=index,
            landed=landed,
            label=self._segments[index].label,
            rotation=rotation,
        )
        self._scheduler.call_later(self._config.settle_delay_ms, self._show_result)

    def _show_result(self) -> None:
        index = self._machine.context.selected_index
        label = self._segments[index].label
        count = self._counter.increment()
        self._machine.transition(WheelState.RESULT_SHOWN, result_label=label)

        logger.info(f"Spin {count} result: '{label}'")
        self._emit(EventType.RESULT_SHOWN, index=index, label=label, spin_count=count)

    def _emit(self, event_type: EventType, **data) -> None:
        self._event_bus.emit(Event(event_type, data=data, source="session"))
