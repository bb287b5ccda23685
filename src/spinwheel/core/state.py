"""
State machine for a wheel session.

States:
    IDLE: Waiting for a spin request
    SPINNING: Rotation animation in progress
    SETTLING: Wheel stopped, celebration effects playing
    RESULT_SHOWN: Winning label displayed until dismissed
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Callable, Any
import logging

logger = logging.getLogger(__name__)


class WheelState(Enum):
    """Session states."""
    IDLE = auto()
    SPINNING = auto()
    SETTLING = auto()
    RESULT_SHOWN = auto()


@dataclass
class StateContext:
    """Context data carried across states."""
    selected_index: int | None = None
    result_label: str | None = None


class StateMachine:
    """
    Tracks the session state and validates transitions.

    Listeners are notified after every successful transition.
    """

    VALID_TRANSITIONS: list[tuple[WheelState, WheelState]] = [
        (WheelState.IDLE, WheelState.SPINNING),
        (WheelState.SPINNING, WheelState.SETTLING),
        (WheelState.SETTLING, WheelState.RESULT_SHOWN),
        (WheelState.RESULT_SHOWN, WheelState.IDLE),
    ]

    def __init__(self, initial_state: WheelState = WheelState.IDLE) -> None:
        self._state = initial_state
        self._context = StateContext()
        self._listeners: list[Callable[[WheelState, WheelState, StateContext], None]] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.debug(f"StateMachine initialized with state: {initial_state.name}")

    @property
    def state(self) -> WheelState:
        """Get current state."""
        return self._state

    @property
    def context(self) -> StateContext:
        """Get current context."""
        return self._context

    def can_transition(self, to_state: WheelState) -> bool:
        """Check if transition to given state is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: WheelState, **context_updates: Any) -> bool:
        """
        Attempt to transition to a new state.

        Args:
            to_state: Target state
            **context_updates: Updates to apply to context

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_state):
            logger.warning(
                f"Invalid transition: {self._state.name} -> {to_state.name}"
            )
            return False

        old_state = self._state
        self._state = to_state

        for key, value in context_updates.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

        logger.debug(f"State transition: {old_state.name} -> {to_state.name}")

        for listener in self._listeners:
            try:
                listener(old_state, to_state, self._context)
            except Exception as e:
                logger.error(f"Error in state listener: {e}")

        return True

    def add_listener(
        self,
        callback: Callable[[WheelState, WheelState, StateContext], None]
    ) -> None:
        """Add a state change listener."""
        self._listeners.append(callback)

    def remove_listener(
        self,
        callback: Callable[[WheelState, WheelState, StateContext], None]
    ) -> None:
        """Remove a state change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)
