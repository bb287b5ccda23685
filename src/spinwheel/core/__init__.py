"""Core framework components: state machine, event bus and wheel session."""

from .state import WheelState, StateMachine
from .events import EventBus, Event, EventType
from .session import WheelSession, SpinConfig

__all__ = [
    "WheelState",
    "StateMachine",
    "EventBus",
    "Event",
    "EventType",
    "WheelSession",
    "SpinConfig",
]
