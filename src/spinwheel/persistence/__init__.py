"""Persistence for the spin counter."""

from spinwheel.persistence.store import (
    CounterStore,
    MemoryStore,
    JsonFileStore,
    SpinCounter,
    SPIN_COUNT_KEY,
)

__all__ = ["CounterStore", "MemoryStore", "JsonFileStore", "SpinCounter", "SPIN_COUNT_KEY"]
