"""Key/value persistence for the spin counter.

The session only sees the small ``CounterStore`` interface. ``JsonFileStore``
keeps values in a JSON file between runs; ``MemoryStore`` keeps them in a
dict and is what the tests use.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Protocol
import json
import logging

logger = logging.getLogger(__name__)

SPIN_COUNT_KEY = "spinCount"


class CounterStore(Protocol):
    """Minimal load/save interface."""

    def load(self, key: str, default: Any = None) -> Any:
        ...

    def save(self, key: str, value: Any) -> None:
        ...


class MemoryStore:
    """In-process store."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(initial or {})

    def load(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def save(self, key: str, value: Any) -> None:
        self._data[key] = value


class JsonFileStore:
    """Persistent key/value storage using a JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._data: Dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load data from file."""
        if not self.path.exists():
            logger.info(f"No saved state at {self.path}, starting fresh")
            return

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load state from {self.path}: {e}")
            return

        if not isinstance(data, dict):
            logger.error(f"Ignoring state file {self.path}: expected an object")
            return

        self._data = data
        logger.info(f"Loaded state from {self.path}")

    def load(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def save(self, key: str, value: Any) -> None:
        """Update a value and write the whole file.

        The file is written next to the target and then moved over it, so an
        interrupted write never leaves a truncated state file behind.
        """
        self._data[key] = value
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(self._data, f, indent=2, ensure_ascii=False)
            tmp_path.replace(self.path)
        except OSError as e:
            logger.error(f"Failed to save state to {self.path}: {e}")


class SpinCounter:
    """Non-negative spin counter backed by a CounterStore."""

    def __init__(self, store: CounterStore, key: str = SPIN_COUNT_KEY):
        self._store = store
        self._key = key
        self._value = self._read()

    def _read(self) -> int:
        raw = self._store.load(self._key, 0)
        try:
            value = int(raw)
        except (TypeError, ValueError):
            logger.warning(f"Invalid stored {self._key}={raw!r}, resetting to 0")
            return 0
        return max(0, value)

    @property
    def value(self) -> int:
        return self._value

    def increment(self) -> int:
        """Add one completed spin and persist it."""
        self._value += 1
        self._store.save(self._key, self._value)
        return self._value
