"""Lock-guarded shared counter for actions."""

from __future__ import annotations

import threading


class RuntimeCounter:
    """Integer counter that may be shared by several actions and threads."""

    def __init__(self, start: int = 0) -> None:
        self._start = int(start)
        self._value = self._start
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def increment(self, step: int = 1) -> int:
        """Add ``step`` and return the new value."""
        with self._lock:
            self._value += int(step)
            return self._value

    def reset(self) -> None:
        with self._lock:
            self._value = self._start

    def __repr__(self) -> str:
        return f"RuntimeCounter(value={self._value})"


SharedCounter = RuntimeCounter
