"""
Sequence Sources

A sequence source hands out one non-negative, strictly increasing integer per
call. Tracking numbers are only as unique as these values, so a production
source must serialise increments through a single authoritative counter
(e.g. a database sequence).

InMemorySequence is the in-process counter used for development and tests.
It mirrors a database sequence declared START WITH 1 INCREMENT BY 1.
"""

import threading
from abc import ABC, abstractmethod
from typing import Optional


class SequenceSource(ABC):
    """Interface for anything that issues tracking sequence values."""

    @abstractmethod
    def next_value(self) -> int:
        """
        Return the next sequence value.

        Returns:
            Non-negative integer, greater than any value returned before
        """
        pass


class InMemorySequence(SequenceSource):
    """Thread-safe in-process counter."""

    def __init__(self, start: int = 1, increment: int = 1):
        if start < 0:
            raise ValueError(f"Sequence start must be non-negative, got {start}")
        if increment < 1:
            raise ValueError(f"Sequence increment must be at least 1, got {increment}")

        self._next = start
        self._increment = increment
        self._last: Optional[int] = None
        self._lock = threading.Lock()

    def next_value(self) -> int:
        with self._lock:
            value = self._next
            self._next += self._increment
            self._last = value
        return value

    def current(self) -> Optional[int]:
        """Last value handed out, or None if the counter is unused."""
        with self._lock:
            return self._last
