"""In-memory ring buffer of transition records."""

from __future__ import annotations

from collections import deque

from telestate.errors import HistoryEmptyError, InvalidArgumentError
from telestate.models.transition import TransitionRecord


class TransitionHistory:
    """Retains the most recent transition records, oldest first.

    A capacity of 0 disables retention entirely. State is held in-process
    only and disappears with the owning container.
    """

    def __init__(self, capacity: int = 50) -> None:
        if capacity < 0:
            raise InvalidArgumentError("capacity", "must be a non-negative integer")
        self._capacity = capacity
        self._records: deque[TransitionRecord] = deque(maxlen=capacity)
        self._committed = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def committed(self) -> int:
        """Total records ever appended, including evicted ones."""
        return self._committed

    def next_sequence(self) -> int:
        return self._committed + 1

    def append(self, record: TransitionRecord) -> None:
        self._committed += 1
        if self._capacity:
            self._records.append(record)

    def pop(self) -> TransitionRecord:
        """Remove and return the newest retained record."""
        if not self._records:
            raise HistoryEmptyError("No transition retained in history")
        return self._records.pop()

    def latest(self) -> TransitionRecord | None:
        return self._records[-1] if self._records else None

    def records(self) -> tuple[TransitionRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)
