"""Injectable clock used to timestamp transition records."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: timezone-aware current UTC time."""
    return datetime.now(tz=UTC)


def fixed_clock(moment: datetime) -> Clock:
    """Return a clock that always reports *moment*."""

    def _clock() -> datetime:
        return moment

    return _clock
