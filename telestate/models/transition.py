"""Delta entries and transition records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any

from telestate.clock import utc_now
from telestate.models.values import ABSENT


class ChangeKind(StrEnum):
    """What happened to a field between two snapshots."""

    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


@dataclass(frozen=True)
class FieldDelta:
    """Old and new value of a single field path.

    ``old`` is ABSENT for additions, ``new`` is ABSENT for removals.
    """

    old: Any
    new: Any

    @property
    def kind(self) -> ChangeKind:
        if self.old is ABSENT:
            return ChangeKind.ADDED
        if self.new is ABSENT:
            return ChangeKind.REMOVED
        return ChangeKind.MODIFIED

    def inverted(self) -> FieldDelta:
        """Return the same change seen in the opposite direction."""
        return FieldDelta(old=self.new, new=self.old)


@dataclass(frozen=True)
class TransitionRecord:
    """Snapshot triple produced once per transition() call.

    Immutable: ``previous`` and ``current`` are deep copies taken at commit
    time, so later mutation of the container cannot rewrite history.
    """

    previous: Any
    current: Any
    delta: dict[str, FieldDelta] = field(default_factory=dict)
    sequence: int = 0
    recorded_at: datetime = field(default_factory=utc_now)

    @property
    def changed_paths(self) -> list[str]:
        """Return the field paths touched by this transition, in delta order."""
        return list(self.delta)
