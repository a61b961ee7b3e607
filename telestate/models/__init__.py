"""Core data structures for telestate."""

from telestate.models.config import HistoryConfig, LogConfig, RecursionConfig, TelestateConfig
from telestate.models.transition import ChangeKind, FieldDelta, TransitionRecord
from telestate.models.values import ABSENT, ValueKind, classify

__all__ = [
    "ABSENT",
    "ChangeKind",
    "FieldDelta",
    "HistoryConfig",
    "LogConfig",
    "RecursionConfig",
    "TelestateConfig",
    "TransitionRecord",
    "ValueKind",
    "classify",
]
