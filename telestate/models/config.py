"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class RecursionConfig:
    """Bounded recursion evaluator configuration."""

    default_max_depth: int = 10
    stop_at_fixed_point: bool = False


@dataclass
class HistoryConfig:
    """Transition history configuration."""

    size: int = 50


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    format: str = "json"  # json | console


@dataclass
class TelestateConfig:
    """Top-level telestate configuration."""

    recursion: RecursionConfig = field(default_factory=RecursionConfig)
    history: HistoryConfig = field(default_factory=HistoryConfig)
    log: LogConfig = field(default_factory=LogConfig)
