"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from telestate.models.config import (
    HistoryConfig,
    LogConfig,
    RecursionConfig,
    TelestateConfig,
)


def _env(key: str, default: str) -> str:
    return os.environ.get(f"TELESTATE_{key}", default)


def _env_bool(key: str, default: bool) -> bool:
    return _env(key, str(default)).lower() in ("true", "1", "yes")


def _env_clamped(key: str, default: int, low: int, high: int) -> int:
    return min(max(int(_env(key, str(default))), low), high)


_LOG_LEVELS = ("debug", "info", "warning", "error")
_LOG_FORMATS = ("json", "console")


def _env_choice(key: str, default: str, choices: tuple[str, ...]) -> str:
    val = _env(key, default).lower()
    if val not in choices:
        raise ValueError(f"Invalid TELESTATE_{key}: {val!r}. Must be one of {choices}")
    return val


def load_config() -> TelestateConfig:
    """Load configuration from TELESTATE_* environment variables."""
    return TelestateConfig(
        recursion=RecursionConfig(
            default_max_depth=_env_clamped("RECURSION_DEFAULT_MAX_DEPTH", 10, 0, 10000),
            stop_at_fixed_point=_env_bool("RECURSION_STOP_AT_FIXED_POINT", False),
        ),
        history=HistoryConfig(
            size=_env_clamped("HISTORY_SIZE", 50, 0, 10000),
        ),
        log=LogConfig(
            level=_env_choice("LOG_LEVEL", "info", _LOG_LEVELS),
            format=_env_choice("LOG_FORMAT", "json", _LOG_FORMATS),
        ),
    )
