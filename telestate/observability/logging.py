"""Structured logging configuration using structlog.

telestate modules only ever call get_logger(); applications embedding the
library decide how events are rendered by calling setup_logging() once.
"""

from __future__ import annotations

import logging
import sys

import structlog

from telestate.models.config import LogConfig


def setup_logging(config: LogConfig | str = "info") -> None:
    """Render telestate events to stderr as JSON lines or console text.

    Accepts a LogConfig or a bare level name (JSON output).
    """
    if isinstance(config, str):
        config = LogConfig(level=config)

    processors: list[structlog.typing.Processor] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
    ]
    if config.format == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, config.level.upper(), logging.INFO)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with a component name."""
    return structlog.get_logger(component=component)  # type: ignore[return-value]
