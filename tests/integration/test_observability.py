"""Integration tests for structured logging and metrics emitted by containers."""

from __future__ import annotations

import pytest
import structlog
from prometheus_client import REGISTRY
from structlog.testing import capture_logs

from telestate.container import StateContainer, create_state
from telestate.errors import InvalidTransformResultError
from telestate.models.config import LogConfig
from telestate.observability.logging import get_logger, setup_logging


def _sample(name: str, labels: dict[str, str] | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestLogging:
    def test_transition_logs_changed_paths(self, container: StateContainer) -> None:
        with capture_logs() as logs:
            container.transition({"status": "Pending"})
        committed = [entry for entry in logs if entry["event"] == "transition_committed"]
        assert committed == [
            {
                "event": "transition_committed",
                "log_level": "info",
                "component": "container",
                "sequence": 1,
                "changed": ["status"],
            }
        ]

    def test_rejected_transform_logs_warning(self) -> None:
        with capture_logs() as logs:
            with pytest.raises(InvalidTransformResultError):
                create_state().self_determine(lambda d: None)
        assert any(
            entry["event"] == "self_determine_rejected" and entry["log_level"] == "warning" for entry in logs
        )

    def test_setup_logging_configures_structlog(self) -> None:
        try:
            setup_logging(LogConfig(level="debug", format="console"))
            assert structlog.is_configured()
            assert get_logger("test") is not None
            structlog.reset_defaults()
            setup_logging("warning")
            assert structlog.is_configured()
        finally:
            structlog.reset_defaults()


class TestMetrics:
    def test_transition_counters(self) -> None:
        before_total = _sample("telestate_transitions_total")
        before_count = _sample("telestate_delta_entries_count")
        create_state({"a": 1}).transition({"a": 2, "b": 1})
        assert _sample("telestate_transitions_total") == before_total + 1
        assert _sample("telestate_delta_entries_count") == before_count + 1

    def test_self_determine_outcomes(self) -> None:
        applied = _sample("telestate_self_determinations_total", {"outcome": "applied"})
        rejected = _sample("telestate_self_determinations_total", {"outcome": "rejected"})
        state = create_state()
        state.self_determine(lambda d: {"x": 1})
        with pytest.raises(InvalidTransformResultError):
            state.self_determine(lambda d: None)
        assert _sample("telestate_self_determinations_total", {"outcome": "applied"}) == applied + 1
        assert _sample("telestate_self_determinations_total", {"outcome": "rejected"}) == rejected + 1

    def test_recursion_histogram(self) -> None:
        before_sum = _sample("telestate_recursion_invocations_sum")
        create_state().teli_recurse(lambda d, depth: {"depth": depth}, 3)
        assert _sample("telestate_recursion_invocations_sum") == before_sum + 3
