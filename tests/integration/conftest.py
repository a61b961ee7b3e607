"""Shared fixtures for telestate integration tests.

Provides containers wired with a fixed clock and small configuration so
tests can exercise full mutation flows deterministically.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from telestate.clock import fixed_clock
from telestate.container import StateContainer, create_state
from telestate.models.config import HistoryConfig, RecursionConfig, TelestateConfig

# ---------------------------------------------------------------------------
# Timestamp helpers
# ---------------------------------------------------------------------------

NOW = datetime(2026, 2, 18, 12, 0, 0, tzinfo=UTC)


# ---------------------------------------------------------------------------
# Payload factory helpers
# ---------------------------------------------------------------------------


def make_deployment_state(replicas: int = 1, image: str = "app:1.0") -> dict[str, Any]:
    """Create a nested payload resembling a deployment spec."""
    return {
        "metadata": {"name": "web", "labels": {"tier": "frontend"}},
        "spec": {
            "replicas": replicas,
            "containers": [{"name": "web", "image": image}],
        },
        "status": "Running",
    }


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def config() -> TelestateConfig:
    return TelestateConfig(
        recursion=RecursionConfig(default_max_depth=10, stop_at_fixed_point=True),
        history=HistoryConfig(size=5),
    )


@pytest.fixture
def container(config: TelestateConfig) -> StateContainer:
    return create_state(make_deployment_state(), clock=fixed_clock(NOW), config=config)
