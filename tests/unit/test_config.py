"""Tests for TELESTATE_* environment configuration loading."""

from __future__ import annotations

import pytest

from telestate.config import load_config
from telestate.container import create_state


class TestLoadConfig:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in (
            "TELESTATE_RECURSION_DEFAULT_MAX_DEPTH",
            "TELESTATE_RECURSION_STOP_AT_FIXED_POINT",
            "TELESTATE_HISTORY_SIZE",
            "TELESTATE_LOG_LEVEL",
            "TELESTATE_LOG_FORMAT",
        ):
            monkeypatch.delenv(key, raising=False)
        config = load_config()
        assert config.recursion.default_max_depth == 10
        assert config.recursion.stop_at_fixed_point is False
        assert config.history.size == 50
        assert config.log.level == "info"
        assert config.log.format == "json"

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TELESTATE_RECURSION_DEFAULT_MAX_DEPTH", "3")
        monkeypatch.setenv("TELESTATE_RECURSION_STOP_AT_FIXED_POINT", "true")
        monkeypatch.setenv("TELESTATE_HISTORY_SIZE", "7")
        monkeypatch.setenv("TELESTATE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("TELESTATE_LOG_FORMAT", "console")
        config = load_config()
        assert config.recursion.default_max_depth == 3
        assert config.recursion.stop_at_fixed_point is True
        assert config.history.size == 7
        assert config.log.level == "debug"
        assert config.log.format == "console"

    def test_integers_are_clamped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TELESTATE_RECURSION_DEFAULT_MAX_DEPTH", "-5")
        monkeypatch.setenv("TELESTATE_HISTORY_SIZE", "999999")
        config = load_config()
        assert config.recursion.default_max_depth == 0
        assert config.history.size == 10000

    def test_invalid_log_level_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TELESTATE_LOG_LEVEL", "verbose")
        with pytest.raises(ValueError, match="Invalid TELESTATE_LOG_LEVEL"):
            load_config()

    def test_invalid_log_format_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TELESTATE_LOG_FORMAT", "xml")
        with pytest.raises(ValueError, match="Invalid TELESTATE_LOG_FORMAT"):
            load_config()

    def test_environment_applies_only_through_load_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TELESTATE_HISTORY_SIZE", "1")
        default_state = create_state()
        env_state = create_state(config=load_config())
        for i in range(3):
            default_state.transition({"i": i})
            env_state.transition({"i": i})
        assert len(default_state.history) == 3
        assert len(env_state.history) == 1
