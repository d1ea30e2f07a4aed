"""Unit tests for /src/core/config.py and /src/core/logging_config.py"""

import logging

import pytest

from src.core.config import Settings, get_settings
from src.core.logging_config import configure_logging


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ["STARTING_LIVES", "TICK_SECONDS", "TRANSITION_DELAY_SECONDS", "LOG_LEVEL", "SEED"]:
        monkeypatch.delenv(f"SURVICHESS_{name}", raising=False)
    settings = Settings(_env_file=None)
    assert settings.starting_lives == 3
    assert settings.tick_seconds == 1.0
    assert settings.transition_delay_seconds == 2.0
    assert settings.log_level == "INFO"
    assert settings.seed is None


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SURVICHESS_STARTING_LIVES", "5")
    monkeypatch.setenv("SURVICHESS_SEED", "17")
    settings = get_settings()
    assert settings.starting_lives == 5
    assert settings.seed == 17


def test_configure_logging_sets_engine_level() -> None:
    configure_logging("debug")
    assert logging.getLogger("src").level == logging.DEBUG
    assert logging.getLogger("src.survichess.waves").getEffectiveLevel() == logging.DEBUG

    configure_logging("WARNING")
    assert logging.getLogger("src").level == logging.WARNING
