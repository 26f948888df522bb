"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

import pytest

from ledger_insights.infrastructure import settings as settings_module
from ledger_insights.infrastructure.settings import LedgerSettings

_ENV_VARS = (
    "LEDGER_QUERY_TIMEOUT",
    "LEDGER_QUERY_RETRIES",
    "LEDGER_MAX_WORKERS",
    "LEDGER_DEFAULT_TIMEFRAME",
    "LEDGER_RANDOM_SEED",
    "DASHBOARD_USER_ID",
)


@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: MagicMock())
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_from_env_defaults(clean_env) -> None:
    settings = LedgerSettings.from_env()

    assert settings == LedgerSettings()
    assert settings.query_timeout == 10.0
    assert settings.query_retries == 3
    assert settings.max_workers == 6
    assert settings.default_timeframe == "30d"
    assert settings.random_seed is None
    assert settings.dashboard_user_id is None


def test_from_env_reads_values(clean_env) -> None:
    clean_env.setenv("LEDGER_QUERY_TIMEOUT", "2.5")
    clean_env.setenv("LEDGER_QUERY_RETRIES", "5")
    clean_env.setenv("LEDGER_MAX_WORKERS", "2")
    clean_env.setenv("LEDGER_DEFAULT_TIMEFRAME", " 1Y ")
    clean_env.setenv("LEDGER_RANDOM_SEED", "42")
    clean_env.setenv("DASHBOARD_USER_ID", "user-1")

    settings = LedgerSettings.from_env()

    assert settings.query_timeout == 2.5
    assert settings.query_retries == 5
    assert settings.max_workers == 2
    assert settings.default_timeframe == "1y"
    assert settings.random_seed == 42
    assert settings.dashboard_user_id == "user-1"


def test_from_env_falls_back_on_invalid_values(clean_env) -> None:
    """Unparseable or negative numbers keep the defaults."""
    clean_env.setenv("LEDGER_QUERY_TIMEOUT", "soon")
    clean_env.setenv("LEDGER_QUERY_RETRIES", "-1")
    clean_env.setenv("LEDGER_DEFAULT_TIMEFRAME", "banana")
    clean_env.setenv("LEDGER_RANDOM_SEED", "abc")

    settings = LedgerSettings.from_env()

    assert settings.query_timeout == 10.0
    assert settings.query_retries == 3
    assert settings.default_timeframe == "30d"
    assert settings.random_seed is None
