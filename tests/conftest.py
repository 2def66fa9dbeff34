"""Root pytest configuration and shared fixtures."""

import pytest

from investchart.config import reset_default_values
from tests.helpers.quote_fakes import FakeTransport, RecordingSurface

_INVEST_ENV_VARS = (
    "INVEST_STOCK_SYMBOLS",
    "INVEST_REFRESH_INTERVAL_MINUTES",
    "INVEST_CYCLE_INTERVAL_SECONDS",
    "INVEST_CHART_ENDPOINT",
    "INVEST_REQUEST_TIMEOUT_SECONDS",
    "INVEST_LOG_DIRECTORY",
    "LOG_APPEND",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep INVEST_* variables and .env files from the developer machine out of tests."""
    for name in _INVEST_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        "investchart.config.runtime._DOTENV_CANDIDATES",
        (tmp_path / ".env", tmp_path / ".investchart.env"),
    )
    reset_default_values()
    yield
    reset_default_values()


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def held_transport() -> FakeTransport:
    return FakeTransport(hold=True)


@pytest.fixture
def recording_surface() -> RecordingSurface:
    return RecordingSurface()
