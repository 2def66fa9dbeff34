"""Applet settings: the symbol list and the refresh/cycle timer periods."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..http_utils import ensure_http_url
from .errors import ConfigurationError
from .runtime import env_int, env_list, env_seconds, env_str
from .runtime_helpers import ListNormalizer

DEFAULT_ENDPOINT = "https://query2.finance.yahoo.com/v8/finance/chart"
DEFAULT_REFRESH_INTERVAL_MINUTES = 15
DEFAULT_CYCLE_INTERVAL_SECONDS = 5

# Bounds of the preferences dialog spin buttons.
MIN_INTERVAL = 1
MAX_INTERVAL = 60


@dataclass(frozen=True)
class AppletSettings:
    """Externally owned configuration consumed read-only by the core."""

    symbols: tuple[str, ...] = ()
    refresh_interval_minutes: int = DEFAULT_REFRESH_INTERVAL_MINUTES
    cycle_interval_seconds: int = DEFAULT_CYCLE_INTERVAL_SECONDS
    endpoint: str = DEFAULT_ENDPOINT
    request_timeout_seconds: Optional[int] = None

    def __post_init__(self) -> None:
        _check_interval("refresh_interval_minutes", self.refresh_interval_minutes)
        _check_interval("cycle_interval_seconds", self.cycle_interval_seconds)
        try:
            ensure_http_url(self.endpoint)
        except ValueError as exc:
            raise ConfigurationError.invalid_format("endpoint", self.endpoint, "an http(s) URL") from exc

    @property
    def refresh_interval_seconds(self) -> int:
        return self.refresh_interval_minutes * 60

    def with_symbols(self, text: str) -> "AppletSettings":
        return replace(self, symbols=parse_symbols(text))


def _check_interval(name: str, value: int) -> None:
    if not MIN_INTERVAL <= value <= MAX_INTERVAL:
        raise ConfigurationError.invalid_value(name, value, f"Must be between {MIN_INTERVAL} and {MAX_INTERVAL}")


def parse_symbols(text: str) -> tuple[str, ...]:
    """Split a comma separated symbol entry, trimming whitespace around each symbol."""
    items = ListNormalizer.split_and_normalize(text, ",", strip_items=True)
    return ListNormalizer.deduplicate_preserving_order(items)


def load_settings() -> AppletSettings:
    """Build settings from ``INVEST_*`` environment variables (and .env defaults)."""
    symbols = env_list("INVEST_STOCK_SYMBOLS", or_value=())
    refresh = env_int("INVEST_REFRESH_INTERVAL_MINUTES", DEFAULT_REFRESH_INTERVAL_MINUTES)
    cycle = env_int("INVEST_CYCLE_INTERVAL_SECONDS", DEFAULT_CYCLE_INTERVAL_SECONDS)
    endpoint = env_str("INVEST_CHART_ENDPOINT", DEFAULT_ENDPOINT)
    timeout = env_seconds("INVEST_REQUEST_TIMEOUT_SECONDS", 0)

    return AppletSettings(
        symbols=tuple(symbols or ()),
        refresh_interval_minutes=refresh,
        cycle_interval_seconds=cycle,
        endpoint=endpoint.rstrip("/"),
        request_timeout_seconds=timeout or None,
    )


__all__ = [
    "AppletSettings",
    "DEFAULT_CYCLE_INTERVAL_SECONDS",
    "DEFAULT_ENDPOINT",
    "DEFAULT_REFRESH_INTERVAL_MINUTES",
    "load_settings",
    "parse_symbols",
]
