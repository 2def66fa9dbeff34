"""Tests for config.runtime and its helpers."""

import pytest

from investchart.config import (
    ConfigurationError,
    env_bool,
    env_int,
    env_list,
    env_seconds,
    env_str,
    reset_default_values,
)
from investchart.config.runtime_helpers import DotenvLoader, ListNormalizer


class TestEnvStr:
    def test_returns_stripped_value(self, monkeypatch) -> None:
        monkeypatch.setenv("INVEST_CHART_ENDPOINT", "  https://example.com  ")

        assert env_str("INVEST_CHART_ENDPOINT") == "https://example.com"

    def test_blank_falls_back_to_default(self, monkeypatch) -> None:
        monkeypatch.setenv("INVEST_CHART_ENDPOINT", "   ")

        assert env_str("INVEST_CHART_ENDPOINT", "fallback") == "fallback"

    def test_required_missing_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="INVEST_CHART_ENDPOINT is missing or empty"):
            env_str("INVEST_CHART_ENDPOINT", required=True)

    def test_dotenv_cache_reset(self, tmp_path) -> None:
        assert env_str("INVEST_CHART_ENDPOINT") is None

        (tmp_path / ".env").write_text("INVEST_CHART_ENDPOINT=https://cached.example.com\n")
        assert env_str("INVEST_CHART_ENDPOINT") is None

        reset_default_values()
        assert env_str("INVEST_CHART_ENDPOINT") == "https://cached.example.com"

    def test_first_dotenv_candidate_wins(self, tmp_path) -> None:
        (tmp_path / ".env").write_text("INVEST_STOCK_SYMBOLS=LOCAL\n")
        (tmp_path / ".investchart.env").write_text("INVEST_STOCK_SYMBOLS=HOME\nINVEST_CHART_ENDPOINT=https://home\n")

        assert env_str("INVEST_STOCK_SYMBOLS") == "LOCAL"
        assert env_str("INVEST_CHART_ENDPOINT") == "https://home"


class TestTypedLookups:
    def test_env_int(self, monkeypatch) -> None:
        monkeypatch.setenv("INVEST_CYCLE_INTERVAL_SECONDS", "12")

        assert env_int("INVEST_CYCLE_INTERVAL_SECONDS") == 12
        assert env_int("INVEST_REFRESH_INTERVAL_MINUTES", 15) == 15

    def test_env_int_required(self) -> None:
        with pytest.raises(ConfigurationError):
            env_int("INVEST_CYCLE_INTERVAL_SECONDS", required=True)

    @pytest.mark.parametrize("raw, expected", [("yes", True), ("0", False), ("On", True), ("f", False)])
    def test_env_bool(self, monkeypatch, raw, expected) -> None:
        monkeypatch.setenv("LOG_APPEND", raw)

        assert env_bool("LOG_APPEND") is expected

    def test_env_bool_rejects_garbage(self, monkeypatch) -> None:
        monkeypatch.setenv("LOG_APPEND", "maybe")

        with pytest.raises(ConfigurationError, match="must be a boolean"):
            env_bool("LOG_APPEND")

    def test_env_list(self, monkeypatch) -> None:
        monkeypatch.setenv("INVEST_STOCK_SYMBOLS", "A; B;A")

        assert env_list("INVEST_STOCK_SYMBOLS", separator=";") == ("A", "B")
        assert env_list("INVEST_STOCK_SYMBOLS", separator=";", unique=False) == ("A", "B", "A")

    def test_env_list_default(self) -> None:
        assert env_list("INVEST_STOCK_SYMBOLS") is None
        assert env_list("INVEST_STOCK_SYMBOLS", or_value=["X"]) == ("X",)

    def test_env_list_required(self, monkeypatch) -> None:
        monkeypatch.setenv("INVEST_STOCK_SYMBOLS", " , ")

        with pytest.raises(ConfigurationError, match="at least one value"):
            env_list("INVEST_STOCK_SYMBOLS", required=True)

    def test_env_seconds_rejects_negative(self, monkeypatch) -> None:
        monkeypatch.setenv("INVEST_REQUEST_TIMEOUT_SECONDS", "-5")

        with pytest.raises(ConfigurationError):
            env_seconds("INVEST_REQUEST_TIMEOUT_SECONDS")


class TestConfigurationError:
    def test_factories_build_messages(self) -> None:
        assert str(ConfigurationError.missing_value("symbols", "set INVEST_STOCK_SYMBOLS")) == (
            "symbols is missing or empty: set INVEST_STOCK_SYMBOLS"
        )
        assert str(ConfigurationError.invalid_value("cycle", 0, "Must be positive")) == (
            "Invalid value for cycle: 0. Must be positive"
        )
        assert str(ConfigurationError.invalid_format("endpoint", "x", "a URL")) == (
            "endpoint has invalid format (received 'x'). Expected a URL"
        )


class TestDotenvLoader:
    def test_missing_file(self, tmp_path) -> None:
        assert DotenvLoader.load_from_file(tmp_path / "absent.env") == {}

    def test_parses_quotes_comments_and_export(self, tmp_path) -> None:
        path = tmp_path / "sample.env"
        path.write_text('# comment\n\nexport A="1"\nB = \'two\'\nnot a pair\nC=x=y\n')

        assert DotenvLoader.load_from_file(path) == {"A": "1", "B": "two", "C": "x=y"}


class TestListNormalizer:
    def test_split_without_strip_keeps_blanks(self) -> None:
        assert ListNormalizer.split_and_normalize("a, ,b", ",", strip_items=False) == ["a", " ", "b"]

    def test_no_separator(self) -> None:
        assert ListNormalizer.split_and_normalize(" a,b ", "", strip_items=True) == ["a,b"]

    def test_deduplicate(self) -> None:
        assert ListNormalizer.deduplicate_preserving_order(["b", "a", "b"]) == ("b", "a")
