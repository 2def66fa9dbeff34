"""Tests for parsing_utils and http_utils."""

from types import SimpleNamespace

import pytest

from investchart.http_utils import ensure_http_url, is_aiohttp_session_open, quote_path_segment
from investchart.parsing_utils import (
    JsonParseError,
    first_mapping,
    get_list,
    get_mapping,
    is_json_int,
    is_json_number,
    orjson_loads,
)


class TestOrjsonLoads:
    def test_parses_bytes(self) -> None:
        assert orjson_loads(b'{"a": [1, 2]}') == {"a": [1, 2]}

    def test_empty_body_raises(self) -> None:
        with pytest.raises(JsonParseError, match="empty"):
            orjson_loads(b"")

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(JsonParseError):
            orjson_loads(b"{")


class TestJsonWalkers:
    def test_get_mapping(self) -> None:
        assert get_mapping({"a": {"b": 1}}, "a") == {"b": 1}
        assert get_mapping({"a": [1]}, "a") is None
        assert get_mapping([1], "a") is None

    def test_get_list(self) -> None:
        assert get_list({"a": [1]}, "a") == [1]
        assert get_list({"a": {}}, "a") is None
        assert get_list(None, "a") is None

    def test_first_mapping(self) -> None:
        assert first_mapping([{"x": 1}]) == {"x": 1}
        assert first_mapping([]) is None
        assert first_mapping(None) is None
        assert first_mapping([1, {"x": 1}]) is None

    def test_number_checks_exclude_bool(self) -> None:
        assert is_json_int(3) is True
        assert is_json_int(3.0) is False
        assert is_json_int(True) is False
        assert is_json_number(2.5) is True
        assert is_json_number(False) is False
        assert is_json_number("1") is False


class TestHttpUtils:
    def test_session_open_checks(self) -> None:
        assert is_aiohttp_session_open(None) is False
        assert is_aiohttp_session_open(object()) is False
        assert is_aiohttp_session_open(SimpleNamespace(closed=False)) is True
        assert is_aiohttp_session_open(SimpleNamespace(closed=True)) is False

    def test_ensure_http_url_accepts_https(self) -> None:
        url = "https://example.com/v8/finance/chart"
        assert ensure_http_url(url) == url

    @pytest.mark.parametrize("url", ["ftp://example.com", "example.com/chart", "https://"])
    def test_ensure_http_url_rejects(self, url) -> None:
        with pytest.raises(ValueError):
            ensure_http_url(url)

    def test_quote_path_segment(self) -> None:
        assert quote_path_segment("EURUSD=X") == "EURUSD=X"
        assert quote_path_segment("^GSPC") == "%5EGSPC"
        assert quote_path_segment("BRK/B") == "BRK%2FB"
