"""Common parsing utilities for untrusted upstream payloads."""

from __future__ import annotations

from typing import Any, Mapping, Optional

import orjson


class JsonParseError(ValueError):
    """Raised when a response body is empty or not valid JSON."""


def orjson_loads(json_bytes: bytes) -> Any:
    """
    Parse JSON bytes using orjson.

    Raises:
        JsonParseError: If the body is empty or orjson rejects it
    """
    if not json_bytes:
        raise JsonParseError("empty response body")
    try:
        return orjson.loads(json_bytes)
    except orjson.JSONDecodeError as exc:
        raise JsonParseError(str(exc)) from exc


def get_mapping(container: Any, key: str) -> Optional[Mapping[str, Any]]:
    """Return ``container[key]`` when both are JSON objects, else ``None``."""
    if not isinstance(container, Mapping):
        return None
    value = container.get(key)
    if isinstance(value, Mapping):
        return value
    return None


def get_list(container: Any, key: str) -> Optional[list]:
    """Return ``container[key]`` when it is a JSON array, else ``None``."""
    if not isinstance(container, Mapping):
        return None
    value = container.get(key)
    if isinstance(value, list):
        return value
    return None


def first_mapping(items: Optional[list]) -> Optional[Mapping[str, Any]]:
    """Return the first element of a JSON array when it is an object."""
    if not items:
        return None
    head = items[0]
    if isinstance(head, Mapping):
        return head
    return None


def is_json_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_json_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


__all__ = [
    "JsonParseError",
    "first_mapping",
    "get_list",
    "get_mapping",
    "is_json_int",
    "is_json_number",
    "orjson_loads",
]
