from __future__ import annotations

"""Environment lookups for the ``INVEST_*`` settings.

The process environment wins; ``.env`` files supply defaults for anything it
leaves unset or blank.
"""


import os
from pathlib import Path
from typing import Optional, Sequence

from .errors import ConfigurationError

_BOOLEAN_WORDS = {
    **dict.fromkeys(("1", "true", "t", "yes", "y", "on"), True),
    **dict.fromkeys(("0", "false", "f", "no", "n", "off"), False),
}

# Earlier files take precedence over later ones.
_DOTENV_CANDIDATES = (Path(".env"), Path.home() / ".investchart.env")

_DEFAULT_VALUES: dict[str, str] | None = None


def _dotenv_defaults() -> dict[str, str]:
    from .runtime_helpers import DotenvLoader

    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is None:
        merged: dict[str, str] = {}
        for path in _DOTENV_CANDIDATES:
            for key, value in DotenvLoader.load_from_file(path).items():
                merged.setdefault(key, value)
        _DEFAULT_VALUES = merged
    return _DEFAULT_VALUES


def reset_default_values() -> None:
    """Forget cached .env defaults so the next lookup re-reads them."""
    global _DEFAULT_VALUES
    _DEFAULT_VALUES = None


def _not_set(name: str) -> ConfigurationError:
    return ConfigurationError.missing_value(name, "set it in the environment or a .env file")


def _is_unset(value: str | None, allow_blank: bool) -> bool:
    return value is None or (value == "" and not allow_blank)


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    required: bool = False,
    strip: bool = True,
    allow_blank: bool = False,
) -> str | None:
    """Read ``name`` from the environment, then from .env defaults."""
    for candidate in (os.getenv(name), _dotenv_defaults().get(name)):
        if candidate is None:
            continue
        value = candidate.strip() if strip else candidate
        if not _is_unset(value, allow_blank):
            return value

    if required:
        raise _not_set(name)
    return or_value


def env_int(name: str, or_value: int | None = None, *, required: bool = False) -> int | None:
    raw = env_str(name)
    if raw is None:
        if required and or_value is None:
            raise _not_set(name)
        return or_value
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Environment variable {name!r} must be an integer (got {raw!r})") from exc


def env_bool(name: str, or_value: bool | None = None, *, required: bool = False) -> bool | None:
    raw = env_str(name)
    if raw is None:
        if required and or_value is None:
            raise _not_set(name)
        return or_value
    try:
        return _BOOLEAN_WORDS[raw.lower()]
    except KeyError as exc:
        allowed = ", ".join(sorted(_BOOLEAN_WORDS))
        raise ConfigurationError(f"Environment variable {name!r} must be a boolean ({allowed}); got {raw!r}") from exc


def env_list(
    name: str,
    *,
    or_value: Sequence[str] | None = None,
    separator: str = ",",
    strip_items: bool = True,
    unique: bool = True,
    required: bool = False,
) -> tuple[str, ...] | None:
    """Read a delimited list such as ``INVEST_STOCK_SYMBOLS``."""
    from .runtime_helpers import ListNormalizer

    raw = env_str(name)
    if raw is None:
        if required and not or_value:
            raise _not_set(name)
        return None if or_value is None else tuple(or_value)

    items = ListNormalizer.split_and_normalize(raw, separator, strip_items)
    if required and not items:
        raise ConfigurationError(f"Environment variable {name!r} must contain at least one value")
    return ListNormalizer.deduplicate_preserving_order(items) if unique else tuple(items)


def env_seconds(name: str, or_value: int | None = None, *, required: bool = False) -> int | None:
    """Read a non-negative duration in whole seconds."""
    value = env_int(name, or_value=or_value, required=required)
    if value is not None and value < 0:
        raise ConfigurationError(f"Environment variable {name!r} must be non-negative (got {value})")
    return value
