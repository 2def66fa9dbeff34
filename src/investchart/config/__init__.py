"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import (
    env_bool,
    env_int,
    env_list,
    env_seconds,
    env_str,
    reset_default_values,
)
from .settings import AppletSettings, load_settings, parse_symbols

__all__ = [
    "AppletSettings",
    "ConfigurationError",
    "env_bool",
    "env_int",
    "env_list",
    "env_seconds",
    "env_str",
    "load_settings",
    "parse_symbols",
    "reset_default_values",
]
