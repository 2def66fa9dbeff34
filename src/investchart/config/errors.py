from __future__ import annotations

"""Configuration failures raised while loading applet settings."""


class ConfigurationError(RuntimeError):
    """An ``INVEST_*`` setting is absent, unparsable or out of range."""

    @classmethod
    def invalid_format(cls, param_name: str, received_value: str, expected_format: str = "") -> "ConfigurationError":
        message = f"{param_name} has invalid format (received {received_value!r})"
        return cls(f"{message}. Expected {expected_format}" if expected_format else message)

    @classmethod
    def missing_value(cls, param_name: str, context: str = "") -> "ConfigurationError":
        message = f"{param_name} is missing or empty"
        return cls(f"{message}: {context}" if context else message)

    @classmethod
    def invalid_value(cls, param_name: str, value, reason: str = "") -> "ConfigurationError":
        message = f"Invalid value for {param_name}: {value!r}"
        return cls(f"{message}. {reason}" if reason else message)


__all__ = ["ConfigurationError"]
