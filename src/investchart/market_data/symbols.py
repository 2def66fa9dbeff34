"""Symbol helpers."""

from __future__ import annotations


def display_symbol(symbol: str) -> str:
    """Strip a currency-pair suffix (``EURUSD=X`` -> ``EURUSD``) for display only."""
    head, _, _ = symbol.partition("=")
    return head


__all__ = ["display_symbol"]
