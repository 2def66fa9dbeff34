"""Split delimited setting values such as the symbol list."""

from __future__ import annotations

from typing import Iterable


class ListNormalizer:
    """Turns ``"AAPL, MSFT,,AAPL"`` style text into clean item sequences."""

    @staticmethod
    def split_and_normalize(raw_value: str, separator: str, strip_items: bool) -> list[str]:
        """
        Break ``raw_value`` on ``separator``.

        An empty separator keeps the value whole. With ``strip_items`` each item
        is trimmed and items left empty are dropped.
        """
        pieces = raw_value.split(separator) if separator else [raw_value]
        if not strip_items:
            return pieces
        return [trimmed for trimmed in (piece.strip() for piece in pieces) if trimmed]

    @staticmethod
    def deduplicate_preserving_order(items: Iterable[str]) -> tuple[str, ...]:
        """Keep the first occurrence of each item."""
        return tuple(dict.fromkeys(items))
