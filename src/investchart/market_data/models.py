"""Per-symbol records produced by the extractors and merged by the fetch coordinator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .symbols import display_symbol


@dataclass(frozen=True)
class TimeSeries:
    """One symbol's closing prices and their epoch-second timestamps.

    ``timestamps`` always holds ``data_count`` entries. ``prices`` mirrors the
    upstream ``close`` array and may be shorter, or empty, even for a valid
    series; readers must bounds-check.
    """

    symbol: str
    timestamps: List[int] = field(default_factory=list)
    prices: List[float] = field(default_factory=list)
    data_count: int = 0
    valid: bool = False

    @classmethod
    def empty(cls, symbol: str) -> "TimeSeries":
        return cls(symbol=symbol)

    @property
    def qualifies(self) -> bool:
        """True when the series is valid and has at least one data point."""
        return self.valid and self.data_count > 0

    def price_at(self, index: int) -> float:
        if 0 <= index < len(self.prices):
            return self.prices[index]
        return 0.0

    @property
    def last_price(self) -> float:
        return self.price_at(self.data_count - 1)


@dataclass(frozen=True)
class QuoteSummary:
    """Current price and daily change for the panel ticker."""

    symbol: str
    price: float = 0.0
    change_percent: float = 0.0
    valid: bool = False

    @classmethod
    def empty(cls, symbol: str) -> "QuoteSummary":
        return cls(symbol=symbol)

    @property
    def display_symbol(self) -> str:
        return display_symbol(self.symbol)


__all__ = ["QuoteSummary", "TimeSeries"]
