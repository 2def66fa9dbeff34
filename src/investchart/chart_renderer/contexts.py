from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChartBounds:
    """Price and time extents over all qualifying series."""

    min_price: float
    max_price: float
    min_time: int
    max_time: int


@dataclass(frozen=True)
class PlotArea:
    """Drawing size and the interior rectangle left after the axis margins."""

    width: int
    height: int
    margin: float

    @property
    def inner_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def inner_height(self) -> float:
        return self.height - 2 * self.margin

    @property
    def right(self) -> float:
        return self.width - self.margin

    @property
    def bottom(self) -> float:
        return self.height - self.margin
