from __future__ import annotations

"""Helper for computing the price/time extents of the plotted series"""

import logging
from typing import Optional, Sequence, Tuple

from investchart.chart_renderer.contexts import ChartBounds
from investchart.chart_renderer.dependencies import np
from investchart.market_data.models import TimeSeries

logger = logging.getLogger(__name__)

# Largest epoch second accepted as a plausible timestamp.
TIMESTAMP_CEILING = 9_999_999_999
PRICE_PADDING_RATIO = 0.05


def is_plausible_timestamp(value: int) -> bool:
    return 0 < value < TIMESTAMP_CEILING


class SeriesRangeCalculator:
    """Computes min/max price over positive prices and min/max time over sane endpoints"""

    def compute_bounds(self, series: Sequence[TimeSeries]) -> Optional[ChartBounds]:
        price_bounds = self._price_bounds(series)
        time_bounds = self._time_bounds(series)
        if price_bounds is None or time_bounds is None:
            logger.debug("No usable range (prices=%s, times=%s)", price_bounds, time_bounds)
            return None
        return ChartBounds(*price_bounds, *time_bounds)

    def _price_bounds(self, series: Sequence[TimeSeries]) -> Optional[Tuple[float, float]]:
        chunks = []
        for item in series:
            prices = np.asarray(item.prices[: item.data_count], dtype=float)
            positive = prices[prices > 0]
            if positive.size:
                chunks.append(positive)
        if not chunks:
            return None
        combined = np.concatenate(chunks)
        return float(combined.min()), float(combined.max())

    def _time_bounds(self, series: Sequence[TimeSeries]) -> Optional[Tuple[int, int]]:
        min_time: Optional[int] = None
        max_time: Optional[int] = None
        for item in series:
            first = item.timestamps[0]
            last = item.timestamps[item.data_count - 1]
            if first > 0 and last > 0 and first < TIMESTAMP_CEILING:
                min_time = first if min_time is None else min(min_time, first)
                max_time = last if max_time is None else max(max_time, last)
        if min_time is None or max_time is None:
            return None
        return min_time, max_time

    def pad_price_range(self, bounds: ChartBounds) -> ChartBounds:
        """Widen the price range by 5% of its span on both sides."""
        span = bounds.max_price - bounds.min_price
        if span <= 0:
            # Flat series: pad around the single price so the scale stays finite.
            span = abs(bounds.max_price)
        padding = span * PRICE_PADDING_RATIO
        return ChartBounds(
            min_price=bounds.min_price - padding,
            max_price=bounds.max_price + padding,
            min_time=bounds.min_time,
            max_time=bounds.max_time,
        )
