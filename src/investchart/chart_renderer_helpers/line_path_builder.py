from __future__ import annotations

"""Helper for projecting a series onto the plot interior"""

from typing import List, Tuple

from investchart.chart_renderer.contexts import ChartBounds, PlotArea
from investchart.market_data.models import TimeSeries

from .series_range_calculator import is_plausible_timestamp


class LinePathBuilder:
    """Maps series points to pixel coordinates, skipping non-positive prices and bad timestamps"""

    def build_points(self, series: TimeSeries, bounds: ChartBounds, area: PlotArea) -> List[Tuple[float, float]]:
        y_scale = area.inner_height / (bounds.max_price - bounds.min_price)
        # Each series spreads over the full width by its own point count.
        x_step = area.inner_width / (series.data_count - 1) if series.data_count > 1 else 0.0

        points: List[Tuple[float, float]] = []
        for j in range(series.data_count):
            price = series.price_at(j)
            if price <= 0 or not is_plausible_timestamp(series.timestamps[j]):
                continue
            x = area.margin + j * x_step
            y = area.margin + (bounds.max_price - price) * y_scale
            points.append((x, y))
        return points
