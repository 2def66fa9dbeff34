from __future__ import annotations

"""Helper for ordering series and assigning colors"""

from typing import List, Sequence, Tuple

from investchart.chart_renderer.commands import LegendEntry
from investchart.market_data.models import TimeSeries

from .chart_styler import ChartStyler


class SeriesSorter:
    """Orders series by most recent price, highest first, and pairs each with its legend row"""

    def __init__(self, styler: ChartStyler):
        self.styler = styler

    def rank(self, series: Sequence[TimeSeries]) -> List[Tuple[TimeSeries, LegendEntry]]:
        ordered = sorted(series, key=lambda item: item.last_price, reverse=True)
        return [
            (item, LegendEntry(item.symbol, item.last_price, self.styler.series_color(rank)))
            for rank, item in enumerate(ordered)
        ]
