from __future__ import annotations

"""Helper for price and time axis labels"""

import logging
from datetime import datetime
from typing import List

from investchart.chart_presets import TimeLabelStyle, time_label_style
from investchart.chart_renderer.commands import Text
from investchart.chart_renderer.contexts import ChartBounds, PlotArea

from .chart_styler import ChartStyler

logger = logging.getLogger(__name__)

_TIME_LABEL_X_OFFSET = 20
_TIME_LABEL_BASELINE_OFFSET = 20
_PRICE_LABEL_X = 5
_PRICE_LABEL_BASELINE_SHIFT = 3


def format_time_label(timestamp: int, style: TimeLabelStyle) -> str:
    """Format an epoch second in local time at the requested granularity.

    Timestamps the platform cannot convert produce an empty label.
    """
    try:
        return datetime.fromtimestamp(timestamp).strftime(style.value)
    except (ValueError, OverflowError, OSError):
        logger.debug("Unrepresentable timestamp %s on time axis", timestamp)
        return ""


class AxisLabeler:
    """Price labels down the left margin and time labels along the bottom"""

    def __init__(self, styler: ChartStyler):
        self.styler = styler

    def price_labels(self, bounds: ChartBounds, area: PlotArea) -> List[Text]:
        steps = self.styler.label_divisions
        span = bounds.max_price - bounds.min_price
        labels: List[Text] = []
        for i in range(steps + 1):
            # Top label carries the highest price.
            price = bounds.max_price - i * span / steps
            y = area.margin + i * area.inner_height / steps
            labels.append(
                Text(
                    _PRICE_LABEL_X,
                    y + _PRICE_LABEL_BASELINE_SHIFT,
                    f"{price:.2f}",
                    self.styler.text_color,
                    self.styler.label_font_size,
                )
            )
        return labels

    def time_labels(
        self,
        bounds: ChartBounds,
        area: PlotArea,
        range_id: str,
    ) -> List[Text]:
        steps = self.styler.label_divisions
        label_style = time_label_style(range_id)
        span = bounds.max_time - bounds.min_time
        labels: List[Text] = []
        for i in range(steps + 1):
            timestamp = bounds.min_time + i * span // steps
            x = area.margin + i * area.inner_width / steps
            labels.append(
                Text(
                    x - _TIME_LABEL_X_OFFSET,
                    area.height - _TIME_LABEL_BASELINE_OFFSET,
                    format_time_label(timestamp, label_style),
                    self.styler.text_color,
                    self.styler.label_font_size,
                )
            )
        return labels
