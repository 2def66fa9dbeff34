"""Turn the merged series of one generation into draw commands.

``render_chart`` is a pure function of its arguments: the same series, range
and size always produce the same :class:`ChartDrawing`.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from investchart.chart_renderer_helpers.axis_labeler import AxisLabeler
from investchart.chart_renderer_helpers.chart_styler import ChartStyler
from investchart.chart_renderer_helpers.grid_builder import GridBuilder
from investchart.chart_renderer_helpers.line_path_builder import LinePathBuilder
from investchart.chart_renderer_helpers.series_range_calculator import SeriesRangeCalculator
from investchart.chart_renderer_helpers.series_sorter import SeriesSorter
from investchart.market_data.models import TimeSeries

from .commands import ChartDrawing, Clear, DrawCommand, LegendEntry, Polyline, Text
from .contexts import PlotArea

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Loading chart data..."
NO_DATA_MESSAGE = "No chart data available"

_MESSAGE_X_OFFSET = 50


class ChartRenderer:
    """Computes scaling, gridlines, labels, legend and series paths"""

    def __init__(self, styler: Optional[ChartStyler] = None):
        self.styler = styler or ChartStyler()
        self.range_calculator = SeriesRangeCalculator()
        self.grid_builder = GridBuilder(self.styler)
        self.axis_labeler = AxisLabeler(self.styler)
        self.series_sorter = SeriesSorter(self.styler)
        self.path_builder = LinePathBuilder()

    def render(
        self,
        series: Sequence[TimeSeries],
        range_id: str,
        *,
        width: int,
        height: int,
        loading: bool = False,
    ) -> ChartDrawing:
        qualifying = [item for item in series if item.qualifies]
        if not qualifying:
            return self._placeholder(width, height, LOADING_MESSAGE if loading else NO_DATA_MESSAGE)

        bounds = self.range_calculator.compute_bounds(qualifying)
        if bounds is None:
            return self._placeholder(width, height, NO_DATA_MESSAGE)
        bounds = self.range_calculator.pad_price_range(bounds)
        area = PlotArea(width, height, self.styler.margin)

        commands: List[DrawCommand] = [Clear(self.styler.background_color)]
        commands.extend(self.grid_builder.build_gridlines(area))
        commands.extend(self.axis_labeler.price_labels(bounds, area))
        commands.extend(self.axis_labeler.time_labels(bounds, area, range_id))

        legend: List[LegendEntry] = []
        for row, (item, entry) in enumerate(self.series_sorter.rank(qualifying)):
            points = self.path_builder.build_points(item, bounds, area)
            if points:
                commands.append(Polyline(tuple(points), entry.color, self.styler.series_line_width))
            commands.append(
                Text(
                    width - self.styler.legend_offset_x,
                    self.styler.legend_top + row * self.styler.legend_row_height,
                    entry.text,
                    entry.color,
                    self.styler.label_font_size,
                )
            )
            legend.append(entry)

        logger.debug("Rendered %d series for range %s", len(legend), range_id)
        return ChartDrawing(width, height, tuple(commands), tuple(legend))

    def _placeholder(self, width: int, height: int, message: str) -> ChartDrawing:
        commands = (
            Clear(self.styler.background_color),
            Text(
                width / 2 - _MESSAGE_X_OFFSET,
                height / 2,
                message,
                self.styler.text_color,
                self.styler.message_font_size,
            ),
        )
        return ChartDrawing(width, height, commands, placeholder=message)


_DEFAULT_RENDERER = ChartRenderer()


def render_chart(
    series: Sequence[TimeSeries],
    range_id: str,
    *,
    width: int,
    height: int,
    loading: bool = False,
) -> ChartDrawing:
    """Render with the default styling."""
    return _DEFAULT_RENDERER.render(series, range_id, width=width, height=height, loading=loading)


__all__ = ["ChartRenderer", "LOADING_MESSAGE", "NO_DATA_MESSAGE", "render_chart"]
