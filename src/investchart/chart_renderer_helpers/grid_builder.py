from __future__ import annotations

"""Helper for the background grid"""

from typing import List

from investchart.chart_renderer.commands import Line
from investchart.chart_renderer.contexts import PlotArea

from .chart_styler import ChartStyler


class GridBuilder:
    """Evenly spaced horizontal and vertical gridlines across the plot interior"""

    def __init__(self, styler: ChartStyler):
        self.styler = styler

    def build_gridlines(self, area: PlotArea) -> List[Line]:
        divisions = self.styler.grid_divisions
        color = self.styler.grid_color
        width = self.styler.grid_line_width
        lines: List[Line] = []

        for i in range(divisions + 1):
            y = area.margin + i * area.inner_height / divisions
            lines.append(Line(area.margin, y, area.right, y, color, width))

        for i in range(divisions + 1):
            x = area.margin + i * area.inner_width / divisions
            lines.append(Line(x, area.margin, x, area.bottom, color, width))

        return lines
