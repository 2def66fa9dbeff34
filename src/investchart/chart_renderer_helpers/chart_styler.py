from __future__ import annotations

"""Helper for chart styling and configuration"""

from typing import Tuple

# Tango palette; series cycle through it when they outnumber the entries.
SERIES_PALETTE: Tuple[str, ...] = (
    "#CC0000",
    "#3465A4",
    "#73D216",
    "#FCE94F",
    "#AD7FA8",
    "#F57900",
    "#C17D11",
    "#555753",
)


class ChartStyler:
    """Provides chart styling configuration"""

    def __init__(self):
        # Layout, in drawing units
        self.margin = 50.0
        self.grid_divisions = 10
        self.label_divisions = 5
        self.legend_offset_x = 200.0
        self.legend_top = 30.0
        self.legend_row_height = 20.0

        # Color scheme
        self.background_color = "#ffffff"
        self.grid_color = "#e6e6e6"
        self.text_color = "#000000"
        self.palette = SERIES_PALETTE

        # Strokes and fonts
        self.grid_line_width = 1.0
        self.series_line_width = 2.0
        self.label_font_size = 10.0
        self.message_font_size = 16.0

    def series_color(self, rank: int) -> str:
        return self.palette[rank % len(self.palette)]
