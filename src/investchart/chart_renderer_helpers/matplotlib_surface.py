from __future__ import annotations

"""Drawing surface that replays chart draw commands onto a matplotlib figure"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Tuple, Union

from investchart.chart_renderer.commands import ChartDrawing, Clear, DrawCommand, Line, Polyline, Text
from investchart.chart_renderer.dependencies import plt
from investchart.chart_renderer.exceptions import UnknownDrawCommandError

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

logger = logging.getLogger(__name__)

_POINTS_PER_INCH = 72.0


class MatplotlibSurface:
    """Pixel-addressed Agg canvas; saves a PNG on every present when given a path"""

    def __init__(
        self,
        width: int = 800,
        height: int = 500,
        *,
        output_path: Optional[Union[str, Path]] = None,
        dpi: float = 100.0,
    ):
        self.width = width
        self.height = height
        self.output_path = Path(output_path) if output_path is not None else None
        self.dpi = dpi
        self.presented = 0

    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def present(self, drawing: ChartDrawing) -> Optional[Path]:
        """Draw the commands and write the PNG, if configured; returns the written path."""
        fig = self.draw_figure(drawing)
        try:
            self.presented += 1
            if self.output_path is None:
                return None
            fig.savefig(self.output_path, dpi=self.dpi, facecolor=fig.get_facecolor(), edgecolor="none")
            logger.debug("Saved chart to %s", self.output_path)
            return self.output_path
        finally:
            plt.close(fig)

    def draw_figure(self, drawing: ChartDrawing) -> Figure:
        fig = plt.figure(figsize=(drawing.width / self.dpi, drawing.height / self.dpi), dpi=self.dpi)
        ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
        ax.set_xlim(0, drawing.width)
        ax.set_ylim(drawing.height, 0)
        ax.axis("off")
        try:
            for command in drawing.commands:
                self._execute(fig, ax, command)
        except UnknownDrawCommandError:
            plt.close(fig)
            raise
        return fig

    def _execute(self, fig: Figure, ax: Axes, command: DrawCommand) -> None:
        if isinstance(command, Clear):
            fig.patch.set_facecolor(command.color)
            ax.set_facecolor(command.color)
        elif isinstance(command, Line):
            ax.plot(
                [command.x1, command.x2],
                [command.y1, command.y2],
                color=command.color,
                linewidth=self._points(command.width),
            )
        elif isinstance(command, Polyline):
            xs, ys = zip(*command.points)
            ax.plot(xs, ys, color=command.color, linewidth=self._points(command.width))
        elif isinstance(command, Text):
            ax.text(
                command.x,
                command.y,
                command.text,
                color=command.color,
                fontsize=self._points(command.size),
                family="sans-serif",
                ha="left",
                va="baseline",
            )
        else:
            raise UnknownDrawCommandError(f"Cannot draw {type(command).__name__}")

    def _points(self, pixels: float) -> float:
        return pixels * _POINTS_PER_INCH / self.dpi
