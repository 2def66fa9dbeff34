"""Chart window state: the range selector, the chart fetches and the draw surface.

The view owns the current chart generation. Each slot completion requests a
redraw; requests made before the loop services the first one collapse into a
single draw pass.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from .chart_presets import DEFAULT_PRESET, ChartPreset
from .chart_renderer import ChartDrawing, ChartRenderer
from .chart_renderer_helpers.matplotlib_surface import MatplotlibSurface
from .fetch_coordinator import FetchCoordinator
from .fetch_coordinator_helpers import FetchGeneration, QuoteTransport, RequestBuilder
from .market_data import TimeSeries, extract_time_series
from .range_selector import RangeSelector

logger = logging.getLogger(__name__)

CLOSE_KEY = "Escape"


class DrawSurface(Protocol):
    def size(self) -> Tuple[int, int]: ...

    def present(self, drawing: ChartDrawing) -> object: ...


class ChartView:
    """Multi-series price chart over the configured symbols."""

    def __init__(
        self,
        transport: QuoteTransport,
        request_builder: RequestBuilder,
        symbols_provider: Callable[[], Sequence[str]],
        *,
        surface: Optional[DrawSurface] = None,
        renderer: Optional[ChartRenderer] = None,
        preset: ChartPreset = DEFAULT_PRESET,
    ):
        self.symbols_provider = symbols_provider
        self.surface: DrawSurface = surface if surface is not None else MatplotlibSurface()
        self.renderer = renderer or ChartRenderer()
        self.coordinator: FetchCoordinator[TimeSeries] = FetchCoordinator(
            transport,
            request_builder,
            extract_time_series,
            TimeSeries.empty,
            name="chart",
            on_slot_complete=self._on_slot_complete,
            on_generation_complete=self._on_generation_complete,
        )
        self.selector = RangeSelector(preset, on_change=self._on_range_change)
        self.visible = False
        self.ever_completed = False
        self.last_drawing: Optional[ChartDrawing] = None
        self._redraw_handle: Optional[asyncio.Handle] = None

    @property
    def series(self) -> List[TimeSeries]:
        generation = self.coordinator.current
        return list(generation.slots) if generation is not None else []

    def show(self) -> None:
        if self.visible:
            return
        self.visible = True
        self.fetch()

    def hide(self) -> None:
        self.visible = False
        if self._redraw_handle is not None:
            self._redraw_handle.cancel()
            self._redraw_handle = None

    def handle_key(self, key: str) -> bool:
        """Close on Escape; returns True when the key was consumed."""
        if key == CLOSE_KEY:
            self.hide()
            return True
        return False

    def refresh(self) -> Optional[FetchGeneration[TimeSeries]]:
        """Periodic refresh hook; only fetches while the chart is shown."""
        if not self.visible:
            return None
        return self.fetch()

    def select_range(self, label: str) -> bool:
        return self.selector.select(label)

    def fetch(self) -> FetchGeneration[TimeSeries]:
        symbols = tuple(self.symbols_provider())
        if not symbols:
            logger.debug("No symbols configured; chart cleared")
        generation = self.coordinator.start_generation(symbols, self.selector.current)
        self.request_redraw()
        return generation

    def draw(self) -> ChartDrawing:
        width, height = self.surface.size()
        drawing = self.renderer.render(
            self.series,
            self.selector.current.range,
            width=width,
            height=height,
            loading=not self.ever_completed,
        )
        self.last_drawing = drawing
        self.surface.present(drawing)
        return drawing

    def request_redraw(self) -> None:
        if not self.visible or self._redraw_handle is not None:
            return
        self._redraw_handle = asyncio.get_running_loop().call_soon(self._service_redraw)

    def _service_redraw(self) -> None:
        self._redraw_handle = None
        if self.visible:
            self.draw()

    def _on_range_change(self, preset: ChartPreset) -> None:
        self.fetch()

    def _on_slot_complete(self, generation: FetchGeneration[TimeSeries], slot_index: int) -> None:
        self.request_redraw()

    def _on_generation_complete(self, generation: FetchGeneration[TimeSeries]) -> None:
        self.ever_completed = True
        self.request_redraw()

    async def close(self) -> None:
        self.hide()
        await self.coordinator.close()


__all__ = ["CLOSE_KEY", "ChartView", "DrawSurface"]
