"""Applet controller: owns the settings, the ticker fetches and the chart view.

Everything here runs on one asyncio event loop. Callers drive it with
``start``, ``refresh``, ``click``, ``apply_settings`` and the chart methods,
and read ``display`` and ``tooltip`` back for the panel.
"""

from __future__ import annotations

import logging
from typing import Optional

from .chart_presets import DEFAULT_PRESET, ChartPreset
from .chart_view import ChartView, DrawSurface
from .config import AppletSettings
from .fetch_coordinator import FetchCoordinator
from .fetch_coordinator_helpers import FetchGeneration, QuoteTransport, RequestBuilder
from .market_data import QuoteSummary, extract_quote_summary
from .ticker_cycler import NO_SYMBOLS_TEXT, NO_VALID_DATA_TEXT, PanelDisplay, TickerCycler, build_tooltip
from .timers import IntervalTimer

logger = logging.getLogger(__name__)


class InvestApplet:
    """Periodic quote refresh, ticker rotation and the on-demand chart."""

    def __init__(
        self,
        settings: AppletSettings,
        transport: QuoteTransport,
        *,
        chart_surface: Optional[DrawSurface] = None,
        chart_preset: ChartPreset = DEFAULT_PRESET,
    ):
        self.settings = settings
        self.transport = transport
        self.request_builder = RequestBuilder(settings.endpoint)
        self.summary_coordinator: FetchCoordinator[QuoteSummary] = FetchCoordinator(
            transport,
            self.request_builder,
            extract_quote_summary,
            QuoteSummary.empty,
            name="summary",
            on_generation_complete=self._on_summaries_complete,
        )
        self.cycler = TickerCycler(settings.cycle_interval_seconds)
        self.chart = ChartView(
            transport,
            self.request_builder,
            lambda: self.settings.symbols,
            surface=chart_surface,
            preset=chart_preset,
        )
        self.refresh_timer = IntervalTimer("refresh", settings.refresh_interval_seconds, self._on_refresh_tick)
        self.tooltip: Optional[str] = None

    @property
    def display(self) -> PanelDisplay:
        return self.cycler.display

    def start(self) -> None:
        """Load data now and keep refreshing on the configured interval."""
        self.refresh_timer.start()
        self.refresh()

    def refresh(self) -> Optional[FetchGeneration[QuoteSummary]]:
        """Start a new summary generation and refresh the chart if it is shown."""
        symbols = self.settings.symbols
        if not symbols:
            self.cycler.show_message(NO_SYMBOLS_TEXT)
            self.tooltip = None
            self.chart.refresh()
            return None

        self.cycler.stop()
        generation = self.summary_coordinator.start_generation(symbols)
        self.chart.refresh()
        return generation

    def click(self) -> None:
        """Primary button press on the panel: show the next quote."""
        self.cycler.advance()

    def show_chart(self) -> None:
        self.chart.show()

    def hide_chart(self) -> None:
        self.chart.hide()

    def select_range(self, label: str) -> bool:
        return self.chart.select_range(label)

    def apply_settings(self, settings: AppletSettings) -> None:
        """Adopt edited preferences, re-arm timers whose period changed, then refresh."""
        previous = self.settings
        self.settings = settings

        if settings.endpoint != previous.endpoint:
            self.request_builder.endpoint = settings.endpoint.rstrip("/")
        if settings.refresh_interval_minutes != previous.refresh_interval_minutes:
            self.refresh_timer.restart(settings.refresh_interval_seconds)
            logger.info("Refresh interval set to %d minute(s)", settings.refresh_interval_minutes)
        if settings.cycle_interval_seconds != previous.cycle_interval_seconds:
            self.cycler.set_interval(settings.cycle_interval_seconds)
            logger.info("Cycle interval set to %d second(s)", settings.cycle_interval_seconds)

        self.refresh()

    async def stop(self) -> None:
        self.refresh_timer.cancel()
        self.cycler.stop()
        await self.summary_coordinator.close()
        await self.chart.close()

    def _on_refresh_tick(self) -> bool:
        self.refresh()
        return True

    def _on_summaries_complete(self, generation: FetchGeneration[QuoteSummary]) -> None:
        summaries = generation.slots
        self.cycler.reset(summaries)
        self.tooltip = build_tooltip(summaries)
        valid = sum(1 for summary in summaries if summary.valid)
        if valid == 0:
            logger.warning("%s for %d symbol(s)", NO_VALID_DATA_TEXT, len(summaries))
        else:
            logger.info("Quotes refreshed: %d of %d valid", valid, len(summaries))


__all__ = ["InvestApplet"]
