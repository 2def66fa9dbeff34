"""Panel ticker: rotates through the symbols that returned a quote."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .market_data.models import QuoteSummary
from .timers import IntervalTimer

logger = logging.getLogger(__name__)

LOADING_TEXT = "Loading..."
NO_VALID_DATA_TEXT = "No valid stock data"
NO_SYMBOLS_TEXT = "No stocks configured"
TOOLTIP_HEADER = "Portfolio Summary:"

ICON_UP = "invest_up"
ICON_DOWN = "invest_down"
ICON_NEUTRAL = "invest_neutral"


@dataclass(frozen=True)
class PanelDisplay:
    """Label text plus the change that picks the direction icon."""

    text: str
    change_percent: float = 0.0

    @property
    def icon(self) -> str:
        if self.change_percent > 0:
            return ICON_UP
        if self.change_percent < 0:
            return ICON_DOWN
        return ICON_NEUTRAL


def format_quote(summary: QuoteSummary) -> PanelDisplay:
    return PanelDisplay(f"{summary.display_symbol}: ${summary.price:.2f}", summary.change_percent)


def build_tooltip(summaries: Sequence[QuoteSummary]) -> str:
    """One line per configured symbol, in configuration order."""
    lines = [TOOLTIP_HEADER]
    for summary in summaries:
        if summary.valid:
            lines.append(f"{summary.symbol}: ${summary.price:.2f} ({summary.change_percent:.2f}%)")
        else:
            lines.append(f"{summary.symbol}: No data")
    return "\n".join(lines) + "\n"


class TickerCycler:
    """Walks a rotating index over the valid quotes of the latest generation."""

    def __init__(
        self,
        cycle_interval_seconds: float,
        *,
        on_display: Optional[Callable[[PanelDisplay], None]] = None,
    ):
        self.on_display = on_display
        self.timer = IntervalTimer("cycle", cycle_interval_seconds, self.advance)
        self.summaries: Tuple[QuoteSummary, ...] = ()
        self.valid_indices: List[int] = []
        self.cycle_position = 0
        self.display = PanelDisplay(LOADING_TEXT)

    def reset(self, summaries: Sequence[QuoteSummary]) -> None:
        """Adopt a completed generation and show its first valid quote."""
        self.timer.cancel()
        self.summaries = tuple(summaries)
        self.valid_indices = [index for index, summary in enumerate(self.summaries) if summary.valid]
        self.cycle_position = 0

        if not self.valid_indices:
            self._show(PanelDisplay(NO_VALID_DATA_TEXT))
            return

        self._show(format_quote(self.summaries[self.valid_indices[0]]))
        if len(self.valid_indices) > 1:
            self.timer.start()

    def advance(self) -> bool:
        """Move to the next valid quote; returns False once there is nothing to cycle."""
        if not self.summaries:
            return True
        if not self.valid_indices:
            self._show(PanelDisplay(NO_VALID_DATA_TEXT))
            return True
        if len(self.valid_indices) == 1:
            return False

        self.cycle_position = (self.cycle_position + 1) % len(self.valid_indices)
        self._show(format_quote(self.summaries[self.valid_indices[self.cycle_position]]))
        return True

    def set_interval(self, cycle_interval_seconds: float) -> None:
        self.timer.cancel()
        self.timer.interval_seconds = cycle_interval_seconds
        if self.summaries:
            self.timer.start()

    def show_message(self, text: str) -> None:
        """Replace the rotation with a fixed message."""
        self.timer.cancel()
        self.summaries = ()
        self.valid_indices = []
        self.cycle_position = 0
        self._show(PanelDisplay(text))

    def stop(self) -> None:
        self.timer.cancel()

    def _show(self, display: PanelDisplay) -> None:
        self.display = display
        logger.debug("Panel shows %r", display.text)
        if self.on_display is not None:
            self.on_display(display)


__all__ = [
    "NO_SYMBOLS_TEXT",
    "NO_VALID_DATA_TEXT",
    "PanelDisplay",
    "TickerCycler",
    "build_tooltip",
    "format_quote",
]
