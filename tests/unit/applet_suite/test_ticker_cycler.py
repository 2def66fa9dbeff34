"""Tests for ticker_cycler module."""

import pytest

from investchart.market_data import QuoteSummary
from investchart.ticker_cycler import (
    LOADING_TEXT,
    NO_VALID_DATA_TEXT,
    PanelDisplay,
    TickerCycler,
    build_tooltip,
    format_quote,
)


def _quote(symbol: str, price: float = 0.0, change: float = 0.0) -> QuoteSummary:
    return QuoteSummary(symbol, price, change, valid=price > 0)


class TestPanelDisplay:
    def test_icon_follows_sign(self) -> None:
        assert PanelDisplay("x", 1.2).icon == "invest_up"
        assert PanelDisplay("x", -0.5).icon == "invest_down"
        assert PanelDisplay("x").icon == "invest_neutral"

    def test_format_quote_uses_display_symbol(self) -> None:
        display = format_quote(_quote("EURUSD=X", 1.08765, 0.25))

        assert display.text == "EURUSD: $1.09"
        assert display.change_percent == 0.25


class TestBuildTooltip:
    def test_lists_every_symbol_in_order(self) -> None:
        tooltip = build_tooltip([_quote("AAPL", 150.0, 1.234), _quote("BAD"), _quote("EURUSD=X", 1.1, -0.5)])

        assert tooltip == (
            "Portfolio Summary:\n"
            "AAPL: $150.00 (1.23%)\n"
            "BAD: No data\n"
            "EURUSD=X: $1.10 (-0.50%)\n"
        )

    def test_all_invalid(self) -> None:
        assert build_tooltip([_quote("A")]) == "Portfolio Summary:\nA: No data\n"


class TestTickerCycler:
    """Tests for TickerCycler."""

    def test_initial_display_is_loading(self) -> None:
        assert TickerCycler(5).display.text == LOADING_TEXT

    @pytest.mark.asyncio
    async def test_reset_shows_first_valid_and_arms_timer(self) -> None:
        shown = []
        cycler = TickerCycler(5, on_display=shown.append)

        cycler.reset([_quote("A"), _quote("B", 2.0), _quote("C", 3.0)])

        assert cycler.valid_indices == [1, 2]
        assert cycler.display.text == "B: $2.00"
        assert cycler.timer.is_armed
        assert [display.text for display in shown] == ["B: $2.00"]
        cycler.stop()

    @pytest.mark.asyncio
    async def test_advance_wraps_over_valid_entries(self) -> None:
        cycler = TickerCycler(5)
        cycler.reset([_quote("A", 1.0), _quote("B"), _quote("C", 3.0)])

        texts = []
        for _ in range(3):
            assert cycler.advance() is True
            texts.append(cycler.display.text)

        assert texts == ["C: $3.00", "A: $1.00", "C: $3.00"]
        cycler.stop()

    def test_single_valid_entry_does_not_arm_timer(self) -> None:
        cycler = TickerCycler(5)

        cycler.reset([_quote("A", 1.0), _quote("B")])

        assert cycler.display.text == "A: $1.00"
        assert cycler.timer.is_armed is False
        assert cycler.advance() is False
        assert cycler.display.text == "A: $1.00"

    def test_no_valid_entries(self) -> None:
        cycler = TickerCycler(5)

        cycler.reset([_quote("A"), _quote("B")])

        assert cycler.display.text == NO_VALID_DATA_TEXT
        assert cycler.timer.is_armed is False
        assert cycler.advance() is True
        assert cycler.display.text == NO_VALID_DATA_TEXT

    def test_advance_before_any_data_keeps_loading(self) -> None:
        cycler = TickerCycler(5)

        assert cycler.advance() is True
        assert cycler.display.text == LOADING_TEXT

    @pytest.mark.asyncio
    async def test_show_message_clears_rotation(self) -> None:
        cycler = TickerCycler(5)
        cycler.reset([_quote("A", 1.0), _quote("B", 2.0)])

        cycler.show_message("No stocks configured")

        assert cycler.display.text == "No stocks configured"
        assert cycler.summaries == ()
        assert cycler.timer.is_armed is False

    @pytest.mark.asyncio
    async def test_set_interval_rearms_when_data_present(self) -> None:
        cycler = TickerCycler(5)
        cycler.reset([_quote("A", 1.0), _quote("B", 2.0)])

        cycler.set_interval(9)

        assert cycler.timer.interval_seconds == 9
        assert cycler.timer.is_armed
        cycler.stop()
        assert cycler.timer.is_armed is False

    def test_set_interval_without_data_stays_idle(self) -> None:
        cycler = TickerCycler(5)

        cycler.set_interval(9)

        assert cycler.timer.interval_seconds == 9
        assert cycler.timer.is_armed is False
