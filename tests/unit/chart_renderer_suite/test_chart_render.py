"""Tests for chart_renderer.runtime module."""

import pytest

from investchart.chart_renderer import (
    LOADING_MESSAGE,
    NO_DATA_MESSAGE,
    ChartRenderer,
    Clear,
    Line,
    Polyline,
    Text,
    render_chart,
)
from investchart.chart_renderer_helpers.chart_styler import SERIES_PALETTE
from investchart.market_data import TimeSeries

T0 = 1_700_000_000


def _series(symbol: str, prices, start: int = T0, step: int = 60) -> TimeSeries:
    timestamps = [start + i * step for i in range(len(prices))]
    return TimeSeries(symbol, timestamps, [float(p) for p in prices], len(prices), True)


class TestPlaceholders:
    """Tests for the message-only drawings."""

    def test_no_series_while_loading(self) -> None:
        drawing = render_chart([], "1d", width=800, height=500, loading=True)

        assert drawing.placeholder == LOADING_MESSAGE
        assert drawing.commands == (
            Clear("#ffffff"),
            Text(350, 250, LOADING_MESSAGE, "#000000", 16.0),
        )

    def test_no_series_after_load(self) -> None:
        drawing = render_chart([TimeSeries.empty("A")], "1d", width=800, height=500)

        assert drawing.placeholder == NO_DATA_MESSAGE
        assert drawing.polylines == ()

    def test_all_non_positive_prices(self) -> None:
        drawing = render_chart([_series("A", [0, -1, 0])], "1d", width=800, height=500)

        assert drawing.placeholder == NO_DATA_MESSAGE

    def test_implausible_timestamps(self) -> None:
        series = TimeSeries("A", [0, T0], [1.0, 2.0], 2, True)

        drawing = render_chart([series], "1d", width=800, height=500)

        assert drawing.placeholder == NO_DATA_MESSAGE

    def test_loading_flag_ignored_when_series_unusable(self) -> None:
        drawing = render_chart([_series("A", [0])], "1d", width=800, height=500, loading=True)

        assert drawing.placeholder == NO_DATA_MESSAGE


class TestRender:
    """Tests for full chart drawings."""

    def test_command_order_and_counts(self) -> None:
        drawing = render_chart([_series("A", [10, 12, 11])], "1d", width=800, height=500)

        kinds = [type(command) for command in drawing.commands]
        assert kinds[0] is Clear
        assert kinds[1:23] == [Line] * 22
        assert kinds[23:35] == [Text] * 12
        assert kinds[35:] == [Polyline, Text]
        assert drawing.placeholder is None

    def test_series_ranked_by_last_price(self) -> None:
        series = [_series("MID", [40, 50]), _series("TOP", [150, 200]), _series("LOW", [12, 10])]

        drawing = render_chart(series, "1d", width=800, height=500)

        assert [entry.symbol for entry in drawing.legend] == ["TOP", "MID", "LOW"]
        assert [entry.color for entry in drawing.legend] == list(SERIES_PALETTE[:3])
        assert [polyline.color for polyline in drawing.polylines] == list(SERIES_PALETTE[:3])

    def test_legend_text_and_position(self) -> None:
        drawing = render_chart(
            [_series("AAPL", [100, 101.456]), _series("EURUSD=X", [1.1, 1.2])],
            "1d",
            width=800,
            height=500,
        )

        legend_texts = drawing.texts[-2:]
        assert legend_texts[0] == Text(600, 30, "AAPL: $101.46", SERIES_PALETTE[0], 10.0)
        assert legend_texts[1] == Text(600, 50, "EURUSD=X: $1.20", SERIES_PALETTE[1], 10.0)

    def test_extremes_touch_padded_plot_edges(self) -> None:
        drawing = render_chart([_series("A", [100, 200])], "1d", width=800, height=500)

        (polyline,) = drawing.polylines
        (x0, y0), (x1, y1) = polyline.points
        assert x0 == pytest.approx(50)
        assert x1 == pytest.approx(750)
        # 5% padding on a 100 span over a 400px interior.
        assert y1 == pytest.approx(50 + 5 * 400 / 110)
        assert y0 == pytest.approx(50 + 105 * 400 / 110)

    def test_gaps_are_skipped(self) -> None:
        drawing = render_chart([_series("A", [10, 0, 12, 11])], "1d", width=800, height=500)

        (polyline,) = drawing.polylines
        assert len(polyline.points) == 3
        assert polyline.points[1][0] == pytest.approx(50 + 2 * 700 / 3)

    def test_invalid_series_are_excluded(self) -> None:
        drawing = render_chart(
            [TimeSeries.empty("BAD"), _series("A", [1, 2])],
            "1d",
            width=800,
            height=500,
        )

        assert [entry.symbol for entry in drawing.legend] == ["A"]

    def test_short_price_array_is_bounds_checked(self) -> None:
        series = TimeSeries("A", [T0, T0 + 60, T0 + 120], [5.0, 6.0], 3, True)

        drawing = render_chart([series], "1d", width=800, height=500)

        assert len(drawing.polylines[0].points) == 2
        assert drawing.legend[0].last_price == 0.0

    def test_series_without_drawable_points_keeps_legend_row(self) -> None:
        flat_zero = TimeSeries("Z", [T0, T0 + 60], [0.0, 0.0], 2, True)

        drawing = render_chart([_series("A", [1, 2]), flat_zero], "1d", width=800, height=500)

        assert len(drawing.polylines) == 1
        assert [entry.symbol for entry in drawing.legend] == ["A", "Z"]

    def test_unrepresentable_last_timestamp_blanks_time_labels(self) -> None:
        series = TimeSeries("AAPL", [T0, T0 + 60, 10**17], [10.0, 11.0, 12.0], 3, True)

        drawing = render_chart([series], "1d", width=800, height=500)

        time_labels = [text for text in drawing.texts if text.y == 480]
        assert len(time_labels) == 6
        assert time_labels[-1].text == ""
        assert [entry.symbol for entry in drawing.legend] == ["AAPL"]
        assert drawing.placeholder is None

    def test_render_is_deterministic(self) -> None:
        series = [_series("A", [3, 4, 5]), _series("B", [9, 8])]
        renderer = ChartRenderer()

        first = renderer.render(series, "5d", width=640, height=480)
        second = renderer.render(series, "5d", width=640, height=480)

        assert first == second
        assert first.width == 640
