"""Command line entry point: fetch quotes once and save the chart as a PNG."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from .applet import InvestApplet
from .chart_presets import PRESETS, find_preset
from .chart_renderer_helpers.matplotlib_surface import MatplotlibSurface
from .config import AppletSettings, ConfigurationError, load_settings
from .fetch_coordinator_helpers import AiohttpQuoteClient
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="invest-chart",
        description="Fetch quotes for the configured symbols and render a price chart.",
    )
    parser.add_argument(
        "symbols",
        nargs="*",
        help="Ticker symbols; defaults to INVEST_STOCK_SYMBOLS",
    )
    parser.add_argument(
        "--range",
        dest="range_label",
        default=PRESETS[0].label,
        choices=[preset.label for preset in PRESETS],
        help="Chart range preset (default: %(default)s)",
    )
    parser.add_argument("--output", default="chart.png", help="PNG path (default: %(default)s)")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=500)
    parser.add_argument("--verbose", action="store_true", help="Log progress to stdout")
    return parser


async def run(settings: AppletSettings, range_label: str, surface: MatplotlibSurface) -> InvestApplet:
    """Fetch one summary generation and one chart generation, then draw."""
    async with AiohttpQuoteClient(request_timeout_seconds=settings.request_timeout_seconds) as client:
        applet = InvestApplet(settings, client, chart_surface=surface, chart_preset=find_preset(range_label))
        try:
            summaries = applet.refresh()
            applet.show_chart()
            chart_generation = applet.chart.coordinator.current
            if summaries is not None:
                await summaries.wait()
            if chart_generation is not None:
                await chart_generation.wait()
            applet.chart.draw()
        finally:
            await applet.stop()
    return applet


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(user_friendly=not args.verbose)

    try:
        settings = load_settings()
        if args.symbols:
            settings = settings.with_symbols(",".join(args.symbols))
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if not settings.symbols:
        print("No stocks configured", file=sys.stderr)
        return 2

    surface = MatplotlibSurface(args.width, args.height, output_path=args.output)
    applet = asyncio.run(run(settings, args.range_label, surface))

    print(applet.tooltip or applet.display.text, end="")
    print(f"\nChart saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
