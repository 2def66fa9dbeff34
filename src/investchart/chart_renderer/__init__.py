from __future__ import annotations

from typing import Any

from .commands import ChartDrawing, Clear, DrawCommand, LegendEntry, Line, Polyline, Text
from .contexts import ChartBounds, PlotArea

__all__ = [
    "ChartBounds",
    "ChartDrawing",
    "ChartRenderer",
    "Clear",
    "DrawCommand",
    "LOADING_MESSAGE",
    "LegendEntry",
    "Line",
    "NO_DATA_MESSAGE",
    "PlotArea",
    "Polyline",
    "Text",
    "render_chart",
]

_RUNTIME_EXPORTS = {"ChartRenderer", "LOADING_MESSAGE", "NO_DATA_MESSAGE", "render_chart"}


def __getattr__(name: str) -> Any:
    """Lazy loading for the renderer, whose helpers import this package's submodules."""
    if name in _RUNTIME_EXPORTS:
        from . import runtime

        return getattr(runtime, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
