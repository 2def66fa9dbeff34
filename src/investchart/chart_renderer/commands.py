"""Draw commands emitted by the chart renderer, in pixel coordinates (y grows downwards)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Clear:
    color: str


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    color: str
    width: float = 1.0


@dataclass(frozen=True)
class Polyline:
    """An open stroked path; consecutive points are joined with straight segments."""

    points: Tuple[Tuple[float, float], ...]
    color: str
    width: float = 2.0


@dataclass(frozen=True)
class Text:
    """Text whose baseline starts at ``(x, y)``."""

    x: float
    y: float
    text: str
    color: str
    size: float = 10.0


DrawCommand = Union[Clear, Line, Polyline, Text]


@dataclass(frozen=True)
class LegendEntry:
    symbol: str
    last_price: float
    color: str

    @property
    def text(self) -> str:
        return f"{self.symbol}: ${self.last_price:.2f}"


@dataclass(frozen=True)
class ChartDrawing:
    """Everything one draw pass produced."""

    width: int
    height: int
    commands: Tuple[DrawCommand, ...]
    legend: Tuple[LegendEntry, ...] = ()
    placeholder: Optional[str] = None

    @property
    def polylines(self) -> Tuple[Polyline, ...]:
        return tuple(command for command in self.commands if isinstance(command, Polyline))

    @property
    def texts(self) -> Tuple[Text, ...]:
        return tuple(command for command in self.commands if isinstance(command, Text))


__all__ = [
    "ChartDrawing",
    "Clear",
    "DrawCommand",
    "LegendEntry",
    "Line",
    "Polyline",
    "Text",
]
