"""Fixed (range, interval) presets offered by the chart toolbar."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class TimeLabelStyle(str, Enum):
    """Granularity of the bottom-axis time labels."""

    TIME = "%H:%M"
    DAY = "%m/%d"
    MONTH = "%m/%Y"


@dataclass(frozen=True)
class ChartPreset:
    label: str
    range: str
    interval: str

    @property
    def label_style(self) -> TimeLabelStyle:
        return time_label_style(self.range)


PRESETS: Tuple[ChartPreset, ...] = (
    ChartPreset("Today", "1d", "1m"),
    ChartPreset("Week", "5d", "5m"),
    ChartPreset("Month", "1mo", "30m"),
    ChartPreset("YTD", "ytd", "1d"),
    ChartPreset("Year", "1y", "1d"),
    ChartPreset("5Y", "5y", "1wk"),
    ChartPreset("All", "max", "1mo"),
)

DEFAULT_PRESET = PRESETS[0]

_DAY_LABEL_RANGES = frozenset({"5d", "1mo", "3mo"})


def time_label_style(range_id: str) -> TimeLabelStyle:
    """Pick the label granularity for a range id; unknown ranges use month/year."""
    if range_id == "1d":
        return TimeLabelStyle.TIME
    if range_id in _DAY_LABEL_RANGES:
        return TimeLabelStyle.DAY
    return TimeLabelStyle.MONTH


def find_preset(label: str) -> ChartPreset:
    """Look a preset up by its toolbar label or its range id."""
    for preset in PRESETS:
        if label in (preset.label, preset.range):
            return preset
    raise ValueError(f"Unknown chart range preset: {label!r}")


__all__ = [
    "ChartPreset",
    "DEFAULT_PRESET",
    "PRESETS",
    "TimeLabelStyle",
    "find_preset",
    "time_label_style",
]
