"""Active chart range/interval preset."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from .chart_presets import DEFAULT_PRESET, PRESETS, ChartPreset, find_preset

logger = logging.getLogger(__name__)


class RangeSelector:
    """Holds the selected preset and notifies a listener when it changes."""

    def __init__(
        self,
        current: ChartPreset = DEFAULT_PRESET,
        *,
        on_change: Optional[Callable[[ChartPreset], None]] = None,
    ):
        self._current = current
        self.on_change = on_change

    @property
    def current(self) -> ChartPreset:
        return self._current

    def select(self, label: str) -> bool:
        """Switch to the preset named ``label``; re-selecting the active one does nothing."""
        preset = find_preset(label)
        if preset == self._current:
            return False

        previous = self._current
        self._current = preset
        logger.info("Chart range changed from %s to %s", previous.label, preset.label)
        if self.on_change is not None:
            self.on_change(preset)
        return True

    def affordances(self) -> List[Tuple[ChartPreset, bool]]:
        """Toolbar state: every preset paired with whether it can be clicked."""
        return [(preset, preset != self._current) for preset in PRESETS]


__all__ = ["RangeSelector"]
