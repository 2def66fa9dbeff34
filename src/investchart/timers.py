"""Repeating timers run as asyncio tasks on the event loop."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class IntervalTimer:
    """Calls ``callback`` every ``interval_seconds`` until cancelled.

    The callback runs on the loop thread; returning ``False`` stops the timer.
    """

    def __init__(self, name: str, interval_seconds: float, callback: Callable[[], bool]):
        self.name = name
        self.interval_seconds = interval_seconds
        self.callback = callback
        self._task: Optional[asyncio.Task] = None

    @property
    def is_armed(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Arm the timer; a no-op when it is already running."""
        if self.is_armed:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug("Timer %s armed (%ss)", self.name, self.interval_seconds)

    def cancel(self) -> None:
        if self._task is None:
            return
        if not self._task.done() and self._task is not asyncio.current_task():
            self._task.cancel()
        self._task = None
        logger.debug("Timer %s cancelled", self.name)

    def restart(self, interval_seconds: Optional[float] = None) -> None:
        self.cancel()
        if interval_seconds is not None:
            self.interval_seconds = interval_seconds
        self.start()

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            keep_running = self.callback()
            if self._task is not asyncio.current_task():
                # Cancelled or restarted from inside the callback.
                return
            if not keep_running:
                self._task = None
                logger.debug("Timer %s stopped by its callback", self.name)
                return


__all__ = ["IntervalTimer"]
