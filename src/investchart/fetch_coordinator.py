"""Concurrent per-symbol fetches merged into generation-scoped slots.

Every request task returns a :class:`SlotCompletion`; a done-callback applies
it on the event loop thread, so slot writes never race. Completions from a
superseded generation are dropped without touching the current slots.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from typing import Callable, Generic, Iterable, Mapping, Optional, Set, TypeVar

import aiohttp

from .chart_presets import ChartPreset
from .fetch_coordinator_helpers import (
    FetchGeneration,
    FetchResponse,
    QuoteTransport,
    RequestBuilder,
    SlotCompletion,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

Extractor = Callable[[str, bytes, Optional[int], str], T]
GenerationListener = Callable[[FetchGeneration[T]], None]
SlotListener = Callable[[FetchGeneration[T], int], None]


class FetchCoordinator(Generic[T]):
    """Issues one request per configured symbol and tracks the current generation."""

    def __init__(
        self,
        transport: QuoteTransport,
        request_builder: RequestBuilder,
        extractor: Extractor[T],
        placeholder: Callable[[str], T],
        *,
        name: str = "fetch",
        on_slot_complete: Optional[SlotListener[T]] = None,
        on_generation_complete: Optional[GenerationListener[T]] = None,
    ):
        self.transport = transport
        self.request_builder = request_builder
        self.extractor = extractor
        self.placeholder = placeholder
        self.name = name
        self.on_slot_complete = on_slot_complete
        self.on_generation_complete = on_generation_complete
        self._ids = itertools.count(1)
        self._current: Optional[FetchGeneration[T]] = None
        self._tasks: Set[asyncio.Task] = set()
        self.logger = logging.getLogger(f"{__name__}.{name}")

    @property
    def current(self) -> Optional[FetchGeneration[T]]:
        return self._current

    @property
    def in_flight(self) -> int:
        """Number of request tasks still running, including superseded ones."""
        return len(self._tasks)

    def start_generation(self, symbols: Iterable[str], preset: Optional[ChartPreset] = None) -> FetchGeneration[T]:
        """Replace the current generation and queue one request per symbol.

        Must be called from the event loop thread. In-flight requests of the
        previous generation keep running; their results are discarded.
        """
        ordered = tuple(symbols)
        generation: FetchGeneration[T] = FetchGeneration(
            generation_id=next(self._ids),
            symbols=ordered,
            preset=preset,
            slots=[self.placeholder(symbol) for symbol in ordered],
            pending=len(ordered),
        )

        superseded = self._current
        if superseded is not None and not superseded.is_complete:
            self.logger.debug(
                "Generation %d superseded with %d request(s) pending",
                superseded.generation_id,
                superseded.pending,
            )
        self._current = generation

        if not ordered:
            self._finish(generation)
            return generation

        loop = asyncio.get_running_loop()
        headers = self.request_builder.headers()
        for index, symbol in enumerate(ordered):
            url = self.request_builder.build_url(symbol, preset)
            task = loop.create_task(self._fetch_slot(generation.generation_id, index, symbol, url, headers))
            self._tasks.add(task)
            task.add_done_callback(self._on_task_done)

        self.logger.info(
            "Started generation %d for %d symbol(s)%s",
            generation.generation_id,
            len(ordered),
            f" ({preset.range}/{preset.interval})" if preset else "",
        )
        return generation

    async def _fetch_slot(
        self,
        generation_id: int,
        slot_index: int,
        symbol: str,
        url: str,
        headers: Mapping[str, str],
    ) -> SlotCompletion:
        try:
            response = await self.transport.get(url, headers)
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as exc:
            self.logger.warning("Request for %s failed: %s", symbol, exc)
            response = FetchResponse.failed(str(exc) or type(exc).__name__)
        except Exception as exc:
            # Any failure still completes the slot, as invalid.
            self.logger.error("Transport raised unexpectedly for %s", symbol, exc_info=exc)
            response = FetchResponse.failed(str(exc) or type(exc).__name__)
        return SlotCompletion(generation_id, slot_index, symbol, response)

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            self.logger.error("Fetch task raised unexpectedly", exc_info=error)
            return
        self.handle_completion(task.result())

    def handle_completion(self, completion: SlotCompletion) -> bool:
        """Apply one completion to the current generation; returns False when discarded."""
        generation = self._current
        if generation is None or completion.generation_id != generation.generation_id:
            self.logger.debug(
                "Discarding stale completion for %s (generation %d)",
                completion.symbol,
                completion.generation_id,
            )
            return False
        if completion.slot_index in generation.completed_slots:
            self.logger.debug("Ignoring duplicate completion for slot %d", completion.slot_index)
            return False

        response = completion.response
        generation.slots[completion.slot_index] = self.extractor(
            completion.symbol, response.body, response.status, response.reason
        )
        generation.completed_slots.add(completion.slot_index)
        generation.pending -= 1

        if self.on_slot_complete is not None:
            self.on_slot_complete(generation, completion.slot_index)
        if generation.is_complete:
            self._finish(generation)
        return True

    def _finish(self, generation: FetchGeneration[T]) -> None:
        generation.mark_complete()
        self.logger.debug("Generation %d complete", generation.generation_id)
        if self.on_generation_complete is not None:
            self.on_generation_complete(generation)

    async def close(self) -> None:
        """Cancel outstanding request tasks."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()


__all__ = ["FetchCoordinator"]
