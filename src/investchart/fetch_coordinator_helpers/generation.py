"""Generation bookkeeping for one batch of per-symbol fetches."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Generic, List, Optional, Set, Tuple, TypeVar

from ..chart_presets import ChartPreset
from .quote_client import FetchResponse

T = TypeVar("T")


@dataclass(frozen=True)
class SlotCompletion:
    """Result of one request task, tagged with the generation and slot it belongs to."""

    generation_id: int
    slot_index: int
    symbol: str
    response: FetchResponse


@dataclass
class FetchGeneration(Generic[T]):
    """Slots for one symbol list under one set of query parameters.

    ``slots`` start as invalid placeholders and each is written exactly once
    by the completion for its index.
    """

    generation_id: int
    symbols: Tuple[str, ...]
    preset: Optional[ChartPreset]
    slots: List[T]
    pending: int
    completed_slots: Set[int] = field(default_factory=set)
    _completed: asyncio.Event = field(default_factory=asyncio.Event, repr=False)

    @property
    def is_complete(self) -> bool:
        return self.pending == 0

    def mark_complete(self) -> None:
        self._completed.set()

    async def wait(self) -> List[T]:
        """Wait until every slot has completed and return the merged slots."""
        await self._completed.wait()
        return self.slots


__all__ = ["FetchGeneration", "SlotCompletion"]
