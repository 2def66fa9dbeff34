"""Extract a :class:`TimeSeries` from a ``v8/finance/chart`` response.

The payload looks like::

    {"chart": {"result": [{"timestamp": [...],
                           "indicators": {"quote": [{"close": [...]}]}}],
               "error": null}}

Closing prices share indices with the timestamps. Every level is optional and
elements of either array may be ``null``, so each step degrades to "field
absent" instead of failing the whole symbol.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Tuple

from ..parsing_utils import (
    JsonParseError,
    first_mapping,
    get_list,
    get_mapping,
    is_json_int,
    is_json_number,
    orjson_loads,
)
from .models import TimeSeries

logger = logging.getLogger(__name__)

HTTP_OK = 200


def extract_time_series(symbol: str, body: bytes, status: Optional[int], reason: str = "") -> TimeSeries:
    """Parse one chart-mode response into a series; never raises on bad input."""
    if status != HTTP_OK:
        logger.warning("Failed to fetch chart data for %s: %s %s", symbol, status, reason)
        return TimeSeries.empty(symbol)

    try:
        document = orjson_loads(body)
    except JsonParseError as exc:
        logger.warning("Failed to parse chart JSON for %s: %s", symbol, exc)
        return TimeSeries.empty(symbol)

    result = first_result(document)
    if result is None:
        logger.debug("Chart response for %s has no result", symbol)
        return TimeSeries.empty(symbol)

    timestamps, data_count = _extract_timestamps(result)
    close = _close_array(result)
    if close is None:
        return TimeSeries(symbol=symbol, timestamps=timestamps, data_count=data_count, valid=False)

    prices = [float(value) if is_json_number(value) else 0.0 for value in close]
    # Presence of the close array is what marks the series valid.
    return TimeSeries(
        symbol=symbol,
        timestamps=timestamps,
        prices=prices,
        data_count=data_count,
        valid=True,
    )


def first_result(document: Any) -> Optional[Mapping[str, Any]]:
    """Return ``chart.result[0]`` or ``None`` when any level is absent."""
    chart = get_mapping(document, "chart")
    return first_mapping(get_list(chart, "result"))


def _extract_timestamps(result: Mapping[str, Any]) -> Tuple[List[int], int]:
    raw = get_list(result, "timestamp")
    if raw is None:
        return [], 0
    return [value if is_json_int(value) else 0 for value in raw], len(raw)


def _close_array(result: Mapping[str, Any]) -> Optional[list]:
    indicators = get_mapping(result, "indicators")
    quote = first_mapping(get_list(indicators, "quote"))
    return get_list(quote, "close")


__all__ = ["HTTP_OK", "extract_time_series", "first_result"]
