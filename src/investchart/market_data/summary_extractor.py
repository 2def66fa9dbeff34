"""Extract the panel ticker quote from ``chart.result[0].meta``."""

from __future__ import annotations

import logging
from typing import Optional

from ..parsing_utils import JsonParseError, get_mapping, is_json_number, orjson_loads
from .chart_extractor import HTTP_OK, first_result
from .models import QuoteSummary

logger = logging.getLogger(__name__)


def extract_quote_summary(symbol: str, body: bytes, status: Optional[int], reason: str = "") -> QuoteSummary:
    """Read ``regularMarketPrice`` and ``previousClose``; both must be positive."""
    if status != HTTP_OK:
        logger.warning("Failed to fetch stock data for %s: %s %s", symbol, status, reason)
        return QuoteSummary.empty(symbol)

    try:
        document = orjson_loads(body)
    except JsonParseError as exc:
        logger.warning("Failed to parse JSON for %s: %s", symbol, exc)
        return QuoteSummary.empty(symbol)

    meta = get_mapping(first_result(document), "meta")
    if meta is None:
        return QuoteSummary.empty(symbol)

    current_price = _number(meta.get("regularMarketPrice"))
    previous_close = _number(meta.get("previousClose"))
    if current_price <= 0 or previous_close <= 0:
        logger.debug("Incomplete quote for %s: price=%s previous_close=%s", symbol, current_price, previous_close)
        return QuoteSummary.empty(symbol)

    change_percent = (current_price - previous_close) / previous_close * 100.0
    return QuoteSummary(symbol=symbol, price=current_price, change_percent=change_percent, valid=True)


def _number(value: object) -> float:
    return float(value) if is_json_number(value) else 0.0


__all__ = ["extract_quote_summary"]
