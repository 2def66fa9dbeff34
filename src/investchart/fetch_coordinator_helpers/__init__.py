"""Helpers for the fetch coordinator."""

from .generation import FetchGeneration, SlotCompletion
from .quote_client import AiohttpQuoteClient, FetchResponse, QuoteTransport
from .request_builder import BROWSER_USER_AGENT, RequestBuilder

__all__ = [
    "AiohttpQuoteClient",
    "BROWSER_USER_AGENT",
    "FetchGeneration",
    "FetchResponse",
    "QuoteTransport",
    "RequestBuilder",
    "SlotCompletion",
]
