"""HTTP transport for quote requests."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Protocol

import aiohttp

from ..http_utils import is_aiohttp_session_open

logger = logging.getLogger(__name__)

_SESSION_CLOSE_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True)
class FetchResponse:
    """Status and body of one GET; ``status`` is ``None`` when no response arrived."""

    status: Optional[int]
    body: bytes = b""
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.status == 200

    @classmethod
    def failed(cls, reason: str) -> "FetchResponse":
        return cls(status=None, body=b"", reason=reason)


class QuoteTransport(Protocol):
    """Issue a GET and hand back the status and body bytes."""

    async def get(self, url: str, headers: Mapping[str, str]) -> FetchResponse: ...

    async def close(self) -> None: ...


class AiohttpQuoteClient:
    """aiohttp-backed transport sharing one session across all requests."""

    def __init__(self, *, request_timeout_seconds: Optional[float] = None, connection_limit: int = 30):
        self.request_timeout_seconds = request_timeout_seconds
        self.connection_limit = connection_limit
        self.session: Optional[aiohttp.ClientSession] = None

    def _ensure_session(self) -> aiohttp.ClientSession:
        if is_aiohttp_session_open(self.session):
            return self.session
        timeout = aiohttp.ClientTimeout(total=self.request_timeout_seconds)
        self.session = aiohttp.ClientSession(
            timeout=timeout,
            connector=aiohttp.TCPConnector(limit=self.connection_limit, ttl_dns_cache=300),
        )
        logger.debug("Created HTTP session (timeout=%s)", self.request_timeout_seconds)
        return self.session

    async def get(self, url: str, headers: Mapping[str, str]) -> FetchResponse:
        session = self._ensure_session()
        logger.debug("GET %s", url)
        try:
            async with session.get(url, headers=dict(headers)) as response:
                body = await response.read()
                return FetchResponse(status=response.status, body=body, reason=response.reason or "")
        except aiohttp.ClientError as exc:
            logger.warning("HTTP request failed for %s: %s", url, exc)
            return FetchResponse.failed(str(exc) or type(exc).__name__)
        except asyncio.TimeoutError:
            logger.warning("HTTP request timed out for %s", url)
            return FetchResponse.failed("timeout")

    async def close(self) -> None:
        """Close the HTTP session."""
        if self.session is None:
            return
        try:
            if not self.session.closed:
                await asyncio.wait_for(self.session.close(), timeout=_SESSION_CLOSE_TIMEOUT_SECONDS)
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError):
            logger.warning("Error closing HTTP session")
        finally:
            self.session = None

    async def __aenter__(self) -> "AiohttpQuoteClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()


__all__ = ["AiohttpQuoteClient", "FetchResponse", "QuoteTransport"]
