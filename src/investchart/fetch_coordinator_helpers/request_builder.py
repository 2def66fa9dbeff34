"""Build chart endpoint URLs and request headers."""

from __future__ import annotations

from typing import Dict, Optional
from urllib.parse import urlencode

from ..chart_presets import ChartPreset
from ..http_utils import ensure_http_url, quote_path_segment

# Browser-like agent; the endpoint rate-limits library user agents.
BROWSER_USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36"


class RequestBuilder:
    """Formats ``{endpoint}/{symbol}`` with optional range/interval parameters."""

    def __init__(self, endpoint: str, *, user_agent: str = BROWSER_USER_AGENT):
        self.endpoint = ensure_http_url(endpoint).rstrip("/")
        self.user_agent = user_agent

    def build_url(self, symbol: str, preset: Optional[ChartPreset] = None) -> str:
        url = f"{self.endpoint}/{quote_path_segment(symbol)}"
        if preset is None:
            return url
        return f"{url}?{urlencode({'interval': preset.interval, 'range': preset.range})}"

    def headers(self) -> Dict[str, str]:
        return {"User-Agent": self.user_agent}


__all__ = ["BROWSER_USER_AGENT", "RequestBuilder"]
