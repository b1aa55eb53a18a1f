"""
Fetcher: one GET per results page, no retries.

Transport failures are captured on the returned FetchOutcome instead of
being raised; non-200 responses are returned as-is so the extractor can
still look at whatever body came back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from .config import SearchConfig
from .errors import TransportError

logger = logging.getLogger(__name__)


@dataclass
class FetchOutcome:
    """Result of fetching one engine's results page."""

    source_identifier: str
    url: str
    http_status: Optional[int] = None
    body: Optional[str] = None
    transport_error: Optional[TransportError] = None

    @property
    def ok(self) -> bool:
        """True when the request completed with HTTP 200."""
        return self.transport_error is None and self.http_status == 200

    @property
    def document(self) -> str:
        """Body text, empty string when nothing was received."""
        return self.body or ""


class Fetcher:
    """Plain HTTP GET with a constant browser-like header set."""

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._config = config or SearchConfig()
        self._transport = transport

    @property
    def headers(self) -> Dict[str, str]:
        return self._config.headers

    async def fetch(self, url: str, source_identifier: str = "") -> FetchOutcome:
        """Fetch a results page. Never raises for network failures."""
        try:
            async with httpx.AsyncClient(
                follow_redirects=True,
                timeout=self._config.request_timeout,
                headers=self.headers,
                transport=self._transport,
            ) as client:
                resp = await client.get(url)
        except httpx.RequestError as e:
            reason = f"{type(e).__name__}: {e}" if str(e) else type(e).__name__
            logger.warning(f"{source_identifier or url}: request failed: {reason}")
            return FetchOutcome(
                source_identifier=source_identifier,
                url=url,
                transport_error=TransportError(url, reason),
            )

        logger.debug(f"{source_identifier}: HTTP Status: {resp.status_code}")
        return FetchOutcome(
            source_identifier=source_identifier,
            url=url,
            http_status=resp.status_code,
            body=resp.text,
        )
