"""Single-shot HTTP GET transport for the airport REST service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class TransportError(Exception):
    """No usable HTTP response: connect/DNS failure, timeout, bad URL or encoding."""


@dataclass(frozen=True, slots=True)
class TransportResponse:
    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class HttpTransport:
    """Thin async wrapper around ``httpx`` bound to one base URL.

    Each call opens a fresh ``httpx.AsyncClient`` so no connection state is
    shared between requests.  HTTP error statuses are returned, not raised.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    async def get(
        self,
        path: str,
        params: Mapping[str, str] | None = None,
    ) -> TransportResponse:
        """Issue ``GET {base_url}{path}`` and return the raw status and body."""
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=httpx.Timeout(self._timeout),
                transport=self._transport,
            ) as client:
                resp = await client.get(path, params=dict(params or {}))
                body = resp.text
        except (httpx.RequestError, httpx.InvalidURL, OverflowError) as exc:
            # OverflowError: the socket layer rejects out-of-range ports
            msg = f"GET {path} failed: {type(exc).__name__}: {exc}"
            raise TransportError(msg) from exc

        logger.debug(
            "GET %s -> HTTP %d (%d bytes)",
            resp.url,
            resp.status_code,
            len(resp.content),
        )
        return TransportResponse(status_code=resp.status_code, body=body)
