"""REST client for the airport service.

Every public operation is one GET request, one status check and one
decode.  Transport faults, non-2xx statuses and undecodable bodies are
all folded into an empty list, so callers only ever iterate results.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from airport_core.schemas import Aircraft, Airport, FetchResult, Passenger
from airport_client import codec
from airport_client.config import settings
from airport_client.transport import HttpTransport, TransportError

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx
    from pydantic import BaseModel

logger = logging.getLogger(__name__)

PASSENGERS_PATH = "/passengers"
AIRCRAFT_PATH = "/aircraft"
AIRPORTS_PATH = "/airports"


class AirportRestClient:
    """Read-only client for passengers, aircraft and airports.

    The instance holds nothing but its transport (base URL and timeout),
    so concurrent calls on one client are safe.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = HttpTransport(
            base_url or settings.base_url,
            timeout=timeout if timeout is not None else settings.timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._http.base_url

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    async def get_all_passengers(self) -> list[Passenger]:
        result = await self._fetch(PASSENGERS_PATH, Passenger)
        return result.items

    async def get_all_aircraft(self) -> list[Aircraft]:
        result = await self._fetch(AIRCRAFT_PATH, Aircraft)
        return result.items

    async def get_all_airports(self) -> list[Airport]:
        result = await self._fetch(AIRPORTS_PATH, Airport)
        return result.items

    async def get_airports_by_city_id(self, city_id: int) -> list[Airport]:
        """Airports located in the city with *city_id*."""
        result = await self._fetch(
            AIRPORTS_PATH, Airport, params={"cityId": str(city_id)}
        )
        return result.items

    async def get_airports_by_aircraft(self, aircraft_id: int) -> list[Airport]:
        """Airports the aircraft with *aircraft_id* is allowed to use."""
        result = await self._fetch(
            AIRPORTS_PATH, Airport, params={"aircraftId": str(aircraft_id)}
        )
        return result.items

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _fetch(
        self,
        path: str,
        entity: type[BaseModel],
        params: Mapping[str, str] | None = None,
    ) -> FetchResult:
        """Run one request/decode cycle and describe how it ended."""
        start = time.monotonic()

        def _failed(error: str, status_code: int | None = None) -> FetchResult:
            logger.warning("GET %s %s: %s", path, params or {}, error)
            return FetchResult(
                path=path,
                status_code=status_code,
                duration_ms=_elapsed_ms(start),
                error=error,
                success=False,
            )

        try:
            resp = await self._http.get(path, params=params)
        except TransportError as exc:
            return _failed(str(exc))

        if not resp.ok:
            return _failed(f"HTTP {resp.status_code}", resp.status_code)

        try:
            items = codec.parse(resp.body, entity)
        except codec.ParseError as exc:
            return _failed(f"Unparseable body: {exc}", resp.status_code)

        logger.info("Fetched %d %s from %s", len(items), entity.__name__, path)
        return FetchResult(
            path=path,
            items=items,
            status_code=resp.status_code,
            duration_ms=_elapsed_ms(start),
        )


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)
