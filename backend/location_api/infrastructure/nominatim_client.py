"""Nominatim Client — resolves (city, state, country) to coordinates over HTTP.

Invariants:
    - Exactly one provider call per lookup: no retry, no cache
    - First search result wins; remaining results ignored
    - Non-2xx provider status -> Failure("failed to lookup location: <status text>")
    - Empty result list -> Failure("failed to lookup location: no results")
    - Transport faults (connect, timeout) -> GeocoderUnavailableError (500);
      they are not lookup failures
    - The client object holds no request state; one instance serves all requests

Design Decisions:
    - Shared httpx.AsyncClient built once, closed in the lifespan shutdown
    - Timeout is the transport timeout of the HTTP client, nothing layered on top
    - User-Agent always sent: required by the Nominatim usage policy
"""

import logging

import httpx
from pydantic import ValidationError

from location_api.core.errors import ErrorContext, GeocoderUnavailableError
from location_api.core.outcomes import Failure, lookup_failed
from location_api.schemas.location import Coordinates

logger = logging.getLogger(__name__)

SEARCH_PATH = "/search"


class NominatimClient:
    """CoordinateLookup implementation against a Nominatim /search endpoint."""

    def __init__(
        self,
        base_url: str = "https://nominatim.openstreetmap.org",
        user_agent: str = "location-api/1.0",
        timeout_seconds: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._http = http_client or httpx.AsyncClient(
            base_url=base_url,
            headers={"User-Agent": user_agent},
            timeout=timeout_seconds,
        )

    async def lookup(
        self, city: str, state: str, country: str,
    ) -> Coordinates | Failure:
        """Resolve an address to the provider's first matching coordinates."""
        params = {
            "format": "json",
            "city": city,
            "state": state,
            "country": country,
        }
        try:
            response = await self._http.get(SEARCH_PATH, params=params)
        except httpx.TransportError as e:
            logger.error(f"Geocoding transport error: {e}")
            raise GeocoderUnavailableError(
                str(e), context=ErrorContext(debug_info=params),
            )

        if not response.is_success:
            logger.warning(
                f"Geocoding provider returned {response.status_code}: "
                f"{response.text[:200]}",
            )
            return lookup_failed(response.reason_phrase)

        results = response.json()
        if not results:
            return lookup_failed("no results")

        first = results[0]
        try:
            return Coordinates(
                latitude=float(first["lat"]), longitude=float(first["lon"]),
            )
        except (KeyError, TypeError, ValueError, ValidationError):
            logger.warning(f"Unusable geocoding result: {first!r}")
            return lookup_failed("no results")

    async def aclose(self) -> None:
        await self._http.aclose()
