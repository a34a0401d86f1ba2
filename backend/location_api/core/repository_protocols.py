"""Boundary Protocols — contracts between the endpoints and their IO collaborators.

Invariants:
    - Orchestration depends only on these Protocols, never on SQLAlchemy or httpx
    - Expected failures are returned as Failure values; only unclassified
      faults (StoreError, GeocoderUnavailableError, ...) are raised
    - Implementations hold no request-scoped state: safe to share across requests

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol

from location_api.core.domain_types import ContinuationToken, LocationId
from location_api.core.outcomes import Failure
from location_api.schemas.location import Coordinates, LocationRecord


class LocationStore(Protocol):
    """Durable collection of location records, implemented by infrastructure."""
    async def create(self, record: LocationRecord) -> LocationRecord | Failure: ...
    async def get(self, location_id: LocationId) -> LocationRecord | Failure: ...
    async def put(self, record: LocationRecord) -> LocationRecord | Failure: ...
    async def delete(self, location_id: LocationId) -> None | Failure: ...
    async def list(
        self, cursor: ContinuationToken | None = None, limit: int | None = None,
    ) -> tuple[list[LocationRecord], ContinuationToken | None]: ...


class CoordinateLookup(Protocol):
    """Address -> coordinates resolution, implemented by infrastructure."""
    async def lookup(
        self, city: str, state: str, country: str,
    ) -> Coordinates | Failure: ...
    async def aclose(self) -> None: ...
