"""Location Endpoints — per-endpoint composition of the geocoder and the store.

Invariants:
    - Each endpoint handles ONLY the failure kinds it expects; anything raised
      propagates to the dispatcher's catch-all
    - Create/update always run the lookup to completion BEFORE the write; a
      failed lookup returns 400 and the store is never called
    - Coordinates are re-resolved on every update, even for an unchanged address
    - compose_record is the only place a LocationRecord is assembled from a request

Design Decisions:
    - Create answers 200 (not 201) with the created record
    - Create id collision answers 409 Conflict
    - id_factory injectable so collisions can be exercised in tests
"""

import logging
import uuid
from typing import Callable

from location_api.core.api_messages import (
    ApiResponse, from_failure, no_content, ok,
)
from location_api.core.domain_types import ContinuationToken, LocationId
from location_api.core.outcomes import Failure
from location_api.core.repository_protocols import CoordinateLookup, LocationStore
from location_api.schemas.location import (
    Coordinates, LocationInput, LocationPage, LocationRecord,
)

logger = logging.getLogger(__name__)


def new_location_id() -> LocationId:
    return LocationId(str(uuid.uuid4()))


def compose_record(
    location_id: LocationId, coordinates: Coordinates, body: LocationInput,
) -> LocationRecord:
    """Build a record field by field.

    id comes from the server (generated or path), address fields from the
    body, latitude/longitude from the lookup only.
    """
    return LocationRecord(
        id=location_id,
        name=body.name,
        city=body.city,
        state=body.state,
        country=body.country,
        latitude=coordinates.latitude,
        longitude=coordinates.longitude,
    )


class LocationEndpoints:
    """Business logic for the five location endpoints."""

    def __init__(
        self,
        store: LocationStore,
        geocoder: CoordinateLookup,
        id_factory: Callable[[], LocationId] = new_location_id,
    ):
        self._store = store
        self._geocoder = geocoder
        self._new_id = id_factory

    async def list_locations(
        self, cursor: ContinuationToken | None, limit: int | None,
    ) -> ApiResponse:
        records, next_cursor = await self._store.list(cursor, limit)
        page = LocationPage(locations=records, continuation_token=next_cursor)
        return ok(page.to_response())

    async def create_location(self, body: LocationInput) -> ApiResponse:
        location_id = self._new_id()
        coordinates = await self._resolve(body)
        if isinstance(coordinates, Failure):
            return from_failure(coordinates)

        created = await self._store.create(
            compose_record(location_id, coordinates, body),
        )
        if isinstance(created, Failure):
            return from_failure(created)
        return ok(created.model_dump())

    async def get_location(self, location_id: LocationId) -> ApiResponse:
        record = await self._store.get(location_id)
        if isinstance(record, Failure):
            return from_failure(record)
        return ok(record.model_dump())

    async def update_location(
        self, location_id: LocationId, body: LocationInput,
    ) -> ApiResponse:
        coordinates = await self._resolve(body)
        if isinstance(coordinates, Failure):
            return from_failure(coordinates)

        updated = await self._store.put(
            compose_record(location_id, coordinates, body),
        )
        if isinstance(updated, Failure):
            return from_failure(updated)
        return ok(updated.model_dump())

    async def delete_location(self, location_id: LocationId) -> ApiResponse:
        outcome = await self._store.delete(location_id)
        if isinstance(outcome, Failure):
            return from_failure(outcome)
        return no_content()

    async def _resolve(self, body: LocationInput) -> Coordinates | Failure:
        coordinates = await self._geocoder.lookup(
            body.city, body.state, body.country,
        )
        if isinstance(coordinates, Failure):
            logger.info(f"Location lookup failed: {coordinates.message}")
        return coordinates
