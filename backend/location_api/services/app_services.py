"""App Services — the per-process dependency container.

Invariants:
    - Built exactly once per process (FastAPI lifespan) from Settings
    - Holds only long-lived, read-only handles: session manager, store,
      geocoder, dispatcher; no request data ever stored here
    - Routes reach it through the get_services dependency, never via globals
"""

import logging
from dataclasses import dataclass

from location_api.config import Settings
from location_api.core.repository_protocols import CoordinateLookup
from location_api.infrastructure.database import (
    DatabaseSessionManager, create_db_manager,
)
from location_api.infrastructure.location_store import SqlLocationStore
from location_api.infrastructure.nominatim_client import NominatimClient
from location_api.services.location_endpoints import LocationEndpoints
from location_api.services.request_dispatch import RequestDispatch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppServices:
    db: DatabaseSessionManager
    store: SqlLocationStore
    geocoder: CoordinateLookup
    dispatch: RequestDispatch

    @classmethod
    def assemble(
        cls,
        db: DatabaseSessionManager,
        store: SqlLocationStore,
        geocoder: CoordinateLookup,
    ) -> "AppServices":
        endpoints = LocationEndpoints(store, geocoder)
        return cls(db, store, geocoder, RequestDispatch(endpoints))

    async def aclose(self) -> None:
        await self.geocoder.aclose()
        await self.db.dispose()


async def build_services(settings: Settings) -> AppServices:
    """Construct every long-lived handle from configuration."""
    db = create_db_manager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    store = SqlLocationStore(
        db,
        table_name=settings.locations_table_name,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )
    if settings.database_auto_create:
        await store.ensure_schema()
        logger.info(f"Ensured table '{settings.locations_table_name}' exists")
    geocoder = NominatimClient(
        base_url=settings.geocoder_base_url,
        user_agent=settings.geocoder_user_agent,
        timeout_seconds=settings.geocoder_timeout_seconds,
    )
    return AppServices.assemble(db, store, geocoder)
