"""Location Store — SQL-backed key-value collection of location records.

Invariants:
    - Every mutation is ONE conditioned statement: the presence/absence check
      and the write cannot be separated by a concurrent request
      (create: INSERT guarded by the primary key; put/delete: statement
      filtered on id, affected-row count decides NotFound)
    - put never upserts; create never overwrites
    - Failed mutations roll back: no visible effect
    - list() is keyset pagination on id: ascending, resumes strictly after
      the cursor, so chained pages enumerate every record exactly once
    - A cursor is returned only when at least one record follows the page
    - Page size never exceeds max_page_size, whatever limit the caller asks for

Design Decisions:
    - Cursor is the last returned id as-is: opaque to callers, no decoding step
    - Fetch page_size + 1 rows to know whether another page exists without a
      COUNT query
    - Table name bound at construction from configuration; the columns come
      from the Location ORM model
"""

import logging

from sqlalchemy import MetaData, Table, delete, insert, select, update
from sqlalchemy.exc import IntegrityError

from location_api.core.domain_types import ContinuationToken, LocationId
from location_api.core.outcomes import (
    Failure, location_already_exists, location_not_found,
)
from location_api.infrastructure.database import DatabaseSessionManager
from location_api.models.location import Location
from location_api.schemas.location import LocationRecord

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 100
MAX_PAGE_SIZE = 1000


def bind_locations_table(table_name: str) -> Table:
    """Return the locations table definition under `table_name`."""
    table = Location.__table__
    if table_name == table.name:
        return table
    return table.to_metadata(MetaData(), name=table_name)


class SqlLocationStore:
    """LocationStore implementation over an async SQLAlchemy engine."""

    def __init__(
        self,
        db: DatabaseSessionManager,
        table_name: str = Location.__tablename__,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ):
        self._db = db
        self._table = bind_locations_table(table_name)
        self._default_page_size = default_page_size
        self._max_page_size = max_page_size

    async def ensure_schema(self) -> None:
        """Create the table if it does not exist yet (dev/test convenience)."""
        async with self._db.engine.begin() as conn:
            await conn.run_sync(self._table.create, checkfirst=True)

    async def ping(self) -> bool:
        return await self._db.health_check()

    async def create(self, record: LocationRecord) -> LocationRecord | Failure:
        """Insert `record` only if its id is absent."""
        async with self._db.session() as db:
            try:
                await db.execute(
                    insert(self._table).values(**record.model_dump()),
                )
                await db.commit()
            except IntegrityError:
                await db.rollback()
                logger.warning(
                    "Location id collision on create",
                    extra={"location_id": record.id},
                )
                return location_already_exists(record.id)
        logger.info("Location created", extra={"location_id": record.id})
        return record

    async def get(self, location_id: LocationId) -> LocationRecord | Failure:
        async with self._db.session() as db:
            result = await db.execute(
                select(self._table).where(self._table.c.id == location_id),
            )
            row = result.mappings().first()
        if row is None:
            return location_not_found(location_id)
        return LocationRecord.model_validate(dict(row))

    async def put(self, record: LocationRecord) -> LocationRecord | Failure:
        """Replace every non-id field of an existing record."""
        async with self._db.session() as db:
            result = await db.execute(
                update(self._table)
                .where(self._table.c.id == record.id)
                .values(**record.model_dump(exclude={"id"})),
            )
            if result.rowcount == 0:
                await db.rollback()
                return location_not_found(record.id)
            await db.commit()
        logger.info("Location replaced", extra={"location_id": record.id})
        return record

    async def delete(self, location_id: LocationId) -> None | Failure:
        async with self._db.session() as db:
            result = await db.execute(
                delete(self._table).where(self._table.c.id == location_id),
            )
            if result.rowcount == 0:
                await db.rollback()
                return location_not_found(location_id)
            await db.commit()
        logger.info("Location deleted", extra={"location_id": location_id})
        return None

    async def list(
        self, cursor: ContinuationToken | None = None, limit: int | None = None,
    ) -> tuple[list[LocationRecord], ContinuationToken | None]:
        """Return one page in id order plus the cursor for the next page."""
        page_size = min(limit or self._default_page_size, self._max_page_size)
        query = (
            select(self._table)
            .order_by(self._table.c.id)
            .limit(page_size + 1)
        )
        if cursor is not None:
            query = query.where(self._table.c.id > cursor)

        async with self._db.session() as db:
            result = await db.execute(query)
            rows = result.mappings().all()

        records = [
            LocationRecord.model_validate(dict(row)) for row in rows[:page_size]
        ]
        next_cursor = None
        if len(rows) > page_size:
            next_cursor = ContinuationToken(records[-1].id)
        return records, next_cursor
