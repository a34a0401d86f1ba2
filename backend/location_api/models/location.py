"""Location ORM — persisted layout of one location record.

Invariants:
    - id is the string primary key; uniqueness enforced by the engine
    - All columns non-nullable: a row is always a complete record
    - latitude/longitude stored as floats, never derived at read time

Design Decisions:
    - String id over native UUID column: ids are opaque to the store
    - Default table name "locations"; LocationStore can bind the same
      columns to a different table name from configuration
"""

from sqlalchemy import Float, String
from sqlalchemy.orm import Mapped, mapped_column

from location_api.db.base import Base


class Location(Base):
    """One row per location record."""
    __tablename__ = "locations"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    city: Mapped[str] = mapped_column(String, nullable=False)
    state: Mapped[str] = mapped_column(String, nullable=False)
    country: Mapped[str] = mapped_column(String, nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
