"""Locations table — one row per location record, keyed by id.

Revision ID: 001_locations
Revises: None
Create Date: 2026-10-18

"""
import os
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_locations"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TABLE_NAME = os.environ.get("LOCATIONS_TABLE_NAME", "locations")


def upgrade() -> None:
    op.create_table(
        TABLE_NAME,
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("name", sa.String, nullable=False),
        sa.Column("city", sa.String, nullable=False),
        sa.Column("state", sa.String, nullable=False),
        sa.Column("country", sa.String, nullable=False),
        sa.Column("latitude", sa.Float, nullable=False),
        sa.Column("longitude", sa.Float, nullable=False),
    )


def downgrade() -> None:
    op.drop_table(TABLE_NAME)
