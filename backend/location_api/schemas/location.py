"""Location Schemas — Pydantic models for the API boundary and store contract.

Invariants:
    - LocationInput carries only caller-editable fields; anything else in the
      body (id, latitude, longitude) is ignored, never accepted
    - Coordinates bounded: latitude -90..90, longitude -180..180
    - LocationRecord is immutable once built
    - LocationPage serializes continuationToken only when another page exists
"""

from pydantic import BaseModel, ConfigDict, Field


class LocationInput(BaseModel):
    """Create/update request body."""
    name: str
    city: str
    state: str
    country: str


class Coordinates(BaseModel):
    """Lookup result."""
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class LocationRecord(BaseModel):
    """A stored location: the API's LocationRecord."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    city: str
    state: str
    country: str
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class LocationPage(BaseModel):
    """One page of GET /locations."""
    model_config = ConfigDict(populate_by_name=True)

    locations: list[LocationRecord]
    continuation_token: str | None = Field(None, alias="continuationToken")

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
