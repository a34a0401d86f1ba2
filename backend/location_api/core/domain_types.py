"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - LocationId wraps the opaque record id (uuid4 text), never parsed
    - ContinuationToken is opaque to callers; it is only ever fed back to list()
    - Route is the closed set of (resource, method) pairs the API serves

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON / log extras without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

LocationId = NewType("LocationId", str)
ContinuationToken = NewType("ContinuationToken", str)


# ─── Value Types ─────────────────────────────────────────────────

Latitude = NewType("Latitude", float)     # -90.0–90.0
Longitude = NewType("Longitude", float)   # -180.0–180.0


# ─── Routing ─────────────────────────────────────────────────────

LOCATIONS_RESOURCE = "/locations"
LOCATION_RESOURCE = "/locations/{id}"


class Route(str, Enum):
    """Every endpoint of the API. Adding one requires a dispatch branch."""
    LIST_LOCATIONS = "list_locations"
    CREATE_LOCATION = "create_location"
    GET_LOCATION = "get_location"
    UPDATE_LOCATION = "update_location"
    DELETE_LOCATION = "delete_location"


ROUTE_TABLE: dict[tuple[str, str], Route] = {
    (LOCATIONS_RESOURCE, "GET"): Route.LIST_LOCATIONS,
    (LOCATIONS_RESOURCE, "POST"): Route.CREATE_LOCATION,
    (LOCATION_RESOURCE, "GET"): Route.GET_LOCATION,
    (LOCATION_RESOURCE, "PUT"): Route.UPDATE_LOCATION,
    (LOCATION_RESOURCE, "DELETE"): Route.DELETE_LOCATION,
}


def resolve_route(resource: str, method: str) -> Route | None:
    """Map a (resource template, HTTP method) pair to its Route, if any."""
    return ROUTE_TABLE.get((resource, method.upper()))
