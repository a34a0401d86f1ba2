"""API Messages — transport-neutral request and response envelopes.

Invariants:
    - InboundRequest.resource is the route TEMPLATE ("/locations/{id}"), not the raw path
    - InboundRequest.body is already schema-validated by the front door (or None)
    - ApiResponse.body is None only for bodiless responses (204)
    - internal_error() never carries internal detail
"""

from dataclasses import dataclass, field

from location_api.core.errors import INTERNAL_ERROR_MESSAGE
from location_api.core.outcomes import Failure
from location_api.schemas.location import LocationInput


@dataclass(frozen=True)
class InboundRequest:
    """One request as handed to the dispatcher."""
    resource: str
    method: str
    path_params: dict[str, str] = field(default_factory=dict)
    query_params: dict[str, str] = field(default_factory=dict)
    body: LocationInput | None = None


@dataclass(frozen=True)
class ApiResponse:
    """Handler result: status code plus optional JSON body."""
    status_code: int
    body: dict | None = None


def ok(body: dict) -> ApiResponse:
    return ApiResponse(200, body)


def no_content() -> ApiResponse:
    return ApiResponse(204)


def from_failure(failure: Failure) -> ApiResponse:
    return ApiResponse(failure.http_status, failure.to_response())


def internal_error() -> ApiResponse:
    return ApiResponse(500, {"message": INTERNAL_ERROR_MESSAGE})
