"""Operation Outcomes — tagged failure values for expected, recoverable errors.

Invariants:
    - Store and geocoder operations return either their value or a Failure,
      never raise for an expected condition
    - FailureKind -> HTTP status lives in exactly one table (HTTP_STATUS_BY_KIND)
    - Failure.message is safe to show to the caller

Design Decisions:
    - Union return (`T | Failure`) checked with isinstance over a Result wrapper:
      success values stay plain pydantic models
"""

from dataclasses import dataclass
from enum import Enum


class FailureKind(str, Enum):
    """Every expected failure the endpoints translate to a status code."""
    INVALID_REQUEST = "invalid_request"
    LOOKUP_FAILED = "lookup_failed"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"


HTTP_STATUS_BY_KIND: dict[FailureKind, int] = {
    FailureKind.INVALID_REQUEST: 400,
    FailureKind.LOOKUP_FAILED: 400,
    FailureKind.NOT_FOUND: 404,
    FailureKind.ALREADY_EXISTS: 409,
}


@dataclass(frozen=True)
class Failure:
    """An expected failure with a caller-facing message."""
    kind: FailureKind
    message: str

    @property
    def http_status(self) -> int:
        return HTTP_STATUS_BY_KIND[self.kind]

    def to_response(self) -> dict:
        return {"message": self.message}


def invalid_request() -> Failure:
    return Failure(FailureKind.INVALID_REQUEST, "Request validation failed")


def lookup_failed(reason: str) -> Failure:
    return Failure(
        FailureKind.LOOKUP_FAILED, f"failed to lookup location: {reason}",
    )


def location_not_found(location_id: str) -> Failure:
    return Failure(FailureKind.NOT_FOUND, f"location '{location_id}' not found")


def location_already_exists(location_id: str) -> Failure:
    return Failure(
        FailureKind.ALREADY_EXISTS, f"location '{location_id}' already exists",
    )
