"""Request Validation — tests for the maxLocations query parameter check.

Tests cover:
    - Absent parameter means "store default"
    - Positive integers without leading zero accepted
    - Zero, leading zeros, signs, non-digits, empty string rejected
"""

import pytest

from location_api.core.outcomes import Failure, FailureKind
from location_api.core.validate_request import parse_max_locations


def test_absent_max_locations_is_none():
    assert parse_max_locations(None) is None


@pytest.mark.parametrize("raw,expected", [
    ("1", 1), ("3", 3), ("10", 10), ("250", 250), ("1000000", 1_000_000),
])
def test_accepts_positive_integers(raw, expected):
    assert parse_max_locations(raw) == expected


@pytest.mark.parametrize("raw", [
    "0", "01", "007", "abc", "-3", "+3", "", " 3", "3 ", "3.0", "1e3", "٣",
])
def test_rejects_malformed_values(raw):
    result = parse_max_locations(raw)
    assert isinstance(result, Failure)
    assert result.kind == FailureKind.INVALID_REQUEST
    assert result.http_status == 400
    assert result.message == "Request validation failed"
