"""Route Table — tests for (resource, method) -> Route resolution."""

import pytest

from location_api.core.domain_types import (
    LOCATION_RESOURCE, LOCATIONS_RESOURCE, ROUTE_TABLE, Route, resolve_route,
)


@pytest.mark.parametrize("resource,method,route", [
    (LOCATIONS_RESOURCE, "GET", Route.LIST_LOCATIONS),
    (LOCATIONS_RESOURCE, "POST", Route.CREATE_LOCATION),
    (LOCATION_RESOURCE, "GET", Route.GET_LOCATION),
    (LOCATION_RESOURCE, "PUT", Route.UPDATE_LOCATION),
    (LOCATION_RESOURCE, "DELETE", Route.DELETE_LOCATION),
])
def test_known_routes_resolve(resource, method, route):
    assert resolve_route(resource, method) is route


def test_method_is_case_insensitive():
    assert resolve_route(LOCATION_RESOURCE, "delete") is Route.DELETE_LOCATION


@pytest.mark.parametrize("resource,method", [
    (LOCATIONS_RESOURCE, "DELETE"),
    (LOCATION_RESOURCE, "POST"),
    ("/locations/abc", "GET"),
    ("/health", "GET"),
])
def test_unknown_routes_resolve_to_none(resource, method):
    assert resolve_route(resource, method) is None


def test_every_route_is_reachable():
    assert set(ROUTE_TABLE.values()) == set(Route)
