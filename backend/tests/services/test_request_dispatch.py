"""Request Dispatch — routing, validation, and the catch-all boundary.

Tests cover:
    - Unknown (resource, method) -> 500 with generic message, endpoint untouched
    - Invalid maxLocations -> 400 before the store is called
    - Valid maxLocations / continuationToken forwarded to the store
    - Exceptions escaping an endpoint -> opaque 500
    - Missing body on create/update -> 400
"""

import logging

import pytest

from location_api.core.api_messages import InboundRequest
from location_api.core.domain_types import LOCATION_RESOURCE, LOCATIONS_RESOURCE
from location_api.core.errors import StoreError
from location_api.schemas.location import LocationInput
from location_api.services.location_endpoints import LocationEndpoints
from location_api.services.request_dispatch import RequestDispatch
from tests.services.fake_geocoder import FakeGeocoder


class _RecordingStore:
    """LocationStore double: logs calls, optionally raises."""

    def __init__(self, raises: Exception | None = None):
        self.calls = []
        self.raises = raises

    async def _call(self, name, *args):
        self.calls.append((name, args))
        if self.raises is not None:
            raise self.raises

    async def create(self, record):
        await self._call("create", record)
        return record

    async def get(self, location_id):
        await self._call("get", location_id)

    async def put(self, record):
        await self._call("put", record)
        return record

    async def delete(self, location_id):
        await self._call("delete", location_id)

    async def list(self, cursor=None, limit=None):
        await self._call("list", cursor, limit)
        return [], None


def _dispatch(store=None, geocoder=None) -> RequestDispatch:
    return RequestDispatch(LocationEndpoints(
        store or _RecordingStore(), geocoder or FakeGeocoder(),
    ))


BODY = LocationInput(name="Foo", city="Seattle", state="WA", country="US")


# ─── routing ─────────────────────────────────────────────────────

@pytest.mark.parametrize("resource,method", [
    (LOCATIONS_RESOURCE, "PATCH"),
    (LOCATION_RESOURCE, "POST"),
    ("/unknown", "GET"),
])
async def test_unrouted_request_is_internal_error(resource, method, caplog):
    store = _RecordingStore()

    with caplog.at_level(logging.ERROR):
        response = await _dispatch(store).dispatch(InboundRequest(resource, method))

    assert response.status_code == 500
    assert response.body == {"message": "Internal Server Error"}
    assert store.calls == []
    assert f"unhandled method {method} {resource}" in caplog.text


async def test_method_matching_is_case_insensitive():
    store = _RecordingStore()
    response = await _dispatch(store).dispatch(
        InboundRequest(LOCATIONS_RESOURCE, "get"),
    )
    assert response.status_code == 200
    assert store.calls == [("list", (None, None))]


# ─── list validation ─────────────────────────────────────────────

@pytest.mark.parametrize("raw", ["0", "01", "abc", "-3", ""])
async def test_invalid_max_locations_never_reaches_store(raw):
    store = _RecordingStore()

    response = await _dispatch(store).dispatch(InboundRequest(
        LOCATIONS_RESOURCE, "GET", query_params={"maxLocations": raw},
    ))

    assert response.status_code == 400
    assert response.body == {"message": "Request validation failed"}
    assert store.calls == []


async def test_list_forwards_cursor_and_limit():
    store = _RecordingStore()

    response = await _dispatch(store).dispatch(InboundRequest(
        LOCATIONS_RESOURCE, "GET",
        query_params={"maxLocations": "25", "continuationToken": "loc-9"},
    ))

    assert response.status_code == 200
    assert response.body == {"locations": []}
    assert store.calls == [("list", ("loc-9", 25))]


# ─── catch-all ───────────────────────────────────────────────────

async def test_store_fault_becomes_opaque_internal_error(caplog):
    store = _RecordingStore(raises=StoreError("disk I/O error at /var/db", "execute"))

    with caplog.at_level(logging.ERROR):
        response = await _dispatch(store).dispatch(InboundRequest(
            LOCATION_RESOURCE, "GET", path_params={"id": "abc"},
        ))

    assert response.status_code == 500
    assert response.body == {"message": "Internal Server Error"}
    assert "/var/db" not in str(response.body)
    assert "Unhandled exception in get_location" in caplog.text


async def test_unexpected_exception_becomes_internal_error():
    store = _RecordingStore(raises=RuntimeError("boom"))

    response = await _dispatch(store).dispatch(InboundRequest(
        LOCATION_RESOURCE, "DELETE", path_params={"id": "abc"},
    ))

    assert response.status_code == 500


async def test_geocoder_fault_becomes_internal_error():
    class _BrokenGeocoder:
        async def lookup(self, city, state, country):
            raise ConnectionError("provider down")

        async def aclose(self):
            pass

    store = _RecordingStore()
    response = await _dispatch(store, _BrokenGeocoder()).dispatch(
        InboundRequest(LOCATIONS_RESOURCE, "POST", body=BODY),
    )

    assert response.status_code == 500
    assert store.calls == []


# ─── bodies ──────────────────────────────────────────────────────

@pytest.mark.parametrize("resource,method,path_params", [
    (LOCATIONS_RESOURCE, "POST", {}),
    (LOCATION_RESOURCE, "PUT", {"id": "abc"}),
])
async def test_missing_body_is_bad_request(resource, method, path_params):
    store = _RecordingStore()

    response = await _dispatch(store).dispatch(
        InboundRequest(resource, method, path_params=path_params),
    )

    assert response.status_code == 400
    assert store.calls == []


async def test_update_uses_path_id():
    store = _RecordingStore()

    response = await _dispatch(store).dispatch(InboundRequest(
        LOCATION_RESOURCE, "PUT", path_params={"id": "abc"}, body=BODY,
    ))

    assert response.status_code == 200
    assert response.body["id"] == "abc"
    assert store.calls[0][0] == "put"
