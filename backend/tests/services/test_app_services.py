"""App Services — container built from Settings, as the lifespan does it."""

from location_api.config import Settings
from location_api.core.api_messages import InboundRequest
from location_api.core.domain_types import LOCATIONS_RESOURCE
from location_api.infrastructure.nominatim_client import NominatimClient
from location_api.schemas.location import LocationInput
from location_api.services.app_services import build_services
from tests.services.fake_geocoder import SEATTLE


def _settings(tmp_path, **overrides) -> Settings:
    fields = {
        "database_url": f"sqlite+aiosqlite:///{tmp_path / 'locations.db'}",
        "geocoder_base_url": "http://geocoder.invalid",
    }
    fields.update(overrides)
    return Settings(_env_file=None, **fields)


async def test_build_services_creates_table(tmp_path):
    services = await build_services(
        _settings(tmp_path, locations_table_name="places", default_page_size=5),
    )
    try:
        assert await services.store.ping() is True
        assert isinstance(services.geocoder, NominatimClient)
        assert await services.store.list() == ([], None)
    finally:
        await services.aclose()


async def test_dispatch_is_wired_to_store_and_geocoder(tmp_path, monkeypatch):
    services = await build_services(_settings(tmp_path))
    seen = []

    async def fake_lookup(city, state, country):
        seen.append(city)
        return SEATTLE

    monkeypatch.setattr(services.geocoder, "lookup", fake_lookup)
    try:
        response = await services.dispatch.dispatch(InboundRequest(
            LOCATIONS_RESOURCE, "POST",
            body=LocationInput(name="Foo", city="Seattle", state="WA", country="US"),
        ))
        assert response.status_code == 200
        assert seen == ["Seattle"]
        assert (await services.store.get(response.body["id"])).name == "Foo"
    finally:
        await services.aclose()


async def test_aclose_closes_any_geocoder(services, geocoder):
    await services.aclose()

    assert geocoder.closed is True
