"""Location Routes — HTTP surface for /locations and /locations/{id}.

Invariants:
    - Routes contain no business logic: each builds an InboundRequest and
      hands it to RequestDispatch
    - Request bodies validated by Pydantic (LocationInput) before dispatch
    - maxLocations is accepted as a raw string; its format is checked by the
      dispatcher, not here
    - 204 responses carry no body
"""

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse, Response

from location_api.api.dependencies import get_services
from location_api.core.api_messages import ApiResponse, InboundRequest
from location_api.core.domain_types import LOCATION_RESOURCE, LOCATIONS_RESOURCE
from location_api.schemas.location import LocationInput, LocationPage, LocationRecord
from location_api.services.app_services import AppServices

router = APIRouter(prefix=LOCATIONS_RESOURCE, tags=["locations"])

_ERROR_BODY = {
    "content": {
        "application/json": {
            "schema": {
                "type": "object",
                "properties": {"message": {"type": "string"}},
            },
        },
    },
}


def _to_http(response: ApiResponse) -> Response:
    if response.body is None:
        return Response(status_code=response.status_code)
    return JSONResponse(status_code=response.status_code, content=response.body)


@router.get(
    "",
    responses={200: {"model": LocationPage}, 400: _ERROR_BODY, 500: _ERROR_BODY},
)
async def list_locations(
    continuation_token: str | None = Query(None, alias="continuationToken"),
    max_locations: str | None = Query(None, alias="maxLocations"),
    services: AppServices = Depends(get_services),
):
    """List locations, one page at a time."""
    query = {}
    if continuation_token is not None:
        query["continuationToken"] = continuation_token
    if max_locations is not None:
        query["maxLocations"] = max_locations
    response = await services.dispatch.dispatch(
        InboundRequest(LOCATIONS_RESOURCE, "GET", query_params=query),
    )
    return _to_http(response)


@router.post(
    "",
    responses={
        200: {"model": LocationRecord}, 400: _ERROR_BODY,
        409: _ERROR_BODY, 500: _ERROR_BODY,
    },
)
async def create_location(
    body: LocationInput = Body(...),
    services: AppServices = Depends(get_services),
):
    """Create a location; coordinates are resolved from city/state/country."""
    response = await services.dispatch.dispatch(
        InboundRequest(LOCATIONS_RESOURCE, "POST", body=body),
    )
    return _to_http(response)


@router.get(
    "/{location_id}",
    responses={200: {"model": LocationRecord}, 404: _ERROR_BODY, 500: _ERROR_BODY},
)
async def get_location(
    location_id: str, services: AppServices = Depends(get_services),
):
    response = await services.dispatch.dispatch(
        InboundRequest(LOCATION_RESOURCE, "GET", path_params={"id": location_id}),
    )
    return _to_http(response)


@router.put(
    "/{location_id}",
    responses={
        200: {"model": LocationRecord}, 400: _ERROR_BODY,
        404: _ERROR_BODY, 500: _ERROR_BODY,
    },
)
async def update_location(
    location_id: str,
    body: LocationInput = Body(...),
    services: AppServices = Depends(get_services),
):
    """Replace a location; coordinates are always re-resolved."""
    response = await services.dispatch.dispatch(
        InboundRequest(
            LOCATION_RESOURCE, "PUT",
            path_params={"id": location_id}, body=body,
        ),
    )
    return _to_http(response)


@router.delete(
    "/{location_id}",
    status_code=204,
    responses={404: _ERROR_BODY, 500: _ERROR_BODY},
)
async def delete_location(
    location_id: str, services: AppServices = Depends(get_services),
):
    response = await services.dispatch.dispatch(
        InboundRequest(
            LOCATION_RESOURCE, "DELETE", path_params={"id": location_id},
        ),
    )
    return _to_http(response)
