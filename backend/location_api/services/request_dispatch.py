"""Request Dispatch — explicit routing from (resource, method) to endpoint.

Invariants:
    - Every Route is handled by one match branch; assert_never makes a missing
      branch a type error
    - Unknown (resource, method) pairs return 500: the front door only forwards
      routes it knows, so a miss is a configuration inconsistency
    - maxLocations validated here, before the store is touched
    - Any exception escaping an endpoint is logged with traceback and becomes
      an opaque 500; internal detail never reaches the caller
"""

import logging
from typing import assert_never

from location_api.core.api_messages import (
    ApiResponse, InboundRequest, from_failure, internal_error,
)
from location_api.core.domain_types import (
    ContinuationToken, LocationId, Route, resolve_route,
)
from location_api.core.outcomes import Failure, invalid_request
from location_api.core.validate_request import parse_max_locations
from location_api.schemas.location import LocationInput
from location_api.services.location_endpoints import LocationEndpoints

logger = logging.getLogger(__name__)


class RequestDispatch:
    """Routes an InboundRequest to its endpoint and shapes the response."""

    def __init__(self, endpoints: LocationEndpoints):
        self._endpoints = endpoints

    async def dispatch(self, request: InboundRequest) -> ApiResponse:
        route = resolve_route(request.resource, request.method)
        if route is None:
            logger.error(
                f"unhandled method {request.method} {request.resource}",
                extra={"method": request.method, "resource": request.resource},
            )
            return internal_error()

        try:
            response = await self._handle(route, request)
        except Exception as e:
            logger.error(
                f"Unhandled exception in {route.value}: {e}",
                exc_info=True,
                extra={"route": route.value},
            )
            return internal_error()

        logger.info(
            f"{request.method} {request.resource} -> {response.status_code}",
            extra={"route": route.value, "status_code": response.status_code},
        )
        return response

    async def _handle(self, route: Route, request: InboundRequest) -> ApiResponse:
        match route:
            case Route.LIST_LOCATIONS:
                return await self._list_locations(request)
            case Route.CREATE_LOCATION:
                body = _body_of(request)
                if isinstance(body, Failure):
                    return from_failure(body)
                return await self._endpoints.create_location(body)
            case Route.GET_LOCATION:
                return await self._endpoints.get_location(_path_id(request))
            case Route.UPDATE_LOCATION:
                body = _body_of(request)
                if isinstance(body, Failure):
                    return from_failure(body)
                return await self._endpoints.update_location(
                    _path_id(request), body,
                )
            case Route.DELETE_LOCATION:
                return await self._endpoints.delete_location(_path_id(request))
            case _:
                assert_never(route)

    async def _list_locations(self, request: InboundRequest) -> ApiResponse:
        limit = parse_max_locations(request.query_params.get("maxLocations"))
        if isinstance(limit, Failure):
            logger.info(
                f"Rejected maxLocations={request.query_params.get('maxLocations')!r}",
            )
            return from_failure(limit)
        token = request.query_params.get("continuationToken")
        cursor = ContinuationToken(token) if token else None
        return await self._endpoints.list_locations(cursor, limit)


def _path_id(request: InboundRequest) -> LocationId:
    return LocationId(request.path_params["id"])


def _body_of(request: InboundRequest) -> LocationInput | Failure:
    if request.body is None:
        return invalid_request()
    return request.body
