"""FastAPI dependencies — hand the lifespan-built AppServices to route handlers."""

from fastapi import Request

from location_api.services.app_services import AppServices


def get_services(request: Request) -> AppServices:
    """FastAPI dependency for the process-wide service container."""
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise RuntimeError("Services not initialized")
    return services
