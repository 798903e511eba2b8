"""Probe endpoint router composition for liveness and readiness checks."""

from dataclasses import asdict

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.domain import HealthResponse, ReadyResponse, domain_format_timestamp
from app.runtime import ProcessIntrospectionPort, ReadinessPort


def api_create_health_router(
    introspection_service: ProcessIntrospectionPort,
    readiness_service: ReadinessPort,
) -> APIRouter:
    """Create probe router exposing `/health` and `/ready`.

    Args:
        introspection_service: Runtime service providing uptime.
        readiness_service: Runtime service deciding traffic readiness.

    Returns:
        APIRouter: Router exposing liveness and readiness endpoints.

    Raises:
        ValueError: Raised when a service dependency is missing.
    """

    if introspection_service is None:
        raise ValueError("introspection_service must not be None")
    if readiness_service is None:
        raise ValueError("readiness_service must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return liveness payload.

        Any response at all is the liveness signal, so no checks run here.

        Returns:
            JSONResponse: Healthy payload with current uptime.
        """

        payload = HealthResponse(
            status="healthy",
            uptime=introspection_service.runtime_uptime_seconds(),
            timestamp=domain_format_timestamp(),
        )
        return JSONResponse(content=asdict(payload), status_code=status.HTTP_200_OK)

    @router.get("/ready")
    def api_ready_status() -> JSONResponse:
        """Return readiness payload from the configured readiness service.

        Returns:
            JSONResponse: `ready` with HTTP 200, or `not_ready` with HTTP 503
                when a replacement readiness service reports a failure.
        """

        readiness = readiness_service.runtime_check_readiness()
        if readiness.ready:
            payload = ReadyResponse(status="ready", timestamp=domain_format_timestamp())
            return JSONResponse(content=asdict(payload), status_code=status.HTTP_200_OK)
        payload = ReadyResponse(status="not_ready", timestamp=domain_format_timestamp())
        return JSONResponse(content=asdict(payload), status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

    return router
