"""Process snapshot endpoint router composition."""

from dataclasses import asdict

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.runtime import ProcessIntrospectionPort


def api_create_metrics_router(introspection_service: ProcessIntrospectionPort) -> APIRouter:
    """Create router exposing the raw process snapshot at `/metrics`.

    The payload is a point-in-time reading; nothing accumulates across requests.

    Args:
        introspection_service: Runtime service reading process counters.

    Returns:
        APIRouter: Router exposing the metrics endpoint.

    Raises:
        ValueError: Raised when introspection_service is None.
    """

    if introspection_service is None:
        raise ValueError("introspection_service must not be None")

    router = APIRouter(tags=["metrics"])

    @router.get("/metrics")
    def api_process_metrics() -> JSONResponse:
        snapshot = introspection_service.runtime_process_snapshot()
        return JSONResponse(content=asdict(snapshot), status_code=status.HTTP_200_OK)

    return router
