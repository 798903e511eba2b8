"""Application info endpoint router composition."""

from dataclasses import asdict

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.domain import InfoResponse, RuntimeContext, domain_format_timestamp
from app.runtime import ProcessIntrospectionPort


def api_create_info_router(
    runtime_context: RuntimeContext,
    introspection_service: ProcessIntrospectionPort,
) -> APIRouter:
    """Create router exposing application identity at `/`.

    Args:
        runtime_context: Immutable startup context with version and environment.
        introspection_service: Runtime service resolving the host name.

    Returns:
        APIRouter: Router exposing the root endpoint.

    Raises:
        ValueError: Raised when a dependency is missing.
    """

    if runtime_context is None:
        raise ValueError("runtime_context must not be None")
    if introspection_service is None:
        raise ValueError("introspection_service must not be None")

    router = APIRouter(tags=["info"])

    @router.get("/")
    def api_application_info() -> JSONResponse:
        payload = InfoResponse(
            message=runtime_context.message,
            timestamp=domain_format_timestamp(),
            version=runtime_context.application_version,
            environment=runtime_context.environment_name,
            hostname=introspection_service.runtime_hostname(),
        )
        return JSONResponse(content=asdict(payload), status_code=status.HTTP_200_OK)

    return router
