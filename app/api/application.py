"""FastAPI application factory for the HTTP info server.

This module composes the request-logging middleware, the fault handler and
the four read-only routers into one application.
"""

from fastapi import FastAPI

from app.domain import RuntimeContext
from app.runtime import FaultReporterPort, ProcessIntrospectionPort, ReadinessPort

from .middleware import api_install_fault_handler, api_install_request_logging
from .routers import api_create_health_router, api_create_info_router, api_create_metrics_router


def create_api_application(
    runtime_context: RuntimeContext,
    introspection_service: ProcessIntrospectionPort,
    readiness_service: ReadinessPort,
    fault_reporter: FaultReporterPort,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        runtime_context: Immutable startup context shared by all handlers.
        introspection_service: Runtime service for hostname, uptime and process counters.
        readiness_service: Runtime service backing the readiness probe.
        fault_reporter: Fail-fast reporter for unhandled handler exceptions.

    Returns:
        FastAPI: Framework application instance with all routes registered.

    Raises:
        ValueError: Raised when a dependency is missing.
    """

    application = FastAPI(
        title="HTTP Info Server",
        version=runtime_context.application_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    api_install_request_logging(application)
    api_install_fault_handler(application, fault_reporter)

    application.include_router(
        api_create_info_router(runtime_context=runtime_context, introspection_service=introspection_service)
    )
    application.include_router(
        api_create_health_router(
            introspection_service=introspection_service,
            readiness_service=readiness_service,
        )
    )
    application.include_router(api_create_metrics_router(introspection_service=introspection_service))

    return application
