"""Cross-cutting HTTP middleware and exception handlers."""

import logging
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, Response

from app.domain import domain_format_timestamp
from app.runtime import FaultReporterPort

request_logger = logging.getLogger("app.api.requests")


def api_format_request_log_line(timestamp: str, method: str, path: str, client_address: str) -> str:
    """Render one request log line.

    Args:
        timestamp: Arrival timestamp.
        method: HTTP method.
        path: Request path without query string.
        client_address: Peer network address.

    Returns:
        str: Line such as `[2024-05-01T12:00:00.000Z] GET /health - 10.0.0.1`.
    """

    return f"[{timestamp}] {method} {path} - {client_address}"


def api_install_request_logging(application: FastAPI) -> None:
    """Log every incoming request before it is dispatched.

    Args:
        application: Application receiving the middleware.
    """

    @application.middleware("http")
    async def api_log_request(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        client_address = request.client.host if request.client is not None else "-"
        request_logger.info(
            api_format_request_log_line(
                timestamp=domain_format_timestamp(),
                method=request.method,
                path=request.url.path,
                client_address=client_address,
            )
        )
        return await call_next(request)


def api_install_fault_handler(application: FastAPI, fault_reporter: FaultReporterPort) -> None:
    """Route unhandled handler exceptions to the process fault reporter.

    Args:
        application: Application receiving the exception handler.
        fault_reporter: Reporter that logs the fault and terminates the process.

    Raises:
        ValueError: Raised when fault_reporter is None.
    """

    if fault_reporter is None:
        raise ValueError("fault_reporter must not be None")

    async def api_handle_unexpected_error(request: Request, error: Exception) -> JSONResponse:
        fault_reporter.fault_report(
            "Uncaught Exception",
            error,
            detail=f"{request.method} {request.url.path} failed: {error}",
        )
        return JSONResponse(
            content={"detail": "Internal Server Error"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    application.add_exception_handler(Exception, api_handle_unexpected_error)
