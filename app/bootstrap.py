"""Application bootstrap wiring for startup validation and dependency assembly."""

import time
from datetime import datetime, timezone
from typing import Callable

import uvicorn
from fastapi import FastAPI

from app.api import create_api_application
from app.config import AppSettings, config_load_settings
from app.domain import RuntimeContext
from app.runtime import (
    FaultReporterPort,
    ProcessFaultHandler,
    PsutilProcessIntrospectionService,
    StaticReadinessService,
)
from app.server import InfoServer


def bootstrap_create_runtime_context(
    settings: AppSettings,
    monotonic_clock: Callable[[], float] = time.monotonic,
) -> RuntimeContext:
    """Capture the immutable process-wide context once at startup.

    Args:
        settings: Validated application settings.
        monotonic_clock: Clock whose reading marks the uptime origin.

    Returns:
        RuntimeContext: Startup context shared by handlers and banner.
    """

    return RuntimeContext(
        application_version=settings.application_version,
        environment_name=settings.environment_name,
        started_at_utc=datetime.now(timezone.utc),
        started_monotonic=monotonic_clock(),
    )


def bootstrap_create_application(
    settings: AppSettings | None = None,
    fault_reporter: FaultReporterPort | None = None,
    runtime_context: RuntimeContext | None = None,
) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-validated settings. Loaded from environment when omitted.
        fault_reporter: Optional fault reporter. A process-terminating one is used when omitted.
        runtime_context: Optional startup context. Captured now when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings if settings is not None else config_load_settings()
    resolved_context = (
        runtime_context if runtime_context is not None else bootstrap_create_runtime_context(resolved_settings)
    )
    return create_api_application(
        runtime_context=resolved_context,
        introspection_service=PsutilProcessIntrospectionService(runtime_context=resolved_context),
        readiness_service=StaticReadinessService(),
        fault_reporter=fault_reporter if fault_reporter is not None else ProcessFaultHandler(),
    )


def bootstrap_create_server(settings: AppSettings, fault_handler: ProcessFaultHandler | None = None) -> InfoServer:
    """Build the uvicorn-backed server for the HTTP info application.

    Args:
        settings: Validated application settings.
        fault_handler: Optional fault handler shared by the application and event loop.

    Returns:
        InfoServer: Server ready to run until a shutdown signal arrives.
    """

    resolved_fault_handler = fault_handler if fault_handler is not None else ProcessFaultHandler()
    runtime_context = bootstrap_create_runtime_context(settings)
    application = bootstrap_create_application(
        settings=settings,
        fault_reporter=resolved_fault_handler,
        runtime_context=runtime_context,
    )
    config = uvicorn.Config(
        application,
        host=settings.application_host,
        port=settings.application_port,
        log_level=settings.log_level,
        access_log=False,
        timeout_graceful_shutdown=settings.shutdown_timeout_seconds,
    )
    return InfoServer(
        config=config,
        runtime_context=runtime_context,
        introspection_service=PsutilProcessIntrospectionService(runtime_context=runtime_context),
        fault_handler=resolved_fault_handler,
    )
