"""Operator-facing startup banner rendering."""

from typing import Final

from app.domain import RuntimeContext, domain_format_timestamp

BANNER_RULER: Final[str] = "=" * 50

ROUTE_CATALOG: Final[tuple[tuple[str, str, str], ...]] = (
    ("GET", "/", "Main application endpoint"),
    ("GET", "/health", "Health check (liveness probe)"),
    ("GET", "/ready", "Readiness probe"),
    ("GET", "/metrics", "Application metrics"),
)


def server_render_banner(port: int, runtime_context: RuntimeContext, hostname: str) -> list[str]:
    """Render startup banner lines.

    The banner is human-readable output only and is not meant to be parsed.

    Args:
        port: Bound listening port.
        runtime_context: Startup context with environment and start instant.
        hostname: Host name reported by the operating system.

    Returns:
        list[str]: Banner lines in display order.
    """

    method_width = max(len(method) for method, _, _ in ROUTE_CATALOG)
    path_width = max(len(path) for _, path, _ in ROUTE_CATALOG)
    lines = [
        BANNER_RULER,
        f"Server is running on port {port}",
        f"Environment: {runtime_context.environment_name}",
        f"Hostname: {hostname}",
        f"Started at: {domain_format_timestamp(runtime_context.started_at_utc)}",
        BANNER_RULER,
        "Available endpoints:",
    ]
    for method, path, description in ROUTE_CATALOG:
        lines.append(f"  {method.ljust(method_width)}  {path.ljust(path_width)} - {description}")
    lines.append(BANNER_RULER)
    return lines
