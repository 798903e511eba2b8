"""Server package for process lifecycle, banner and uvicorn integration."""

from .banner import ROUTE_CATALOG, server_render_banner
from .http_server import GRACEFUL_EXIT_CODE, STARTUP_FAILURE_EXIT_CODE, InfoServer
from .lifecycle import ServerLifecycle, ServerState, ServerStateError

__all__ = [
    "GRACEFUL_EXIT_CODE",
    "ROUTE_CATALOG",
    "STARTUP_FAILURE_EXIT_CODE",
    "InfoServer",
    "ServerLifecycle",
    "ServerState",
    "ServerStateError",
    "server_render_banner",
]
