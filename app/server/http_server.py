"""Uvicorn server wrapper with banner, signal-driven drain and fault hooks.

Signal handlers only flip the server's exit flags; uvicorn's serve loop
observes them cooperatively, stops accepting connections and waits up to
`timeout_graceful_shutdown` for in-flight requests before closing.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import signal
import socket
import threading
from types import FrameType
from typing import Final, Generator

import uvicorn

from app.domain import RuntimeContext
from app.runtime import ProcessFaultHandler, ProcessIntrospectionPort

from .banner import server_render_banner
from .lifecycle import ServerLifecycle, ServerState

SHUTDOWN_SIGNALS: Final[tuple[signal.Signals, ...]] = (signal.SIGINT, signal.SIGTERM)
GRACEFUL_EXIT_CODE: Final[int] = 0
STARTUP_FAILURE_EXIT_CODE: Final[int] = 1

logger = logging.getLogger(__name__)


class InfoServer(uvicorn.Server):
    """Uvicorn server that tracks the graceful shutdown lifecycle."""

    def __init__(
        self,
        config: uvicorn.Config,
        runtime_context: RuntimeContext,
        introspection_service: ProcessIntrospectionPort,
        fault_handler: ProcessFaultHandler,
        lifecycle: ServerLifecycle | None = None,
    ):
        """Initialize server wrapper.

        Args:
            config: Uvicorn configuration with application and bind address.
            runtime_context: Immutable startup context used by the banner.
            introspection_service: Runtime service resolving the host name.
            fault_handler: Handler installed on the serving event loop.
            lifecycle: Optional lifecycle tracker, mainly for tests.

        Raises:
            ValueError: Raised when a dependency is missing.
        """

        if runtime_context is None:
            raise ValueError("runtime_context must not be None")
        if fault_handler is None:
            raise ValueError("fault_handler must not be None")
        super().__init__(config)
        self.runtime_context = runtime_context
        self.introspection_service = introspection_service
        self.fault_handler = fault_handler
        self.lifecycle = lifecycle if lifecycle is not None else ServerLifecycle()

    @contextlib.contextmanager
    def capture_signals(self) -> Generator[None, None, None]:
        # Previous handlers are restored but captured signals are not re-raised,
        # so a drained server exits with status 0 instead of the signal's default.
        if threading.current_thread() is not threading.main_thread():
            yield
            return
        original_handlers = {sig: signal.signal(sig, self.handle_exit) for sig in SHUTDOWN_SIGNALS}
        try:
            yield
        finally:
            for sig, handler in original_handlers.items():
                signal.signal(sig, handler)

    def handle_exit(self, sig: int, frame: FrameType | None) -> None:
        """Start draining on the first signal, force close on the next one.

        Args:
            sig: Received signal number.
            frame: Interrupted stack frame, unused.
        """

        _ = frame
        signal_name = signal.Signals(sig).name
        if self.lifecycle.state is not ServerState.RUNNING:
            logger.warning("%s received while %s. Forcing shutdown...", signal_name, self.lifecycle.state.value)
            self.force_exit = True
            return
        logger.info("%s received. Shutting down gracefully...", signal_name)
        self.lifecycle.server_begin_drain()
        self.should_exit = True

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        asyncio.get_running_loop().set_exception_handler(self.fault_handler.fault_handle_loop_exception)
        await super().startup(sockets=sockets)
        if self.should_exit:
            return
        hostname = self.introspection_service.runtime_hostname()
        for line in server_render_banner(self.server_bound_port(), self.runtime_context, hostname):
            logger.info(line)

    def server_bound_port(self) -> int:
        """Return the port actually bound, resolving an ephemeral `0` request.

        Returns:
            int: Listening port number.
        """

        for server in getattr(self, "servers", []):
            for listener in server.sockets or ():
                address = listener.getsockname()
                if isinstance(address, tuple) and len(address) >= 2:
                    return int(address[1])
        return self.config.port

    def server_run_until_stopped(self) -> int:
        """Serve until a shutdown signal completes the drain.

        Returns:
            int: Process exit status. `0` after graceful shutdown, `1` when the
                server never finished starting, including a failed socket bind.

        Raises:
            SystemExit: Re-raised when uvicorn exits after startup completed.
        """

        try:
            self.run()
        except SystemExit as error:
            # uvicorn reports bind failures through its own exit status.
            if self.started:
                raise
            logger.error("Server failed to start (uvicorn exit status %s). Process terminating...", error.code)
            return STARTUP_FAILURE_EXIT_CODE
        if not self.started:
            logger.error("Server failed to start. Process terminating...")
            return STARTUP_FAILURE_EXIT_CODE
        if self.lifecycle.state is ServerState.RUNNING:
            self.lifecycle.server_begin_drain()
        self.lifecycle.server_mark_stopped()
        logger.info("Server closed. Process terminating...")
        return GRACEFUL_EXIT_CODE
