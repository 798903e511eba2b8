"""Process-wide fault handlers enforcing fail-fast termination.

Any fault that escapes normal control flow is logged with its traceback and
ends the process with exit status 1. No drain is attempted on this path.
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys
import threading
from types import TracebackType
from typing import Any, Callable

from .interfaces import FaultReporterPort

FAULT_EXIT_CODE = 1

logger = logging.getLogger(__name__)


def fault_terminate_process(exit_code: int) -> None:
    """Flush logging and end the process immediately.

    Args:
        exit_code: Process exit status.
    """

    logging.shutdown()
    os._exit(exit_code)


class ProcessFaultHandler(FaultReporterPort):
    """Fault reporter wired into interpreter, thread and event-loop hooks."""

    def __init__(self, terminate: Callable[[int], None] = fault_terminate_process):
        """Initialize fault handler.

        Args:
            terminate: Callable that ends the process with the given status.

        Raises:
            ValueError: Raised when terminate is None.
        """

        if terminate is None:
            raise ValueError("terminate must not be None")
        self._terminate = terminate

    def fault_report(self, origin: str, error: BaseException | None, detail: str | None = None) -> None:
        """Log one unrecoverable fault and terminate the process.

        Args:
            origin: Short label naming where the fault surfaced.
            error: Exception instance when one is available.
            detail: Optional extra diagnostic text.
        """

        exc_info = (type(error), error, error.__traceback__) if error is not None else None
        message = detail or (str(error) if error is not None else "unknown fault")
        logger.critical("%s: %s", origin, message, exc_info=exc_info)
        self._terminate(FAULT_EXIT_CODE)

    def fault_install(self) -> None:
        """Register interpreter-level hooks for uncaught exceptions."""

        sys.excepthook = self.fault_handle_uncaught
        threading.excepthook = self.fault_handle_thread_exception

    def fault_handle_uncaught(
        self,
        exc_type: type[BaseException],
        exc_value: BaseException,
        exc_traceback: TracebackType | None,
    ) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        self.fault_report("Uncaught Exception", exc_value)

    def fault_handle_thread_exception(self, args: threading.ExceptHookArgs) -> None:
        if args.exc_type is SystemExit:
            return
        thread_name = args.thread.name if args.thread is not None else "unknown"
        self.fault_report(f"Uncaught Exception in thread {thread_name}", args.exc_value)

    def fault_handle_loop_exception(self, loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
        """Handle failures reported to the asyncio loop exception handler.

        Args:
            loop: Event loop that reported the failure.
            context: Loop exception context; see `loop.call_exception_handler`.
        """

        _ = loop
        self.fault_report("Unhandled Rejection", context.get("exception"), detail=context.get("message"))
