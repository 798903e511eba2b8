"""Process introspection service backed by psutil."""

from __future__ import annotations

import platform
import socket
import time
from typing import Any, Callable

import psutil

from app.domain import ProcessSnapshot, RuntimeContext

from .interfaces import ProcessIntrospectionPort


def _as_dict(stats_obj: Any) -> dict[str, Any]:
    """Normalize psutil namedtuple output to plain dicts."""
    if hasattr(stats_obj, "_asdict"):
        return dict(stats_obj._asdict())
    return dict(stats_obj)


class PsutilProcessIntrospectionService(ProcessIntrospectionPort):
    """Introspection service reading counters of the current process."""

    def __init__(
        self,
        runtime_context: RuntimeContext,
        monotonic_clock: Callable[[], float] = time.monotonic,
        process: psutil.Process | None = None,
    ):
        """Initialize introspection service.

        Args:
            runtime_context: Immutable startup context holding the start instant.
            monotonic_clock: Clock used to measure uptime. Must share the epoch
                of `runtime_context.started_monotonic`.
            process: Process handle to inspect. Defaults to the current process.

        Raises:
            ValueError: Raised when runtime_context is None.
        """

        if runtime_context is None:
            raise ValueError("runtime_context must not be None")
        self._runtime_context = runtime_context
        self._monotonic_clock = monotonic_clock
        self._process = process if process is not None else psutil.Process()

    def runtime_hostname(self) -> str:
        return socket.gethostname()

    def runtime_uptime_seconds(self) -> float:
        elapsed = self._monotonic_clock() - self._runtime_context.started_monotonic
        return max(0.0, elapsed)

    def runtime_process_snapshot(self) -> ProcessSnapshot:
        """Capture current process counters.

        Memory counters are reported as psutil exposes them on the host
        platform. `rss` (resident set) and `vms` are always present; `uss`
        (unique set, the private heap-equivalent footprint) is added where the
        platform lets the process read it.

        Returns:
            ProcessSnapshot: Point-in-time process snapshot.

        Raises:
            RuntimeError: Raised when psutil cannot read process counters.
        """

        try:
            with self._process.oneshot():
                memory = self._runtime_memory_counters()
                cpu_times = self._process.cpu_times()
        except psutil.Error as error:
            raise RuntimeError("process counters are unavailable") from error

        return ProcessSnapshot(
            uptime=self.runtime_uptime_seconds(),
            memory={name: int(value) for name, value in memory.items()},
            cpu={"user": float(cpu_times.user), "system": float(cpu_times.system)},
            pid=self._process.pid,
            version=platform.python_version(),
        )

    def _runtime_memory_counters(self) -> dict[str, Any]:
        # memory_full_info needs extra privileges on some platforms (macOS).
        try:
            return _as_dict(self._process.memory_full_info())
        except psutil.AccessDenied:
            return _as_dict(self._process.memory_info())
