"""Typed interfaces for process runtime services.

Process and host introspection must remain in the runtime package so API
handlers stay free of operating-system calls.
"""

from typing import Protocol

from app.domain import ProcessSnapshot, ReadinessStatus


class ProcessIntrospectionPort(Protocol):
    """Port definition for process and host introspection."""

    def runtime_hostname(self) -> str:
        """Return the host name reported by the operating system.

        Returns:
            str: Current host name.
        """

    def runtime_uptime_seconds(self) -> float:
        """Return seconds elapsed since server start.

        Returns:
            float: Non-negative uptime in seconds.
        """

    def runtime_process_snapshot(self) -> ProcessSnapshot:
        """Capture uptime, memory, CPU, PID and interpreter version.

        Returns:
            ProcessSnapshot: Point-in-time process snapshot.

        Raises:
            RuntimeError: Raised when process counters cannot be read.
        """


class ReadinessPort(Protocol):
    """Port definition for traffic readiness checks."""

    def runtime_check_readiness(self) -> ReadinessStatus:
        """Report whether the process can accept traffic.

        Returns:
            ReadinessStatus: Readiness verdict and diagnostic detail.
        """


class FaultReporterPort(Protocol):
    """Port definition for fail-fast fault reporting."""

    def fault_report(self, origin: str, error: BaseException | None, detail: str | None = None) -> None:
        """Log one unrecoverable fault and terminate the process.

        Args:
            origin: Short label naming where the fault surfaced.
            error: Exception instance when one is available.
            detail: Optional extra diagnostic text.
        """
