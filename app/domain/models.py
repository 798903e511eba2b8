"""Typed domain models shared across runtime layers.

Response contracts mirror the JSON bodies expected by orchestration probes,
so field names here are part of the wire format.
"""

from dataclasses import dataclass
from datetime import datetime

DEFAULT_GREETING_MESSAGE = "Hello from Python app running in Kubernetes!"


@dataclass(frozen=True)
class RuntimeContext:
    """Process-wide runtime facts fixed once at startup.

    Attributes:
        application_version: Version label reported by the info endpoint.
        environment_name: Deployment environment label.
        started_at_utc: Wall-clock instant the server was assembled.
        started_monotonic: Monotonic clock reading taken at the same instant.
        message: Greeting returned by the info endpoint.
    """

    application_version: str
    environment_name: str
    started_at_utc: datetime
    started_monotonic: float
    message: str = DEFAULT_GREETING_MESSAGE


@dataclass(frozen=True)
class InfoResponse:
    """Body of `GET /`."""

    message: str
    timestamp: str
    version: str
    environment: str
    hostname: str


@dataclass(frozen=True)
class HealthResponse:
    """Body of `GET /health`."""

    status: str
    uptime: float
    timestamp: str


@dataclass(frozen=True)
class ReadyResponse:
    """Body of `GET /ready`."""

    status: str
    timestamp: str


@dataclass(frozen=True)
class ReadinessStatus:
    """Readiness verdict returned by readiness services.

    Attributes:
        ready: Whether the process can accept traffic.
        detail: Short operational diagnostic.
    """

    ready: bool
    detail: str


@dataclass(frozen=True)
class ProcessSnapshot:
    """Point-in-time process introspection snapshot.

    Attributes:
        uptime: Seconds since server start.
        memory: Memory counters in bytes, keyed by counter name.
        cpu: Consumed CPU time in seconds, keyed by `user` and `system`.
        pid: Operating-system process identifier.
        version: Interpreter version string.
    """

    uptime: float
    memory: dict[str, int]
    cpu: dict[str, float]
    pid: int
    version: str
