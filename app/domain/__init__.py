"""Domain models used across application layer boundaries."""

from .models import (
    DEFAULT_GREETING_MESSAGE,
    HealthResponse,
    InfoResponse,
    ProcessSnapshot,
    ReadinessStatus,
    ReadyResponse,
    RuntimeContext,
)
from .timestamps import domain_format_timestamp

__all__ = [
    "DEFAULT_GREETING_MESSAGE",
    "HealthResponse",
    "InfoResponse",
    "ProcessSnapshot",
    "ReadinessStatus",
    "ReadyResponse",
    "RuntimeContext",
    "domain_format_timestamp",
]
