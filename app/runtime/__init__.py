"""Runtime package for process introspection, readiness and fault handling."""

from .faults import FAULT_EXIT_CODE, ProcessFaultHandler, fault_terminate_process
from .interfaces import FaultReporterPort, ProcessIntrospectionPort, ReadinessPort
from .introspection import PsutilProcessIntrospectionService
from .readiness import StaticReadinessService

__all__ = [
    "FAULT_EXIT_CODE",
    "FaultReporterPort",
    "ProcessFaultHandler",
    "ProcessIntrospectionPort",
    "PsutilProcessIntrospectionService",
    "ReadinessPort",
    "StaticReadinessService",
    "fault_terminate_process",
]
