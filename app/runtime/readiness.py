"""Readiness service implementations."""

from app.domain import ReadinessStatus

from .interfaces import ReadinessPort


class StaticReadinessService(ReadinessPort):
    """Readiness stub that reports ready whenever the process can answer.

    Dependency checks belong in a replacement implementation of
    `ReadinessPort`; this one performs none.
    """

    def runtime_check_readiness(self) -> ReadinessStatus:
        """Return a ready verdict.

        Returns:
            ReadinessStatus: Always ready.
        """

        return ReadinessStatus(ready=True, detail="no dependency checks configured")
