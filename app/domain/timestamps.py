"""Shared timestamp helper utilities."""

from __future__ import annotations

from datetime import datetime, timezone


def domain_format_timestamp(moment: datetime | None = None) -> str:
    """Render one instant as UTC ISO-8601 text with millisecond precision.

    Args:
        moment: Instant to render. Defaults to the current time.

    Returns:
        str: Timestamp such as `2024-05-01T12:00:00.123Z`.

    Raises:
        ValueError: Raised when `moment` is a naive datetime.
    """

    if moment is None:
        moment = datetime.now(timezone.utc)
    if moment.tzinfo is None:
        raise ValueError("moment must be timezone-aware")
    rendered = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return rendered.replace("+00:00", "Z")
