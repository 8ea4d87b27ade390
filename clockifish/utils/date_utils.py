"""Date utility functions for clockifish."""
import re
from datetime import datetime, timezone
from typing import Optional

ISO_TIMESTAMP = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{1,6})?(Z|[+-]\d{2}:?\d{2})$")


def utc_now() -> datetime:
    """Get the current instant as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def iso_datetime(dt: Optional[datetime] = None) -> str:
    """Convert a datetime to an ISO-8601 UTC instant string.

    Args:
        dt: Datetime to convert; naive values are taken as local time.
            Defaults to the current instant.

    Returns:
        ISO string such as ``2024-05-13T08:00:00Z``
    """
    if dt is None:
        dt = utc_now()
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp received from the API.

    Only full date-time values with two-digit fields and a ``Z`` or
    ``+HH:MM`` offset are accepted.

    Args:
        value: Timestamp string

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If the value is not a strict ISO-8601 timestamp
    """
    match = ISO_TIMESTAMP.fullmatch(value) if isinstance(value, str) else None
    if not match:
        raise ValueError(f"Invalid ISO-8601 timestamp: {value!r}")
    fmt = "%Y-%m-%dT%H:%M:%S.%f%z" if match.group(1) else "%Y-%m-%dT%H:%M:%S%z"
    return datetime.strptime(value, fmt)
