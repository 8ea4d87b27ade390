"""Formatting utility functions for clockifish."""
from datetime import datetime


def format_duration(seconds: float) -> str:
    """Format seconds as a compact duration.

    Args:
        seconds: Number of seconds

    Returns:
        Duration such as ``1h 5m 3s``, ``5m 3s`` or ``3s``
    """
    seconds = max(int(seconds), 0)
    h, m = divmod(seconds, 3600)
    m, s = divmod(m, 60)
    if h > 0:
        return f"{h}h {m}m {s}s"
    if m > 0:
        return f"{m}m {s}s"
    return f"{s}s"


def format_hours(hours: float) -> str:
    """Format fractional hours with two decimals."""
    return f"{hours:.2f}"


def format_datetime(dt: datetime) -> str:
    """Format a datetime in local time for display."""
    return dt.astimezone().strftime("%Y-%m-%d %H:%M:%S")


def day_str(dt: datetime) -> str:
    """Format a date as a string with day of week.

    Args:
        dt: Date or datetime to format

    Returns:
        Formatted date string, e.g. ``(Mon)2024-05-13``
    """
    return f"({dt.strftime('%a')}){dt.strftime('%Y-%m-%d')}"
