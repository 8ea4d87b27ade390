"""Report windows and hour totals for clockifish."""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Optional

from ..api.models import TimeEntry


@dataclass(frozen=True)
class ReportWindow:
    """A half-open local time range ``[start, end)``."""

    label: str
    start: datetime
    end: datetime

    @property
    def display_end(self) -> datetime:
        """Last second inside the window, for display only."""
        return self.end - timedelta(seconds=1)


def total_hours(entries: Iterable[TimeEntry]) -> float:
    """Sum the durations of finished entries in hours.

    Running entries (no end) are left out. No rounding is applied.

    Args:
        entries: Time entries

    Returns:
        Total hours
    """
    seconds = sum(
        (e.interval.end - e.interval.start).total_seconds()
        for e in entries
        if e.interval.end is not None
    )
    return seconds / 3600


def _midnight(dt: datetime) -> datetime:
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_week(now: datetime) -> datetime:
    """Monday 00:00 of the week containing ``now`` (Monday is day 0)."""
    return _midnight(now - timedelta(days=now.weekday()))


def end_of_week(now: datetime) -> datetime:
    """Monday 00:00 of the following week."""
    return start_of_week(now) + timedelta(days=7)


def start_of_month(now: datetime) -> datetime:
    """The 1st of the month containing ``now`` at 00:00."""
    return _midnight(now.replace(day=1))


def end_of_month(now: datetime) -> datetime:
    """The 1st of the following month at 00:00."""
    start = start_of_month(now)
    if start.month == 12:
        return start.replace(year=start.year + 1, month=1)
    return start.replace(month=start.month + 1)


def week_window(now: Optional[datetime] = None) -> ReportWindow:
    """Current week window in local time."""
    now = now or datetime.now()
    return ReportWindow("Week", start_of_week(now), end_of_week(now))


def month_window(now: Optional[datetime] = None) -> ReportWindow:
    """Current month window in local time."""
    now = now or datetime.now()
    return ReportWindow("Month", start_of_month(now), end_of_month(now))
