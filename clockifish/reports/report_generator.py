"""ReportGenerator class for rendering hour totals of report windows."""
from typing import List, Sequence

from tabulate import tabulate

from ..api.models import TimeEntry
from ..utils.format_utils import day_str, format_hours
from .aggregator import ReportWindow, total_hours


class ReportGenerator:
    """Totals the time entries of one report window."""

    headers = ["Period", "From", "Through", "Entries", "Hours"]

    def __init__(self, window: ReportWindow, entries: List[TimeEntry]):
        """Initialize a ReportGenerator.

        Args:
            window: Window the entries were fetched for
            entries: Time entries returned for the window
        """
        self.window = window
        self.entries = entries
        self.total_hours = total_hours(entries)
        self.running = sum(1 for e in entries if e.is_running)

    @property
    def date_range_str(self) -> str:
        return f"{day_str(self.window.start)} to {day_str(self.window.display_end)}"

    def raw(self) -> str:
        """Total hours with two decimals, for scripting."""
        return format_hours(self.total_hours)

    def summary(self) -> str:
        """One-line human readable summary."""
        line = f"📅 {self.window.label}: {self.date_range_str} → {self.raw()} hours"
        if self.running:
            line += " (running timer not counted)"
        return line

    def to_row(self) -> list:
        return [
            self.window.label,
            day_str(self.window.start),
            day_str(self.window.display_end),
            len(self.entries),
            self.raw(),
        ]

    @classmethod
    def table(cls, reports: Sequence["ReportGenerator"], tablefmt: str = "github") -> str:
        """Render several reports as one table.

        Args:
            reports: Reports to include, one row each
            tablefmt: tabulate table format

        Returns:
            Table as a string
        """
        # Keep the two-decimal hour strings as rendered
        return tabulate([r.to_row() for r in reports], headers=cls.headers, tablefmt=tablefmt,
                        disable_numparse=True)
