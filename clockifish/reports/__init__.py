"""Report generation modules for clockifish."""

from .aggregator import (
    ReportWindow, total_hours, start_of_week, end_of_week, start_of_month, end_of_month,
    week_window, month_window
)
from .report_generator import ReportGenerator

__all__ = [
    'ReportWindow', 'total_hours', 'start_of_week', 'end_of_week', 'start_of_month',
    'end_of_month', 'week_window', 'month_window', 'ReportGenerator'
]
