"""Utility modules for clockifish."""

from .date_utils import iso_datetime, parse_iso_datetime, utc_now
from .format_utils import format_duration, format_hours, format_datetime, day_str
from .file_utils import write_markdown

__all__ = [
    'iso_datetime', 'parse_iso_datetime', 'utc_now',
    'format_duration', 'format_hours', 'format_datetime', 'day_str',
    'write_markdown'
]
