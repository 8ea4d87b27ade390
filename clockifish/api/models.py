"""Typed views of the Clockify resources used by clockifish."""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..utils.date_utils import parse_iso_datetime, utc_now


@dataclass(frozen=True)
class User:
    """A Clockify user."""

    id: str
    email: str
    name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(id=data["id"], email=data["email"], name=data["name"])


@dataclass(frozen=True)
class TimeInterval:
    """Start and optional end of a time entry; no end means still running."""

    start: datetime
    end: Optional[datetime] = None

    def __post_init__(self):
        if self.end is not None and self.end < self.start:
            raise ValueError(f"Interval ends before it starts: {self.start} > {self.end}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TimeInterval":
        end = data.get("end")
        return cls(
            start=parse_iso_datetime(data["start"]),
            end=parse_iso_datetime(end) if end is not None else None,
        )


@dataclass(frozen=True)
class TimeEntry:
    """A Clockify time entry.

    Instances are read-only copies of what the API returned; the service
    owns the entry.
    """

    id: str
    user_id: str
    workspace_id: str
    interval: TimeInterval
    description: Optional[str] = None
    project_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TimeEntry":
        """Decode a time entry from its JSON representation.

        Raises:
            KeyError: If a required field is missing
            ValueError: If a timestamp is malformed
        """
        return cls(
            id=data["id"],
            user_id=data["userId"],
            workspace_id=data["workspaceId"],
            interval=TimeInterval.from_dict(data["timeInterval"]),
            description=data.get("description"),
            project_id=data.get("projectId"),
        )

    @property
    def is_running(self) -> bool:
        return self.interval.end is None

    def duration(self, now: Optional[datetime] = None) -> float:
        """Seconds between start and end, or until ``now`` while running."""
        end = self.interval.end
        if end is None:
            end = now or utc_now()
        return (end - self.interval.start).total_seconds()
