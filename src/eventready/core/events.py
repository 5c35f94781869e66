"""Pure event domain model - no I/O dependencies."""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

logger = logging.getLogger(__name__)


class EventStatus(Enum):
    """Known event lifecycle states."""

    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    POSTPONED = "postponed"


def parse_local_date(value: str | date | None) -> date | None:
    """
    Read a stored date as a local calendar date.

    Accepts "YYYY-MM-DD" or "YYYY-MM-DDTHH:MM:SS..." and keeps only the date
    part, so "2025-01-15" is always January 15th regardless of the timezone
    the caller sits in. Returns None for missing or malformed values.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip().split("T")[0])
    except ValueError:
        logger.debug(f"Ignoring malformed date: {value!r}")
        return None


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """Parse an ISO timestamp (trailing 'Z' allowed). None if unparsable."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.debug(f"Ignoring malformed timestamp: {value!r}")
        return None


def _name_of(value) -> str | None:
    """Names arrive either as plain strings or as {"name": ...} objects."""
    if isinstance(value, dict):
        return value.get("name") or None
    return value or None


@dataclass(frozen=True)
class TaskCompletion:
    """Whether one core task has been done for one event."""

    template_id: str
    completed: bool = False
    completed_at: datetime | None = None
    completed_by: str | None = None

    @classmethod
    def from_api(cls, data: dict) -> "TaskCompletion":
        return cls(
            template_id=str(data.get("core_task_template_id") or data.get("template_id") or ""),
            completed=bool(data.get("is_completed", data.get("completed", False))),
            completed_at=parse_timestamp(data.get("completed_at")),
            completed_by=data.get("completed_by") or None,
        )


@dataclass(frozen=True)
class EventDate:
    """A secondary occurrence date of an event."""

    event_date: date | None
    location: str | None = None
    start_time: str | None = None

    @classmethod
    def from_api(cls, data: dict) -> "EventDate":
        location = _name_of(data.get("locations")) or _name_of(data.get("location"))
        return cls(
            event_date=parse_local_date(data.get("event_date")),
            location=location,
            start_time=data.get("start_time") or None,
        )


@dataclass(frozen=True)
class CoreTaskTemplate:
    """A unit of operational work expected for every event of a tenant."""

    id: str
    name: str
    tenant_id: str = ""
    active: bool = True
    display_order: int = 0

    @classmethod
    def from_api(cls, data: dict) -> "CoreTaskTemplate":
        return cls(
            id=str(data["id"]),
            name=data.get("task_name") or data.get("name") or "",
            tenant_id=str(data.get("tenant_id") or ""),
            active=bool(data.get("is_active", data.get("active", True))),
            display_order=int(data.get("display_order") or 0),
        )


@dataclass(frozen=True)
class Event:
    """An event as delivered to the list view."""

    id: str
    title: str = ""
    status: str = EventStatus.SCHEDULED.value
    start_date: date | None = None
    created_at: datetime | None = None
    location: str | None = None
    account_name: str | None = None
    event_type: str | None = None
    event_dates: tuple[EventDate, ...] = field(default_factory=tuple)
    task_completions: tuple[TaskCompletion, ...] = field(default_factory=tuple)

    @property
    def primary_date(self) -> EventDate | None:
        """First event date as ordered by the caller."""
        return self.event_dates[0] if self.event_dates else None

    @property
    def display_location(self) -> str | None:
        primary = self.primary_date
        if primary and primary.location:
            return primary.location
        return self.location

    @classmethod
    def from_api(cls, data: dict) -> "Event":
        """Create Event from a CRM API record, defaulting every optional field."""
        event_type = _name_of(data.get("event_type")) or _name_of(data.get("event_types"))
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            status=data.get("status") or EventStatus.SCHEDULED.value,
            start_date=parse_local_date(data.get("start_date")),
            created_at=parse_timestamp(data.get("created_at")),
            location=data.get("location") or None,
            account_name=data.get("account_name") or None,
            event_type=event_type,
            event_dates=tuple(EventDate.from_api(d) for d in data.get("event_dates") or []),
            task_completions=tuple(
                TaskCompletion.from_api(tc) for tc in data.get("task_completions") or []
            ),
        )
