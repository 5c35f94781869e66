"""Pure event list filtering - no I/O dependencies."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from .date_ranges import DateRange, in_range, within_days
from .events import CoreTaskTemplate, Event
from .tasks import has_incomplete_tasks, matches_any_of

STATUS_ALL = "all"
DEFAULT_TASK_DATE_RANGE_DAYS = 14


class TaskFilter(Enum):
    ALL = "all"
    INCOMPLETE = "incomplete"

    @classmethod
    def parse(cls, value: "str | TaskFilter | None") -> "TaskFilter":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.ALL


@dataclass(frozen=True)
class EventFilters:
    """Filter settings of the event list view."""

    search_term: str = ""
    status: str = STATUS_ALL
    date_range: DateRange = DateRange.UPCOMING
    custom_days: int | None = None
    task_filter: TaskFilter = TaskFilter.ALL
    # Only applies with task_filter=INCOMPLETE; None disables the window
    task_date_range_days: int | None = DEFAULT_TASK_DATE_RANGE_DAYS
    selected_task_ids: tuple[str, ...] = ()


def matches_search(event: Event, term: str) -> bool:
    """Case-insensitive substring match on title, location or account."""
    if not term:
        return True
    needle = term.casefold()
    haystacks = (event.title, event.location, event.display_location, event.account_name)
    return any(needle in h.casefold() for h in haystacks if h)


def matches_status(event: Event, status: str) -> bool:
    return status == STATUS_ALL or event.status == status


def matches_task_filter(
    event: Event,
    filters: EventFilters,
    templates: Sequence[CoreTaskTemplate],
    now: datetime | date,
) -> bool:
    """Incomplete-task filter: outstanding work, inside the window, on a selected task."""
    if TaskFilter.parse(filters.task_filter) is not TaskFilter.INCOMPLETE:
        return True
    if not has_incomplete_tasks(event, templates):
        return False
    if filters.task_date_range_days is not None and not within_days(
        event.start_date, now, filters.task_date_range_days
    ):
        return False
    return matches_any_of(event, templates, filters.selected_task_ids)


def matches(
    event: Event,
    filters: EventFilters,
    templates: Sequence[CoreTaskTemplate],
    now: datetime | date,
) -> bool:
    """
    Check an event against all filters.

    Stages run in order and short-circuit: search, status, date range,
    task readiness. Hard boolean, no scoring.

    Pure function - no I/O.
    """
    return (
        matches_search(event, filters.search_term)
        and matches_status(event, filters.status)
        and in_range(event.start_date, filters.date_range, now, filters.custom_days)
        and matches_task_filter(event, filters, templates, now)
    )


def filter_events(
    events: Iterable[Event],
    filters: EventFilters,
    templates: Iterable[CoreTaskTemplate],
    now: datetime | date,
) -> list[Event]:
    """
    Events passing all filters, in input order.

    Pure function - no I/O.
    """
    templates = list(templates)
    return [e for e in events if matches(e, filters, templates, now)]
