"""Pure count summaries for filter badges - no I/O dependencies."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime

from .date_ranges import DateRange, days_until, in_range
from .events import CoreTaskTemplate, Event
from .tasks import has_incomplete_tasks

NEXT_DAYS_WINDOW = 10
INCOMPLETE_WINDOW = 45


@dataclass(frozen=True)
class EventCounts:
    total: int
    filtered: int
    today: int = 0
    this_week: int = 0
    this_month: int = 0
    upcoming: int = 0
    past: int = 0
    next_10_days: int = 0
    next_45_days_incomplete: int = 0


def summarize(events: Sequence[Event], filtered: Sequence[Event]) -> dict[str, int]:
    """Plain total/filtered pair for the list header."""
    return {"total": len(events), "filtered": len(filtered)}


def count_events(
    events: Sequence[Event],
    templates: Iterable[CoreTaskTemplate],
    now: datetime | date,
    filtered: int | None = None,
) -> EventCounts:
    """
    Count events per date range for the filter badges.

    Undated events only count toward the total.

    Pure function - no I/O.
    """
    templates = list(templates)
    counts = dict.fromkeys(
        ("today", "this_week", "this_month", "upcoming", "past", "next_10_days", "next_45_days_incomplete"),
        0,
    )
    ranges = {
        "today": DateRange.TODAY,
        "this_week": DateRange.THIS_WEEK,
        "this_month": DateRange.THIS_MONTH,
        "upcoming": DateRange.UPCOMING,
        "past": DateRange.PAST,
    }

    for event in events:
        if event.start_date is None:
            continue

        for name, date_range in ranges.items():
            if in_range(event.start_date, date_range, now):
                counts[name] += 1

        days = days_until(event.start_date, now)
        if 0 <= days <= NEXT_DAYS_WINDOW:
            counts["next_10_days"] += 1
        if 0 <= days <= INCOMPLETE_WINDOW and has_incomplete_tasks(event, templates):
            counts["next_45_days_incomplete"] += 1

    return EventCounts(
        total=len(events),
        filtered=len(events) if filtered is None else filtered,
        **counts,
    )
