"""Pure date-range classification - no I/O dependencies."""

from datetime import date, datetime, timedelta
from enum import Enum


class DateRange(Enum):
    """Named ranges over an event's start date, relative to today."""

    ALL = "all"
    TODAY = "today"
    THIS_WEEK = "this_week"
    THIS_MONTH = "this_month"
    UPCOMING = "upcoming"
    PAST = "past"
    CUSTOM_DAYS = "custom_days"

    @classmethod
    def parse(cls, value: "str | DateRange | None") -> "DateRange":
        """Unknown or missing names mean no date filtering."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.ALL


WEEK_DAYS = 7


def to_local_date(now: datetime | date) -> date:
    """
    Calendar date of the reference moment, time of day dropped.

    An aware datetime keeps its own offset; it is never shifted to UTC.
    """
    if isinstance(now, datetime):
        return now.date()
    return now


def days_until(start_date: date | None, now: datetime | date) -> int | None:
    """Whole days from today to start_date (negative if past)."""
    if start_date is None:
        return None
    return (start_date - to_local_date(now)).days


def within_days(start_date: date | None, now: datetime | date, days: int) -> bool:
    """True if start_date lies in [today, today + days], both ends inclusive."""
    if start_date is None:
        return False
    today = to_local_date(now)
    return today <= start_date <= today + timedelta(days=days)


def in_range(
    start_date: date | None,
    range_name: DateRange | str,
    now: datetime | date,
    custom_days: int | None = None,
) -> bool:
    """
    Check an event start date against a named range.

    Undated events only match ALL. For CUSTOM_DAYS without a day count any
    dated event matches.

    Pure function - no I/O.
    """
    date_range = DateRange.parse(range_name)
    if date_range is DateRange.ALL:
        return True
    if start_date is None:
        return False

    today = to_local_date(now)

    match date_range:
        case DateRange.TODAY:
            return start_date == today
        case DateRange.THIS_WEEK:
            # Lower bound applies too: past days of the week are excluded
            return within_days(start_date, today, WEEK_DAYS)
        case DateRange.THIS_MONTH:
            return (start_date.year, start_date.month) == (today.year, today.month)
        case DateRange.UPCOMING:
            return start_date >= today
        case DateRange.PAST:
            return start_date < today
        case DateRange.CUSTOM_DAYS:
            if custom_days is None:
                return True
            return within_days(start_date, today, custom_days)

    return True
