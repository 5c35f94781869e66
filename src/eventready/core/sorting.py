"""Pure event ordering - no I/O dependencies."""

import unicodedata
from collections.abc import Iterable
from datetime import datetime, time, tzinfo
from enum import Enum

from .events import Event


class SortKey(Enum):
    DATE_ASC = "date_asc"
    DATE_DESC = "date_desc"
    TITLE_ASC = "title_asc"
    TITLE_DESC = "title_desc"
    ACCOUNT_ASC = "account_asc"
    ACCOUNT_DESC = "account_desc"

    @classmethod
    def parse(cls, value: "str | SortKey | None") -> "SortKey":
        """Unknown sort keys fall back to earliest date first."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.DATE_ASC

    @property
    def descending(self) -> bool:
        return self.value.endswith("_desc")


def _when(event: Event, tz: tzinfo | None = None) -> tuple[int, datetime]:
    """
    Start date at midnight, else creation time. Undated events go last.

    An aware creation time is read as wall time in tz, or in its own offset
    when no tz is given.
    """
    if event.start_date is not None:
        return (0, datetime.combine(event.start_date, time.min))
    if event.created_at is not None:
        created = event.created_at
        if created.tzinfo is not None:
            if tz is not None:
                created = created.astimezone(tz)
            created = created.replace(tzinfo=None)
        return (0, created)
    return (1, datetime.min)


def collation_key(value: str | None) -> tuple[str, str]:
    """
    Case-insensitive collation key.

    Letters compare first with accents stripped ("Émile" sorts with "e"),
    accents only break ties.
    """
    text = unicodedata.normalize("NFKD", value or "").casefold()
    base = "".join(c for c in text if not unicodedata.combining(c))
    return (base, text)


def sort_value(event: Event, sort_key: SortKey | str, tz: tzinfo | None = None):
    """Comparable value for an event under a sort key (direction not applied)."""
    match SortKey.parse(sort_key):
        case SortKey.TITLE_ASC | SortKey.TITLE_DESC:
            return collation_key(event.title)
        case SortKey.ACCOUNT_ASC | SortKey.ACCOUNT_DESC:
            return collation_key(event.account_name)
        case _:
            return _when(event, tz)


def compare(a: Event, b: Event, sort_key: SortKey | str, tz: tzinfo | None = None) -> int:
    """Three-way comparison of two events: -1, 0 or 1."""
    key = SortKey.parse(sort_key)
    va, vb = sort_value(a, key, tz), sort_value(b, key, tz)
    result = (va > vb) - (va < vb)
    return -result if key.descending else result


def sort_events(
    events: Iterable[Event],
    sort_key: SortKey | str,
    tz: tzinfo | None = None,
) -> list[Event]:
    """
    Sort events into a new list.

    Stable for every key: events with equal keys keep their input order,
    descending keys included. tz is the tenant's timezone, used to place
    aware creation times against start dates.

    Pure function - no I/O.
    """
    key = SortKey.parse(sort_key)
    return sorted(events, key=lambda e: sort_value(e, key, tz), reverse=key.descending)
