"""Pure urgency triage - no I/O dependencies."""

from collections.abc import Iterable
from datetime import date, datetime
from enum import Enum

from .date_ranges import days_until
from .events import CoreTaskTemplate, Event
from .tasks import has_incomplete_tasks


class PriorityTier(Enum):
    """Urgency buckets, most urgent first."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"


# (max days until event, tier), checked in order
_TIER_LIMITS = (
    (2, PriorityTier.CRITICAL),
    (7, PriorityTier.HIGH),
    (14, PriorityTier.MEDIUM),
    (30, PriorityTier.LOW),
)


def classify_priority(days: int | None) -> PriorityTier:
    """
    Urgency tier for an event N days away.

    Past events and events without a date have no priority.
    """
    if days is None or days < 0:
        return PriorityTier.NONE
    for limit, tier in _TIER_LIMITS:
        if days <= limit:
            return tier
    return PriorityTier.NONE


def event_priority(event: Event, now: datetime | date) -> PriorityTier:
    return classify_priority(days_until(event.start_date, now))


def priority_summary(
    events: Iterable[Event],
    templates: Iterable[CoreTaskTemplate],
    now: datetime | date,
) -> dict[PriorityTier, list[Event]]:
    """
    Events that still need work, grouped by urgency tier.

    Only events with an actual tier and at least one incomplete core task
    are included. Tiers come most urgent first; events keep input order.

    Pure function - no I/O.
    """
    templates = list(templates)
    summary: dict[PriorityTier, list[Event]] = {
        tier: [] for tier in PriorityTier if tier is not PriorityTier.NONE
    }
    for event in events:
        tier = event_priority(event, now)
        if tier is PriorityTier.NONE or not has_incomplete_tasks(event, templates):
            continue
        summary[tier].append(event)
    return summary
