"""Functional core - pure business logic with no I/O."""

from .events import (
    CoreTaskTemplate,
    Event,
    EventDate,
    EventStatus,
    TaskCompletion,
    parse_local_date,
)
from .tasks import TaskProgress, active_templates, incomplete_tasks, matches_any_of, task_progress
from .date_ranges import DateRange, days_until, in_range
from .filters import EventFilters, TaskFilter, filter_events, matches
from .sorting import SortKey, compare, sort_events
from .priority import PriorityTier, classify_priority, event_priority, priority_summary
from .summary import EventCounts, count_events, summarize

__all__ = [
    # Events
    "CoreTaskTemplate",
    "Event",
    "EventDate",
    "EventStatus",
    "TaskCompletion",
    "parse_local_date",
    # Tasks
    "TaskProgress",
    "active_templates",
    "incomplete_tasks",
    "matches_any_of",
    "task_progress",
    # Date ranges
    "DateRange",
    "days_until",
    "in_range",
    # Filters
    "EventFilters",
    "TaskFilter",
    "filter_events",
    "matches",
    # Sorting
    "SortKey",
    "compare",
    "sort_events",
    # Priority
    "PriorityTier",
    "classify_priority",
    "event_priority",
    "priority_summary",
    # Summary
    "EventCounts",
    "count_events",
    "summarize",
]
