"""Shared workflow layer between the CLI and other shells.

Each function loads a snapshot through a repository and hands it to the
pure core with an explicit reference time.
"""

from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from zoneinfo import ZoneInfo

from .adapters.crm_api import CrmApiAdapter
from .adapters.json_snapshot import JsonSnapshotRepository
from .config import Config
from .core.events import CoreTaskTemplate, Event
from .core.filters import EventFilters, filter_events
from .core.sorting import SortKey, sort_events
from .core.summary import EventCounts, count_events
from .core.tasks import active_templates
from .ports.event_repo import EventRepository


@dataclass
class Snapshot:
    """Events and active core tasks loaded together."""

    events: list[Event]
    core_tasks: list[CoreTaskTemplate]


@dataclass
class EventView:
    """What the list view renders: filtered, sorted events plus badge counts."""

    events: list[Event]
    counts: EventCounts


def get_repository(config: Config, snapshot_file: str | Path | None = None) -> EventRepository:
    """Snapshot file if given or configured, otherwise the CRM API."""
    path = snapshot_file or config.snapshot_file
    if path:
        return JsonSnapshotRepository(path)
    return CrmApiAdapter(config)


def current_time(config: Config) -> datetime:
    """Wall-clock time in the tenant's timezone. The only clock read."""
    return datetime.now(ZoneInfo(config.timezone))


def load_snapshot(repo: EventRepository) -> Snapshot:
    return Snapshot(
        events=repo.fetch_events(),
        core_tasks=active_templates(repo.fetch_core_tasks()),
    )


def build_event_view(
    snapshot: Snapshot,
    filters: EventFilters,
    sort_key: SortKey | str,
    now: datetime | date,
) -> EventView:
    """Filter, sort and count a snapshot for display."""
    filtered = filter_events(snapshot.events, filters, snapshot.core_tasks, now)
    return EventView(
        events=sort_events(filtered, sort_key, tz=getattr(now, "tzinfo", None)),
        counts=count_events(snapshot.events, snapshot.core_tasks, now, filtered=len(filtered)),
    )


def find_event(snapshot: Snapshot, event_id: str) -> Event | None:
    return next((e for e in snapshot.events if e.id == event_id), None)
