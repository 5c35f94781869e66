"""Event repository interface."""

from typing import Protocol

from eventready.core.events import CoreTaskTemplate, Event


class EventRepository(Protocol):
    """Interface for fetching an event snapshot from any backend."""

    def fetch_events(self) -> list[Event]:
        """Fetch all events of the tenant, task completions included."""
        ...

    def fetch_core_tasks(self) -> list[CoreTaskTemplate]:
        """Fetch the tenant's core task templates."""
        ...
