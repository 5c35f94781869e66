"""Pure core-task readiness logic - no I/O dependencies."""

from collections.abc import Iterable
from dataclasses import dataclass

from .events import CoreTaskTemplate, Event


@dataclass(frozen=True)
class TaskProgress:
    """Core-task completion tally for a single event."""

    total: int
    completed: int
    incomplete: int

    @property
    def percentage(self) -> int:
        """Completion percentage, halves rounded up. 100 when there is nothing to do."""
        if self.total == 0:
            return 100
        return (self.completed * 200 + self.total) // (self.total * 2)


def active_templates(templates: Iterable[CoreTaskTemplate]) -> list[CoreTaskTemplate]:
    """Active templates ordered by display_order (stable)."""
    return sorted((t for t in templates if t.active), key=lambda t: t.display_order)


def incomplete_tasks(event: Event, templates: Iterable[CoreTaskTemplate]) -> list[str]:
    """
    IDs of core tasks not yet done for an event, in template order.

    A task is incomplete when no completion record exists for it or the
    record is not marked completed. Inactive templates never count.

    Pure function - no I/O.
    """
    template_ids = [t.id for t in templates if t.active]
    if not template_ids:
        return []

    # No records at all: nothing has been addressed yet
    if not event.task_completions:
        return template_ids

    done = {tc.template_id for tc in event.task_completions if tc.completed}
    return [tid for tid in template_ids if tid not in done]


def has_incomplete_tasks(event: Event, templates: Iterable[CoreTaskTemplate]) -> bool:
    return bool(incomplete_tasks(event, templates))


def matches_any_of(
    event: Event,
    templates: Iterable[CoreTaskTemplate],
    selected_ids: Iterable[str],
) -> bool:
    """True if nothing is selected or the event still misses a selected task."""
    selected = set(selected_ids)
    if not selected:
        return True
    return not selected.isdisjoint(incomplete_tasks(event, templates))


def task_progress(event: Event, templates: Iterable[CoreTaskTemplate]) -> TaskProgress:
    """Completed vs. outstanding core tasks for an event."""
    templates = list(templates)
    total = sum(1 for t in templates if t.active)
    incomplete = len(incomplete_tasks(event, templates))
    return TaskProgress(total=total, completed=total - incomplete, incomplete=incomplete)
