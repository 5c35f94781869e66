"""eventready CLI - event readiness and filtering."""

import json
import logging
import sys
from dataclasses import asdict
from datetime import date, datetime
from zoneinfo import ZoneInfoNotFoundError

import click

from .adapters.errors import DataSourceError
from .config import Config, load_config
from .core.date_ranges import DateRange, days_until
from .core.events import Event, EventStatus
from .core.filters import STATUS_ALL, EventFilters, TaskFilter
from .core.priority import PriorityTier, event_priority, priority_summary
from .core.sorting import SortKey
from .core.summary import count_events
from .core.tasks import incomplete_tasks, task_progress
from .workflows import (
    Snapshot,
    build_event_view,
    current_time,
    find_event,
    get_repository,
    load_snapshot,
)

STATUS_CHOICES = [STATUS_ALL] + [s.value for s in EventStatus]


def _load(config: Config, snapshot_file: str | None) -> Snapshot:
    """Load the snapshot or exit with an error message."""
    try:
        return load_snapshot(get_repository(config, snapshot_file))
    except DataSourceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _reference_time(config: Config, today: datetime | None) -> datetime | date:
    if today is not None:
        return today.date()
    try:
        return current_time(config)
    except (ZoneInfoNotFoundError, ValueError):
        click.echo(f"Error: unknown timezone {config.timezone!r}", err=True)
        sys.exit(1)


def _event_json(event: Event, snapshot: Snapshot, now: datetime | date) -> dict:
    return {
        "id": event.id,
        "title": event.title,
        "status": event.status,
        "start_date": event.start_date.isoformat() if event.start_date else None,
        "location": event.display_location,
        "account_name": event.account_name,
        "days_until": days_until(event.start_date, now),
        "priority": event_priority(event, now).value,
        "incomplete_tasks": incomplete_tasks(event, snapshot.core_tasks),
    }


def _event_line(event: Event, snapshot: Snapshot, now: datetime | date) -> str:
    when = event.start_date.isoformat() if event.start_date else "No date"
    progress = task_progress(event, snapshot.core_tasks)
    tier = event_priority(event, now)
    marker = f"[{tier.value.upper()}] " if tier is not PriorityTier.NONE else ""
    account = f" ({event.account_name})" if event.account_name else ""
    location = f" @ {event.display_location}" if event.display_location else ""
    return (
        f"{when}  {marker}{event.title or '(untitled)'}{account}{location}"
        f"  tasks {progress.completed}/{progress.total}"
    )


def snapshot_options(func):
    """Options shared by every command that reads a snapshot."""
    func = click.option(
        "--today",
        type=click.DateTime(formats=["%Y-%m-%d"]),
        default=None,
        help="Reference date instead of today (YYYY-MM-DD)",
    )(func)
    func = click.option(
        "--file", "snapshot_file", type=click.Path(dir_okay=False), default=None,
        help="Read events from a JSON snapshot instead of the API",
    )(func)
    return func


@click.group()
@click.version_option()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """eventready - event readiness and filtering."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@snapshot_options
@click.option("-s", "--search", default="", help="Search title, location or account")
@click.option("--status", type=click.Choice(STATUS_CHOICES), default=STATUS_ALL)
@click.option(
    "--range", "date_range",
    type=click.Choice([r.value for r in DateRange]),
    default=None,
    help="Date range (defaults to DEFAULT_DATE_RANGE)",
)
@click.option("--days", "custom_days", type=int, default=None, help="Days ahead for custom_days")
@click.option("--incomplete", is_flag=True, help="Only events with incomplete core tasks")
@click.option("--task-days", type=int, default=None, help="Window in days for --incomplete")
@click.option("--task", "task_ids", multiple=True, help="Core task ID still missing (repeatable)")
@click.option("--sort", "sort_key", type=click.Choice([k.value for k in SortKey]), default=None)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def events(
    snapshot_file, today, search, status, date_range, custom_days,
    incomplete, task_days, task_ids, sort_key, as_json,
):
    """List events matching the filters."""
    config = load_config()
    snapshot = _load(config, snapshot_file)
    now = _reference_time(config, today)

    filters = EventFilters(
        search_term=search,
        status=status,
        date_range=DateRange.parse(date_range or config.default_date_range),
        custom_days=custom_days,
        task_filter=TaskFilter.INCOMPLETE if incomplete else TaskFilter.ALL,
        task_date_range_days=task_days if task_days is not None else config.task_date_range_days,
        selected_task_ids=tuple(task_ids),
    )
    view = build_event_view(snapshot, filters, sort_key or config.default_sort, now)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "total": view.counts.total,
                    "filtered": view.counts.filtered,
                    "events": [_event_json(e, snapshot, now) for e in view.events],
                },
                indent=2,
            )
        )
        return

    if not view.events:
        click.echo("No matching events.")
        return

    for event in view.events:
        click.echo(_event_line(event, snapshot, now))
    click.echo(f"\n{view.counts.filtered} of {view.counts.total} events")


@main.command()
@click.option(
    "--file", "snapshot_file", type=click.Path(dir_okay=False), default=None,
    help="Read events from a JSON snapshot instead of the API",
)
@click.argument("event_id")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def tasks(snapshot_file, event_id, as_json):
    """Show outstanding core tasks for one event."""
    snapshot = _load(load_config(), snapshot_file)
    event = find_event(snapshot, event_id)
    if event is None:
        click.echo(f"Error: no event with id {event_id}", err=True)
        sys.exit(1)

    missing = incomplete_tasks(event, snapshot.core_tasks)
    progress = task_progress(event, snapshot.core_tasks)
    names = {t.id: t.name for t in snapshot.core_tasks}

    if as_json:
        click.echo(
            json.dumps(
                {
                    "event_id": event.id,
                    "incomplete_tasks": [{"id": tid, "name": names[tid]} for tid in missing],
                    "completed": progress.completed,
                    "total": progress.total,
                    "percentage": progress.percentage,
                },
                indent=2,
            )
        )
        return

    click.echo(f"{event.title}: {progress.completed}/{progress.total} done ({progress.percentage}%)")
    if not missing:
        click.echo("All core tasks complete.")
        return
    for tid in missing:
        click.echo(f"• {names[tid]}")


@main.command()
@snapshot_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def counts(snapshot_file, today, as_json):
    """Show event counts per date range."""
    config = load_config()
    snapshot = _load(config, snapshot_file)
    now = _reference_time(config, today)
    result = count_events(snapshot.events, snapshot.core_tasks, now)

    if as_json:
        click.echo(json.dumps(asdict(result), indent=2))
        return

    labels = [
        ("All events", result.total),
        ("Today", result.today),
        ("This week", result.this_week),
        ("This month", result.this_month),
        ("Upcoming", result.upcoming),
        ("Past", result.past),
        ("Next 10 days", result.next_10_days),
        ("Next 45 days, tasks open", result.next_45_days_incomplete),
    ]
    for label, value in labels:
        click.echo(f"{label:<26}{value:>5}")


@main.command()
@snapshot_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def priorities(snapshot_file, today, as_json):
    """Show upcoming events with open core tasks by urgency."""
    config = load_config()
    snapshot = _load(config, snapshot_file)
    now = _reference_time(config, today)
    summary = priority_summary(snapshot.events, snapshot.core_tasks, now)

    if as_json:
        click.echo(
            json.dumps(
                {tier.value: [_event_json(e, snapshot, now) for e in evs] for tier, evs in summary.items()},
                indent=2,
            )
        )
        return

    if not any(summary.values()):
        click.echo("Nothing urgent.")
        return

    for tier, tier_events in summary.items():
        if not tier_events:
            continue
        click.echo(f"{tier.value.upper()} ({len(tier_events)})")
        for event in tier_events:
            click.echo(f"  {_event_line(event, snapshot, now)}")
