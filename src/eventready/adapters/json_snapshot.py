"""JSON snapshot adapter - reads events and core tasks from a file."""

import json
import logging
from pathlib import Path

from eventready.core.events import CoreTaskTemplate, Event

from .errors import SnapshotError

logger = logging.getLogger(__name__)


def parse_records(records: list, model) -> list:
    """Build model instances from API records, skipping malformed ones."""
    items = []
    for record in records:
        try:
            items.append(model.from_api(record))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning(f"Skipping malformed {model.__name__} record: {e}")
    return items


class JsonSnapshotRepository:
    """
    File-based event snapshot.

    Implements EventRepository protocol. The file holds
    {"events": [...], "core_tasks": [...]} in the CRM API's record shape;
    a bare list is read as events with no core tasks.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()
        self._data: dict | None = None

    def _load(self) -> dict:
        if self._data is not None:
            return self._data

        if not self.path.exists():
            raise SnapshotError(f"Snapshot file not found: {self.path}")
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SnapshotError(f"Cannot read snapshot {self.path}: {e}") from e
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SnapshotError(f"Invalid JSON in {self.path}: {e}") from e

        if isinstance(data, list):
            data = {"events": data}
        if not isinstance(data, dict):
            raise SnapshotError(f"Unexpected snapshot layout in {self.path}")

        self._data = data
        return data

    def fetch_events(self) -> list[Event]:
        return parse_records(self._load().get("events") or [], Event)

    def fetch_core_tasks(self) -> list[CoreTaskTemplate]:
        data = self._load()
        records = data.get("core_tasks") or data.get("core_task_templates") or []
        return parse_records(records, CoreTaskTemplate)
