"""Tests for snapshot and CRM API adapters."""

import json
from datetime import date
from unittest.mock import MagicMock

import pytest
import requests

from eventready.adapters.crm_api import CORE_TASKS_ENDPOINT, EVENTS_ENDPOINT, CrmApiAdapter
from eventready.adapters.errors import ApiError, AuthenticationError, SnapshotError
from eventready.adapters.json_snapshot import JsonSnapshotRepository
from eventready.config import Config

EVENT_RECORDS = [
    {"id": "e1", "title": "Smith Wedding", "start_date": "2025-01-20", "status": "confirmed"},
    {"title": "missing id"},
    {"id": "e2", "title": "Acme Party", "start_date": None},
]
TASK_RECORDS = [
    {"id": "A", "task_name": "Confirm venue", "display_order": 1, "is_active": True},
    {"id": "B", "task_name": "Send contract", "display_order": 2, "is_active": False},
]


class TestJsonSnapshotRepository:
    def test_reads_events_and_core_tasks(self, tmp_path):
        path = tmp_path / "snapshot.json"
        path.write_text(json.dumps({"events": EVENT_RECORDS, "core_tasks": TASK_RECORDS}))

        repo = JsonSnapshotRepository(path)
        events = repo.fetch_events()
        core_tasks = repo.fetch_core_tasks()

        # Malformed record skipped
        assert [e.id for e in events] == ["e1", "e2"]
        assert events[0].start_date == date(2025, 1, 20)
        assert [t.id for t in core_tasks] == ["A", "B"]
        assert core_tasks[1].active is False

    def test_bare_list_is_events(self, tmp_path):
        path = tmp_path / "events.json"
        path.write_text(json.dumps(EVENT_RECORDS))

        repo = JsonSnapshotRepository(path)
        assert len(repo.fetch_events()) == 2
        assert repo.fetch_core_tasks() == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(SnapshotError, match="not found"):
            JsonSnapshotRepository(tmp_path / "nope.json").fetch_events()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(SnapshotError, match="Invalid JSON"):
            JsonSnapshotRepository(path).fetch_events()

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(SnapshotError, match="Cannot read"):
            JsonSnapshotRepository(path).fetch_events()

    def test_directory_instead_of_file(self, tmp_path):
        with pytest.raises(SnapshotError, match="Cannot read"):
            JsonSnapshotRepository(tmp_path).fetch_events()

    def test_unexpected_layout(self, tmp_path):
        path = tmp_path / "scalar.json"
        path.write_text("42")
        with pytest.raises(SnapshotError):
            JsonSnapshotRepository(path).fetch_core_tasks()


@pytest.fixture
def config():
    return Config(api_base_url="https://crm.example.com", api_token="secret", tenant="acme")


def make_response(status_code=200, payload=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return resp


class TestCrmApiAdapter:
    def test_fetch_events(self, config):
        session = MagicMock()
        session.get.return_value = make_response(payload=EVENT_RECORDS)

        events = CrmApiAdapter(config, session=session).fetch_events()

        assert [e.id for e in events] == ["e1", "e2"]
        url = session.get.call_args.args[0]
        headers = session.get.call_args.kwargs["headers"]
        assert url == f"https://crm.example.com{EVENTS_ENDPOINT}"
        assert headers["Authorization"] == "Bearer secret"
        assert headers["X-Tenant"] == "acme"
        assert session.get.call_args.kwargs["timeout"] == config.request_timeout

    def test_fetch_core_tasks_unwraps_data(self, config):
        session = MagicMock()
        session.get.return_value = make_response(payload={"data": TASK_RECORDS})

        core_tasks = CrmApiAdapter(config, session=session).fetch_core_tasks()

        assert [t.name for t in core_tasks] == ["Confirm venue", "Send contract"]
        assert session.get.call_args.args[0].endswith(CORE_TASKS_ENDPOINT)

    def test_missing_token(self):
        adapter = CrmApiAdapter(Config(api_base_url="https://crm.example.com"), session=MagicMock())
        with pytest.raises(AuthenticationError):
            adapter.fetch_events()

    def test_missing_base_url(self):
        adapter = CrmApiAdapter(Config(api_token="secret"), session=MagicMock())
        with pytest.raises(ApiError, match="base URL"):
            adapter.fetch_events()

    def test_unauthorized(self, config):
        session = MagicMock()
        session.get.return_value = make_response(status_code=401)
        with pytest.raises(AuthenticationError):
            CrmApiAdapter(config, session=session).fetch_events()

    def test_server_error(self, config):
        session = MagicMock()
        session.get.return_value = make_response(status_code=500)
        with pytest.raises(ApiError):
            CrmApiAdapter(config, session=session).fetch_events()

    def test_connection_error(self, config):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError("refused")
        with pytest.raises(ApiError, match="refused"):
            CrmApiAdapter(config, session=session).fetch_events()
