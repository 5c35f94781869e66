"""CRM API adapter - HTTP client for event snapshots."""

import logging

import requests

from eventready.config import Config, load_config
from eventready.core.events import CoreTaskTemplate, Event

from .errors import ApiError, AuthenticationError
from .json_snapshot import parse_records

logger = logging.getLogger(__name__)

EVENTS_ENDPOINT = "/api/events"
CORE_TASKS_ENDPOINT = "/api/core-task-templates"


class CrmApiAdapter:
    """
    CRM REST API adapter.

    Implements EventRepository protocol. Handles authentication headers and
    response unwrapping. No business logic - just I/O.
    """

    def __init__(self, config: Config | None = None, session: requests.Session | None = None):
        self.config = config or load_config()
        self._session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        if not self.config.api_token:
            raise AuthenticationError("No API token. Set API_TOKEN in eventready.conf.")
        headers = {
            "Authorization": f"Bearer {self.config.api_token}",
            "Accept": "application/json",
        }
        if self.config.tenant:
            headers["X-Tenant"] = self.config.tenant
        return headers

    def _api_request(self, endpoint: str) -> list:
        """Make authenticated API request, returning the record list."""
        if not self.config.api_base_url:
            raise ApiError("No API base URL. Set API_BASE_URL in eventready.conf.")

        url = f"{self.config.api_base_url}{endpoint}"
        try:
            resp = self._session.get(
                url,
                headers=self._headers(),
                timeout=self.config.request_timeout,
            )
        except requests.RequestException as e:
            raise ApiError(f"Request to {url} failed: {e}") from e

        if resp.status_code in (401, 403):
            raise AuthenticationError(f"API rejected credentials ({resp.status_code})")
        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            raise ApiError(f"API error for {url}: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON from {url}") from e

        # Some routes wrap their payload: {"data": [...]}
        if isinstance(data, dict):
            data = data.get("data") or []
        logger.debug(f"Fetched {len(data)} records from {endpoint}")
        return data

    def fetch_events(self) -> list[Event]:
        return parse_records(self._api_request(EVENTS_ENDPOINT), Event)

    def fetch_core_tasks(self) -> list[CoreTaskTemplate]:
        return parse_records(self._api_request(CORE_TASKS_ENDPOINT), CoreTaskTemplate)
