"""Configuration management for eventready."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

EVENTREADY_HOME = Path(os.environ.get("EVENTREADY_HOME", Path.home() / "eventready"))
CONFIG_FILE = EVENTREADY_HOME / "config" / "eventready.conf"


@dataclass
class Config:
    """eventready configuration."""

    api_base_url: str = ""
    api_token: str = ""
    tenant: str = ""
    snapshot_file: str = ""
    timezone: str = "America/New_York"
    default_date_range: str = "upcoming"
    default_sort: str = "date_asc"
    task_date_range_days: int = 14
    request_timeout: int = 30


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from unquoted values."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_int(key: str, value: str, default: int) -> int:
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring non-integer {key.upper()}={value!r}")
        return default


def _parse_timezone(value: str, default: str) -> str:
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Ignoring unknown TIMEZONE={value!r}")
        return default
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from eventready.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "api_base_url":
                config.api_base_url = value.rstrip("/")
            case "api_token":
                config.api_token = value
            case "tenant":
                config.tenant = value
            case "snapshot_file":
                config.snapshot_file = value
            case "timezone":
                config.timezone = _parse_timezone(value, config.timezone)
            case "default_date_range":
                config.default_date_range = value
            case "default_sort":
                config.default_sort = value
            case "task_date_range_days":
                config.task_date_range_days = _parse_int(key, value, config.task_date_range_days)
            case "request_timeout":
                config.request_timeout = _parse_int(key, value, config.request_timeout)

    return config
