"""Adapters - I/O implementations of ports."""

from .errors import ApiError, AuthenticationError, DataSourceError, SnapshotError
from .json_snapshot import JsonSnapshotRepository
from .crm_api import CrmApiAdapter

__all__ = [
    "ApiError",
    "AuthenticationError",
    "DataSourceError",
    "SnapshotError",
    "JsonSnapshotRepository",
    "CrmApiAdapter",
]
