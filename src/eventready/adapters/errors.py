"""Errors raised by data source adapters."""


class DataSourceError(Exception):
    """Raised when an event snapshot cannot be loaded."""

    pass


class SnapshotError(DataSourceError):
    """Raised when a snapshot file is missing or not valid JSON."""

    pass


class ApiError(DataSourceError):
    """Raised when the CRM API request fails."""

    pass


class AuthenticationError(ApiError):
    """Raised when the CRM API rejects or lacks credentials."""

    pass
