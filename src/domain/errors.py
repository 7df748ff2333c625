"""Error taxonomy for the dashboard read path."""

from __future__ import annotations


class DashboardError(Exception):
    """Base error for dashboard aggregation and presentation failures."""

    code = "DASHBOARD_ERROR"


class StoreUnavailable(DashboardError):
    """The relational store could not be reached."""

    code = "STORE_UNAVAILABLE"


class QueryFailed(DashboardError):
    """One of the dashboard reads raised while executing."""

    code = "QUERY_FAILED"

    def __init__(self, table: str, message: str) -> None:
        super().__init__(f"Query against {table} failed: {message}")
        self.table = table


class NetworkOrStatusError(DashboardError):
    """The dashboard endpoint answered with a non-success status or could not be reached."""

    code = "NETWORK_OR_STATUS_ERROR"

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = ["DashboardError", "NetworkOrStatusError", "QueryFailed", "StoreUnavailable"]
