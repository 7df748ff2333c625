"""Dashboard domain records, errors and sample-data profiles."""

from domain.dashboard import DASHBOARD_PATH, DashboardDocument
from domain.errors import DashboardError, NetworkOrStatusError, QueryFailed, StoreUnavailable

__all__ = [
    "DASHBOARD_PATH",
    "DashboardDocument",
    "DashboardError",
    "NetworkOrStatusError",
    "QueryFailed",
    "StoreUnavailable",
]
