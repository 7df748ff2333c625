"""HTTP boundary for the dashboard aggregate."""

from api.app import create_app

__all__ = ["create_app"]
