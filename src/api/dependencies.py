"""Request-scoped dependencies for the dashboard routes."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Request
from sqlalchemy.orm import Session


def get_db_session(request: Request) -> Iterator[Session]:
    """FastAPI dependency yielding a Session from the app's session factory."""
    session_factory = request.app.state.session_factory
    with session_factory() as session:
        yield session
