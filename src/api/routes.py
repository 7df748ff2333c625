"""The single dashboard read endpoint plus a health probe."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.dependencies import get_db_session
from domain.dashboard import DASHBOARD_PATH, DashboardDocument
from repositories.dashboard_repository import fetch_dashboard_data

router = APIRouter()


@router.get(
    DASHBOARD_PATH,
    response_model=DashboardDocument,
    response_model_exclude_none=True,
)
def get_dashboard_data(session: Session = Depends(get_db_session)) -> DashboardDocument:
    """Return matches, team/side stats, players and player stats in one document."""
    return fetch_dashboard_data(session)


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
