"""Read-side aggregation of the five dashboard tables using SQLAlchemy."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError, DisconnectionError, InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from domain.dashboard import (
    DashboardDocument,
    MatchRecord,
    PlayerRecord,
    PlayerStatRecord,
    SideStatRecord,
    TeamStatRecord,
)
from domain.errors import QueryFailed, StoreUnavailable
from models import DASHBOARD_TABLES, Base, Match, Player, PlayerStat, SideStat, TeamStat

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


def ensure_dashboard_schema(engine: Engine) -> None:
    """Create the five dashboard tables if they do not exist."""
    try:
        Base.metadata.create_all(bind=engine, tables=list(DASHBOARD_TABLES))
    except SQLAlchemyError as exc:
        if _is_connectivity_error(exc):
            raise StoreUnavailable(f"Store unavailable while creating schema: {_detail(exc)}") from exc
        raise


def fetch_matches(session: Session) -> list[MatchRecord]:
    """Fetch matches, most recent first, undated matches last."""
    statement = select(Match).order_by(Match.match_date.desc().nulls_last(), Match.id)

    def _load() -> list[MatchRecord]:
        records: list[MatchRecord] = []
        for match in session.scalars(statement):
            records.append(
                MatchRecord(
                    id=match.id,
                    map_name=match.map_name,
                    opponent=match.opponent,
                    match_date=match.match_date,
                    status=match.status,
                    score_team=match.score_team,
                    score_opponent=match.score_opponent,
                    duration_seconds=(
                        None if match.duration is None else match.duration.total_seconds()
                    ),
                )
            )
        return records

    return _run_read(Match.__tablename__, _load)


def fetch_team_stats(session: Session) -> list[TeamStatRecord]:
    """Fetch all team stat rows ordered by id."""
    return _fetch_all(session, TeamStat, TeamStatRecord)


def fetch_side_stats(session: Session) -> list[SideStatRecord]:
    """Fetch all attack/defense split rows ordered by id."""
    return _fetch_all(session, SideStat, SideStatRecord)


def fetch_players(session: Session) -> list[PlayerRecord]:
    """Fetch the roster ordered by id."""
    return _fetch_all(session, Player, PlayerRecord)


def fetch_player_stats(session: Session) -> list[PlayerStatRecord]:
    """Fetch all player stat rows ordered by id."""
    return _fetch_all(session, PlayerStat, PlayerStatRecord)


def fetch_dashboard_data(session: Session) -> DashboardDocument:
    """Read all five tables and assemble one dashboard document.

    The reads are independent snapshots issued sequentially on the same session.
    Any failure aborts the whole aggregation, so callers either get a complete
    document or an exception (``StoreUnavailable`` / ``QueryFailed``).
    """
    document = DashboardDocument(
        matches=fetch_matches(session),
        team_stats=fetch_team_stats(session),
        side_stats=fetch_side_stats(session),
        players=fetch_players(session),
        player_stats=fetch_player_stats(session),
    )
    logger.debug("Assembled dashboard document sections=%s", document.section_lengths())
    return document


def _fetch_all(session: Session, model: type[Base], record_type: type[RecordT]) -> list[RecordT]:
    statement = select(model).order_by(getattr(model, "id"))

    def _load() -> list[RecordT]:
        return [
            record_type.model_validate(row)  # type: ignore[attr-defined]
            for row in session.scalars(statement)
        ]

    return _run_read(model.__tablename__, _load)


def _run_read(table: str, load: Callable[[], list[RecordT]]) -> list[RecordT]:
    try:
        return load()
    except SQLAlchemyError as exc:
        if _is_connectivity_error(exc):
            raise StoreUnavailable(f"Store unavailable while reading {table}: {_detail(exc)}") from exc
        raise QueryFailed(table, _detail(exc)) from exc


def _detail(exc: SQLAlchemyError) -> str:
    return str(exc.orig) if isinstance(exc, DBAPIError) else str(exc)


def _is_connectivity_error(exc: SQLAlchemyError) -> bool:
    if isinstance(exc, DisconnectionError):
        return True
    if isinstance(exc, DBAPIError) and exc.connection_invalidated:
        return True
    # Connection refused / DNS / auth failures surface as OperationalError or
    # InterfaceError before any statement runs.
    if isinstance(exc, (OperationalError, InterfaceError)):
        return exc.statement is None or _looks_like_connect_failure(exc)
    return False


def _looks_like_connect_failure(exc: DBAPIError) -> bool:
    message = str(exc.orig).lower()
    return any(
        marker in message
        for marker in (
            "connection refused",
            "could not connect",
            "connection to server",
            "server closed the connection",
            "unable to open database file",
            "timeout expired",
        )
    )
