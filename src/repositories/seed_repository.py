"""Persistence helpers that reset and repopulate the dashboard tables."""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, insert, text
from sqlalchemy.orm import Session

from domain.seed import SeedRows
from models import Match, Player, PlayerStat, SideStat, TeamStat

# Children first so plain deletes respect the foreign keys.
_DELETE_ORDER = (PlayerStat, Player, SideStat, TeamStat, Match)


def truncate_dashboard_tables(session: Session) -> None:
    """Hard-reset all five tables and their identity sequences."""
    if session.get_bind().dialect.name == "postgresql":
        session.execute(
            text(
                "TRUNCATE player_stats, players, side_stats, team_stats, matches "
                "RESTART IDENTITY CASCADE"
            )
        )
        return

    for model in _DELETE_ORDER:
        session.execute(delete(model))


def insert_seed_rows(session: Session, rows: SeedRows) -> dict[str, int]:
    """Bulk insert generated rows, resolving parent references to new ids."""
    if rows.matches:
        session.execute(insert(Match), rows.matches)
    if rows.side_stats:
        session.execute(insert(SideStat), rows.side_stats)

    team_ids = _insert_returning_ids(session, TeamStat, rows.team_stats)

    player_payload = []
    for row in rows.players:
        payload = {key: value for key, value in row.items() if key != "team_index"}
        payload["team_id"] = team_ids[row["team_index"]]
        player_payload.append(payload)
    player_ids = _insert_returning_ids(session, Player, player_payload)

    stat_payload = []
    for row in rows.player_stats:
        payload = {key: value for key, value in row.items() if key != "player_index"}
        payload["player_id"] = player_ids[row["player_index"]]
        stat_payload.append(payload)
    if stat_payload:
        session.execute(insert(PlayerStat), stat_payload)

    return rows.counts()


def _insert_returning_ids(session: Session, model: Any, payload: list[dict[str, Any]]) -> list[int]:
    if not payload:
        return []
    statement = insert(model).returning(model.id, sort_by_parameter_order=True)
    return list(session.scalars(statement, payload))
