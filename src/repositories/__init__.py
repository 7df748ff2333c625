"""Database repository helpers."""

from repositories.dashboard_repository import (
    ensure_dashboard_schema,
    fetch_dashboard_data,
    fetch_matches,
    fetch_player_stats,
    fetch_players,
    fetch_side_stats,
    fetch_team_stats,
)
from repositories.seed_repository import insert_seed_rows, truncate_dashboard_tables

__all__ = [
    "ensure_dashboard_schema",
    "fetch_dashboard_data",
    "fetch_matches",
    "fetch_player_stats",
    "fetch_players",
    "fetch_side_stats",
    "fetch_team_stats",
    "insert_seed_rows",
    "truncate_dashboard_tables",
]
