"""Build the five dashboard sections from a document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from domain.dashboard import (
    DashboardDocument,
    MatchRecord,
    PlayerRecord,
    PlayerStatRecord,
    SideStatRecord,
    TeamStatRecord,
)
from presenter.formatting import PLACEHOLDER, format_datetime, format_duration, format_number

Layout = Literal["list", "table", "grid"]

NO_DATA_MESSAGE = "No data available."


@dataclass(frozen=True)
class SectionView:
    """Display-ready section: every cell is already a formatted string."""

    key: str
    title: str
    layout: Layout
    columns: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]

    @property
    def is_empty(self) -> bool:
        return not self.rows


def _text(value: str | None) -> str:
    return PLACEHOLDER if value is None else value


def _score(match: MatchRecord) -> str:
    return f"{format_number(match.score_team)} : {format_number(match.score_opponent)}"


def build_matches_section(matches: list[MatchRecord]) -> SectionView:
    return SectionView(
        key="matches",
        title="Matches",
        layout="list",
        columns=("Map", "Opponent", "Date", "Status", "Score", "Duration"),
        rows=tuple(
            (
                match.map_name,
                match.opponent,
                format_datetime(match.match_date),
                _text(match.status),
                _score(match),
                format_duration(match.duration_seconds),
            )
            for match in matches
        ),
    )


def build_team_stats_section(team_stats: list[TeamStatRecord]) -> SectionView:
    return SectionView(
        key="team_stats",
        title="Team stats",
        layout="table",
        columns=(
            "Matches",
            "Win rate %",
            "K/D",
            "KAST %",
            "KPR",
            "First kills %",
            "ADR",
            "Damage delta",
            "Trade kill %",
            "Clutch WR %",
        ),
        rows=tuple(
            (
                format_number(stat.matches_played),
                format_number(stat.win_rate),
                format_number(stat.kd),
                format_number(stat.kast),
                format_number(stat.kpr),
                format_number(stat.first_kills),
                format_number(stat.adr),
                format_number(stat.damage_delta),
                format_number(stat.trade_kill),
                format_number(stat.clutch_wr),
            )
            for stat in team_stats
        ),
    )


def build_side_stats_section(side_stats: list[SideStatRecord]) -> SectionView:
    return SectionView(
        key="side_stats",
        title="Side stats",
        layout="table",
        columns=("Side", "WR %", "K/D", "First kills %", "Plant WR %", "Hold WR %", "Retake WR %"),
        rows=tuple(
            (
                stat.side.capitalize(),
                format_number(stat.wr),
                format_number(stat.kd),
                format_number(stat.first_kills),
                format_number(stat.plant_wr),
                format_number(stat.hold_wr),
                format_number(stat.retake_wr),
            )
            for stat in side_stats
        ),
    )


def build_players_section(players: list[PlayerRecord]) -> SectionView:
    return SectionView(
        key="players",
        title="Players",
        layout="grid",
        columns=("Name", "Role", "Rating", "Team"),
        rows=tuple(
            (
                player.name,
                player.role,
                format_number(player.rating),
                PLACEHOLDER if player.team_id is None else f"#{player.team_id}",
            )
            for player in players
        ),
    )


def build_player_stats_section(
    player_stats: list[PlayerStatRecord],
    players: list[PlayerRecord],
) -> SectionView:
    names = {player.id: player.name for player in players}
    return SectionView(
        key="player_stats",
        title="Player stats",
        layout="table",
        columns=(
            "Player",
            "K",
            "D",
            "A",
            "K/D",
            "KDA",
            "KAST %",
            "ADR",
            "Damage delta",
            "Multi-kills",
            "Clutches",
            "Win rate %",
        ),
        rows=tuple(
            (
                names.get(stat.player_id, PLACEHOLDER),
                format_number(stat.kills),
                format_number(stat.deaths),
                format_number(stat.assists),
                format_number(stat.kd),
                format_number(stat.kda),
                format_number(stat.kast),
                format_number(stat.adr),
                format_number(stat.damage_delta),
                format_number(stat.multi_kills),
                format_number(stat.clutch),
                format_number(stat.win_rate),
            )
            for stat in player_stats
        ),
    )


def build_sections(document: DashboardDocument) -> tuple[SectionView, ...]:
    """Build all five sections; each depends only on its own sequence (plus the player lookup)."""
    return (
        build_matches_section(document.matches),
        build_team_stats_section(document.team_stats),
        build_side_stats_section(document.side_stats),
        build_players_section(document.players),
        build_player_stats_section(document.player_stats, document.players),
    )
