"""Records exchanged between the dashboard endpoint and its client."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

MatchStatus = Literal["upcoming", "victory", "defeat"]
Side = Literal["attack", "defense"]

DASHBOARD_PATH = "/api/query-data"

SECTION_NAMES = ("matches", "team_stats", "side_stats", "players", "player_stats")


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        frozen=True,
    )


class MatchRecord(_Record):
    id: int
    map_name: str
    opponent: str
    match_date: datetime | None = None
    status: MatchStatus | None = None
    score_team: int | None = None
    score_opponent: int | None = None
    duration_seconds: float | None = None

    @field_validator("match_date")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        # SQLite drops the offset on timestamptz columns.
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class TeamStatRecord(_Record):
    id: int
    matches_played: int | None = None
    win_rate: float | None = None
    kd: float | None = None
    kast: float | None = None
    kpr: float | None = None
    first_kills: float | None = None
    adr: float | None = None
    damage_delta: float | None = None
    trade_kill: float | None = None
    clutch_wr: float | None = Field(default=None, alias="clutchWR")


class SideStatRecord(_Record):
    id: int
    side: Side
    wr: float | None = None
    kd: float | None = None
    first_kills: float | None = None
    plant_wr: float | None = Field(default=None, alias="plantWR")
    hold_wr: float | None = Field(default=None, alias="holdWR")
    retake_wr: float | None = Field(default=None, alias="retakeWR")


class PlayerRecord(_Record):
    id: int
    name: str
    role: str
    rating: int | None = None
    team_id: int | None = None


class PlayerStatRecord(_Record):
    id: int
    player_id: int
    kills: int
    deaths: int
    assists: int
    kd: float | None = None
    kda: float | None = None
    kast: float | None = None
    adr: float | None = None
    damage_delta: float | None = None
    multi_kills: int | None = None
    clutch: int | None = None
    win_rate: float | None = None


class DashboardDocument(_Record):
    """One snapshot of all five dashboard tables."""

    matches: list[MatchRecord]
    team_stats: list[TeamStatRecord]
    side_stats: list[SideStatRecord]
    players: list[PlayerRecord]
    player_stats: list[PlayerStatRecord]

    @field_validator(*SECTION_NAMES, mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_payload(self) -> dict[str, Any]:
        """Serialize with camelCase members, omitting missing optional values."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def section_lengths(self) -> dict[str, int]:
        return {name: len(getattr(self, name)) for name in SECTION_NAMES}


__all__ = [
    "DASHBOARD_PATH",
    "DashboardDocument",
    "MatchRecord",
    "MatchStatus",
    "PlayerRecord",
    "PlayerStatRecord",
    "SECTION_NAMES",
    "Side",
    "SideStatRecord",
    "TeamStatRecord",
]
