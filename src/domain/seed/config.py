"""Load seed profiles (sample-data value ranges) from TOML files."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from domain.config_base import BaseConfig, load_toml_configs, parse_name_and_description, select_config
from models import MATCH_STATUSES, PLAYER_ROLES, SIDES

SEED_TABLES = ("seed", "matches", "team_stats", "side_stats", "players", "player_stats")

DEFAULT_ROSTER: tuple[tuple[str, str], ...] = (
    ("Aspas", "Duelist"),
    ("Demon1", "Duelist"),
    ("Chronicle", "Initiator"),
    ("Saadhak", "Controller"),
    ("Less", "Sentinel"),
    ("Leo", "Initiator"),
    ("Derke", "Duelist"),
    ("Boaster", "Controller"),
    ("Alfajer", "Sentinel"),
    ("Nats", "Sentinel"),
)


@dataclass(frozen=True)
class IntRange:
    """Half-open integer range [low, high)."""

    low: int
    high: int

    def draw(self, rng: random.Random) -> int:
        return rng.randrange(self.low, self.high)


@dataclass(frozen=True)
class FloatRange:
    """Uniform float range rounded to two decimals, like the NUMERIC(…,2) columns."""

    low: float
    high: float

    def draw(self, rng: random.Random) -> float:
        return round(rng.uniform(self.low, self.high), 2)


@dataclass(frozen=True)
class MatchSeedParameters:
    count: int = 10
    maps: tuple[str, ...] = ("Haven", "Bind", "Ascent", "Sunset", "Lotus")
    opponents: tuple[str, ...] = ("FNATIC", "G2 ESPORTS", "LOUD", "SENTINELS", "TEAM LIQUID")
    statuses: tuple[str, ...] = MATCH_STATUSES
    score_team: IntRange = IntRange(10, 14)
    score_opponent: IntRange = IntRange(7, 12)
    duration_minutes: IntRange = IntRange(35, 45)
    days_between: int = 1


@dataclass(frozen=True)
class TeamStatSeedParameters:
    count: int = 2
    matches_played: IntRange = IntRange(100, 150)
    win_rate: FloatRange = FloatRange(60.0, 75.0)
    kd: FloatRange = FloatRange(1.6, 2.0)
    kast: FloatRange = FloatRange(74.0, 78.0)
    kpr: FloatRange = FloatRange(3.5, 4.0)
    first_kills: FloatRange = FloatRange(60.0, 65.0)
    adr: FloatRange = FloatRange(150.0, 180.0)
    damage_delta: FloatRange = FloatRange(10.0, 30.0)
    trade_kill: FloatRange = FloatRange(20.0, 25.0)
    clutch_wr: FloatRange = FloatRange(15.0, 20.0)


@dataclass(frozen=True)
class SideStatSeedParameters:
    sides: tuple[str, ...] = SIDES
    wr: FloatRange = FloatRange(65.0, 72.0)
    kd: FloatRange = FloatRange(1.6, 2.0)
    first_kills: FloatRange = FloatRange(55.0, 70.0)
    plant_wr: FloatRange = FloatRange(50.0, 80.0)
    hold_wr: FloatRange = FloatRange(50.0, 75.0)
    retake_wr: FloatRange = FloatRange(30.0, 35.0)


@dataclass(frozen=True)
class PlayerSeedParameters:
    roster: tuple[tuple[str, str], ...] = DEFAULT_ROSTER
    rating: IntRange = IntRange(75, 95)


@dataclass(frozen=True)
class PlayerStatSeedParameters:
    kills: IntRange = IntRange(1900, 2400)
    deaths: IntRange = IntRange(1000, 1300)
    assists: IntRange = IntRange(600, 800)
    kd: FloatRange = FloatRange(1.6, 2.1)
    kda: FloatRange = FloatRange(2.2, 2.8)
    kast: FloatRange = FloatRange(73.0, 79.0)
    adr: FloatRange = FloatRange(150.0, 175.0)
    damage_delta: FloatRange = FloatRange(0.0, 35.0)
    multi_kills: IntRange = IntRange(150, 250)
    clutch: IntRange = IntRange(120, 190)
    win_rate: FloatRange = FloatRange(66.0, 72.0)


@dataclass(frozen=True)
class SeedConfig(BaseConfig):
    """One named sample-data profile."""

    random_seed: int | None = None
    matches: MatchSeedParameters = field(default_factory=MatchSeedParameters)
    team_stats: TeamStatSeedParameters = field(default_factory=TeamStatSeedParameters)
    side_stats: SideStatSeedParameters = field(default_factory=SideStatSeedParameters)
    players: PlayerSeedParameters = field(default_factory=PlayerSeedParameters)
    player_stats: PlayerStatSeedParameters = field(default_factory=PlayerStatSeedParameters)

    def as_config_json(self) -> dict[str, Any]:
        return {
            "random_seed": self.random_seed,
            "match_count": self.matches.count,
            "team_stat_count": self.team_stats.count,
            "sides": list(self.side_stats.sides),
            "roster_size": len(self.players.roster),
        }


def load_seed_configs(config_dir: Path) -> list[SeedConfig]:
    """Load and validate all seed profile TOML files in a directory."""
    return load_toml_configs(
        config_dir,
        parse_seed_config,
        duplicate_name_label="seed profile",
        allowed_tables=SEED_TABLES,
    )


def select_seed_config(configs: list[SeedConfig], name: str) -> SeedConfig:
    return select_config(configs, name, label="seed profile")


def parse_seed_config(raw: dict[str, Any], file_path: Path) -> SeedConfig:
    name, description = parse_name_and_description(raw.get("seed", {}), file_path, table="seed")

    random_seed_value = raw.get("seed", {}).get("random_seed")
    random_seed = None if random_seed_value is None else int(random_seed_value)

    matches_raw = raw.get("matches", {})
    match_defaults = MatchSeedParameters()
    matches = MatchSeedParameters(
        count=_count(matches_raw, "count", match_defaults.count, file_path, table="matches"),
        maps=_names(matches_raw, "maps", match_defaults.maps, file_path, table="matches"),
        opponents=_names(matches_raw, "opponents", match_defaults.opponents, file_path, table="matches"),
        statuses=_names(matches_raw, "statuses", match_defaults.statuses, file_path, table="matches"),
        score_team=_int_range(matches_raw, "score_team", match_defaults.score_team, file_path, table="matches"),
        score_opponent=_int_range(
            matches_raw, "score_opponent", match_defaults.score_opponent, file_path, table="matches"
        ),
        duration_minutes=_int_range(
            matches_raw, "duration_minutes", match_defaults.duration_minutes, file_path, table="matches"
        ),
        days_between=_count(matches_raw, "days_between", match_defaults.days_between, file_path, table="matches"),
    )
    unknown_statuses = sorted(set(matches.statuses) - set(MATCH_STATUSES))
    if unknown_statuses:
        raise ValueError(f"{file_path}: [matches].statuses has unsupported values {unknown_statuses}")

    team_raw = raw.get("team_stats", {})
    team_defaults = TeamStatSeedParameters()
    team_stats = TeamStatSeedParameters(
        count=_count(team_raw, "count", team_defaults.count, file_path, table="team_stats"),
        matches_played=_int_range(
            team_raw, "matches_played", team_defaults.matches_played, file_path, table="team_stats"
        ),
        **_float_ranges(
            team_raw,
            team_defaults,
            (
                "win_rate",
                "kd",
                "kast",
                "kpr",
                "first_kills",
                "adr",
                "damage_delta",
                "trade_kill",
                "clutch_wr",
            ),
            file_path,
            table="team_stats",
        ),
    )

    side_raw = raw.get("side_stats", {})
    side_defaults = SideStatSeedParameters()
    side_stats = SideStatSeedParameters(
        sides=_names(side_raw, "sides", side_defaults.sides, file_path, table="side_stats"),
        **_float_ranges(
            side_raw,
            side_defaults,
            ("wr", "kd", "first_kills", "plant_wr", "hold_wr", "retake_wr"),
            file_path,
            table="side_stats",
        ),
    )
    unknown_sides = sorted(set(side_stats.sides) - set(SIDES))
    if unknown_sides:
        raise ValueError(f"{file_path}: [side_stats].sides has unsupported values {unknown_sides}")

    players_raw = raw.get("players", {})
    player_defaults = PlayerSeedParameters()
    players = PlayerSeedParameters(
        roster=_roster(players_raw, player_defaults.roster, file_path),
        rating=_int_range(players_raw, "rating", player_defaults.rating, file_path, table="players"),
    )
    if players.roster and team_stats.count == 0:
        raise ValueError(f"{file_path}: [players].roster requires [team_stats].count > 0")

    player_stats_raw = raw.get("player_stats", {})
    player_stat_defaults = PlayerStatSeedParameters()
    player_stats = PlayerStatSeedParameters(
        **{
            key: _int_range(
                player_stats_raw, key, getattr(player_stat_defaults, key), file_path, table="player_stats"
            )
            for key in ("kills", "deaths", "assists", "multi_kills", "clutch")
        },
        **_float_ranges(
            player_stats_raw,
            player_stat_defaults,
            ("kd", "kda", "kast", "adr", "damage_delta", "win_rate"),
            file_path,
            table="player_stats",
        ),
    )

    return SeedConfig(
        name=name,
        description=description,
        file_path=file_path,
        random_seed=random_seed,
        matches=matches,
        team_stats=team_stats,
        side_stats=side_stats,
        players=players,
        player_stats=player_stats,
    )


def _count(section: dict[str, Any], key: str, default: int, file_path: Path, *, table: str) -> int:
    value = int(section.get(key, default))
    if value < 0:
        raise ValueError(f"{file_path}: [{table}].{key} must be >= 0")
    return value


def _names(
    section: dict[str, Any],
    key: str,
    default: tuple[str, ...],
    file_path: Path,
    *,
    table: str,
) -> tuple[str, ...]:
    values = tuple(str(value) for value in section.get(key, default))
    if not values:
        raise ValueError(f"{file_path}: [{table}].{key} must not be empty")
    return values


def _int_range(
    section: dict[str, Any],
    key: str,
    default: IntRange,
    file_path: Path,
    *,
    table: str,
) -> IntRange:
    if key not in section:
        return default
    low, high = _pair(section[key], file_path, table=table, key=key)
    if int(high) <= int(low):
        raise ValueError(f"{file_path}: [{table}].{key} upper bound must be greater than lower bound")
    return IntRange(int(low), int(high))


def _float_ranges(
    section: dict[str, Any],
    defaults: Any,
    keys: tuple[str, ...],
    file_path: Path,
    *,
    table: str,
) -> dict[str, FloatRange]:
    ranges: dict[str, FloatRange] = {}
    for key in keys:
        if key not in section:
            ranges[key] = getattr(defaults, key)
            continue
        low, high = _pair(section[key], file_path, table=table, key=key)
        if float(high) < float(low):
            raise ValueError(f"{file_path}: [{table}].{key} upper bound must be >= lower bound")
        ranges[key] = FloatRange(float(low), float(high))
    return ranges


def _pair(value: Any, file_path: Path, *, table: str, key: str) -> tuple[Any, Any]:
    if not isinstance(value, list) or len(value) != 2:
        raise ValueError(f"{file_path}: [{table}].{key} must be a two-element [low, high] array")
    return value[0], value[1]


def _roster(
    section: dict[str, Any],
    default: tuple[tuple[str, str], ...],
    file_path: Path,
) -> tuple[tuple[str, str], ...]:
    if "roster" not in section:
        return default

    roster: list[tuple[str, str]] = []
    for entry in section["roster"]:
        name = str(entry.get("name", "")).strip()
        role = str(entry.get("role", "")).strip()
        if not name or not role:
            raise ValueError(f"{file_path}: every [[players.roster]] entry needs a name and role")
        if role not in PLAYER_ROLES:
            raise ValueError(
                f"{file_path}: [[players.roster]] role {role!r} for {name} must be one of {list(PLAYER_ROLES)}"
            )
        roster.append((name, role))
    return tuple(roster)
