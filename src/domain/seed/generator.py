"""Generate randomized dashboard sample rows from a seed profile."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any

from domain.seed.config import SeedConfig


@dataclass
class SeedRows:
    """Rows for each dashboard table, keyed by ORM attribute name.

    Players reference team stats by ``team_index`` and player stats reference
    players by ``player_index``; the repository resolves both to database ids
    after inserting the parent rows.
    """

    matches: list[dict[str, Any]] = field(default_factory=list)
    team_stats: list[dict[str, Any]] = field(default_factory=list)
    side_stats: list[dict[str, Any]] = field(default_factory=list)
    players: list[dict[str, Any]] = field(default_factory=list)
    player_stats: list[dict[str, Any]] = field(default_factory=list)

    def counts(self) -> dict[str, int]:
        return {
            "matches": len(self.matches),
            "team_stats": len(self.team_stats),
            "side_stats": len(self.side_stats),
            "players": len(self.players),
            "player_stats": len(self.player_stats),
        }


def generate_seed_rows(
    config: SeedConfig,
    *,
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> SeedRows:
    """Draw one full set of sample rows for every dashboard table."""
    rng = rng or random.Random(config.random_seed)
    now = now or datetime.now(UTC)
    rows = SeedRows()

    match_params = config.matches
    for index in range(match_params.count):
        rows.matches.append(
            {
                "map_name": rng.choice(match_params.maps),
                "opponent": rng.choice(match_params.opponents),
                "match_date": now + timedelta(days=index * match_params.days_between),
                "status": rng.choice(match_params.statuses),
                "score_team": match_params.score_team.draw(rng),
                "score_opponent": match_params.score_opponent.draw(rng),
                "duration": timedelta(minutes=match_params.duration_minutes.draw(rng)),
            }
        )

    team_params = config.team_stats
    for _ in range(team_params.count):
        rows.team_stats.append(
            {
                "matches_played": team_params.matches_played.draw(rng),
                "win_rate": team_params.win_rate.draw(rng),
                "kd": team_params.kd.draw(rng),
                "kast": team_params.kast.draw(rng),
                "kpr": team_params.kpr.draw(rng),
                "first_kills": team_params.first_kills.draw(rng),
                "adr": team_params.adr.draw(rng),
                "damage_delta": team_params.damage_delta.draw(rng),
                "trade_kill": team_params.trade_kill.draw(rng),
                "clutch_wr": team_params.clutch_wr.draw(rng),
            }
        )

    side_params = config.side_stats
    for side in side_params.sides:
        rows.side_stats.append(
            {
                "side": side,
                "wr": side_params.wr.draw(rng),
                "kd": side_params.kd.draw(rng),
                "first_kills": side_params.first_kills.draw(rng),
                "plant_wr": side_params.plant_wr.draw(rng),
                "hold_wr": side_params.hold_wr.draw(rng),
                "retake_wr": side_params.retake_wr.draw(rng),
            }
        )

    player_params = config.players
    for index, (name, role) in enumerate(player_params.roster):
        rows.players.append(
            {
                "name": name,
                "role": role,
                "rating": player_params.rating.draw(rng),
                "team_index": index % team_params.count,
            }
        )

    stat_params = config.player_stats
    for index in range(len(rows.players)):
        rows.player_stats.append(
            {
                "player_index": index,
                "kills": stat_params.kills.draw(rng),
                "deaths": stat_params.deaths.draw(rng),
                "assists": stat_params.assists.draw(rng),
                "kd": stat_params.kd.draw(rng),
                "kda": stat_params.kda.draw(rng),
                "kast": stat_params.kast.draw(rng),
                "adr": stat_params.adr.draw(rng),
                "damage_delta": stat_params.damage_delta.draw(rng),
                "multi_kills": stat_params.multi_kills.draw(rng),
                "clutch": stat_params.clutch.draw(rng),
                "win_rate": stat_params.win_rate.draw(rng),
            }
        )

    return rows
