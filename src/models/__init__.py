"""ORM models."""

from models.base import Base
from models.match import MATCH_STATUSES, Match
from models.player import PLAYER_ROLES, Player
from models.player_stat import PlayerStat
from models.side_stat import SIDES, SideStat
from models.team_stat import TeamStat

DASHBOARD_TABLES = (
    Match.__table__,
    TeamStat.__table__,
    SideStat.__table__,
    Player.__table__,
    PlayerStat.__table__,
)

__all__ = [
    "Base",
    "DASHBOARD_TABLES",
    "MATCH_STATUSES",
    "Match",
    "PLAYER_ROLES",
    "Player",
    "PlayerStat",
    "SIDES",
    "SideStat",
    "TeamStat",
]
