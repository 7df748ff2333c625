"""team_stats table model."""

from __future__ import annotations

from sqlalchemy import Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class TeamStat(Base):
    """Aggregate team performance over all tracked matches."""

    __tablename__ = "team_stats"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    matches_played: Mapped[int | None] = mapped_column(Integer, nullable=True)
    win_rate: Mapped[float | None] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=True)
    kd: Mapped[float | None] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=True)
    kast: Mapped[float | None] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=True)
    kpr: Mapped[float | None] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=True)
    first_kills: Mapped[float | None] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=True)
    adr: Mapped[float | None] = mapped_column(Numeric(6, 2, asdecimal=False), nullable=True)
    damage_delta: Mapped[float | None] = mapped_column(
        "dmg_delta",
        Numeric(6, 2, asdecimal=False),
        nullable=True,
    )
    trade_kill: Mapped[float | None] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=True)
    clutch_wr: Mapped[float | None] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=True)
