"""player_stats table model."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class PlayerStat(Base):
    """Career totals and rates for one player."""

    __tablename__ = "player_stats"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    player_id: Mapped[int] = mapped_column(ForeignKey("players.id"), nullable=False)
    kills: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    deaths: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    assists: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    kd: Mapped[float | None] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=True)
    kda: Mapped[float | None] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=True)
    kast: Mapped[float | None] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=True)
    adr: Mapped[float | None] = mapped_column(Numeric(6, 2, asdecimal=False), nullable=True)
    damage_delta: Mapped[float | None] = mapped_column(
        "dmg_delta",
        Numeric(6, 2, asdecimal=False),
        nullable=True,
    )
    multi_kills: Mapped[int | None] = mapped_column("mk", Integer, nullable=True)
    clutch: Mapped[int | None] = mapped_column(Integer, nullable=True)
    win_rate: Mapped[float | None] = mapped_column("wr", Numeric(5, 2, asdecimal=False), nullable=True)
