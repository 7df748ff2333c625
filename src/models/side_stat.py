"""side_stats table model."""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base

SIDES = ("attack", "defense")


class SideStat(Base):
    """Team performance split by attack/defense side."""

    __tablename__ = "side_stats"
    __table_args__ = (
        CheckConstraint("side IN ('attack', 'defense')", name="ck_side_stats_side"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    side: Mapped[str] = mapped_column(Text, nullable=False)
    wr: Mapped[float | None] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=True)
    kd: Mapped[float | None] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=True)
    first_kills: Mapped[float | None] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=True)
    plant_wr: Mapped[float | None] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=True)
    hold_wr: Mapped[float | None] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=True)
    retake_wr: Mapped[float | None] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=True)
