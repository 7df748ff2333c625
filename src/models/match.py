"""matches table model."""

from __future__ import annotations

from datetime import datetime, timedelta

from sqlalchemy import CheckConstraint, DateTime, Integer, Interval, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base

MATCH_STATUSES = ("upcoming", "victory", "defeat")


class Match(Base):
    """One scheduled or played match against an opponent on a single map."""

    __tablename__ = "matches"
    __table_args__ = (
        CheckConstraint(
            "status IN ('upcoming', 'victory', 'defeat')",
            name="ck_matches_status",
        ),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    map_name: Mapped[str] = mapped_column(Text, nullable=False)
    opponent: Mapped[str] = mapped_column(Text, nullable=False)
    match_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    status: Mapped[str | None] = mapped_column(Text, nullable=True)
    score_team: Mapped[int | None] = mapped_column(Integer, nullable=True)
    score_opponent: Mapped[int | None] = mapped_column(Integer, nullable=True)
    duration: Mapped[timedelta | None] = mapped_column(Interval, nullable=True)
