"""View states of the dashboard presenter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from domain.dashboard import DashboardDocument


@dataclass(frozen=True)
class Idle:
    """Nothing requested yet."""


@dataclass(frozen=True)
class Loading:
    """A fetch is in flight."""


@dataclass(frozen=True)
class Loaded:
    document: DashboardDocument


@dataclass(frozen=True)
class Errored:
    message: str


ViewState: TypeAlias = Idle | Loading | Loaded | Errored

__all__ = ["Errored", "Idle", "Loaded", "Loading", "ViewState"]
