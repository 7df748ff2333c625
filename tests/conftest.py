"""Shared fixtures: a file-backed SQLite store with the dashboard schema."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterator
from dataclasses import replace
from datetime import UTC, datetime
from pathlib import Path

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from db import create_db_engine, create_session_factory
from domain.seed import SeedConfig, generate_seed_rows
from repositories import ensure_dashboard_schema, insert_seed_rows

FIXED_NOW = datetime(2026, 3, 1, 18, 0, 0, tzinfo=UTC)


@pytest.fixture
def engine(tmp_path: Path) -> Iterator[Engine]:
    engine = create_db_engine(f"sqlite:///{tmp_path / 'dashboard.sqlite'}")
    ensure_dashboard_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return create_session_factory(engine)


@pytest.fixture
def seed_config() -> SeedConfig:
    return SeedConfig(name="test", description=None, file_path=Path("test.toml"), random_seed=7)


@pytest.fixture
def populate_dashboard(
    session_factory: sessionmaker[Session],
    seed_config: SeedConfig,
) -> Callable[..., dict[str, int]]:
    """Insert generated rows; ``match_count`` overrides the profile's match count."""

    def _populate(*, match_count: int = 3) -> dict[str, int]:
        config = replace(seed_config, matches=replace(seed_config.matches, count=match_count))
        rows = generate_seed_rows(config, now=FIXED_NOW, rng=random.Random(config.random_seed))
        with session_factory() as session:
            with session.begin():
                return insert_seed_rows(session, rows)

    return _populate
