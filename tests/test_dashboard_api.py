"""HTTP contract tests for GET /api/query-data."""

from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine

from api import create_app
from config import Settings
from db import create_db_engine

SETTINGS = Settings(app_name="Dashboard test", database_url="sqlite://")


def _client(engine: Engine) -> TestClient:
    return TestClient(create_app(SETTINGS, engine=engine))


def test_query_data_returns_all_five_sections(engine: Engine, populate_dashboard) -> None:
    populate_dashboard(match_count=3)

    response = _client(engine).get("/api/query-data")

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"matches", "teamStats", "sideStats", "players", "playerStats"}
    assert [len(body[key]) for key in ("matches", "teamStats", "sideStats", "players", "playerStats")] == [
        3,
        2,
        2,
        10,
        10,
    ]


def test_query_data_uses_camel_case_members(engine: Engine, populate_dashboard) -> None:
    populate_dashboard(match_count=1)

    body = _client(engine).get("/api/query-data").json()

    match = body["matches"][0]
    assert set(match) == {
        "id",
        "mapName",
        "opponent",
        "matchDate",
        "status",
        "scoreTeam",
        "scoreOpponent",
        "durationSeconds",
    }
    assert set(body["teamStats"][0]) == {
        "id",
        "matchesPlayed",
        "winRate",
        "kd",
        "kast",
        "kpr",
        "firstKills",
        "adr",
        "damageDelta",
        "tradeKill",
        "clutchWR",
    }
    assert set(body["sideStats"][0]) == {
        "id",
        "side",
        "wr",
        "kd",
        "firstKills",
        "plantWR",
        "holdWR",
        "retakeWR",
    }
    assert set(body["players"][0]) == {"id", "name", "role", "rating", "teamId"}
    assert set(body["playerStats"][0]) == {
        "id",
        "playerId",
        "kills",
        "deaths",
        "assists",
        "kd",
        "kda",
        "kast",
        "adr",
        "damageDelta",
        "multiKills",
        "clutch",
        "winRate",
    }


def test_empty_store_returns_empty_sequences(engine: Engine) -> None:
    response = _client(engine).get("/api/query-data")

    assert response.status_code == 200
    assert response.json() == {
        "matches": [],
        "teamStats": [],
        "sideStats": [],
        "players": [],
        "playerStats": [],
    }


def test_unreachable_store_returns_503_without_document(tmp_path: Path) -> None:
    engine = create_db_engine(f"sqlite:///{tmp_path / 'nowhere' / 'dashboard.sqlite'}")

    response = _client(engine).get("/api/query-data")

    assert response.status_code == 503
    body = response.json()
    assert body["error"]["code"] == "STORE_UNAVAILABLE"
    assert "matches" not in body
    engine.dispose()


def test_failed_read_returns_500_without_document(tmp_path: Path) -> None:
    engine = create_db_engine(f"sqlite:///{tmp_path / 'unmigrated.sqlite'}")

    response = _client(engine).get("/api/query-data")

    assert response.status_code == 500
    body = response.json()
    assert body["error"]["code"] == "QUERY_FAILED"
    assert "matches" in body["error"]["message"]
    assert set(body) == {"error"}
    engine.dispose()


def test_only_get_is_allowed(engine: Engine) -> None:
    response = _client(engine).post("/api/query-data")
    assert response.status_code == 405


def test_health() -> None:
    engine = create_db_engine("sqlite://")
    with TestClient(create_app(SETTINGS, engine=engine)) as client:
        response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    engine.dispose()
