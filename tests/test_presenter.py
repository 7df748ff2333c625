"""Tests for the presenter state machine, sections and rendering."""

from __future__ import annotations

import asyncio

import httpx
from sqlalchemy.engine import Engine

from api import create_app
from config import Settings
from db import create_db_engine
from domain.dashboard import DashboardDocument, PlayerRecord, PlayerStatRecord, SideStatRecord
from presenter import (
    NO_DATA_MESSAGE,
    DashboardClient,
    Errored,
    Idle,
    Loaded,
    Loading,
    Presenter,
    ViewState,
    build_sections,
    render_dashboard,
    render_section,
)
from presenter.presenter import UNKNOWN_ERROR_MESSAGE
from presenter.render import IDLE_MESSAGE, LOADING_MESSAGE

SAMPLE_PAYLOAD = {
    "matches": [
        {
            "id": 1,
            "mapName": "Haven",
            "opponent": "LOUD",
            "matchDate": "2026-03-01T18:00:00Z",
            "status": "victory",
            "scoreTeam": 13,
            "scoreOpponent": 9,
            "durationSeconds": 2292.0,
        }
    ],
    "teamStats": [{"id": 1, "matchesPlayed": 120, "winRate": 67.5, "kd": 1.8, "clutchWR": 17.25}],
    "sideStats": [{"id": 1, "side": "attack", "wr": 70.0, "plantWR": 61.1}],
    "players": [{"id": 1, "name": "Aspas", "role": "Duelist", "rating": 91, "teamId": 1}],
    "playerStats": [{"id": 1, "playerId": 1, "kills": 2100, "deaths": 1100, "assists": 700, "kd": 1.91}],
}


def _mock_client(*responses: httpx.Response) -> tuple[DashboardClient, list[httpx.Request]]:
    queue = list(responses)
    seen: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return queue.pop(0)

    client = DashboardClient("http://dashboard.test", transport=httpx.MockTransport(_handler))
    return client, seen


def test_presenter_starts_idle() -> None:
    client, _ = _mock_client()
    presenter = Presenter(client)

    assert presenter.state == Idle()
    assert presenter.sections() == ()
    assert presenter.render() == [IDLE_MESSAGE]


def test_successful_fetch_passes_through_loading_to_loaded() -> None:
    client, seen = _mock_client(httpx.Response(200, json=SAMPLE_PAYLOAD))
    transitions: list[ViewState] = []
    presenter = Presenter(client, on_change=transitions.append)

    state = asyncio.run(presenter.trigger_fetch())

    assert isinstance(state, Loaded)
    assert [type(item) for item in transitions] == [Loading, Loaded]
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/api/query-data"
    assert state.document.matches[0].map_name == "Haven"
    assert state.document.team_stats[0].clutch_wr == 17.25


def test_loading_state_is_visible_while_request_is_in_flight() -> None:
    observed: list[bool] = []
    presenter: Presenter

    def _handler(request: httpx.Request) -> httpx.Response:
        observed.append(presenter.is_loading)
        return httpx.Response(200, json=SAMPLE_PAYLOAD)

    presenter = Presenter(DashboardClient("http://dashboard.test", transport=httpx.MockTransport(_handler)))
    asyncio.run(presenter.trigger_fetch())

    assert observed == [True]
    assert not presenter.is_loading
    assert render_dashboard(Loading()) == [LOADING_MESSAGE]


def test_error_status_surfaces_message() -> None:
    client, _ = _mock_client(httpx.Response(503, json={"error": {"code": "STORE_UNAVAILABLE"}}))
    presenter = Presenter(client)

    state = asyncio.run(presenter.trigger_fetch())

    assert state == Errored("Request failed with status 503")
    assert presenter.render() == ["Error: Request failed with status 503"]


def test_error_after_success_drops_previous_document() -> None:
    client, _ = _mock_client(
        httpx.Response(200, json=SAMPLE_PAYLOAD),
        httpx.Response(500, text="boom"),
    )
    presenter = Presenter(client)

    asyncio.run(presenter.trigger_fetch())
    assert isinstance(presenter.state, Loaded)

    asyncio.run(presenter.trigger_fetch())
    assert isinstance(presenter.state, Errored)
    assert presenter.sections() == ()
    assert all("Aspas" not in line for line in presenter.render())


def test_success_after_error_clears_error() -> None:
    client, _ = _mock_client(
        httpx.Response(502),
        httpx.Response(200, json=SAMPLE_PAYLOAD),
    )
    presenter = Presenter(client)

    asyncio.run(presenter.trigger_fetch())
    asyncio.run(presenter.trigger_fetch())

    assert isinstance(presenter.state, Loaded)
    assert not any(line.startswith("Error:") for line in presenter.render())


def test_transport_failure_becomes_errored() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    presenter = Presenter(DashboardClient("http://dashboard.test", transport=httpx.MockTransport(_handler)))
    state = asyncio.run(presenter.trigger_fetch())

    assert isinstance(state, Errored)
    assert state.message.startswith("Request failed:")


def test_unexpected_client_error_becomes_errored() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise RuntimeError("boom")

    transitions: list[ViewState] = []
    presenter = Presenter(
        DashboardClient("http://dashboard.test", transport=httpx.MockTransport(_handler)),
        on_change=transitions.append,
    )

    state = asyncio.run(presenter.trigger_fetch())

    assert state == Errored("boom")
    assert [type(item) for item in transitions] == [Loading, Errored]
    assert not presenter.is_loading


def test_error_without_message_falls_back_to_unknown_error() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise RuntimeError()

    presenter = Presenter(DashboardClient("http://dashboard.test", transport=httpx.MockTransport(_handler)))

    assert asyncio.run(presenter.trigger_fetch()) == Errored(UNKNOWN_ERROR_MESSAGE)


def test_undecodable_body_becomes_errored() -> None:
    client, _ = _mock_client(httpx.Response(200, text="<html>not json</html>"))
    presenter = Presenter(client)

    state = asyncio.run(presenter.trigger_fetch())

    assert isinstance(state, Errored)
    assert state.message.startswith("Invalid dashboard payload")


def test_body_missing_sections_becomes_errored() -> None:
    client, _ = _mock_client(httpx.Response(200, json={}))
    presenter = Presenter(client)

    state = asyncio.run(presenter.trigger_fetch())

    assert isinstance(state, Errored)
    assert state.message.startswith("Invalid dashboard payload")
    assert presenter.sections() == ()


def test_null_sections_are_treated_as_empty() -> None:
    document = DashboardDocument.model_validate({**SAMPLE_PAYLOAD, "sideStats": None})
    assert document.side_stats == []


def test_sections_render_independently() -> None:
    full = DashboardDocument.model_validate(SAMPLE_PAYLOAD)
    full_sections = {section.key: section for section in build_sections(full)}

    for key in ("matches", "team_stats", "side_stats", "players", "player_stats"):
        partial = full.model_copy(update={key: []})
        sections = {section.key: section for section in build_sections(partial)}

        assert sections[key].is_empty
        assert render_section(sections[key])[1:] == [NO_DATA_MESSAGE]
        for other_key, section in sections.items():
            if other_key == key or (key == "players" and other_key == "player_stats"):
                continue
            assert section == full_sections[other_key]


def test_player_stats_show_player_name_or_placeholder() -> None:
    document = DashboardDocument(
        matches=[],
        team_stats=[],
        side_stats=[],
        players=[PlayerRecord(id=1, name="Aspas", role="Duelist")],
        player_stats=[
            PlayerStatRecord(id=1, player_id=1, kills=1, deaths=1, assists=1),
            PlayerStatRecord(id=2, player_id=99, kills=1, deaths=1, assists=1),
        ],
    )

    section = build_sections(document)[4]

    assert [row[0] for row in section.rows] == ["Aspas", "–"]
    assert section.rows[0][4] == "–"


def test_section_cells_are_formatted() -> None:
    sections = {section.key: section for section in build_sections(DashboardDocument.model_validate(SAMPLE_PAYLOAD))}

    match_row = sections["matches"].rows[0]
    assert match_row[4] == "13 : 9"
    assert match_row[5] == "38m 12s"
    assert sections["team_stats"].rows[0][:3] == ("120", "67.5", "1.8")
    assert sections["side_stats"].rows[0][0] == "Attack"
    assert sections["players"].rows[0] == ("Aspas", "Duelist", "91", "#1")


def test_side_stat_rows_keep_document_order() -> None:
    document = DashboardDocument(
        matches=[],
        team_stats=[],
        side_stats=[SideStatRecord(id=2, side="defense"), SideStatRecord(id=1, side="attack")],
        players=[],
        player_stats=[],
    )
    section = build_sections(document)[2]
    assert [row[0] for row in section.rows] == ["Defense", "Attack"]


def test_end_to_end_fetch_renders_every_row(engine: Engine, populate_dashboard) -> None:
    populate_dashboard(match_count=3)
    app = create_app(Settings(database_url="sqlite://"), engine=engine)
    client = DashboardClient("http://testserver", transport=httpx.ASGITransport(app=app))
    presenter = Presenter(client)

    state = asyncio.run(presenter.trigger_fetch())

    assert isinstance(state, Loaded)
    assert state.document.section_lengths() == {
        "matches": 3,
        "team_stats": 2,
        "side_stats": 2,
        "players": 10,
        "player_stats": 10,
    }

    sections = {section.key: section for section in presenter.sections()}
    assert {key: len(section.rows) for key, section in sections.items()} == {
        "matches": 3,
        "team_stats": 2,
        "side_stats": 2,
        "players": 10,
        "player_stats": 10,
    }

    lines = presenter.render()
    assert "== Matches (3) ==" in lines
    assert "== Players (10) ==" in lines
    # Tables render a header, a rule and one line per row.
    team_start = lines.index("== Team stats (2) ==")
    assert len(lines[team_start + 1 : lines.index("", team_start)]) == 2 + 2
    assert sum(line.startswith("Map ") for line in lines) == 3
    assert sum(line.startswith("Name ") for line in lines) == 5


def test_end_to_end_store_failure_shows_error(tmp_path) -> None:
    broken = create_db_engine(f"sqlite:///{tmp_path / 'nowhere' / 'dashboard.sqlite'}")
    app = create_app(Settings(database_url="sqlite://"), engine=broken)
    presenter = Presenter(DashboardClient("http://testserver", transport=httpx.ASGITransport(app=app)))

    state = asyncio.run(presenter.trigger_fetch())

    assert state == Errored("Request failed with status 503")
    assert presenter.sections() == ()
    broken.dispose()
