from datetime import date, datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from mlbpool.api import create_app
from mlbpool.persistence import StandingsStore
from mlbpool.pipeline import build_standings


@pytest.fixture
def store(tmp_path, standings_payload, schedule_payload, league) -> StandingsStore:
    store = StandingsStore(tmp_path)
    result = build_standings(
        standings_payload,
        schedule_payload,
        league,
        date(2026, 4, 1),
        season=2026,
        now=datetime(2026, 4, 1, 12, 0, tzinfo=timezone.utc),
    )
    store.write_result(result)
    return store


@pytest.fixture
async def client(store):
    app = create_app(store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.anyio
async def test_full_standings(client: AsyncClient):
    resp = await client.get("/standings")
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["season"] == 2026
    assert payload["lastUpdated"] == "2026-04-01T12:00:00Z"
    assert payload["teams"]["LAD"]["winPct"] == 0.8


@pytest.mark.anyio
async def test_teams_sorted_by_win_pct(client: AsyncClient):
    resp = await client.get("/standings/teams")
    assert resp.status_code == 200
    assert [team["abbreviation"] for team in resp.json()] == ["LAD", "NYY", "BOS", "TOR"]


@pytest.mark.anyio
async def test_quarter_leaderboard(client: AsyncClient):
    resp = await client.get("/standings/quarters/q1")
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["quarter"] == "Q1"
    assert payload["started"] is True
    assert [(entry["participant_id"], entry["rank"]) for entry in payload["entries"]] == [("p1", 1), ("p2", 2)]
    assert payload["entries"][0]["teams"] == ["NYY", "BOS"]

    resp = await client.get("/standings/quarters/Q3")
    assert resp.json()["started"] is False
    assert resp.json()["entries"] == []


@pytest.mark.anyio
async def test_unknown_quarter_is_404(client: AsyncClient):
    resp = await client.get("/standings/quarters/Q7")
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_standings_missing_is_404(tmp_path):
    app = create_app(StandingsStore(tmp_path / "nothing"))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as async_client:
        resp = await async_client.get("/standings")
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_default_store_follows_data_dir_env(monkeypatch, tmp_path, store):
    monkeypatch.setenv("MLBPOOL_DATA_DIR", str(tmp_path))
    app = create_app()
    assert app.state.store.data_dir == tmp_path

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        resp = await async_client.get("/standings")
    assert resp.status_code == 200
    assert resp.json()["season"] == 2026
