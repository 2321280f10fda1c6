import pytest
from httpx import ASGITransport, AsyncClient

from pyscout.api import create_app
from pyscout.models import ClubRatingWeights, PlayerRecord, PositionAssignment
from pyscout.persistence import ScoutStore, StoreError
from pyscout.settings import Settings


GENERAL_ONLY = {
    key: [{"id": "general", "label": "Overall", "weight": 1}]
    for key in ("GK", "CB", "RB", "LB", "DM", "CM", "AM", "W", "F")
}


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client(tmp_path):
    settings = Settings(db_path=tmp_path / "api.sqlite", club_name="Test FC", formation="4-3-3")
    app = create_app(settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        async_client.app = app
        yield async_client


def _roster() -> list[dict]:
    return [
        {"player_id": "p1", "name": "Alpha", "positions": ["CB"], "general_rating": 7.0},
        {"player_id": "p2", "name": "Bravo", "positions": ["CB"], "general_rating": 9.0},
        {"player_id": "g1", "name": "Keeper", "positions": ["GK"], "general_rating": 6.5},
    ]


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_resolve_position(client: AsyncClient):
    resp = await client.get("/positions/resolve", params={"position": "RWB"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["position_key"] == "RB"
    assert body["label"] == "Right Back"
    assert body["known"] is True

    resp = await client.get("/positions/resolve")
    body = resp.json()
    assert body["position_key"] == "CM"
    assert body["known"] is False


@pytest.mark.anyio
async def test_formations(client: AsyncClient):
    resp = await client.get("/formations")
    assert resp.status_code == 200
    names = [item["name"] for item in resp.json()]
    assert "4-3-3" in names

    resp = await client.get("/formations/4-2-3-1")
    assert resp.status_code == 200
    assert len(resp.json()["slots"]) == 11

    resp = await client.get("/formations/2-3-5")
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_weights_default_then_saved(client: AsyncClient):
    resp = await client.get("/clubs/Test FC/weights")
    assert resp.status_code == 200
    body = resp.json()
    assert body["club_name"] == "Test FC"
    assert set(body["weights"]) == set(GENERAL_ONLY)

    resp = await client.put(
        "/clubs/Test FC/weights",
        json={"weights": {"CB": GENERAL_ONLY["CB"]}, "league_adjustments": False},
    )
    assert resp.status_code == 200
    assert resp.json()["updated_at"] is not None

    resp = await client.get("/clubs/Test FC/weights")
    body = resp.json()
    assert list(body["weights"]) == ["CB"]
    assert body["league_adjustments"] is False


@pytest.mark.anyio
async def test_rate_player_with_inline_weights(client: AsyncClient):
    payload = {
        "player": {"player_id": "p1", "name": "Alpha", "positions": ["CM"], "general_rating": 8.0, "potential_rating": 6.0},
        "weights": [
            {"id": "general", "label": "Overall", "weight": 0.7},
            {"id": "potential", "label": "Potential", "weight": 0.3},
        ],
    }
    resp = await client.post("/ratings/player", json=payload)
    assert resp.status_code == 200
    body = resp.json()
    assert body["rating"] == pytest.approx(7.4)
    assert body["display"] == "7.4"
    assert body["position_key"] == "CM"


@pytest.mark.anyio
async def test_rate_player_without_ratings(client: AsyncClient):
    resp = await client.post(
        "/ratings/player",
        json={"player": {"player_id": "p9", "name": "Unknown"}, "position": "ST"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["rating"] is None
    assert body["display"] == "N/A"
    assert body["position_key"] == "F"


@pytest.mark.anyio
async def test_squad_rating_endpoint(client: AsyncClient):
    payload = {
        "assignments": [{"position": "CB1", "player_id": "p1"}, {"position": "CB2", "player_id": "p2"}],
        "roster": _roster(),
        "weights": {"club_name": "Test FC", "weights": GENERAL_ONLY},
    }
    resp = await client.post("/squads/rating", json=payload)
    assert resp.status_code == 200
    rating = resp.json()["rating"]
    assert rating["CentreBackRating"] == 8.0
    assert rating["DefenderRating"] == 8.0
    assert rating["average_starter_rating"] == 8.0
    assert rating["KeeperRating"] == 0.0


@pytest.mark.anyio
async def test_squad_rating_empty_is_null(client: AsyncClient):
    resp = await client.post("/squads/rating", json={"assignments": [], "roster": _roster()})
    assert resp.status_code == 200
    body = resp.json()
    assert body["rating"] is None
    assert body["club_name"] == "Test FC"


@pytest.mark.anyio
async def test_saved_squad_rating(client: AsyncClient):
    store = client.app.state.store
    store.save_players([PlayerRecord.model_validate(item) for item in _roster()])
    store.save_squad(
        squad_id="first",
        club_name="Test FC",
        name="First XI",
        formation="4-3-3",
        assignments=[
            PositionAssignment(position="GK", player_id="g1"),
            PositionAssignment(position="CB1", player_id="p1"),
        ],
    )
    resp = await client.put("/clubs/Test FC/weights", json={"weights": GENERAL_ONLY})
    assert resp.status_code == 200

    resp = await client.get("/clubs/Test FC/squads/first/rating")
    assert resp.status_code == 200
    body = resp.json()
    assert body["squad_id"] == "first"
    assert body["rating"]["KeeperRating"] == 6.5
    assert body["rating"]["CentreBackRating"] == 7.0
    assert body["rating"]["average_starter_rating"] == pytest.approx(6.8)

    resp = await client.get("/clubs/Other FC/squads/first/rating")
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_lineup_endpoint(client: AsyncClient):
    payload = {
        "roster": _roster(),
        "assignments": [{"position": "CB2", "player_id": "p2"}],
        "club_name": "Test FC",
        "max_alternates": 2,
    }
    resp = await client.post("/squads/lineup", json=payload)
    assert resp.status_code == 200
    body = resp.json()
    assert body["formation"] == "4-3-3"
    slots = {slot["slot"]: slot for slot in body["slots"]}
    assert slots["CB2"]["active_player_id"] == "p2"
    assert slots["CB1"]["active_player_id"] == "p1"
    assert slots["GK"]["active_player_id"] == "g1"
    assert slots["ST"]["active_player_id"] is None

    resp = await client.post("/squads/lineup", json={**payload, "formation": "2-3-5"})
    assert resp.status_code == 404


class _BrokenWeightsStore(ScoutStore):
    def fetch_weights(self, club_name: str) -> ClubRatingWeights:
        raise StoreError("database is locked")


@pytest.mark.anyio
async def test_store_failure_returns_503(tmp_path):
    settings = Settings(db_path=tmp_path / "api.sqlite", club_name="Test FC", formation="4-3-3")
    app = create_app(settings, store=_BrokenWeightsStore(settings.db_path))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        resp = await client.get("/clubs/Test FC/weights")
    assert resp.status_code == 503
    assert resp.json() == {"detail": "Rating store unavailable"}
