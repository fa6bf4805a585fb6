"""
Flask API tests against a temp save DB.
"""
import pytest

import db.schema as schema
from app import app


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(schema, "get_db_path", lambda: tmp_path / "app_test.db")
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def _create(client, **overrides):
    body = {"name": "Jo Park", "position": "CM", "nationality": "Spain", "seed": 7}
    body.update(overrides)
    return client.post("/api/career", json=body)


def test_create_and_fetch_career(client):
    resp = _create(client)
    assert resp.status_code == 201
    data = resp.get_json()
    assert data["player"]["name"] == "Jo Park"
    assert data["player"]["age"] == 16
    assert data["player"]["team"]["is_youth"]
    assert len(data["history"]) == 1

    again = client.get("/api/career")
    assert again.status_code == 200
    assert again.get_json()["player"]["name"] == "Jo Park"


def test_same_seed_same_world(client):
    a = _create(client, slot="a").get_json()
    b = _create(client, slot="b").get_json()
    assert a["player"]["team"] == b["player"]["team"]
    assert a["player"]["potential"] == b["player"]["potential"]


def test_invalid_creation_is_rejected(client):
    assert _create(client, position="XX").status_code == 400
    assert _create(client, name="   ").status_code == 400
    assert _create(client, team="Nowhere FC").status_code == 400


def test_no_career_is_not_found(client):
    resp = client.get("/api/career")
    assert resp.status_code == 404
    assert "error" in resp.get_json()


def test_training_selection_over_slot_limit_rejected(client):
    _create(client)
    resp = client.post("/api/career/training", json={"focuses": ["balanced", "scrimmage", "gym", "agility", "flexibility", "sprints"]})
    assert resp.status_code == 400
    ok = client.post("/api/career/training", json={"focuses": ["scrimmage"], "intensity": "high"})
    assert ok.status_code == 200
    assert ok.get_json()["player"]["training_focuses"] == ["scrimmage"]


def test_tactic_and_mode(client):
    _create(client)
    assert client.post("/api/career/tactic", json={"tactic": "Possession"}).status_code == 200
    assert client.get("/api/career").get_json()["tactic"] == "Possession"
    assert client.post("/api/career/tactic", json={"tactic": "Chaos"}).status_code == 400
    assert client.post("/api/career/mode", json={"career_mode": "dynamic"}).status_code == 200
    assert client.post("/api/career/mode", json={"career_mode": "idle"}).status_code == 400


def test_next_season_advances(client):
    _create(client)
    resp = client.post("/api/season/next")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["player"]["current_season"] == 2
    assert len(data["history"]) == 2
    assert data["season"]["season"] == 1


def test_offer_index_out_of_range(client):
    _create(client)
    assert client.post("/api/offers/5/accept").status_code == 404


def test_leaderboard_and_index(client):
    _create(client)
    assert client.get("/api/leaderboard").get_json() == {"entries": []}
    index = client.get("/").get_json()
    assert [c["slot"] for c in index["careers"]] == ["default"]
    assert "England" in index["countries"]
