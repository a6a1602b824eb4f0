"""Tests for the /api endpoints."""

import pytest
from fastapi.testclient import TestClient

from skill_prestige.app import create_app
from skill_prestige.demo import create_demo_data
from skill_prestige.storage import Storage


@pytest.fixture
def client(storage: Storage) -> TestClient:
    create_demo_data(storage)
    return TestClient(create_app(storage.base_path))


def test_health(client: TestClient):
    assert client.get("/api/health").json() == {"status": "ok"}


# ── Settings ─────────────────────────────────────────────────


def test_settings_defaults(client: TestClient):
    body = client.get("/api/settings").json()
    assert body == {
        "tier_one_cost": 1,
        "tier_two_cost": 2,
        "points_per_reset": 1,
        "experience_cost_per_reset": 15000,
    }


def test_settings_partial_update(client: TestClient):
    resp = client.patch("/api/settings", json={"tier_two_cost": 5})
    assert resp.status_code == 200
    assert resp.json()["tier_two_cost"] == 5
    assert client.get("/api/settings").json()["tier_one_cost"] == 1


def test_settings_invalid_value(client: TestClient):
    resp = client.patch("/api/settings", json={"points_per_reset": 0})
    assert resp.status_code == 422
    assert client.get("/api/settings").json()["points_per_reset"] == 1


# ── Prestige records ─────────────────────────────────────────


def test_list_prestiges(client: TestClient):
    body = client.get("/api/prestiges").json()
    assert [p["skill"] for p in body["prestiges"]] == [
        "Combat", "Farming", "Fishing", "Foraging", "Mining",
    ]
    assert all(p["points"] == 0 for p in body["prestiges"])


def test_get_prestige_unknown_skill(client: TestClient):
    assert client.get("/api/prestiges/Luck").status_code == 404


# ── Reset and purchase ───────────────────────────────────────


def test_reset_then_purchase(client: TestClient):
    resp = client.post("/api/skills/Mining/reset")
    assert resp.status_code == 200
    assert resp.json()["outcome"] == "ok"
    assert client.get("/api/prestiges/Mining").json()["points"] == 1

    resp = client.post("/api/professions/19/purchase")
    assert resp.status_code == 200
    body = resp.json()
    assert body["outcome"] == "success"
    assert body["skill"] == "Mining"
    assert body["points"] == 0

    record = client.get("/api/prestiges/Mining").json()
    assert record["purchased_professions"] == [19]
    assert 19 in client.get("/api/player").json()["professions"]


def test_reset_removes_recipes(client: TestClient):
    client.post("/api/skills/Fishing/reset")
    record = client.get("/api/prestiges/Fishing").json()
    assert record["saved_crafting_recipe_counts"] == {"Bait": 40}
    assert record["saved_cooking_recipe_counts"] == {"Sashimi": 0}
    player = client.get("/api/player").json()
    assert "Bait" not in player["crafting_recipes"]
    assert player["experience"]["Fishing"] == 0


def test_reset_unknown_skill(client: TestClient):
    assert client.post("/api/skills/Luck/reset").status_code == 404


def test_purchase_without_points(client: TestClient):
    resp = client.post("/api/professions/0/purchase")
    assert resp.status_code == 409
    assert resp.json()["outcome"] == "insufficient_points"
    assert client.get("/api/prestiges/Farming").json()["points"] == 0


def test_purchase_twice(client: TestClient):
    client.post("/api/skills/Farming/reset")
    client.post("/api/skills/Farming/reset")
    assert client.post("/api/professions/0/purchase").status_code == 200
    resp = client.post("/api/professions/0/purchase")
    assert resp.status_code == 409
    assert resp.json()["outcome"] == "already_purchased"
    assert client.get("/api/prestiges/Farming").json()["points"] == 1


def test_purchase_unknown_profession(client: TestClient):
    resp = client.post("/api/professions/99/purchase")
    assert resp.status_code == 422
    assert resp.json()["outcome"] == "profession_lookup_error"
