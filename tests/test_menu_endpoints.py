"""
Tests for the menu generation endpoint.

POST /api/menu/generate
    {"proteinDistribution": {"Chicken": 2, "Beef": 1}, "days": 7, "startDate": "2025-09-01"}

Response: 200 OK, a JSON list of meals (camelCase fields).
Quota or day-count problems come back as 400 with the standard error envelope;
a catalog outage comes back as 503.
"""

from collections import Counter

from test_fixtures import client, make_meal, db_session, seeded_session, api_db
from services.menu_service import MenuService
from app.exceptions import CatalogUnavailableError


def test_generate_menu_passes_request_to_service(monkeypatch):
    captured = {}

    def fake_generate(catalog, protein_distribution, days):
        captured["distribution"] = protein_distribution
        captured["days"] = days
        return [make_meal(3, "Beef Bulgogi", "Beef", cook_time="35 min")]

    monkeypatch.setattr(MenuService, "generate_menu", fake_generate)

    r = client.post(
        "/api/menu/generate",
        json={
            "proteinDistribution": {"Beef": 1},
            "days": 5,
            "startDate": "2025-09-01",
        },
    )

    assert r.status_code == 200
    assert captured == {"distribution": {"Beef": 1}, "days": 5}
    body = r.json()
    assert body[0]["id"] == 3
    assert body[0]["cookTime"] == "35 min"
    assert body[0]["cookMethod"] == "Skillet"


def test_generate_menu_defaults_days_to_none(monkeypatch):
    captured = {}

    def fake_generate(catalog, protein_distribution, days):
        captured["days"] = days
        return []

    monkeypatch.setattr(MenuService, "generate_menu", fake_generate)

    r = client.post("/api/menu/generate", json={})

    assert r.status_code == 200
    assert r.json() == []
    assert captured["days"] is None


def test_generate_menu_quota_exceeded_returns_400():
    r = client.post(
        "/api/menu/generate",
        json={"proteinDistribution": {"Chicken": 5, "Beef": 3}, "days": 7},
    )

    assert r.status_code == 400
    error = r.json()["error"]
    assert error["code"] == "QUOTA_EXCEEDED"
    assert "cannot exceed 7" in error["message"]
    assert "8" in error["message"]
    assert error["details"] == {"total": 8, "max_total": 7}


def test_generate_menu_invalid_days_returns_400():
    r = client.post("/api/menu/generate", json={"days": 0})

    assert r.status_code == 400
    assert r.json()["error"]["code"] == "INVALID_DAYS"


def test_generate_menu_rejects_non_integer_counts():
    r = client.post(
        "/api/menu/generate", json={"proteinDistribution": {"Chicken": "lots"}}
    )

    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_generate_menu_catalog_unavailable_returns_503(monkeypatch):
    def fake_generate(catalog, protein_distribution, days):
        raise CatalogUnavailableError("connection refused")

    monkeypatch.setattr(MenuService, "generate_menu", fake_generate)

    r = client.post("/api/menu/generate", json={"days": 7})

    assert r.status_code == 503
    assert r.json()["error"]["code"] == "CATALOG_UNAVAILABLE"


# =============================================================================
# END-TO-END AGAINST SQLITE
# =============================================================================


def test_generate_menu_against_database(api_db):
    r = client.post(
        "/api/menu/generate",
        json={"proteinDistribution": {"Chicken": 3, "Fish": 2}, "days": 5},
    )

    assert r.status_code == 200
    menu = r.json()
    assert len(menu) == 5
    assert len({m["id"] for m in menu}) == 5
    assert Counter(m["protein"] for m in menu) == {"Chicken": 3, "Fish": 2}


def test_generate_menu_small_request_against_database(api_db):
    r = client.post("/api/menu/generate", json={"days": 20})

    assert r.status_code == 200
    # Catalog holds 12 meals
    assert len(r.json()) == 12
