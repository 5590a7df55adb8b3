"""
Tests for the units API.
"""


def test_ready(client):
    response = client.get("/api/ready")
    assert response.status_code == 200
    assert response.json()["ok"] is True


def test_list_units(client):
    response = client.get("/api/units")
    assert response.status_code == 200
    categories = response.json()["categories"]
    assert [c["category"] for c in categories] == ["Mass", "Weight", "Volume", "Piece"]
    assert categories[2]["units"][4] == {"value": "fl oz", "label": "fluid ounce"}


def test_list_category_units(client):
    response = client.get("/api/units/categories/volume")
    assert response.status_code == 200
    assert len(response.json()) == 9

    response = client.get("/api/units/categories/Temperature")
    assert response.status_code == 404


def test_target_units(client):
    response = client.get("/api/units/g/targets")
    assert response.status_code == 200
    assert [u["value"] for u in response.json()] == ["mg", "g", "kg", "oz", "lb"]

    response = client.get("/api/units/fl oz/targets")
    assert response.status_code == 200
    assert "cup" in [u["value"] for u in response.json()]

    response = client.get("/api/units/glarps/targets")
    assert response.status_code == 400


def test_convert(client):
    response = client.post("/api/units/convert", json={
        "value": 1,
        "unit": "tbsp",
        "to_unit": "tsp"
    })
    assert response.status_code == 200
    data = response.json()
    assert abs(data["value"] - 3.0) < 1e-9
    assert data["unit"] == "tsp"
    assert data["label"] == "teaspoon"
    assert data["display"] == "3 teaspoons"


def test_convert_weight_to_mass(client):
    response = client.post("/api/units/convert", json={
        "value": 1,
        "unit": "lb",
        "to_unit": "g",
        "locale": "de-DE"
    })
    assert response.status_code == 200
    data = response.json()
    assert abs(data["value"] - 453.59237) < 1e-6
    assert data["display"] == "453,6 g"


def test_convert_incompatible(client):
    response = client.post("/api/units/convert", json={
        "value": 1,
        "unit": "cup",
        "to_unit": "oz"
    })
    assert response.status_code == 400
    assert "incompatible" in response.json()["detail"]


def test_convert_unknown_unit(client):
    response = client.post("/api/units/convert", json={
        "value": 10,
        "unit": "glarps",
        "to_unit": "g"
    })
    assert response.status_code == 400
    assert "glarps" in response.json()["detail"]


def test_format(client):
    response = client.post("/api/units/format", json={"value": 0.25, "unit": "cup"})
    assert response.status_code == 200
    assert response.json()["text"] == "1/4 cup"

    response = client.post("/api/units/format", json={"value": 7})
    assert response.json()["text"] == "7"

    response = client.post("/api/units/format", json={
        "value": 1.5,
        "unit": "l",
        "locale": "de-DE"
    })
    assert response.json()["text"] == "1,5 ℓ"


def test_format_rejects_bad_digits(client):
    response = client.post("/api/units/format", json={"value": 1, "significant_digits": 0})
    assert response.status_code == 422


def test_quick_reference(client):
    response = client.get("/api/units/quick-reference")
    assert response.status_code == 200
    lines = response.json()["lines"]
    assert lines[0] == "1 tsp ≈ 5 ml"
    assert len(lines) == 7


def test_convert_overflow_is_rejected(client):
    response = client.post("/api/units/convert", json={
        "value": 1e308,
        "unit": "gal",
        "to_unit": "ml"
    })
    assert response.status_code == 400
    assert "finite" in response.json()["detail"]


def test_rate_limit_is_enforced(monkeypatch):
    from fastapi.testclient import TestClient
    from recipebook.main import create_app
    from recipebook.settings import settings

    monkeypatch.setattr(settings, "rate_limit", "3/minute")
    with TestClient(create_app()) as limited:
        codes = [limited.get("/api/units/quick-reference").status_code for _ in range(4)]
    assert codes == [200, 200, 200, 429]
