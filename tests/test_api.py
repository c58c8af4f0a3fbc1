from __future__ import annotations

from fastapi.testclient import TestClient

from storefinder.core.config import settings
from storefinder.main import app

client = TestClient(app)


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_list_stores_without_filters_returns_everything(stores_file):
    resp = client.get("/api/stores")
    assert resp.status_code == 200

    data = resp.json()
    assert [s["name"] for s in data] == [
        "Mama Africa Market",
        "Golden Lotus",
        "Joe's Deli",
        "Bazaar Halal Meats",
    ]
    # Stores come back with exactly their source fields.
    assert "description" not in data[2]
    assert data[3]["phone"] == "555-0101"


def test_list_stores_applies_category_filters(stores_file):
    resp = client.get("/api/stores", params={"culture": "Asian", "dietary": "halal"})
    assert resp.status_code == 200
    assert [s["name"] for s in resp.json()] == ["Bazaar Halal Meats"]


def test_list_stores_culture_values_are_anded(stores_file):
    resp = client.get("/api/stores", params={"culture": "african,asian"})
    assert resp.status_code == 200
    assert resp.json() == []


def test_list_stores_search(stores_file):
    resp = client.get("/api/stores", params={"search": "KOSHER"})
    assert resp.status_code == 200
    assert [s["name"] for s in resp.json()] == ["Joe's Deli"]


def test_empty_params_do_not_filter(stores_file):
    resp = client.get("/api/stores", params={"culture": "", "search": ""})
    assert resp.status_code == 200
    assert len(resp.json()) == 4


def test_response_headers(stores_file):
    resp = client.get("/api/stores")
    assert "X-Request-ID" in resp.headers
    assert "X-Process-Time" in resp.headers


def test_missing_store_file_returns_500(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "STORES_PATH", tmp_path / "missing.json")

    resp = client.get("/api/stores")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to load store data."}


def test_malformed_store_file_returns_500(tmp_path, monkeypatch):
    path = tmp_path / "stores.json"
    path.write_text("{oops", encoding="utf-8")
    monkeypatch.setattr(settings, "STORES_PATH", path)

    resp = client.get("/api/stores")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Invalid store data format."}


def test_meta_tags(stores_file):
    resp = client.get("/api/meta/tags")
    assert resp.status_code == 200

    data = resp.json()
    assert data["total_stores"] == 4
    assert "Halal" in data["tags"]


def test_health_ready_reports_store_data(stores_file):
    resp = client.get("/health/ready")
    assert resp.status_code == 200

    data = resp.json()
    assert data["status"] == "ready"
    assert data["dependencies"]["store_data"]["status"] == "ok"


def test_health_ready_not_ready_without_data(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "STORES_PATH", tmp_path / "missing.json")

    data = client.get("/health/ready").json()
    assert data["status"] == "not_ready"
    assert data["dependencies"]["store_data"]["status"] == "error"


def test_list_stores_search_by_name(stores_file):
    resp = client.get("/api/stores", params={"search": "lotus"})
    assert resp.status_code == 200
    assert [s["name"] for s in resp.json()] == ["Golden Lotus"]


def test_stores_keep_source_key_order(tmp_path, monkeypatch):
    path = tmp_path / "stores.json"
    path.write_text(
        '[{"tags": ["Halal"], "zip": "11201", "name": "A", "address": "B"}]',
        encoding="utf-8",
    )
    monkeypatch.setattr(settings, "STORES_PATH", path)

    resp = client.get("/api/stores")
    assert resp.status_code == 200
    assert list(resp.json()[0]) == ["tags", "zip", "name", "address"]


def test_openapi_documents_error_body():
    schema = client.get("/openapi.json").json()

    for path in ("/api/stores", "/api/meta/tags"):
        error = schema["paths"][path]["get"]["responses"]["500"]
        assert error["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
