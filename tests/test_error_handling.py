"""
Tests for the app shell: health routes, middleware headers and the error envelope.
"""

import httpx
from fastapi.testclient import TestClient

from adapters import usda_adapter
from adapters.usda_adapter import UsdaClient
from app.config import settings
from main import app, create_app
from services.store_service import StoreService
from test_fixtures import API, assert_error, client, register_user
from usda_payloads import RICE_SEARCH_HIT


def test_health_check():
    response = client.get(f"{API}/")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["message"] == "SmartBite API is running successfully"
    assert "timestamp" in body


def test_version():
    response = client.get(f"{API}/version")
    assert response.status_code == 200
    assert response.json()["version"] == "1.0.0"
    assert response.json()["name"] == "SmartBite API"


def test_request_id_and_timing_headers():
    response = client.get(f"{API}/version")
    assert len(response.headers["X-Request-ID"]) == 36
    assert float(response.headers["X-Process-Time"]) >= 0


def test_request_ids_are_unique():
    first = client.get(f"{API}/").headers["X-Request-ID"]
    second = client.get(f"{API}/").headers["X-Request-ID"]
    assert first != second


def test_validation_errors_are_400_with_details():
    response = client.post(f"{API}/auth/register", json={"email": "not-an-email"})
    error = assert_error(response, 400, "VALIDATION_ERROR")
    assert error["message"] == "Request validation failed"
    locations = [tuple(item["loc"]) for item in error["details"]]
    assert ("body", "email") in locations
    assert ("body", "password") in locations


def test_malformed_uuid_path_is_validation_error():
    headers, _ = register_user()
    response = client.get(f"{API}/meal-plans/not-a-uuid", headers=headers)
    assert_error(response, 400, "VALIDATION_ERROR")


def test_unknown_route_uses_envelope():
    response = client.get(f"{API}/does-not-exist")
    error = assert_error(response, 404, "HTTP_404")
    assert error["message"] == "Not Found"


def test_method_not_allowed_uses_envelope():
    response = client.delete(f"{API}/version")
    assert_error(response, 405, "HTTP_405")


def test_missing_token():
    response = client.get(f"{API}/users/me")
    assert_error(response, 401, "MISSING_TOKEN")


def test_unexpected_error_is_500(monkeypatch):
    def explode(db, active_only=False):
        raise RuntimeError("database exploded")

    monkeypatch.setattr(StoreService, "list_stores", staticmethod(explode))
    safe_client = TestClient(app, raise_server_exceptions=False)

    response = safe_client.get(f"{API}/stores")

    error = assert_error(response, 500, "INTERNAL_SERVER_ERROR")
    assert error["message"] == "An unexpected error occurred"
    assert "exploded" not in response.text


def test_database_disabled_serves_only_health_and_food_analysis(monkeypatch):
    monkeypatch.setattr(settings, "db_enabled", False)
    usda_adapter.set_client(
        UsdaClient(
            api_key="test-key",
            http_client=httpx.Client(
                transport=httpx.MockTransport(
                    lambda request: httpx.Response(200, json={"foods": [RICE_SEARCH_HIT]})
                )
            ),
        )
    )
    no_db_client = TestClient(create_app())

    assert no_db_client.get(f"{API}/").status_code == 200
    login = no_db_client.post(
        f"{API}/auth/login", json={"email": "sarah@example.com", "password": "x"}
    )
    assert_error(login, 404, "HTTP_404")
    for path in ("/foods", "/stores", "/meal-plans", "/users/me"):
        assert_error(no_db_client.get(f"{API}{path}"), 404, "HTTP_404")

    r = no_db_client.post(f"{API}/food-analysis/full-pipeline", json={"dishName": "rice"})
    assert r.status_code == 200, r.text
    assert r.json()["source"] == "usda"
