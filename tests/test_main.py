"""Tests for main API endpoints."""

from fastapi.testclient import TestClient


def test_root_endpoint(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"name": "flashdeck API", "version": "0.1.0"}


def test_health_endpoint(client: TestClient) -> None:
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_settings_endpoint_exposes_feature_flags(client: TestClient) -> None:
    """Public settings report AI as enabled when a provider is configured."""
    response = client.get("/api/v1/settings")
    assert response.status_code == 200
    assert response.json() == {"feature_flags": {"ai": True}}


def test_invalid_token_is_rejected(client: TestClient) -> None:
    response = client.get("/api/v1/decks", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Could not validate credentials"
