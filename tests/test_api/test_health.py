"""
Tests for health and monitoring endpoints.
"""

from fastapi.testclient import TestClient


def test_health_check(test_client: TestClient):
    """Test health endpoint returns correct structure."""
    response = test_client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()

    assert data["status"] == "healthy"
    assert data["service"] == "Symptom Triage Engine"
    assert data["locale"] == "bd"
    assert data["ai_responder"] is False
    assert "version" in data


def test_root_endpoint(test_client: TestClient):
    """Test root endpoint returns service info."""
    response = test_client.get("/")

    assert response.status_code == 200
    data = response.json()

    assert "service" in data
    assert data["health"] == "/api/v1/health"


def test_metrics_endpoint(test_client: TestClient, api_key_headers: dict):
    """Test Prometheus metrics include classifier counters."""
    test_client.post(
        "/api/v1/symptoms/analyze",
        json={"message": "I have a rash"},
        headers=api_key_headers
    )

    response = test_client.get("/api/v1/metrics")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "symptom_analyses_total" in response.text


def test_timing_header(test_client: TestClient):
    response = test_client.get("/api/v1/health")

    assert "X-Process-Time" in response.headers
