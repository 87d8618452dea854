"""
Tests for symptom classifier endpoints.
"""

from fastapi.testclient import TestClient


def test_analyze_requires_auth(test_client: TestClient):
    """Test analyze endpoint requires API key."""
    response = test_client.post("/api/v1/symptoms/analyze", json={"message": "headache"})

    assert response.status_code == 401


def test_invalid_api_key(test_client: TestClient):
    """Test endpoint rejects invalid API key."""
    headers = {"X-API-Key": "invalid-key"}
    response = test_client.post("/api/v1/symptoms/analyze", json={"message": "headache"}, headers=headers)

    assert response.status_code == 403


def test_analyze(test_client: TestClient, api_key_headers: dict):
    response = test_client.post(
        "/api/v1/symptoms/analyze",
        json={"message": "I have a headache and feel dizzy"},
        headers=api_key_headers
    )

    assert response.status_code == 200
    data = response.json()

    assert data["recognized_symptoms"] == ["headache", "dizziness"]
    assert data["is_emergency"] is False
    assert "Vertigo" in data["possible_conditions"]
    assert data["triggered_rules"] == []


def test_analyze_rejects_blank_message(test_client: TestClient, api_key_headers: dict):
    response = test_client.post("/api/v1/symptoms/analyze", json={"message": "   "}, headers=api_key_headers)

    assert response.status_code == 400


def test_analyze_rejects_oversized_message(test_client: TestClient, api_key_headers: dict):
    response = test_client.post(
        "/api/v1/symptoms/analyze",
        json={"message": "a" * 5001},
        headers=api_key_headers
    )

    assert response.status_code == 400


def test_analyze_missing_body_field(test_client: TestClient, api_key_headers: dict):
    response = test_client.post("/api/v1/symptoms/analyze", json={}, headers=api_key_headers)

    assert response.status_code == 422


def test_process_non_symptom_message(test_client: TestClient, api_key_headers: dict):
    response = test_client.post(
        "/api/v1/symptoms/process",
        json={"message": "xyz completely unrelated gibberish"},
        headers=api_key_headers
    )

    assert response.status_code == 200
    assert response.json() == {"is_symptom_question": False}


def test_process_emergency_message(test_client: TestClient, api_key_headers: dict):
    response = test_client.post(
        "/api/v1/symptoms/process",
        json={"message": "I'm having severe chest pain and shortness of breath"},
        headers=api_key_headers
    )

    assert response.status_code == 200
    data = response.json()

    assert data["is_symptom_question"] is True
    assert data["is_emergency"] is True
    assert data["recognized_symptoms"] == ["chest pain", "shortness of breath"]
    assert "EMERGENCY SERVICES (999)" in data["response"]


def test_process_with_generic_locale(test_client: TestClient, api_key_headers: dict):
    response = test_client.post(
        "/api/v1/symptoms/process",
        json={"message": "I have a sore throat", "locale": "generic"},
        headers=api_key_headers
    )

    assert response.status_code == 200
    assert "Bangladesh" not in response.json()["response"]


def test_format(test_client: TestClient, api_key_headers: dict):
    analysis = {
        "recognized_symptoms": ["rash"],
        "possible_conditions": ["Eczema"],
        "follow_up_advice": ["Keep the skin moisturized."],
        "is_emergency": False
    }

    response = test_client.post("/api/v1/symptoms/format", json=analysis, headers=api_key_headers)

    assert response.status_code == 200
    text = response.json()["response"]
    assert text.startswith("I've identified these symptoms: rash.")
    assert "• Eczema\n" in text
    assert "• Keep the skin moisturized.\n" in text
