"""
Tests for the chat endpoint.
"""

from fastapi.testclient import TestClient


def test_chat_requires_auth(test_client: TestClient):
    response = test_client.post("/api/v1/chat/message", json={"message": "hello"})

    assert response.status_code == 401


def test_chat_symptom_message(client_with_fake_responder: TestClient, api_key_headers: dict):
    response = client_with_fake_responder.post(
        "/api/v1/chat/message",
        json={"message": "I have a fever and a cough"},
        headers=api_key_headers
    )

    assert response.status_code == 200
    data = response.json()

    assert data["source"] == "symptom_analyzer"
    assert data["is_emergency"] is False
    assert "fever, cough" in data["response"]


def test_chat_general_question(client_with_fake_responder: TestClient, api_key_headers: dict, fake_responder):
    response = client_with_fake_responder.post(
        "/api/v1/chat/message",
        json={
            "message": "What vitamins help with healthy skin",
            "history": [{"sender": "user", "text": "Hi"}, {"sender": "bot", "text": "Hello!"}]
        },
        headers=api_key_headers
    )

    assert response.status_code == 200
    data = response.json()

    assert data == {"response": "Drink plenty of water.", "is_emergency": False, "source": "ai_responder"}
    assert [turn.text for turn in fake_responder.calls[0]["history"]] == ["Hi", "Hello!"]


def test_chat_emergency_gate(client_with_fake_responder: TestClient, api_key_headers: dict):
    response = client_with_fake_responder.post(
        "/api/v1/chat/message",
        json={"message": "I think he took an overdose"},
        headers=api_key_headers
    )

    assert response.status_code == 200
    data = response.json()

    assert data["source"] == "emergency_gate"
    assert data["is_emergency"] is True


def test_chat_rejects_bad_sender(test_client: TestClient, api_key_headers: dict):
    response = test_client.post(
        "/api/v1/chat/message",
        json={"message": "hello", "history": [{"sender": "system", "text": "x"}]},
        headers=api_key_headers
    )

    assert response.status_code == 422
