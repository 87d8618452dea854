"""
Pytest fixtures for Symptom Triage Engine tests.
"""

from typing import Sequence

import pytest
from fastapi.testclient import TestClient

# Set environment variables before imports
import os
os.environ["API_KEY"] = "test-api-key-12345"
os.environ["DEBUG"] = "true"
os.environ["DEFAULT_LOCALE"] = "bd"
os.environ["RATE_LIMIT_REQUESTS"] = "1000"
os.environ.pop("GEMINI_API_KEY", None)

from symptom_engine.main import app
from symptom_engine.dependencies import get_chat_service
from symptom_engine.schemas.chat import ChatTurn
from symptom_engine.services.gemini_client import AIResponderError
from symptom_engine.services.medical_chat import MedicalChatService
from symptom_engine.services.symptom_classifier import SymptomClassifier


class FakeResponder:
    """AI responder double that records calls."""

    def __init__(self, answer: str = "Drink plenty of water.", error: bool = False):
        self.answer = answer
        self.error = error
        self.calls: list[dict] = []

    async def generate(self, prompt: str, system_context: str, history: Sequence[ChatTurn] = ()) -> str:
        self.calls.append({"prompt": prompt, "system_context": system_context, "history": list(history)})
        if self.error:
            raise AIResponderError("API key not configured. Please add your Gemini API key.")
        return self.answer


@pytest.fixture
def test_client():
    """Create synchronous test client."""
    return TestClient(app)


@pytest.fixture
def api_key_headers():
    """Headers with valid API key."""
    return {"X-API-Key": "test-api-key-12345"}


@pytest.fixture
def classifier() -> SymptomClassifier:
    """Classifier with the Bangladesh advisory locale."""
    return SymptomClassifier(default_locale="bd")


@pytest.fixture
def make_responder():
    """Factory for AI responder doubles."""
    return FakeResponder


@pytest.fixture
def fake_responder() -> FakeResponder:
    return FakeResponder()


@pytest.fixture
def chat_service(classifier: SymptomClassifier, fake_responder: FakeResponder) -> MedicalChatService:
    return MedicalChatService(classifier=classifier, responder=fake_responder, history_limit=4)


@pytest.fixture
def client_with_fake_responder(chat_service: MedicalChatService):
    """Test client whose chat endpoint uses the fake responder."""
    app.dependency_overrides[get_chat_service] = lambda: chat_service
    yield TestClient(app)
    app.dependency_overrides.pop(get_chat_service, None)
