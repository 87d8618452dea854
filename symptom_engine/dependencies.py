"""
FastAPI dependency injection utilities.
"""

from symptom_engine.core.auth import verify_api_key
from symptom_engine.services.gemini_client import GeminiClient, close_gemini_client, get_gemini_client
from symptom_engine.services.medical_chat import MedicalChatService, get_medical_chat_service
from symptom_engine.services.symptom_classifier import SymptomClassifier, get_symptom_classifier


def get_classifier() -> SymptomClassifier:
    """Get symptom classifier instance."""
    return get_symptom_classifier()


def get_chat_service() -> MedicalChatService:
    """Get medical chat service instance."""
    return get_medical_chat_service()


def get_ai_responder() -> GeminiClient:
    """Get AI responder client."""
    return get_gemini_client()


__all__ = [
    "verify_api_key",
    "get_classifier",
    "get_chat_service",
    "get_ai_responder",
    "close_gemini_client",
]
