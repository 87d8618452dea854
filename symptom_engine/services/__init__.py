"""Services for the Symptom Triage Engine."""

from symptom_engine.services.gemini_client import AIResponderError, GeminiClient
from symptom_engine.services.medical_chat import MedicalChatService
from symptom_engine.services.symptom_classifier import SymptomClassifier

__all__ = [
    "AIResponderError",
    "GeminiClient",
    "MedicalChatService",
    "SymptomClassifier",
]
