"""API v1 routes."""

from symptom_engine.api.v1 import chat, health, symptoms

__all__ = ["chat", "health", "symptoms"]
