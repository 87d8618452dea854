"""API routes for the Symptom Triage Engine."""

from fastapi import APIRouter

from symptom_engine.api.v1 import chat, health, symptoms

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(symptoms.router, tags=["symptoms"])
api_router.include_router(chat.router, tags=["chat"])

__all__ = ["api_router"]
