"""
Chat routing schemas.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class ReplySource(str, Enum):
    """Which branch of the chat router produced the reply."""
    SYMPTOM_ANALYZER = "symptom_analyzer"
    EMERGENCY_GATE = "emergency_gate"
    NON_MEDICAL = "non_medical"
    AI_RESPONDER = "ai_responder"
    AI_ERROR = "ai_error"


class ChatTurn(BaseModel):
    """One earlier message in the conversation."""

    sender: Literal["user", "bot"]
    text: str


class ChatRequest(BaseModel):
    """Incoming chat message with optional prior turns."""

    message: str = Field(..., description="Latest user message")
    history: list[ChatTurn] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "message": "How much water should I drink in a day?",
                "history": [
                    {"sender": "user", "text": "Hi"},
                    {"sender": "bot", "text": "Hello! How can I help with your health today?"}
                ]
            }
        }


class ChatReply(BaseModel):
    """Reply produced by the chat router."""

    response: str
    is_emergency: bool = False
    source: ReplySource
