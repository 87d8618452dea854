"""Pydantic schemas for request/response validation."""

from symptom_engine.schemas.common import (
    ErrorResponse,
    HealthResponse,
)
from symptom_engine.schemas.symptoms import (
    AnalysisResult,
    FormattedResponse,
    SeverityLevel,
    SymptomMessageRequest,
    SymptomMessageResult,
)
from symptom_engine.schemas.chat import (
    ChatReply,
    ChatRequest,
    ChatTurn,
    ReplySource,
)

__all__ = [
    # Common
    "ErrorResponse",
    "HealthResponse",
    # Symptoms
    "AnalysisResult",
    "FormattedResponse",
    "SeverityLevel",
    "SymptomMessageRequest",
    "SymptomMessageResult",
    # Chat
    "ChatReply",
    "ChatRequest",
    "ChatTurn",
    "ReplySource",
]
