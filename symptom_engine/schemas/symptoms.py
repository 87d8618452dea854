"""
Symptom classifier schemas.

The analysis result is a value object: built fresh per call and owned by the
caller. Request models carry the raw chat message untouched; the classifier
does its own normalization.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SeverityLevel(str, Enum):
    """Severity attached to each known symptom."""
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class AnalysisResult(BaseModel):
    """Structured verdict for a single message."""

    recognized_symptoms: list[str] = Field(
        default_factory=list,
        description="Matched symptom keys, in symptom table order"
    )
    possible_conditions: list[str] = Field(
        default_factory=list,
        description="Condition names ranked by how many recognized symptoms list them"
    )
    follow_up_advice: list[str] = Field(
        default_factory=list,
        description="Unique advice strings in discovery order"
    )
    is_emergency: bool = Field(default=False)
    triggered_rules: list[str] = Field(
        default_factory=list,
        description="Combination rules that fired"
    )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "recognized_symptoms": ["headache", "dizziness"],
                "possible_conditions": ["Dehydration", "Stress", "Tension headache", "Vertigo"],
                "follow_up_advice": [
                    "If headaches persist for more than a few days or are accompanied by fever, seek medical attention."
                ],
                "is_emergency": False,
                "triggered_rules": []
            }
        }


class SymptomMessageRequest(BaseModel):
    """A chat message to run through the symptom classifier."""

    message: str = Field(..., description="Raw user message")
    locale: Optional[str] = Field(
        default=None,
        description="Advisory locale (defaults to the configured one)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "message": "I have a headache and feel dizzy",
                "locale": "bd"
            }
        }


class SymptomMessageResult(BaseModel):
    """
    Outcome of processing one message.

    Only ``is_symptom_question`` is set when the message is not about
    symptoms; the caller should route it elsewhere.
    """

    is_symptom_question: bool
    is_emergency: Optional[bool] = None
    recognized_symptoms: Optional[list[str]] = None
    response: Optional[str] = None


class FormattedResponse(BaseModel):
    """Rendered advisory text."""

    response: str
