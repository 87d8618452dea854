"""
Symptom classifier endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status

from symptom_engine.config import get_settings
from symptom_engine.core.auth import verify_api_key
from symptom_engine.core.logging import get_logger
from symptom_engine.core.metrics import EMERGENCY_DETECTIONS, SYMPTOM_ANALYSES
from symptom_engine.core.rate_limit import get_rate_limit_string, limiter
from symptom_engine.dependencies import get_classifier
from symptom_engine.schemas.symptoms import (
    AnalysisResult,
    FormattedResponse,
    SymptomMessageRequest,
    SymptomMessageResult,
)
from symptom_engine.services.symptom_classifier import SymptomClassifier

logger = get_logger(__name__)

router = APIRouter(
    prefix="/symptoms",
    dependencies=[Depends(verify_api_key)]
)


def validate_message(message: str) -> None:
    """Reject blank or oversized messages."""
    settings = get_settings()

    if not message or not message.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Message must not be empty"
        )

    if len(message) > settings.MAX_MESSAGE_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Message exceeds {settings.MAX_MESSAGE_LENGTH} characters"
        )


@router.post(
    "/analyze",
    response_model=AnalysisResult,
    summary="Analyze Symptoms",
    description="""
    Rule-based symptom analysis of a chat message.

    Returns recognized symptoms, possible conditions ranked by how many
    symptoms point to them, follow-up advice and the emergency flag.
    """
)
@limiter.limit(get_rate_limit_string())
async def analyze_symptoms(
    request: Request,
    payload: SymptomMessageRequest,
    classifier: SymptomClassifier = Depends(get_classifier)
) -> AnalysisResult:
    validate_message(payload.message)

    result = classifier.analyze_symptoms(payload.message)

    SYMPTOM_ANALYSES.inc()
    if result.is_emergency:
        EMERGENCY_DETECTIONS.labels(source="analyze").inc()

    logger.info(
        "Symptom analysis complete",
        extra={
            "recognized": len(result.recognized_symptoms),
            "is_emergency": result.is_emergency
        }
    )

    return result


@router.post(
    "/process",
    response_model=SymptomMessageResult,
    response_model_exclude_none=True,
    summary="Process Symptom Message",
    description="""
    Single entry point for chat integrations.

    Returns only `is_symptom_question: false` when the message is not about
    symptoms; otherwise the emergency flag, recognized symptoms and the
    formatted advisory response.
    """
)
@limiter.limit(get_rate_limit_string())
async def process_symptom_message(
    request: Request,
    payload: SymptomMessageRequest,
    classifier: SymptomClassifier = Depends(get_classifier)
) -> SymptomMessageResult:
    validate_message(payload.message)

    result = classifier.process_symptom_message(payload.message, payload.locale)

    if result.is_symptom_question:
        SYMPTOM_ANALYSES.inc()
        if result.is_emergency:
            EMERGENCY_DETECTIONS.labels(source="process").inc()

    return result


@router.post(
    "/format",
    response_model=FormattedResponse,
    summary="Format Analysis",
    description="Render an analysis result as advisory text."
)
@limiter.limit(get_rate_limit_string())
async def format_analysis(
    request: Request,
    analysis: AnalysisResult,
    locale: Optional[str] = None,
    classifier: SymptomClassifier = Depends(get_classifier)
) -> FormattedResponse:
    return FormattedResponse(response=classifier.format_symptom_response(analysis, locale))
