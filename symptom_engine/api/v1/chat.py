"""
Chat endpoint: symptom analysis with AI fallback.
"""

from fastapi import APIRouter, Depends, Request

from symptom_engine.api.v1.symptoms import validate_message
from symptom_engine.core.auth import verify_api_key
from symptom_engine.core.logging import get_logger
from symptom_engine.core.metrics import CHAT_REPLIES, EMERGENCY_DETECTIONS
from symptom_engine.core.rate_limit import get_rate_limit_string, limiter
from symptom_engine.dependencies import get_chat_service
from symptom_engine.schemas.chat import ChatReply, ChatRequest
from symptom_engine.services.medical_chat import MedicalChatService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/chat",
    dependencies=[Depends(verify_api_key)]
)


@router.post(
    "/message",
    response_model=ChatReply,
    summary="Send Chat Message",
    description="""
    Answer a chat message.

    Symptom questions are answered by the rule-based classifier; other
    health questions go to the AI responder. `is_emergency` tells the
    client to start its emergency flow.
    """
)
@limiter.limit(get_rate_limit_string())
async def send_message(
    request: Request,
    payload: ChatRequest,
    chat_service: MedicalChatService = Depends(get_chat_service)
) -> ChatReply:
    validate_message(payload.message)

    reply = await chat_service.process_message(payload.message, payload.history)

    CHAT_REPLIES.labels(source=reply.source.value).inc()
    if reply.is_emergency:
        EMERGENCY_DETECTIONS.labels(source=reply.source.value).inc()

    logger.info(
        "Chat reply sent",
        extra={"source": reply.source.value, "is_emergency": reply.is_emergency}
    )

    return reply
