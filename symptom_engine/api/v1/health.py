"""
Health check and monitoring endpoints.
"""

import time

from fastapi import APIRouter, Depends
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from symptom_engine.config import get_settings
from symptom_engine.dependencies import get_ai_responder
from symptom_engine.schemas.common import HealthResponse
from symptom_engine.services.gemini_client import GeminiClient

router = APIRouter()

# Track startup time
_startup_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(responder: GeminiClient = Depends(get_ai_responder)):
    """
    Check service health.

    No authentication required for health checks.
    """
    settings = get_settings()

    return HealthResponse(
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        status="healthy",
        locale=settings.DEFAULT_LOCALE,
        ai_responder=responder.is_configured,
        uptime_seconds=time.time() - _startup_time
    )


@router.get("/metrics")
async def prometheus_metrics():
    """
    Expose Prometheus metrics.

    No authentication for metrics endpoint.
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )
