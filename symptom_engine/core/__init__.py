"""Core modules for the Symptom Triage Engine."""

from symptom_engine.core.auth import verify_api_key
from symptom_engine.core.logging import get_logger, setup_logging
from symptom_engine.core.rate_limit import limiter, get_rate_limit_string

__all__ = [
    "verify_api_key",
    "get_logger",
    "setup_logging",
    "limiter",
    "get_rate_limit_string",
]
