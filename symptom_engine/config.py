"""
Configuration management for the Symptom Triage Engine.
Uses pydantic-settings for type-safe environment variable handling.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Symptom Triage Engine"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Security
    API_KEY: str = ""
    FRONTEND_ORIGIN: str = "http://localhost:3000"

    # Classifier
    DEFAULT_LOCALE: str = "bd"
    MAX_MESSAGE_LENGTH: int = 5000

    # AI responder (Gemini)
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.0-flash"
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_TIMEOUT: int = 30
    CHAT_HISTORY_LIMIT: int = 10

    # Rate limiting
    RATE_LIMIT_REQUESTS: int = 60
    RATE_LIMIT_WINDOW: int = 60  # seconds

    # Connection pooling
    HTTP_POOL_SIZE: int = 20
    HTTP_POOL_KEEPALIVE: int = 30

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
