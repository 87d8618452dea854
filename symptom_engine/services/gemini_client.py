"""
Gemini AI responder client.

Answers general health questions that the symptom classifier does not
handle, via the Gemini ``generateContent`` REST endpoint.
"""

from typing import Any, Optional, Sequence

import httpx

from symptom_engine.config import get_settings
from symptom_engine.core.logging import get_logger
from symptom_engine.schemas.chat import ChatTurn

logger = get_logger(__name__)

GENERATION_CONFIG = {
    "temperature": 0.7,
    "topP": 0.95,
    "topK": 40,
    "maxOutputTokens": 1024,
}

SAFETY_SETTINGS = [
    {"category": category, "threshold": "BLOCK_MEDIUM_AND_ABOVE"}
    for category in (
        "HARM_CATEGORY_HARASSMENT",
        "HARM_CATEGORY_HATE_SPEECH",
        "HARM_CATEGORY_SEXUALLY_EXPLICIT",
        "HARM_CATEGORY_DANGEROUS_CONTENT",
    )
]


class AIResponderError(Exception):
    """Raised when the AI responder cannot produce an answer."""


def build_prompt(prompt: str, system_context: str, history: Sequence[ChatTurn] = ()) -> str:
    """Combine instructions, prior turns and the new message into one prompt."""
    conversation = ""
    if history:
        turns = ". ".join(
            f"{'User' if turn.sender == 'user' else 'Assistant'}: {turn.text}"
            for turn in history
        )
        conversation = f"Previous conversation: {turns}\n\n"

    return f"{system_context}\n\n{conversation}User: {prompt}"


def extract_text(data: dict[str, Any]) -> str:
    """
    Pull the first candidate's text out of a generateContent payload.

    Raises:
        AIResponderError: If the payload has no candidate text.
    """
    try:
        return data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise AIResponderError("Received an unexpected response format from the API") from e


class GeminiClient:
    """
    Async client for Gemini text generation.

    The HTTP client is created lazily and pooled; call ``close`` on shutdown.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        self._api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self._model = model or settings.GEMINI_MODEL
        self._base_url = settings.GEMINI_BASE_URL.rstrip("/")
        self._http_client = http_client

    @property
    def is_configured(self) -> bool:
        """Check whether an API key is available."""
        return bool(self._api_key)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            settings = get_settings()
            self._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(settings.GEMINI_TIMEOUT),
                limits=httpx.Limits(
                    max_keepalive_connections=settings.HTTP_POOL_SIZE,
                    keepalive_expiry=settings.HTTP_POOL_KEEPALIVE
                )
            )
        return self._http_client

    async def generate(
        self,
        prompt: str,
        system_context: str,
        history: Sequence[ChatTurn] = (),
    ) -> str:
        """
        Generate a reply for ``prompt``.

        Args:
            prompt: The (already enhanced) user message.
            system_context: Assistant instructions.
            history: Earlier turns, oldest first.

        Returns:
            Generated text.

        Raises:
            AIResponderError: On missing credentials, HTTP failures or an
                unexpected payload.
        """
        if not self.is_configured:
            raise AIResponderError("API key not configured. Please add your Gemini API key.")

        payload = {
            "contents": [{"parts": [{"text": build_prompt(prompt, system_context, history)}]}],
            "generationConfig": GENERATION_CONFIG,
            "safetySettings": SAFETY_SETTINGS,
        }

        client = await self._get_client()
        url = f"{self._base_url}/models/{self._model}:generateContent"

        try:
            response = await client.post(url, params={"key": self._api_key}, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Gemini API error: {e.response.status_code}",
                extra={"model": self._model}
            )
            raise AIResponderError(f"API Error: {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Gemini request failed: {e}", extra={"model": self._model})
            raise AIResponderError("Unable to generate a response. Please try again later.") from e

        return extract_text(data)

    async def close(self) -> None:
        """Close HTTP client."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None


# Singleton instance
_gemini_instance: Optional[GeminiClient] = None


def get_gemini_client() -> GeminiClient:
    """Get or create GeminiClient instance."""
    global _gemini_instance
    if _gemini_instance is None:
        _gemini_instance = GeminiClient()
    return _gemini_instance


async def close_gemini_client() -> None:
    """Close the shared client on shutdown."""
    global _gemini_instance
    if _gemini_instance is not None:
        await _gemini_instance.close()
        _gemini_instance = None
