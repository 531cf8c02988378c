# /app/services/gemini_service.py

"""
The AI text-generation capability. Orchestrators depend only on the
`TextGenerator` protocol; `GeminiTextGenerator` is the production
implementation, built once at application startup and injected from there.

Every failure is normalised into the domain taxonomy:
- timeouts, quota exhaustion and busy/5xx responses -> AIUnavailableError
- an empty response or any other SDK error -> AIServiceError
"""

import asyncio
import logging
from typing import Optional, Protocol

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
from google.generativeai.types import GenerationConfig

from app.core import config
from app.core.exceptions import AIServiceError, AIUnavailableError

logger = logging.getLogger(__name__)

# SDK errors that mean "try again later" rather than "this request is broken".
_UNAVAILABLE_ERRORS = (
    google_exceptions.ResourceExhausted,
    google_exceptions.TooManyRequests,
    google_exceptions.ServiceUnavailable,
    google_exceptions.InternalServerError,
    google_exceptions.DeadlineExceeded,
    google_exceptions.GatewayTimeout,
)
_UNAVAILABLE_MARKERS = ("429", "503", "quota", "rate limit", "overloaded")


class TextGenerator(Protocol):
    async def generate_text(self, prompt: str) -> str:
        ...


def is_unavailable_error(error: Exception) -> bool:
    """True when an SDK error signals rate limiting, quota or server load."""
    if isinstance(error, (asyncio.TimeoutError, *_UNAVAILABLE_ERRORS)):
        return True
    if getattr(error, "code", None) in (429, 503):
        return True
    message = str(error).lower()
    return any(marker in message for marker in _UNAVAILABLE_MARKERS)


class GeminiTextGenerator:
    """Text-only, non-streaming generation against a single Gemini model."""

    def __init__(
        self,
        api_key: str,
        model_name: str = config.GEMINI_MODEL,
        temperature: float = config.AI_TEMPERATURE,
        timeout: float = config.AI_TIMEOUT_SECONDS,
    ):
        if not api_key:
            raise ValueError("A Google API key is required to use Gemini.")
        genai.configure(api_key=api_key)
        self.model_name = model_name
        self.timeout = timeout
        self._model = genai.GenerativeModel(model_name)
        self._config = GenerationConfig(temperature=temperature)

    async def generate_text(self, prompt: str) -> str:
        try:
            response = await asyncio.wait_for(
                self._model.generate_content_async(prompt, generation_config=self._config),
                timeout=self.timeout,
            )
        except Exception as e:
            if is_unavailable_error(e):
                reason = f"timed out after {self.timeout}s" if isinstance(e, asyncio.TimeoutError) else str(e)
                logger.warning("Gemini (%s) unavailable: %s", self.model_name, reason)
                raise AIUnavailableError(f"AI service unavailable: {reason}") from e
            logger.error("Gemini (%s) request failed: %s", self.model_name, e)
            raise AIServiceError(f"AI service error: {e}") from e

        if not response.parts:
            raise AIServiceError("AI model returned an empty response.")
        return response.text


class UnavailableTextGenerator:
    """Stand-in used when no API key is configured; every call is unavailable."""

    async def generate_text(self, prompt: str) -> str:
        raise AIUnavailableError("AI service is not configured (GOOGLE_API_KEY is unset).")


def build_text_generator(api_key: Optional[str] = None) -> TextGenerator:
    """Builds the process-wide generator from configuration."""
    api_key = api_key if api_key is not None else config.GOOGLE_API_KEY
    if not api_key:
        logger.warning("GOOGLE_API_KEY is not set; predictions and study plans will use deterministic fallbacks.")
        return UnavailableTextGenerator()
    return GeminiTextGenerator(api_key=api_key)
