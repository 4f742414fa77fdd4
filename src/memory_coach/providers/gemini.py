"""Google Gemini provider over the Generative Language REST API."""

from __future__ import annotations

import logging

from memory_coach.config import DEFAULT_GEMINI_MODEL, is_placeholder_credential
from memory_coach.exceptions import (
    ProviderError,
    ProviderNotConfiguredError,
    ProviderResponseError,
    ProviderTimeoutError,
)
from memory_coach.providers.base import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, BaseProvider

logger = logging.getLogger(__name__)

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"


class GeminiProvider(BaseProvider):
    """Gemini ``generateContent`` calls, one request per generation, no retries."""

    key = "gemini"

    def __init__(self, model: str = DEFAULT_GEMINI_MODEL, timeout: float = 30.0) -> None:
        super().__init__(timeout=timeout)
        self.model = model
        self.api_key: str | None = None

    def initialize(self, credential: str | None) -> bool:
        if is_placeholder_credential(credential):
            logger.warning(
                "Gemini API key not configured. Get one free at: %s", self.info.signup_url
            )
            self._enabled = False
            return False
        try:
            import httpx  # noqa: F401
        except ImportError:
            logger.error("httpx is required for GeminiProvider. Install with: pip install memory-coach")
            self._enabled = False
            return False
        self.api_key = credential.strip()
        self._enabled = True
        logger.info("Google Gemini initialized (model %s)", self.model)
        return True

    def generate(
        self,
        prompt: str,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        system_prompt: str | None = None,
    ) -> str:
        if not self._enabled:
            raise ProviderNotConfiguredError("Gemini provider is not initialized")
        import httpx

        body: dict = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {"maxOutputTokens": max_tokens, "temperature": temperature},
        }
        if system_prompt:
            body["systemInstruction"] = {"parts": [{"text": system_prompt}]}

        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(
                    f"{GEMINI_API_BASE}/models/{self.model}:generateContent",
                    json=body,
                    headers={
                        "x-goog-api-key": self.api_key,
                        "Content-Type": "application/json",
                    },
                )
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException as e:
            raise ProviderTimeoutError(f"Gemini request timed out after {self.timeout}s") from e
        except httpx.HTTPStatusError as e:
            raise ProviderResponseError(
                f"Gemini API error {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except Exception as e:
            raise ProviderError(f"Gemini request failed: {e}") from e

        return _extract_text(data)


def _extract_text(data: dict) -> str:
    try:
        parts = data["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError) as e:
        reason = (data.get("promptFeedback") or {}).get("blockReason") if isinstance(data, dict) else None
        detail = f" (blocked: {reason})" if reason else ""
        raise ProviderResponseError(f"Gemini response had no candidates{detail}") from e
    text = "".join(part.get("text", "") for part in parts)
    if not text.strip():
        raise ProviderResponseError("Gemini returned an empty response")
    return text
