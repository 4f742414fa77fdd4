"""OpenAI chat completions provider."""

from __future__ import annotations

import logging

from memory_coach.config import DEFAULT_OPENAI_MODEL, is_placeholder_credential
from memory_coach.exceptions import (
    ProviderError,
    ProviderNotConfiguredError,
    ProviderResponseError,
    ProviderTimeoutError,
)
from memory_coach.providers.base import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, BaseProvider

logger = logging.getLogger(__name__)

OPENAI_CHAT_URL = "https://api.openai.com/v1/chat/completions"


class OpenAIProvider(BaseProvider):
    """OpenAI chat completions over httpx."""

    key = "openai"

    def __init__(self, model: str = DEFAULT_OPENAI_MODEL, timeout: float = 30.0) -> None:
        super().__init__(timeout=timeout)
        self.model = model
        self.api_key: str | None = None

    def initialize(self, credential: str | None) -> bool:
        if is_placeholder_credential(credential):
            logger.warning("OpenAI API key not configured.")
            self._enabled = False
            return False
        try:
            import httpx  # noqa: F401
        except ImportError:
            logger.error("httpx is required for OpenAIProvider. Install with: pip install memory-coach")
            self._enabled = False
            return False
        self.api_key = credential.strip()
        self._enabled = True
        logger.info("OpenAI initialized (model %s)", self.model)
        return True

    def generate(
        self,
        prompt: str,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        system_prompt: str | None = None,
    ) -> str:
        if not self._enabled:
            raise ProviderNotConfiguredError("OpenAI provider is not initialized")
        import httpx

        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(
                    OPENAI_CHAT_URL,
                    json={
                        "model": self.model,
                        "messages": messages,
                        "max_tokens": max_tokens,
                        "temperature": temperature,
                    },
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": "application/json",
                    },
                )
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException as e:
            raise ProviderTimeoutError(f"OpenAI request timed out after {self.timeout}s") from e
        except httpx.HTTPStatusError as e:
            raise ProviderResponseError(
                f"OpenAI API error {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except Exception as e:
            raise ProviderError(f"OpenAI request failed: {e}") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderResponseError("OpenAI response had no choices") from e
        if not content or not content.strip():
            raise ProviderResponseError("OpenAI returned an empty response")
        return content
