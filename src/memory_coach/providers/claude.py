"""Anthropic Claude provider using the official SDK."""

from __future__ import annotations

import logging

from memory_coach.config import DEFAULT_CLAUDE_MODEL, is_placeholder_credential
from memory_coach.exceptions import (
    ProviderError,
    ProviderNotConfiguredError,
    ProviderResponseError,
    ProviderTimeoutError,
)
from memory_coach.providers.base import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, BaseProvider

logger = logging.getLogger(__name__)


class ClaudeProvider(BaseProvider):
    """Synchronous wrapper around the Anthropic SDK.

    The SDK's own retry loop is switched off so one failed call falls
    straight through to the caller's fallback.
    """

    key = "claude"

    def __init__(self, model: str = DEFAULT_CLAUDE_MODEL, timeout: float = 30.0) -> None:
        super().__init__(timeout=timeout)
        self.model = model
        self._client = None

    @property
    def client(self):
        """Access the underlying Anthropic SDK client for advanced usage."""
        return self._client

    def initialize(self, credential: str | None) -> bool:
        if is_placeholder_credential(credential):
            logger.warning("Anthropic API key not configured.")
            self._enabled = False
            return False
        try:
            from anthropic import Anthropic
        except ImportError:
            logger.error(
                "anthropic is required for ClaudeProvider. "
                "Install with: pip install memory-coach[claude]"
            )
            self._enabled = False
            return False
        try:
            self._client = Anthropic(api_key=credential.strip(), timeout=self.timeout, max_retries=0)
        except Exception as e:
            logger.error("Failed to initialize Anthropic client: %s", e)
            self._enabled = False
            return False
        self._enabled = True
        logger.info("Anthropic Claude initialized (model %s)", self.model)
        return True

    def generate(
        self,
        prompt: str,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        system_prompt: str | None = None,
    ) -> str:
        if not self._enabled or self._client is None:
            raise ProviderNotConfiguredError("Claude provider is not initialized")
        from anthropic import APIError, APITimeoutError

        kwargs = {
            "model": self.model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system_prompt:
            kwargs["system"] = system_prompt

        try:
            response = self._client.messages.create(**kwargs)
        except APITimeoutError as e:
            raise ProviderTimeoutError(f"Claude request timed out after {self.timeout}s") from e
        except APIError as e:
            raise ProviderResponseError(f"Claude API error: {e}") from e
        except Exception as e:
            raise ProviderError(f"Claude request failed: {e}") from e

        text = "\n".join(block.text for block in response.content if block.type == "text")
        if not text.strip():
            raise ProviderResponseError("Claude returned an empty response")
        return text
