"""Providers listed for discovery but not implemented yet."""

from __future__ import annotations

import logging

from memory_coach.exceptions import ProviderNotConfiguredError
from memory_coach.providers.base import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, BaseProvider

logger = logging.getLogger(__name__)


class PlaceholderProvider(BaseProvider):
    """Always disabled; generate() refuses to run."""

    def initialize(self, credential: str | None) -> bool:
        logger.info("%s integration coming soon...", self.info.name)
        self._enabled = False
        return False

    def generate(
        self,
        prompt: str,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        system_prompt: str | None = None,
    ) -> str:
        raise ProviderNotConfiguredError(f"{self.info.name} provider is not implemented")


class CohereProvider(PlaceholderProvider):
    key = "cohere"


class HuggingFaceProvider(PlaceholderProvider):
    key = "huggingface"
