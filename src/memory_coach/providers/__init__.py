"""Text-generation provider adapters."""

from __future__ import annotations

import logging

from memory_coach.config import SummarizerConfig
from memory_coach.providers.base import (
    PROVIDER_INFO,
    UNKNOWN_PROVIDER,
    BaseProvider,
    ProviderInfo,
    provider_info,
)
from memory_coach.providers.claude import ClaudeProvider
from memory_coach.providers.gemini import GeminiProvider
from memory_coach.providers.openai import OpenAIProvider
from memory_coach.providers.placeholder import CohereProvider, HuggingFaceProvider

logger = logging.getLogger(__name__)

PROVIDERS: dict[str, type[BaseProvider]] = {
    "gemini": GeminiProvider,
    "openai": OpenAIProvider,
    "claude": ClaudeProvider,
    "cohere": CohereProvider,
    "huggingface": HuggingFaceProvider,
}


def create_provider(config: SummarizerConfig) -> BaseProvider | None:
    """Instantiate and initialize the configured provider.

    Returns None for an unrecognized provider name. The returned provider may
    still be disabled (missing credential, placeholder implementation).
    """
    provider_cls = PROVIDERS.get(config.provider)
    if provider_cls is None:
        logger.warning(
            "Unknown AI provider: %r. Falling back to basic summaries.", config.provider
        )
        return None

    model = config.model_for(config.provider)
    if model:
        provider = provider_cls(model=model, timeout=config.request_timeout)
    else:
        provider = provider_cls(timeout=config.request_timeout)
    provider.initialize(config.credential_for(config.provider))
    return provider


__all__ = [
    "PROVIDER_INFO",
    "PROVIDERS",
    "UNKNOWN_PROVIDER",
    "BaseProvider",
    "ProviderInfo",
    "provider_info",
    "create_provider",
    "ClaudeProvider",
    "GeminiProvider",
    "OpenAIProvider",
    "CohereProvider",
    "HuggingFaceProvider",
]
