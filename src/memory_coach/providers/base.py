"""Abstract base class and static metadata for text-generation providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

DEFAULT_MAX_TOKENS = 200
DEFAULT_TEMPERATURE = 0.3


@dataclass(frozen=True)
class ProviderInfo:
    """Static description of a provider, independent of whether it is configured."""

    name: str
    cost: str
    free_limit: str = ""
    signup_url: str = ""


PROVIDER_INFO: dict[str, ProviderInfo] = {
    "gemini": ProviderInfo(
        name="Google Gemini",
        cost="FREE",
        free_limit="15 requests/minute, 1M tokens/month",
        signup_url="https://makersuite.google.com/app/apikey",
    ),
    "openai": ProviderInfo(
        name="OpenAI GPT",
        cost="Pay-per-use after free credits",
        free_limit="$5 free credits (one-time)",
        signup_url="https://platform.openai.com/api-keys",
    ),
    "claude": ProviderInfo(
        name="Anthropic Claude",
        cost="Pay-per-use",
        free_limit="Trial credits on signup",
        signup_url="https://console.anthropic.com/settings/keys",
    ),
    "cohere": ProviderInfo(
        name="Cohere",
        cost="FREE",
        free_limit="5M tokens/month",
        signup_url="https://dashboard.cohere.ai/api-keys",
    ),
    "huggingface": ProviderInfo(
        name="Hugging Face",
        cost="FREE",
        free_limit="30K characters/month",
        signup_url="https://huggingface.co/settings/tokens",
    ),
}

UNKNOWN_PROVIDER = ProviderInfo(name="Unknown", cost="Unknown")


def provider_info(key: str) -> ProviderInfo:
    return PROVIDER_INFO.get(key, UNKNOWN_PROVIDER)


class BaseProvider(ABC):
    """Uniform wrapper around one external text-generation API.

    A provider starts disabled. ``initialize`` enables it when the credential
    is usable; it reports failure by returning False, never by raising.
    """

    key: str = ""

    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = timeout
        self._enabled = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def info(self) -> ProviderInfo:
        return provider_info(self.key)

    @abstractmethod
    def initialize(self, credential: str | None) -> bool:
        """Prepare the client; returns the resulting enabled state."""
        ...

    @abstractmethod
    def generate(
        self,
        prompt: str,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        system_prompt: str | None = None,
    ) -> str:
        """Return generated text for the prompt; raises ProviderError on failure."""
        ...
