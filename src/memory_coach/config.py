"""Environment-driven configuration for the summarization service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping

from memory_coach.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER = "gemini"
DEFAULT_REQUEST_TIMEOUT = 30.0

DEFAULT_GEMINI_MODEL = "gemini-1.5-flash"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_CLAUDE_MODEL = "claude-haiku-4-5-20251001"

# provider key -> environment variable holding its credential
CREDENTIAL_ENV_VARS = {
    "gemini": "GEMINI_API_KEY",
    "openai": "OPENAI_API_KEY",
    "claude": "ANTHROPIC_API_KEY",
    "cohere": "COHERE_API_KEY",
    "huggingface": "HUGGINGFACE_API_KEY",
}

# Values shipped in the sample .env; they mean "not configured".
PLACEHOLDER_CREDENTIALS = {
    "gemini": "your_gemini_api_key_here",
    "openai": "your_openai_api_key_here",
    "claude": "your_anthropic_api_key_here",
    "cohere": "your_cohere_api_key_here",
    "huggingface": "your_huggingface_api_key_here",
}

MODEL_ENV_VARS = {
    "gemini": ("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
    "openai": ("OPENAI_MODEL", DEFAULT_OPENAI_MODEL),
    "claude": ("CLAUDE_MODEL", DEFAULT_CLAUDE_MODEL),
}


def is_placeholder_credential(value: str | None) -> bool:
    """True when a credential is missing, blank or one of the sample placeholders."""
    if value is None:
        return True
    value = value.strip()
    return not value or value in PLACEHOLDER_CREDENTIALS.values()


@dataclass
class SummarizerConfig:
    """Provider selection and per-provider settings.

    The provider is resolved once when a ``SummarizationService`` is built;
    switching providers means building a new service.
    """

    provider: str = DEFAULT_PROVIDER
    api_keys: dict[str, str] = field(default_factory=dict)
    models: dict[str, str] = field(default_factory=dict)
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    def __post_init__(self) -> None:
        self.provider = (self.provider or "").strip().lower()
        if self.request_timeout <= 0:
            raise ConfigurationError(f"request_timeout must be positive, got {self.request_timeout}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SummarizerConfig:
        """Build a config from ``AI_PROVIDER``, ``*_API_KEY``, ``*_MODEL`` and ``AI_REQUEST_TIMEOUT``."""
        env = os.environ if environ is None else environ

        api_keys = {}
        for name, var in CREDENTIAL_ENV_VARS.items():
            value = env.get(var)
            if value:
                api_keys[name] = value

        models = {name: env.get(var) or default for name, (var, default) in MODEL_ENV_VARS.items()}

        return cls(
            provider=env.get("AI_PROVIDER") or DEFAULT_PROVIDER,
            api_keys=api_keys,
            models=models,
            request_timeout=_parse_timeout(env.get("AI_REQUEST_TIMEOUT")),
        )

    def credential_for(self, provider: str) -> str | None:
        """Return the usable credential for a provider, or None if absent/placeholder."""
        value = self.api_keys.get(provider)
        if is_placeholder_credential(value):
            return None
        return value.strip()

    def model_for(self, provider: str) -> str | None:
        if provider in self.models:
            return self.models[provider]
        default = MODEL_ENV_VARS.get(provider)
        return default[1] if default else None


def _parse_timeout(raw: str | None) -> float:
    if not raw:
        return DEFAULT_REQUEST_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid AI_REQUEST_TIMEOUT %r, using %ss", raw, DEFAULT_REQUEST_TIMEOUT)
        return DEFAULT_REQUEST_TIMEOUT
    if value <= 0:
        logger.warning("AI_REQUEST_TIMEOUT must be positive, using %ss", DEFAULT_REQUEST_TIMEOUT)
        return DEFAULT_REQUEST_TIMEOUT
    return value
