"""Summarization facade: one provider chosen at construction, template fallback on any failure."""

from __future__ import annotations

import logging
from typing import Sequence

from memory_coach.config import SummarizerConfig
from memory_coach.exceptions import ProviderError
from memory_coach.providers import BaseProvider, ProviderInfo, create_provider, provider_info
from memory_coach.summarization import fallback
from memory_coach.summarization.prompts import (
    DAILY_SYSTEM_PROMPT,
    PAGE_SYSTEM_PROMPT,
    build_daily_prompt,
    build_page_prompt,
    build_topic_prompt,
)
from memory_coach.summarization.response_parser import parse_daily_response, parse_topic_list
from memory_coach.visits.models import DailySummary, PageVisit, SummaryResult
from memory_coach.visits.store import VisitStore

logger = logging.getLogger(__name__)

PAGE_MAX_TOKENS, PAGE_TEMPERATURE = 200, 0.3
DAILY_MAX_TOKENS, DAILY_TEMPERATURE = 500, 0.4
TOPIC_MAX_TOKENS, TOPIC_TEMPERATURE = 100, 0.3


class SummarizationService:
    """Summarize page visits with the configured provider.

    Every summary operation returns a usable value. When the provider is
    disabled, or a call fails, the deterministic templates in
    ``memory_coach.summarization.fallback`` are used instead. Topic extraction
    has no template equivalent and degrades to an empty list.

    Args:
        config: Provider selection and credentials. Defaults to ``SummarizerConfig.from_env()``.
        provider: Pre-built provider to use instead of resolving one from ``config``.
            It is initialized with the configured credential for its key.
    """

    def __init__(
        self,
        config: SummarizerConfig | None = None,
        provider: BaseProvider | None = None,
    ) -> None:
        self.config = config or SummarizerConfig.from_env()
        logger.info("Initializing AI provider: %s", self.config.provider or "<none>")
        if provider is not None:
            provider.initialize(self.config.credential_for(provider.key))
            self._provider = provider
        else:
            self._provider = create_provider(self.config)
        if not self.is_enabled():
            logger.warning("AI summaries disabled; using basic summaries")

    @property
    def provider(self) -> BaseProvider | None:
        return self._provider

    @property
    def provider_name(self) -> str:
        return self._provider.key if self._provider is not None else self.config.provider

    def is_enabled(self) -> bool:
        return self._provider is not None and self._provider.enabled

    def get_provider_info(self) -> ProviderInfo:
        """Static metadata for the configured provider, whether or not it is enabled."""
        return provider_info(self.provider_name)

    def status(self) -> dict:
        info = self.get_provider_info()
        enabled = self.is_enabled()
        if enabled:
            message = f"{info.name} is ready ({info.cost})"
        else:
            message = f"AI service is disabled - get free API key: {info.signup_url}"
        return {
            "enabled": enabled,
            "provider_name": info.name,
            "cost": info.cost,
            "free_limit": info.free_limit,
            "signup_url": info.signup_url,
            "message": message,
        }

    def summarize_page_result(self, visit: PageVisit) -> SummaryResult:
        """Summarize one visit and attach the text to it (last write wins)."""
        if not self.is_enabled():
            result = SummaryResult(
                text=self._fallback_page(visit),
                degraded=True,
                reason="provider disabled",
            )
        else:
            try:
                text = self._provider.generate(
                    build_page_prompt(visit),
                    max_tokens=PAGE_MAX_TOKENS,
                    temperature=PAGE_TEMPERATURE,
                    system_prompt=PAGE_SYSTEM_PROMPT,
                )
                result = SummaryResult(text=text.strip(), provider=self.provider_name)
            except ProviderError as e:
                logger.error("Error with %s summarization: %s", self.provider_name, e)
                result = SummaryResult(text=self._fallback_page(visit), degraded=True, reason=str(e))
            except Exception as e:
                logger.exception("Unexpected error with %s summarization", self.provider_name)
                result = SummaryResult(text=self._fallback_page(visit), degraded=True, reason=str(e))

        visit.attach_summary(result.text)
        return result

    def summarize_page(self, visit: PageVisit) -> str:
        return self.summarize_page_result(visit).text

    def generate_daily_summary(self, visits: Sequence[PageVisit], date: str) -> DailySummary:
        if not visits:
            return fallback.empty_daily_summary(date)
        if not self.is_enabled():
            return self._fallback_daily(visits, date)

        try:
            text = self._provider.generate(
                build_daily_prompt(visits, date),
                max_tokens=DAILY_MAX_TOKENS,
                temperature=DAILY_TEMPERATURE,
                system_prompt=DAILY_SYSTEM_PROMPT,
            )
        except ProviderError as e:
            logger.error("Error with %s daily summary: %s", self.provider_name, e)
            return self._fallback_daily(visits, date)
        except Exception:
            logger.exception("Unexpected error with %s daily summary", self.provider_name)
            return self._fallback_daily(visits, date)

        return parse_daily_response(text.strip(), visits, date, provider=self.provider_name)

    def summarize_day(self, store: VisitStore, date: str) -> DailySummary:
        """Daily summary over the visits a store holds for ``date``."""
        return self.generate_daily_summary(store.on_date(date), date)

    def extract_key_topics(self, content: str) -> list[str]:
        if not self.is_enabled():
            return fallback.keyword_topics(content)

        try:
            text = self._provider.generate(
                build_topic_prompt(content),
                max_tokens=TOPIC_MAX_TOKENS,
                temperature=TOPIC_TEMPERATURE,
            )
        except ProviderError as e:
            logger.error("Error extracting topics with %s: %s", self.provider_name, e)
            return []
        except Exception:
            logger.exception("Unexpected error extracting topics with %s", self.provider_name)
            return []
        return parse_topic_list(text)

    def _fallback_page(self, visit: PageVisit) -> str:
        return fallback.page_summary(visit, signup_url=self._signup_url())

    def _fallback_daily(self, visits: Sequence[PageVisit], date: str) -> DailySummary:
        logger.info("Using basic daily summary for %s", date)
        return fallback.daily_summary(visits, date, signup_url=self._signup_url())

    def _signup_url(self) -> str:
        return self.get_provider_info().signup_url or fallback.DEFAULT_SIGNUP_URL
