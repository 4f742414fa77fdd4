"""Tests for the summarization facade."""

import pytest

from memory_coach.config import SummarizerConfig
from memory_coach.exceptions import ProviderTimeoutError
from memory_coach.providers.base import BaseProvider
from memory_coach.summarization import fallback
from memory_coach.summarization.service import SummarizationService
from memory_coach.visits.models import PageVisit
from memory_coach.visits.store import VisitStore


class FakeProvider(BaseProvider):
    """Records calls and returns canned text (or raises)."""

    key = "gemini"

    def __init__(self, reply="AI text", error=None, enable=True):
        super().__init__()
        self.reply = reply
        self.error = error
        self.enable = enable
        self.calls = []

    def initialize(self, credential):
        self._enabled = self.enable
        return self._enabled

    def generate(self, prompt, max_tokens=200, temperature=0.3, system_prompt=None):
        self.calls.append({
            "prompt": prompt,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "system_prompt": system_prompt,
        })
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def visit():
    return PageVisit(
        id="1",
        url="https://example.com/ml",
        title="ML Intro",
        domain="example.com",
        timestamp="2024-01-15T10:00:00",
        text_content=" ".join(["learning"] * 500),
        is_learning_content=True,
    )


@pytest.fixture
def disabled():
    return SummarizationService(SummarizerConfig(provider="gemini"))


def _service(provider):
    return SummarizationService(SummarizerConfig(provider=provider.key), provider=provider)


def test_zero_config_is_disabled(disabled):
    assert disabled.is_enabled() is False
    assert disabled.provider is not None


def test_placeholder_key_disables_service():
    config = SummarizerConfig(provider="gemini", api_keys={"gemini": "your_gemini_api_key_here"})
    service = SummarizationService(config)
    assert service.provider.enabled is False
    assert service.is_enabled() is False


def test_unknown_provider_disables_service():
    service = SummarizationService(SummarizerConfig(provider="mystery", api_keys={"mystery": "k"}))
    assert service.is_enabled() is False
    assert service.provider is None
    assert service.get_provider_info().name == "Unknown"


def test_placeholder_provider_never_dispatched(visit):
    service = SummarizationService(SummarizerConfig(provider="cohere", api_keys={"cohere": "key"}))
    assert service.is_enabled() is False
    result = service.summarize_page_result(visit)
    assert result.degraded is True
    assert result.reason == "provider disabled"


def test_default_config_reads_environment(monkeypatch):
    monkeypatch.setenv("AI_PROVIDER", "openai")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    service = SummarizationService()
    assert service.provider_name == "openai"
    assert service.get_provider_info().name == "OpenAI GPT"
    assert service.is_enabled() is False


def test_status_disabled(disabled):
    status = disabled.status()
    assert status["enabled"] is False
    assert status["provider_name"] == "Google Gemini"
    assert status["message"] == (
        "AI service is disabled - get free API key: https://makersuite.google.com/app/apikey"
    )


def test_status_enabled():
    status = _service(FakeProvider()).status()
    assert status["enabled"] is True
    assert status["message"] == "Google Gemini is ready (FREE)"
    assert status["free_limit"] == "15 requests/minute, 1M tokens/month"


def test_disabled_page_summary_is_fallback(disabled, visit):
    text = disabled.summarize_page(visit)
    assert text.startswith('Basic summary for "ML Intro" (example.com)')
    assert text == disabled.summarize_page(visit)
    assert visit.ai_summary == text
    assert visit.summarized_at is not None


def test_disabled_page_summary_without_content(disabled, visit):
    visit.text_content = ""
    assert fallback.NO_CONTENT_PREVIEW in disabled.summarize_page(visit)


def test_enabled_page_summary(visit):
    provider = FakeProvider(reply="  Concise summary.  \n")
    result = _service(provider).summarize_page_result(visit)

    assert result.text == "Concise summary."
    assert result.degraded is False
    assert result.provider == "gemini"
    assert visit.ai_summary == "Concise summary."
    call = provider.calls[0]
    assert call["max_tokens"] == 200
    assert call["temperature"] == 0.3
    assert "Title: ML Intro" in call["prompt"]


def test_provider_error_falls_back(visit):
    provider = FakeProvider(error=ProviderTimeoutError("timed out after 30s"))
    result = _service(provider).summarize_page_result(visit)

    assert result.degraded is True
    assert result.reason == "timed out after 30s"
    assert result.text == fallback.page_summary(visit)
    assert visit.ai_summary == result.text


def test_unexpected_error_falls_back(visit):
    provider = FakeProvider(error=ValueError("bad payload"))
    text = _service(provider).summarize_page(visit)
    assert text.startswith("Basic summary for")


@pytest.mark.parametrize("enable", [True, False])
def test_daily_summary_empty_skips_provider(enable):
    provider = FakeProvider(enable=enable)
    summary = _service(provider).generate_daily_summary([], "2024-01-01")

    assert provider.calls == []
    assert summary.total_visits == 0
    assert summary.learning_visits == 0
    assert summary.key_topics == []
    assert summary.insights == []
    assert summary.summary == fallback.NO_CONTENT_DAILY_SUMMARY


def test_daily_summary_disabled(disabled, visit):
    summary = disabled.generate_daily_summary([visit], "2024-01-15")
    assert summary.is_ai_generated is False
    assert summary.insights == [fallback.FALLBACK_INSIGHT]
    assert summary.total_visits == 1


def test_daily_summary_enabled(visit):
    provider = FakeProvider(reply="Focused day.\nA clear pattern: ML\nWe suggest more practice")
    summary = _service(provider).generate_daily_summary([visit], "2024-01-15")

    assert summary.is_ai_generated is True
    assert summary.provider == "gemini"
    assert summary.insights == ["A clear pattern: ML", "We suggest more practice"]
    assert summary.top_domains == ["example.com"]
    assert provider.calls[0]["max_tokens"] == 500
    assert provider.calls[0]["temperature"] == 0.4


def test_daily_summary_provider_error_falls_back(visit):
    provider = FakeProvider(error=ProviderTimeoutError("slow"))
    summary = _service(provider).generate_daily_summary([visit], "2024-01-15")
    assert summary.is_ai_generated is False
    assert summary.provider is None


def test_daily_summary_bounds_lists():
    visits = [
        PageVisit(id=str(i), url=f"https://d{i}.com", title=str(i), domain=f"d{i}.com")
        for i in range(20)
    ]
    for service in (_service(FakeProvider()), _service(FakeProvider(enable=False))):
        summary = service.generate_daily_summary(visits, "2024-01-15")
        assert len(summary.top_domains) == 3
        assert len(summary.key_topics) == 5


def test_summarize_day_filters_store(visit):
    store = VisitStore()
    store.add(visit)
    store.add(PageVisit(id="2", url="https://other.com", title="Other", domain="other.com",
                        timestamp="2024-01-14T10:00:00"))
    summary = _service(FakeProvider(enable=False)).summarize_day(store, "2024-01-15")
    assert summary.total_visits == 1


def test_extract_topics_disabled_uses_keywords(disabled):
    assert disabled.extract_key_topics("aaaaa aaaaa bbbbb bbbbb bbbbb ccccc") == ["bbbbb", "aaaaa", "ccccc"]


def test_extract_topics_enabled_parses_commas():
    provider = FakeProvider(reply="Neural networks, Backpropagation , ,Gradient descent")
    topics = _service(provider).extract_key_topics("content")
    assert topics == ["Neural networks", "Backpropagation", "Gradient descent"]
    assert provider.calls[0]["system_prompt"] is None


def test_extract_topics_error_returns_empty():
    provider = FakeProvider(error=ProviderTimeoutError("slow"))
    assert _service(provider).extract_key_topics("content") == []


def test_summarize_day_skips_unreadable_timestamps(visit):
    store = VisitStore()
    store.add(visit)
    store.add(PageVisit(id="2", url="https://b.com/x", title="B", domain="b.com", timestamp="garbage"))
    store.add({"url": "https://c.com/x", "title": "C", "timestamp": "Mon Jan 15 2024"})

    summary = _service(FakeProvider(enable=False)).summarize_day(store, "2024-01-15")

    assert summary.total_visits == 2
    assert summary.top_domains == ["example.com", "c.com"]
