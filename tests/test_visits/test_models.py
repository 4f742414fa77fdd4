"""Tests for visit models."""

from datetime import datetime

from memory_coach.visits.models import DailySummary, PageVisit, SummaryResult, to_local_naive


def test_page_visit_defaults():
    visit = PageVisit(id="1", url="https://example.com", title="Example")
    assert visit.text_content == ""
    assert visit.is_learning_content is False
    assert visit.ai_summary is None
    assert visit.timestamp


def test_attach_summary_sets_pair():
    visit = PageVisit(id="1", url="https://example.com", title="Example")
    visit.attach_summary("short summary", when="2024-01-01T10:00:00")
    assert visit.has_summary
    assert visit.ai_summary == "short summary"
    assert visit.summarized_at == "2024-01-01T10:00:00"


def test_attach_summary_last_write_wins():
    visit = PageVisit(id="1", url="https://example.com", title="Example")
    visit.attach_summary("first")
    visit.attach_summary("second")
    assert visit.ai_summary == "second"


def test_visited_at_naive():
    visit = PageVisit(id="1", url="u", title="t", timestamp="2024-01-15T09:30:00")
    assert visit.visited_at == datetime(2024, 1, 15, 9, 30)


def test_to_local_naive_strips_tz():
    dt = to_local_naive("2024-01-15T09:30:00Z")
    assert dt.tzinfo is None


def test_daily_summary_defaults():
    summary = DailySummary(date="2024-01-01", summary="text")
    assert summary.key_topics == []
    assert summary.is_ai_generated is False
    assert summary.provider is None


def test_summary_result_defaults():
    result = SummaryResult(text="hello")
    assert result.degraded is False
    assert result.reason is None


def test_to_local_naive_free_form():
    assert to_local_naive("01/15/2024") == datetime(2024, 1, 15)
