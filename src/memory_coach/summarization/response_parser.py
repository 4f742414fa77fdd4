"""Turn raw provider output into structured results."""

from __future__ import annotations

from typing import Sequence

from memory_coach.visits.models import DailySummary, PageVisit

# Case-sensitive substrings that mark a line of a daily response as an insight.
INSIGHT_MARKERS = ("insight", "pattern", "suggest")

MAX_KEY_TOPICS = 5
MAX_TOP_DOMAINS = 3


def distinct_domains(visits: Sequence[PageVisit]) -> list[str]:
    """Domains in first-seen order, without duplicates."""
    return list(dict.fromkeys(v.domain for v in visits))


def extract_insights(text: str) -> list[str]:
    lines = [line for line in text.split("\n") if line.strip()]
    return [line for line in lines if any(marker in line for marker in INSIGHT_MARKERS)]


def parse_daily_response(
    text: str,
    visits: Sequence[PageVisit],
    date: str,
    provider: str,
) -> DailySummary:
    """Build an AI-generated DailySummary.

    Topics and domains come from the visits themselves, not from the text.
    """
    domains = distinct_domains(visits)
    return DailySummary(
        date=date,
        summary=text,
        key_topics=domains[:MAX_KEY_TOPICS],
        insights=extract_insights(text),
        total_visits=len(visits),
        learning_visits=sum(1 for v in visits if v.is_learning_content),
        top_domains=domains[:MAX_TOP_DOMAINS],
        is_ai_generated=True,
        provider=provider,
    )


def parse_topic_list(text: str) -> list[str]:
    """Split a comma-separated topic response into trimmed, non-empty entries."""
    return [topic.strip() for topic in text.strip().split(",") if topic.strip()]
