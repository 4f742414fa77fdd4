"""Deterministic, provider-free summaries used when no provider is available."""

from __future__ import annotations

import re
from collections import Counter
from typing import Sequence

from memory_coach.providers.base import PROVIDER_INFO
from memory_coach.summarization.response_parser import MAX_KEY_TOPICS, MAX_TOP_DOMAINS, distinct_domains
from memory_coach.visits.models import DailySummary, PageVisit

PREVIEW_WORDS = 50
DAILY_DOMAIN_LIMIT = 5
RECENT_LEARNING_LIMIT = 3
KEYWORD_MIN_LENGTH = 5

NO_CONTENT_PREVIEW = "No content captured for this page."
NO_CONTENT_DAILY_SUMMARY = "No learning content was recorded for this day."
FALLBACK_INSIGHT = "Enable AI for personalized insights"
DEFAULT_SIGNUP_URL = PROVIDER_INFO["gemini"].signup_url

_NON_WORD = re.compile(r"[^\w\s]")


def page_summary(visit: PageVisit, signup_url: str = DEFAULT_SIGNUP_URL) -> str:
    content = visit.text_content or ""
    words = content.split(" ")
    if content.strip():
        preview = " ".join(words[:PREVIEW_WORDS])
        if len(words) > PREVIEW_WORDS:
            preview += "..."
    else:
        preview = NO_CONTENT_PREVIEW

    return (
        f'Basic summary for "{visit.title}" ({visit.domain})\n'
        f"\n"
        f"Source: {visit.domain}\n"
        f"Visited: {_format_day(visit)}\n"
        f"\n"
        f"Content preview: {preview}\n"
        f"\n"
        f"This is a basic summary. Enable AI for detailed insights!\n"
        f"Get an API key: {signup_url}"
    )


def daily_summary(
    visits: Sequence[PageVisit],
    date: str,
    signup_url: str = DEFAULT_SIGNUP_URL,
) -> DailySummary:
    learning = [v for v in visits if v.is_learning_content]
    domains = distinct_domains(visits)
    top = domains[:DAILY_DOMAIN_LIMIT]

    domain_lines = "\n".join(f"- {d}" for d in top)
    recent_lines = "\n".join(
        f"- {v.title} ({v.domain})" for v in learning[-RECENT_LEARNING_LIMIT:]
    )
    text = (
        f"Daily learning summary for {date}\n"
        f"\n"
        f"Statistics:\n"
        f"- Total pages visited: {len(visits)}\n"
        f"- Learning content: {len(learning)}\n"
        f"- Unique domains: {len(domains)}\n"
        f"\n"
        f"Top domains visited:\n"
        f"{domain_lines}\n"
        f"\n"
        f"Recent learning content:\n"
        f"{recent_lines}\n"
        f"\n"
        f"This is a basic summary. Enable AI for detailed insights and recommendations!\n"
        f"Get an API key: {signup_url}"
    )

    return DailySummary(
        date=date,
        summary=text,
        key_topics=top[:MAX_KEY_TOPICS],
        insights=[FALLBACK_INSIGHT],
        total_visits=len(visits),
        learning_visits=len(learning),
        top_domains=top[:MAX_TOP_DOMAINS],
        is_ai_generated=False,
    )


def empty_daily_summary(date: str) -> DailySummary:
    return DailySummary(date=date, summary=NO_CONTENT_DAILY_SUMMARY)


def keyword_topics(content: str, limit: int = MAX_KEY_TOPICS) -> list[str]:
    """Most frequent words longer than four characters.

    Ties keep first-encountered order.
    """
    words = _NON_WORD.sub(" ", content.lower()).split()
    counts = Counter(w for w in words if len(w) >= KEYWORD_MIN_LENGTH)
    # Counter keeps insertion order and most_common sorts stably
    return [word for word, _ in counts.most_common(limit)]


def _format_day(visit: PageVisit) -> str:
    try:
        visited = visit.visited_at
    except (ValueError, OverflowError):
        return visit.timestamp
    return f"{visited.month}/{visited.day}/{visited.year}"
