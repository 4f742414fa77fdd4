"""Data models for page visits and the summaries derived from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

import dateutil.parser


def now_iso() -> str:
    return datetime.now().astimezone().isoformat()


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 string, falling back to dateutil's free-form parser.

    Raises ValueError (or OverflowError) when neither can read it.
    """
    try:
        return dateutil.parser.isoparse(value)
    except ValueError:
        return dateutil.parser.parse(value)


def to_local_naive(value: str | datetime) -> datetime:
    """Parse a timestamp and express it as naive local time.

    Naive inputs are taken as local already; aware inputs are converted.
    """
    dt = parse_timestamp(value) if isinstance(value, str) else value
    if dt.tzinfo is None:
        return dt
    return dt.astimezone().replace(tzinfo=None)


@dataclass
class PageVisit:
    """One recorded browsing event.

    Only ``ai_summary``/``summarized_at`` change after creation, and only via
    ``attach_summary``. Two concurrent summarizations of the same visit are
    last-write-wins.
    """

    id: str
    url: str
    title: str
    domain: str = ""
    timestamp: str = field(default_factory=now_iso)
    text_content: str = ""
    meta_description: str = ""
    is_learning_content: bool = False
    created_at: str = field(default_factory=now_iso)
    ai_summary: str | None = None
    summarized_at: str | None = None

    @property
    def visited_at(self) -> datetime:
        """Visit time as naive local datetime."""
        return to_local_naive(self.timestamp)

    @property
    def has_summary(self) -> bool:
        return self.ai_summary is not None

    def attach_summary(self, summary: str, when: str | None = None) -> None:
        self.ai_summary = summary
        self.summarized_at = when or now_iso()


@dataclass
class DailySummary:
    """Aggregate report over one day's visits. Derived, never stored."""

    date: str
    summary: str
    key_topics: list[str] = field(default_factory=list)  # at most 5
    insights: list[str] = field(default_factory=list)
    total_visits: int = 0
    learning_visits: int = 0
    top_domains: list[str] = field(default_factory=list)  # at most 3
    generated_at: str = field(default_factory=now_iso)
    is_ai_generated: bool = False
    provider: str | None = None  # set only when is_ai_generated


@dataclass
class SummaryResult:
    """Page summary text tagged with whether it came from the fallback path."""

    text: str
    degraded: bool = False
    reason: str | None = None  # why the fallback was used
    provider: str | None = None
