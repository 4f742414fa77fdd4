"""Bounded in-memory store of page visits."""

from __future__ import annotations

import logging
from collections import deque
from datetime import date as date_cls, datetime
from typing import Iterator

from memory_coach.exceptions import VisitNotFoundError, VisitValidationError
from memory_coach.visits.models import PageVisit, parse_timestamp, to_local_naive
from memory_coach.visits.parser import parse_visit

logger = logging.getLogger(__name__)

DEFAULT_MAX_VISITS = 1000


class VisitStore:
    """Ring buffer of visits; the oldest visit is evicted once capacity is reached.

    Nothing survives the process. ``clear`` is the only way summaries are removed.
    """

    def __init__(self, max_visits: int = DEFAULT_MAX_VISITS) -> None:
        self.max_visits = max(1, max_visits)
        self._visits: deque[PageVisit] = deque(maxlen=self.max_visits)

    def __len__(self) -> int:
        return len(self._visits)

    def __iter__(self) -> Iterator[PageVisit]:
        return iter(list(self._visits))

    def add(self, visit: PageVisit | dict) -> PageVisit:
        """Record a visit, parsing raw payloads first."""
        if not isinstance(visit, PageVisit):
            visit = parse_visit(visit)
        if len(self._visits) == self.max_visits:
            logger.debug("Visit store full, evicting %s", self._visits[0].id)
        self._visits.append(visit)
        logger.info("New visit recorded: %s (%s)", visit.title, visit.domain)
        return visit

    def get(self, visit_id: str) -> PageVisit:
        for visit in self._visits:
            if visit.id == str(visit_id):
                return visit
        raise VisitNotFoundError(f"Visit not found: {visit_id}")

    def all(self) -> list[PageVisit]:
        return list(self._visits)

    def between(
        self,
        start: str | datetime | None = None,
        end: str | datetime | None = None,
    ) -> list[PageVisit]:
        """Visits whose timestamp falls within [start, end]; either bound may be omitted."""
        lo = to_local_naive(start) if start else None
        hi = to_local_naive(end) if end else None
        out = []
        for visit in self._visits:
            visited = _visit_time(visit)
            if visited is None:
                continue
            if lo and visited < lo:
                continue
            if hi and visited > hi:
                continue
            out.append(visit)
        return out

    def learning(self) -> list[PageVisit]:
        return [v for v in self._visits if v.is_learning_content]

    def with_summaries(self) -> list[PageVisit]:
        return [v for v in self._visits if v.has_summary]

    def on_date(self, day: str | date_cls) -> list[PageVisit]:
        """Visits made on the given calendar day (local time)."""
        if isinstance(day, str):
            try:
                day = parse_timestamp(day).date()
            except (ValueError, OverflowError) as e:
                raise VisitValidationError(f"Invalid date: {day!r}") from e
        elif isinstance(day, datetime):
            day = to_local_naive(day).date()
        return [v for v in self._visits if _visited_on(v, day)]

    def stats(self, today: date_cls | None = None) -> dict:
        today = today or datetime.now().date()
        visits = list(self._visits)
        return {
            "total_visits": len(visits),
            "today_visits": sum(1 for v in visits if _visited_on(v, today)),
            "unique_domains": len({v.domain for v in visits}),
            "learning_content": sum(1 for v in visits if v.is_learning_content),
            "last_visit": visits[-1] if visits else None,
        }

    def clear(self) -> None:
        self._visits.clear()
        logger.info("All visits cleared")


def _visit_time(visit: PageVisit) -> datetime | None:
    """Visit time, or None (with a warning) when the stored timestamp is unreadable."""
    try:
        return visit.visited_at
    except (ValueError, OverflowError):
        logger.warning("Skipping visit %s with unreadable timestamp %r", visit.id, visit.timestamp)
        return None


def _visited_on(visit: PageVisit, day: date_cls) -> bool:
    visited = _visit_time(visit)
    return visited is not None and visited.date() == day
