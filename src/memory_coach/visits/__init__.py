"""Page visit records, parsing and in-memory storage."""

from memory_coach.visits.models import DailySummary, PageVisit, SummaryResult
from memory_coach.visits.parser import derive_domain, parse_visit
from memory_coach.visits.store import VisitStore

__all__ = [
    "DailySummary",
    "PageVisit",
    "SummaryResult",
    "derive_domain",
    "parse_visit",
    "VisitStore",
]
