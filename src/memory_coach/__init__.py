"""Page-visit summarization with pluggable LLM providers and template fallback."""

from memory_coach.config import SummarizerConfig
from memory_coach.summarization import SummarizationService
from memory_coach.visits import DailySummary, PageVisit, SummaryResult, VisitStore, parse_visit

__all__ = [
    "SummarizerConfig",
    "SummarizationService",
    "DailySummary",
    "PageVisit",
    "SummaryResult",
    "VisitStore",
    "parse_visit",
]
