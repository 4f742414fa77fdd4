"""Page and daily summarization with provider fallback."""

from memory_coach.summarization.fallback import keyword_topics
from memory_coach.summarization.prompts import build_daily_prompt, build_page_prompt, build_topic_prompt
from memory_coach.summarization.response_parser import extract_insights, parse_daily_response
from memory_coach.summarization.service import SummarizationService

__all__ = [
    "SummarizationService",
    "build_daily_prompt",
    "build_page_prompt",
    "build_topic_prompt",
    "extract_insights",
    "keyword_topics",
    "parse_daily_response",
]
