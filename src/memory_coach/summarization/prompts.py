"""Prompt builders for page, daily and topic requests.

All builders are pure: same input, same prompt, no provider calls.
"""

from __future__ import annotations

from typing import Sequence

from memory_coach.visits.models import PageVisit

PAGE_CONTENT_CHARS = 1500
DIGEST_CONTENT_CHARS = 200
DIGEST_MAX_VISITS = 10
TOPIC_CONTENT_CHARS = 2000

PAGE_SYSTEM_PROMPT = (
    "You are an AI assistant that helps users remember and learn from web content. "
    "Create concise, informative summaries that highlight key learning points."
)

DAILY_SYSTEM_PROMPT = (
    "You are an AI learning coach that analyzes daily web browsing patterns to provide "
    "insights and summaries. Focus on learning content and provide actionable insights."
)

PAGE_PROMPT_TEMPLATE = """Please create a concise summary of this web page content:

Title: {title}
URL: {url}
Content: {content}

Focus on:
- Key learning points
- Main concepts or ideas
- Practical takeaways

Keep the summary under 150 words and make it useful for future reference."""

DAILY_PROMPT_TEMPLATE = """Analyze this day's learning activity and create a comprehensive summary:

Date: {date}
Total visits: {total}
Learning content visits: {learning}

Recent visits:
{digest}

Please provide:
1. A brief summary of the day's learning focus
2. Key topics explored
3. Learning insights or patterns
4. Suggestions for follow-up or deeper learning

Format your response in a structured way that's easy to read and actionable."""

TOPIC_PROMPT_TEMPLATE = (
    "Extract 3-5 key topics or concepts from the following content. "
    "Return only the topics as a comma-separated list:\n\n{content}..."
)


def build_page_prompt(visit: PageVisit) -> str:
    content = visit.text_content[:PAGE_CONTENT_CHARS] if visit.text_content else "No content available"
    return PAGE_PROMPT_TEMPLATE.format(title=visit.title, url=visit.url, content=content)


def build_daily_prompt(visits: Sequence[PageVisit], date: str) -> str:
    learning = sum(1 for v in visits if v.is_learning_content)
    return DAILY_PROMPT_TEMPLATE.format(
        date=date,
        total=len(visits),
        learning=learning,
        digest=_visit_digest(visits),
    )


def build_topic_prompt(content: str) -> str:
    return TOPIC_PROMPT_TEMPLATE.format(content=content[:TOPIC_CONTENT_CHARS])


def _visit_digest(visits: Sequence[PageVisit]) -> str:
    lines = []
    for visit in list(visits)[:DIGEST_MAX_VISITS]:
        if visit.text_content:
            snippet = visit.text_content[:DIGEST_CONTENT_CHARS] + "..."
        else:
            snippet = "No content"
        lines.append(f"- {visit.title} ({visit.domain}): {snippet}")
    return "\n".join(lines)
