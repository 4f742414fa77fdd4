"""Normalize raw visit payloads (extension JSON) into PageVisit records."""

from __future__ import annotations

import uuid
from urllib.parse import urlparse

from memory_coach.exceptions import VisitValidationError
from memory_coach.visits.models import PageVisit, now_iso, parse_timestamp

# snake_case field -> camelCase key sent by the browser extension
_CAMEL_KEYS = {
    "text_content": "textContent",
    "meta_description": "metaDescription",
    "is_learning_content": "isLearningContent",
    "ai_summary": "aiSummary",
    "summarized_at": "summarizedAt",
    "created_at": "createdAt",
}


def parse_visit(
    raw: dict,
    max_url_length: int = 2000,
    max_title_length: int = 300,
) -> PageVisit:
    """Build a PageVisit from one raw payload; raises VisitValidationError if url/title are missing."""
    url = (_get(raw, "url") or "").strip()
    title = (_get(raw, "title") or "").strip()
    if not url or not title:
        raise VisitValidationError("URL and title are required")
    if len(url) > max_url_length:
        url = url[:max_url_length]
    if len(title) > max_title_length:
        title = title[:max_title_length]

    domain = (_get(raw, "domain") or "").strip().lower() or derive_domain(url)

    timestamp = _get(raw, "timestamp") or now_iso()
    try:
        parse_timestamp(timestamp)
    except (ValueError, OverflowError, TypeError) as e:
        raise VisitValidationError(f"Invalid timestamp: {timestamp!r}") from e

    visit_id = _get(raw, "id")
    return PageVisit(
        id=str(visit_id) if visit_id not in (None, "") else uuid.uuid4().hex,
        url=url,
        title=title,
        domain=domain,
        timestamp=timestamp,
        text_content=_get(raw, "text_content") or "",
        meta_description=_get(raw, "meta_description") or "",
        is_learning_content=bool(_get(raw, "is_learning_content")),
        created_at=_get(raw, "created_at") or now_iso(),
        ai_summary=_get(raw, "ai_summary"),
        summarized_at=_get(raw, "summarized_at"),
    )


def derive_domain(url: str) -> str:
    """Host part of a URL, lower-cased with any leading ``www.`` removed."""
    parsed = urlparse(url)
    domain = (parsed.hostname or "").strip().lower()
    if domain.startswith("www."):
        domain = domain[4:]
    return domain


def _get(raw: dict, key: str):
    if key in raw:
        return raw[key]
    camel = _CAMEL_KEYS.get(key)
    return raw.get(camel) if camel else None
