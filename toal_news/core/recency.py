"""
Recency filtering and per-source article selection.

Feeds are heterogeneous about dates: some omit them, some use RFC 822,
others ISO 8601 or something looser. Unknown or unparseable dates count as
recent so that a feed without usable dates is never filtered out entirely.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Sequence

from dateutil import parser as dtparser

from .types import Article


DEFAULT_WINDOW_HOURS = 48
DEFAULT_MAX_ARTICLES = 25
DEFAULT_FALLBACK_COUNT = 20


def parse_date(date_text: str) -> datetime | None:
    """Parse a feed date string into an aware UTC datetime.

    Naive values are assumed to be UTC.

    Returns:
        The parsed datetime, or None when the text is empty or unparseable
    """
    if not date_text or not date_text.strip():
        return None
    try:
        parsed = dtparser.parse(date_text)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None


def is_recent(
    date_text: str,
    window_hours: float = DEFAULT_WINDOW_HOURS,
    now: datetime | None = None,
) -> bool:
    """Return True if the article date falls within the recency window.

    Args:
        date_text: Raw date string from the feed
        window_hours: Size of the window in hours
        now: Reference time, defaults to the current UTC time

    Returns:
        True for empty or unparseable dates, future dates, and dates less
        than window_hours old
    """
    parsed = parse_date(date_text)
    if parsed is None:
        return True
    reference = now or datetime.now(timezone.utc)
    return reference - parsed < timedelta(hours=window_hours)


def select_articles(
    articles: Sequence[Article],
    window_hours: float = DEFAULT_WINDOW_HOURS,
    max_articles: int = DEFAULT_MAX_ARTICLES,
    fallback_count: int = DEFAULT_FALLBACK_COUNT,
    now: datetime | None = None,
) -> list[Article]:
    """Pick the articles to show for one source.

    Recent articles are preferred. When none are recent, the first
    fallback_count articles of the feed are used instead. The result is
    capped at max_articles either way.
    """
    reference = now or datetime.now(timezone.utc)
    recent = [a for a in articles if is_recent(a.date, window_hours, reference)]
    chosen = recent if recent else list(articles[:fallback_count])
    return chosen[:max_articles]
