"""
Feed parsing for RSS 2.0, RSS 1.0 (RDF) and Atom documents.

RSS flavours are recognized by their <item> records, Atom by <entry>.
Parsing is a total function: a document matching neither format yields
an empty list instead of an error.
"""

from __future__ import annotations

import re

from ..core.types import Article
from .markup import all_blocks, clean_text, decode_entities, first_tag_content, strip_tags


_SPACE_RE = re.compile(r"\s+")


# Ordered alternatives for an Atom entry's link; the first match wins.
ATOM_LINK_PATTERNS = (
    re.compile(
        r"""<link\b[^>]*rel\s*=\s*["']alternate["'][^>]*href\s*=\s*["']([^"']*)["'][^>]*/?>""",
        re.IGNORECASE,
    ),
    re.compile(
        r"""<link\b[^>]*href\s*=\s*["']([^"']*)["'][^>]*rel\s*=\s*["']alternate["'][^>]*/?>""",
        re.IGNORECASE,
    ),
    re.compile(r"""<link\b[^>]*href\s*=\s*["']([^"']*)["'][^>]*/?>""", re.IGNORECASE),
)

RSS_DATE_TAGS = ("pubDate", "dc:date")
ATOM_DATE_TAGS = ("published", "updated")


def parse_feed(xml: str) -> list[Article]:
    """Parse a feed document into articles in document order.

    Args:
        xml: The raw feed text

    Returns:
        Articles with a non-empty title and link. Records missing either
        are skipped.
    """
    items = all_blocks(xml, "item")
    if items:
        return [article for article in map(_parse_item, items) if article is not None]

    entries = all_blocks(xml, "entry")
    return [article for article in map(_parse_entry, entries) if article is not None]


def _parse_item(block: str) -> Article | None:
    title = clean_text(first_tag_content(block, "title"))
    link = _first_line(strip_tags(first_tag_content(block, "link")))
    date = clean_text(_first_non_empty(block, RSS_DATE_TAGS))
    if not title or not link:
        return None
    return Article(title=title, url=link, date=date)


def _parse_entry(block: str) -> Article | None:
    title = clean_text(first_tag_content(block, "title"))
    link = _atom_link(block)
    date = clean_text(_first_non_empty(block, ATOM_DATE_TAGS))
    if not title or not link:
        return None
    return Article(title=title, url=link, date=date)


def _atom_link(block: str) -> str:
    for pattern in ATOM_LINK_PATTERNS:
        match = pattern.search(block)
        if match:
            return decode_entities(match.group(1))
    return ""


def _first_line(text: str) -> str:
    # Some feeds put trailing junk on following lines inside <link>.
    lines = text.strip().splitlines()
    return _SPACE_RE.sub(" ", lines[0]).strip() if lines else ""


def _first_non_empty(block: str, tags: tuple[str, ...]) -> str:
    for tag in tags:
        content = first_tag_content(block, tag)
        if content:
            return content
    return ""
