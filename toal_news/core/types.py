"""
Core data types for toal news.

This module defines the records that flow through the build:
- Source: Static configuration for one news feed origin
- Article: One normalized entry extracted from a feed
- SourceResult: Outcome of processing one Source (articles or error)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Source:
    """A configured news feed origin.

    Attributes:
        id: Unique identifier, also used as the HTML anchor in the digest
        name: Display name of the site
        url: Canonical site URL
        feed_url: RSS/Atom feed URL
        translate: Whether article titles should be translated
    """
    id: str
    name: str
    url: str
    feed_url: str
    translate: bool = False


@dataclass(frozen=True)
class Article:
    """One entry extracted from a feed.

    Attributes:
        title: Cleaned, human-readable headline (never empty)
        url: Link to the article (never empty)
        date: Raw date string from the feed, empty when the feed has none
        original_title: Pre-translation title, set only when translation was attempted
    """
    title: str
    url: str
    date: str = ""
    original_title: str | None = None


@dataclass(frozen=True)
class SourceResult:
    """Outcome of running the pipeline for one source.

    Either error is None (success, articles may still be empty) or error
    holds a message and articles is empty.

    Attributes:
        source: The Source this result belongs to
        articles: Selected articles, capped and possibly translated
        error: Failure message, None on success
    """
    source: Source
    articles: tuple[Article, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def id(self) -> str:
        return self.source.id

    @property
    def name(self) -> str:
        return self.source.name
