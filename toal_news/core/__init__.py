"""
Core domain models and business logic.

This package contains data types and filtering logic that is
independent of any specific pipeline stage.
"""

from .types import Article, Source, SourceResult
from .recency import is_recent, parse_date, select_articles

__all__ = [
    "Article",
    "Source",
    "SourceResult",
    "is_recent",
    "parse_date",
    "select_articles",
]
