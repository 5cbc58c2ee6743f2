"""
toal news - static news digest builder.

This package fetches RSS/Atom feeds from a fixed list of news sources,
keeps the recent entries of each, optionally translates titles, and
renders a single static HTML page.

Main entry point is the CLI via the `toal-news build` command.

Example:
    $ toal-news build -o public/
"""

__all__ = [
    "__version__",
    "Article",
    "Source",
    "SourceResult",
    "SOURCES",
    "parse_feed",
    "run_pipeline",
]
__version__ = "1.0.0"

from .core.types import Article, Source, SourceResult
from .parser.feed import parse_feed
from .runner import run_pipeline
from .sources import SOURCES
