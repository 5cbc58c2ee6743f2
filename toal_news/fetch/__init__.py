"""
Feed fetching.

This package handles HTTP retrieval of feed documents.
"""

from .fetcher import REDIRECT_STATUSES, build_client, fetch_feed

__all__ = [
    "REDIRECT_STATUSES",
    "build_client",
    "fetch_feed",
]
