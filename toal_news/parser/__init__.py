"""
Feed parsing.

This package turns raw RSS/Atom text into Article records using relaxed
pattern matching rather than a validating XML parser.
"""

from .feed import parse_feed
from .markup import all_blocks, clean_text, decode_entities, first_tag_content, strip_tags

__all__ = [
    "parse_feed",
    "all_blocks",
    "clean_text",
    "decode_entities",
    "first_tag_content",
    "strip_tags",
]
