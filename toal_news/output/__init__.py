"""
Output generation.

This package renders the final digest page.
"""

from .renderer import render_digest, render_digest_html

__all__ = [
    "render_digest",
    "render_digest_html",
]
