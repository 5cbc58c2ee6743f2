"""
Digest rendering.

This module renders the per-source results into a single static HTML page
using a Jinja2 template.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..core.types import SourceResult


TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(["html"]),
    )


def render_digest_html(
    results: Sequence[SourceResult],
    title: str = "toal news",
    generated_at: datetime | None = None,
) -> str:
    """Render the digest page as a string.

    Args:
        results: One result per source, in display order
        title: Site title shown in the header
        generated_at: Build time shown on the page, defaults to local now

    Returns:
        The complete HTML document
    """
    now = generated_at or datetime.now()
    template = _environment().get_template("digest.html")
    return template.render(
        title=title,
        date=now.strftime("%Y/%m/%d"),
        timestamp=now.strftime("%Y/%m/%d %H:%M"),
        results=results,
        total=sum(len(result.articles) for result in results),
    )


def render_digest(
    results: Sequence[SourceResult],
    output_path: Path,
    title: str = "toal news",
    generated_at: datetime | None = None,
) -> Path:
    """Render the digest and write it to output_path.

    Parent directories are created as needed.

    Returns:
        The path that was written
    """
    html = render_digest_html(results, title=title, generated_at=generated_at)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
    return output_path
