"""
Main pipeline orchestration for toal news.

This module coordinates the build:
1. Fetch each source's feed
2. Parse entries into articles
3. Select recent articles (with fallback) and cap them
4. Translate titles for sources flagged for translation
5. Render the digest page

Each source runs in isolation: a failing feed yields a SourceResult with an
error message and never aborts the other sources.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Iterable, Sequence

import httpx
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
)

from .config import AppConfig
from .core.recency import select_articles
from .core.types import Source, SourceResult
from .errors import FetchError
from .fetch.fetcher import build_client, fetch_feed
from .logging_utils import log_event, setup_logging
from .output.renderer import render_digest
from .parser.feed import parse_feed
from .sources import get_sources
from .translate import Translator, create_translator, translate_articles


@dataclass
class BuildStats:
    """Statistics collected while processing sources.

    Attributes:
        total: Number of sources processed
        ok: Sources fetched and parsed successfully
        failed: Sources that ended with an error
        articles: Articles kept across all sources
    """
    total: int = 0
    ok: int = 0
    failed: int = 0
    articles: int = 0

    @classmethod
    def from_results(cls, results: Sequence[SourceResult]) -> BuildStats:
        ok = sum(1 for result in results if result.ok)
        return cls(
            total=len(results),
            ok=ok,
            failed=len(results) - ok,
            articles=sum(len(result.articles) for result in results),
        )


async def run_source(
    source: Source,
    client: httpx.AsyncClient,
    cfg: AppConfig,
    translator: Translator | None = None,
    logger: logging.Logger | None = None,
) -> SourceResult:
    """Run fetch, parse, selection and translation for one source.

    Never raises for feed problems: fetch failures and unexpected errors are
    returned as a SourceResult with an error message and no articles.
    """
    log_event(logger, f"Fetching {source.name}", event="source_start", source=source.id)
    try:
        xml = await fetch_feed(client, source.feed_url, max_redirects=cfg.fetch.max_redirects)
        articles = select_articles(
            parse_feed(xml),
            window_hours=cfg.filter.recency_hours,
            max_articles=cfg.filter.max_articles,
            fallback_count=cfg.filter.fallback_count,
        )
        if source.translate and translator is not None:
            log_event(
                logger,
                f"Translating {len(articles)} articles from {source.name}",
                event="translate_start",
                source=source.id,
                count=len(articles),
            )
            articles = await translate_articles(articles, translator, logger)
    except FetchError as exc:
        log_event(
            logger,
            f"{source.name} failed: {exc}",
            level=logging.ERROR,
            event="source_failed",
            source=source.id,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return SourceResult(source=source, articles=(), error=str(exc))
    except Exception as exc:  # noqa: BLE001
        if logger is not None:
            logger.exception(
                "%s failed unexpectedly",
                source.name,
                extra={"event": "source_failed", "source": source.id},
            )
        return SourceResult(source=source, articles=(), error=f"{type(exc).__name__}: {exc}")

    log_event(
        logger,
        f"{source.name}: {len(articles)} articles",
        event="source_ok",
        source=source.id,
        count=len(articles),
    )
    return SourceResult(source=source, articles=tuple(articles), error=None)


async def run_sources(
    sources: Iterable[Source],
    cfg: AppConfig,
    translator: Translator | None = None,
    client: httpx.AsyncClient | None = None,
    logger: logging.Logger | None = None,
    progress: Progress | None = None,
    task_id: int | None = None,
) -> list[SourceResult]:
    """Process all sources concurrently, bounded by cfg.fetch.concurrency.

    With a concurrency of 1 the sources run one after another. Results are
    returned in the same order as sources.
    """
    owns_client = client is None
    http = client or build_client(cfg.fetch)
    semaphore = asyncio.Semaphore(max(1, cfg.fetch.concurrency))

    async def _run_one(source: Source) -> SourceResult:
        async with semaphore:
            result = await run_source(source, http, cfg, translator, logger)
        if progress is not None and task_id is not None:
            progress.advance(task_id, 1)
        return result

    try:
        # gather() preserves input order, which keeps the page layout stable.
        return list(await asyncio.gather(*(_run_one(source) for source in sources)))
    finally:
        if owns_client:
            await http.aclose()


async def _build_async(
    sources: Sequence[Source],
    cfg: AppConfig,
    logger: logging.Logger,
    progress: Progress | None = None,
    task_id: int | None = None,
) -> list[SourceResult]:
    translator = create_translator(cfg.translate)
    try:
        return await run_sources(
            sources, cfg, translator=translator, logger=logger, progress=progress, task_id=task_id
        )
    finally:
        if translator is not None:
            await translator.aclose()


def run_pipeline(
    output_dir: Path,
    cfg: AppConfig,
    source_ids: Sequence[str] | None = None,
    show_progress: bool = True,
    console: Console | None = None,
) -> Path:
    """Build the digest and write it to output_dir.

    Args:
        output_dir: Directory for the generated page (created if missing)
        cfg: Application configuration
        source_ids: Optional subset of source ids to build
        show_progress: Whether to display a progress bar
        console: Rich console for output (creates default if None)

    Returns:
        Path to the generated HTML file
    """
    console = console or Console()
    sources = get_sources(source_ids)
    logger = setup_logging(cfg.logging, output_dir)
    log_event(
        logger,
        "Build start",
        event="build_start",
        output=str(output_dir),
        sources=len(sources),
    )

    if show_progress:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console,
            transient=True,
        ) as progress:
            task_id = progress.add_task("Fetching feeds", total=len(sources))
            results = asyncio.run(_build_async(sources, cfg, logger, progress, task_id))
    else:
        results = asyncio.run(_build_async(sources, cfg, logger))

    output_path = render_digest(
        results, output_dir / cfg.output.filename, title=cfg.output.title
    )
    stats = BuildStats.from_results(results)
    log_event(
        logger,
        "Digest written",
        event="digest_written",
        path=str(output_path),
        articles=stats.articles,
        sources_ok=stats.ok,
        sources_failed=stats.failed,
    )
    _render_build_stats(stats, console)
    return output_path


def _render_build_stats(stats: BuildStats, console: Console) -> None:
    """Display build statistics to the console."""
    console.print(
        f"{stats.articles} articles from {stats.ok}/{stats.total} sources"
        + (f" ([red]{stats.failed} failed[/red])" if stats.failed else "")
    )
