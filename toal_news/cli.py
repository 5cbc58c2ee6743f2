"""
Command-line interface for toal news.

Uses Typer to provide a CLI with options for the main configuration
settings. Supports loading .env files for proxy and endpoint settings.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .config import load_config
from .runner import run_pipeline
from .sources import SOURCES, get_sources

try:
    from dotenv import load_dotenv
except Exception:  # noqa: BLE001
    load_dotenv = None

app = typer.Typer(add_completion=False)
console = Console()


@app.command()
def build(
    output: Path | None = typer.Option(None, "--output", "-o", help="Output directory."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, readable=True),
    source: list[str] | None = typer.Option(
        None, "--source", "-s", help="Only build the given source id (repeatable)."
    ),
    concurrency: int | None = typer.Option(
        None, "--concurrency", min=1, help="Sources fetched at once (1 = sequential)."
    ),
    translate: bool = typer.Option(True, "--translate/--no-translate"),
    progress: bool = typer.Option(True, "--progress/--no-progress"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Fetch every source and write the digest page.

    Args:
        output: Directory for the generated page (defaults to output.dir)
        config: Optional path to YAML config file
        source: Restrict the build to these source ids
        concurrency: Maximum number of sources processed at once
        translate: Enable/disable title translation
        progress: Whether to show a progress bar
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Enable/disable file logging
    """
    if load_dotenv is not None:
        load_dotenv()

    cfg = load_config(str(config) if config else None)

    if concurrency is not None:
        cfg.fetch.concurrency = concurrency
    if not translate:
        cfg.translate.enabled = False
    if log_level:
        cfg.logging.level = log_level
    if log_file is not None:
        cfg.logging.file = log_file

    if source:
        try:
            get_sources(source)
        except KeyError as exc:
            raise typer.BadParameter(str(exc.args[0]), param_hint="--source") from exc

    output_path = run_pipeline(
        output or Path(cfg.output.dir),
        cfg,
        source_ids=source or None,
        show_progress=progress,
        console=console,
    )
    console.print(f"Digest generated: {output_path}")


@app.command("sources")
def list_sources():
    """List the configured news sources."""
    table = Table("id", "name", "feed", "translate")
    for src in SOURCES:
        table.add_row(src.id, src.name, src.feed_url, "yes" if src.translate else "")
    console.print(table)


if __name__ == "__main__":
    app()
