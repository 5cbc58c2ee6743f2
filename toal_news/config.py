"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- FetchConfig: HTTP feed fetching settings
- FilterConfig: Recency window and per-source article caps
- TranslateConfig: Title translation settings
- OutputConfig: Digest output settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml


@dataclass
class FetchConfig:
    """Configuration for HTTP feed fetching.

    Attributes:
        timeout_seconds: Per-attempt timeout, reset on every redirect hop
        max_redirects: Maximum number of redirects followed per feed
        concurrency: Maximum number of sources processed at once (1 = sequential)
        user_agent: HTTP User-Agent header string
        accept: HTTP Accept header favoring feed content types
        trust_env: Whether to respect system proxy settings
    """

    timeout_seconds: float = 15.0
    max_redirects: int = 5
    concurrency: int = 4
    user_agent: str = "toal newsBot/1.0"
    accept: str = "application/rss+xml, application/atom+xml, text/xml, */*"
    trust_env: bool = True


@dataclass
class FilterConfig:
    """Configuration for per-source article selection.

    Attributes:
        recency_hours: Articles newer than this many hours count as recent
        max_articles: Hard cap on articles shown per source
        fallback_count: Articles taken from the unfiltered feed when none are recent
    """

    recency_hours: float = 48
    max_articles: int = 25
    fallback_count: int = 20


@dataclass
class TranslateConfig:
    """Configuration for title translation.

    Attributes:
        enabled: Whether sources flagged for translation get translated
        provider: Translator backend name ("google" or "none")
        source_lang: Language code of the original titles
        target_lang: Language code to translate into
        endpoint: Translation endpoint URL
        timeout_seconds: Timeout for each translation request
    """

    enabled: bool = True
    provider: str = "google"
    source_lang: str = "en"
    target_lang: str = "ja"
    endpoint: str = "https://translate.googleapis.com/translate_a/single"
    timeout_seconds: float = 15.0


@dataclass
class OutputConfig:
    """Configuration for digest output.

    Attributes:
        dir: Directory the digest is written to
        filename: Name of the HTML file
        title: Site title shown in the page header
    """

    dir: str = "public"
    filename: str = "index.html"
    title: str = "toal news"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to a file in the output directory
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "build.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    fetch: FetchConfig = field(default_factory=FetchConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)
    translate: TranslateConfig = field(default_factory=TranslateConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults.

    Args:
        path: Path to a YAML file, or None for defaults only

    Returns:
        A fresh AppConfig; callers may mutate it freely
    """
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig.

    Unknown top-level sections are ignored; values inside a known section
    replace the defaults key by key.
    """
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict):
            data[key].update(value)
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "fetch": {
            "timeout_seconds": cfg.fetch.timeout_seconds,
            "max_redirects": cfg.fetch.max_redirects,
            "concurrency": cfg.fetch.concurrency,
            "user_agent": cfg.fetch.user_agent,
            "accept": cfg.fetch.accept,
            "trust_env": cfg.fetch.trust_env,
        },
        "filter": {
            "recency_hours": cfg.filter.recency_hours,
            "max_articles": cfg.filter.max_articles,
            "fallback_count": cfg.filter.fallback_count,
        },
        "translate": {
            "enabled": cfg.translate.enabled,
            "provider": cfg.translate.provider,
            "source_lang": cfg.translate.source_lang,
            "target_lang": cfg.translate.target_lang,
            "endpoint": cfg.translate.endpoint,
            "timeout_seconds": cfg.translate.timeout_seconds,
        },
        "output": {
            "dir": cfg.output.dir,
            "filename": cfg.output.filename,
            "title": cfg.output.title,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        fetch=FetchConfig(**data["fetch"]),
        filter=FilterConfig(**data["filter"]),
        translate=TranslateConfig(**data["translate"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )
