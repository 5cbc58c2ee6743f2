"""Tests for YAML configuration loading."""

import pytest

from toal_news.config import AppConfig, load_config


def test_load_config_without_path_returns_defaults():
    cfg = load_config(None)
    assert cfg == AppConfig()
    assert cfg.fetch.timeout_seconds == 15.0
    assert cfg.fetch.max_redirects == 5
    assert cfg.filter.recency_hours == 48
    assert cfg.filter.max_articles == 25
    assert cfg.filter.fallback_count == 20


def test_load_config_returns_independent_instances():
    first = load_config(None)
    first.fetch.concurrency = 1
    assert load_config(None).fetch.concurrency == 4


def test_load_config_merges_partial_sections(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "fetch:\n"
        "  concurrency: 2\n"
        "translate:\n"
        "  target_lang: ko\n"
        "output:\n"
        "  title: My News\n"
        "unknown_section:\n"
        "  x: 1\n",
        encoding="utf-8",
    )
    cfg = load_config(str(path))

    assert cfg.fetch.concurrency == 2
    assert cfg.fetch.timeout_seconds == 15.0
    assert cfg.translate.target_lang == "ko"
    assert cfg.translate.source_lang == "en"
    assert cfg.output.title == "My News"
    assert cfg.output.filename == "index.html"


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == AppConfig()


def test_load_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        load_config(str(path))


def test_load_config_rejects_unknown_keys_in_section(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("fetch:\n  retries: 3\n", encoding="utf-8")
    with pytest.raises(TypeError):
        load_config(str(path))
