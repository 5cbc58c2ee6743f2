"""Tests for the typer command-line interface."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from toal_news import cli
from toal_news.sources import SOURCES, get_sources


runner = CliRunner()


def test_build_passes_options_to_pipeline(tmp_path, monkeypatch):
    captured = {}

    def fake_run_pipeline(output_dir, cfg, source_ids=None, show_progress=True, console=None):
        captured.update(
            output_dir=output_dir,
            cfg=cfg,
            source_ids=source_ids,
            show_progress=show_progress,
        )
        path = Path(output_dir) / "index.html"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("<html></html>", encoding="utf-8")
        return path

    monkeypatch.setattr(cli, "run_pipeline", fake_run_pipeline)
    result = runner.invoke(
        cli.app,
        [
            "build",
            "-o",
            str(tmp_path / "out"),
            "-s",
            "nhk",
            "-s",
            "zenn",
            "--concurrency",
            "1",
            "--no-translate",
            "--no-progress",
            "--log-level",
            "DEBUG",
        ],
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "out" / "index.html").exists()
    assert captured["source_ids"] == ["nhk", "zenn"]
    assert captured["show_progress"] is False
    assert captured["cfg"].fetch.concurrency == 1
    assert captured["cfg"].translate.enabled is False
    assert captured["cfg"].logging.level == "DEBUG"


def test_build_rejects_unknown_source(monkeypatch):
    monkeypatch.setattr(cli, "run_pipeline", lambda *args, **kwargs: pytest.fail("should not run"))
    result = runner.invoke(cli.app, ["build", "-s", "nope", "--no-progress"])
    assert result.exit_code != 0


def test_sources_command_lists_table():
    result = runner.invoke(cli.app, ["sources"])
    assert result.exit_code == 0
    assert "nhk" in result.output


def test_source_ids_are_unique():
    ids = [source.id for source in SOURCES]
    assert len(ids) == len(set(ids))


def test_get_sources_keeps_table_order():
    assert [s.id for s in get_sources(["zenn", "nhk"])] == ["nhk", "zenn"]


def test_get_sources_unknown_id():
    with pytest.raises(KeyError):
        get_sources(["missing"])
