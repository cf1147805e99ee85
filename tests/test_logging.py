"""Logging coverage to ensure progress and problems are surfaced."""
import logging
from pathlib import Path

from jobsheet.core.logging import configure_logging
from jobsheet.processing import run_pipeline


def test_configure_logging_reads_env_level(monkeypatch):
    captured = {}
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    configure_logging()

    assert captured["level"] == "DEBUG"
    assert "%(name)s" in captured["format"]


def test_configure_logging_argument_beats_env(monkeypatch):
    captured = {}
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    configure_logging("warning")

    assert captured["level"] == "WARNING"


def test_engine_logs_debug_summary(engine, caplog):
    caplog.set_level("DEBUG", logger="jobsheet")

    engine.extract("Acme\nTape 3\nBags 4")

    assert "Extracted record from 3 lines with 2 items" in caplog.messages
    assert any("client resolved by rule first_line" in m for m in caplog.messages)


def test_pipeline_logs_summary_and_quality_warnings(tmp_path: Path, transcripts_dir: Path, engine, caplog):
    caplog.set_level("INFO")

    run_pipeline(transcripts_dir, tmp_path / "records.csv", engine=engine)

    assert any("Wrote CSV output" in message for message in caplog.messages)
    assert any("Quality issues for sheet_02.txt" in message for message in caplog.messages)
