"""Transcript loading keeps going when single files fail."""
from pathlib import Path

import jobsheet.ingestion.loader as loader
from jobsheet.ingestion import load_transcripts, parse_transcript


def test_load_transcripts_reads_txt_files_in_order(transcripts_dir: Path, engine):
    records, alerts = load_transcripts(transcripts_dir, engine)

    assert alerts == []
    assert [r.source_name for r in records] == ["sheet_01.txt", "sheet_02.txt"]
    assert records[0].record.client == "Acme Pty Ltd"
    assert records[1].record.client == "Beachside Builders"


def test_missing_directory_loads_nothing(tmp_path: Path):
    assert load_transcripts(tmp_path / "missing") == ([], [])


def test_undecodable_bytes_are_replaced(tmp_path: Path, engine):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"Client: Caf\xe9 Co\nTape 3\n")

    sourced = parse_transcript(path, engine)

    assert sourced.record.client.startswith("Caf")
    assert sourced.record.client.endswith(" Co")
    assert sourced.status == "pending_review"


def test_read_failures_are_logged_and_reported(transcripts_dir: Path, engine, caplog, monkeypatch):
    original_read_text = loader.read_text

    def sometimes_failing(path: Path) -> str:
        if path.name == "sheet_02.txt":
            raise PermissionError("locked")
        return original_read_text(path)

    monkeypatch.setattr(loader, "read_text", sometimes_failing)
    caplog.set_level("ERROR")

    records, alerts = load_transcripts(transcripts_dir, engine)

    assert [r.source_name for r in records] == ["sheet_01.txt"]
    assert alerts == ["Failed to read transcript sheet_02.txt"]
    assert "sheet_02.txt" in caplog.text
