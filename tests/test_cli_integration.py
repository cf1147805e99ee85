"""Integration-style tests that exercise the CLI entrypoint."""
import csv
import io
import json
import sys
from pathlib import Path

import pytest
from openpyxl import load_workbook

from conftest import SAMPLE_SHEET


def test_cli_extract_prints_payload(tmp_path: Path, run_cli, capsys):
    transcript = tmp_path / "sheet.txt"
    transcript.write_text(SAMPLE_SHEET, encoding="utf-8")

    run_cli(["extract", str(transcript)])

    payload = json.loads(capsys.readouterr().out)
    assert payload["client"] == "Acme Pty Ltd"
    assert payload["contactNumber"] == "0412345678"
    assert payload["jobId"] == "J-4521"
    assert [item["quantity"] for item in payload["items"]] == ["10 kg", "3", "4"]


def test_cli_extract_reads_stdin(run_cli, capsys, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("Client: Stdin Co\r\nQty 2 Masks"))

    run_cli(["extract", "-"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["client"] == "Stdin Co"
    assert payload["items"][0]["description"] == "Masks"


def test_cli_batch_writes_csv(tmp_path: Path, transcripts_dir: Path, run_cli, capsys):
    csv_output = tmp_path / "records.csv"

    run_cli(["batch", "--data-dir", str(transcripts_dir), "--output", str(csv_output)])

    with csv_output.open(encoding="utf-8") as fh:
        rows = list(csv.DictReader(fh))
    assert len(rows) == 2
    assert f"Wrote {csv_output}" in capsys.readouterr().out


def test_cli_batch_writes_excel_workbook(tmp_path: Path, transcripts_dir: Path, run_cli):
    excel_output = tmp_path / "jobs.xlsx"

    run_cli(
        [
            "batch",
            "--data-dir",
            str(transcripts_dir),
            "--output",
            str(tmp_path / "records.csv"),
            "--sink",
            "excel",
            "--excel-output",
            str(excel_output),
        ]
    )

    workbook = load_workbook(excel_output)
    assert workbook.sheetnames == ["job_records", "items"]
    assert workbook["items"].max_row - 1 == 3


def test_cli_rejects_removed_sinks(run_cli):
    with pytest.raises(SystemExit):
        run_cli(["batch", "--sink", "sheets"])


def test_cli_requires_a_command(run_cli):
    with pytest.raises(SystemExit):
        run_cli([])
