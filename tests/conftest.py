"""Pytest configuration to make the local package importable without installation."""
import itertools
import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure repository root is on sys.path for module resolution
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from jobsheet.cli import main as cli_main
from jobsheet.extraction import ExtractionEngine

FIXED_TODAY = date(2025, 1, 15)

SAMPLE_SHEET = """Client: Acme Pty Ltd
Job No: J-4521
Contact Name: Sarah Jones
Mobile: 0412 345 678
Address: 12 Pittwater Rd, Brookvale
Date: 03/11/2024
Description: Removal of bonded asbestos sheeting from garage
10kg Asbestos waste
3 x Disposable coveralls
Gloves: 4 pcs
Notes / Variations
Extra sheeting found behind shelving
Client approved additional hour
"""

MESSY_SHEET = "\r\nBeachside Builders\r\r\nRemove old eaves lining\r\nreplace with new sheets\r\n44 Mitchell Rd\r\n"


@pytest.fixture
def sequential_ids():
    """Return an id factory producing item-1, item-2, ..."""

    counter = itertools.count(1)
    return lambda: f"item-{next(counter)}"


@pytest.fixture
def engine(sequential_ids) -> ExtractionEngine:
    """Engine with a fixed clock and deterministic item ids."""

    return ExtractionEngine(clock=lambda: FIXED_TODAY, id_factory=sequential_ids)


@pytest.fixture
def transcripts_dir(tmp_path: Path) -> Path:
    """Create a directory with two OCR transcripts and one unrelated file."""

    data_dir = tmp_path / "transcripts"
    data_dir.mkdir()
    (data_dir / "sheet_01.txt").write_text(SAMPLE_SHEET, encoding="utf-8")
    (data_dir / "sheet_02.txt").write_text(MESSY_SHEET, encoding="utf-8")
    (data_dir / "scan.jpg").write_bytes(b"\xff\xd8\xff")
    return data_dir


@pytest.fixture
def run_cli():
    """Helper to invoke the CLI with custom arguments inside tests."""

    def _run(args: list[str]) -> None:
        cli_main(args)

    return _run
