"""Load OCR transcripts from disk and run them through the extraction engine."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from jobsheet.core.models import SourcedRecord
from jobsheet.core.utils import read_text
from jobsheet.extraction.engine import ExtractionEngine

logger = logging.getLogger(__name__)

TRANSCRIPT_PATTERN = "*.txt"


def parse_transcript(path: Path, engine: Optional[ExtractionEngine] = None) -> SourcedRecord:
    """Extract a job record from one transcript file."""

    engine = engine or ExtractionEngine()
    return SourcedRecord(source_name=path.name, record=engine.extract(read_text(path)))


def load_transcripts(
    data_dir: Path, engine: Optional[ExtractionEngine] = None
) -> Tuple[List[SourcedRecord], List[str]]:
    """Parse every transcript under ``data_dir`` and collect per-file alerts."""

    engine = engine or ExtractionEngine()
    records: List[SourcedRecord] = []
    alerts: List[str] = []

    logger.info("Loading transcripts from %s", data_dir)

    for transcript_path in sorted(data_dir.glob(TRANSCRIPT_PATTERN)):
        try:
            records.append(parse_transcript(transcript_path, engine))
        except OSError:
            logger.exception("Failed to read transcript %s", transcript_path)
            alerts.append(f"Failed to read transcript {transcript_path.name}")

    logger.info("Loaded %d records", len(records))

    return records, alerts
