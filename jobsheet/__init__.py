"""Rule-based extraction of structured job sheet records from OCR text."""
from jobsheet.core import (
    JobRecord,
    LineItem,
    SourcedRecord,
    apply_quality_checks,
    configure_logging,
    validate_record,
)
from jobsheet.extraction import ExtractionConfig, ExtractionEngine, extract_record
from jobsheet.ingestion import load_transcripts, parse_transcript
from jobsheet.processing import run_pipeline
from jobsheet.reporting import (
    TEMPLATE_HEADERS,
    record_to_template_row,
    records_to_template_rows,
)

__all__ = [
    "TEMPLATE_HEADERS",
    "ExtractionConfig",
    "ExtractionEngine",
    "JobRecord",
    "LineItem",
    "SourcedRecord",
    "apply_quality_checks",
    "configure_logging",
    "extract_record",
    "load_transcripts",
    "parse_transcript",
    "record_to_template_row",
    "records_to_template_rows",
    "run_pipeline",
    "validate_record",
]
