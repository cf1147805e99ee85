"""Batch orchestration: transcripts in, quality-checked spreadsheet rows out."""
import logging
from pathlib import Path

from jobsheet.core.quality import apply_quality_checks
from jobsheet.extraction.config import ExtractionConfig
from jobsheet.extraction.engine import ExtractionEngine
from jobsheet.ingestion.loader import load_transcripts
from jobsheet.reporting.sinks import write_csv, write_workbook
from jobsheet.reporting.templates import records_to_item_rows, records_to_template_rows

SINKS = ("csv", "excel")


logger = logging.getLogger(__name__)


def run_pipeline(
    data_dir: Path,
    output_path: Path,
    sink: str = "csv",
    excel_path: Path | None = None,
    engine: ExtractionEngine | None = None,
) -> Path:
    """Extract every transcript, add quality statuses, and emit a CSV summary.

    With ``sink="excel"`` a workbook holding the summary and a per-item sheet is
    written next to the CSV, or to ``excel_path`` when given.
    """

    if sink not in SINKS:
        raise ValueError(f"Unknown sink {sink!r}; expected one of {', '.join(SINKS)}")

    logger.info("Pipeline starting for data dir %s", data_dir)
    engine = engine or ExtractionEngine(config=ExtractionConfig.from_env())
    raw_records, alerts = load_transcripts(data_dir, engine)
    if alerts:
        logger.warning("Encountered %d ingestion alerts during loading", len(alerts))
        for alert in alerts:
            logger.warning("Alert: %s", alert)

    if not raw_records:
        message = (
            f"No transcripts found under {data_dir}. "
            "Verify the directory exists and includes .txt OCR transcripts."
        )
        logger.error(message)
        raise ValueError(message)

    records = apply_quality_checks(raw_records, engine.config.min_phone_digits)
    needs_review = sum(1 for record in records if record.status == "needs_review")
    logger.info("Annotated %d records, %d need review", len(records), needs_review)
    rows = records_to_template_rows(records)
    write_csv(rows, output_path)
    logger.info("Wrote CSV output to %s", output_path)

    if sink == "excel":
        excel_target = excel_path or output_path.with_suffix(".xlsx")
        write_workbook(rows, records_to_item_rows(records), excel_target)
        logger.info("Wrote Excel output to %s", excel_target)
    return output_path
