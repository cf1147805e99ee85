"""Command line entry point for single transcripts and batch runs."""
import argparse
import json
import sys
from pathlib import Path

from jobsheet.core.logging import configure_logging
from jobsheet.core.utils import read_text
from jobsheet.extraction.config import ExtractionConfig
from jobsheet.extraction.engine import ExtractionEngine
from jobsheet.processing.pipeline import SINKS, run_pipeline


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with ``extract`` and ``batch`` subcommands."""

    parser = argparse.ArgumentParser(description="Extract job sheet records from OCR text")
    parser.add_argument("--log-level", help="Override the LOG_LEVEL environment variable")
    subcommands = parser.add_subparsers(dest="command", required=True)

    extract = subcommands.add_parser("extract", help="Extract one transcript and print JSON")
    extract.add_argument(
        "transcript",
        help="Path to an OCR transcript, or '-' to read from stdin",
    )

    batch = subcommands.add_parser("batch", help="Extract a directory of transcripts")
    batch.add_argument(
        "--data-dir",
        type=Path,
        default=Path("transcripts"),
        help="Directory containing .txt OCR transcripts",
    )
    batch.add_argument(
        "--output",
        type=Path,
        default=Path("output/job_records.csv"),
        help="CSV file to write extracted records to",
    )
    batch.add_argument(
        "--sink",
        choices=SINKS,
        default="csv",
        help="Also write an Excel workbook with a per-item sheet when set to excel",
    )
    batch.add_argument(
        "--excel-output",
        type=Path,
        help="Excel file to write when --sink=excel",
    )
    return parser


def _extract(transcript: str) -> None:
    text = sys.stdin.read() if transcript == "-" else read_text(Path(transcript))
    record = ExtractionEngine(config=ExtractionConfig.from_env()).extract(text)
    print(json.dumps(record.to_payload(), indent=2, ensure_ascii=False))


def main(argv: list[str] | None = None) -> None:
    """Entrypoint for running extraction from the command line."""

    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "extract":
        _extract(args.transcript)
        return

    output_path = run_pipeline(
        args.data_dir,
        args.output,
        sink=args.sink,
        excel_path=args.excel_output,
    )
    print(f"Wrote {output_path}")


if __name__ == "__main__":
    main()
