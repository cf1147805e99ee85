"""Sinks for exporting flattened job records."""
import csv
from pathlib import Path
from typing import Any, Dict, Iterable, List

from openpyxl import Workbook

from jobsheet.reporting.templates import ITEM_HEADERS, TEMPLATE_HEADERS


def ensure_output_dir(output_path: Path) -> None:
    """Create parent folders for sink outputs when missing."""

    output_path.parent.mkdir(parents=True, exist_ok=True)


def write_csv(rows: Iterable[Dict[str, Any]], output_path: Path) -> None:
    """Write job record rows to a CSV file with consistent headers."""

    rows = list(rows)
    ensure_output_dir(output_path)
    if not rows:
        return

    with output_path.open("w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=TEMPLATE_HEADERS)
        writer.writeheader()
        writer.writerows(rows)


def _fill_sheet(sheet, headers: List[str], rows: List[Dict[str, Any]]) -> None:
    sheet.append(headers)
    sheet.freeze_panes = "A2"
    for row in rows:
        sheet.append([row.get(header, "") for header in headers])


def write_workbook(
    job_rows: Iterable[Dict[str, Any]],
    item_rows: Iterable[Dict[str, Any]],
    output_path: Path,
) -> None:
    """Write a workbook with a ``job_records`` summary sheet and an ``items`` sheet.

    The items sheet holds one row per line item so quantities stay numeric-looking
    cells instead of being folded into the summary's ``Items`` text.
    """

    job_rows = list(job_rows)
    if not job_rows:
        return

    ensure_output_dir(output_path)
    workbook = Workbook()
    jobs_sheet = workbook.active
    jobs_sheet.title = "job_records"
    _fill_sheet(jobs_sheet, TEMPLATE_HEADERS, job_rows)
    _fill_sheet(workbook.create_sheet("items"), ITEM_HEADERS, list(item_rows))
    workbook.save(output_path)
