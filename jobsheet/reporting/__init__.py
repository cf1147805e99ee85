"""Row templates and output sinks for extracted job records."""
from jobsheet.reporting.sinks import write_csv, write_workbook
from jobsheet.reporting.templates import (
    ITEM_HEADERS,
    TEMPLATE_HEADERS,
    record_to_item_rows,
    record_to_template_row,
    records_to_item_rows,
    records_to_template_rows,
)

__all__ = [
    "ITEM_HEADERS",
    "TEMPLATE_HEADERS",
    "record_to_item_rows",
    "record_to_template_row",
    "records_to_item_rows",
    "records_to_template_rows",
    "write_csv",
    "write_workbook",
]
