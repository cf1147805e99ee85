"""Mapping utilities to flatten job records into spreadsheet rows."""
from typing import Any, Dict, Iterable, List

from jobsheet.core.models import LineItem, SourcedRecord


TEMPLATE_HEADERS = [
    "Source",
    "Date",
    "Client",
    "Contact_Name",
    "Contact_Number",
    "Address",
    "Job_ID",
    "Description",
    "Items",
    "Notes",
    "Status",
    "Issues",
]


def _clean_text(value: str | None) -> str:
    if not value:
        return ""
    return " ".join(value.split())


def _format_items(items: Iterable[LineItem]) -> str:
    return "; ".join(_clean_text(f"{item.quantity} {item.description}") for item in items)


def record_to_template_row(sourced: SourcedRecord) -> Dict[str, Any]:
    """Convert a sourced job record into the spreadsheet template dictionary."""

    record = sourced.record
    row = {
        "Source": _clean_text(sourced.source_name),
        "Date": _clean_text(record.date),
        "Client": _clean_text(record.client),
        "Contact_Name": _clean_text(record.contact_name),
        "Contact_Number": record.contact_number,
        "Address": _clean_text(record.address),
        "Job_ID": record.job_id,
        "Description": _clean_text(record.description),
        "Items": _format_items(record.items),
        "Notes": _clean_text(record.notes),
        "Status": sourced.status,
        "Issues": "; ".join(sourced.issues),
    }
    return row


def records_to_template_rows(records: Iterable[SourcedRecord]) -> List[Dict[str, Any]]:
    """Convert an iterable of sourced records into template-aligned rows."""

    return [record_to_template_row(record) for record in records]


ITEM_HEADERS = [
    "Source",
    "Job_ID",
    "Client",
    "Item_ID",
    "Description",
    "Quantity",
    "Unit",
]


def record_to_item_rows(sourced: SourcedRecord) -> List[Dict[str, Any]]:
    """One row per consumed item, keyed back to its job so sheets can be joined."""

    record = sourced.record
    return [
        {
            "Source": _clean_text(sourced.source_name),
            "Job_ID": record.job_id,
            "Client": _clean_text(record.client),
            "Item_ID": item.id,
            "Description": _clean_text(item.description),
            "Quantity": item.quantity,
            "Unit": item.unit,
        }
        for item in record.items
    ]


def records_to_item_rows(records: Iterable[SourcedRecord]) -> List[Dict[str, Any]]:
    return [row for record in records for row in record_to_item_rows(record)]
