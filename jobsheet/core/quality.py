"""Lightweight quality checks to flag extracted job sheets for human review."""
import logging
import re
from typing import Iterable, List

from jobsheet.core.models import MIN_PHONE_DIGITS, JobRecord, SourcedRecord


logger = logging.getLogger(__name__)


def validate_record(record: JobRecord, min_phone_digits: int = MIN_PHONE_DIGITS) -> List[str]:
    """Return a list of quality issues for a single record.

    ``min_phone_digits`` should match the threshold the extraction engine used,
    so a number the engine accepted is never flagged as too short.
    """

    issues: List[str] = []

    if not record.client:
        issues.append("missing client")

    if not (record.contact_name or record.contact_number):
        issues.append("missing contact details")

    if not record.job_id:
        issues.append("missing job id")

    if not record.items:
        issues.append("no items extracted")

    if record.contact_number and len(re.sub(r"\D", "", record.contact_number)) < min_phone_digits:
        issues.append("contact number too short")

    return issues


def apply_quality_checks(
    records: Iterable[SourcedRecord], min_phone_digits: int = MIN_PHONE_DIGITS
) -> List[SourcedRecord]:
    """Annotate each sourced record with a status and its validation issues."""

    updated: List[SourcedRecord] = []

    for sourced in records:
        issues = validate_record(sourced.record, min_phone_digits)
        sourced.status = "auto_valid" if not issues else "needs_review"
        sourced.issues = issues
        if issues:
            note = "; ".join(issues)
            sourced.notes = f"{sourced.notes or ''} quality: {note}".strip()
            logger.warning("Quality issues for %s: %s", sourced.source_name, note)
        updated.append(sourced)

    return updated
