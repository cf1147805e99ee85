"""Core building blocks for the jobsheet package."""
from jobsheet.core.logging import configure_logging
from jobsheet.core.models import JobRecord, LineItem, SourcedRecord
from jobsheet.core.quality import apply_quality_checks, validate_record

__all__ = [
    "configure_logging",
    "JobRecord",
    "LineItem",
    "SourcedRecord",
    "apply_quality_checks",
    "validate_record",
]
