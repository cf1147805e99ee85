"""Vocabularies and limits that tune extraction to a particular paper form."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from jobsheet.core.models import MIN_PHONE_DIGITS
from jobsheet.core.utils import get_config_value, split_config_list

HEADER_LABELS = (
    "client",
    "contact",
    "address",
    "job",
    "date",
    "description",
    "notes",
    "supervisor",
    "telephone",
    "phone",
    "mobile",
    "cell",
    "tel",
)

STREET_TERMS = (
    "Road",
    "Rd",
    "St",
    "Street",
    "Ave",
    "Avenue",
    "Drive",
    "Dr",
    "Lane",
    "Ln",
    # place names printed on the form's site address block
    "Mitchell",
    "Brookvale",
)

# longer labels first so "Telephone" is not cut short by "Tel"
PHONE_LABELS = ("Telephone", "Phone", "Mobile", "Cell", "Tel", "M:", "T:")

MONTH_PREFIXES = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

NOTES_MARKERS = ("notes", "variations")


@dataclass(frozen=True)
class ExtractionConfig:
    """Immutable settings shared by every extractor in a run."""

    header_labels: Tuple[str, ...] = HEADER_LABELS
    street_terms: Tuple[str, ...] = STREET_TERMS
    phone_labels: Tuple[str, ...] = PHONE_LABELS
    month_prefixes: Tuple[str, ...] = MONTH_PREFIXES
    notes_markers: Tuple[str, ...] = NOTES_MARKERS
    notes_max_lines: int = 5
    notes_fallback_chars: int = 300
    description_max_chars: int = 240
    min_phone_digits: int = MIN_PHONE_DIGITS
    date_format: str = "%d/%m/%Y"
    item_placeholder: str = "Item"

    @classmethod
    def from_env(cls) -> "ExtractionConfig":
        """Extend the default vocabularies with comma separated env settings.

        ``JOBSHEET_HEADER_LABELS`` adds header words excluded from item parsing
        and ``JOBSHEET_STREET_TERMS`` adds street types or place names.
        """

        config = cls()
        extra_headers = split_config_list(get_config_value("JOBSHEET_HEADER_LABELS"))
        extra_streets = split_config_list(get_config_value("JOBSHEET_STREET_TERMS"))
        return replace(
            config,
            header_labels=config.header_labels + tuple(h.lower() for h in extra_headers),
            street_terms=config.street_terms + extra_streets,
        )


DEFAULT_CONFIG = ExtractionConfig()
