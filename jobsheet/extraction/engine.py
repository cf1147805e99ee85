"""Assemble a :class:`JobRecord` from one OCR transcript."""
from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional

from jobsheet.core.models import JobRecord
from jobsheet.extraction.config import DEFAULT_CONFIG, ExtractionConfig
from jobsheet.extraction.fields import Transcript, build_field_chains, extract_fields
from jobsheet.extraction.items import (
    IdFactory,
    build_item_chain,
    header_pattern,
    parse_items,
    random_item_id,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], date]


class ExtractionEngine:
    """Deterministic text-to-record extraction with injectable clock and ids.

    The rule chains are built once from ``config`` and never mutated, so one
    engine can serve concurrent callers.
    """

    def __init__(
        self,
        config: ExtractionConfig = DEFAULT_CONFIG,
        clock: Clock = date.today,
        id_factory: IdFactory = random_item_id,
    ):
        self.config = config
        self.clock = clock
        self.id_factory = id_factory
        self.field_chains = build_field_chains(config)
        self.item_chain = build_item_chain(config)
        self.headers = header_pattern(config)

    def extract(self, text: Optional[str]) -> JobRecord:
        """Turn one transcript into a fully populated record. Never raises."""

        transcript = Transcript.from_text(text)
        fields = extract_fields(transcript, self.field_chains)
        items = parse_items(
            transcript.lines,
            id_factory=self.id_factory,
            config=self.config,
            chain=self.item_chain,
            headers=self.headers,
        )

        limit = self.config.description_max_chars
        record = JobRecord(
            description=fields["description"]
            or " ".join(transcript.lines[:2])[:limit],
            client=fields["client"],
            contact_name=fields["contact_name"],
            contact_number=fields["contact_number"],
            address=fields["address"],
            job_id=fields["job_id"],
            date=fields["date"] or self.clock().strftime(self.config.date_format),
            notes=fields["notes"] or transcript.text[: self.config.notes_fallback_chars],
            items=items,
        )
        logger.debug(
            "Extracted record from %d lines with %d items", len(transcript.lines), len(items)
        )
        return record


def extract_record(
    text: Optional[str],
    *,
    today: Optional[date] = None,
    id_factory: Optional[IdFactory] = None,
    config: Optional[ExtractionConfig] = None,
) -> JobRecord:
    """Functional form of :meth:`ExtractionEngine.extract`.

    ``today`` replaces the current date used when no date is found, and
    ``id_factory`` replaces the random item id generator.
    """

    engine = ExtractionEngine(
        config=config or DEFAULT_CONFIG,
        clock=(lambda: today) if today is not None else date.today,
        id_factory=id_factory or random_item_id,
    )
    return engine.extract(text)
