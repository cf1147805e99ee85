"""Scalar field extractors for client, contact, address, job, date, notes and description.

Each field is a :class:`RuleChain` of labeled matches followed by positional or
content fallbacks. Every rule is total: it returns an empty string instead of
raising when the transcript holds nothing it recognizes.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List

from jobsheet.extraction.config import DEFAULT_CONFIG, ExtractionConfig
from jobsheet.extraction.normalize import normalize_lines, normalized_text
from jobsheet.extraction.rules import Rule, RuleChain, first_group, labeled

FIELD_NAMES = (
    "client",
    "job_id",
    "contact_name",
    "contact_number",
    "address",
    "date",
    "notes",
    "description",
)

JOB_TOKEN = r"([A-Za-z0-9\-/]+)"
PHONE_SEPARATORS = r"[ \t\-().]"


@dataclass(frozen=True)
class Transcript:
    """Normalized view of one OCR transcript handed to every rule."""

    text: str
    lines: List[str]

    @classmethod
    def from_text(cls, raw: str | None) -> "Transcript":
        lines = normalize_lines(raw)
        return cls(text=normalized_text(lines), lines=lines)


def _from_text(pattern: re.Pattern):
    body = first_group(pattern)
    return lambda transcript: body(transcript.text)


def _line_at(index: int):
    return lambda transcript: transcript.lines[index] if len(transcript.lines) > index else ""


def _digits(value: str) -> int:
    return sum(ch.isdigit() for ch in value)


def normalize_phone(raw: str) -> str:
    """Strip separators from a phone number, keeping digits and ``+``."""

    return re.sub(r"[^\d+]", "", raw)


def _label_alternation(labels) -> str:
    parts = []
    for label in labels:
        escaped = re.escape(label)
        parts.append(rf"\b{escaped}" if label.endswith(":") else rf"\b{escaped}\b")
    return "(?:" + "|".join(parts) + ")"


def _date_patterns(config: ExtractionConfig) -> Dict[str, re.Pattern]:
    months = "|".join(re.escape(month) for month in config.month_prefixes)
    return {
        "numeric_date": re.compile(r"\b(\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4})\b"),
        "iso_date": re.compile(r"\b(\d{4}-\d{1,2}-\d{1,2})\b"),
        "month_name_date": re.compile(
            rf"(?i)\b(\d{{1,2}}[ \t]+(?:{months})[a-z]*[ \t]+\d{{4}})\b"
        ),
    }


def _phone_rules(config: ExtractionConfig) -> List[Rule]:
    labelled_pattern = re.compile(
        rf"(?i){_label_alternation(config.phone_labels)}"
        r"[:. \t]*(?:(?:No|Number|#)[:. \t]*)?"
        r"([+(\d][\d \t\-().]{6,}\d)"
    )
    generic_pattern = re.compile(
        rf"(?<![\d+])(\+?\d{{1,3}}{PHONE_SEPARATORS}*\d{{2,4}}{PHONE_SEPARATORS}*"
        rf"\d{{2,4}}{PHONE_SEPARATORS}*\d{{2,4}})(?!\d)"
    )
    date_patterns = list(_date_patterns(config).values())

    def labelled(transcript: Transcript) -> str:
        for match in labelled_pattern.finditer(transcript.text):
            if _digits(match.group(1)) >= config.min_phone_digits:
                return normalize_phone(match.group(1))
        return ""

    def generic(transcript: Transcript) -> str:
        # dates are digit groups too; blank them out before looking for a number
        text = transcript.text
        for pattern in date_patterns:
            text = pattern.sub(" ", text)
        match = generic_pattern.search(text)
        return normalize_phone(match.group(1)) if match else ""

    return [Rule("labelled_phone", labelled), Rule("generic_phone", generic)]


def _address_rules(config: ExtractionConfig) -> List[Rule]:
    terms = "|".join(re.escape(term) for term in config.street_terms)
    street_line = re.compile(rf"(?i)\b\d+[A-Za-z]?[ \t]+(?:[\w'.\-]+[ \t]+)?(?:{terms})\b")

    def street_vocabulary(transcript: Transcript) -> str:
        return next((line for line in transcript.lines if street_line.search(line)), "")

    return [
        Rule("address_label", _from_text(labeled("Address"))),
        Rule("street_vocabulary", street_vocabulary),
    ]


def _notes_rule(config: ExtractionConfig) -> Rule:
    marker = re.compile("(?i)" + "|".join(re.escape(m) for m in config.notes_markers))

    def notes_block(transcript: Transcript) -> str:
        for index, line in enumerate(transcript.lines):
            if marker.search(line):
                body = transcript.lines[index + 1 : index + 1 + config.notes_max_lines]
                return " ".join(body)
        return ""

    return Rule("notes_marker", notes_block)


def _description_rules(config: ExtractionConfig) -> List[Rule]:
    def content_lines(transcript: Transcript) -> str:
        # the first line usually carries the client, so skip it
        return " ".join(transcript.lines[1:3])[: config.description_max_chars]

    return [
        Rule("description_label", _from_text(labeled("Description"))),
        Rule("content_lines", content_lines),
    ]


def build_field_chains(config: ExtractionConfig = DEFAULT_CONFIG) -> Dict[str, RuleChain]:
    """Return one rule chain per scalar field, in evaluation order."""

    date_patterns = _date_patterns(config)
    contact_label = r"Contact(?![ \t]*(?:Number|No\b|Phone|Ph\b|Tel))"

    return {
        "client": RuleChain(
            "client",
            [
                Rule("client_name_label", _from_text(labeled(r"Client[ \t]*Name"))),
                Rule("client_label", _from_text(labeled("Client"))),
                Rule("first_line", _line_at(0)),
            ],
        ),
        "job_id": RuleChain(
            "job_id",
            [
                Rule(
                    "job_number_label",
                    _from_text(
                        labeled(r"Job[ \t]*(?:Number|No\b\.?|#)", JOB_TOKEN, r"[:\- \t]*")
                    ),
                ),
                Rule("job_label", _from_text(labeled(r"Job\b", JOB_TOKEN))),
            ],
        ),
        "contact_name": RuleChain(
            "contact_name",
            [
                Rule("contact_name_label", _from_text(labeled(r"Contact[ \t]*Name"))),
                Rule("contact_label", _from_text(labeled(contact_label))),
            ],
        ),
        "contact_number": RuleChain("contact_number", _phone_rules(config)),
        "address": RuleChain("address", _address_rules(config)),
        "date": RuleChain(
            "date",
            [Rule("date_label", _from_text(labeled(r"Date", separator=r"[ \t]*[:\-][ \t]*")))]
            + [Rule(name, _from_text(pattern)) for name, pattern in date_patterns.items()],
        ),
        "notes": RuleChain("notes", [_notes_rule(config)]),
        "description": RuleChain("description", _description_rules(config)),
    }


def extract_fields(transcript: Transcript, chains: Dict[str, RuleChain]) -> Dict[str, str]:
    """Resolve every scalar field; unresolved fields come back as ``""``."""

    return {name: chains[name](transcript) or "" for name in FIELD_NAMES}
