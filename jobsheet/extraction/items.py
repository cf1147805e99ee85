"""Classify transcript lines and parse consumed-item/quantity entries."""
from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from jobsheet.core.models import LineItem
from jobsheet.extraction.config import DEFAULT_CONFIG, ExtractionConfig
from jobsheet.extraction.rules import Rule, RuleChain

IdFactory = Callable[[], str]

NUMBER = r"(\d+(?:[.,]\d+)?)"


@dataclass(frozen=True)
class ParsedItem:
    """Description, quantity and unit recognized on one line, before an id is assigned."""

    description: str
    quantity: str
    unit: str = ""


def random_item_id() -> str:
    """Short random token; unique enough within a single extraction run."""

    return uuid.uuid4().hex[:8]


def header_pattern(config: ExtractionConfig = DEFAULT_CONFIG) -> re.Pattern:
    labels = "|".join(re.escape(label) for label in config.header_labels)
    return re.compile(rf"(?i)^(?:{labels})[:\s]")


def _matcher(pattern: str, build: Callable[[re.Match], Optional[ParsedItem]]):
    compiled = re.compile(pattern, re.IGNORECASE)

    def _apply(line: str) -> Optional[ParsedItem]:
        match = compiled.search(line)
        return build(match) if match else None

    return _apply


def build_item_chain(config: ExtractionConfig = DEFAULT_CONFIG) -> RuleChain:
    """Return the ordered item pattern chain; the first matching pattern wins."""

    def qty_line(match: re.Match) -> ParsedItem:
        description = (match.group(2) or "").strip() or config.item_placeholder
        return ParsedItem(description, match.group(1).strip())

    return RuleChain(
        "item",
        [
            # "10kg Asbestos waste"
            Rule(
                "mass_prefix",
                _matcher(
                    rf"^{NUMBER}\s*(?:kg|kgs)\b[\s\-:]*(.+)$",
                    lambda m: ParsedItem(m.group(2).strip(), f"{m.group(1)} kg", "kg"),
                ),
            ),
            # "Asbestos waste 10 kg"
            Rule(
                "mass_suffix",
                _matcher(
                    rf"^(.+?)\s+(?:[\-:]+\s*)?{NUMBER}\s*(?:kg|kgs)\b$",
                    lambda m: ParsedItem(m.group(1).strip(), f"{m.group(2)} kg", "kg"),
                ),
            ),
            # "10 x Drop sheets"
            Rule(
                "count_times",
                _matcher(
                    r"^(\d+)\s*x\s*(.+)$",
                    lambda m: ParsedItem(m.group(2).strip(), m.group(1).strip()),
                ),
            ),
            # "Silicone tubes - 5" or "Gloves: 3 pcs"
            Rule(
                "separated_count",
                _matcher(
                    rf"^(.+?)[:\-]\s*{NUMBER}\s*(qty|pcs|each)?$",
                    lambda m: ParsedItem(
                        m.group(1).strip(), m.group(2).strip(), (m.group(3) or "").lower()
                    ),
                ),
            ),
            # "Qty 5 Respirator filters"
            Rule("qty_label", _matcher(r"\bQty[:\s]*(\d+)\b\s*(.+)?", qty_line)),
            # "Plastic sheeting 2"
            Rule(
                "trailing_number",
                _matcher(
                    rf"^(.+?)\s+{NUMBER}$",
                    lambda m: ParsedItem(m.group(1).strip(), m.group(2).strip()),
                ),
            ),
        ],
    )


def parse_items(
    lines: Iterable[str],
    id_factory: IdFactory = random_item_id,
    config: ExtractionConfig = DEFAULT_CONFIG,
    chain: Optional[RuleChain] = None,
    headers: Optional[re.Pattern] = None,
) -> List[LineItem]:
    """Parse item lines in order of appearance, skipping header/label lines.

    Lines matching no pattern are dropped; the parser under-extracts rather
    than guessing.
    """

    chain = chain or build_item_chain(config)
    headers = headers or header_pattern(config)
    items: List[LineItem] = []
    for raw_line in lines:
        # OCR of column layouts leaves long blank runs; patterns expect single spaces
        line = " ".join(raw_line.split())
        if headers.search(line):
            continue
        parsed = chain(line)
        if parsed is None:
            continue
        items.append(
            LineItem(
                id=id_factory(),
                description=parsed.description,
                quantity=parsed.quantity,
                unit=parsed.unit,
            )
        )
    return items
