"""Rule-based extraction of job sheet records from OCR text."""
from jobsheet.extraction.config import DEFAULT_CONFIG, ExtractionConfig
from jobsheet.extraction.engine import ExtractionEngine, extract_record
from jobsheet.extraction.fields import Transcript, build_field_chains, normalize_phone
from jobsheet.extraction.items import build_item_chain, parse_items
from jobsheet.extraction.normalize import normalize_lines
from jobsheet.extraction.rules import Rule, RuleChain

__all__ = [
    "DEFAULT_CONFIG",
    "ExtractionConfig",
    "ExtractionEngine",
    "Rule",
    "RuleChain",
    "Transcript",
    "build_field_chains",
    "build_item_chain",
    "extract_record",
    "normalize_lines",
    "normalize_phone",
    "parse_items",
]
