"""Turn raw OCR text into trimmed, non-empty lines."""
from __future__ import annotations

import re
from typing import List, Optional


def normalize_lines(text: Optional[str]) -> List[str]:
    """Fold carriage returns into line breaks and drop blank lines.

    Any line-ending convention is accepted; empty input yields an empty list.
    """

    if not text:
        return []
    folded = text.replace("\r", "\n")
    return [line.strip() for line in re.split(r"\n+", folded) if line.strip()]


def normalized_text(lines: List[str]) -> str:
    return "\n".join(lines)
