"""Ordered first-match-wins rule chains used by every field extractor."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
Subject = TypeVar("Subject")


@dataclass(frozen=True)
class Rule(Generic[Subject, T]):
    """A named strategy returning a value, or ``None``/empty when it does not apply."""

    name: str
    apply: Callable[[Subject], Optional[T]]


class RuleChain(Generic[Subject, T]):
    """Evaluate rules strictly in order and commit to the first non-empty result.

    Rules after the winning one are never evaluated, so the rule order is part
    of the extractor's contract.
    """

    def __init__(self, name: str, rules: Sequence[Rule[Subject, T]]):
        self.name = name
        self.rules: Tuple[Rule[Subject, T], ...] = tuple(rules)

    def resolve(self, subject: Subject) -> Tuple[Optional[str], Optional[T]]:
        """Return the name of the winning rule and its value."""

        for rule in self.rules:
            value = rule.apply(subject)
            if value:
                logger.debug("%s resolved by rule %s", self.name, rule.name)
                return rule.name, value
        return None, None

    def __call__(self, subject: Subject) -> Optional[T]:
        return self.resolve(subject)[1]

    @property
    def rule_names(self) -> List[str]:
        return [rule.name for rule in self.rules]


def first_group(pattern: re.Pattern) -> Callable[[str], str]:
    """Build a rule body returning the stripped first group of ``pattern``."""

    def _apply(text: str) -> str:
        match = pattern.search(text)
        return match.group(1).strip() if match and match.group(1) else ""

    return _apply


def labeled(label: str, value: str = r"(.+)", separator: str = r"[:\- \t]+") -> re.Pattern:
    """Compile a case-insensitive pattern for ``<label><separator><value>``.

    Separators are horizontal only so a value never spills onto the next line.
    """

    return re.compile(rf"(?i)\b{label}{separator}{value}")
