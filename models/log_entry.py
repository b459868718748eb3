from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Optional, Tuple

from models.rule import Rule

NO_MATCH_MESSAGE = "No suspicious activity found!"


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """A single log line and the rule it was assigned to, if any."""

    line_number: int
    text: str
    rule: Optional[Rule] = None

    @property
    def matched(self) -> bool:
        return self.rule is not None

    @property
    def label(self) -> str | None:
        return self.rule.label if self.rule else None


AnnotatedDocument = Tuple[ClassificationResult, ...]


@dataclass(frozen=True, slots=True)
class MatchReport:
    """Matched lines only, in source order, keeping their original line numbers."""

    entries: Tuple[ClassificationResult, ...] = ()

    @property
    def count(self) -> int:
        return len(self.entries)

    @property
    def is_clear(self) -> bool:
        return not self.entries

    @property
    def summary(self) -> str:
        if self.is_clear:
            return NO_MATCH_MESSAGE
        return f"Found {self.count} suspicious entries:"

    def labels_by_count(self) -> Counter[str]:
        counts: Counter[str] = Counter()
        for entry in self.entries:
            counts[entry.label] += 1
        return counts

    def for_label(self, label: str) -> Tuple[ClassificationResult, ...]:
        wanted = label.lower()
        return tuple(entry for entry in self.entries if entry.label.lower() == wanted)
