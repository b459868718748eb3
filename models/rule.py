from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any


class RuleConfigurationError(ValueError):
    """Raised when a rule cannot be built from its definition."""


@dataclass(frozen=True, slots=True)
class Rule:
    """Named, case-insensitive pattern used to classify a log line."""

    label: str
    pattern: re.Pattern[str]
    # Opaque to the classifier; the renderer decides what it means.
    color: Any = None

    @classmethod
    def compile(cls, label: str, expression: str, color: Any = None) -> "Rule":
        if not label or not label.strip():
            raise RuleConfigurationError("Rule label must not be blank")
        try:
            pattern = re.compile(expression, re.IGNORECASE)
        except re.error as exc:
            raise RuleConfigurationError(
                f"Invalid pattern for rule '{label}': {expression!r} ({exc})"
            ) from exc
        return cls(label=label, pattern=pattern, color=color)

    @property
    def expression(self) -> str:
        return self.pattern.pattern

    def matches(self, line: str) -> bool:
        return self.pattern.search(line) is not None
