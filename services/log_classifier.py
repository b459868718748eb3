from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Tuple, Union

from models.log_entry import AnnotatedDocument, ClassificationResult, MatchReport
from models.rule import Rule
from utils.rules_engine import DEFAULT_RULE_TABLE, RuleTable

LOGGER = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")

LogText = Union[str, Iterable[str]]


def split_lines(text: LogText) -> List[str]:
    """Split raw text into lines without trimming them.

    A trailing line terminator ends the last line instead of starting an
    empty one, so ``"a\\nb\\n"`` is two lines and ``"\\n"`` is one empty line.
    Anything other than a string is treated as lines that are already split.
    """

    if not isinstance(text, str):
        return list(text)
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


class LogClassifier:
    """Assign log lines to the first matching rule of a rule table."""

    def __init__(self, rule_table: RuleTable = DEFAULT_RULE_TABLE):
        self.rule_table = rule_table

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self.rule_table.rules

    def classify(self, line: str) -> Optional[Rule]:
        for rule in self.rule_table:
            if rule.matches(line):
                return rule
        return None

    def annotate(self, text: LogText) -> AnnotatedDocument:
        document = tuple(
            ClassificationResult(line_number=number, text=line, rule=self.classify(line))
            for number, line in enumerate(split_lines(text), start=1)
        )
        LOGGER.debug("Annotated %d line(s)", len(document))
        return document

    def report(self, text: LogText) -> MatchReport:
        entries = tuple(result for result in self.annotate(text) if result.matched)
        report = MatchReport(entries=entries)
        if report.is_clear:
            LOGGER.info("No suspicious activity found")
        else:
            LOGGER.info("Found %d suspicious entries: %s", report.count, dict(report.labels_by_count()))
        return report


_DEFAULT_CLASSIFIER = LogClassifier()


def classify(line: str) -> Optional[Rule]:
    return _DEFAULT_CLASSIFIER.classify(line)


def annotate(text: LogText) -> AnnotatedDocument:
    return _DEFAULT_CLASSIFIER.annotate(text)


def report(text: LogText) -> MatchReport:
    return _DEFAULT_CLASSIFIER.report(text)
