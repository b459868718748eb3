from __future__ import annotations

from typing import Iterable

from rich.style import Style
from rich.table import Table
from rich.text import Text

from models.log_entry import AnnotatedDocument, ClassificationResult, MatchReport
from models.rule import Rule

DEFAULT_STYLE = Style(color="grey70")
CLEAR_STYLE = Style(color="green", bold=True)


def rule_style(rule: Rule | None) -> Style:
    if rule is None or rule.color is None:
        return DEFAULT_STYLE
    return Style(color=rule.color, bold=True)


def render_document(document: AnnotatedDocument) -> Text:
    """Full log, one line per entry, matched lines in their rule's color."""

    text = Text()
    for result in document:
        text.append(result.text + "\n", style=rule_style(result.rule))
    return text


def render_entries(entries: Iterable[ClassificationResult]) -> Text:
    text = Text()
    for entry in entries:
        text.append(f"[Line {entry.line_number}] ", style=DEFAULT_STYLE)
        text.append(entry.text + "\n", style=rule_style(entry.rule))
    return text


def render_report(report: MatchReport) -> Text:
    if report.is_clear:
        return Text(report.summary, style=CLEAR_STYLE)
    text = Text(report.summary + "\n\n", style=DEFAULT_STYLE)
    text.append_text(render_entries(report.entries))
    return text


def build_legend(rules: Iterable[Rule]) -> Table:
    table = Table(title="Pattern Legend")
    table.add_column("#", justify="right")
    table.add_column("Category")
    table.add_column("Pattern", overflow="fold")
    for position, rule in enumerate(rules, start=1):
        swatch = Style(color="black", bgcolor=rule.color, bold=True) if rule.color else DEFAULT_STYLE
        table.add_row(str(position), Text(f" {rule.label} ", style=swatch), Text(rule.expression))
    return table


def build_summary(report: MatchReport, rules: Iterable[Rule]) -> Table:
    counts = report.labels_by_count()
    table = Table(title="Matches per category")
    table.add_column("Category")
    table.add_column("Matches", justify="right")
    for rule in rules:
        table.add_row(Text(rule.label, style=rule_style(rule)), str(counts.get(rule.label, 0)))
    return table
