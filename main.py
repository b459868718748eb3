from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from models.log_entry import MatchReport
from services.log_classifier import LogClassifier
from services.log_reader import LogReadError, read_log_text
from services.renderer import build_legend, build_summary, render_document, render_entries, render_report
from utils.config import AppConfig, load_config
from utils.logger import configure_logging


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class AppContext:
    config: AppConfig
    classifier: LogClassifier
    console: Console


def build_context(env_file: str, encoding: str | None) -> AppContext:
    config = load_config(env_file)
    configure_logging(config.log_dir, config.log_level)
    if encoding:
        config.file_encoding = encoding
    return AppContext(
        config=config,
        classifier=LogClassifier(),
        console=Console(highlight=False, soft_wrap=True),
    )


def _load_text(app: AppContext, log_file: Path) -> str:
    try:
        return read_log_text(log_file, app.config.file_encoding, app.config.decode_errors)
    except LogReadError as exc:
        LOGGER.warning("%s", exc)
        app.console.print(str(exc), style="bold red", markup=False)
        raise click.exceptions.Exit(1) from exc


@click.group()
@click.option("--env-file", default=".env", show_default=True, help="Path to the .env file")
@click.option("--encoding", help="Text encoding of log files (overrides LOG_FILE_ENCODING)")
@click.pass_context
def cli(ctx: click.Context, env_file: str, encoding: Optional[str]) -> None:
    """Scan Android and Linux logs for suspicious activity."""

    ctx.obj = build_context(env_file, encoding)


@cli.command("rules")
@click.pass_obj
def show_rules(app: AppContext) -> None:
    """Print the pattern legend in priority order."""

    app.console.print(build_legend(app.classifier.rules))


@cli.command("load")
@click.argument("log_file", type=click.Path(path_type=Path))
@click.pass_obj
def load_log(app: AppContext, log_file: Path) -> None:
    """Print the whole log with matched lines highlighted by category."""

    text = _load_text(app, log_file)
    document = app.classifier.annotate(text)
    LOGGER.info("Loaded %s (%d lines)", log_file, len(document))
    app.console.print(render_document(document), end="")


@cli.command("analyze")
@click.argument("log_file", type=click.Path(path_type=Path))
@click.option("--label", "label_filter", help="Only show entries for this category")
@click.option("--summary/--no-summary", default=False, help="Also print match counts per category")
@click.pass_obj
def analyze_log(app: AppContext, log_file: Path, label_filter: str | None, summary: bool) -> None:
    """List suspicious lines with their original line numbers."""

    text = _load_text(app, log_file)
    report = app.classifier.report(text)
    if label_filter:
        _print_filtered(app, report, label_filter)
    else:
        app.console.print(render_report(report))
    if summary:
        app.console.print(build_summary(report, app.classifier.rules))


def _print_filtered(app: AppContext, report: MatchReport, label: str) -> None:
    labels = app.classifier.rule_table.labels
    if label.lower() not in {known.lower() for known in labels}:
        available = ", ".join(labels)
        raise click.BadParameter(f"Unknown category '{label}'. Available categories: {available}", param_hint="--label")
    entries = report.for_label(label)
    if not entries:
        app.console.print(f"No entries for {label}.", style="bold green", markup=False)
        return
    app.console.print(f"Found {len(entries)} {label} entries:\n", markup=False)
    app.console.print(render_entries(entries), end="")


def main() -> None:
    cli(standalone_mode=True)


if __name__ == "__main__":
    main()
