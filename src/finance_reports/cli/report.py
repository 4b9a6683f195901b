#!/usr/bin/env python3
"""
Report CLI - Dashboard Report Commands

Command-line interface for generating the dashboard reports from a ledger.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
import pandas as pd

from ..analysis import ReportGenerator
from ..analysis import export
from ..core.config import get_config
from ..core.dates import FinancialDate
from ..core.json_utils import format_json
from ..ledger import build_report_generator, open_ledger

logger = logging.getLogger(__name__)

# Domain errors (InvalidDateRangeError, validation errors, ProfileNotFoundError)
# all derive from ValueError or LookupError
REPORT_ERRORS = (ValueError, LookupError)


def resolve_date_range(start: str | None, end: str | None, default_range_days: int) -> tuple[FinancialDate, FinancialDate]:
    """
    Parse --start/--end, filling in defaults.

    End defaults to today and start to default_range_days before end.

    Raises:
        click.BadParameter: If a date is malformed or start is after end
    """
    try:
        end_date = FinancialDate.from_string(end) if end else FinancialDate.today()
    except ValueError as e:
        raise click.BadParameter(f"Invalid date: {end}", param_hint="--end") from e

    try:
        start_date = FinancialDate.from_string(start) if start else end_date.add_days(-default_range_days)
    except ValueError as e:
        raise click.BadParameter(f"Invalid date: {start}", param_hint="--start") from e

    if start_date > end_date:
        raise click.BadParameter(f"Start date {start_date} is after end date {end_date}", param_hint="--start")

    return start_date, end_date


REPORT_OPTIONS = (
    click.option("--start", help="Start date (YYYY-MM-DD), defaults to the configured range before --end"),
    click.option("--end", help="End date (YYYY-MM-DD), defaults to today"),
    click.option("--ledger-dir", type=click.Path(file_okay=False), help="Override ledger directory"),
    click.option("--format", "output_format", type=click.Choice(["json", "csv"]), help="Output format"),
    click.option("--output", type=click.Path(dir_okay=False), help="Write to file instead of stdout"),
)


def report_options(func: Callable) -> Callable:
    """Attach the options shared by every report command."""
    for option in reversed(REPORT_OPTIONS):
        func = option(func)
    return func


def _load_generator(ledger_dir: str | None) -> ReportGenerator:
    config = get_config()
    store = open_ledger(Path(ledger_dir) if ledger_dir else config.ledger_dir)
    return build_report_generator(store)


def _emit(text: str, output: str | None) -> None:
    if output:
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        click.echo(f"Report saved to: {path}")
    else:
        click.echo(text, nl=not text.endswith("\n"))


def _run_report(
    name: str,
    start: str | None,
    end: str | None,
    ledger_dir: str | None,
    output_format: str | None,
    output: str | None,
    build: Callable[[ReportGenerator, FinancialDate, FinancialDate], tuple[Any, pd.DataFrame | None]],
) -> None:
    """
    Shared driver: resolve options, build the report, render it.

    build returns the JSON-ready payload and, when the report has a
    tabular form, the DataFrame used for CSV.
    """
    config = get_config()
    start_date, end_date = resolve_date_range(start, end, config.report.default_range_days)
    output_format = output_format or config.report.output_format

    try:
        generator = _load_generator(ledger_dir)
        payload, frame = build(generator, start_date, end_date)
    except REPORT_ERRORS as e:
        logger.error("%s report failed: %s", name, e)
        raise click.ClickException(str(e)) from e

    if output_format == "csv":
        if frame is None:
            raise click.UsageError(f"The {name} report has no CSV form; use --format json")
        _emit(export.write_csv(frame), output)
    else:
        _emit(format_json(payload), output)


@click.group()
def report() -> None:
    """Dashboard report commands."""
    pass


@report.command()
@report_options
def spending(
    start: str | None, end: str | None, ledger_dir: str | None, output_format: str | None, output: str | None
) -> None:
    """
    Spending by category.

    Examples:
      finance-reports report spending --start 2023-10-01 --end 2023-10-31
    """

    def build(generator: ReportGenerator, s: FinancialDate, e: FinancialDate):
        items = generator.generate_spending_analysis(s, e)
        return [item.to_dict() for item in items], export.spending_to_dataframe(items)

    _run_report("spending", start, end, ledger_dir, output_format, output, build)


@report.command("income-expense")
@report_options
def income_expense(
    start: str | None, end: str | None, ledger_dir: str | None, output_format: str | None, output: str | None
) -> None:
    """Total income vs. total expenses."""

    def build(generator: ReportGenerator, s: FinancialDate, e: FinancialDate):
        summary = generator.generate_income_vs_expense_report(s, e)
        return summary.to_dict(), export.income_expense_to_dataframe(summary)

    _run_report("income-expense", start, end, ledger_dir, output_format, output, build)


@report.command("savings-growth")
@report_options
def savings_growth(
    start: str | None, end: str | None, ledger_dir: str | None, output_format: str | None, output: str | None
) -> None:
    """Daily running balance over the period."""

    def build(generator: ReportGenerator, s: FinancialDate, e: FinancialDate):
        growth = generator.generate_savings_growth(s, e)
        return [point.to_dict() for point in growth], export.savings_growth_to_dataframe(growth)

    _run_report("savings-growth", start, end, ledger_dir, output_format, output, build)


@report.command()
@report_options
def budget(
    start: str | None, end: str | None, ledger_dir: str | None, output_format: str | None, output: str | None
) -> None:
    """Savings goal vs. actual savings."""

    def build(generator: ReportGenerator, s: FinancialDate, e: FinancialDate):
        result = generator.generate_budget_vs_actual_report(s, e)
        return result.to_dict(), export.budget_to_dataframe(result)

    _run_report("budget", start, end, ledger_dir, output_format, output, build)


@report.command()
@report_options
@click.option(
    "--group-by",
    type=click.Choice(["category", "date"]),
    default="category",
    help="Group by category or by day (default: category)",
)
def summary(
    start: str | None,
    end: str | None,
    ledger_dir: str | None,
    output_format: str | None,
    output: str | None,
    group_by: str,
) -> None:
    """Transaction counts and totals per group."""

    def build(generator: ReportGenerator, s: FinancialDate, e: FinancialDate):
        result = generator.generate_transaction_summary(s, e, group_by=group_by)
        return result.to_dict(), export.summary_to_dataframe(result)

    _run_report("summary", start, end, ledger_dir, output_format, output, build)


@report.command("all")
@report_options
def all_reports(
    start: str | None, end: str | None, ledger_dir: str | None, output_format: str | None, output: str | None
) -> None:
    """Every report in a single JSON document."""

    def build(generator: ReportGenerator, s: FinancialDate, e: FinancialDate):
        return generator.generate_all(s, e), None

    _run_report("all", start, end, ledger_dir, output_format, output, build)
