#!/usr/bin/env python3
"""
Main CLI Entry Point for Finance Reports

Provides the unified command-line interface over the ledger and report engine.
"""

import logging
import os

import click

from ..core.config import get_config, reload_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Finance Reports - Dashboard reports from transactions and savings goals.

    Spending by category, income vs. expenses, savings growth and
    budget vs. actual, computed from a user's ledger.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["FINANCE_REPORTS_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("finance_reports").setLevel(logging.DEBUG)

    try:
        ctx.obj["config"] = reload_config() if (config_env or debug) else get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Ledger directory: {ctx.obj['config'].ledger_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from finance_reports import __author__, __version__

    click.echo(f"Finance Reports v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Ledger Directory: {config_obj.ledger_dir}")
    click.echo(f"  Output Directory: {config_obj.output_dir}")
    click.echo(f"  Default Range: {config_obj.report.default_range_days} days")
    click.echo(f"  Output Format: {config_obj.report.output_format}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


from .ledger import ledger  # noqa: E402
from .report import report  # noqa: E402

main.add_command(report)
main.add_command(ledger)


if __name__ == "__main__":
    main()
