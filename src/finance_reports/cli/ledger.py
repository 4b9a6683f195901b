#!/usr/bin/env python3
"""
Ledger CLI - Manage the Stored Profile and Transactions

Thin commands over LedgerStore for entering the data reports are built from.
"""

import logging
import uuid
from pathlib import Path

import click

from ..core.config import get_config
from ..core.dates import FinancialDate
from ..core.json_utils import format_json
from ..core.models import Transaction, UserProfile
from ..ledger import LedgerStore, ProfileNotFoundError, open_ledger

logger = logging.getLogger(__name__)


def _store(ledger_dir: str | None) -> LedgerStore:
    return open_ledger(Path(ledger_dir) if ledger_dir else get_config().ledger_dir)


@click.group()
def ledger() -> None:
    """Ledger data management commands."""
    pass


@ledger.command("set-profile")
@click.option("--user-id", required=True, help="Owner of the ledger")
@click.option("--job-title", default="", help="Job title (informational)")
@click.option("--salary", required=True, help="Monthly salary in dollars")
@click.option("--savings-goal", required=True, help="Savings goal as a percentage of salary (0-100)")
@click.option("--ledger-dir", type=click.Path(file_okay=False), help="Override ledger directory")
def set_profile(user_id: str, job_title: str, salary: str, savings_goal: str, ledger_dir: str | None) -> None:
    """
    Create or replace the ledger's profile.

    Examples:
      finance-reports ledger set-profile --user-id user123 --salary 2500 --savings-goal 20
    """
    try:
        profile = UserProfile.from_dict(
            {
                "user_id": user_id,
                "job_title": job_title,
                "monthly_salary": salary,
                "savings_goal_percentage": savings_goal,
            }
        )
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    _store(ledger_dir).save_profile(profile)
    click.echo(
        f"Profile saved: {profile.user_id}, salary {profile.monthly_salary}, "
        f"savings goal {profile.monthly_savings_goal_amount()}/month"
    )


@ledger.command()
@click.option("--amount", required=True, help="Positive amount in dollars")
@click.option("--type", "tx_type", type=click.Choice(["income", "expense"]), required=True)
@click.option("--category", required=True, help="Category label, e.g. Groceries")
@click.option("--date", "tx_date", help="Transaction date (YYYY-MM-DD), defaults to today")
@click.option("--description", default="", help="Optional note")
@click.option("--id", "tx_id", help="Transaction id, generated when omitted")
@click.option("--ledger-dir", type=click.Path(file_okay=False), help="Override ledger directory")
def add(
    amount: str,
    tx_type: str,
    category: str,
    tx_date: str | None,
    description: str,
    tx_id: str | None,
    ledger_dir: str | None,
) -> None:
    """
    Add a transaction to the ledger.

    Examples:
      finance-reports ledger add --amount 75.50 --type expense --category Groceries --date 2023-10-05
    """
    store = _store(ledger_dir)
    try:
        owner = store.load_profile().user_id
    except ProfileNotFoundError as e:
        raise click.ClickException(f"{e}. Run 'finance-reports ledger set-profile' first.") from e

    try:
        transaction = Transaction.from_dict(
            {
                "id": tx_id or uuid.uuid4().hex,
                "amount": amount,
                "date": tx_date or FinancialDate.today(),
                "type": tx_type,
                "category": category,
                "description": description,
                "user_id": owner,
            }
        )
        store.add_transaction(transaction)
    except ValueError as e:
        logger.error("Could not add transaction: %s", e)
        raise click.ClickException(str(e)) from e

    click.echo(f"Added {transaction.type.value} {transaction.amount} in {transaction.category} ({transaction.id})")


@ledger.command()
@click.argument("transaction_id")
@click.option("--ledger-dir", type=click.Path(file_okay=False), help="Override ledger directory")
def delete(transaction_id: str, ledger_dir: str | None) -> None:
    """
    Remove a transaction from the ledger.

    Examples:
      finance-reports ledger delete 3f2a9c
    """
    try:
        removed = _store(ledger_dir).delete_transaction(transaction_id)
    except (ValueError, LookupError) as e:
        logger.error("Could not delete transaction: %s", e)
        raise click.ClickException(str(e)) from e

    click.echo(f"Deleted {removed.type.value} {removed.amount} in {removed.category} ({removed.id})")


@ledger.command()
@click.option("--ledger-dir", type=click.Path(file_okay=False), help="Override ledger directory")
def show(ledger_dir: str | None) -> None:
    """Print the ledger's profile and transactions as JSON."""
    store = _store(ledger_dir)
    try:
        data = {
            "profile": store.load_profile().to_dict(),
            "transactions": [tx.to_dict() for tx in store.load_transactions()],
        }
    except (ValueError, LookupError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(store.summary_text())
    click.echo(format_json(data))