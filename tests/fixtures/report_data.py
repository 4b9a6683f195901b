#!/usr/bin/env python3
"""
Synthetic Report Data

Builders for the transactions, profiles and ledger directories used across
the test suite. All names, ids and amounts are synthetic.
"""

import random
from datetime import date, timedelta
from pathlib import Path

from finance_reports.core.models import Transaction, TransactionType, UserProfile
from finance_reports.ledger import LedgerStore

SYNTHETIC_EXPENSE_CATEGORIES = [
    "Groceries",
    "Transport",
    "Bills",
    "Entertainment",
    "Dining Out",
    "Healthcare",
]

SYNTHETIC_INCOME_CATEGORIES = ["Salary", "Freelance", "Refund"]


def october_transactions(user_id: str = "user123") -> list[Transaction]:
    """The reference October 2023 month: $2500 income and $360.50 of expenses."""
    rows = [
        ("1", "2500", "2023-10-01", "income", "Salary", "Monthly Paycheck"),
        ("2", "75.50", "2023-10-05", "expense", "Groceries", "Weekly shopping"),
        ("3", "30", "2023-10-07", "expense", "Transport", "Bus pass"),
        ("4", "120", "2023-10-12", "expense", "Bills", "Internet bill"),
        ("5", "50", "2023-10-15", "expense", "Entertainment", "Cinema tickets"),
        ("6", "85", "2023-10-20", "expense", "Groceries", "More shopping"),
    ]
    return [
        Transaction.create(tx_id, amount, tx_date, tx_type, category, description, user_id)
        for tx_id, amount, tx_date, tx_type, category, description in rows
    ]


def october_profile(user_id: str = "user123") -> UserProfile:
    """Software developer earning $2500/month and aiming to save 20%."""
    return UserProfile.from_dict(
        {
            "user_id": user_id,
            "job_title": "Software Developer",
            "monthly_salary": 2500,
            "savings_goal_percentage": 20,
        }
    )


def generate_random_transactions(
    count: int,
    start_date: date,
    days: int,
    seed: int = 1234,
    user_id: str = "user123",
) -> list[Transaction]:
    """
    Generate reproducible random transactions spread over a date window.

    Args:
        count: Number of transactions
        start_date: First possible date
        days: Width of the window in days
        seed: Random seed for reproducibility
        user_id: Owner id stamped on every transaction

    Returns:
        Transactions in generation order (not sorted)
    """
    rng = random.Random(seed)
    transactions = []
    for index in range(count):
        is_income = rng.random() < 0.2
        category = rng.choice(SYNTHETIC_INCOME_CATEGORIES if is_income else SYNTHETIC_EXPENSE_CATEGORIES)
        cents = rng.randint(100, 500_000 if is_income else 40_000)
        transactions.append(
            Transaction.create(
                id=f"synthetic-{index}",
                amount=f"{cents // 100}.{cents % 100:02d}",
                date=start_date + timedelta(days=rng.randrange(days)),
                type=TransactionType.INCOME if is_income else TransactionType.EXPENSE,
                category=category,
                user_id=user_id,
            )
        )
    return transactions


def write_ledger(
    ledger_dir: Path,
    transactions: list[Transaction] | None = None,
    profile: UserProfile | None = None,
) -> LedgerStore:
    """Create a ledger directory holding the given profile and transactions."""
    store = LedgerStore(ledger_dir)
    store.save_profile(profile or october_profile())
    store.save_transactions(october_transactions() if transactions is None else transactions)
    return store
