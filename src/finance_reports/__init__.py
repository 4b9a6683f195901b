"""
Finance Reports - Personal Finance Dashboard Engine

Derives the dashboard views of a personal finance application from one
user's transaction history and savings-goal profile.

Key Features:
- Spending breakdown by category
- Income vs. expense totals
- Daily cumulative savings growth
- Budget vs. actual savings goal variance
- Grouped transaction summaries with counts

Domain Packages:
- core: Money and date primitives, records, configuration
- analysis: ReportGenerator and report result models
- ledger: JSON-file storage for a user's profile and transactions
- cli: Command-line interface

Example Usage:
    from finance_reports import ReportGenerator, Transaction, UserProfile

    profile = UserProfile("user123", "Software Developer", "2500", "20")
    generator = ReportGenerator(transactions, profile)
    generator.generate_budget_vs_actual_report("2023-10-01", "2023-10-31")
"""

__version__ = "0.1.0"
__author__ = "Karl Davis"

from .analysis import (
    InvalidDateRangeError,
    ReportGenerator,
    expected_income_for_period,
)
from .core.config import Environment, get_config
from .core.dates import FinancialDate
from .core.models import (
    ProfileValidationError,
    Transaction,
    TransactionType,
    TransactionValidationError,
    UserProfile,
)
from .core.money import Money

__all__ = [
    # Report engine
    "InvalidDateRangeError",
    "ReportGenerator",
    "expected_income_for_period",
    # Core models
    "FinancialDate",
    "Money",
    "ProfileValidationError",
    "Transaction",
    "TransactionType",
    "TransactionValidationError",
    "UserProfile",
    # Configuration
    "Environment",
    "get_config",
]
