"""
Core Utilities Package

Primitives, data models, and configuration shared by the report engine,
the ledger store and the CLI.

This package provides:
- Currency handling with integer arithmetic for precision
- Money and FinancialDate value types
- Transaction and UserProfile records with construction-time validation
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    Environment,
    ReportConfig,
    get_config,
    get_ledger_dir,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import (
    cents_to_dollars_str,
    format_cents,
    parse_dollars_to_cents,
    percent_of_cents,
    to_cents,
)
from .dates import FinancialDate
from .models import (
    ProfileValidationError,
    Transaction,
    TransactionType,
    TransactionValidationError,
    UserProfile,
)
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "FinancialDate",
    "Money",
    "ProfileValidationError",
    "ReportConfig",
    # Data models
    "Transaction",
    "TransactionType",
    "TransactionValidationError",
    "UserProfile",
    # Currency utilities
    "cents_to_dollars_str",
    "format_cents",
    "get_config",
    "get_ledger_dir",
    "is_development",
    "is_production",
    "is_test",
    "parse_dollars_to_cents",
    "percent_of_cents",
    "reload_config",
    "to_cents",
]
