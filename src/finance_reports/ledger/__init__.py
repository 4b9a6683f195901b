"""
Ledger Package

Storage for the records the report engine consumes: one user's profile
and transactions, kept as JSON files in a ledger directory.
"""

from pathlib import Path

from ..analysis.report_generator import ReportGenerator
from .datastore import (
    LedgerStore,
    ProfileNotFoundError,
    ProfileStore,
    TransactionNotFoundError,
    TransactionStore,
)


def build_report_generator(store: LedgerStore) -> ReportGenerator:
    """
    Load a ledger and construct a ReportGenerator for it.

    Raises:
        ProfileNotFoundError: If the ledger has no profile
    """
    profile = store.load_profile()
    return ReportGenerator(store.load_transactions(), profile)


def open_ledger(root_dir: str | Path) -> LedgerStore:
    """Open the ledger in root_dir (the directory need not exist yet)."""
    return LedgerStore(Path(root_dir))


__all__ = [
    "LedgerStore",
    "ProfileNotFoundError",
    "ProfileStore",
    "TransactionNotFoundError",
    "TransactionStore",
    "build_report_generator",
    "open_ledger",
]
