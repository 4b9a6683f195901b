#!/usr/bin/env python3
"""
Ledger DataStore

File-backed storage for one user's transactions and profile.

Stands in for the application's persistence layer: the report engine never
reads storage itself, callers load records through a store and hand them to
ReportGenerator. The Protocols below describe the store interface so that
other backends (a database, an in-memory fake) can be injected instead.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Protocol

from ..core.json_utils import read_json, write_json
from ..core.models import Transaction, UserProfile

logger = logging.getLogger(__name__)


class ProfileNotFoundError(LookupError):
    """Raised when a ledger has no profile. Callers treat this as not-found."""


class TransactionNotFoundError(LookupError):
    """Raised when a transaction id is not present in the ledger."""


class TransactionStore(Protocol):
    """Create/get/update/delete access to one user's transactions."""

    def load_transactions(self) -> list[Transaction]: ...

    def add_transaction(self, transaction: Transaction) -> None: ...

    def get_transaction(self, transaction_id: str) -> Transaction: ...

    def update_transaction(self, transaction: Transaction) -> None: ...

    def delete_transaction(self, transaction_id: str) -> Transaction: ...


class ProfileStore(Protocol):
    """Get/save access to one user's profile."""

    def load_profile(self) -> UserProfile: ...

    def save_profile(self, profile: UserProfile) -> None: ...


class LedgerStore:
    """
    DataStore for a single user's ledger directory.

    Layout:
        <root>/profile.json       the UserProfile
        <root>/transactions.json  list of transactions
    """

    def __init__(self, root_dir: Path):
        """
        Initialize ledger store.

        Args:
            root_dir: Directory holding profile.json and transactions.json
        """
        self.root_dir = Path(root_dir)
        self.profile_file = self.root_dir / "profile.json"
        self.transactions_file = self.root_dir / "transactions.json"

    def exists(self) -> bool:
        """Check if a profile has been stored."""
        return self.profile_file.exists()

    def load_profile(self) -> UserProfile:
        """
        Load the user's profile.

        Raises:
            ProfileNotFoundError: If no profile has been saved
            ProfileValidationError: If the stored profile is invalid
        """
        if not self.profile_file.exists():
            raise ProfileNotFoundError(f"No profile found in {self.root_dir}")
        return UserProfile.from_dict(read_json(self.profile_file))

    def save_profile(self, profile: UserProfile) -> None:
        """Write the user's profile, replacing any existing one."""
        write_json(self.profile_file, profile.to_dict())
        logger.info("Saved profile for user %s", profile.user_id)

    def load_transactions(self) -> list[Transaction]:
        """
        Load all stored transactions in file order.

        Returns an empty list when nothing has been stored. When both a
        profile and a transaction carry a user id they must match.

        Raises:
            TransactionValidationError: If a stored transaction is invalid
            ValueError: If a transaction belongs to another user
        """
        if not self.transactions_file.exists():
            return []

        data = read_json(self.transactions_file)
        # Accept both a bare list and {"transactions": [...]}
        if isinstance(data, dict):
            records = data.get("transactions", [])
        elif isinstance(data, list):
            records = data
        else:
            raise ValueError(f"Unexpected transactions file format: {self.transactions_file}")

        transactions = [Transaction.from_dict(record) for record in records]

        owner = self._owner_id()
        if owner is not None:
            foreign = [tx.id for tx in transactions if tx.user_id is not None and tx.user_id != owner]
            if foreign:
                raise ValueError(f"Transactions belong to another user: {', '.join(foreign)}")

        logger.info("Loaded %d transactions from %s", len(transactions), self.transactions_file)
        return transactions

    def save_transactions(self, transactions: list[Transaction]) -> None:
        """Write the full transaction list."""
        write_json(self.transactions_file, [tx.to_dict() for tx in transactions])
        logger.info("Saved %d transactions to %s", len(transactions), self.transactions_file)

    def add_transaction(self, transaction: Transaction) -> None:
        """
        Append a new transaction.

        Raises:
            ValueError: If a transaction with the same id already exists
        """
        transactions = self.load_transactions()
        if any(tx.id == transaction.id for tx in transactions):
            raise ValueError(f"Transaction already exists: {transaction.id}")
        transactions.append(transaction)
        self.save_transactions(transactions)

    def get_transaction(self, transaction_id: str) -> Transaction:
        """
        Look up a transaction by id.

        Raises:
            TransactionNotFoundError: If no transaction has that id
        """
        for tx in self.load_transactions():
            if tx.id == transaction_id:
                return tx
        raise TransactionNotFoundError(f"Transaction not found: {transaction_id}")

    def delete_transaction(self, transaction_id: str) -> Transaction:
        """
        Remove a transaction by id.

        Returns:
            The removed transaction

        Raises:
            TransactionNotFoundError: If no transaction has that id
        """
        transactions = self.load_transactions()
        for index, tx in enumerate(transactions):
            if tx.id == transaction_id:
                del transactions[index]
                self.save_transactions(transactions)
                logger.info("Deleted %s transaction %s in %s", tx.type.value, tx.id, tx.category)
                return tx
        raise TransactionNotFoundError(f"Transaction not found: {transaction_id}")

    def update_transaction(self, transaction: Transaction) -> None:
        """
        Replace the stored transaction with the same id.

        Raises:
            TransactionNotFoundError: If no transaction has that id
        """
        transactions = self.load_transactions()
        for index, tx in enumerate(transactions):
            if tx.id == transaction.id:
                transactions[index] = transaction
                self.save_transactions(transactions)
                return
        raise TransactionNotFoundError(f"Transaction not found: {transaction.id}")

    def last_modified(self) -> datetime | None:
        """Get timestamp of the most recently written ledger file."""
        stamps = [f.stat().st_mtime for f in (self.profile_file, self.transactions_file) if f.exists()]
        if not stamps:
            return None
        return datetime.fromtimestamp(max(stamps))

    def item_count(self) -> int | None:
        """Get count of stored transactions, or None if none were stored."""
        if not self.transactions_file.exists():
            return None
        data = read_json(self.transactions_file)
        if isinstance(data, dict):
            return len(data.get("transactions", []))
        return len(data) if isinstance(data, list) else 0

    def summary_text(self) -> str:
        """Get human-readable summary."""
        if not self.exists():
            return f"No ledger profile in {self.root_dir}"
        count = self.item_count() or 0
        return f"Ledger: {count} transactions for user {self._owner_id()}"

    def _owner_id(self) -> str | None:
        if not self.profile_file.exists():
            return None
        return read_json(self.profile_file).get("user_id")
