#!/usr/bin/env python3
"""
Core Data Models for Finance Reports

Immutable records fed into the report engine. Construction is the only
validation point: once a Transaction or UserProfile exists it is known to
satisfy its invariants.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from .dates import DateLike, FinancialDate
from .money import Money

MAX_DESCRIPTION_LENGTH = 200


class TransactionValidationError(ValueError):
    """Raised when a transaction violates its construction invariants."""


class ProfileValidationError(ValueError):
    """Raised when a user profile violates its construction invariants."""


class TransactionType(Enum):
    """Types of financial transactions."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def parse(cls, value: "TransactionType | str") -> "TransactionType":
        """
        Coerce a raw value into a TransactionType.

        Raises:
            TransactionValidationError: For anything other than income/expense
        """
        if isinstance(value, TransactionType):
            return value
        try:
            return cls(value)
        except ValueError:
            raise TransactionValidationError(
                f'Transaction type must be "income" or "expense", got {value!r}'
            ) from None


@dataclass(frozen=True)
class Transaction:
    """
    A single income or expense record belonging to one user.

    The amount is always positive; the sign of the money flow is carried
    by ``type``. Dates are normalized to calendar days on construction.
    """

    id: str
    amount: Money
    date: FinancialDate
    type: TransactionType
    category: str
    description: str = ""
    user_id: str | None = None

    def __post_init__(self) -> None:
        amount = self.amount
        if not isinstance(amount, Money):
            try:
                amount = Money.from_dollars(amount)
            except (TypeError, ValueError) as e:
                raise TransactionValidationError(f"Invalid transaction amount: {amount!r}") from e
        if not amount.is_positive():
            raise TransactionValidationError("Transaction amount must be a positive number.")

        try:
            normalized_date = FinancialDate.from_value(self.date)
        except (TypeError, ValueError) as e:
            raise TransactionValidationError(f"Invalid transaction date: {self.date!r}") from e

        if not isinstance(self.category, str) or not self.category.strip():
            raise TransactionValidationError("Transaction category is required.")

        description = self.description or ""
        if len(description) > MAX_DESCRIPTION_LENGTH:
            raise TransactionValidationError(
                f"Transaction description cannot exceed {MAX_DESCRIPTION_LENGTH} characters."
            )

        # Frozen dataclass: normalized values are written through object.__setattr__
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "date", normalized_date)
        object.__setattr__(self, "type", TransactionType.parse(self.type))
        object.__setattr__(self, "description", description)

    @property
    def is_income(self) -> bool:
        return self.type is TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type is TransactionType.EXPENSE

    @property
    def signed_amount(self) -> Money:
        """Amount with income positive and expense negative."""
        return self.amount if self.is_income else -self.amount

    @classmethod
    def create(
        cls,
        id: str,
        amount: Any,
        date: DateLike,
        type: TransactionType | str,
        category: str,
        description: str = "",
        user_id: str | None = None,
    ) -> "Transaction":
        """Build a Transaction from loosely typed values (dollars, ISO dates, strings)."""
        return cls(
            id=id,
            amount=amount,
            date=date,  # type: ignore[arg-type]
            type=type,  # type: ignore[arg-type]
            category=category,
            description=description,
            user_id=user_id,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Transaction":
        """
        Create Transaction from a stored or submitted dict.

        Args:
            data: Dict with id, amount (dollars), date, type, category and
                  optional description/user_id

        Returns:
            Transaction instance

        Raises:
            TransactionValidationError: If a required field is missing or invalid
        """
        missing = [key for key in ("id", "amount", "date", "type", "category") if key not in data]
        if missing:
            raise TransactionValidationError(f"Transaction is missing fields: {', '.join(missing)}")

        return cls.create(
            id=str(data["id"]),
            amount=data["amount"],
            date=data["date"],
            type=data["type"],
            category=data["category"],
            description=data.get("description") or "",
            user_id=data.get("user_id"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "amount": self.amount.to_float(),
            "date": self.date.to_iso_string(),
            "type": self.type.value,
            "category": self.category,
            "description": self.description,
            "user_id": self.user_id,
        }


@dataclass(frozen=True)
class UserProfile:
    """
    A user's financial profile and savings goal.

    Used for planning and goal-tracking reports.
    """

    user_id: str
    job_title: str
    monthly_salary: Money
    savings_goal_percentage: Decimal

    def __post_init__(self) -> None:
        salary = self.monthly_salary
        if not isinstance(salary, Money):
            try:
                salary = Money.from_dollars(salary)
            except (TypeError, ValueError) as e:
                raise ProfileValidationError(f"Invalid monthly salary: {salary!r}") from e
        if salary.is_negative():
            raise ProfileValidationError("Monthly salary cannot be negative.")

        percentage = self.savings_goal_percentage
        try:
            percentage = percentage if isinstance(percentage, Decimal) else Decimal(str(percentage))
        except InvalidOperation as e:
            raise ProfileValidationError(f"Invalid savings goal percentage: {percentage!r}") from e
        if not percentage.is_finite() or percentage < 0 or percentage > 100:
            raise ProfileValidationError("Savings goal percentage must be between 0 and 100.")

        object.__setattr__(self, "monthly_salary", salary)
        object.__setattr__(self, "savings_goal_percentage", percentage)

    def monthly_savings_goal_amount(self) -> Money:
        """
        Calculate the target amount to save each month.

        Recomputed on every call from salary and percentage.
        """
        return self.monthly_salary.percent(self.savings_goal_percentage)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserProfile":
        """Create UserProfile from a stored dict."""
        missing = [
            key
            for key in ("user_id", "monthly_salary", "savings_goal_percentage")
            if key not in data
        ]
        if missing:
            raise ProfileValidationError(f"Profile is missing fields: {', '.join(missing)}")

        return cls(
            user_id=str(data["user_id"]),
            job_title=data.get("job_title") or "",
            monthly_salary=data["monthly_salary"],
            savings_goal_percentage=data["savings_goal_percentage"],
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "user_id": self.user_id,
            "job_title": self.job_title,
            "monthly_salary": self.monthly_salary.to_float(),
            "savings_goal_percentage": float(self.savings_goal_percentage),
        }
