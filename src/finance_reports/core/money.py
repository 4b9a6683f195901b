#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Prevents floating-point errors and provides type-safe currency operations.
"""

from dataclasses import dataclass
from decimal import Decimal

from .currency import (
    AmountLike,
    cents_to_float,
    format_cents,
    percent_of_cents,
    to_cents,
)


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents.

    Supports both positive and negative amounts. Transactions only ever hold
    positive values; signed values appear in derived figures such as net
    change, actual savings and variance.

    Examples:
        >>> salary = Money.from_dollars("2500")
        >>> str(salary)
        '$2500.00'

        >>> spent = Money.from_dollars(360.5)
        >>> str(salary - spent)
        '$2139.50'

        >>> str(spent - salary)
        '-$2139.50'
    """

    cents: int

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_dollars(cls, dollars: AmountLike) -> "Money":
        """
        Parse from a dollar amount.

        Args:
            dollars: String like "$12.34", int like 12, float like 75.5,
                     or a Decimal

        Returns:
            Money object rounded half-up to the cent
        """
        return cls(cents=to_cents(dollars))

    @classmethod
    def zero(cls) -> "Money":
        """Return a zero amount."""
        return cls(cents=0)

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_float(self) -> float:
        """Get value as a dollar float rounded to the cent (for JSON)."""
        return cents_to_float(self.cents)

    def to_dollars(self) -> str:
        """Get formatted dollar string."""
        return str(self)

    def percent(self, percentage: Decimal) -> "Money":
        """
        Return the given percentage of this amount.

        Args:
            percentage: Percentage value, e.g. Decimal("20") for 20%

        Returns:
            New Money rounded half-up to the cent
        """
        return Money(cents=percent_of_cents(self.cents, percentage))

    def is_positive(self) -> bool:
        return self.cents > 0

    def is_negative(self) -> bool:
        return self.cents < 0

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        return Money(cents=self.cents - other.cents)

    def __neg__(self) -> "Money":
        return Money(cents=-self.cents)

    def __mul__(self, scalar: int) -> "Money":
        """Multiply Money by integer scalar."""
        return Money(cents=self.cents * scalar)

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.cents == other.cents

    def __hash__(self) -> int:
        return hash(self.cents)

    def __lt__(self, other: "Money") -> bool:
        """Less than comparison."""
        return self.cents < other.cents

    def __le__(self, other: "Money") -> bool:
        """Less than or equal comparison."""
        return self.cents <= other.cents

    def __gt__(self, other: "Money") -> bool:
        """Greater than comparison."""
        return self.cents > other.cents

    def __ge__(self, other: "Money") -> bool:
        """Greater than or equal comparison."""
        return self.cents >= other.cents

    def __str__(self) -> str:
        """Format as dollar string."""
        return format_cents(self.cents)

    def __repr__(self) -> str:
        """Repr format."""
        return f"Money(cents={self.cents})"
