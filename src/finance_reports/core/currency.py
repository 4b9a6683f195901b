#!/usr/bin/env python3
"""
Currency Conversion and Handling Utilities

Currency handling for the finance reports engine.
All report arithmetic happens on integer cents to avoid floating-point errors.

Currency Systems:
- Internal calculations use cents: 100 cents = $1.00
- Inputs arrive as dollar strings, ints, floats or Decimals
- Display uses dollar strings: "$12.34"
- JSON output uses dollar floats rounded to the cent

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Convert any incoming float through Decimal(str(value)) first
- Round half-up to the cent exactly once, at the conversion boundary
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

CENT = Decimal("0.01")

AmountLike = Union[int, float, str, Decimal]


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to dollar string using pure integer arithmetic.

    Args:
        cents: Amount in cents

    Returns:
        Formatted dollar string

    Example:
        cents_to_dollars_str(4599) -> "45.99"
        cents_to_dollars_str(-50) -> "-0.50"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    dollars = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{dollars}.{remainder:02d}"
    return f"{dollars}.{remainder:02d}"


def parse_dollars_to_cents(dollars_str: str) -> int:
    """
    Parse dollar string to cents.

    Args:
        dollars_str: String representation of dollar amount

    Returns:
        Amount in cents, rounded half-up

    Raises:
        ValueError: If the string is not a number

    Examples:
        parse_dollars_to_cents("12.34") -> 1234
        parse_dollars_to_cents("$1,234.56") -> 123456
        parse_dollars_to_cents("12.5") -> 1250
        parse_dollars_to_cents("0.125") -> 13
    """
    clean = dollars_str.replace("$", "").replace(",", "").strip()

    if not clean:
        raise ValueError("Empty currency string")

    try:
        amount = Decimal(clean)
    except InvalidOperation as e:
        raise ValueError(f"Invalid currency string: {dollars_str!r}") from e

    return decimal_to_cents(amount)


def decimal_to_cents(amount: Decimal) -> int:
    """Convert a Decimal dollar amount to integer cents, rounding half-up."""
    if not amount.is_finite():
        raise ValueError(f"Currency amount must be finite, got {amount}")
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_cents(amount: AmountLike) -> int:
    """
    Convert any supported dollar representation to cents.

    Floats are routed through their shortest string form so that
    75.5 becomes 7550 and not 7549.

    Args:
        amount: Dollar amount as int, float, str or Decimal

    Returns:
        Amount in cents
    """
    if isinstance(amount, bool):
        raise TypeError("Currency amount cannot be a boolean")
    if isinstance(amount, int):
        return amount * 100
    if isinstance(amount, float):
        return decimal_to_cents(Decimal(str(amount)))
    if isinstance(amount, Decimal):
        return decimal_to_cents(amount)
    if isinstance(amount, str):
        return parse_dollars_to_cents(amount)
    raise TypeError(f"Unsupported currency amount type: {type(amount).__name__}")


def percent_of_cents(cents: int, percentage: Decimal) -> int:
    """
    Calculate a percentage of a cent amount, rounded half-up to the cent.

    Args:
        cents: Base amount in cents
        percentage: Percentage value (20 means 20%)

    Returns:
        Resulting amount in cents

    Example:
        percent_of_cents(250000, Decimal("20")) -> 50000
    """
    exact = Decimal(cents) * percentage / Decimal(100)
    return int(exact.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def cents_to_float(cents: int) -> float:
    """Convert cents to a dollar float for JSON output."""
    return float((Decimal(cents) * CENT).quantize(CENT))


def format_cents(cents: int) -> str:
    """Format cents as dollar string with $ prefix."""
    if cents < 0:
        return f"-${cents_to_dollars_str(-cents)}"
    return f"${cents_to_dollars_str(cents)}"
