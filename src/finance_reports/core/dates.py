#!/usr/bin/env python3
"""
FinancialDate Primitive Type

Immutable calendar-date wrapper with consistent formatting for report
operations. Every transaction date and every report boundary is normalized
to a FinancialDate, so time-of-day never takes part in range checks or
daily bucketing.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Union

DateLike = Union["FinancialDate", date, datetime, str]


@dataclass(frozen=True)
class FinancialDate:
    """Immutable financial date wrapper with consistent formatting."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, date_format: str | None = None) -> "FinancialDate":
        """
        Parse from string.

        Args:
            date_str: Date string to parse
            date_format: strptime format. When omitted, accepts ISO dates
                         ("2023-10-05") and ISO timestamps
                         ("2023-10-05T14:30:00Z").

        Returns:
            FinancialDate object

        Raises:
            ValueError: If the string cannot be parsed
        """
        text = date_str.strip()
        if date_format is not None:
            return cls(date=datetime.strptime(text, date_format).date())

        try:
            return cls(date=date.fromisoformat(text))
        except ValueError:
            pass

        # Older interpreters reject the trailing "Z" in fromisoformat
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return cls(date=datetime.fromisoformat(text).date())

    @classmethod
    def from_value(cls, value: DateLike) -> "FinancialDate":
        """
        Normalize any supported date representation.

        datetime values keep their date component only.
        """
        if isinstance(value, FinancialDate):
            return value
        # datetime is a subclass of date, so check it first
        if isinstance(value, datetime):
            return cls(date=value.date())
        if isinstance(value, date):
            return cls(date=value)
        if isinstance(value, str):
            return cls.from_string(value)
        raise TypeError(f"Unsupported date value: {value!r}")

    @classmethod
    def today(cls) -> "FinancialDate":
        """Get today's date."""
        return cls(date=date.today())

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def add_days(self, days: int) -> "FinancialDate":
        return FinancialDate(date=self.date + timedelta(days=days))

    def days_until(self, other: "FinancialDate") -> int:
        """Number of days from this date to another (negative if earlier)."""
        return (other.date - self.date).days

    def iter_days_through(self, end: "FinancialDate") -> Iterator["FinancialDate"]:
        """
        Iterate every calendar day from this date to end, inclusive.

        Yields nothing when end is before this date.
        """
        current = self.date
        while current <= end.date:
            yield FinancialDate(date=current)
            current += timedelta(days=1)

    def __str__(self) -> str:
        """String representation."""
        return self.to_iso_string()

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, FinancialDate):
            return NotImplemented
        return self.date == other.date

    def __hash__(self) -> int:
        return hash(self.date)

    def __lt__(self, other: "FinancialDate") -> bool:
        """Less than comparison."""
        return self.date < other.date

    def __le__(self, other: "FinancialDate") -> bool:
        """Less than or equal comparison."""
        return self.date <= other.date

    def __gt__(self, other: "FinancialDate") -> bool:
        """Greater than comparison."""
        return self.date > other.date

    def __ge__(self, other: "FinancialDate") -> bool:
        """Greater than or equal comparison."""
        return self.date >= other.date

    def __repr__(self) -> str:
        """Repr format."""
        return f"FinancialDate(date={self.date!r})"
