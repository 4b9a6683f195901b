#!/usr/bin/env python3
"""
Report Result Models

Immutable result records returned by ReportGenerator. Each exposes
``to_dict()`` producing the JSON shape consumed by dashboards: camelCase
keys, amounts as dollar floats rounded to the cent, dates as ISO strings.
"""

from dataclasses import dataclass, field
from typing import Any

from ..core.dates import FinancialDate
from ..core.models import TransactionType
from ..core.money import Money


@dataclass(frozen=True)
class CategorySpending:
    """Total expense for one category over the report period."""

    category: str
    total: Money

    def to_dict(self) -> dict[str, Any]:
        return {"category": self.category, "total": self.total.to_float()}


@dataclass(frozen=True)
class IncomeExpenseSummary:
    """Income and expense totals over the report period."""

    total_income: Money = field(default_factory=Money.zero)
    total_expenses: Money = field(default_factory=Money.zero)

    @property
    def net(self) -> Money:
        """Income minus expenses (negative when spending exceeded income)."""
        return self.total_income - self.total_expenses

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalIncome": self.total_income.to_float(),
            "totalExpenses": self.total_expenses.to_float(),
        }


@dataclass(frozen=True)
class SavingsGrowthPoint:
    """Running balance at the end of one calendar day of the period."""

    date: FinancialDate
    balance: Money

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date.to_iso_string(), "balance": self.balance.to_float()}


@dataclass(frozen=True)
class BudgetVsActual:
    """
    Savings goal compared with actual performance for a period.

    A positive variance means the user saved more than their goal;
    negative means they fell behind.
    """

    expected_income: Money
    actual_income: Money
    actual_expenses: Money
    savings_goal: Money
    actual_savings: Money
    variance: Money

    @property
    def is_ahead_of_goal(self) -> bool:
        return not self.variance.is_negative()

    def to_dict(self) -> dict[str, Any]:
        return {
            "expectedIncome": self.expected_income.to_float(),
            "actualIncome": self.actual_income.to_float(),
            "savingsGoal": self.savings_goal.to_float(),
            "actualSavings": self.actual_savings.to_float(),
            "variance": self.variance.to_float(),
        }


@dataclass(frozen=True)
class SummaryGroup:
    """Count and total of transactions sharing a key (category or day) and type."""

    key: str
    type: TransactionType
    count: int
    total: Money

    def to_dict(self, key_name: str = "category") -> dict[str, Any]:
        return {
            key_name: self.key,
            "type": self.type.value,
            "count": self.count,
            "total": self.total.to_float(),
        }


@dataclass(frozen=True)
class TransactionSummary:
    """Grouped transaction counts and totals with overall income/expense figures."""

    group_by: str
    groups: tuple[SummaryGroup, ...]
    total_income: Money
    total_expenses: Money
    income_count: int
    expense_count: int

    @property
    def net(self) -> Money:
        """Income minus expenses across every group."""
        return self.total_income - self.total_expenses

    def to_dict(self) -> dict[str, Any]:
        return {
            "groupBy": self.group_by,
            "summary": [group.to_dict(self.group_by) for group in self.groups],
            "totals": {
                "totalIncome": self.total_income.to_float(),
                "totalExpenses": self.total_expenses.to_float(),
                "incomeCount": self.income_count,
                "expenseCount": self.expense_count,
                "netAmount": self.net.to_float(),
            },
        }
