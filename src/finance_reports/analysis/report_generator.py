#!/usr/bin/env python3
"""
Report Generator Module

Builds the dashboard reports for one user from their transactions and
profile: spending by category, income vs. expenses, daily savings growth,
budget vs. actual, and grouped transaction summaries.

A ReportGenerator is built per user and per request. It sorts its
transactions once on construction and is read-only afterwards, so the
same instance can answer any number of queries, from any thread.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable
from typing import Any

from ..core.dates import DateLike, FinancialDate
from ..core.models import Transaction, TransactionType, UserProfile
from ..core.money import Money
from .results import (
    BudgetVsActual,
    CategorySpending,
    IncomeExpenseSummary,
    SavingsGrowthPoint,
    SummaryGroup,
    TransactionSummary,
)

logger = logging.getLogger(__name__)

SUMMARY_GROUPINGS = ("category", "date")


class InvalidDateRangeError(ValueError):
    """Raised when a report's start date falls after its end date."""

    def __init__(self, start: FinancialDate, end: FinancialDate):
        super().__init__(f"Start date {start} must be on or before end date {end}")
        self.start = start
        self.end = end


def expected_income_for_period(profile: UserProfile, start: FinancialDate, end: FinancialDate) -> Money:
    """
    Income the user expects to earn over a report period.

    Currently the full monthly salary regardless of the period length, so a
    one-week report compares a week of actuals against a month of salary.
    Prorating belongs here when it is introduced.
    """
    return profile.monthly_salary


class ReportGenerator:
    """
    Generates report data for a single user.

    Args:
        transactions: The user's transactions. Ownership is not checked.
        profile: The user's profile, required for budget vs. actual.
    """

    def __init__(self, transactions: Iterable[Transaction], profile: UserProfile):
        # sorted() is stable: same-day transactions keep their input order
        self._transactions: tuple[Transaction, ...] = tuple(sorted(transactions, key=lambda tx: tx.date))
        self._profile = profile
        logger.debug(
            "Report generator ready for user %s with %d transactions",
            profile.user_id,
            len(self._transactions),
        )

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """All transactions in ascending date order."""
        return self._transactions

    @property
    def profile(self) -> UserProfile:
        return self._profile

    @staticmethod
    def _normalize_range(start_date: DateLike, end_date: DateLike) -> tuple[FinancialDate, FinancialDate]:
        start = FinancialDate.from_value(start_date)
        end = FinancialDate.from_value(end_date)
        if start > end:
            raise InvalidDateRangeError(start, end)
        return start, end

    def _in_range(self, start: FinancialDate, end: FinancialDate) -> list[Transaction]:
        return [tx for tx in self._transactions if start <= tx.date <= end]

    def transactions_in_range(self, start_date: DateLike, end_date: DateLike) -> list[Transaction]:
        """
        Transactions dated within [start_date, end_date], both ends inclusive.

        Returns:
            Matching transactions in ascending date order

        Raises:
            InvalidDateRangeError: If start_date is after end_date
        """
        start, end = self._normalize_range(start_date, end_date)
        return self._in_range(start, end)

    def spending_by_category(self, start_date: DateLike, end_date: DateLike) -> dict[str, Money]:
        """
        Total expense per category within the period.

        Categories without expenses in the period are absent, never zero.
        Keys are in order of each category's first expense.
        """
        start, end = self._normalize_range(start_date, end_date)

        totals: dict[str, Money] = {}
        for tx in self._in_range(start, end):
            if tx.is_expense:
                totals[tx.category] = totals.get(tx.category, Money.zero()) + tx.amount

        logger.debug("Spending analysis %s..%s: %d categories", start, end, len(totals))
        return totals

    def generate_spending_analysis(self, start_date: DateLike, end_date: DateLike) -> list[CategorySpending]:
        """
        Generate data for a spending analysis report (e.g. a pie chart).

        Returns:
            One CategorySpending per category with expenses in the period
        """
        return [
            CategorySpending(category=category, total=total)
            for category, total in self.spending_by_category(start_date, end_date).items()
        ]

    def generate_income_vs_expense_report(self, start_date: DateLike, end_date: DateLike) -> IncomeExpenseSummary:
        """
        Generate total income and total expenses for the period.

        Both totals are zero when nothing matches.
        """
        start, end = self._normalize_range(start_date, end_date)

        total_income = Money.zero()
        total_expenses = Money.zero()
        for tx in self._in_range(start, end):
            if tx.type is TransactionType.INCOME:
                total_income += tx.amount
            else:
                total_expenses += tx.amount

        logger.debug("Income vs expense %s..%s: income=%s expenses=%s", start, end, total_income, total_expenses)
        return IncomeExpenseSummary(total_income=total_income, total_expenses=total_expenses)

    def generate_savings_growth(self, start_date: DateLike, end_date: DateLike) -> list[SavingsGrowthPoint]:
        """
        Generate a daily running balance for the period (e.g. a line chart).

        The balance starts at zero on start_date and only reflects
        transactions inside the period. Every day in the period gets a
        point, carrying the previous balance forward on days without
        transactions. A period without transactions yields no points at all.
        """
        start, end = self._normalize_range(start_date, end_date)
        relevant = self._in_range(start, end)
        if not relevant:
            return []

        daily_net_change: dict[FinancialDate, Money] = defaultdict(Money.zero)
        for tx in relevant:
            daily_net_change[tx.date] += tx.signed_amount

        growth: list[SavingsGrowthPoint] = []
        balance = Money.zero()
        for day in start.iter_days_through(end):
            if day in daily_net_change:
                balance += daily_net_change[day]
            growth.append(SavingsGrowthPoint(date=day, balance=balance))

        logger.debug("Savings growth %s..%s: %d points, final balance %s", start, end, len(growth), balance)
        return growth

    def generate_budget_vs_actual_report(self, start_date: DateLike, end_date: DateLike) -> BudgetVsActual:
        """
        Compare the user's savings goal with their actual savings for the period.
        """
        start, end = self._normalize_range(start_date, end_date)
        totals = self.generate_income_vs_expense_report(start, end)

        savings_goal = self._profile.monthly_savings_goal_amount()
        actual_savings = totals.total_income - totals.total_expenses

        return BudgetVsActual(
            expected_income=expected_income_for_period(self._profile, start, end),
            actual_income=totals.total_income,
            actual_expenses=totals.total_expenses,
            savings_goal=savings_goal,
            actual_savings=actual_savings,
            variance=actual_savings - savings_goal,
        )

    def generate_transaction_summary(
        self,
        start_date: DateLike,
        end_date: DateLike,
        group_by: str = "category",
    ) -> TransactionSummary:
        """
        Count and total transactions per (category, type) or (day, type).

        Args:
            start_date: Start of the period (inclusive)
            end_date: End of the period (inclusive)
            group_by: "category" or "date"

        Returns:
            TransactionSummary with groups ordered by total, largest first

        Raises:
            ValueError: If group_by is not a supported grouping
        """
        if group_by not in SUMMARY_GROUPINGS:
            raise ValueError(f"group_by must be one of: {', '.join(SUMMARY_GROUPINGS)}")
        start, end = self._normalize_range(start_date, end_date)

        counts: dict[tuple[str, TransactionType], int] = defaultdict(int)
        totals: dict[tuple[str, TransactionType], Money] = defaultdict(Money.zero)
        income_count = expense_count = 0
        total_income = total_expenses = Money.zero()

        for tx in self._in_range(start, end):
            key = tx.category if group_by == "category" else tx.date.to_iso_string()
            counts[(key, tx.type)] += 1
            totals[(key, tx.type)] += tx.amount
            if tx.is_income:
                income_count += 1
                total_income += tx.amount
            else:
                expense_count += 1
                total_expenses += tx.amount

        groups = [
            SummaryGroup(key=key, type=tx_type, count=counts[(key, tx_type)], total=total)
            for (key, tx_type), total in totals.items()
        ]
        groups.sort(key=lambda group: group.total, reverse=True)

        return TransactionSummary(
            group_by=group_by,
            groups=tuple(groups),
            total_income=total_income,
            total_expenses=total_expenses,
            income_count=income_count,
            expense_count=expense_count,
        )

    def generate_all(self, start_date: DateLike, end_date: DateLike) -> dict[str, Any]:
        """
        Generate every report for the period as JSON-ready data.

        The range is validated once, before any report is built.
        """
        start, end = self._normalize_range(start_date, end_date)
        return {
            "period": {"startDate": start.to_iso_string(), "endDate": end.to_iso_string()},
            "spendingAnalysis": [item.to_dict() for item in self.generate_spending_analysis(start, end)],
            "incomeVsExpense": self.generate_income_vs_expense_report(start, end).to_dict(),
            "savingsGrowth": [point.to_dict() for point in self.generate_savings_growth(start, end)],
            "budgetVsActual": self.generate_budget_vs_actual_report(start, end).to_dict(),
        }
