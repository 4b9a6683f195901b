"""
Financial Analysis Package

Report generation over one user's transactions and savings profile.

Key Components:
- report_generator: ReportGenerator and the date-range filter shared by all reports
- results: Immutable report records with JSON-ready to_dict()
- export: pandas DataFrame views for CSV output

Reports:
- Spending analysis by category
- Income vs. expense totals
- Daily savings growth series
- Budget vs. actual savings goal variance
- Grouped transaction summary (by category or by day)
"""

from .report_generator import (
    InvalidDateRangeError,
    ReportGenerator,
    expected_income_for_period,
)
from .results import (
    BudgetVsActual,
    CategorySpending,
    IncomeExpenseSummary,
    SavingsGrowthPoint,
    SummaryGroup,
    TransactionSummary,
)

__all__ = [
    "BudgetVsActual",
    "CategorySpending",
    "IncomeExpenseSummary",
    "InvalidDateRangeError",
    "ReportGenerator",
    "SavingsGrowthPoint",
    "SummaryGroup",
    "TransactionSummary",
    "expected_income_for_period",
]
