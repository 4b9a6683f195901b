#!/usr/bin/env python3
"""
Report Export

Tabular views of report results as pandas DataFrames, used for CSV output.
"""

from pathlib import Path

import pandas as pd

from .results import (
    BudgetVsActual,
    CategorySpending,
    IncomeExpenseSummary,
    SavingsGrowthPoint,
    TransactionSummary,
)


def spending_to_dataframe(spending: list[CategorySpending]) -> pd.DataFrame:
    """One row per category, largest total first."""
    df = pd.DataFrame([item.to_dict() for item in spending], columns=["category", "total"])
    return df.sort_values("total", ascending=False, kind="stable").reset_index(drop=True)


def income_expense_to_dataframe(summary: IncomeExpenseSummary) -> pd.DataFrame:
    """Single-row frame with income, expense and net totals."""
    row = summary.to_dict()
    row["net"] = summary.net.to_float()
    return pd.DataFrame([row], columns=["totalIncome", "totalExpenses", "net"])


def savings_growth_to_dataframe(growth: list[SavingsGrowthPoint]) -> pd.DataFrame:
    """
    Daily balance series indexed by date.

    An empty series produces an empty frame with the same columns.
    """
    df = pd.DataFrame([point.to_dict() for point in growth], columns=["date", "balance"])
    df["date"] = pd.to_datetime(df["date"])
    return df.set_index("date")


def budget_to_dataframe(report: BudgetVsActual) -> pd.DataFrame:
    """Single-row frame of the budget vs. actual figures."""
    return pd.DataFrame([report.to_dict()])


def summary_to_dataframe(summary: TransactionSummary) -> pd.DataFrame:
    """One row per (key, type) group."""
    columns = [summary.group_by, "type", "count", "total"]
    return pd.DataFrame([group.to_dict(summary.group_by) for group in summary.groups], columns=columns)


def write_csv(df: pd.DataFrame, filepath: str | Path | None = None) -> str:
    """
    Render a frame as CSV.

    Args:
        df: Frame to render; a named index is written as the first column
        filepath: Optional file to write as well

    Returns:
        The CSV text
    """
    write_index = df.index.name is not None
    text = df.to_csv(index=write_index)
    if filepath is not None:
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        filepath.write_text(text, encoding="utf-8")
    return text
