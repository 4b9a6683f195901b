#!/usr/bin/env python3
"""Tests for DataFrame and CSV export of report results."""

import pandas as pd
import pytest

from finance_reports.analysis import ReportGenerator
from finance_reports.analysis.export import (
    budget_to_dataframe,
    income_expense_to_dataframe,
    savings_growth_to_dataframe,
    spending_to_dataframe,
    summary_to_dataframe,
    write_csv,
)

START = "2023-10-01"
END = "2023-10-31"


@pytest.fixture
def generator(sample_transactions, sample_profile) -> ReportGenerator:
    return ReportGenerator(sample_transactions, sample_profile)


class TestDataFrames:
    """Test conversion of report results to DataFrames."""

    def test_spending_sorted_by_total(self, generator):
        df = spending_to_dataframe(generator.generate_spending_analysis(START, END))

        assert list(df.columns) == ["category", "total"]
        assert list(df["category"]) == ["Groceries", "Bills", "Entertainment", "Transport"]
        assert df["total"].sum() == pytest.approx(360.5)

    def test_empty_spending(self):
        df = spending_to_dataframe([])
        assert df.empty
        assert list(df.columns) == ["category", "total"]

    def test_income_expense_includes_net(self, generator):
        df = income_expense_to_dataframe(generator.generate_income_vs_expense_report(START, END))

        assert len(df) == 1
        assert df.loc[0, "net"] == pytest.approx(2139.5)

    def test_savings_growth_indexed_by_date(self, generator):
        df = savings_growth_to_dataframe(generator.generate_savings_growth(START, END))

        assert len(df) == 31
        assert df.index.name == "date"
        assert isinstance(df.index, pd.DatetimeIndex)
        assert df.loc[pd.Timestamp("2023-10-20"), "balance"] == pytest.approx(2139.5)

    def test_empty_savings_growth(self, generator):
        df = savings_growth_to_dataframe(generator.generate_savings_growth("2024-01-01", "2024-01-05"))
        assert df.empty
        assert list(df.columns) == ["balance"]

    def test_budget_row(self, generator):
        df = budget_to_dataframe(generator.generate_budget_vs_actual_report(START, END))
        assert df.loc[0, "variance"] == pytest.approx(1639.5)

    def test_summary_columns_follow_grouping(self, generator):
        df = summary_to_dataframe(generator.generate_transaction_summary(START, END, group_by="date"))

        assert list(df.columns) == ["date", "type", "count", "total"]
        assert df["count"].sum() == 6


class TestWriteCsv:
    """Test CSV rendering."""

    def test_unnamed_index_not_written(self, generator):
        text = write_csv(spending_to_dataframe(generator.generate_spending_analysis(START, END)))

        lines = text.splitlines()
        assert lines[0] == "category,total"
        assert lines[1] == "Groceries,160.5"

    def test_named_index_written(self, generator):
        text = write_csv(savings_growth_to_dataframe(generator.generate_savings_growth(START, "2023-10-02")))

        lines = text.splitlines()
        assert lines[0] == "date,balance"
        assert lines[1] == "2023-10-01,2500.0"

    def test_writes_file(self, generator, temp_dir):
        target = temp_dir / "reports" / "spending.csv"
        text = write_csv(spending_to_dataframe(generator.generate_spending_analysis(START, END)), target)

        assert target.read_text(encoding="utf-8") == text
