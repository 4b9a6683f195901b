#!/usr/bin/env python3
"""Tests for Transaction and UserProfile records."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from finance_reports.core.dates import FinancialDate
from finance_reports.core.models import (
    ProfileValidationError,
    Transaction,
    TransactionType,
    TransactionValidationError,
    UserProfile,
)
from finance_reports.core.money import Money


def make_transaction(**overrides):
    fields = {
        "id": "tx-1",
        "amount": "75.50",
        "date": "2023-10-05",
        "type": "expense",
        "category": "Groceries",
        "description": "Weekly shopping",
        "user_id": "user123",
    }
    fields.update(overrides)
    return Transaction.create(**fields)


class TestTransactionType:
    """Test the closed income/expense enumeration."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("income", TransactionType.INCOME),
            ("expense", TransactionType.EXPENSE),
            (TransactionType.INCOME, TransactionType.INCOME),
        ],
    )
    def test_parse(self, value, expected):
        assert TransactionType.parse(value) is expected

    @pytest.mark.parametrize("value", ["transfer", "Income", "", None])
    def test_parse_rejects_other_values(self, value):
        """Unknown types are rejected instead of being counted as expenses."""
        with pytest.raises(TransactionValidationError, match="income"):
            TransactionType.parse(value)


class TestTransactionConstruction:
    """Test Transaction construction and normalization."""

    def test_normalizes_loose_values(self):
        tx = make_transaction()

        assert tx.amount == Money.from_cents(7550)
        assert tx.date == FinancialDate(date=date(2023, 10, 5))
        assert tx.type is TransactionType.EXPENSE
        assert tx.category == "Groceries"
        assert tx.user_id == "user123"

    def test_accepts_typed_values(self):
        tx = Transaction(
            id="tx-2",
            amount=Money.from_cents(250000),
            date=FinancialDate.from_string("2023-10-01"),
            type=TransactionType.INCOME,
            category="Salary",
        )
        assert tx.is_income
        assert tx.description == ""
        assert tx.user_id is None

    def test_datetime_keeps_only_the_day(self):
        tx = make_transaction(date=datetime(2023, 10, 5, 23, 59, 59))
        assert tx.date.to_iso_string() == "2023-10-05"

    @pytest.mark.parametrize("amount", [0, "0.00", -5, "-0.01", Money.from_cents(0), Money.from_cents(-100)])
    def test_non_positive_amount_rejected(self, amount):
        with pytest.raises(TransactionValidationError, match="positive"):
            make_transaction(amount=amount)

    def test_sub_cent_amount_that_rounds_to_zero_rejected(self):
        with pytest.raises(TransactionValidationError):
            make_transaction(amount="0.004")

    def test_unparseable_amount_rejected(self):
        with pytest.raises(TransactionValidationError, match="amount"):
            make_transaction(amount="lots")

    def test_unknown_type_rejected(self):
        with pytest.raises(TransactionValidationError):
            make_transaction(type="transfer")

    @pytest.mark.parametrize("category", ["", "   "])
    def test_blank_category_rejected(self, category):
        with pytest.raises(TransactionValidationError, match="category"):
            make_transaction(category=category)

    def test_bad_date_rejected(self):
        with pytest.raises(TransactionValidationError, match="date"):
            make_transaction(date="2023-13-45")

    def test_long_description_rejected(self):
        make_transaction(description="x" * 200)
        with pytest.raises(TransactionValidationError, match="200"):
            make_transaction(description="x" * 201)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            make_transaction(amount=0)

    def test_immutable(self):
        tx = make_transaction()
        with pytest.raises(AttributeError):
            tx.amount = Money.from_cents(1)  # type: ignore

    def test_signed_amount(self):
        assert make_transaction(type="income").signed_amount == Money.from_cents(7550)
        assert make_transaction(type="expense").signed_amount == Money.from_cents(-7550)


class TestTransactionSerialization:
    """Test dict conversion."""

    def test_round_trip(self):
        tx = make_transaction()
        data = tx.to_dict()

        assert data == {
            "id": "tx-1",
            "amount": 75.5,
            "date": "2023-10-05",
            "type": "expense",
            "category": "Groceries",
            "description": "Weekly shopping",
            "user_id": "user123",
        }
        assert Transaction.from_dict(data) == tx

    def test_from_dict_missing_fields(self):
        with pytest.raises(TransactionValidationError, match="amount, date"):
            Transaction.from_dict({"id": "1", "type": "income", "category": "Salary"})

    def test_from_dict_optional_fields_default(self):
        tx = Transaction.from_dict(
            {"id": 7, "amount": 10, "date": "2023-10-01", "type": "income", "category": "Salary"}
        )
        assert tx.id == "7"
        assert tx.description == ""
        assert tx.user_id is None


class TestUserProfile:
    """Test UserProfile validation and the derived savings goal."""

    def test_monthly_savings_goal_amount(self, sample_profile):
        assert sample_profile.monthly_savings_goal_amount() == Money.from_dollars(500)

    @pytest.mark.parametrize(
        "salary,percentage,expected_cents",
        [
            ("2500", 0, 0),
            ("2500", 100, 250000),
            ("0", 50, 0),
            ("3333.33", "12.5", 41667),
        ],
    )
    def test_goal_calculation(self, salary, percentage, expected_cents):
        profile = UserProfile("u", "Analyst", salary, percentage)  # type: ignore[arg-type]
        assert profile.monthly_savings_goal_amount().to_cents() == expected_cents

    def test_goal_reflects_profile_values(self, sample_profile):
        """The goal is derived from current field values, never stored."""
        from dataclasses import replace

        raised = replace(sample_profile, monthly_salary=Money.from_dollars(3000))
        assert raised.monthly_savings_goal_amount() == Money.from_dollars(600)
        assert sample_profile.monthly_savings_goal_amount() == Money.from_dollars(500)

    def test_percentage_stored_as_decimal(self, sample_profile):
        assert sample_profile.savings_goal_percentage == Decimal("20")

    def test_negative_salary_rejected(self):
        with pytest.raises(ProfileValidationError, match="negative"):
            UserProfile("u", "Analyst", "-1", 10)  # type: ignore[arg-type]

    @pytest.mark.parametrize("percentage", [-1, "100.01", "NaN", "abc"])
    def test_percentage_out_of_range_rejected(self, percentage):
        with pytest.raises(ProfileValidationError):
            UserProfile("u", "Analyst", "1000", percentage)  # type: ignore[arg-type]

    def test_round_trip(self, sample_profile):
        data = sample_profile.to_dict()
        assert data == {
            "user_id": "user123",
            "job_title": "Software Developer",
            "monthly_salary": 2500.0,
            "savings_goal_percentage": 20.0,
        }
        assert UserProfile.from_dict(data) == sample_profile

    def test_from_dict_missing_fields(self):
        with pytest.raises(ProfileValidationError, match="monthly_salary"):
            UserProfile.from_dict({"user_id": "u", "savings_goal_percentage": 10})
