"""Mini README: Tests for the caller-side validation helpers.

Structure:
    * accepted submissions coerce strings and convert to the canonical unit.
    * rejected submissions raise ``LedgerValidationError`` with readable messages.
"""

from __future__ import annotations

import pytest

from pennywise.currency import CurrencyCode
from pennywise.ledger import (
    MAX_AMOUNT,
    ExpenseCategory,
    IncomeSource,
    LedgerValidationError,
    validate_budget,
    validate_expense,
    validate_income,
)


def test_validate_expense_coerces_form_strings() -> None:
    submission = validate_expense("50", " food ", "  Lunch  ")

    assert submission.amount == pytest.approx(50.0)
    assert submission.category is ExpenseCategory.FOOD
    assert submission.description == "Lunch"
    assert submission.currency is CurrencyCode.USD
    assert submission.canonical_amount() == pytest.approx(50.0)


def test_validate_expense_converts_entered_currency() -> None:
    """Amounts entered in another currency are converted back to USD."""

    submission = validate_expense("91", ExpenseCategory.EDUCATION, currency="eur")

    assert submission.currency is CurrencyCode.EUR
    assert submission.canonical_amount() == pytest.approx(100.0)


def test_validate_income_accepts_source_names_and_values() -> None:
    by_value = validate_income(10, "Part-time Job")
    by_name = validate_income(10, "part_time_job")

    assert by_value.source is IncomeSource.PART_TIME_JOB
    assert by_name.source is IncomeSource.PART_TIME_JOB


def test_zero_amount_is_allowed() -> None:
    assert validate_income("0", IncomeSource.OTHER).amount == 0.0


@pytest.mark.parametrize("amount", ["", None, "abc", "nan", "inf", "-5"])
def test_invalid_amounts_are_rejected(amount) -> None:
    with pytest.raises(LedgerValidationError) as excinfo:
        validate_expense(amount, ExpenseCategory.FOOD)

    assert any(message.startswith("amount") for message in excinfo.value.messages)


def test_missing_category_is_reported_alongside_amount() -> None:
    with pytest.raises(LedgerValidationError) as excinfo:
        validate_expense("", "")

    assert excinfo.value.messages == ["amount: field required", "category: field required"]


def test_unknown_category_and_currency_are_rejected() -> None:
    with pytest.raises(LedgerValidationError):
        validate_expense("10", "Groceries")
    with pytest.raises(LedgerValidationError):
        validate_income("10", IncomeSource.ALLOWANCE, currency="XYZ")


def test_validate_budget_converts_limit() -> None:
    submission = validate_budget("Housing", "790", currency=CurrencyCode.GBP)

    assert submission.category is ExpenseCategory.HOUSING
    assert submission.canonical_limit() == pytest.approx(1000.0)


def test_negative_budget_is_rejected() -> None:
    with pytest.raises(LedgerValidationError) as excinfo:
        validate_budget(ExpenseCategory.FOOD, -1)

    assert "limit" in str(excinfo.value)


def test_validation_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        validate_income(None, None)


def test_amount_above_maximum_is_rejected() -> None:
    with pytest.raises(LedgerValidationError) as excinfo:
        validate_expense("1.7e308", "Food", currency="GBP")

    assert any(message.startswith("amount") for message in excinfo.value.messages)


def test_amount_at_maximum_is_accepted() -> None:
    submission = validate_income(str(MAX_AMOUNT), IncomeSource.FREELANCE)

    assert submission.canonical_amount() == pytest.approx(MAX_AMOUNT)


def test_converted_amount_must_stay_within_maximum() -> None:
    """A value allowed as entered is still rejected once converted to USD."""

    with pytest.raises(LedgerValidationError) as excinfo:
        validate_expense("9e11", ExpenseCategory.FOOD, currency=CurrencyCode.GBP)

    assert "amount is" in str(excinfo.value)
    assert "after conversion" in str(excinfo.value)


def test_converted_budget_limit_must_stay_within_maximum() -> None:
    with pytest.raises(LedgerValidationError) as excinfo:
        validate_budget(ExpenseCategory.HOUSING, "9.5e11", currency="EUR")

    assert "limit is" in str(excinfo.value)
