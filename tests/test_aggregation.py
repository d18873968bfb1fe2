"""Mini README: Tests for the ledger aggregation helpers.

Covers the headline totals, the zero-filled category breakdown, budget
utilisation and the combined ``summarise`` view, including the empty ledger
and NaN propagation.
"""

from __future__ import annotations

import math
import random

import pytest

from pennywise.analytics import (
    balance,
    budget_utilisation,
    category_breakdown,
    summarise,
    total_expenses,
    total_income,
)
from pennywise.ledger import ExpenseCategory, IncomeSource, LedgerStore


def test_empty_ledger_yields_zero_everywhere() -> None:
    store = LedgerStore()
    summary = summarise(store)

    assert summary.total_income == 0.0
    assert summary.total_expenses == 0.0
    assert summary.balance == 0.0
    assert [entry.amount for entry in summary.breakdown] == [0.0] * 6
    assert summary.budgets == []


def test_food_and_allowance_scenario() -> None:
    """Two food expenses and one allowance produce the expected figures."""

    store = LedgerStore()
    store.add_expense(50.0, ExpenseCategory.FOOD)
    store.add_expense(30.0, ExpenseCategory.FOOD)
    store.add_income(100.0, IncomeSource.ALLOWANCE)

    assert total_expenses(store.expenses) == pytest.approx(80.0)
    assert total_income(store.income) == pytest.approx(100.0)
    assert balance(store.income, store.expenses) == pytest.approx(20.0)

    breakdown = {entry.category: entry.amount for entry in category_breakdown(store.expenses)}
    assert breakdown[ExpenseCategory.FOOD] == pytest.approx(80.0)
    assert all(amount == 0.0 for category, amount in breakdown.items() if category is not ExpenseCategory.FOOD)


def test_totals_do_not_depend_on_insertion_order() -> None:
    amounts = [12.5, 3.0, 40.0, 0.0, 7.25, 19.99]
    shuffled = amounts[:]
    random.Random(7).shuffle(shuffled)

    forward = LedgerStore()
    backward = LedgerStore()
    for amount in amounts:
        forward.add_expense(amount, ExpenseCategory.OTHER)
        forward.add_income(amount, IncomeSource.FREELANCE)
    for amount in shuffled:
        backward.add_expense(amount, ExpenseCategory.OTHER)
        backward.add_income(amount, IncomeSource.FREELANCE)

    assert total_expenses(forward.expenses) == pytest.approx(sum(amounts))
    assert total_expenses(backward.expenses) == pytest.approx(sum(amounts))
    assert total_income(backward.income) == pytest.approx(sum(amounts))


def test_balance_can_go_negative() -> None:
    store = LedgerStore()
    store.add_income(25.0, IncomeSource.PART_TIME_JOB)
    store.add_expense(60.0, ExpenseCategory.ENTERTAINMENT)

    summary = summarise(store)

    assert summary.balance == pytest.approx(-35.0)
    assert summary.balance == pytest.approx(summary.total_income - summary.total_expenses)


def test_breakdown_has_one_entry_per_category_in_order() -> None:
    store = LedgerStore()
    store.add_expense(10.0, ExpenseCategory.HOUSING)
    store.add_expense(5.0, ExpenseCategory.EDUCATION)

    breakdown = category_breakdown(store.expenses)

    assert [entry.category for entry in breakdown] == list(ExpenseCategory)
    assert len(breakdown) == 6


def test_breakdown_accepts_a_custom_category_subset() -> None:
    store = LedgerStore()
    store.add_expense(10.0, ExpenseCategory.HOUSING)
    store.add_expense(4.0, ExpenseCategory.FOOD)

    breakdown = category_breakdown(store.expenses, [ExpenseCategory.FOOD])

    assert len(breakdown) == 1
    assert breakdown[0].amount == pytest.approx(4.0)


def test_budget_utilisation_flags_overspending() -> None:
    store = LedgerStore()
    store.set_budget(ExpenseCategory.FOOD, 100.0)
    store.set_budget(ExpenseCategory.TRANSPORTATION, 50.0)
    store.add_expense(120.0, ExpenseCategory.FOOD)
    store.add_expense(20.0, ExpenseCategory.TRANSPORTATION)

    usages = budget_utilisation(store.expenses, store.budgets)

    food, transport = usages
    assert food.category is ExpenseCategory.FOOD
    assert food.spent == pytest.approx(120.0)
    assert food.remaining == pytest.approx(-20.0)
    assert food.exceeded is True
    assert transport.remaining == pytest.approx(30.0)
    assert transport.exceeded is False


def test_nan_amounts_propagate_into_totals() -> None:
    """Aggregation does not guard against amounts that skipped validation."""

    store = LedgerStore()
    store.add_expense(10.0, ExpenseCategory.FOOD)
    store.add_expense(float("nan"), ExpenseCategory.FOOD)

    assert math.isnan(total_expenses(store.expenses))
    assert math.isnan(balance(store.income, store.expenses))
