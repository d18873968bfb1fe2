"""Mini README: Pure aggregation helpers over ledger snapshots.

Structure:
    * CategoryTotal / BudgetUsage / LedgerSummary - result containers.
    * total_expenses / total_income / balance - headline figures.
    * category_breakdown - one zero-filled total per expense category.
    * budget_utilisation - spending measured against each configured limit.
    * summarise - every figure above computed from one store snapshot.

Nothing here caches or rounds. Values are recomputed from the current
records on every call and stay in the canonical currency; projection and
rounding are left to ``pennywise.currency``. Sums use plain float addition,
so a NaN amount that slipped past validation propagates into the totals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, List, Sequence, Type, Union

from ..logging_utils import get_logger
from ..ledger.models import BudgetLimit, ExpenseCategory, ExpenseRecord, IncomeRecord

if TYPE_CHECKING:  # pragma: no cover
    from ..ledger.store import LedgerStore

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CategoryTotal:
    """Total spent in one expense category."""

    category: ExpenseCategory
    amount: float


@dataclass(frozen=True, slots=True)
class BudgetUsage:
    """Spending against a budget limit; ``remaining`` goes negative when exceeded."""

    category: ExpenseCategory
    limit: float
    spent: float
    remaining: float
    exceeded: bool


@dataclass(frozen=True, slots=True)
class LedgerSummary:
    """Headline figures for one snapshot of the ledger."""

    total_income: float
    total_expenses: float
    balance: float
    breakdown: List[CategoryTotal] = field(default_factory=list)
    budgets: List[BudgetUsage] = field(default_factory=list)


def total_expenses(records: Iterable[ExpenseRecord]) -> float:
    return sum((record.amount for record in records), 0.0)


def total_income(records: Iterable[IncomeRecord]) -> float:
    return sum((record.amount for record in records), 0.0)


def balance(income_records: Iterable[IncomeRecord], expense_records: Iterable[ExpenseRecord]) -> float:
    """Income minus expenses; negative balances are reported as-is."""

    return total_income(income_records) - total_expenses(expense_records)


def _spent_in(records: Sequence[ExpenseRecord], category: object) -> float:
    return sum((record.amount for record in records if record.category == category), 0.0)


def category_breakdown(
    records: Iterable[ExpenseRecord],
    categories: Union[Type[ExpenseCategory], Iterable[ExpenseCategory]] = ExpenseCategory,
) -> List[CategoryTotal]:
    """Return exactly one total per category, in enumeration order.

    Categories without expenses report ``0.0`` rather than being omitted.
    Records whose category is outside ``categories`` are not counted.
    """

    snapshot = list(records)
    return [CategoryTotal(category=category, amount=_spent_in(snapshot, category)) for category in categories]


def budget_utilisation(
    expense_records: Iterable[ExpenseRecord],
    budgets: Iterable[BudgetLimit],
) -> List[BudgetUsage]:
    """Measure spending per budgeted category, preserving budget order."""

    snapshot = list(expense_records)
    usages: List[BudgetUsage] = []
    for budget in budgets:
        spent = _spent_in(snapshot, budget.category)
        usages.append(
            BudgetUsage(
                category=budget.category,
                limit=budget.limit,
                spent=spent,
                remaining=budget.limit - spent,
                exceeded=spent > budget.limit,
            )
        )
    return usages


def summarise(store: "LedgerStore") -> LedgerSummary:
    """Compute every aggregate from a single snapshot of ``store``."""

    expenses = store.expenses
    income = store.income
    budgets = store.budgets
    summary = LedgerSummary(
        total_income=total_income(income),
        total_expenses=total_expenses(expenses),
        balance=balance(income, expenses),
        breakdown=category_breakdown(expenses),
        budgets=budget_utilisation(expenses, budgets),
    )
    LOGGER.debug(
        "Summarised ledger -> income: %.2f expenses: %.2f balance: %.2f budgets: %s",
        summary.total_income,
        summary.total_expenses,
        summary.balance,
        len(summary.budgets),
    )
    return summary
