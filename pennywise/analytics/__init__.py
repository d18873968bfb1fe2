"""Mini README: Derived figures for the Pennywise dashboard.

The aggregation module turns ledger snapshots into totals, the category
breakdown shown as a bar chart and per-budget utilisation.
"""

from .aggregation import (
    BudgetUsage,
    CategoryTotal,
    LedgerSummary,
    balance,
    budget_utilisation,
    category_breakdown,
    summarise,
    total_expenses,
    total_income,
)

__all__ = [
    "BudgetUsage",
    "CategoryTotal",
    "LedgerSummary",
    "balance",
    "budget_utilisation",
    "category_breakdown",
    "summarise",
    "total_expenses",
    "total_income",
]
