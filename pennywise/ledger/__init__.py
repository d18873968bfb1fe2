"""Mini README: Session ledger for Pennywise.

Groups the record models, the in-memory ``LedgerStore`` and the validation
helpers callers must run before mutating the store. The store itself stays
deliberately permissive; see ``validation`` for the input contract.
"""

from .models import BudgetLimit, ExpenseCategory, ExpenseRecord, IncomeRecord, IncomeSource, label
from .store import ChangeKind, LedgerChange, LedgerStore
from .validation import (
    BudgetSubmission,
    ExpenseSubmission,
    IncomeSubmission,
    MAX_AMOUNT,
    LedgerValidationError,
    validate_budget,
    validate_expense,
    validate_income,
)

__all__ = [
    "BudgetLimit",
    "BudgetSubmission",
    "ChangeKind",
    "ExpenseCategory",
    "ExpenseRecord",
    "ExpenseSubmission",
    "IncomeRecord",
    "IncomeSource",
    "IncomeSubmission",
    "LedgerChange",
    "LedgerStore",
    "LedgerValidationError",
    "MAX_AMOUNT",
    "label",
    "validate_budget",
    "validate_expense",
    "validate_income",
]
