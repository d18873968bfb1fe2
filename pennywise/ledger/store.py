"""Mini README: In-memory ledger store for a single session.

Structure:
    * ChangeKind - enumerates the mutations subscribers can observe.
    * LedgerChange - notification payload handed to subscribers.
    * LedgerStore - owns expenses, income and budgets and notifies listeners.

The store is constructed explicitly by whoever owns the session (the web
application factory, a test) and handed to consumers by reference. It does
not validate anything: amounts, categories and sources are stored exactly
as given, so callers must run ``pennywise.ledger.validation`` first. Every
mutation is applied completely before any subscriber is called.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union
from uuid import uuid4

from ..logging_utils import get_logger
from .models import BudgetLimit, ExpenseCategory, ExpenseRecord, IncomeRecord, IncomeSource, label

LOGGER = get_logger(__name__)


class ChangeKind(str, Enum):
    """Mutations published to store subscribers."""

    EXPENSE_ADDED = "expense_added"
    INCOME_ADDED = "income_added"
    BUDGET_SET = "budget_set"
    RESET = "reset"


@dataclass(frozen=True, slots=True)
class LedgerChange:
    """Describe a completed mutation; ``record`` is ``None`` for resets."""

    kind: ChangeKind
    record: Union[ExpenseRecord, IncomeRecord, BudgetLimit, None]
    store: "LedgerStore"


Listener = Callable[[LedgerChange], None]


def _default_clock() -> datetime:
    return datetime.now(timezone.utc)


def _default_id() -> str:
    return str(uuid4())


class LedgerStore:
    """Single source of truth for the session's financial records."""

    def __init__(
        self,
        *,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._id_factory = id_factory or _default_id
        self._clock = clock or _default_clock
        self._expenses: Tuple[ExpenseRecord, ...] = ()
        self._income: Tuple[IncomeRecord, ...] = ()
        self._budgets: Tuple[BudgetLimit, ...] = ()
        self._listeners: List[Listener] = []
        LOGGER.debug("Ledger store initialised")

    @property
    def expenses(self) -> Tuple[ExpenseRecord, ...]:
        return self._expenses

    @property
    def income(self) -> Tuple[IncomeRecord, ...]:
        return self._income

    @property
    def budgets(self) -> Tuple[BudgetLimit, ...]:
        return self._budgets

    def budget_for(self, category: ExpenseCategory) -> Optional[BudgetLimit]:
        """Return the limit configured for ``category`` if one exists."""

        for budget in self._budgets:
            if budget.category == category:
                return budget
        return None

    def add_expense(
        self,
        amount: float,
        category: ExpenseCategory,
        description: str = "",
        recorded_at: Optional[datetime] = None,
    ) -> ExpenseRecord:
        """Append an expense with a fresh identifier; no validation is applied."""

        record = ExpenseRecord(
            record_id=self._id_factory(),
            amount=amount,
            category=category,
            description=description,
            recorded_at=recorded_at if recorded_at is not None else self._clock(),
        )
        self._expenses = self._expenses + (record,)
        LOGGER.info("Recorded expense %s of %s in %s", record.record_id, amount, label(category))
        self._notify(ChangeKind.EXPENSE_ADDED, record)
        return record

    def add_income(
        self,
        amount: float,
        source: IncomeSource,
        description: str = "",
        recorded_at: Optional[datetime] = None,
    ) -> IncomeRecord:
        """Append an income entry with a fresh identifier; no validation is applied."""

        record = IncomeRecord(
            record_id=self._id_factory(),
            amount=amount,
            source=source,
            description=description,
            recorded_at=recorded_at if recorded_at is not None else self._clock(),
        )
        self._income = self._income + (record,)
        LOGGER.info("Recorded income %s of %s from %s", record.record_id, amount, label(source))
        self._notify(ChangeKind.INCOME_ADDED, record)
        return record

    def set_budget(self, category: ExpenseCategory, limit: float) -> BudgetLimit:
        """Insert or replace the budget for ``category``.

        Any existing limit for the category is dropped before the new one is
        appended, so the collection never holds two entries for one category.
        """

        budget = BudgetLimit(category=category, limit=limit)
        remaining = tuple(existing for existing in self._budgets if existing.category != category)
        self._budgets = remaining + (budget,)
        LOGGER.info("Budget for %s set to %s", label(category), limit)
        self._notify(ChangeKind.BUDGET_SET, budget)
        return budget

    def reset(self) -> None:
        """Drop every record and budget held for the session."""

        self._expenses = ()
        self._income = ()
        self._budgets = ()
        LOGGER.info("Ledger reset")
        self._notify(ChangeKind.RESET, None)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that unsubscribes it."""

        self._listeners.append(listener)
        LOGGER.debug("Subscribed listener %s", getattr(listener, "__name__", listener))
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, kind: ChangeKind, record) -> None:
        change = LedgerChange(kind=kind, record=record, store=self)
        for listener in list(self._listeners):
            listener(change)
