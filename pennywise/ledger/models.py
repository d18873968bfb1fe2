"""Mini README: Record types and closed enumerations for the ledger.

Structure:
    * ExpenseCategory / IncomeSource - fixed enumerations offered by the forms.
    * ExpenseRecord / IncomeRecord - immutable entries owned by the ledger store.
    * BudgetLimit - per-category spending limit, unique per category.
    * label - display helper re-exported from ``pennywise.utils``.

Records are frozen: the store only ever appends new records or replaces a
budget wholesale. Amounts are always expressed in the canonical currency.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict

from ..utils import label


class _LabelledEnum(str, Enum):
    @classmethod
    def from_str(cls, value: str):
        """Match a member by value or name, ignoring case and surrounding spaces."""

        try:
            normalised = value.strip().lower()
        except AttributeError as error:
            raise ValueError(f"Unsupported {cls.__name__}: {value}") from error
        for member in cls:
            if normalised in (member.value.lower(), member.name.lower()):
                return member
        raise ValueError(f"Unsupported {cls.__name__}: {value}")


class ExpenseCategory(_LabelledEnum):
    """Expense categories in the order the breakdown chart shows them."""

    FOOD = "Food"
    TRANSPORTATION = "Transportation"
    ENTERTAINMENT = "Entertainment"
    EDUCATION = "Education"
    HOUSING = "Housing"
    OTHER = "Other"


class IncomeSource(_LabelledEnum):
    """Where a student's income comes from."""

    PART_TIME_JOB = "Part-time Job"
    ALLOWANCE = "Allowance"
    SCHOLARSHIP = "Scholarship"
    FREELANCE = "Freelance"
    OTHER = "Other"


@dataclass(frozen=True, slots=True)
class ExpenseRecord:
    """A single expense in canonical currency."""

    record_id: str
    amount: float
    category: ExpenseCategory
    description: str
    recorded_at: datetime

    def as_dict(self) -> Dict[str, object]:
        return {
            "record_id": self.record_id,
            "amount": self.amount,
            "category": label(self.category),
            "description": self.description,
            "recorded_at": self.recorded_at.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class IncomeRecord:
    """A single income entry in canonical currency."""

    record_id: str
    amount: float
    source: IncomeSource
    description: str
    recorded_at: datetime

    def as_dict(self) -> Dict[str, object]:
        return {
            "record_id": self.record_id,
            "amount": self.amount,
            "source": label(self.source),
            "description": self.description,
            "recorded_at": self.recorded_at.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class BudgetLimit:
    """Spending limit for one expense category."""

    category: ExpenseCategory
    limit: float

    def as_dict(self) -> Dict[str, object]:
        return {"category": label(self.category), "limit": self.limit}
