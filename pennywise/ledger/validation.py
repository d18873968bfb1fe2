"""Mini README: Caller-side validation for ledger submissions.

Structure:
    * LedgerValidationError - raised with readable messages when input is unusable.
    * ExpenseSubmission / IncomeSubmission / BudgetSubmission - validated payloads.
    * validate_expense / validate_income / validate_budget - entry points for callers.

``LedgerStore`` accepts whatever it is given. Anything that collects input
from a person (the dashboard forms, the CLI) must pass it through these
helpers first. Amounts must be finite, non-negative and no larger than
``MAX_AMOUNT``, both as entered and after conversion to the canonical unit;
categories and sources must belong to their enumerations. Submissions remember the
currency the amount was entered in and convert to the canonical unit on
request.
"""

from __future__ import annotations

import math
from typing import ClassVar, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..currency import CANONICAL_CURRENCY, CurrencyCode, unproject
from .models import ExpenseCategory, IncomeSource

# Upper bound for entered and canonical amounts; keeps sums and projections finite.
MAX_AMOUNT = 1e12


class LedgerValidationError(ValueError):
    """Input rejected before it reached the ledger store."""

    def __init__(self, messages: List[str]) -> None:
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


class _Submission(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    currency: CurrencyCode = CANONICAL_CURRENCY

    amount_field: ClassVar[str] = "amount"

    @field_validator("currency", mode="before")
    @classmethod
    def _coerce_currency(cls, value: object) -> object:
        if isinstance(value, str):
            return CurrencyCode.from_str(value)
        return value

    def canonical_value(self) -> float:
        raise NotImplementedError

    @model_validator(mode="after")
    def _check_canonical_range(self):
        """Reject values that leave the supported range once converted to the canonical unit."""

        value = self.canonical_value()
        if not math.isfinite(value) or value > MAX_AMOUNT:
            raise ValueError(
                f"{self.amount_field} is {value} {CANONICAL_CURRENCY.value} after conversion, "
                f"above the supported maximum of {MAX_AMOUNT:,.0f}"
            )
        return self


class ExpenseSubmission(_Submission):
    amount: float = Field(..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False)
    category: ExpenseCategory
    description: str = ""

    @field_validator("category", mode="before")
    @classmethod
    def _coerce_category(cls, value: object) -> object:
        if isinstance(value, str):
            return ExpenseCategory.from_str(value)
        return value

    def canonical_amount(self) -> float:
        return unproject(self.amount, self.currency)

    def canonical_value(self) -> float:
        return self.canonical_amount()


class IncomeSubmission(_Submission):
    amount: float = Field(..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False)
    source: IncomeSource
    description: str = ""

    @field_validator("source", mode="before")
    @classmethod
    def _coerce_source(cls, value: object) -> object:
        if isinstance(value, str):
            return IncomeSource.from_str(value)
        return value

    def canonical_amount(self) -> float:
        return unproject(self.amount, self.currency)

    def canonical_value(self) -> float:
        return self.canonical_amount()


class BudgetSubmission(_Submission):
    amount_field: ClassVar[str] = "limit"

    category: ExpenseCategory
    limit: float = Field(..., ge=0, le=MAX_AMOUNT, allow_inf_nan=False)

    @field_validator("category", mode="before")
    @classmethod
    def _coerce_category(cls, value: object) -> object:
        if isinstance(value, str):
            return ExpenseCategory.from_str(value)
        return value

    def canonical_limit(self) -> float:
        return unproject(self.limit, self.currency)

    def canonical_value(self) -> float:
        return self.canonical_limit()


def _messages(error: ValidationError) -> List[str]:
    messages = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"]) or "input"
        messages.append(f"{field}: {detail['msg']}")
    return messages


def _blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _check_required(**fields: object) -> None:
    missing = [f"{name}: field required" for name, value in fields.items() if _blank(value)]
    if missing:
        raise LedgerValidationError(missing)


def validate_expense(
    amount: object,
    category: object,
    description: Optional[str] = "",
    currency: object = CANONICAL_CURRENCY,
) -> ExpenseSubmission:
    """Validate an expense entered in ``currency``."""

    _check_required(amount=amount, category=category)
    try:
        return ExpenseSubmission(
            amount=amount,
            category=category,
            description=description or "",
            currency=currency,
        )
    except ValidationError as error:
        raise LedgerValidationError(_messages(error)) from error


def validate_income(
    amount: object,
    source: object,
    description: Optional[str] = "",
    currency: object = CANONICAL_CURRENCY,
) -> IncomeSubmission:
    """Validate an income entry entered in ``currency``."""

    _check_required(amount=amount, source=source)
    try:
        return IncomeSubmission(
            amount=amount,
            source=source,
            description=description or "",
            currency=currency,
        )
    except ValidationError as error:
        raise LedgerValidationError(_messages(error)) from error


def validate_budget(
    category: object,
    limit: object,
    currency: object = CANONICAL_CURRENCY,
) -> BudgetSubmission:
    """Validate a budget limit entered in ``currency``."""

    _check_required(category=category, limit=limit)
    try:
        return BudgetSubmission(category=category, limit=limit, currency=currency)
    except ValidationError as error:
        raise LedgerValidationError(_messages(error)) from error
