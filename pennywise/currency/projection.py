"""Mini README: Static currency projection for display and entry.

Structure:
    * CurrencyCode - closed enumeration of supported display units.
    * RATES / CURRENCY_SYMBOLS - fixed tables keyed by ``CurrencyCode``.
    * project / unproject - convert between the canonical unit and a display unit.
    * round_for_display / format_amount - presentation helpers.
    * project_summary - JSON-ready view of a ``LedgerSummary`` in a display unit.

Every amount is stored in the canonical unit (USD). Rates are constants
baked into this module; they are deliberately not refreshed from any live
source, so displayed conversions are approximate. Rounding happens only in
the display helpers, never in ``project`` or ``unproject``.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Dict, Union

from ..utils import label

if TYPE_CHECKING:  # pragma: no cover
    from ..analytics.aggregation import LedgerSummary


class CurrencyCode(str, Enum):
    """Display units supported by the static rate table."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    INR = "INR"
    CAD = "CAD"

    @classmethod
    def from_str(cls, value: str) -> "CurrencyCode":
        """Coerce arbitrary casing into a supported currency code."""

        try:
            return cls(value.strip().upper())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported currency: {value}") from error


CANONICAL_CURRENCY = CurrencyCode.USD

# Units per one canonical USD.
RATES: Dict[CurrencyCode, float] = {
    CurrencyCode.USD: 1.0,
    CurrencyCode.EUR: 0.91,
    CurrencyCode.GBP: 0.79,
    CurrencyCode.JPY: 149.5,
    CurrencyCode.INR: 83.2,
    CurrencyCode.CAD: 1.36,
}

CURRENCY_SYMBOLS: Dict[CurrencyCode, str] = {
    CurrencyCode.USD: "$",
    CurrencyCode.EUR: "€",
    CurrencyCode.GBP: "£",
    CurrencyCode.JPY: "¥",
    CurrencyCode.INR: "₹",
    CurrencyCode.CAD: "CA$",
}

CurrencyLike = Union[CurrencyCode, str]


def _coerce(unit: CurrencyLike) -> CurrencyCode:
    if isinstance(unit, CurrencyCode):
        return unit
    return CurrencyCode.from_str(unit)


def rate(unit: CurrencyLike) -> float:
    """Return the multiplicative rate of ``unit`` relative to the canonical unit."""

    return RATES[_coerce(unit)]


def project(amount: float, unit: CurrencyLike) -> float:
    """Convert a canonical amount into ``unit`` without rounding."""

    return amount * rate(unit)


def unproject(amount: float, unit: CurrencyLike) -> float:
    """Convert an amount entered in ``unit`` back into the canonical unit."""

    return amount / rate(unit)


def round_for_display(amount: float) -> float:
    return round(amount, 2)


def format_amount(amount: float, unit: CurrencyLike = CANONICAL_CURRENCY) -> str:
    """Project a canonical amount and render it with symbol and two decimals."""

    code = _coerce(unit)
    projected = project(amount, code)
    sign = "-" if projected < 0 else ""
    return f"{sign}{CURRENCY_SYMBOLS[code]}{abs(projected):,.2f}"


def project_summary(summary: "LedgerSummary", unit: CurrencyLike) -> Dict[str, object]:
    """Return the summary with every monetary value projected for display."""

    code = _coerce(unit)

    def display(value: float) -> float:
        return round_for_display(project(value, code))

    return {
        "currency": code.value,
        "symbol": CURRENCY_SYMBOLS[code],
        "rate": RATES[code],
        "total_income": display(summary.total_income),
        "total_expenses": display(summary.total_expenses),
        "balance": display(summary.balance),
        "breakdown": [
            {"category": label(entry.category), "amount": display(entry.amount)}
            for entry in summary.breakdown
        ],
        "budgets": [
            {
                "category": label(usage.category),
                "limit": display(usage.limit),
                "spent": display(usage.spent),
                "remaining": display(usage.remaining),
                "exceeded": usage.exceeded,
            }
            for usage in summary.budgets
        ],
    }
