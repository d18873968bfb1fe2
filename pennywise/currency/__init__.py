"""Mini README: Currency helpers for Pennywise.

Exposes the static rate table together with the projection helpers used by
the dashboard to show canonical amounts in the selected display unit and to
convert user-entered amounts back before they reach the ledger.
"""

from .projection import (
    CANONICAL_CURRENCY,
    CURRENCY_SYMBOLS,
    RATES,
    CurrencyCode,
    format_amount,
    project,
    project_summary,
    rate,
    round_for_display,
    unproject,
)

__all__ = [
    "CANONICAL_CURRENCY",
    "CURRENCY_SYMBOLS",
    "RATES",
    "CurrencyCode",
    "format_amount",
    "project",
    "project_summary",
    "rate",
    "round_for_display",
    "unproject",
]
