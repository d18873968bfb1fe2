"""Mini README: Display labels for enum members and raw values.

Shared by the ledger models and the currency projection so neither has to
import the other just to turn a category or source into text.
"""

from __future__ import annotations

from enum import Enum


def label(value: object) -> str:
    """Return the display text for an enum member or any raw value."""

    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
