"""Mini README: Core package initializer for Pennywise.

Pennywise tracks a student's expenses, income and category budgets for a
single session. The ledger, aggregation and currency helpers live in
sub-packages; this module only re-exports the logging factory so callers
do not need to know the module layout.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
