"""Mini README: Transaction records queued by the dispatcher.

Re-exports the record type together with its kind and priority enums.
"""

from .transaction import (
    URGENT_LOAN_MULTIPLIER,
    Priority,
    Transaction,
    TransactionType,
    derive_priority,
)

__all__ = [
    "Priority",
    "Transaction",
    "TransactionType",
    "URGENT_LOAN_MULTIPLIER",
    "derive_priority",
]
