"""Mini README: Core package initializer for the bankqueue engine.

This module exposes the logging factory alongside the handful of classes
callers need to queue and apply bank operations: accounts, transaction
records, the tiered dispatcher and its exception taxonomy. Submodules stay
importable on their own for callers that want a narrower surface.
"""

from .logging_utils import get_logger
from .accounts import Account
from .exceptions import (
    BankQueueError,
    CapacityExceededError,
    EmptyHeapError,
    InvalidArgumentError,
    LoanDeniedError,
    NoTransactionError,
    OverdraftError,
)
from .queueing import AmountTier, TierDispatcher, TransactionHeap
from .transactions import Priority, Transaction, TransactionType

__all__ = [
    "Account",
    "AmountTier",
    "BankQueueError",
    "CapacityExceededError",
    "EmptyHeapError",
    "InvalidArgumentError",
    "LoanDeniedError",
    "NoTransactionError",
    "OverdraftError",
    "Priority",
    "TierDispatcher",
    "Transaction",
    "TransactionHeap",
    "TransactionType",
    "get_logger",
]
