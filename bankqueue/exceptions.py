"""Mini README: Exception taxonomy raised by the bankqueue engine.

Every signal the engine can raise derives from ``BankQueueError`` so a
presentation layer can catch them in one place. None of them are retried
internally; the caller decides what to do next.
"""


class BankQueueError(Exception):
    """Base exception for the bankqueue engine."""


class InvalidArgumentError(BankQueueError, ValueError):
    """A non-positive amount, capacity or a negative opening balance."""


class CapacityExceededError(BankQueueError):
    """A fixed-capacity heap is full and cannot accept another record."""


class EmptyHeapError(BankQueueError, LookupError):
    """A pop or peek was attempted on an empty heap."""


class NoTransactionError(EmptyHeapError):
    """Every tier of the dispatcher is empty."""


class OverdraftError(BankQueueError):
    """A withdrawal exceeds the account's current balance."""


class LoanDeniedError(BankQueueError):
    """A loan application failed the execution-time admission rule."""
