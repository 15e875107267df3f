"""Mini README: Three-tier dispatcher that routes and applies transactions.

Structure:
    * AmountTier - enum naming the low, medium and high buckets.
    * tier_for_amount - routing rule from amount to tier.
    * TierDispatcher - owns one ``TransactionHeap`` per tier, always serves
      the highest non-empty tier first and applies popped records.

Tiers partition records by amount, not by priority; priority only orders
records inside a tier. Applying a record removes it from its heap before
the account is touched, so a withdrawal that overdraws or a loan that is
denied is dropped and the error is raised to the caller.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Dict, Tuple

from ..accounts.account import Amount, to_decimal
from ..exceptions import LoanDeniedError, NoTransactionError, OverdraftError
from ..logging_utils import get_logger
from ..transactions import Transaction, TransactionType
from .heap import TransactionHeap

LOGGER = get_logger(__name__)

HIGH_TIER_THRESHOLD = Decimal("1000000")
MEDIUM_TIER_THRESHOLD = Decimal("1000")
# Checked against the balance at apply time; independent of the 3x rule
# used to rank loans when they are built.
LOAN_ADMISSION_MULTIPLIER = 10


class AmountTier(str, Enum):
    """Amount buckets, each backed by its own heap."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def tier_for_amount(amount: Amount) -> AmountTier:
    """Return the tier a transaction of ``amount`` is routed to."""

    value = to_decimal(amount)
    if value >= HIGH_TIER_THRESHOLD:
        return AmountTier.HIGH
    if value >= MEDIUM_TIER_THRESHOLD:
        return AmountTier.MEDIUM
    return AmountTier.LOW


class TierDispatcher:
    """Route transactions into amount tiers and apply them in order."""

    def __init__(self, capacity_per_tier: int) -> None:
        self.low = TransactionHeap(capacity_per_tier)
        self.medium = TransactionHeap(capacity_per_tier)
        self.high = TransactionHeap(capacity_per_tier)
        LOGGER.debug("Dispatcher initialised with %s slots per tier", capacity_per_tier)

    def _tiers_by_precedence(self) -> Tuple[TransactionHeap, ...]:
        return (self.high, self.medium, self.low)

    def tier(self, tier: AmountTier) -> TransactionHeap:
        """Return the heap backing ``tier``."""

        heaps: Dict[AmountTier, TransactionHeap] = {
            AmountTier.LOW: self.low,
            AmountTier.MEDIUM: self.medium,
            AmountTier.HIGH: self.high,
        }
        return heaps[AmountTier(tier)]

    def pending(self) -> int:
        return sum(len(heap) for heap in self._tiers_by_precedence())

    def has_pending(self) -> bool:
        return self.pending() > 0

    def route(self, transaction: Transaction) -> AmountTier:
        """Queue ``transaction`` in the tier matching its amount.

        ``CapacityExceededError`` from a full tier propagates unchanged.
        """

        tier = tier_for_amount(transaction.amount)
        self.tier(tier).insert(transaction)
        LOGGER.debug(
            "Routed %s of %s for account %s to %s tier",
            transaction.transaction_type.value,
            transaction.amount,
            transaction.account.account_id,
            tier.value,
        )
        return tier

    def next_transaction(self) -> Transaction:
        """Remove and return the next transaction, high tier first.

        Raises:
            NoTransactionError: when all three tiers are empty.
        """

        for heap in self._tiers_by_precedence():
            if not heap.is_empty():
                return heap.extract_max()
        raise NoTransactionError("No transactions to process")

    def peek_next_transaction(self) -> Transaction:
        """Return the transaction ``next_transaction`` would remove."""

        for heap in self._tiers_by_precedence():
            if not heap.is_empty():
                return heap.peek()
        raise NoTransactionError("No transactions to process")

    def apply(self) -> Transaction:
        """Pop the next transaction and execute it against its account.

        Raises:
            NoTransactionError: when nothing is queued.
            OverdraftError: a withdrawal exceeded the current balance.
            LoanDeniedError: a loan exceeded ten times the current balance.

        The popped transaction is not re-queued when it is rejected.
        """

        transaction = self.next_transaction()
        account = transaction.account
        amount = transaction.amount

        if transaction.transaction_type is TransactionType.WITHDRAWAL:
            try:
                account.withdraw(amount)
            except OverdraftError:
                LOGGER.warning(
                    "Dropped withdrawal of %s: account %s holds %s",
                    amount,
                    account.account_id,
                    account.get_balance(),
                )
                raise
        elif transaction.transaction_type is TransactionType.DEPOSIT:
            account.deposit(amount)
        elif transaction.transaction_type is TransactionType.LOAN_APPLICATION:
            balance = account.get_balance()
            if amount > LOAN_ADMISSION_MULTIPLIER * balance:
                LOGGER.warning(
                    "Denied loan of %s: account %s holds %s",
                    amount,
                    account.account_id,
                    balance,
                )
                raise LoanDeniedError(
                    f"Loan of {amount} exceeds {LOAN_ADMISSION_MULTIPLIER}x "
                    f"balance {balance} on account {account.account_id}"
                )
            account.deposit(amount)

        LOGGER.info(
            "Applied %s of %s to account %s, balance now %s",
            transaction.transaction_type.value,
            amount,
            account.account_id,
            account.get_balance(),
        )
        return transaction
