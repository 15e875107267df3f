"""Mini README: Immutable transaction records and their ranking rule.

Structure:
    * TransactionType - enum of withdrawal, deposit and loan application.
    * Priority - ordered ranks LOW < NORMAL < HIGH < URGENT.
    * derive_priority - maps a kind, amount and balance onto a rank.
    * Transaction - frozen record holding a shared account reference.

Priority is fixed when the record is built. Ranking between two records
with the same priority reads each account's balance at comparison time,
so a balance change after queueing can reorder records that are still
waiting in a heap. That live read is intentional and must not be replaced
by a snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum, IntEnum
from typing import Dict

from ..accounts import Account, to_decimal
from ..exceptions import InvalidArgumentError

# A loan is urgent when it asks for at most this multiple of the balance.
URGENT_LOAN_MULTIPLIER = 3


class TransactionType(str, Enum):
    """Enumerate the supported operation kinds."""

    WITHDRAWAL = "withdrawal"
    DEPOSIT = "deposit"
    LOAN_APPLICATION = "loan_application"

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Coerce arbitrary casing (and dashes or spaces) into a kind."""

        try:
            normalised = value.strip().lower().replace("-", "_").replace(" ", "_")
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise InvalidArgumentError(f"Unsupported transaction type: {value}") from error


class Priority(IntEnum):
    LOW = 0
    NORMAL = 1
    HIGH = 2
    URGENT = 3


def derive_priority(
    transaction_type: TransactionType, amount: Decimal, balance: Decimal
) -> Priority:
    """Return the construction-time priority for an operation."""

    if transaction_type is TransactionType.DEPOSIT:
        return Priority.HIGH
    if transaction_type is TransactionType.WITHDRAWAL:
        return Priority.NORMAL
    if transaction_type is TransactionType.LOAN_APPLICATION:
        if amount <= URGENT_LOAN_MULTIPLIER * balance:
            return Priority.URGENT
        return Priority.LOW
    raise InvalidArgumentError(f"Unsupported transaction type: {transaction_type!r}")


@dataclass(frozen=True, eq=False, slots=True)
class Transaction:
    """A pending operation against a shared account."""

    account: Account
    amount: Decimal
    transaction_type: TransactionType
    priority: Priority = field(init=False)

    def __post_init__(self) -> None:
        amount = to_decimal(self.amount)
        if amount <= 0:
            raise InvalidArgumentError(f"Transaction amount must be positive, got {amount}")
        transaction_type = self.transaction_type
        if not isinstance(transaction_type, TransactionType):
            transaction_type = TransactionType.from_str(str(transaction_type))
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "transaction_type", transaction_type)
        object.__setattr__(
            self,
            "priority",
            derive_priority(transaction_type, amount, self.account.get_balance()),
        )

    def compare_to(self, other: "Transaction") -> int:
        """Rank against ``other``: priority first, then live account balance.

        Returns a positive number when this record outranks ``other``, a
        negative number when it ranks below, and zero on a full tie.
        """

        if self.priority != other.priority:
            return 1 if self.priority > other.priority else -1
        own_balance = self.account.get_balance()
        other_balance = other.account.get_balance()
        if own_balance == other_balance:
            return 0
        return 1 if own_balance > other_balance else -1

    def outranks(self, other: "Transaction") -> bool:
        return self.compare_to(other) > 0

    def as_dict(self) -> Dict[str, object]:
        """Export the record with serialisable values."""

        return {
            "account_id": self.account.account_id,
            "type": self.transaction_type.value,
            "amount": str(self.amount),
            "priority": self.priority.name.lower(),
        }
