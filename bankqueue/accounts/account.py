"""Mini README: Mutable account cell with overdraft protection.

Structure:
    * to_decimal - coerce ints, floats and strings into ``Decimal`` values.
    * Account - balance holder exposing deposit, withdraw and observers.

Balances are held as ``Decimal`` so amounts such as ``999.99`` keep their
written value when compared against tier thresholds. Floats are converted
through ``str`` for the same reason.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Dict, Union

from ..exceptions import InvalidArgumentError, OverdraftError
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

Amount = Union[Decimal, int, float, str]


def to_decimal(value: Amount) -> Decimal:
    """Convert a numeric value to ``Decimal``, rejecting non-finite input."""

    if isinstance(value, bool):
        raise InvalidArgumentError(f"Amounts must be numeric, got {value!r}")
    try:
        converted = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as error:
        raise InvalidArgumentError(f"Amounts must be numeric, got {value!r}") from error
    if not converted.is_finite():
        raise InvalidArgumentError(f"Amounts must be finite, got {value!r}")
    return converted


@dataclass(eq=False, slots=True)
class Account:
    """A single balance cell identified by ``account_id``."""

    account_id: int
    balance: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        self.balance = to_decimal(self.balance)
        if self.balance < 0:
            raise InvalidArgumentError(
                f"Account {self.account_id} cannot open with a negative balance"
            )

    def get_balance(self) -> Decimal:
        return self.balance

    def deposit(self, amount: Amount) -> None:
        """Add ``amount`` to the balance; deposits always succeed."""

        value = to_decimal(amount)
        self.balance += value
        LOGGER.debug("Account %s deposit %s -> %s", self.account_id, value, self.balance)

    def withdraw(self, amount: Amount) -> None:
        """Remove ``amount`` from the balance, refusing to overdraw."""

        value = to_decimal(amount)
        if value > self.balance:
            raise OverdraftError(
                f"Withdrawal of {value} exceeds balance {self.balance} "
                f"on account {self.account_id}"
            )
        self.balance -= value
        LOGGER.debug("Account %s withdraw %s -> %s", self.account_id, value, self.balance)

    def as_dict(self) -> Dict[str, object]:
        """Export the account with serialisable values."""

        return {"account_id": self.account_id, "balance": str(self.balance)}
