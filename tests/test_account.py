"""Mini README: Tests for the account cell consumed by the dispatcher.

Structure:
    * deposits and withdrawals mutate the balance in place.
    * overdrafts raise and leave the balance untouched.
    * construction rejects negative opening balances.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from bankqueue.accounts import Account, to_decimal
from bankqueue.exceptions import InvalidArgumentError, OverdraftError


def test_deposit_and_withdraw_update_balance() -> None:
    """Deposits add and withdrawals subtract from the live balance."""

    account = Account(1, 1000)
    account.deposit(250)
    account.withdraw("100.50")

    assert account.get_balance() == Decimal("1149.50")


def test_withdraw_more_than_balance_raises_overdraft() -> None:
    """An overdraft is refused and the balance stays where it was."""

    account = Account(2, 800)

    with pytest.raises(OverdraftError):
        account.withdraw(900)
    assert account.balance == Decimal("800")


def test_withdraw_entire_balance_is_allowed() -> None:
    account = Account(3, 500)
    account.withdraw(500)
    assert account.balance == 0


def test_negative_opening_balance_is_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        Account(4, -1)


def test_to_decimal_keeps_written_float_value() -> None:
    """Floats are converted through their string form, not binary expansion."""

    assert to_decimal(999.99) == Decimal("999.99")
    with pytest.raises(InvalidArgumentError):
        to_decimal("not-a-number")
    with pytest.raises(InvalidArgumentError):
        to_decimal(float("nan"))
