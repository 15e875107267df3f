"""Mini README: JSON scenarios describing accounts and queued transactions.

Structure:
    * AccountSpec / TransactionSpec - pydantic models for one entry each.
    * Scenario - validated document with cross-reference checks.
    * BuiltScenario - live accounts, a loaded dispatcher and its records.
    * load_scenario - parse a scenario file from disk.
    * demo_scenario - deterministic demo data for the CLI.

Example document::

    {
      "accounts": [{"account_id": 1, "balance": "2000"}],
      "transactions": [{"account_id": 1, "type": "deposit", "amount": "800"}]
    }

Transactions are built and routed in file order, so loan priorities are
derived from the opening balances.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Dict, List, Union

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..accounts import Account
from ..exceptions import InvalidArgumentError
from ..logging_utils import get_logger
from ..queueing import TierDispatcher
from ..transactions import Transaction, TransactionType

LOGGER = get_logger(__name__)


class AccountSpec(BaseModel):
    account_id: int
    balance: Decimal = Field(Decimal("0"), ge=0)


class TransactionSpec(BaseModel):
    account_id: int
    type: TransactionType
    amount: Decimal = Field(..., gt=0)

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: object) -> object:
        if isinstance(value, str):
            return TransactionType.from_str(value)
        return value


@dataclass(slots=True)
class BuiltScenario:
    """Runtime objects produced from a ``Scenario``."""

    accounts: Dict[int, Account]
    dispatcher: TierDispatcher
    transactions: List[Transaction] = field(default_factory=list)

    def balances(self) -> Dict[str, str]:
        return {str(account_id): str(account.balance) for account_id, account in self.accounts.items()}


class Scenario(BaseModel):
    """Accounts plus the transactions to queue against them."""

    accounts: List[AccountSpec]
    transactions: List[TransactionSpec] = Field(default_factory=list)

    @field_validator("accounts")
    @classmethod
    def _unique_accounts(cls, accounts: List[AccountSpec]) -> List[AccountSpec]:
        seen = set()
        for entry in accounts:
            if entry.account_id in seen:
                raise ValueError(f"Duplicate account id {entry.account_id}")
            seen.add(entry.account_id)
        return accounts

    def build(self, capacity: int) -> BuiltScenario:
        """Create accounts, then build and route each transaction in order.

        Raises:
            InvalidArgumentError: a transaction names an unknown account.
            CapacityExceededError: a tier fills up while queueing.
        """

        accounts = {entry.account_id: Account(entry.account_id, entry.balance) for entry in self.accounts}
        dispatcher = TierDispatcher(capacity)
        built = BuiltScenario(accounts=accounts, dispatcher=dispatcher)
        for entry in self.transactions:
            account = accounts.get(entry.account_id)
            if account is None:
                raise InvalidArgumentError(f"Transaction references unknown account {entry.account_id}")
            transaction = Transaction(account, entry.amount, entry.type)
            dispatcher.route(transaction)
            built.transactions.append(transaction)
        LOGGER.debug(
            "Built scenario with %s accounts and %s queued transactions",
            len(accounts),
            len(built.transactions),
        )
        return built


def load_scenario(path: Union[str, Path]) -> Scenario:
    """Read and validate a scenario file."""

    scenario_path = Path(path).expanduser()
    try:
        payload = json.loads(scenario_path.read_text(encoding="utf-8"))
        return Scenario.model_validate(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as error:
        raise InvalidArgumentError(f"Scenario {scenario_path} is not valid UTF-8 JSON: {error}") from error
    except ValidationError as error:
        raise InvalidArgumentError(f"Scenario {scenario_path} is invalid: {error}") from error


def demo_scenario() -> Scenario:
    """Return a small scenario covering every outcome the engine produces."""

    return Scenario(
        accounts=[
            AccountSpec(account_id=321, balance=Decimal("2000")),
            AccountSpec(account_id=654, balance=Decimal("1500")),
            AccountSpec(account_id=987, balance=Decimal("3000")),
            AccountSpec(account_id=202, balance=Decimal("2500")),
            AccountSpec(account_id=555, balance=Decimal("800")),
        ],
        transactions=[
            TransactionSpec(account_id=321, type=TransactionType.DEPOSIT, amount=Decimal("800")),
            TransactionSpec(account_id=654, type=TransactionType.WITHDRAWAL, amount=Decimal("700")),
            TransactionSpec(
                account_id=987, type=TransactionType.LOAN_APPLICATION, amount=Decimal("4000")
            ),
            TransactionSpec(
                account_id=202, type=TransactionType.LOAN_APPLICATION, amount=Decimal("30000")
            ),
            TransactionSpec(account_id=555, type=TransactionType.WITHDRAWAL, amount=Decimal("900")),
        ],
    )
