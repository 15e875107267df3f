"""Mini README: Drain a dispatcher and collect per-transaction outcomes.

Structure:
    * OutcomeStatus - applied versus rejected.
    * TransactionOutcome - one processed record plus the resulting balance.
    * BatchReport - ordered outcomes with summary counts.
    * process_all - apply until the dispatcher reports nothing pending.

Overdrafts and denied loans are expected business outcomes here, so they
are recorded instead of stopping the batch. Any other error propagates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional

from ..exceptions import LoanDeniedError, NoTransactionError, OverdraftError
from ..logging_utils import get_logger
from ..queueing import TierDispatcher
from ..transactions import Transaction

LOGGER = get_logger(__name__)


class OutcomeStatus(str, Enum):
    APPLIED = "applied"
    REJECTED = "rejected"


@dataclass(slots=True)
class TransactionOutcome:
    """Result of applying a single transaction."""

    transaction: Transaction
    status: OutcomeStatus
    balance_after: Decimal
    error: Optional[str] = None

    def as_dict(self) -> Dict[str, object]:
        payload = self.transaction.as_dict()
        payload.update(
            {
                "status": self.status.value,
                "balance_after": str(self.balance_after),
                "error": self.error,
            }
        )
        return payload


@dataclass(slots=True)
class BatchReport:
    """Outcomes in the order the dispatcher served them."""

    outcomes: List[TransactionOutcome] = field(default_factory=list)

    @property
    def applied(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is OutcomeStatus.APPLIED)

    @property
    def rejected(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is OutcomeStatus.REJECTED)

    def as_dict(self) -> Dict[str, object]:
        return {
            "applied": self.applied,
            "rejected": self.rejected,
            "outcomes": [outcome.as_dict() for outcome in self.outcomes],
        }


def process_all(dispatcher: TierDispatcher) -> BatchReport:
    """Apply queued transactions until every tier is empty."""

    report = BatchReport()
    while True:
        try:
            upcoming = dispatcher.peek_next_transaction()
        except NoTransactionError:
            break
        try:
            applied = dispatcher.apply()
        except (OverdraftError, LoanDeniedError) as error:
            report.outcomes.append(
                TransactionOutcome(
                    transaction=upcoming,
                    status=OutcomeStatus.REJECTED,
                    balance_after=upcoming.account.get_balance(),
                    error=str(error),
                )
            )
            continue
        report.outcomes.append(
            TransactionOutcome(
                transaction=applied,
                status=OutcomeStatus.APPLIED,
                balance_after=applied.account.get_balance(),
            )
        )
    LOGGER.info("Batch finished: %s applied, %s rejected", report.applied, report.rejected)
    return report
