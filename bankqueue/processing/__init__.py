"""Mini README: Batch processing helpers built on the dispatcher.

``runner`` drains a dispatcher and records each outcome, while ``scenario``
loads JSON descriptions of accounts and pending transactions.
"""

from .runner import BatchReport, OutcomeStatus, TransactionOutcome, process_all
from .scenario import (
    AccountSpec,
    BuiltScenario,
    Scenario,
    TransactionSpec,
    demo_scenario,
    load_scenario,
)

__all__ = [
    "AccountSpec",
    "BatchReport",
    "BuiltScenario",
    "OutcomeStatus",
    "Scenario",
    "TransactionOutcome",
    "TransactionSpec",
    "demo_scenario",
    "load_scenario",
    "process_all",
]
