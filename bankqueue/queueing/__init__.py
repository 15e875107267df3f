"""Mini README: Queueing subsystem package initialiser.

``heap`` holds the fixed-capacity max-heap and ``dispatcher`` composes three
of them into amount tiers served in high, medium, low order.
"""

from .dispatcher import (
    HIGH_TIER_THRESHOLD,
    LOAN_ADMISSION_MULTIPLIER,
    MEDIUM_TIER_THRESHOLD,
    AmountTier,
    TierDispatcher,
    tier_for_amount,
)
from .heap import TransactionHeap

__all__ = [
    "AmountTier",
    "HIGH_TIER_THRESHOLD",
    "LOAN_ADMISSION_MULTIPLIER",
    "MEDIUM_TIER_THRESHOLD",
    "TierDispatcher",
    "TransactionHeap",
    "tier_for_amount",
]
