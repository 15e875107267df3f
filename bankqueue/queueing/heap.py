"""Mini README: Fixed-capacity max-heap of transaction records.

Structure:
    * TransactionHeap - array-backed binary max-heap ordered by
      ``Transaction.compare_to``.

The backing list is allocated once with exactly ``capacity`` slots; unused
slots hold ``None`` and occupied slots are always the dense prefix
``[0, size)``. The heap never grows: inserting into a full heap raises
``CapacityExceededError`` and leaves the contents untouched.

Because the comparison reads live account balances, the heap property is
only guaranteed with respect to the balances seen during the last sift.
Balance changes made while records wait in the heap are picked up by later
comparisons, not retroactively.
"""

from __future__ import annotations

from typing import List, Optional, cast

from ..exceptions import CapacityExceededError, EmptyHeapError, InvalidArgumentError
from ..logging_utils import get_logger
from ..transactions import Transaction

LOGGER = get_logger(__name__)


def _parent(index: int) -> int:
    return (index - 1) // 2


class TransactionHeap:
    """Priority queue of transactions with a fixed number of slots."""

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidArgumentError(f"Heap capacity must be a positive integer, got {capacity!r}")
        self._slots: List[Optional[Transaction]] = [None] * capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == len(self._slots)

    def insert(self, transaction: Transaction) -> None:
        """Add ``transaction`` and sift it up to its ranked position.

        Raises:
            CapacityExceededError: if every slot is already occupied.
        """

        if self.is_full():
            raise CapacityExceededError(f"Transaction heap is full ({self.capacity} slots)")
        index = self._size
        self._slots[index] = transaction
        self._size += 1
        self._heapify_up(index)
        LOGGER.debug("Inserted %s record, heap size now %s", transaction.priority.name, self._size)

    def extract_max(self) -> Transaction:
        """Remove and return the highest ranked transaction.

        Raises:
            EmptyHeapError: if the heap holds no records.
        """

        if self._size == 0:
            raise EmptyHeapError("Transaction heap is empty")
        result = self._slot(0)
        last = self._size - 1
        self._slots[0] = self._slots[last]
        self._slots[last] = None
        self._size = last
        if self._size > 0:
            self._heapify_down(0)
        return result

    def peek(self) -> Transaction:
        """Return the highest ranked transaction without removing it."""

        if self._size == 0:
            raise EmptyHeapError("Transaction heap is empty")
        return self._slot(0)

    def heap_data(self) -> List[Optional[Transaction]]:
        """Return a copy of every slot, including the trailing empty ones."""

        return list(self._slots)

    def _slot(self, index: int) -> Transaction:
        if not 0 <= index < self._size:
            raise IndexError(f"Heap slot {index} outside occupied range [0, {self._size})")
        return cast(Transaction, self._slots[index])

    def _swap(self, first: int, second: int) -> None:
        self._slots[first], self._slots[second] = self._slots[second], self._slots[first]

    def _heapify_up(self, index: int) -> None:
        while index > 0:
            parent = _parent(index)
            if not self._slot(index).outranks(self._slot(parent)):
                break
            self._swap(index, parent)
            index = parent

    def _heapify_down(self, index: int) -> None:
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < self._size and self._slot(child).outranks(self._slot(largest)):
                    largest = child
            if largest == index:
                return
            self._swap(index, largest)
            index = largest
