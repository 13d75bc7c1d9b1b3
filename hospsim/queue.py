"""Bounded waiting line where urgent patients enter at the front."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from hospsim.patient import Patient

DEFAULT_CAPACITY = 20
URGENT_PRIORITY = 4


class QueueFullError(Exception):
    """Raised when pushing onto a full queue."""


class QueueEmptyError(Exception):
    """Raised when popping from an empty queue."""


class PriorityDeque:
    """Deque of waiting patients.

    Patients with priority at least 4 join at the front, the rest at the back.
    Removal takes from whichever end holds the higher priority, preferring
    the front on ties.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._items: deque[Patient] = deque()

    def push(self, patient: Patient) -> None:
        if self.is_full():
            raise QueueFullError(f"queue holds {self.capacity} patients already")
        if patient.priority >= URGENT_PRIORITY:
            self._items.appendleft(patient)
        else:
            self._items.append(patient)

    def pop(self) -> Patient:
        if not self._items:
            raise QueueEmptyError("queue is empty")
        if self._items[0].priority >= self._items[-1].priority:
            return self._items.popleft()
        return self._items.pop()

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[Patient]:
        return iter(self._items)