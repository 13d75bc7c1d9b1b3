"""Stack of discharged patients."""

from __future__ import annotations

from typing import Iterator

from hospsim.patient import Patient


class DischargeHistory:
    """Patients who left the hospital, most recent on top."""

    def __init__(self) -> None:
        self._stack: list[Patient] = []

    def push(self, patient: Patient) -> None:
        self._stack.append(patient)

    def top(self) -> Patient:
        """The most recently discharged patient."""
        if not self._stack:
            raise IndexError("history is empty")
        return self._stack[-1]

    def __len__(self) -> int:
        return len(self._stack)

    def __iter__(self) -> Iterator[Patient]:
        """Iterate from the most recent discharge to the oldest."""
        return reversed(self._stack)