"""Fixed set of hospital beds."""

from __future__ import annotations

from typing import Optional

from hospsim.patient import Patient

DEFAULT_BEDS = 10


class NoFreeBedError(Exception):
    """Raised when every bed is occupied."""


class Beds:
    """Numbered beds, each empty or holding one patient."""

    def __init__(self, count: int = DEFAULT_BEDS) -> None:
        self._slots: list[Optional[Patient]] = [None] * count

    def admit(self, patient: Patient) -> int:
        """Place a patient in the lowest-numbered free bed and return its index."""
        for index, occupant in enumerate(self._slots):
            if occupant is None:
                self._slots[index] = patient
                return index
        raise NoFreeBedError("all beds are occupied")

    def release(self, index: int) -> Patient:
        """Empty a bed and return the patient who was in it."""
        if not 0 <= index < len(self._slots):
            raise IndexError(f"no bed {index}")
        patient = self._slots[index]
        if patient is None:
            raise ValueError(f"bed {index} is not occupied")
        self._slots[index] = None
        return patient

    def occupied(self) -> list[int]:
        """Indices of the occupied beds, in order."""
        return [index for index, occupant in enumerate(self._slots) if occupant is not None]

    def occupied_count(self) -> int:
        return sum(occupant is not None for occupant in self._slots)

    def __getitem__(self, index: int) -> Optional[Patient]:
        return self._slots[index]

    def __len__(self) -> int:
        return len(self._slots)