"""Patient records and the hashed patient table they are drawn from."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Protocol, Union

TABLE_SIZE = 50
MAX_DRAW_ATTEMPTS = 200

_ID_LEN = 9
_NAME_LEN = 99
_CPF_LEN = 14

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass
class Patient:
    """A patient as read from the registry file."""

    id: str
    name: str
    age: int = 0
    sex: str = ""
    cpf: str = ""
    priority: int = 0
    attended: bool = False


def id_hash(patient_id: str) -> int:
    """Bucket index of an identifier: the sum of its bytes modulo the table size."""
    return sum(patient_id.encode("utf-8")) % TABLE_SIZE


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_patient_line(line: str) -> Patient:
    """Build a patient from one ';'-separated record line.

    Empty fields are skipped, as consecutive separators count as one.
    Text fields are cut to their fixed widths; numbers take their leading digits.
    """
    tokens = [token for token in line.rstrip("\r\n").split(";") if token]
    patient = Patient(id="", name="")
    for position, token in enumerate(tokens):
        if position == 0:
            patient.id = token[:_ID_LEN]
        elif position == 1:
            patient.name = token[:_NAME_LEN]
        elif position == 2:
            patient.age = _leading_int(token)
        elif position == 3:
            patient.sex = token[0]
        elif position == 4:
            patient.cpf = token[:_CPF_LEN]
        elif position == 5:
            patient.priority = _leading_int(token)
        elif position == 6:
            patient.attended = _leading_int(token) != 0
    return patient


class PatientTable:
    """Chained hash table of patients keyed by identifier."""

    def __init__(self) -> None:
        self._buckets: list[list[Patient]] = [[] for _ in range(TABLE_SIZE)]

    def add(self, patient: Patient) -> None:
        """Insert a patient at the head of its bucket."""
        self._buckets[id_hash(patient.id)].insert(0, patient)

    def load_csv(self, path: Union[str, Path]) -> None:
        """Load every record of a registry file, skipping its header line."""
        with open(path, encoding="utf-8") as handle:
            next(handle, None)
            for line in handle:
                if line.strip():
                    self.add(parse_patient_line(line))

    def draw(self, rng: _RandomSource) -> Optional[Patient]:
        """Pick a random bucket repeatedly and return its first unattended patient.

        The returned patient is marked attended. After the allowed number of
        attempts without a hit, None is returned.
        """
        for _ in range(MAX_DRAW_ATTEMPTS):
            bucket = self._buckets[rng.randrange(TABLE_SIZE)]
            for patient in bucket:
                if not patient.attended:
                    patient.attended = True
                    return patient
        return None

    def has_available(self) -> bool:
        """Whether any patient has not been attended yet."""
        return any(not patient.attended for patient in self)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[Patient]:
        for bucket in self._buckets:
            yield from bucket