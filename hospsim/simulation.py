"""Cycle-by-cycle simulation of a ward: discharges, admissions and arrivals."""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from hospsim.beds import DEFAULT_BEDS, Beds, NoFreeBedError
from hospsim.history import DischargeHistory
from hospsim.patient import PatientTable
from hospsim.queue import DEFAULT_CAPACITY, URGENT_PRIORITY, PriorityDeque

DEFAULT_CSV = "dados/pacientes.csv"
DEFAULT_LOG = "processamento.log"
START_BANNER = "===== INÍCIO DA SIMULAÇÃO ====="
END_BANNER = "===== FIM DA SIMULAÇÃO ====="
IDLE_MESSAGE = "! Nenhuma ação realizada neste ciclo."
QUEUE_FULL_MESSAGE = "! Deque está cheio. Paciente não pôde ser adicionado."

Logger = Callable[[str], None]


def make_logger(log_path: Union[str, Path, None] = DEFAULT_LOG, echo: bool = True) -> Logger:
    """Return a function that appends each message to a file and prints it.

    A log file that cannot be opened is silently skipped.
    """

    def log(message: str) -> None:
        if log_path is not None:
            try:
                with open(log_path, "a", encoding="utf-8") as handle:
                    handle.write(message + "\n")
            except OSError:
                pass
        if echo:
            print(message)

    return log


class Simulation:
    """State of the ward and the rules applied on each cycle."""

    def __init__(
        self,
        table: PatientTable,
        log: Logger,
        rng: Optional[random.Random] = None,
        beds: int = DEFAULT_BEDS,
        queue_capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        self.table = table
        self.log = log
        self.rng = rng if rng is not None else random.Random()
        self.beds = Beds(beds)
        self.queue = PriorityDeque(queue_capacity)
        self.history = DischargeHistory()
        self.cycle = 1

    def step(self) -> bool:
        """Run one cycle and report whether anything happened in it."""
        acted = False
        self.log(f"\n[CICLO {self.cycle:02d}]")
        self.cycle += 1

        for index in self.beds.occupied():
            if self.rng.randrange(3) == 0:
                patient = self.beds.release(index)
                self.history.push(patient)
                self.log(f"ALTA - {patient.id} ({patient.name})")
                acted = True

        if self.queue:
            patient = self.queue.pop()
            try:
                self.beds.admit(patient)
            except NoFreeBedError:
                self.log(
                    f"! Todos os leitos estão ocupados. {patient.id} ({patient.name}) "
                    "não pôde ser internado."
                )
                self.queue.push(patient)
            else:
                self.log(
                    f"INTERNADO - {patient.id} ({patient.name}, prioridade {patient.priority})"
                )
                acted = True

        if not self.queue.is_full():
            drawn = self.table.draw(self.rng)
            if drawn is not None:
                self.queue.push(drawn)
                end = "início" if drawn.priority >= URGENT_PRIORITY else "fim"
                self.log(
                    f"ESPERA - {drawn.id} ({drawn.name}, prioridade {drawn.priority}) "
                    f"-> inserido no {end} do deque"
                )
                acted = True
        else:
            self.log(QUEUE_FULL_MESSAGE)

        if not acted:
            self.log(IDLE_MESSAGE)
        return acted

    def finished(self) -> bool:
        """True once nobody is left to arrive, wait or occupy a bed."""
        return (
            not self.table.has_available()
            and not self.queue
            and self.beds.occupied_count() == 0
        )

    def run(self, delay: float = 2.0) -> int:
        """Run cycles until the ward is empty; return the number of cycles."""
        self.log(START_BANNER)
        cycles = 0
        while True:
            self.step()
            cycles += 1
            if self.finished():
                break
            if delay > 0:
                time.sleep(delay)
        self.log(END_BANNER)
        return cycles


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate a hospital ward.")
    parser.add_argument("csv", nargs="?", default=DEFAULT_CSV, help="patient registry file")
    parser.add_argument("--log", default=DEFAULT_LOG, help="log file to append to")
    parser.add_argument("--delay", type=float, default=2.0, help="seconds between cycles")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    table = PatientTable()
    try:
        table.load_csv(args.csv)
    except OSError as error:
        print(f"Erro ao abrir o arquivo de pacientes: {error}", file=sys.stderr)
        return 1

    simulation = Simulation(table, make_logger(args.log), random.Random(args.seed))
    simulation.run(args.delay)
    return 0


if __name__ == "__main__":
    sys.exit(main())