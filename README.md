# hospsim

A small, cycle-based simulation of a hospital ward. Patients are loaded from
a semicolon-separated file into a hashed patient table. From there they are
drawn at random into a waiting deque. They are then admitted to a fixed
number of beds and are eventually discharged. Every event is appended to a
log file and printed to the terminal.

## How a cycle works

Each call to `Simulation.step()` does the following:

1. **Discharge.** Each occupied bed is released with a one-in-three chance.
   The discharged patient is pushed onto the discharge history, and an
   `ALTA - <id> (<name>)` line is logged.
2. **Admit.** If anyone is waiting, one patient is taken out of the deque:
   - The deque compares the priorities of the patients at its two ends.
   - The patient at the higher-priority end is taken. On a tie, the front
     is taken.
   - That patient gets the lowest-numbered free bed, and an `INTERNADO` line
     is logged.
   - If every bed is taken, the patient is put back into the deque and a
     notice is logged.
3. **Draw.** If the deque is not full, the patient table is asked for a
   patient who has not been drawn yet:
   - It picks up to 200 random buckets.
   - It takes the first undrawn patient it finds and marks that patient as
     drawn.
   - Patients with priority 4 or higher are queued at the front of the deque.
     The others are queued at the back.
   - An `ESPERA` line records which end was used.
   - When the deque is full, a notice is logged instead.

If nothing happened in a cycle, `! Nenhuma ação realizada neste ciclo.` is
logged. `step()` returns whether anything happened.

`Simulation.finished()` is true once three things hold: no patient in the
table is left undrawn, the deque is empty, and no bed is occupied.
`Simulation.run(delay)` does the following:

- It logs a start banner.
- It runs cycles until `finished()` is true, pausing `delay` seconds between
  cycles.
- It logs an end banner.
- It returns the number of cycles run.

Defaults: 10 beds, a deque holding at most 20 patients, and a 2 second pause
between cycles.

## Input file

The first line is a header and is skipped. Blank lines are ignored. The
fields are separated by `;` and are, in order:

```
id;nome;idade;sexo;cpf;prioridade;atendido
P001;Ana Example;34;F;CPF-A;5;0
P002;Bruno Example;61;M;CPF-B;2;0
```

- Empty fields are dropped, so consecutive separators count as one.
- The id is cut to 9 characters, the name to 99 and the cpf to 14.
- Only the first character of `sexo` is kept.
- The numeric fields take their leading digits, and 0 if there are none.
- `atendido` is `0` for a patient still to be drawn. Any other number marks
  the patient as already drawn, and that patient is never queued.

The file is read as UTF-8.

## Running it

```
pip install .
hospsim [csv] [--log FILE] [--delay SECONDS] [--seed N]
```

| Option      | Meaning                              | Default               |
|-------------|--------------------------------------|-----------------------|
| `csv`       | patient registry file                | `dados/pacientes.csv` |
| `--log`     | log file to append to                | `processamento.log`   |
| `--delay`   | seconds between cycles               | `2.0`                 |
| `--seed`    | seed for the random number generator | none                  |

If the registry file cannot be opened, an error is printed to standard error
and the command exits with status 1.

## Using it as a library

```python
import random

from hospsim.patient import PatientTable
from hospsim.simulation import Simulation, make_logger

table = PatientTable()
table.load_csv("dados/pacientes.csv")

sim = Simulation(
    table,
    log=make_logger("processamento.log", echo=True),
    rng=random.Random(42),
)

while not sim.finished():
    sim.step()
```

### `make_logger(log_path, echo)`

Returns a function that appends each message to `log_path` and, if `echo` is
set, prints it. Passing `log_path=None` disables the file, and a file that
cannot be opened is skipped silently. Any callable that takes a string can be
used as the log instead.

### Building blocks

The building blocks can also be used on their own:

- **`hospsim.patient`**
  - `Patient` is a dataclass.
  - `parse_patient_line(line)` builds a `Patient` from one record line.
  - `id_hash(patient_id)` is the sum of the identifier's UTF-8 bytes modulo 50.
  - `PatientTable` has `add`, `load_csv`, `draw(rng)`, `has_available()`,
    `len()` and iteration.
- **`hospsim.queue`**
  - `PriorityDeque(capacity)` has `push`, `pop`, `is_full()`, `len()`, truth
    testing and iteration from front to back.
  - `push` raises `QueueFullError` when the deque is full.
  - `pop` raises `QueueEmptyError` when the deque is empty.
- **`hospsim.beds`**
  - `Beds(count)` supports indexing and `len()`.
  - `admit(patient)` returns the bed index used, or raises `NoFreeBedError`.
  - `release(index)` returns the patient who was in the bed. It raises
    `IndexError` for an index out of range and `ValueError` for an empty bed.
  - `occupied()` lists the occupied bed indices.
  - `occupied_count()` counts them.
- **`hospsim.history`**
  - `DischargeHistory` has `push`, `top()` and `len()`.
  - `top()` raises `IndexError` when the history is empty.
  - Iteration runs from the most recent discharge to the oldest.

## What it does not do

The simulation keeps everything in memory. The discharge history and the
final state of the beds are not saved anywhere. Only the log lines are
written out.

## Tests

```
pip install .[test]
pytest
```