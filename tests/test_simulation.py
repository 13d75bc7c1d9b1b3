import random

from hospsim.patient import Patient, PatientTable
from hospsim.simulation import (
    END_BANNER,
    IDLE_MESSAGE,
    QUEUE_FULL_MESSAGE,
    START_BANNER,
    Simulation,
    main,
    make_logger,
)


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value % stop


def make_table(count, priority_step=1):
    table = PatientTable()
    for n in range(count):
        table.add(Patient(id=f"P{n:03d}", name=f"N{n}", priority=n % 6))
    return table


def write_csv(path, count):
    lines = ["id;nome;idade;sexo;cpf;prioridade;atendido"]
    lines += [f"P{n:03d};Nome {n};{20 + n};F;c{n};{n % 6};0" for n in range(count)]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_make_logger_appends_to_file(tmp_path, capsys):
    path = tmp_path / "out.log"
    log = make_logger(path)
    log("one")
    log("two")
    assert path.read_text(encoding="utf-8") == "one\ntwo\n"
    assert capsys.readouterr().out == "one\ntwo\n"


def test_make_logger_without_echo(tmp_path, capsys):
    log = make_logger(tmp_path / "q.log", echo=False)
    log("quiet")
    assert capsys.readouterr().out == ""


def test_run_discharges_every_patient():
    messages = []
    table = make_table(12)
    sim = Simulation(table, messages.append, random.Random(7))
    cycles = sim.run(delay=0)
    assert sim.finished()
    assert len(sim.history) == 12
    assert messages[0] == START_BANNER
    assert messages[-1] == END_BANNER
    assert sum(m.startswith("ALTA - ") for m in messages) == 12
    assert sum(m.startswith("INTERNADO - ") for m in messages) == 12
    assert sum(m.startswith("\n[CICLO ") for m in messages) == cycles


def test_empty_table_runs_one_idle_cycle():
    messages = []
    sim = Simulation(PatientTable(), messages.append, random.Random(1))
    assert sim.finished()
    assert sim.run(delay=0) == 1
    assert messages == [START_BANNER, "\n[CICLO 01]", IDLE_MESSAGE, END_BANNER]


def test_full_beds_return_patient_to_queue():
    messages = []
    sim = Simulation(PatientTable(), messages.append, FixedRng(1), beds=1)
    sim.beds.admit(Patient(id="B1", name="Bed"))
    sim.queue.push(Patient(id="W1", name="Wait", priority=2))
    acted = sim.step()
    assert acted is False
    assert [p.id for p in sim.queue] == ["W1"]
    assert any(m.startswith("! Todos os leitos estão ocupados. W1 (Wait)") for m in messages)
    assert messages[-1] == IDLE_MESSAGE


def test_full_queue_is_reported():
    messages = []
    table = make_table(3)
    sim = Simulation(table, messages.append, FixedRng(1), beds=1, queue_capacity=1)
    sim.beds.admit(Patient(id="B1", name="Bed"))
    sim.queue.push(Patient(id="W1", name="Wait", priority=1))
    sim.step()
    assert QUEUE_FULL_MESSAGE in messages
    assert table.has_available()


def test_arrival_logs_queue_end():
    messages = []
    table = PatientTable()
    table.add(Patient(id="U1", name="Urgent", priority=5))
    sim = Simulation(table, messages.append, random.Random(0))
    while table.has_available():
        sim.step()
    assert (
        "ESPERA - U1 (Urgent, prioridade 5) -> inserido no início do deque" in messages
    )


def test_main_runs_to_completion(tmp_path, capsys):
    csv_path = tmp_path / "pacientes.csv"
    log_path = tmp_path / "run.log"
    write_csv(csv_path, 5)
    code = main([str(csv_path), "--log", str(log_path), "--delay", "0", "--seed", "3"])
    assert code == 0
    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == START_BANNER
    assert lines[-1] == END_BANNER
    assert sum(line.startswith("ALTA - ") for line in lines) == 5


def test_main_missing_file(tmp_path, capsys):
    code = main([str(tmp_path / "none.csv"), "--log", str(tmp_path / "x.log")])
    assert code == 1
    assert "Erro ao abrir" in capsys.readouterr().err