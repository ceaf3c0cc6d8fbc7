import csv
import logging

from subleq_evo.reporting import (
    BaseReporter,
    CompositeReporter,
    CsvReporter,
    ExhaustionRecord,
    GenerationRecord,
    LoggingReporter,
    RecordingReporter,
    SuccessRecord,
)


def test_base_reporter_accepts_every_record():
    r = BaseReporter()
    r.on_generation(GenerationRecord(0, 1))
    r.on_success(SuccessRecord([0], [0, 0, 0, 0], 3))
    r.on_exhaustion(ExhaustionRecord(1))
    r.close()


def test_logging_reporter_emits_generation_and_outcome(caplog):
    caplog.set_level(logging.INFO)
    r = LoggingReporter()
    r.on_generation(GenerationRecord(4, 17))
    r.on_success(SuccessRecord([0, 0, 0], [0] * 8, 12))
    r.on_exhaustion(ExhaustionRecord(9))
    text = caplog.text
    assert "Generation 4: Best fitness = 17" in text
    assert "Self-replicator found: [0, 0, 0]" in text
    assert "Steps taken: 12" in text
    assert "within 9 generations" in text


def test_csv_reporter_writes_rows_and_outcome(tmp_path):
    path = tmp_path / "run.csv"
    r = CsvReporter(path)
    r.on_generation(GenerationRecord(0, 3))
    r.on_generation(GenerationRecord(1, 5))
    r.on_success(SuccessRecord([0] * 6, [0] * 64, 200))
    r.close()

    with open(path, newline='') as f:
        rows = list(csv.DictReader(f))
    assert [row["generation"] for row in rows] == ["0", "1"]
    assert rows[0]["outcome"] == ""
    assert rows[1]["outcome"] == "success"
    assert rows[1]["genome_length"] == "6"
    assert rows[1]["step_count"] == "200"


def test_csv_reporter_marks_exhaustion(tmp_path):
    path = tmp_path / "run.csv"
    r = CsvReporter(path)
    r.on_generation(GenerationRecord(0, 1))
    r.on_exhaustion(ExhaustionRecord(1))
    r.close()
    with open(path, newline='') as f:
        rows = list(csv.DictReader(f))
    assert rows[-1]["outcome"] == "exhausted"


def test_composite_reporter_fans_out_in_order():
    a, b = RecordingReporter(), RecordingReporter()
    composite = CompositeReporter([a, b])
    composite.on_generation(GenerationRecord(0, 2))
    composite.on_exhaustion(ExhaustionRecord(1))
    composite.close()
    assert a.records == b.records == [GenerationRecord(0, 2), ExhaustionRecord(1)]
    assert a.best_fitness_history == [2]
