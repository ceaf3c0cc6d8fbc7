"""Reporting boundary of the evolutionary loop.

The loop never prints. It hands structured records to a reporter:

- ``GenerationRecord`` once per evaluated generation
- ``SuccessRecord`` when a replicator is verified
- ``ExhaustionRecord`` when the generation budget runs out
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable


@dataclass(frozen=True)
class GenerationRecord:
    generation_index: int
    best_fitness: int


@dataclass(frozen=True)
class SuccessRecord:
    genome: list[int]
    final_memory: list[int]
    step_count: int


@dataclass(frozen=True)
class ExhaustionRecord:
    generations: int


class BaseReporter:
    """No-op reporter; subclasses override the hooks they need."""

    def on_generation(self, record: GenerationRecord) -> None:
        pass

    def on_success(self, record: SuccessRecord) -> None:
        pass

    def on_exhaustion(self, record: ExhaustionRecord) -> None:
        pass

    def close(self) -> None:
        pass


class LoggingReporter(BaseReporter):
    """Writes records through the standard logging module."""

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def on_generation(self, record: GenerationRecord) -> None:
        logging.log(self.level, f"Generation {record.generation_index}: Best fitness = {record.best_fitness}")

    def on_success(self, record: SuccessRecord) -> None:
        logging.log(self.level, f"Self-replicator found: {record.genome}")
        logging.log(self.level, f"Execution result: {record.final_memory}")
        logging.log(self.level, f"Steps taken: {record.step_count}")

    def on_exhaustion(self, record: ExhaustionRecord) -> None:
        logging.log(self.level, f"No perfect self-replicator found within {record.generations} generations")


class RecordingReporter(BaseReporter):
    """Keeps every record in memory, in arrival order."""

    def __init__(self) -> None:
        self.records: list[Any] = []

    def on_generation(self, record: GenerationRecord) -> None:
        self.records.append(record)

    def on_success(self, record: SuccessRecord) -> None:
        self.records.append(record)

    def on_exhaustion(self, record: ExhaustionRecord) -> None:
        self.records.append(record)

    @property
    def generations(self) -> list[GenerationRecord]:
        return [r for r in self.records if isinstance(r, GenerationRecord)]

    @property
    def best_fitness_history(self) -> list[int]:
        return [r.best_fitness for r in self.generations]


@dataclass
class CsvReporter(BaseReporter):
    """Collects one row per generation and writes a CSV file on ``close``.

    The final row carries the outcome ("success" or "exhausted").
    """

    path: str | Path
    rows: list[dict[str, Any]] = field(default_factory=list)

    FIELDNAMES = ("generation", "best_fitness", "outcome", "genome_length", "step_count")

    def on_generation(self, record: GenerationRecord) -> None:
        row = {name: None for name in self.FIELDNAMES}
        row.update({"generation": record.generation_index, "best_fitness": record.best_fitness})
        self.rows.append(row)

    def on_success(self, record: SuccessRecord) -> None:
        if self.rows:
            self.rows[-1].update({
                "outcome": "success",
                "genome_length": len(record.genome),
                "step_count": record.step_count,
            })

    def on_exhaustion(self, record: ExhaustionRecord) -> None:
        if self.rows:
            self.rows[-1]["outcome"] = "exhausted"

    def close(self) -> None:
        with open(self.path, 'w', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=list(self.FIELDNAMES))
            writer.writeheader()
            writer.writerows(self.rows)


class CompositeReporter(BaseReporter):
    """Forwards every record to each child reporter in order."""

    def __init__(self, reporters: Iterable[BaseReporter]) -> None:
        self.reporters = list(reporters)

    def on_generation(self, record: GenerationRecord) -> None:
        for r in self.reporters:
            r.on_generation(record)

    def on_success(self, record: SuccessRecord) -> None:
        for r in self.reporters:
            r.on_success(record)

    def on_exhaustion(self, record: ExhaustionRecord) -> None:
        for r in self.reporters:
            r.on_exhaustion(record)

    def close(self) -> None:
        for r in self.reporters:
            r.close()


__all__ = [
    "BaseReporter",
    "CompositeReporter",
    "CsvReporter",
    "ExhaustionRecord",
    "GenerationRecord",
    "LoggingReporter",
    "RecordingReporter",
    "SuccessRecord",
]
